"""Error types raised by dateseq."""


class InvalidConfiguration(ValueError):
    """Raised when a sequence, policy, or combinator is built with invalid settings.

    Subclasses ValueError so callers validating user input with
    ``except ValueError`` keep working.
    """
