from __future__ import annotations

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler


def configure_logging(
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    *,
    verbose: bool = False,
) -> None:
    """Configure rich console logging on stderr, and optional file logging.

    ``verbose`` forces DEBUG, which also reports generator exhaustion.
    Dates printed by the CLI go to stdout and are not mixed with log lines.
    """
    if verbose:
        level = logging.DEBUG

    handlers: list[logging.Handler] = [
        RichHandler(console=Console(stderr=True), rich_tracebacks=True, show_path=False)
    ]

    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=handlers,
        force=True,
    )

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(level)
        formatter = logging.Formatter(
            fmt="%(asctime)s %(levelname)s %(name)s %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        file_handler.setFormatter(formatter)
        logging.getLogger().addHandler(file_handler)
