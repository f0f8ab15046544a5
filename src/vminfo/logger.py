import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "vminfo"


def setup_logger(verbose: bool = False) -> logging.Logger:
    """
    Returns the package logger. A single RichHandler on stderr is attached on
    first use, so stdout stays clean for --stdout reports.
    """
    logger = logging.getLogger(LOGGER_NAME)

    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(
            console=Console(stderr=True),
            rich_tracebacks=True,
            show_path=False,
            show_time=False,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
        logger.propagate = False

    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    return logger


logger = setup_logger()
