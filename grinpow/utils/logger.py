import logging
import sys
from typing import Optional

from colorama import Fore, Style, init

init(autoreset=True)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class ColoredFormatter(logging.Formatter):
    """Formatter that colors console log lines by level."""

    COLORS = {
        logging.DEBUG: Fore.CYAN,
        logging.INFO: Fore.GREEN,
        logging.WARNING: Fore.YELLOW,
        logging.ERROR: Fore.RED,
        logging.CRITICAL: Fore.RED + Style.BRIGHT,
    }

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelno, Fore.WHITE)
        message = super().format(record)
        return f"{color}{message}{Style.RESET_ALL}"


def setup_logging(level: Optional[str] = None, stream=None) -> logging.Logger:
    """
    Attach a colored console handler to the ``grinpow`` logger.

    Args:
        level: Level name (e.g. "DEBUG"); defaults to the GRINPOW_LOG_LEVEL setting.
        stream: Output stream, stderr by default.

    Returns:
        The configured package logger. Calling again replaces the handler.
    """
    if level is None:
        from ..config import get_settings
        level = get_settings().log_level

    logger = logging.getLogger("grinpow")
    logger.setLevel(getattr(logging, str(level).upper(), logging.INFO))

    for handler in list(logger.handlers):
        if getattr(handler, "_grinpow_console", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(ColoredFormatter(LOG_FORMAT))
    handler._grinpow_console = True
    logger.addHandler(handler)
    return logger
