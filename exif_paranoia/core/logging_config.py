"""Console and file logging for the application."""

import logging
import logging.handlers
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional, TextIO

APP_LOGGER_NAME = "exif_paranoia"

# Log levels for different components
LOGGING_CONFIG = {
    "exif_paranoia": logging.INFO,
    "exif_paranoia.core": logging.INFO,
    "exif_paranoia.features": logging.INFO,

    # Reduce noise from libraries
    "babel": logging.WARNING,
    "fluent": logging.WARNING,
}


class ColoredFormatter(logging.Formatter):
    """Colored log formatter for console output."""

    COLORS = {
        'DEBUG': '\033[36m',    # Cyan
        'INFO': '\033[32m',     # Green
        'WARNING': '\033[33m',  # Yellow
        'ERROR': '\033[31m',    # Red
        'CRITICAL': '\033[35m', # Magenta
    }
    RESET = '\033[0m'

    def format(self, record: logging.LogRecord) -> str:
        levelname = record.levelname
        if levelname in self.COLORS:
            record.levelname = f"{self.COLORS[levelname]}{levelname}{self.RESET}"

        result = super().format(record)

        # Reset levelname for other handlers
        record.levelname = levelname

        return result


def setup_logging(
    debug: bool = False,
    log_file: bool = False,
    stream: Optional[TextIO] = None,
    log_dir: Path = Path("logs"),
) -> logging.Logger:
    """Configure logging and return the application logger.

    The console handler writes to stderr so stdout stays free for the
    rendered page. The returned logger is handed to the components that log.
    """
    level = logging.DEBUG if debug else logging.INFO

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove existing handlers
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(stream or sys.stderr)
    console_handler.setLevel(level)
    console_formatter = ColoredFormatter(
        "%(asctime)s %(levelname)-8s %(name)s - %(message)s",
        datefmt="%H:%M:%S"
    )
    console_handler.setFormatter(console_formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        log_dir.mkdir(exist_ok=True)
        log_filename = log_dir / f"exif_paranoia_{datetime.now().strftime('%Y%m%d')}.log"
        file_handler = logging.handlers.RotatingFileHandler(
            log_filename,
            maxBytes=10*1024*1024,  # 10MB
            backupCount=5,
            encoding='utf-8'
        )
        file_handler.setLevel(logging.DEBUG)
        file_formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s (%(filename)s:%(lineno)d) - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )
        file_handler.setFormatter(file_formatter)
        root_logger.addHandler(file_handler)

    for logger_name, component_level in LOGGING_CONFIG.items():
        # Debug mode opens up our own components, never the libraries
        if debug and logger_name.startswith(APP_LOGGER_NAME):
            component_level = logging.DEBUG
        logging.getLogger(logger_name).setLevel(component_level)

    logger = get_logger(APP_LOGGER_NAME)
    logger.debug(
        "Logging configured (console=%s, file=%s)",
        'DEBUG' if debug else 'INFO',
        'ENABLED' if log_file else 'DISABLED',
    )
    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance with proper configuration."""
    return logging.getLogger(name)
