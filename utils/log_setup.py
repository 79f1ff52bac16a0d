"""
Logging configuration for the SymCrypt command line.

Everything logs under the ``SymCrypt`` logger; the CLI attaches a
rotating file handler and, in verbose mode, a stderr console handler.
"""

import logging
import logging.handlers
import os
import sys


def setup_logging(log_file: str, level: str = "INFO",
                  fmt: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                  max_bytes: int = 1024 * 1024, backup_count: int = 12,
                  verbose: bool = False) -> logging.Logger:
    logger = logging.getLogger("SymCrypt")
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(fmt, datefmt="%Y-%m-%d %H:%M:%S")

    file_error = None
    try:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_file, maxBytes=max_bytes, backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
    except OSError as exc:
        file_error = exc

    # without a log file, warnings and errors still reach stderr
    if verbose or file_error is not None:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(logging.DEBUG if verbose else logging.WARNING)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if file_error is not None:
        logger.warning("Cannot open log file %s (%s); logging to stderr.",
                       log_file, file_error)
    return logger
