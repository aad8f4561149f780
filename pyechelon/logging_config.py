"""
Logging Configuration
Sets up the package logger for the command-line front end.

Library modules never configure logging themselves; they only obtain
loggers under the 'pyechelon' namespace.
"""
import logging
import sys
from typing import Optional


def setup_logging(level: int = logging.WARNING, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configures the logger for the 'pyechelon' namespace.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to save logs to a file.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger("pyechelon")
    logger.setLevel(level)

    # Avoid duplicate handlers when called more than once in a process
    if logger.hasHandlers():
        logger.handlers.clear()

    # stderr, so log lines never mix with the interactive session on stdout
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug("Logging initialized.")
    return logger
