"""Logging setup for the command-line tool."""

import logging
import sys


def setup_logging(log_level: int = logging.WARNING) -> logging.Logger:
    """
    Configure the root logger to write to stderr.

    Args:
        log_level: The logging level (default: WARNING)

    Returns:
        The configured root logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Remove existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    return root_logger
