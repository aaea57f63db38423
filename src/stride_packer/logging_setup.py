"""Centralized logging setup for the command-line entry point."""

import logging
import sys


def setup_logging(level: int = logging.WARNING) -> logging.Logger:
    """Setup logging for the stride_packer package."""
    logger = logging.getLogger("stride_packer")
    logger.setLevel(level)

    # Console handler
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    console_handler.setFormatter(formatter)

    # Add handler if not already added
    if not logger.handlers:
        logger.addHandler(console_handler)
    else:
        for handler in logger.handlers:
            handler.setLevel(level)

    return logger
