"""
Logging setup for CLI commands.
"""
import logging

from app.core.logging_config import LOGGER_NAME, setup_logging


def setup_cli_logging(command: str, verbose: bool = False) -> logging.Logger:
    """Configure application logging and return a logger for ``command``."""
    setup_logging("DEBUG" if verbose else None)
    return logging.getLogger(f"{LOGGER_NAME}.cli.{command}")
