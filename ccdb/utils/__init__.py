"""ccdb utilities package."""

from .exit_codes import ExitCodes
from .logging import configure_file_logging, logger

__all__ = [
    "ExitCodes",
    "configure_file_logging",
    "logger",
]
