"""Centralized error handler for ccdb commands."""

from collections.abc import Callable
from functools import wraps
from typing import Any

import click

from ccdb.database.exceptions import LoadError
from ccdb.utils.logging import logger

from .exit_codes import ExitCodes


class DatabaseLoadFailed(click.ClickException):
    """Click-level failure for a database that could not be loaded."""

    exit_code = ExitCodes.LOAD_FAILED


def handle_exceptions(func: Callable[..., Any]) -> Callable[..., Any]:
    """Decorator that turns load failures and crashes into clean CLI errors.

    LoadError is an expected outcome (bad or missing database) and is shown
    as its message alone. Anything else is unexpected: it is logged with its
    traceback before being reported.
    """

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        """Inner wrapper that implements the try-except logic."""
        try:
            return func(*args, **kwargs)
        except click.ClickException:
            raise
        except LoadError as e:
            logger.debug("Command '{cmd}' could not load database: {err}", cmd=func.__name__, err=e.message)
            raise DatabaseLoadFailed(e.message) from e
        except Exception as e:
            logger.opt(exception=True).error(
                "Command '{cmd}' failed: {err}",
                cmd=func.__name__,
                err=str(e),
            )
            raise click.ClickException(f"{type(e).__name__}: {e}") from e

    return wrapper
