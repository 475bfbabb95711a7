"""Scoped-resource combinator."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, TypeVar

logger = logging.getLogger(__name__)

R = TypeVar("R")
U = TypeVar("U")

Release = Callable[[BaseException | None], None]


def _is_context_manager(resource: Any) -> bool:
    return hasattr(resource, "__enter__") and hasattr(resource, "__exit__")


def _acquire(resource: Any) -> Release:
    """Enter the resource's scope and return the matching release.

    The release never decides whether a failure propagates: the return value
    of __exit__ is ignored.
    """
    name = type(resource).__name__
    if _is_context_manager(resource):
        resource.__enter__()

        def exit_scope(exc: BaseException | None) -> None:
            logger.debug("Releasing %s", name)
            if exc is None:
                resource.__exit__(None, None, None)
            else:
                resource.__exit__(type(exc), exc, exc.__traceback__)

        return exit_scope

    close = getattr(resource, "close", None)
    if not callable(close):
        raise TypeError(f"{name} is neither a context manager nor has a close() method")

    def close_scope(_: BaseException | None) -> None:
        logger.debug("Releasing %s", name)
        close()

    return close_scope


def to_using(resource: R, work: Callable[[R], U]) -> U:
    """Run work inside the resource's scope and release it on every exit path.

    Context managers are entered and exited; other objects must expose
    close(). work always receives the resource itself, never the value
    returned by __enter__.

    If work raises, the resource is released first and the same exception
    then propagates, even when __exit__ returns a truthy value. A failure
    during release propagates as its own exception, chained to the one
    raised by work, if any.

    Args:
        resource: Context manager, or object with a close() method
        work: Called once with the resource

    Returns:
        The result of work

    Raises:
        TypeError: If the resource can be neither exited nor closed
    """
    release = _acquire(resource)
    try:
        result = work(resource)
    except BaseException as exc:
        release(exc)
        raise
    release(None)
    return result
