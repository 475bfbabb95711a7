"""Do-family: perform a side effect, keep the subject.

Every function here returns the exact object it received, whether or not
the gated action ran. Only the selected callable is invoked, at most once.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from pipestyle.kernel.fallback import Gate, holds
from pipestyle.kernel.zero import is_default

T = TypeVar("T")

Action = Callable[[T], Any]
Effect = Callable[[], Any]


def do(subject: T, action: Action[T]) -> T:
    """Perform an action on the subject.

    Args:
        subject: The value flowing through the chain
        action: Called once with the subject

    Returns:
        The subject passed in
    """
    action(subject)
    return subject


def do_if(
    subject: T,
    cond: Gate,
    on_true: Action[T],
    on_false: Action[T] | None = None,
) -> T:
    """Perform an action on the subject when the gate holds.

    Args:
        subject: The value flowing through the chain
        cond: Literal boolean, or predicate called with the subject
        on_true: Called with the subject when the gate holds
        on_false: Optional, called with the subject when it does not

    Returns:
        The subject passed in
    """
    if holds(subject, cond):
        on_true(subject)
    elif on_false is not None:
        on_false(subject)
    return subject


def do_not_null(subject: T | None, on_not_null: Action[T]) -> T | None:
    """Perform an action on the subject unless it is None."""
    if subject is not None:
        on_not_null(subject)
    return subject


def do_is_null(subject: T | None, on_null: Effect) -> T | None:
    """Call on_null() when the subject is None.

    There is nothing to pass, so on_null takes no argument.
    """
    if subject is None:
        on_null()
    return subject


def do_not_default(subject: T, on_not_default: Action[T]) -> T:
    """Perform an action on the subject unless it is its type's zero value.

    Unlike do_not_null, this skips 0, "" and empty records as well as None.
    """
    if not is_default(subject):
        on_not_default(subject)
    return subject


def do_is_default(subject: T, on_default: Effect) -> T:
    """Call on_default() when the subject is its type's zero value."""
    if is_default(subject):
        on_default()
    return subject


def if_do(flag: bool, on_true: Effect, on_else: Effect | None = None) -> bool:
    """Branch on a boolean subject.

    Args:
        flag: The boolean flowing through the chain
        on_true: Called when flag is true
        on_else: Optional, called when flag is false

    Returns:
        The flag passed in
    """
    if flag:
        on_true()
    elif on_else is not None:
        on_else()
    return flag
