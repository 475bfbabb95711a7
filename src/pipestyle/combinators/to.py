"""To-family: transform the subject into a new value.

Every function here returns whatever the selected transform or fallback
produced. The false branch is described by a single ``otherwise`` argument,
normalized through coerce_else:

- omitted: the zero value of ``result_type`` (None when no type is given)
- ``Else.Zero/Value/Thunk/Apply``: used as is
- a bare callable: applied to the subject in to_if, called with no
  argument everywhere else (there is no useful subject to pass)
- anything else: returned as a literal
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from pipestyle.kernel.fallback import Gate, coerce_else, holds
from pipestyle.kernel.zero import is_default

T = TypeVar("T")
U = TypeVar("U")

Transform = Callable[[T], U]


def to(subject: T, transform: Transform[T, U]) -> U:
    """Apply a transform to the subject.

    Args:
        subject: The value flowing through the chain
        transform: Called once with the subject

    Returns:
        The result of the transform
    """
    return transform(subject)


def to_if(
    subject: T,
    cond: Gate,
    on_true: Transform[T, U],
    otherwise: Any = None,
    *,
    result_type: type[U] | None = None,
) -> U:
    """Transform the subject when the gate holds.

    Args:
        subject: The value flowing through the chain
        cond: Literal boolean, or predicate called with the subject
        on_true: Called with the subject when the gate holds
        otherwise: False branch; a bare callable receives the subject
        result_type: Output type whose zero is returned when otherwise is omitted

    Returns:
        The result of on_true, or the resolved fallback

    Example:
        >>> to_if(4, lambda n: n > 3, str)
        '4'
        >>> to_if(2, lambda n: n > 3, str, result_type=str)
        ''
        >>> to_if(2, lambda n: n > 3, str, lambda n: f"small {n}")
        'small 2'
    """
    if holds(subject, cond):
        return on_true(subject)
    return coerce_else(otherwise, bare_callable="apply", result_type=result_type).resolve(subject)


def to_not_null(
    subject: T | None,
    on_not_null: Transform[T, U],
    otherwise: Any = None,
    *,
    result_type: type[U] | None = None,
) -> U:
    """Transform the subject unless it is None.

    Args:
        subject: The value flowing through the chain, possibly None
        on_not_null: Called with the subject when it is not None
        otherwise: False branch; a bare callable is called with no argument
        result_type: Output type whose zero is returned when otherwise is omitted

    Returns:
        The result of on_not_null, or the resolved fallback
    """
    if subject is not None:
        return on_not_null(subject)
    return coerce_else(otherwise, bare_callable="thunk", result_type=result_type).resolve(subject)


def to_is_null(subject: T | None, on_null: Callable[[], T]) -> T:
    """Return the subject, or on_null() when it is None."""
    if subject is not None:
        return subject
    return on_null()


def to_not_default(
    subject: T,
    on_not_default: Transform[T, U],
    otherwise: Any = None,
    *,
    result_type: type[U] | None = None,
) -> U:
    """Transform the subject unless it is its type's zero value.

    Args:
        subject: The value flowing through the chain
        on_not_default: Called with the subject when it is not default
        otherwise: False branch; a bare callable is called with no argument
        result_type: Output type whose zero is returned when otherwise is omitted

    Returns:
        The result of on_not_default, or the resolved fallback
    """
    if not is_default(subject):
        return on_not_default(subject)
    return coerce_else(otherwise, bare_callable="thunk", result_type=result_type).resolve(subject)


def to_is_default(subject: T, on_default: Callable[[], T]) -> T:
    """Return the subject, or on_default() when it is its type's zero value."""
    if is_default(subject):
        return on_default()
    return subject


def if_to(
    flag: bool,
    on_true: Callable[[], U],
    otherwise: Any = None,
    *,
    result_type: type[U] | None = None,
) -> U:
    """Produce a value from a boolean subject.

    Args:
        flag: The boolean flowing through the chain
        on_true: Called with no argument when flag is true
        otherwise: False branch; a bare callable is called with no argument
        result_type: Output type whose zero is returned when otherwise is omitted

    Returns:
        The result of on_true, or the resolved fallback
    """
    if flag:
        return on_true()
    return coerce_else(otherwise, bare_callable="thunk", result_type=result_type).resolve(flag)
