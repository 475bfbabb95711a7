"""Gate evaluation and false-branch fallbacks."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Literal, TypeVar

from pipestyle.kernel.zero import zero_of

T = TypeVar("T")

Gate = bool | Callable[[T], bool]


def holds(subject: T, cond: Gate) -> bool:
    """Evaluate a gate against a subject.

    A callable gate is a predicate and receives the subject; any other value
    is a literal gate evaluated by truthiness.
    """
    if callable(cond):
        return bool(cond(subject))
    return bool(cond)


@dataclass(frozen=True)
class Else:
    """
    What a To-family combinator produces when its gate is false.

    Kinds:
    - zero: The zero value of result_type (None when no type is known)
    - value: A literal value, returned as is
    - thunk: A zero-argument producer, called once
    - apply: A producer called once with the subject
    """

    kind: Literal["zero", "value", "thunk", "apply"]
    payload: Any = None

    @staticmethod
    def Zero(result_type: Any = None) -> Else:
        return Else(kind="zero", payload=result_type)

    @staticmethod
    def Value(value: Any) -> Else:
        return Else(kind="value", payload=value)

    @staticmethod
    def Thunk(fn: Callable[[], Any]) -> Else:
        if not callable(fn):
            raise TypeError(f"Else.Thunk expects a callable, got {type(fn).__name__}")
        return Else(kind="thunk", payload=fn)

    @staticmethod
    def Apply(fn: Callable[[Any], Any]) -> Else:
        if not callable(fn):
            raise TypeError(f"Else.Apply expects a callable, got {type(fn).__name__}")
        return Else(kind="apply", payload=fn)

    def resolve(self, subject: Any) -> Any:
        """Produce the fallback for the given subject."""
        if self.kind == "value":
            return self.payload
        if self.kind == "thunk":
            return self.payload()
        if self.kind == "apply":
            return self.payload(subject)
        return zero_of(self.payload)


def coerce_else(
    otherwise: Any,
    *,
    bare_callable: Literal["thunk", "apply"],
    result_type: Any = None,
) -> Else:
    """Normalize the otherwise argument of a To-family combinator.

    Args:
        otherwise: None, an Else, a callable or a literal value
        bare_callable: How a plain callable is treated, as a thunk or
            applied to the subject
        result_type: Output type whose zero is used when otherwise is None

    Returns:
        The matching Else
    """
    if otherwise is None:
        return Else.Zero(result_type)
    if isinstance(otherwise, Else):
        return otherwise
    if callable(otherwise):
        if bare_callable == "apply":
            return Else.Apply(otherwise)
        return Else.Thunk(otherwise)
    return Else.Value(otherwise)
