"""Flow - fluent wrapper for chaining combinators on a subject."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")

FlowOp = Callable[..., "Flow[Any]"]

# Op registry - class-level storage for Flow capabilities
_ops_registry: dict[str, FlowOp] = {}


@dataclass(frozen=True)
class Flow(Generic[T]):
    """A subject value made fluent.

    Combinators are attached as ops via register_op() and called as methods;
    each op returns a new Flow. The subject itself is never copied, so a Do
    op hands back a Flow around the very same object.

    Example:
        >>> Flow(" jane ").to(str.strip).do_if(lambda s: s == "jane", print).value
        jane
        'jane'
    """

    value: T

    @staticmethod
    def of(value: U) -> Flow[U]:
        return Flow(value)

    @classmethod
    def register_op(cls, name: str, fn: FlowOp) -> None:
        """Register an op on the Flow class.

        The op must return a Flow so that chaining can continue; wrap a
        subject-first combinator with lift() to get one. Calling an op that
        returns anything else raises TypeError.

        Args:
            name: The method name the op is called by (e.g., "to_not_null")
            fn: Function taking the Flow first and returning a new Flow
        """
        if name in _ops_registry:
            logger.debug("Replacing Flow op %r", name)
        _ops_registry[name] = fn

    @classmethod
    def ops(cls) -> tuple[str, ...]:
        return tuple(sorted(_ops_registry))

    def __getattr__(self, name: str) -> Any:
        """Allow calling registered ops as methods."""
        if name in _ops_registry:
            fn = _ops_registry[name]
            return lambda *args, **kwargs: self._invoke(name, fn, args, kwargs)
        raise AttributeError(f"'{type(self).__name__}' object has no attribute '{name}'")

    def with_value(self, value: U) -> Flow[U]:
        return Flow(value)

    def _invoke(self, name: str, fn: FlowOp, args: tuple[Any, ...], kwargs: dict[str, Any]) -> Flow[Any]:
        result = fn(self, *args, **kwargs)
        if not isinstance(result, Flow):
            raise TypeError(
                f"Flow op '{name}' returned {type(result).__name__}, expected Flow; "
                "register subject-first combinators through lift()"
            )
        return result
