"""Zero/empty value detection.

A type's zero value is what a freshly zero-initialized instance looks like:
``0`` for numbers, ``""`` for text, an empty container, or a frozen record
whose fields are all zero. Mutable records and types without such a value
behave like references and their only zero is ``None``.
"""

from __future__ import annotations

import dataclasses
import logging
import types
import typing
from collections.abc import Callable
from decimal import Decimal
from fractions import Fraction
from typing import Any, TypeVar

from pydantic import BaseModel

logger = logging.getLogger(__name__)

T = TypeVar("T")

ZeroFactory = Callable[[], Any]

_BUILTIN_ZEROS: tuple[type, ...] = (
    bool,
    int,
    float,
    complex,
    Decimal,
    Fraction,
    str,
    bytes,
    bytearray,
    list,
    tuple,
    dict,
    set,
    frozenset,
)


class ZeroRegistry:
    """Registry mapping types to factories producing their zero value."""

    def __init__(self, factories: dict[type, ZeroFactory] | None = None) -> None:
        self._factories: dict[type, ZeroFactory] = dict(factories or {})

    def register(self, tp: type, factory: ZeroFactory) -> None:
        """Register the zero factory for a type.

        Args:
            tp: The type whose zero value is produced
            factory: Zero-argument callable returning a fresh zero instance

        Raises:
            TypeError: If tp is not a type or factory is not callable
        """
        if not isinstance(tp, type):
            raise TypeError(f"Expected a type, got {tp!r}")
        if not callable(factory):
            raise TypeError(f"Zero factory for {tp.__name__} must be callable")
        logger.debug("Registering zero factory for %s", tp.__name__)
        self._factories[tp] = factory

    def factory_for(self, tp: type) -> ZeroFactory | None:
        """Find the factory for tp, falling back to its base classes."""
        for base in tp.__mro__:
            factory = self._factories.get(base)
            if factory is not None:
                return factory
        return None

    def __contains__(self, tp: object) -> bool:
        return isinstance(tp, type) and self.factory_for(tp) is not None


def _seeded_registry() -> ZeroRegistry:
    return ZeroRegistry({tp: tp for tp in _BUILTIN_ZEROS})


_default_registry = _seeded_registry()


def default_registry() -> ZeroRegistry:
    """Return the process-wide registry used when none is passed."""
    return _default_registry


def register_zero(tp: type, factory: ZeroFactory) -> None:
    """Register a zero factory in the default registry."""
    _default_registry.register(tp, factory)


def zero_of(tp: Any, registry: ZeroRegistry | None = None) -> Any:
    """Materialize the zero value of a type.

    Resolution order: registered factory (including base classes), then a
    value record (frozen dataclass or frozen pydantic model) built from its
    field zeros. Anything else, including mutable records, ``None`` and
    unions admitting ``None``, is reference-like and yields ``None``.

    Args:
        tp: A type or a type annotation
        registry: Registry to consult, defaults to default_registry()

    Returns:
        A fresh zero instance, or None
    """
    used_registry = registry or _default_registry
    if tp is None or tp is type(None):
        return None

    origin = typing.get_origin(tp)
    if origin is typing.Union or origin is types.UnionType:
        # Optional[X] admits absence, which is its zero
        return None
    if origin is not None:
        # Parameterized generics like list[int] share their origin's zero
        tp = origin

    if not isinstance(tp, type):
        return None

    factory = used_registry.factory_for(tp)
    if factory is not None:
        return factory()

    if not is_value_record(tp):
        return None
    if dataclasses.is_dataclass(tp):
        return _zero_dataclass(tp, used_registry)
    return tp.model_construct(
        **{name: zero_of(info.annotation, used_registry) for name, info in tp.model_fields.items()}
    )


def is_value_record(tp: type) -> bool:
    """Whether tp is a record with value semantics.

    Only frozen dataclasses and frozen pydantic models qualify. Mutable
    records are identified by reference, like any other object.
    """
    if dataclasses.is_dataclass(tp):
        return tp.__dataclass_params__.frozen  # type: ignore[attr-defined]
    if issubclass(tp, BaseModel):
        return bool(tp.model_config.get("frozen"))
    return False


def _zero_dataclass(tp: type[T], registry: ZeroRegistry) -> T:
    try:
        hints = typing.get_type_hints(tp)
    except (NameError, TypeError):
        hints = {}
    values = {}
    deferred = []
    for f in dataclasses.fields(tp):  # type: ignore[arg-type]
        value = zero_of(hints.get(f.name, f.type), registry)
        if f.init:
            values[f.name] = value
        else:
            deferred.append((f.name, value))
    instance = tp(**values)
    for name, value in deferred:
        object.__setattr__(instance, name, value)
    return instance


def is_default(value: Any, registry: ZeroRegistry | None = None) -> bool:
    """Check whether a value equals the zero value of its own type.

    Value records are compared field by field in place. Values of other
    types without a registered zero are default only when None.

    Example:
        >>> is_default(0), is_default(5), is_default(None), is_default(object())
        (True, False, True, False)
    """
    return _is_default(value, registry or _default_registry, set())


def _is_default(value: Any, registry: ZeroRegistry, seen: set[int]) -> bool:
    if value is None:
        return True

    tp = type(value)
    factory = registry.factory_for(tp)
    if factory is not None:
        return _equals(value, factory())

    if not is_value_record(tp):
        return False
    if id(value) in seen:
        # A record reachable from itself holds a non-None reference
        return False
    seen.add(id(value))
    if dataclasses.is_dataclass(tp):
        names = [f.name for f in dataclasses.fields(value)]
    else:
        names = list(tp.model_fields)
    return all(_is_default(getattr(value, name), registry, seen) for name in names)


def _equals(value: Any, zero: Any) -> bool:
    outcome = value == zero
    # Element-wise comparisons (arrays, query builders) are not a verdict
    return outcome if isinstance(outcome, bool) else False
