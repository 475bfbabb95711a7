"""Flow extensions - every combinator as a fluent op."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from pipestyle.combinators.do import (
    do,
    do_if,
    do_is_default,
    do_is_null,
    do_not_default,
    do_not_null,
    if_do,
)
from pipestyle.combinators.to import (
    if_to,
    to,
    to_if,
    to_is_default,
    to_is_null,
    to_not_default,
    to_not_null,
)
from pipestyle.combinators.using import to_using
from pipestyle.flow import Flow
from pipestyle.kernel.zero import is_default


def lift(combinator: Callable[..., Any]) -> Callable[..., Flow[Any]]:
    """Turn a subject-first combinator into a Flow op.

    Example:
        >>> Flow.register_op("tap_len", lift(lambda s, f: do(s, lambda v: f(len(v)))))
        >>> Flow("abc").tap_len(print).value
        3
        'abc'
    """
    def op(self: Flow[Any], *args: Any, **kwargs: Any) -> Flow[Any]:
        return self.with_value(combinator(self.value, *args, **kwargs))

    op.__name__ = getattr(combinator, "__name__", op.__name__)
    op.__doc__ = combinator.__doc__
    return op


_COMBINATORS: tuple[Callable[..., Any], ...] = (
    do,
    do_if,
    do_not_null,
    do_is_null,
    do_not_default,
    do_is_default,
    if_do,
    to,
    to_if,
    to_not_null,
    to_is_null,
    to_not_default,
    to_is_default,
    if_to,
    to_using,
    is_default,
)

for _combinator in _COMBINATORS:
    Flow.register_op(_combinator.__name__, lift(_combinator))
