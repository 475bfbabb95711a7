"""Combinators - Do-family, To-family and scoped-resource primitives."""

# Import flow_ext to register the combinators as Flow ops
from . import flow_ext  # noqa: F401
from .do import (
    do,
    do_if,
    do_is_default,
    do_is_null,
    do_not_default,
    do_not_null,
    if_do,
)
from .flow_ext import lift
from .to import (
    if_to,
    to,
    to_if,
    to_is_default,
    to_is_null,
    to_not_default,
    to_not_null,
)
from .using import to_using

__all__ = [
    # Do
    "do",
    "do_if",
    "do_not_null",
    "do_is_null",
    "do_not_default",
    "do_is_default",
    "if_do",
    # To
    "to",
    "to_if",
    "to_not_null",
    "to_is_null",
    "to_not_default",
    "to_is_default",
    "if_to",
    # Scoped resources
    "to_using",
    "lift",
]
