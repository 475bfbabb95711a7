from .combinators import (
    do,
    do_if,
    do_is_default,
    do_is_null,
    do_not_default,
    do_not_null,
    if_do,
    if_to,
    lift,
    to,
    to_if,
    to_is_default,
    to_is_null,
    to_not_default,
    to_not_null,
    to_using,
)
from .flow import Flow
from .kernel import (
    Else,
    ZeroRegistry,
    default_registry,
    is_default,
    register_zero,
    zero_of,
)

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
    "Else",
    # Scoped resources
    "to_using",
    # Zero values
    "is_default",
    "zero_of",
    "register_zero",
    "ZeroRegistry",
    "default_registry",
    # Fluent chaining
    "Flow",
    "lift",
]
