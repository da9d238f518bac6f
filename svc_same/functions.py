"""Builtin functions as the query engine calls them.

The engine represents "unknown" as a missing value, so builtins return
``Optional[bool]`` instead of a TriState.
"""
from typing import Any, Callable, Dict, Optional, Sequence

from .exceptions import UnknownFunctionError
from .predicate import same_all


def same(*elements: Any) -> Optional[bool]:
    return same_all(elements).to_nullable()


BUILTIN_FUNCTIONS: Dict[str, Callable[..., Optional[bool]]] = {
    "same": same,
}


def get_function(name: str) -> Callable[..., Optional[bool]]:
    # function names are case-insensitive in the query language
    try:
        return BUILTIN_FUNCTIONS[name.lower()]
    except KeyError:
        raise UnknownFunctionError(name) from None


def call_function(name: str, arguments: Sequence[Any]) -> Optional[bool]:
    return get_function(name)(*arguments)
