"""
Defines the core data types for dotpath.

This module provides the path type that every traversal works on, the
bound-function record produced by function resolution, and the debug
printer used by the preferences file helpers.
"""

from typing import Any, Callable, Optional, Tuple
import collections.abc
import os
import sys


def dbg(*parts):
    """Prints a diagnostic line to stderr when DOTPATH_DEBUG is set."""
    if os.environ.get("DOTPATH_DEBUG"):
        print("[DBG]", *parts, file=sys.stderr)


def is_mapping(node: Any) -> bool:
    """True when a graph node can be descended into for reads."""
    return isinstance(node, collections.abc.Mapping)


def is_mutable_mapping(node: Any) -> bool:
    """True when a graph node can hold written properties."""
    return isinstance(node, collections.abc.MutableMapping)


class PropertyPath:
    """An ordered sequence of property names parsed from a dotted string.

    The original text is kept alongside the tokens because reads try it as
    an exact key before falling back to the tokenized descent. Tokens are
    produced by a plain split on '.', so a malformed string such as 'a..b'
    yields an empty token that is looked up like any other key.
    """
    SEPARATOR = "."

    def __init__(self, text: str):
        if not text:
            raise ValueError("PropertyPath must have at least one segment.")
        self.text = text
        self.tokens: Tuple[str, ...] = tuple(text.split(self.SEPARATOR))

    def __getitem__(self, key):
        return self.tokens[key]

    def __len__(self) -> int:
        return len(self.tokens)

    def __iter__(self):
        return iter(self.tokens)

    @property
    def is_dotted(self) -> bool:
        return self.SEPARATOR in self.text

    @property
    def leaf(self) -> str:
        """The final token; for a function path this is the function's own key."""
        return self.tokens[-1]

    def context(self) -> Optional['PropertyPath']:
        """Returns the path of the owning object, or None for a single-token path."""
        if not self.is_dotted:
            return None
        return PropertyPath(self.text[:self.text.rindex(self.SEPARATOR)])

    def __repr__(self) -> str:
        return f"<PropertyPath {self.text!r}>"

    def __str__(self) -> str:
        return self.text

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, PropertyPath):
            return NotImplemented
        return self.text == other.text

    def __hash__(self) -> int:
        return hash(self.text)


class BoundFunction:
    """A callable captured together with the receiver it should run against.

    Invoking the record calls ``func(receiver, *args, **kwargs)``; the
    receiver plays the part of ``this``.
    """
    def __init__(self, func: Callable[..., Any], receiver: Any):
        self.func = func
        self.receiver = receiver

    def __call__(self, *args, **kwargs):
        return self.func(self.receiver, *args, **kwargs)

    @property
    def name(self) -> str:
        return getattr(self.func, "__name__", type(self.func).__name__)

    def __repr__(self) -> str:
        return f"<BoundFunction {self.name} receiver=#{id(self.receiver)}>"

    def __eq__(self, other):
        if not isinstance(other, BoundFunction):
            return NotImplemented
        return self.func == other.func and self.receiver is other.receiver

    def __hash__(self) -> int:
        return hash((self.func, id(self.receiver)))
