"""Reusable key generators.

The named generators operate on strings (lines of text, file names) and
classify ``None`` explicitly rather than failing on it.
"""

import operator
import os
from typing import Any, Callable, Dict, Hashable, Optional, Tuple

from keygroup import InvalidArgumentError


def length(element: Optional[str]) -> int:
    """Number of characters in the element (-1 for None)."""
    return -1 if element is None else len(element)


def first(element: Optional[str]) -> Optional[str]:
    """First character of the element (None for None or empty strings)."""
    return element[0] if element else None


def last(element: Optional[str]) -> Optional[str]:
    """Last character of the element (None for None or empty strings)."""
    return element[-1] if element else None


def lower(element: Optional[str]) -> Optional[str]:
    """Case-insensitive form of the element."""
    return None if element is None else element.casefold()


def words(element: Optional[str]) -> int:
    """Number of whitespace separated words in the element (-1 for None)."""
    return -1 if element is None else len(element.split())


def extension(element: Optional[str]) -> Optional[str]:
    """Lower-cased file name suffix of the element, without the leading dot."""
    if element is None:
        return None
    _, suffix = os.path.splitext(element)
    return suffix[1:].lower()


def attribute_key(*names: str) -> Callable[[Any], Hashable]:
    """Creates a key generator from one or more (dotted) attribute names.

    A single name produces the attribute value itself; several names produce a
    tuple of values.
    """
    if not names:
        raise InvalidArgumentError("At least one attribute name is required")
    return operator.attrgetter(*names)


def item_key(*keys: Any) -> Callable[[Any], Hashable]:
    """Creates a key generator from one or more item keys or indexes."""
    if not keys:
        raise InvalidArgumentError("At least one item key is required")
    return operator.itemgetter(*keys)


def composite_key(*generators: Callable[[Any], Hashable]) -> Callable[[Any], Tuple]:
    """Creates a key generator combining the keys of several generators."""
    if not generators:
        raise InvalidArgumentError("At least one key generator is required")
    if not all(callable(generator) for generator in generators):
        raise InvalidArgumentError("Key generators must be callable")

    def key(element: Any) -> Tuple:
        return tuple(generator(element) for generator in generators)

    return key


KEY_GENERATORS: Dict[str, Callable[[Any], Hashable]] = {
    "length": length,
    "first": first,
    "last": last,
    "lower": lower,
    "words": words,
    "extension": extension,
}
