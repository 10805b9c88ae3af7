"""Capability classification for probed containers"""
from collections.abc import Collection, Iterator, Mapping, Sequence, Set
from enum import Enum
from typing import Any

from .errors import InvalidArgumentError


class CapabilityTag(Enum):
    """Structural shapes a container can be probed as"""
    COLLECTION = "collection"
    LIST = "list"
    SET = "set"
    MAP = "map"
    ITERATOR = "iterator"
    LIST_ITERATOR = "list_iterator"

    @property
    def is_cursor(self) -> bool:
        """Check if the shape is an iterator-style cursor"""
        return self in (CapabilityTag.ITERATOR, CapabilityTag.LIST_ITERATOR)


CURSOR_METHODS = ("remove", "set", "add")


def _has_methods(target: Any, names) -> bool:
    return all(callable(getattr(target, name, None)) for name in names)


def is_list_cursor(target: Any) -> bool:
    """Check for the list-iterator shape: an iterator with remove, set and add"""
    return isinstance(target, Iterator) and _has_methods(target, CURSOR_METHODS)


# Richest shape first; the first rule that matches assigns the tag.
_RULES = [
    (CapabilityTag.LIST_ITERATOR, is_list_cursor),
    (CapabilityTag.ITERATOR, lambda target: isinstance(target, Iterator)),
    (CapabilityTag.MAP, lambda target: isinstance(target, Mapping)),
    (CapabilityTag.SET, lambda target: isinstance(target, Set)),
    (CapabilityTag.LIST, lambda target: isinstance(target, Sequence)),
    (CapabilityTag.COLLECTION, lambda target: isinstance(target, Collection)),
]


def classify(target: Any) -> CapabilityTag:
    """Assign the most specific capability tag to a container"""
    if target is None:
        raise InvalidArgumentError("target")

    for tag, matches in _RULES:
        if matches(target):
            return tag

    raise InvalidArgumentError(
        "target",
        f"is not a collection, mapping or iterator (got {type(target).__name__})",
    )

