"""Static catalogs of canonical mutating operations, keyed by capability"""
import itertools
import operator
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, Optional, Tuple

from .capabilities import CapabilityTag
from .cursor import ListCursor


@dataclass(frozen=True)
class SyntheticArguments:
    """Arguments handed to an operation for one attempt"""
    fresh: Tuple[object, object] = field(default_factory=lambda: (object(), object()))
    first: Any = None
    has_element: bool = False

    @classmethod
    def for_subject(cls, tag: CapabilityTag, subject: Any) -> "SyntheticArguments":
        """Build fresh arguments, picking the subject's first element or key"""
        if tag.is_cursor:
            return cls()
        for first in subject:
            return cls(first=first, has_element=True)
        return cls()


@dataclass(frozen=True)
class OperationDescriptor:
    """One canonical mutating operation"""
    name: str
    arity: int
    invoke: Callable[[Any, SyntheticArguments], Any]
    requires_element: bool = False
    description: str = ""


# Collection protocol (add/update/discard style methods)

def _collection_remove_all(subject, args):
    subject.difference_update([args.first])


def _collection_retain_all(subject, args):
    subject.intersection_update(())


COLLECTION_CATALOG: Tuple[OperationDescriptor, ...] = (
    OperationDescriptor("add", 1, lambda c, a: c.add(a.fresh[0]), description="add(element)"),
    OperationDescriptor("add_all", 1, lambda c, a: c.update(a.fresh), description="update(elements)"),
    OperationDescriptor("remove", 1, lambda c, a: c.remove(a.first), True, "remove(element)"),
    OperationDescriptor("remove_all", 1, _collection_remove_all, True, "difference_update(elements)"),
    OperationDescriptor("retain_all", 1, _collection_retain_all, True, "intersection_update(())"),
    OperationDescriptor("clear", 0, lambda c, a: c.clear(), True, "clear()"),
    OperationDescriptor("remove_if", 1, lambda c, a: c.discard(a.first), True, "discard(element)"),
)


# Set protocol (collections.abc.MutableSet operators)

SET_CATALOG: Tuple[OperationDescriptor, ...] = (
    OperationDescriptor("add", 1, lambda c, a: c.add(a.fresh[0]), description="add(element)"),
    OperationDescriptor("add_all", 1, lambda c, a: operator.ior(c, set(a.fresh)), description="|= elements"),
    OperationDescriptor("remove", 1, lambda c, a: c.remove(a.first), True, "remove(element)"),
    OperationDescriptor("remove_all", 1, lambda c, a: operator.isub(c, {a.first}), True, "-= elements"),
    OperationDescriptor("retain_all", 1, lambda c, a: operator.iand(c, set()), True, "&= set()"),
    OperationDescriptor("clear", 0, lambda c, a: c.clear(), True, "clear()"),
    OperationDescriptor("remove_if", 1, lambda c, a: c.discard(a.first), True, "discard(element)"),
    OperationDescriptor("pop", 0, lambda c, a: c.pop(), True, "pop()"),
)


# Sequence protocol (collections.abc.MutableSequence plus list.sort)

def _list_remove_all(subject, args):
    for index in reversed(range(len(subject))):
        if subject[index] is args.first:
            del subject[index]


def _list_retain_all(subject, args):
    # Nothing in the subject is one of the fresh elements
    for index in reversed(range(len(subject))):
        if not any(subject[index] is kept for kept in args.fresh):
            del subject[index]


def _list_sort(subject, args):
    # Descending original position; reorders without comparing elements
    position = itertools.count()
    subject.sort(key=lambda _: -next(position))


def _list_replace_all(subject, args):
    for index in range(len(subject)):
        subject[index] = object()


def _positioned_cursor(subject) -> ListCursor:
    cursor = ListCursor(subject)
    next(cursor)
    return cursor


LIST_CATALOG: Tuple[OperationDescriptor, ...] = (
    OperationDescriptor("add", 1, lambda c, a: c.append(a.fresh[0]), description="append(element)"),
    OperationDescriptor("add_all", 1, lambda c, a: c.extend(a.fresh), description="extend(elements)"),
    OperationDescriptor("insert", 2, lambda c, a: c.insert(0, a.fresh[0]), description="insert(0, element)"),
    OperationDescriptor("remove", 1, lambda c, a: c.remove(a.first), True, "remove(element)"),
    OperationDescriptor("remove_all", 1, _list_remove_all, True, "del every occurrence"),
    OperationDescriptor("retain_all", 1, _list_retain_all, True, "del everything not retained"),
    OperationDescriptor("clear", 0, lambda c, a: c.clear(), True, "clear()"),
    OperationDescriptor("remove_if", 1, lambda c, a: c.__delitem__(0), True, "del [0]"),
    OperationDescriptor("pop", 0, lambda c, a: c.pop(), True, "pop()"),
    OperationDescriptor("set", 2, lambda c, a: c.__setitem__(0, a.fresh[0]), True, "[0] = element"),
    OperationDescriptor("sort", 1, _list_sort, True, "sort(key=...)"),
    OperationDescriptor("reverse", 0, lambda c, a: c.reverse(), True, "reverse()"),
    OperationDescriptor("replace_all", 1, _list_replace_all, True, "[i] = element for every index"),
    OperationDescriptor("cursor_remove", 0, lambda c, a: _positioned_cursor(c).remove(), True,
                        "ListCursor.remove()"),
    OperationDescriptor("cursor_set", 1, lambda c, a: _positioned_cursor(c).set(a.fresh[0]), True,
                        "ListCursor.set(element)"),
    OperationDescriptor("cursor_add", 1, lambda c, a: _positioned_cursor(c).add(a.fresh[0]), True,
                        "ListCursor.add(element)"),
)


# Mapping protocol (collections.abc.MutableMapping)

def _map_replace_all(subject, args):
    for key in list(subject):
        subject[key] = object()


MAP_CATALOG: Tuple[OperationDescriptor, ...] = (
    OperationDescriptor("put", 2, lambda c, a: c.__setitem__(a.fresh[0], a.fresh[1]), description="[key] = value"),
    OperationDescriptor("put_all", 1, lambda c, a: c.update({a.fresh[0]: a.fresh[1]}), description="update(mapping)"),
    OperationDescriptor("put_if_absent", 2, lambda c, a: c.setdefault(a.fresh[0], a.fresh[1]),
                        description="setdefault(key, value)"),
    OperationDescriptor("remove", 1, lambda c, a: c.__delitem__(a.first), True, "del [key]"),
    OperationDescriptor("pop_item", 0, lambda c, a: c.popitem(), True, "popitem()"),
    OperationDescriptor("clear", 0, lambda c, a: c.clear(), True, "clear()"),
    OperationDescriptor("replace_all", 1, _map_replace_all, True, "[key] = value for every key"),
)


ITERATOR_CATALOG: Tuple[OperationDescriptor, ...] = (
    OperationDescriptor("remove", 0, lambda c, a: c.remove(), description="remove()"),
)

LIST_ITERATOR_CATALOG: Tuple[OperationDescriptor, ...] = (
    OperationDescriptor("remove", 0, lambda c, a: c.remove(), description="remove()"),
    OperationDescriptor("set", 1, lambda c, a: c.set(a.fresh[0]), description="set(element)"),
    OperationDescriptor("add", 1, lambda c, a: c.add(a.fresh[0]), description="add(element)"),
)


CATALOGS: Dict[CapabilityTag, Tuple[OperationDescriptor, ...]] = {
    CapabilityTag.COLLECTION: COLLECTION_CATALOG,
    CapabilityTag.SET: SET_CATALOG,
    CapabilityTag.LIST: LIST_CATALOG,
    CapabilityTag.MAP: MAP_CATALOG,
    CapabilityTag.ITERATOR: ITERATOR_CATALOG,
    CapabilityTag.LIST_ITERATOR: LIST_ITERATOR_CATALOG,
}


def catalog_for(tag: CapabilityTag,
                disabled: Optional[Iterable[str]] = None) -> Tuple[OperationDescriptor, ...]:
    """Get the ordered catalog for a capability, minus disabled operation names"""
    catalog = CATALOGS[tag]
    if not disabled:
        return catalog
    skipped = set(disabled)
    return tuple(descriptor for descriptor in catalog if descriptor.name not in skipped)


def operation_names(tag: CapabilityTag) -> Tuple[str, ...]:
    """Get the operation names of a capability's full catalog, in order"""
    return tuple(descriptor.name for descriptor in CATALOGS[tag])
