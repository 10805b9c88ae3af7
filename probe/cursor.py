"""Bidirectional list cursor used to probe cursor-style mutation"""
from typing import Any, Optional

from .copying import register_copier, working_copy
from .errors import CursorStateError, InvalidArgumentError


class ListCursor:
    """Cursor over a mutable sequence with in-place remove, set and add.

    The cursor sits between elements. ``next``/``previous`` return the element
    they step over and make it current; ``remove`` and ``set`` act on the
    current element, ``add`` inserts before the cursor. After ``remove`` or
    ``add`` there is no current element until the cursor moves again.
    Failures raised by the sequence itself (for example a ``TypeError`` from a
    tuple) propagate unchanged.
    """

    def __init__(self, sequence, index: int = 0):
        if sequence is None:
            raise ValueError("sequence must not be None")
        if not 0 <= index <= len(sequence):
            raise IndexError(f"cursor index {index} out of range")
        self.sequence = sequence
        self._cursor = index
        self._last: Optional[int] = None

    def __iter__(self) -> "ListCursor":
        return self

    def __next__(self) -> Any:
        if not self.has_next():
            raise StopIteration
        element = self.sequence[self._cursor]
        self._last = self._cursor
        self._cursor += 1
        return element

    def has_next(self) -> bool:
        return self._cursor < len(self.sequence)

    def has_previous(self) -> bool:
        return self._cursor > 0

    def previous(self) -> Any:
        """Step back over the previous element and make it current"""
        if not self.has_previous():
            raise StopIteration
        self._cursor -= 1
        self._last = self._cursor
        return self.sequence[self._cursor]

    def next_index(self) -> int:
        return self._cursor

    def previous_index(self) -> int:
        return self._cursor - 1

    def remove(self) -> None:
        """Remove the current element from the sequence"""
        last = self._require_current("remove")
        del self.sequence[last]
        if last < self._cursor:
            self._cursor -= 1
        self._last = None

    def set(self, element: Any) -> None:
        """Replace the current element"""
        self.sequence[self._require_current("set")] = element

    def add(self, element: Any) -> None:
        """Insert an element immediately before the cursor"""
        self.sequence.insert(self._cursor, element)
        self._cursor += 1
        self._last = None

    def rebind(self, sequence) -> "ListCursor":
        """Create an equivalently positioned cursor over another sequence"""
        cursor = ListCursor(sequence, self._cursor)
        cursor._last = self._last
        return cursor

    def _require_current(self, operation: str) -> int:
        if self._last is None:
            raise CursorStateError(f"{operation}() requires a preceding next() or previous()")
        return self._last

    def __repr__(self) -> str:
        return f"ListCursor(index={self._cursor}, size={len(self.sequence)})"


def cursor_for(container) -> ListCursor:
    """Return a cursor over a working copy of ``container``.

    The cursor is positioned on the first element when there is one, so
    ``remove`` and ``set`` are immediately legal. The caller's container is
    never reachable through it.
    """
    if container is None:
        raise InvalidArgumentError("container")
    cursor = ListCursor(working_copy(container))
    if cursor.has_next():
        next(cursor)
    return cursor


register_copier(ListCursor, lambda cursor: cursor.rebind(working_copy(cursor.sequence)))
