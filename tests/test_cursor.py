"""Tests for ListCursor and cursor_for"""
import pytest

from probe.cursor import ListCursor, cursor_for
from probe.errors import CursorStateError, InvalidArgumentError


class TestListCursor:
    """Test list-iterator semantics"""

    def setup_method(self):
        """Setup test fixtures"""
        self.items = ["a", "b", "c"]
        self.cursor = ListCursor(self.items)

    def test_iteration(self):
        """Test the cursor iterates the whole sequence"""
        assert list(self.cursor) == ["a", "b", "c"]
        assert self.cursor.has_next() is False

    def test_indexes(self):
        """Test next/previous indexes follow the cursor"""
        assert self.cursor.next_index() == 0
        assert self.cursor.previous_index() == -1

        next(self.cursor)
        assert self.cursor.next_index() == 1
        assert self.cursor.previous_index() == 0

    def test_previous(self):
        """Test stepping backwards"""
        next(self.cursor)
        next(self.cursor)

        assert self.cursor.previous() == "b"
        assert self.cursor.next_index() == 1

    def test_previous_at_start(self):
        """Test previous before the first element"""
        assert self.cursor.has_previous() is False
        with pytest.raises(StopIteration):
            self.cursor.previous()

    def test_remove_after_next(self):
        """Test remove deletes the element returned by next"""
        next(self.cursor)
        self.cursor.remove()

        assert self.items == ["b", "c"]
        assert next(self.cursor) == "b"

    def test_remove_after_previous(self):
        """Test remove deletes the element returned by previous"""
        next(self.cursor)
        next(self.cursor)
        self.cursor.previous()
        self.cursor.remove()

        assert self.items == ["a", "c"]
        assert self.cursor.next_index() == 1

    def test_set(self):
        """Test set replaces the current element"""
        next(self.cursor)
        self.cursor.set("A")

        assert self.items == ["A", "b", "c"]

    def test_add(self):
        """Test add inserts before the cursor"""
        next(self.cursor)
        self.cursor.add("x")

        assert self.items == ["a", "x", "b", "c"]
        assert next(self.cursor) == "b"

    def test_remove_without_current(self):
        """Test remove needs a preceding next"""
        with pytest.raises(CursorStateError):
            self.cursor.remove()

    def test_set_after_add(self):
        """Test set is illegal right after add"""
        next(self.cursor)
        self.cursor.add("x")

        with pytest.raises(CursorStateError):
            self.cursor.set("y")

    def test_double_remove(self):
        """Test remove cannot run twice for one element"""
        next(self.cursor)
        self.cursor.remove()

        with pytest.raises(CursorStateError):
            self.cursor.remove()

    def test_sequence_errors_propagate(self):
        """Test failures from an immutable sequence surface unchanged"""
        cursor = ListCursor(("a",))
        next(cursor)

        with pytest.raises(TypeError):
            cursor.set("b")
        with pytest.raises(AttributeError):
            cursor.add("b")

    def test_invalid_start(self):
        """Test the starting index must fall inside the sequence"""
        with pytest.raises(IndexError):
            ListCursor(["a"], 2)
        with pytest.raises(ValueError):
            ListCursor(None)

    def test_rebind(self):
        """Test rebind keeps position and current element"""
        next(self.cursor)
        other = ["x", "y", "z"]

        rebound = self.cursor.rebind(other)
        rebound.set("X")

        assert other == ["X", "y", "z"]
        assert self.items == ["a", "b", "c"]
        assert rebound.next_index() == 1


class TestCursorFor:
    """Test cursors obtained from working copies"""

    def test_positioned_on_first_element(self):
        """Test the cursor is ready for remove and set"""
        cursor = cursor_for(["a", "b"])

        assert cursor.next_index() == 1
        cursor.set("A")
        assert cursor.sequence == ["A", "b"]

    def test_original_untouched(self):
        """Test mutating through the cursor leaves the original alone"""
        original = ["a", "b"]
        cursor = cursor_for(original)

        cursor.remove()
        cursor.add("x")

        assert original == ["a", "b"]

    def test_empty_container(self):
        """Test an empty container gives an unpositioned cursor"""
        cursor = cursor_for([])

        assert cursor.next_index() == 0
        assert cursor.has_next() is False

    def test_none_rejected(self):
        """Test cursor_for(None) names the argument"""
        with pytest.raises(InvalidArgumentError, match="container"):
            cursor_for(None)
