"""Attempt/observe wrapper around a single catalog operation"""
from collections import Counter
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Tuple

from .capabilities import CapabilityTag
from .errors import ProbeExecutionError, UnsupportedOperationError


class Outcome(Enum):
    """Outcome of attempting one operation against a working copy"""
    SUCCEEDED = "succeeded"
    NO_EFFECT = "no_effect"
    NOT_APPLICABLE = "not_applicable"
    REJECTED_UNSUPPORTED = "rejected_unsupported"
    REJECTED_OTHER_ERROR = "rejected_other_error"


@dataclass
class AttemptResult:
    """Result of one attempted operation"""
    operation: str
    outcome: Outcome
    error: Optional[str] = None
    exception: Optional[BaseException] = None

    @property
    def is_success(self) -> bool:
        """Check if the operation mutated the working copy"""
        return self.outcome == Outcome.SUCCEEDED

    def raise_for_outcome(self, tag: CapabilityTag) -> None:
        """Escalate an unexpected failure to ProbeExecutionError"""
        if self.outcome == Outcome.REJECTED_OTHER_ERROR:
            raise ProbeExecutionError(self.operation, tag.value, self.error or "") from self.exception


BASE_UNSUPPORTED_ERRORS: Tuple[type, ...] = (
    UnsupportedOperationError,
    NotImplementedError,
    AttributeError,
)


def unsupported_errors(type_error_is_unsupported: bool = True) -> Tuple[type, ...]:
    """Exception types treated as the "operation is disabled" signal"""
    if type_error_is_unsupported:
        return BASE_UNSUPPORTED_ERRORS + (TypeError,)
    return BASE_UNSUPPORTED_ERRORS


def _take_matching(remaining: list, element: Any) -> bool:
    """Remove the entry matching ``element``, identical objects first"""
    for index, candidate in enumerate(remaining):
        if candidate is element:
            del remaining[index]
            return True
    for index, candidate in enumerate(remaining):
        if candidate == element:
            del remaining[index]
            return True
    return False


def _same_multiset(left: Tuple[Any, ...], right: Tuple[Any, ...]) -> bool:
    try:
        return Counter(left) == Counter(right)
    except TypeError:
        # Unhashable elements; errors raised by element __eq__ propagate
        remaining = list(right)
        for element in left:
            if not _take_matching(remaining, element):
                return False
        return not remaining


@dataclass(frozen=True)
class Snapshot:
    """Observable state of a container at one point in time.

    Elements are held by reference so identities stay valid between two
    snapshots. Containers that materialize fresh element objects on every
    iteration (dict item views, for example) fall back to equality. When the
    identities differ and element equality itself raises, the states are
    reported as different.
    """
    ordered: bool
    elements: Tuple[Any, ...]

    @classmethod
    def take(cls, tag: CapabilityTag, container: Any) -> "Snapshot":
        if tag == CapabilityTag.MAP:
            return cls(ordered=False, elements=tuple(container.items()))
        return cls(ordered=tag == CapabilityTag.LIST, elements=tuple(container))

    def matches(self, other: "Snapshot") -> bool:
        """Check if two snapshots describe the same observable state"""
        if len(self.elements) != len(other.elements):
            return False

        if self.ordered:
            if all(a is b for a, b in zip(self.elements, other.elements)):
                return True
            try:
                return list(self.elements) == list(other.elements)
            except Exception:
                # An element moved or was replaced
                return False

        if Counter(map(id, self.elements)) == Counter(map(id, other.elements)):
            return True
        try:
            return _same_multiset(self.elements, other.elements)
        except Exception:
            return False


def _rejected(descriptor, error: Exception, outcome: Outcome = Outcome.REJECTED_OTHER_ERROR) -> AttemptResult:
    return AttemptResult(
        operation=descriptor.name,
        outcome=outcome,
        error=f"{type(error).__name__}: {error}",
        exception=error if outcome == Outcome.REJECTED_OTHER_ERROR else None,
    )


def attempt(descriptor, subject: Any, arguments, tag: CapabilityTag,
            unsupported: Tuple[type, ...]) -> AttemptResult:
    """Invoke one operation and classify what happened.

    Collection shapes succeed only when the subject observably changed;
    cursor shapes succeed when the call returns normally. Failures while
    observing the subject are reported as unexpected errors.
    """
    observe = not tag.is_cursor

    try:
        before = Snapshot.take(tag, subject) if observe else None
    except Exception as e:
        return _rejected(descriptor, e)

    try:
        descriptor.invoke(subject, arguments)
    except unsupported as e:
        return _rejected(descriptor, e, Outcome.REJECTED_UNSUPPORTED)
    except Exception as e:
        return _rejected(descriptor, e)

    if observe:
        try:
            unchanged = before.matches(Snapshot.take(tag, subject))
        except Exception as e:
            return _rejected(descriptor, e)
        if unchanged:
            return AttemptResult(operation=descriptor.name, outcome=Outcome.NO_EFFECT)

    return AttemptResult(operation=descriptor.name, outcome=Outcome.SUCCEEDED)
