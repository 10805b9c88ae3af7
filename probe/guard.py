"""Caller-side guard: warn when an assertion subject could be mutated"""
import warnings
from typing import Any, FrozenSet, Optional

from .finder import MutationProbe


class MutableSubjectWarning(UserWarning):
    """Emitted when an assertion subject accepts mutating operations"""

    def __init__(self, subject_type: str, operations: FrozenSet[str]):
        self.subject_type = subject_type
        self.operations = operations
        super().__init__(
            f"assertion subject of type {subject_type} is mutable "
            f"({', '.join(sorted(operations))}); a comparator could change it while asserting"
        )


def check_subject(actual: Any, probe: Optional[MutationProbe] = None) -> FrozenSet[str]:
    """Probe an assertion subject and warn if it accepts mutating operations"""
    if actual is None:
        return frozenset()

    probe = probe or MutationProbe()
    operations = probe.detect(actual)
    if operations and probe.config.warn_on_mutable:
        warnings.warn(MutableSubjectWarning(type(actual).__name__, operations), stacklevel=2)
    return operations
