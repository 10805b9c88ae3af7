"""Mutation-capability probe for assertion subjects"""
from .capabilities import CapabilityTag, classify
from .cursor import ListCursor, cursor_for
from .errors import (
    CursorStateError,
    InvalidArgumentError,
    OriginalMutatedError,
    ProbeError,
    ProbeExecutionError,
    UnsupportedOperationError,
)
from .finder import MutationProbe, ProbeReport, detect
from .guard import MutableSubjectWarning, check_subject

__all__ = [
    'CapabilityTag',
    'classify',
    'ListCursor',
    'cursor_for',
    'CursorStateError',
    'InvalidArgumentError',
    'OriginalMutatedError',
    'ProbeError',
    'ProbeExecutionError',
    'UnsupportedOperationError',
    'MutationProbe',
    'ProbeReport',
    'detect',
    'MutableSubjectWarning',
    'check_subject',
]
