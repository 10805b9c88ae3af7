"""Error types raised by the mutation probe"""
from typing import Optional


class ProbeError(Exception):
    """Base class for all probe errors"""


class InvalidArgumentError(ProbeError, ValueError):
    """Raised when a probe entry point receives an unusable argument"""

    def __init__(self, argument: str, reason: str = "must not be None"):
        self.argument = argument
        self.reason = reason
        super().__init__(f"{argument} {reason}")


class ProbeExecutionError(ProbeError, RuntimeError):
    """Raised when an attempted operation fails outside the unsupported family.

    The underlying failure is chained as ``__cause__``.
    """

    def __init__(self, operation: str, capability: Optional[str] = None, detail: str = ""):
        self.operation = operation
        self.capability = capability
        self.detail = detail
        where = f"{capability}.{operation}" if capability else operation
        message = f"Probing {where} failed"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class OriginalMutatedError(ProbeExecutionError):
    """Raised when the caller's container changed while it was being probed"""

    def __init__(self, capability: str):
        super().__init__(
            "verify_original",
            capability,
            "original container changed during probing",
        )


class UnsupportedOperationError(TypeError):
    """Signal raised by containers and cursors for disabled operations"""


class CursorStateError(ProbeError, RuntimeError):
    """Raised by ListCursor when remove/set is called without a current element"""
