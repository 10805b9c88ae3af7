"""Mutation-capability probe: which mutating operations does a container accept?"""
from dataclasses import dataclass, field
from typing import Any, FrozenSet, List, Optional

from config import Config
from logging_config import get_logger, log_error, log_probe_result
from .attempt import AttemptResult, Outcome, Snapshot, attempt, unsupported_errors
from .capabilities import CapabilityTag, classify
from .catalog import OperationDescriptor, SyntheticArguments, catalog_for
from .copying import has_copier, working_copy
from .errors import InvalidArgumentError, OriginalMutatedError, ProbeExecutionError

logger = get_logger(__name__)


@dataclass
class ProbeReport:
    """Result of probing one container"""
    capability: CapabilityTag
    target_type: str
    attempts: List[AttemptResult] = field(default_factory=list)

    @property
    def mutating_operations(self) -> FrozenSet[str]:
        """Names of the operations that mutated their working copy"""
        return frozenset(result.operation for result in self.attempts if result.is_success)

    @property
    def is_immutable(self) -> bool:
        return not self.mutating_operations

    def outcome_of(self, operation: str) -> Optional[Outcome]:
        """Get the outcome recorded for an operation name"""
        for result in self.attempts:
            if result.operation == operation:
                return result.outcome
        return None


class MutationProbe:
    """Detect which canonical mutating operations a container executes.

    Every attempt runs against its own fresh working copy, so the caller's
    container is never touched and earlier attempts cannot hide later ones.
    Cursors without a registered copier are probed in place; callers obtain
    them from a copy (see ``probe.cursor.cursor_for``).
    """

    def __init__(self, config: Optional[Config] = None):
        self.config = config or Config()
        self._unsupported = unsupported_errors(self.config.type_error_is_unsupported)

    def detect(self, target: Any) -> FrozenSet[str]:
        """Return the names of the operations ``target`` executes"""
        return self.probe(target).mutating_operations

    def probe(self, target: Any) -> ProbeReport:
        """Probe ``target`` and return the per-operation report"""
        if target is None:
            raise InvalidArgumentError("target")

        tag = classify(target)
        report = ProbeReport(capability=tag, target_type=type(target).__name__)
        bound = logger.bind(capability=tag.value, target_type=report.target_type)

        original = self._snapshot_original(tag, target)

        try:
            for descriptor in catalog_for(tag, self.config.disabled_operations):
                result = self._attempt(tag, target, descriptor)
                bound.debug("Operation attempted", operation=descriptor.name,
                            call=descriptor.description, outcome=result.outcome.value,
                            event_type="probe_attempt")
                result.raise_for_outcome(tag)
                report.attempts.append(result)

            if original is not None and not original.matches(Snapshot.take(tag, target)):
                raise OriginalMutatedError(tag.value)
        except ProbeExecutionError as e:
            log_error(bound, e, {"operation": e.operation, "capability": e.capability})
            raise

        log_probe_result(bound, report.mutating_operations, len(report.attempts))
        return report

    def _snapshot_original(self, tag: CapabilityTag, target: Any) -> Optional[Snapshot]:
        if not self.config.verify_original or tag.is_cursor:
            return None
        return Snapshot.take(tag, target)

    def _attempt(self, tag: CapabilityTag, target: Any,
                 descriptor: OperationDescriptor) -> AttemptResult:
        subject = self._fresh_subject(tag, target)
        arguments = SyntheticArguments.for_subject(tag, subject)

        if descriptor.requires_element and not arguments.has_element:
            return AttemptResult(operation=descriptor.name, outcome=Outcome.NOT_APPLICABLE)

        return attempt(descriptor, subject, arguments, tag, self._unsupported)

    def _fresh_subject(self, tag: CapabilityTag, target: Any) -> Any:
        """Build the working copy one attempt runs against"""
        if tag.is_cursor and not has_copier(type(target)):
            return target

        try:
            return working_copy(target)
        except Exception as e:
            raise ProbeExecutionError("copy", tag.value, f"{type(e).__name__}: {e}") from e


def detect(target: Any) -> FrozenSet[str]:
    """Detect mutating operations with a default-configured probe"""
    return MutationProbe().detect(target)
