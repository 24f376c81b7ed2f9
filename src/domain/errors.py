"""
Workflow error taxonomy.

None of these are fatal to the calling session: the record is left untouched
and the error is surfaced to the caller with enough detail to render an
actionable message.
"""

from __future__ import annotations


class WorkflowError(Exception):
    """Base class for errors raised by workflow transitions."""


class PermissionDenied(WorkflowError):
    """Raised when the actor's role lacks the capability for a transition."""

    def __init__(self, role: str, capability: str, action: str | None = None) -> None:
        self.role = role
        self.capability = capability
        self.action = action
        target = f" to {action}" if action else ""
        super().__init__(f"Role '{role}' lacks capability '{capability}'{target}")


class NotPublishable(WorkflowError):
    """Raised when a transition to published meets blocking validation errors."""

    def __init__(self, content_id: str, errors: list[str]) -> None:
        self.content_id = content_id
        self.errors = list(errors)
        super().__init__(f"Content {content_id} is not publishable: {'; '.join(self.errors)}")


class InvalidTransition(WorkflowError):
    """Raised when an action is not allowed from the record's current status."""

    def __init__(self, action: str, from_status: str, reason: str = "") -> None:
        self.action = action
        self.from_status = from_status
        self.reason = reason
        msg = f"Cannot {action} from '{from_status}'"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)


class StorageError(Exception):
    """Raised by the storage collaborator when a read or write fails."""


class RecordNotFound(StorageError):
    """Raised by the storage collaborator for an unknown content id."""

    def __init__(self, content_id: str) -> None:
        self.content_id = content_id
        super().__init__(f"Content {content_id} not found")
