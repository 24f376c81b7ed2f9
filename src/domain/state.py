from dataclasses import dataclass
from datetime import datetime
from typing import Any, Literal

from src.domain.entities import ContentRecord, ContentStatus, ReviewAction

WorkflowAction = Literal["submit_for_review", "approve", "reject", "archive", "restore"]


@dataclass(frozen=True)
class TransitionRule:
    """One guarded edge of the content lifecycle."""

    action: WorkflowAction
    from_statuses: frozenset[ContentStatus]
    to_status: ContentStatus
    capability: str
    audit_action: ReviewAction
    comment: str | None = None
    requires_validation: bool = False


TRANSITIONS: dict[WorkflowAction, TransitionRule] = {
    "submit_for_review": TransitionRule(
        action="submit_for_review",
        from_statuses=frozenset({"draft"}),
        to_status="in_review",
        capability="submit_for_review",
        audit_action="submitted_for_review",
    ),
    "approve": TransitionRule(
        action="approve",
        from_statuses=frozenset({"in_review"}),
        to_status="published",
        capability="approve_review",
        audit_action="approved",
        requires_validation=True,
    ),
    "reject": TransitionRule(
        action="reject",
        from_statuses=frozenset({"in_review"}),
        to_status="draft",
        capability="approve_review",
        audit_action="rejected",
        comment="Needs revision",
    ),
    "archive": TransitionRule(
        action="archive",
        from_statuses=frozenset({"draft", "published"}),
        to_status="archived",
        capability="archive",
        audit_action="archived",
    ),
    "restore": TransitionRule(
        action="restore",
        from_statuses=frozenset({"archived"}),
        to_status="draft",
        capability="archive",
        audit_action="edited",
        comment="Restored from archive",
    ),
}

# Audit label for the privileged direct status change, keyed by target status.
DIRECT_STATUS_ACTIONS: dict[ContentStatus, ReviewAction] = {
    "draft": "edited",
    "in_review": "submitted_for_review",
    "published": "published",
    "archived": "archived",
}


def can_transition(current: ContentStatus, action: WorkflowAction) -> bool:
    """
    Determine if an action is allowed from the current status.
    """
    rule = TRANSITIONS.get(action)
    if rule is None:
        return False
    return current in rule.from_statuses


def allowed_actions(current: ContentStatus) -> list[WorkflowAction]:
    return [action for action, rule in TRANSITIONS.items() if current in rule.from_statuses]


def transition(record: ContentRecord, new_status: ContentStatus, now: datetime) -> ContentRecord:
    """
    Return a NEW ContentRecord with the updated status and timestamps.
    Guards are the caller's concern; this only computes the next state.
    """
    updates: dict[str, Any] = {
        "status": new_status,
        "updated_at": now,
    }

    # published implies published_at not null
    if new_status == "published":
        updates["published_at"] = now

    return record.model_copy(update=updates)

# Capability the direct status change needs on top of "publish", keyed by
# target status; the same capability the table asks for to reach that status.
DIRECT_STATUS_CAPABILITIES: dict[ContentStatus, str] = {
    "draft": "edit",
    "in_review": "submit_for_review",
    "published": "approve_review",
    "archived": "archive",
}
