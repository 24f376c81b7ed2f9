"""
Workflow component - role-gated content status state machine.

State Machine:
- draft → in_review (submit_for_review)
- in_review → published (approve)
- in_review → draft (reject, "Needs revision")
- draft|published → archived (archive)
- archived → draft (restore)

Guards, checked in this order:
- G1: actor role holds the transition's capability (PermissionDenied)
- G2: transition allowed from the current status (InvalidTransition)
- G3: publishing readiness when the target is published (NotPublishable)

A failed guard leaves the record and the audit trail untouched. A successful
transition is persisted (when a store is attached) before its ReviewRecord is
appended, so a failed storage write never produces an audit entry.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any

from src.adapters.clock import SystemClock
from src.components.audit.ports import AuditTrailPort
from src.components.publishing import PublishingValidator, generate_slug
from src.domain.entities import (
    Actor,
    ContentRecord,
    ContentStatus,
    ReviewAction,
    ReviewRecord,
)
from src.domain.errors import InvalidTransition, NotPublishable, WorkflowError
from src.domain.policy import RoleCapabilityModel
from src.domain.state import (
    DIRECT_STATUS_ACTIONS,
    DIRECT_STATUS_CAPABILITIES,
    TRANSITIONS,
    WorkflowAction,
    allowed_actions,
    can_transition,
    transition,
)

from .ports import ClockPort, ContentStorePort

logger = logging.getLogger(__name__)

# Fields an edit may never touch; they change only through transitions.
PROTECTED_FIELDS = frozenset({"id", "status", "published_at", "created_at", "updated_at"})


def _fill_slug(record: ContentRecord) -> ContentRecord:
    """Derive the slug from the title when publishing metadata has none."""
    if record.publishing is None or record.publishing.slug.strip():
        return record
    publishing = record.publishing.model_copy(update={"slug": generate_slug(record.title)})
    return record.model_copy(update={"publishing": publishing})


class ContentStatusMachine:
    """States, transitions and guards for a single content record's lifecycle."""

    def __init__(
        self,
        audit: AuditTrailPort,
        capabilities: RoleCapabilityModel | None = None,
        validator: PublishingValidator | None = None,
        clock: ClockPort | None = None,
        store: ContentStorePort | None = None,
    ) -> None:
        self._audit = audit
        self._capabilities = capabilities or RoleCapabilityModel()
        self._validator = validator or PublishingValidator()
        self._clock = clock or SystemClock()
        self._store = store

    @property
    def capabilities(self) -> RoleCapabilityModel:
        return self._capabilities

    # --- Transition API ---

    def submit_for_review(self, record: ContentRecord, actor: Actor) -> ContentRecord:
        return self.apply(record, "submit_for_review", actor)

    def approve(self, record: ContentRecord, actor: Actor) -> ContentRecord:
        return self.apply(record, "approve", actor)

    def reject(self, record: ContentRecord, actor: Actor) -> ContentRecord:
        return self.apply(record, "reject", actor)

    def archive(self, record: ContentRecord, actor: Actor) -> ContentRecord:
        return self.apply(record, "archive", actor)

    def restore(self, record: ContentRecord, actor: Actor) -> ContentRecord:
        return self.apply(record, "restore", actor)

    def check(self, record: ContentRecord, action: WorkflowAction, actor: Actor) -> None:
        """
        Run every guard for an action without changing anything.
        Raises the same errors apply() would.
        """
        rule = TRANSITIONS.get(action)
        if rule is None:
            raise InvalidTransition(action, record.status, "unknown action")

        self._capabilities.require(actor.role, rule.capability, action)

        if not can_transition(record.status, action):
            raise InvalidTransition(
                action,
                record.status,
                f"allowed: {allowed_actions(record.status)}",
            )

        if rule.requires_validation:
            self._ensure_publishable(record)

    def apply(self, record: ContentRecord, action: WorkflowAction, actor: Actor) -> ContentRecord:
        """Perform a table transition and return the updated copy."""
        try:
            self.check(record, action, actor)
        except WorkflowError as e:
            logger.warning("Blocked %s on %s by %s: %s", action, record.id, actor.name, e)
            raise

        rule = TRANSITIONS[action]
        now = self._clock.now_utc()
        updated = transition(record, rule.to_status, now)
        return self._commit(record.status, updated, rule.audit_action, actor, rule.comment, now)

    def set_status(
        self, record: ContentRecord, target: ContentStatus, actor: Actor
    ) -> ContentRecord:
        """
        Privileged direct status change that skips the review step.
        Publishing this way still runs the readiness guard.
        """
        self._capabilities.require(actor.role, "publish", "set status")
        self._capabilities.require(
            actor.role, DIRECT_STATUS_CAPABILITIES[target], f"set status to {target}"
        )

        if target == record.status:
            raise InvalidTransition("set status", record.status, f"already '{target}'")

        if target == "published":
            self._ensure_publishable(record)

        now = self._clock.now_utc()
        updated = transition(record, target, now)
        return self._commit(
            record.status,
            updated,
            DIRECT_STATUS_ACTIONS[target],
            actor,
            "Status set directly",
            now,
        )

    # --- Edit / create / delete ---

    def create(self, record: ContentRecord, actor: Actor) -> ContentRecord:
        """First save of a new record; it always starts as a draft."""
        self._capabilities.require(actor.role, "edit", "create")

        now = self._clock.now_utc()
        updates: dict[str, Any] = {
            "status": "draft",
            "published_at": None,
            "created_at": now,
            "updated_at": now,
        }
        created = _fill_slug(record.model_copy(update=updates))
        return self._commit(None, created, "created", actor, None, now)

    def edit(self, record: ContentRecord, changes: dict[str, Any], actor: Actor) -> ContentRecord:
        """Apply field changes; status and timestamps are left to transitions."""
        self._capabilities.require(actor.role, "edit", "edit")

        unknown = set(changes) - set(ContentRecord.model_fields)
        if unknown:
            raise InvalidTransition("edit", record.status, f"unknown fields {sorted(unknown)}")

        protected = PROTECTED_FIELDS.intersection(changes)
        if protected:
            raise InvalidTransition(
                "edit",
                record.status,
                f"fields {sorted(protected)} change only through workflow actions",
            )

        now = self._clock.now_utc()
        data = record.model_dump()
        data.update(changes)
        data["updated_at"] = now
        edited = _fill_slug(ContentRecord.model_validate(data))
        return self._commit(record.status, edited, "edited", actor, None, now)

    def delete(self, record: ContentRecord, actor: Actor) -> None:
        """Remove a record from storage. Its history is kept."""
        self._capabilities.require(actor.role, "delete", "delete")

        if self._store is not None:
            self._store.delete_record(record.id)
        logger.info("Deleted %s (%s) by %s", record.id, record.status, actor.name)

    # --- Queries ---

    def available_actions(self, record: ContentRecord, role: str) -> list[WorkflowAction]:
        """Actions the role may attempt from the record's current status."""
        return [
            action
            for action in allowed_actions(record.status)
            if self._capabilities.has(role, TRANSITIONS[action].capability)
        ]

    def history(self, content_id: str) -> list[ReviewRecord]:
        return self._audit.history(content_id)

    # --- Internals ---

    def _ensure_publishable(self, record: ContentRecord) -> None:
        result = self._validator.validate(record.publishing)
        if not result.is_publishable:
            raise NotPublishable(record.id, result.errors)

    def _commit(
        self,
        from_status: ContentStatus | None,
        updated: ContentRecord,
        action: ReviewAction,
        actor: Actor,
        comment: str | None,
        now: datetime,
    ) -> ContentRecord:
        # StorageError propagates: the transition did not happen.
        if self._store is not None:
            self._store.save_record(updated)

        self._audit.append(
            updated.id,
            ReviewRecord(
                action=action,
                from_status=from_status,
                to_status=updated.status,
                actor=actor.name,
                comment=comment,
                timestamp=now,
            ),
        )
        logger.info(
            "%s %s: %s -> %s by %s",
            action,
            updated.id,
            from_status,
            updated.status,
            actor.name,
        )
        return updated
