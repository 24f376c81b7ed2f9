"""
Batch component - apply one workflow action to many content records.

Each id is processed independently: a failure on one id never aborts or
rolls back another. Every input id ends up in exactly one of success or
failed. Ids may run on a bounded worker pool; repeated ids are processed
one after another so operations on the same record never interleave, and
the result is assembled in input order so it does not depend on completion
order.

The coordinator does not clear the selection or refresh rows; callers do
that once run_batch returns.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor

from src.components.workflow import ContentStatusMachine, ContentStorePort
from src.domain.entities import Actor
from src.domain.errors import StorageError, WorkflowError
from src.rules.models import Rules

from .models import BatchAction, BatchFailure, BatchOperationResult, ProgressCallback

logger = logging.getLogger(__name__)

BATCH_ACTIONS: tuple[BatchAction, ...] = ("publish", "archive")


class BatchOperationCoordinator:
    """
    Drives the state machine per record over a list of ids.

    The machine should be built with the same store so each transition is
    persisted before the id is marked as a success.
    """

    def __init__(
        self,
        machine: ContentStatusMachine,
        store: ContentStorePort,
        max_workers: int = 1,
    ) -> None:
        if max_workers < 1:
            raise ValueError("max_workers must be at least 1")
        self._machine = machine
        self._store = store
        self._max_workers = max_workers

    @classmethod
    def from_rules(
        cls, machine: ContentStatusMachine, store: ContentStorePort, rules: Rules
    ) -> BatchOperationCoordinator:
        return cls(machine, store, max_workers=rules.batch.max_workers)

    def run_batch(
        self,
        action: BatchAction,
        ids: Sequence[str],
        actor: Actor,
        on_progress: ProgressCallback | None = None,
    ) -> BatchOperationResult:
        if action not in BATCH_ACTIONS:
            raise ValueError(f"Unknown batch action: {action}")

        ids = list(ids)
        total = len(ids)
        outcomes: list[str | None] = [None] * total

        # Positions of each id, in input order.
        groups: dict[str, list[int]] = {}
        for pos, content_id in enumerate(ids):
            groups.setdefault(content_id, []).append(pos)

        done = 0
        lock = threading.Lock()

        def run_group(content_id: str, positions: list[int]) -> None:
            nonlocal done
            for pos in positions:
                outcomes[pos] = self._process(action, content_id, actor)
                with lock:
                    done += 1
                    current = done
                if on_progress is not None:
                    on_progress(current, total)

        if self._max_workers == 1 or len(groups) <= 1:
            for content_id, positions in groups.items():
                run_group(content_id, positions)
        else:
            workers = min(self._max_workers, len(groups))
            with ThreadPoolExecutor(max_workers=workers) as pool:
                futures = [
                    pool.submit(run_group, content_id, positions)
                    for content_id, positions in groups.items()
                ]
                for future in futures:
                    future.result()

        success: list[str] = []
        failed: list[BatchFailure] = []
        for content_id, error in zip(ids, outcomes):
            if error is None:
                success.append(content_id)
            else:
                failed.append(BatchFailure(id=content_id, error=error))

        logger.info(
            "Batch %s by %s: %d succeeded, %d failed",
            action,
            actor.name,
            len(success),
            len(failed),
        )
        return BatchOperationResult(success=success, failed=failed)

    def _process(self, action: BatchAction, content_id: str, actor: Actor) -> str | None:
        """Run one id; return None on success or the error message."""
        try:
            record = self._store.load_record(content_id)

            if action == "publish":
                if record.status == "draft":
                    # Check both steps up front so an unpublishable draft is
                    # not left sitting in review.
                    self._machine.check(record, "submit_for_review", actor)
                    self._machine.check(
                        record.model_copy(update={"status": "in_review"}), "approve", actor
                    )
                    record = self._machine.submit_for_review(record, actor)
                self._machine.approve(record, actor)
            else:
                self._machine.archive(record, actor)
        except (WorkflowError, StorageError) as e:
            logger.warning("Batch %s failed for %s: %s", action, content_id, e)
            return str(e) or e.__class__.__name__
        return None
