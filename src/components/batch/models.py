"""Batch component models - frozen dataclass rows and results."""

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Literal

from src.domain.entities import ContentStatus, ContentType

BatchAction = Literal["publish", "archive"]

# (current, total); advisory only.
ProgressCallback = Callable[[int, int], None]


@dataclass(frozen=True)
class SelectionRow:
    """One selectable row of the batch table."""

    type: ContentType
    id: str
    status: ContentStatus


@dataclass(frozen=True)
class BatchFailure:
    """A single id that could not be processed, with a readable reason."""

    id: str
    error: str


@dataclass(frozen=True)
class BatchOperationResult:
    """
    Aggregate outcome of a batch run.

    success and failed partition the input ids: no overlap, no omission.
    """

    success: list[str] = field(default_factory=list)
    failed: list[BatchFailure] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.success) + len(self.failed)

    @property
    def all_succeeded(self) -> bool:
        return not self.failed
