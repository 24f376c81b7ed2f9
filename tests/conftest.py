from pathlib import Path

import pytest

from src.adapters.clock import FixedClock
from src.adapters.memory_store import InMemoryContentStore
from src.components.audit import AuditTrailRecorder
from src.components.publishing import PublishingValidator
from src.components.workflow import ContentStatusMachine
from src.domain.entities import Actor
from src.domain.policy import RoleCapabilityModel
from src.rules.loader import load_rules
from tests.helpers import T0


@pytest.fixture
def rules():
    """Project rules from the repository root (tests run from there)."""
    return load_rules(Path("rules.yaml").resolve())


@pytest.fixture
def admin() -> Actor:
    return Actor(name="alice", role="admin")


@pytest.fixture
def editor() -> Actor:
    return Actor(name="erin", role="editor")


@pytest.fixture
def viewer() -> Actor:
    return Actor(name="victor", role="viewer")


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(T0)


@pytest.fixture
def store() -> InMemoryContentStore:
    return InMemoryContentStore()


@pytest.fixture
def audit() -> AuditTrailRecorder:
    return AuditTrailRecorder()


@pytest.fixture
def machine(audit, clock, store) -> ContentStatusMachine:
    return ContentStatusMachine(
        audit=audit,
        capabilities=RoleCapabilityModel(),
        validator=PublishingValidator(),
        clock=clock,
        store=store,
    )
