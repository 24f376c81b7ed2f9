import os
from functools import lru_cache
from pathlib import Path
from typing import Annotated

from fastapi import Depends, Header, HTTPException, status

from src.adapters.clock import SystemClock
from src.adapters.memory_store import InMemoryContentStore
from src.adapters.sqlite.audit_trail import SQLiteAuditTrailRepo
from src.components.audit import AuditTrailRecorder
from src.components.batch import BatchOperationCoordinator
from src.components.publishing import PublishingValidator
from src.components.workflow import ContentStatusMachine, ContentStorePort
from src.domain.entities import Actor
from src.domain.policy import RoleCapabilityModel
from src.rules.loader import load_rules
from src.rules.models import Rules


# --- Settings ---
class Settings:
    def __init__(self) -> None:
        self.base_dir = Path(os.getcwd())
        self.data_dir = Path(os.environ.get("CONSOLE_DATA_DIR", "./data"))
        self.rules_path = Path(
            os.environ.get("CONSOLE_RULES_PATH", str(self.base_dir / "rules.yaml"))
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()


# --- Rules ---
@lru_cache
def get_rules() -> Rules:
    return load_rules(get_settings().rules_path)


# --- Repos / collaborators ---
@lru_cache
def get_content_store() -> InMemoryContentStore:
    # The real store lives behind the storage collaborator; this process-local
    # store backs the console in development.
    return InMemoryContentStore()


@lru_cache
def get_audit_trail() -> AuditTrailRecorder:
    settings = get_settings()
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    db_path = settings.data_dir / get_rules().audit.db_filename
    return AuditTrailRecorder(repo=SQLiteAuditTrailRepo(str(db_path)))


# --- Services ---
def get_capabilities(rules: Rules = Depends(get_rules)) -> RoleCapabilityModel:
    return RoleCapabilityModel.from_rules(rules)


def get_validator(rules: Rules = Depends(get_rules)) -> PublishingValidator:
    return PublishingValidator.from_rules(rules)


def get_state_machine(
    capabilities: RoleCapabilityModel = Depends(get_capabilities),
    validator: PublishingValidator = Depends(get_validator),
    audit: AuditTrailRecorder = Depends(get_audit_trail),
    store: ContentStorePort = Depends(get_content_store),
) -> ContentStatusMachine:
    return ContentStatusMachine(
        audit=audit,
        capabilities=capabilities,
        validator=validator,
        clock=SystemClock(),
        store=store,
    )


def get_batch_coordinator(
    machine: ContentStatusMachine = Depends(get_state_machine),
    store: ContentStorePort = Depends(get_content_store),
    rules: Rules = Depends(get_rules),
) -> BatchOperationCoordinator:
    return BatchOperationCoordinator.from_rules(machine, store, rules)


# --- Identity ---
def get_actor(
    x_actor: Annotated[str | None, Header()] = None,
    x_actor_role: Annotated[str | None, Header()] = None,
) -> Actor:
    """
    The identity layer in front of the console resolves the user and role
    and forwards them in headers; no authentication happens here.
    """
    if not x_actor or not x_actor_role:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Actor identity and role are required",
        )
    return Actor(name=x_actor, role=x_actor_role)
