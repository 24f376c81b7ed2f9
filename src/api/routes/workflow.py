from enum import Enum

from fastapi import APIRouter, Depends, HTTPException, Response, status

from src.api.deps import get_actor, get_content_store, get_state_machine
from src.api.errors import to_http_error
from src.api.schemas import (
    ContentCreateRequest,
    ContentRecordResponse,
    ContentUpdateRequest,
    ReviewRecordResponse,
    StatusChangeRequest,
)
from src.components.workflow import ContentStatusMachine, ContentStorePort
from src.domain.entities import Actor, ContentRecord
from src.domain.errors import StorageError, WorkflowError
from src.domain.state import WorkflowAction


class WorkflowVerb(str, Enum):
    submit = "submit"
    approve = "approve"
    reject = "reject"
    archive = "archive"
    restore = "restore"


VERB_ACTIONS: dict[WorkflowVerb, WorkflowAction] = {
    WorkflowVerb.submit: "submit_for_review",
    WorkflowVerb.approve: "approve",
    WorkflowVerb.reject: "reject",
    WorkflowVerb.archive: "archive",
    WorkflowVerb.restore: "restore",
}

router = APIRouter()


def _to_response(
    record: ContentRecord, machine: ContentStatusMachine, actor: Actor
) -> ContentRecordResponse:
    return ContentRecordResponse(
        **record.model_dump(),
        available_actions=machine.available_actions(record, actor.role),
    )


def _load(store: ContentStorePort, content_id: str) -> ContentRecord:
    try:
        return store.load_record(content_id)
    except StorageError as e:
        raise to_http_error(e) from e


@router.post("", response_model=ContentRecordResponse, status_code=status.HTTP_201_CREATED)
def create_content(
    req: ContentCreateRequest,
    actor: Actor = Depends(get_actor),
    machine: ContentStatusMachine = Depends(get_state_machine),
) -> ContentRecordResponse:
    """Create a new draft record."""
    record = ContentRecord(
        type=req.type,
        title=req.title,
        author=req.author or actor.name,
        publishing=req.publishing,
    )
    try:
        created = machine.create(record, actor)
    except (WorkflowError, StorageError) as e:
        raise to_http_error(e) from e
    return _to_response(created, machine, actor)


@router.get("/{content_id}", response_model=ContentRecordResponse)
def get_content(
    content_id: str,
    actor: Actor = Depends(get_actor),
    machine: ContentStatusMachine = Depends(get_state_machine),
    store: ContentStorePort = Depends(get_content_store),
) -> ContentRecordResponse:
    if not machine.capabilities.can_view(actor.role):
        raise HTTPException(status_code=403, detail="Access denied")
    return _to_response(_load(store, content_id), machine, actor)


@router.patch("/{content_id}", response_model=ContentRecordResponse)
def update_content(
    content_id: str,
    req: ContentUpdateRequest,
    actor: Actor = Depends(get_actor),
    machine: ContentStatusMachine = Depends(get_state_machine),
    store: ContentStorePort = Depends(get_content_store),
) -> ContentRecordResponse:
    """Edit record fields. Status and timestamps change only through actions."""
    record = _load(store, content_id)
    try:
        edited = machine.edit(record, req.changes, actor)
    except (WorkflowError, StorageError) as e:
        raise to_http_error(e) from e
    except ValueError as e:
        # Pydantic rejected the edited record.
        raise HTTPException(status_code=400, detail=str(e)) from e
    return _to_response(edited, machine, actor)


@router.delete("/{content_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_content(
    content_id: str,
    actor: Actor = Depends(get_actor),
    machine: ContentStatusMachine = Depends(get_state_machine),
    store: ContentStorePort = Depends(get_content_store),
) -> Response:
    record = _load(store, content_id)
    try:
        machine.delete(record, actor)
    except (WorkflowError, StorageError) as e:
        raise to_http_error(e) from e
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{content_id}/history", response_model=list[ReviewRecordResponse])
def get_history(
    content_id: str,
    actor: Actor = Depends(get_actor),
    machine: ContentStatusMachine = Depends(get_state_machine),
) -> list[ReviewRecordResponse]:
    """Review history, newest first. Available after the record is deleted."""
    if not machine.capabilities.can_view(actor.role):
        raise HTTPException(status_code=403, detail="Access denied")
    return [ReviewRecordResponse(**r.model_dump()) for r in machine.history(content_id)]


@router.post("/{content_id}/status", response_model=ContentRecordResponse)
def set_status(
    content_id: str,
    req: StatusChangeRequest,
    actor: Actor = Depends(get_actor),
    machine: ContentStatusMachine = Depends(get_state_machine),
    store: ContentStorePort = Depends(get_content_store),
) -> ContentRecordResponse:
    """Direct status change for roles allowed to publish."""
    record = _load(store, content_id)
    try:
        updated = machine.set_status(record, req.status, actor)
    except (WorkflowError, StorageError) as e:
        raise to_http_error(e) from e
    return _to_response(updated, machine, actor)


@router.post("/{content_id}/{verb}", response_model=ContentRecordResponse)
def run_action(
    content_id: str,
    verb: WorkflowVerb,
    actor: Actor = Depends(get_actor),
    machine: ContentStatusMachine = Depends(get_state_machine),
    store: ContentStorePort = Depends(get_content_store),
) -> ContentRecordResponse:
    record = _load(store, content_id)
    try:
        updated = machine.apply(record, VERB_ACTIONS[verb], actor)
    except (WorkflowError, StorageError) as e:
        raise to_http_error(e) from e
    return _to_response(updated, machine, actor)
