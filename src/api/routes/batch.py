from enum import Enum

from fastapi import APIRouter, Depends

from src.api.deps import get_actor, get_batch_coordinator
from src.api.schemas import BatchFailureModel, BatchRequest, BatchResponse
from src.components.batch import BatchOperationCoordinator
from src.domain.entities import Actor


class BatchVerb(str, Enum):
    publish = "publish"
    archive = "archive"


router = APIRouter()


@router.post("/{verb}", response_model=BatchResponse)
def run_batch(
    verb: BatchVerb,
    req: BatchRequest,
    actor: Actor = Depends(get_actor),
    coordinator: BatchOperationCoordinator = Depends(get_batch_coordinator),
) -> BatchResponse:
    """
    Apply one action to every id. Per-id failures are reported in the body;
    the request itself succeeds even when every id fails.
    """
    result = coordinator.run_batch(verb.value, req.ids, actor)
    return BatchResponse(
        success=result.success,
        failed=[BatchFailureModel(id=f.id, error=f.error) for f in result.failed],
    )
