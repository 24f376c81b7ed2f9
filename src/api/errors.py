from fastapi import HTTPException, status

from src.domain.errors import (
    InvalidTransition,
    NotPublishable,
    PermissionDenied,
    RecordNotFound,
    StorageError,
)


def to_http_error(e: Exception) -> HTTPException:
    """Map a workflow or storage error onto the HTTP error returned to the console."""
    if isinstance(e, PermissionDenied):
        return HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e))
    if isinstance(e, NotPublishable):
        return HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={"message": "Content is not publishable", "errors": e.errors},
        )
    if isinstance(e, InvalidTransition):
        return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    if isinstance(e, RecordNotFound):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    if isinstance(e, StorageError):
        return HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(e))
    raise e
