from fastapi import APIRouter, Depends, HTTPException

from src.api.deps import get_actor, get_capabilities, get_content_store, get_validator
from src.api.errors import to_http_error
from src.api.schemas import PublishingStatsResponse, ValidationResponse
from src.components.publishing import PublishingValidator, severity
from src.components.workflow import ContentStorePort
from src.domain.entities import Actor, ContentType, PublishingConfig
from src.domain.errors import StorageError
from src.domain.policy import RoleCapabilityModel

router = APIRouter()


def _require_view(actor: Actor, capabilities: RoleCapabilityModel) -> None:
    if not capabilities.can_view(actor.role):
        raise HTTPException(status_code=403, detail="Access denied")


@router.post("/validate", response_model=ValidationResponse)
def validate_config(
    config: PublishingConfig,
    actor: Actor = Depends(get_actor),
    capabilities: RoleCapabilityModel = Depends(get_capabilities),
    validator: PublishingValidator = Depends(get_validator),
) -> ValidationResponse:
    """Readiness check for the publishing form; nothing is saved."""
    _require_view(actor, capabilities)
    result = validator.validate(config)
    return ValidationResponse(
        is_publishable=result.is_publishable,
        severity=severity(result).value,
        errors=result.errors,
        warnings=result.warnings,
        seo_complete=result.seo_complete,
        geo_complete=result.geo_complete,
        faq_complete=result.faq_complete,
    )


@router.get("/stats", response_model=PublishingStatsResponse)
def get_stats(
    type: ContentType | None = None,
    actor: Actor = Depends(get_actor),
    capabilities: RoleCapabilityModel = Depends(get_capabilities),
    validator: PublishingValidator = Depends(get_validator),
    store: ContentStorePort = Depends(get_content_store),
) -> PublishingStatsResponse:
    _require_view(actor, capabilities)
    try:
        records = store.load_all(type)
    except StorageError as e:
        raise to_http_error(e) from e
    stats = validator.stats(records)
    return PublishingStatsResponse(
        total=stats.total,
        publishable=stats.publishable,
        publishable_percent=stats.publishable_percent,
        missing_seo=stats.missing_seo,
        missing_geo=stats.missing_geo,
        missing_faq=stats.missing_faq,
    )
