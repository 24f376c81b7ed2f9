from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from src.domain.entities import ContentStatus, ContentType, PublishingConfig, ReviewAction


# --- Content Records ---
class ContentCreateRequest(BaseModel):
    type: ContentType
    title: str
    author: str | None = None
    publishing: PublishingConfig | None = None


class ContentUpdateRequest(BaseModel):
    changes: dict[str, Any]


class StatusChangeRequest(BaseModel):
    status: ContentStatus


class ContentRecordResponse(BaseModel):
    id: str
    type: ContentType
    title: str
    status: ContentStatus
    author: str | None = None
    publishing: PublishingConfig | None = None
    published_at: datetime | None = None
    created_at: datetime
    updated_at: datetime
    available_actions: list[str] = []


# --- Audit ---
class ReviewRecordResponse(BaseModel):
    id: str
    action: ReviewAction
    from_status: ContentStatus | None = None
    to_status: ContentStatus
    actor: str
    comment: str | None = None
    timestamp: datetime


# --- Publishing ---
class ValidationResponse(BaseModel):
    is_publishable: bool
    severity: str
    errors: list[str] = []
    warnings: list[str] = []
    seo_complete: bool
    geo_complete: bool
    faq_complete: bool


class PublishingStatsResponse(BaseModel):
    total: int
    publishable: int
    publishable_percent: int
    missing_seo: int
    missing_geo: int
    missing_faq: int


# --- Batch ---
class BatchRequest(BaseModel):
    ids: list[str] = Field(min_length=1)


class BatchFailureModel(BaseModel):
    id: str
    error: str


class BatchResponse(BaseModel):
    success: list[str]
    failed: list[BatchFailureModel]
