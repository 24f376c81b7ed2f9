from datetime import UTC, datetime
from typing import Literal
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field

# --- Enums / Literals ---
RoleType = Literal["admin", "editor", "viewer"]
ContentType = Literal[
    "lessons",
    "readings",
    "grammar",
    "lexicon",
    "medical_dialogs",
    "medical_lexicon",
    "medical_scenario",
    "scenarios",
]
ContentStatus = Literal["draft", "in_review", "published", "archived"]
ReviewAction = Literal[
    "created",
    "edited",
    "submitted_for_review",
    "approved",
    "rejected",
    "published",
    "archived",
]


def utcnow() -> datetime:
    return datetime.now(UTC)


# --- Actor ---

class Actor(BaseModel):
    """Identity and already-resolved role of whoever requests a transition."""

    model_config = ConfigDict(frozen=True)

    name: str
    role: str


# --- Publishing metadata ---

class SeoFields(BaseModel):
    title: str = ""
    description: str = ""


class GeoFields(BaseModel):
    snippet: str = ""
    key_points: list[str] = Field(default_factory=list)


class FaqItem(BaseModel):
    question: str
    answer: str


class PublishingConfig(BaseModel):
    slug: str = ""
    seo: SeoFields = Field(default_factory=SeoFields)
    geo: GeoFields = Field(default_factory=GeoFields)
    faq: list[FaqItem] = Field(default_factory=list)


# --- Content ---

class ContentRecord(BaseModel):
    id: str = Field(default_factory=lambda: str(uuid4()))
    type: ContentType
    title: str
    status: ContentStatus = "draft"
    author: str | None = None

    publishing: PublishingConfig | None = None
    published_at: datetime | None = None

    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)


# --- Audit ---

class ReviewRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: str(uuid4()))
    action: ReviewAction
    from_status: ContentStatus | None
    to_status: ContentStatus
    actor: str
    comment: str | None = None
    timestamp: datetime = Field(default_factory=utcnow)
