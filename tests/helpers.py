"""Shared builders for workflow tests."""

from datetime import UTC, datetime

from src.domain.entities import (
    ContentRecord,
    FaqItem,
    GeoFields,
    PublishingConfig,
    SeoFields,
)

T0 = datetime(2026, 3, 1, 9, 0, tzinfo=UTC)


def complete_config(**overrides) -> PublishingConfig:
    """A publishing config that passes every readiness check with no warnings."""
    data = {
        "slug": "present-perfect-basics",
        "seo": SeoFields(
            title="Present Perfect Basics",
            description="A short lesson on forming and using the present perfect tense "
            "in everyday English conversation.",
        ),
        "geo": GeoFields(
            snippet="The present perfect links a past action to the present moment, "
            "as in 'I have finished my homework'. It is formed with have plus the past "
            "participle.",
            key_points=["Formed with have/has", "Uses the past participle", "Links past to now"],
        ),
        "faq": [FaqItem(question="When do I use it?", answer="For past actions relevant now.")],
    }
    data.update(overrides)
    return PublishingConfig(**data)


def make_record(status="draft", publishing=None, **kwargs) -> ContentRecord:
    kwargs.setdefault("type", "lessons")
    kwargs.setdefault("title", "Present Perfect Basics")
    return ContentRecord(
        status=status,
        publishing=publishing,
        created_at=T0,
        updated_at=T0,
        **kwargs,
    )
