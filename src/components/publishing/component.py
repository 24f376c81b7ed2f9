"""
Publishing component - publishing readiness validation.

Decides whether a content record's publishing metadata allows it to be
published. Pure functions over PublishingConfig; no I/O.

Required for publish:
- slug: present and URL-safe
- SEO: title (min chars), description (min chars)
- GEO: snippet (min chars), key points (min items)

Warnings (never blocking):
- SEO description over the recommended length
- GEO key points over the recommended count
- No FAQ defined
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from src.domain.entities import ContentRecord, PublishingConfig
from src.rules.models import PublishingRules, Rules

from .models import PublishingStats, Severity, ValidationResult

# Lowercase latin, digits and CJK ideographs, hyphen separated.
_SLUG_RE = re.compile(r"^[a-z0-9\u4e00-\u9fa5]+(?:-[a-z0-9\u4e00-\u9fa5]+)*$")


def is_valid_slug(slug: str) -> bool:
    return bool(_SLUG_RE.match(slug))


def generate_slug(title: str) -> str:
    """Derive a URL-safe slug from a title."""
    slug = title.lower().strip()
    slug = re.sub(r"[^a-z0-9\u4e00-\u9fa5\s-]", "", slug)
    slug = re.sub(r"\s+", "-", slug)
    slug = re.sub(r"-+", "-", slug)
    return slug.strip("-")


class PublishingValidator:
    """Publishing readiness validator with configurable thresholds."""

    def __init__(self, rules: PublishingRules | None = None) -> None:
        self._rules = rules or PublishingRules()

    @classmethod
    def from_rules(cls, rules: Rules) -> PublishingValidator:
        return cls(rules.publishing)

    @property
    def rules(self) -> PublishingRules:
        return self._rules

    def validate(self, config: PublishingConfig | None) -> ValidationResult:
        """
        Check every rule and report all violations, not just the first.
        """
        if config is None:
            return ValidationResult(errors=["Publishing config missing"])

        r = self._rules
        errors: list[str] = []
        warnings: list[str] = []

        slug = config.slug.strip()
        if not slug:
            errors.append("Slug is required")
        elif not is_valid_slug(slug):
            errors.append("Slug must be URL-safe (lowercase letters, digits and hyphens)")

        seo_title = config.seo.title.strip()
        seo_desc = config.seo.description.strip()
        if len(seo_title) < r.seo_title_min:
            errors.append(f"SEO title required (min {r.seo_title_min} chars)")
        if len(seo_desc) < r.seo_description_min:
            errors.append(f"SEO description required (min {r.seo_description_min} chars)")
        if len(seo_desc) > r.seo_description_max:
            warnings.append(f"SEO description exceeds {r.seo_description_max} chars")
        seo_complete = (
            len(seo_title) >= r.seo_title_min and len(seo_desc) >= r.seo_description_min
        )

        geo_snippet = config.geo.snippet.strip()
        key_points = [p for p in config.geo.key_points if p.strip()]
        if len(geo_snippet) < r.geo_snippet_min:
            errors.append(f"GEO snippet required (min {r.geo_snippet_min} chars)")
        if len(key_points) < r.geo_key_points_min:
            errors.append(
                f"GEO key points required (min {r.geo_key_points_min} items, "
                f"currently {len(key_points)})"
            )
        if len(key_points) > r.geo_key_points_max:
            warnings.append(f"GEO key points exceed {r.geo_key_points_max} items")
        geo_complete = (
            len(geo_snippet) >= r.geo_snippet_min and len(key_points) >= r.geo_key_points_min
        )

        faq_complete = len(config.faq) > 0
        if not faq_complete:
            warnings.append("No FAQ defined (recommended for SEO)")

        return ValidationResult(
            errors=errors,
            warnings=warnings,
            seo_complete=seo_complete,
            geo_complete=geo_complete,
            faq_complete=faq_complete,
        )

    def stats(self, records: Iterable[ContentRecord]) -> PublishingStats:
        """Fold validate over records; each bucket counts independently."""
        total = publishable = missing_seo = missing_geo = missing_faq = 0

        for record in records:
            total += 1
            result = self.validate(record.publishing)
            if result.is_publishable:
                publishable += 1
            if not result.seo_complete:
                missing_seo += 1
            if not result.geo_complete:
                missing_geo += 1
            if not result.faq_complete:
                missing_faq += 1

        return PublishingStats(
            total=total,
            publishable=publishable,
            missing_seo=missing_seo,
            missing_geo=missing_geo,
            missing_faq=missing_faq,
        )


def severity(result: ValidationResult) -> Severity:
    """Display emphasis only; carries no business rule."""
    if result.errors:
        return Severity.ERROR
    if result.warnings:
        return Severity.WARNING
    return Severity.SUCCESS


_default_validator = PublishingValidator()


def validate(config: PublishingConfig | None) -> ValidationResult:
    """Validate with the default thresholds."""
    return _default_validator.validate(config)


def stats(records: Iterable[ContentRecord]) -> PublishingStats:
    """Aggregate readiness with the default thresholds."""
    return _default_validator.stats(records)
