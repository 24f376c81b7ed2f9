"""
Publishing readiness validator tests.
"""

import pytest

from src.components.publishing import (
    PublishingValidator,
    Severity,
    generate_slug,
    is_valid_slug,
    severity,
    stats,
    validate,
)
from src.domain.entities import GeoFields, PublishingConfig, SeoFields
from src.rules.models import PublishingRules
from tests.helpers import complete_config, make_record


class TestValidate:
    def test_complete_config_is_publishable(self):
        result = validate(complete_config())

        assert result.is_publishable
        assert result.errors == []
        assert result.warnings == []
        assert result.seo_complete
        assert result.geo_complete
        assert result.faq_complete
        assert severity(result) == Severity.SUCCESS

    def test_missing_config(self):
        result = validate(None)

        assert not result.is_publishable
        assert result.errors == ["Publishing config missing"]
        assert not result.seo_complete
        assert not result.geo_complete
        assert not result.faq_complete

    def test_empty_config_reports_every_error(self):
        result = validate(PublishingConfig())

        assert result.errors == [
            "Slug is required",
            "SEO title required (min 10 chars)",
            "SEO description required (min 50 chars)",
            "GEO snippet required (min 50 chars)",
            "GEO key points required (min 3 items, currently 0)",
        ]
        assert result.warnings == ["No FAQ defined (recommended for SEO)"]
        assert severity(result) == Severity.ERROR

    def test_whitespace_slug_counts_as_missing(self):
        result = validate(complete_config(slug="   "))
        assert "Slug is required" in result.errors

    def test_slug_must_be_url_safe(self):
        result = validate(complete_config(slug="Present Perfect!"))
        assert result.errors == [
            "Slug must be URL-safe (lowercase letters, digits and hyphens)"
        ]

    def test_short_seo_title(self):
        config = complete_config(
            seo=SeoFields(title="Short", description="x" * 60),
        )
        result = validate(config)
        assert result.errors == ["SEO title required (min 10 chars)"]
        assert not result.seo_complete

    def test_long_description_is_only_a_warning(self):
        config = complete_config(
            seo=SeoFields(title="Present Perfect Basics", description="d" * 200),
        )
        result = validate(config)

        assert result.is_publishable
        assert result.warnings == ["SEO description exceeds 160 chars"]
        assert severity(result) == Severity.WARNING

    def test_two_key_points_block_publish(self):
        # Scenario: the fix is adding a third point
        config = complete_config(
            geo=GeoFields(snippet="s" * 60, key_points=["one", "two"]),
        )
        result = validate(config)

        assert result.errors == ["GEO key points required (min 3 items, currently 2)"]
        assert not result.geo_complete

        fixed = config.model_copy(
            update={"geo": GeoFields(snippet="s" * 60, key_points=["one", "two", "three"])}
        )
        assert validate(fixed).is_publishable

    def test_blank_key_points_do_not_count(self):
        config = complete_config(
            geo=GeoFields(snippet="s" * 60, key_points=["one", "  ", "two", ""]),
        )
        assert "GEO key points required (min 3 items, currently 2)" in validate(config).errors

    def test_too_many_key_points_warns(self):
        config = complete_config(
            geo=GeoFields(snippet="s" * 60, key_points=[f"point {i}" for i in range(6)]),
        )
        result = validate(config)
        assert result.is_publishable
        assert result.warnings == ["GEO key points exceed 5 items"]

    def test_missing_faq_never_blocks(self):
        result = validate(complete_config(faq=[]))

        assert result.is_publishable
        assert not result.faq_complete
        assert result.warnings == ["No FAQ defined (recommended for SEO)"]

    def test_validate_is_pure(self):
        config = complete_config(faq=[])
        before = config.model_dump()

        first = validate(config)
        second = validate(config)

        assert first == second
        assert config.model_dump() == before

    def test_custom_thresholds(self):
        validator = PublishingValidator(PublishingRules(geo_key_points_min=1, seo_title_min=3))
        config = complete_config(
            seo=SeoFields(title="Hey", description="d" * 60),
            geo=GeoFields(snippet="s" * 60, key_points=["only"]),
        )
        assert validator.validate(config).is_publishable


class TestStats:
    def test_empty_collection(self):
        result = stats([])
        assert result.total == 0
        assert result.publishable_percent == 0

    def test_buckets_are_independent(self):
        records = [
            make_record(publishing=complete_config()),
            make_record(publishing=complete_config(faq=[])),
            make_record(publishing=None),
            make_record(
                publishing=complete_config(geo=GeoFields(snippet="s" * 60, key_points=["a"]))
            ),
        ]
        result = stats(records)

        assert result.total == 4
        assert result.publishable == 2
        assert result.missing_seo == 1
        assert result.missing_geo == 2
        assert result.missing_faq == 2
        assert result.publishable_percent == 50

    def test_validator_stats_uses_its_thresholds(self):
        validator = PublishingValidator(PublishingRules(geo_key_points_min=1))
        record = make_record(
            publishing=complete_config(geo=GeoFields(snippet="s" * 60, key_points=["a"]))
        )
        assert validator.stats([record]).publishable == 1


class TestSlugs:
    @pytest.mark.parametrize(
        "title, expected",
        [
            ("Present Perfect Basics", "present-perfect-basics"),
            ("  Hello,   World!  ", "hello-world"),
            ("Dialog #3 - At the Clinic", "dialog-3-at-the-clinic"),
            ("现在完成时 Basics", "现在完成时-basics"),
        ],
    )
    def test_generate_slug(self, title, expected):
        slug = generate_slug(title)
        assert slug == expected
        assert is_valid_slug(slug)

    @pytest.mark.parametrize("slug", ["Upper", "with space", "-lead", "trail-", "a--b", "a_b"])
    def test_invalid_slugs(self, slug):
        assert not is_valid_slug(slug)
