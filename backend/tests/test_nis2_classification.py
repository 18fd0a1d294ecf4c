"""
Tests for NIS2 entity classification and proportionality eligibility.
"""
import pytest

from app.models.domain import (
    ActivityType,
    Jurisdiction,
    NIS2Classification,
    OperatorProfile,
    SizeClass,
)
from app.services.catalog import get_catalog
from app.services.compliance.applicability import resolve
from app.services.compliance.nis2_classification import (
    classify_nis2_entity,
    is_eligible_for_proportionality,
)

E = NIS2Classification.ESSENTIAL
I = NIS2Classification.IMPORTANT
OUT = NIS2Classification.OUT_OF_SCOPE


class TestClassification:

    @pytest.mark.parametrize("size,activities,expected", [
        (SizeClass.LARGE, [], E),
        (SizeClass.MEDIUM, [ActivityType.GROUND_INFRASTRUCTURE], E),
        (SizeClass.MEDIUM, [ActivityType.SATELLITE_COMMUNICATIONS], E),
        (SizeClass.MEDIUM, [ActivityType.EARTH_OBSERVATION], I),
        (SizeClass.SMALL, [ActivityType.GROUND_INFRASTRUCTURE], I),
        (SizeClass.MICRO, [ActivityType.SATELLITE_COMMUNICATIONS], OUT),
        (None, [], OUT),
    ])
    def test_size_cap_rule(self, size, activities, expected):
        profile = OperatorProfile(size_class=size, activity_types=activities, is_eu_established=True)

        assert classify_nis2_entity(profile) == expected

    def test_non_eu_without_eu_services_out_of_scope(self):
        profile = OperatorProfile(size_class=SizeClass.LARGE, is_eu_established=False)

        assert classify_nis2_entity(profile) == OUT

    def test_third_country_operator_classified_by_size(self):
        profile = OperatorProfile(
            size_class=SizeClass.LARGE,
            is_eu_established=False,
            is_third_country=True,
        )

        assert classify_nis2_entity(profile) == E


class TestProportionality:

    @pytest.mark.parametrize("size,activities,expected", [
        (SizeClass.LARGE, [], False),
        (SizeClass.MEDIUM, [ActivityType.GROUND_INFRASTRUCTURE], False),
        (SizeClass.MEDIUM, [ActivityType.EARTH_OBSERVATION], True),
        (SizeClass.SMALL, [ActivityType.SATELLITE_COMMUNICATIONS], True),
        (SizeClass.MICRO, [], True),
    ])
    def test_eligibility(self, size, activities, expected):
        profile = OperatorProfile(size_class=size, activity_types=activities)

        assert is_eligible_for_proportionality(profile) is expected


class TestNIS2Applicability:

    def test_micro_entity_gets_no_nis2_requirements(self):
        profile = OperatorProfile(size_class=SizeClass.MICRO, is_eu_established=True)

        assert resolve(profile, get_catalog(Jurisdiction.NIS2)) == []

    def test_essential_only_requirements(self):
        essential = OperatorProfile(size_class=SizeClass.LARGE, is_eu_established=True)
        important = OperatorProfile(size_class=SizeClass.SMALL, is_eu_established=True)

        essential_ids = {r.id for r in resolve(essential, get_catalog(Jurisdiction.NIS2))}
        important_ids = {r.id for r in resolve(important, get_catalog(Jurisdiction.NIS2))}

        assert "nis2-047" in essential_ids and "nis2-047" not in important_ids
        assert "nis2-048" in important_ids and "nis2-048" not in essential_ids
        assert "nis2-001" in essential_ids & important_ids
