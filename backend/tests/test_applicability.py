"""
Tests for the Applicability Resolver.

1. Predicate clauses (membership, thresholds, flags, NIS2 class)
2. Unknown profile fields never exclude a requirement
3. Requirements without a rule are universal
4. Output order follows catalog order; resolve is idempotent
"""
import pytest

from app.models.domain import (
    ActivityType,
    ApplicabilityRule,
    Category,
    Jurisdiction,
    NIS2Classification,
    OperatorProfile,
    OperatorType,
    OrbitRegime,
    Requirement,
    SizeClass,
)
from app.services.catalog import get_catalog, get_full_catalog
from app.services.compliance.applicability import explain, nis2_class_for, resolve


def make_req(req_id, rule=None, jurisdiction=Jurisdiction.EU_SPACE_ACT, category=Category.AUTHORIZATION):
    return Requirement(
        id=req_id,
        jurisdiction=jurisdiction,
        article_ref=f"Art. {req_id}",
        title=f"Requirement {req_id}",
        category=category,
        applicability=rule,
    )


# =============================================================================
# TEST: PREDICATE CLAUSES
# =============================================================================

class TestPredicateClauses:

    def test_leo_and_mass_threshold_example(self):
        """LEO 200 kg spacecraft: R1 (all LEO) applies, R2 (mass > 500) does not."""
        r1 = make_req("R1", ApplicabilityRule(orbit_types=(OrbitRegime.LEO,)))
        r2 = make_req("R2", ApplicabilityRule(mass_above_kg=500))
        profile = OperatorProfile(
            operator_type=OperatorType.SPACECRAFT,
            orbit_type=OrbitRegime.LEO,
            mass_kg=200,
        )

        assert resolve(profile, [r1, r2]) == [r1]

    def test_mass_above_is_strict(self):
        rule = ApplicabilityRule(mass_above_kg=500)
        req = make_req("R", rule)

        assert resolve(OperatorProfile(mass_kg=500), [req]) == []
        assert resolve(OperatorProfile(mass_kg=500.1), [req]) == [req]

    def test_mass_up_to_is_inclusive(self):
        req = make_req("R", ApplicabilityRule(mass_up_to_kg=10))

        assert resolve(OperatorProfile(mass_kg=10), [req]) == [req]
        assert resolve(OperatorProfile(mass_kg=10.5), [req]) == []

    def test_operator_type_membership_and_exclusion(self):
        only_launch = make_req("A", ApplicabilityRule(operator_types=(OperatorType.LAUNCH_VEHICLE,)))
        not_pdp = make_req("B", ApplicabilityRule(excluded_operator_types=(OperatorType.DATA_PROVIDER,)))
        pdp = OperatorProfile(operator_type=OperatorType.DATA_PROVIDER)

        assert resolve(pdp, [only_launch, not_pdp]) == []
        assert explain(pdp, only_launch) == ["operator_types"]
        assert explain(pdp, not_pdp) == ["excluded_operator_types"]

    def test_activity_types_match_any_overlap(self):
        req = make_req("R", ApplicabilityRule(
            activity_types=(ActivityType.GROUND_INFRASTRUCTURE, ActivityType.REENTRY),
        ))
        profile = OperatorProfile(activity_types=[ActivityType.EARTH_OBSERVATION, ActivityType.REENTRY])

        assert resolve(profile, [req]) == [req]
        assert resolve(OperatorProfile(activity_types=[ActivityType.LAUNCH]), [req]) == []

    def test_required_flags(self):
        req = make_req("R", ApplicabilityRule(required_flags=("has_uk_nexus", "launches_from_uk")))

        assert resolve(OperatorProfile(has_uk_nexus=True, launches_from_uk=True), [req]) == [req]
        assert explain(OperatorProfile(has_uk_nexus=True, launches_from_uk=False), req) == ["launches_from_uk"]

    def test_unknown_flag_name_rejected_at_definition(self):
        with pytest.raises(ValueError):
            ApplicabilityRule(required_flags=("has_mars_nexus",))

    def test_multiple_failures_are_all_reported(self):
        req = make_req("R", ApplicabilityRule(
            orbit_types=(OrbitRegime.GEO,),
            size_classes=(SizeClass.LARGE,),
        ))
        profile = OperatorProfile(orbit_type=OrbitRegime.LEO, size_class=SizeClass.SMALL)

        assert explain(profile, req) == ["orbit_types", "size_classes"]


# =============================================================================
# TEST: UNKNOWN FIELDS AND UNIVERSAL REQUIREMENTS
# =============================================================================

class TestUnknownFields:

    def test_requirement_without_rule_is_universal(self):
        baseline = make_req("BASE")
        profiles = [
            OperatorProfile(),
            OperatorProfile(operator_type=OperatorType.LAUNCH_SITE, mass_kg=0),
            OperatorProfile(is_eu_established=False, size_class=SizeClass.MICRO),
        ]
        for profile in profiles:
            assert resolve(profile, [baseline]) == [baseline]

    def test_unknown_fields_do_not_exclude(self):
        """An empty profile keeps every rule-bearing requirement."""
        reqs = [
            make_req("A", ApplicabilityRule(operator_types=(OperatorType.SPACECRAFT,))),
            make_req("B", ApplicabilityRule(mass_above_kg=500)),
            make_req("C", ApplicabilityRule(required_flags=("has_us_nexus",))),
            make_req("D", ApplicabilityRule(activity_types=(ActivityType.LAUNCH,))),
        ]

        assert resolve(OperatorProfile(), reqs) == reqs

    def test_nis2_class_unknown_without_size(self):
        assert nis2_class_for(OperatorProfile()) is None
        assert nis2_class_for(OperatorProfile(is_eu_established=False)) is None
        assert nis2_class_for(
            OperatorProfile(is_eu_established=False, is_third_country=False)
        ) == NIS2Classification.OUT_OF_SCOPE

    def test_third_country_without_size_keeps_nis2_requirements(self):
        eu = OperatorProfile(operator_type=OperatorType.SPACECRAFT, is_eu_established=True)
        third_country = OperatorProfile(
            operator_type=OperatorType.SPACECRAFT,
            is_eu_established=False,
            is_third_country=True,
        )
        catalog = get_catalog(Jurisdiction.NIS2)

        assert nis2_class_for(third_country) is None
        assert resolve(third_country, catalog) == resolve(eu, catalog)
        assert resolve(third_country, catalog)


# =============================================================================
# TEST: DETERMINISM
# =============================================================================

class TestDeterminism:

    @pytest.fixture
    def leo_operator(self):
        return OperatorProfile(
            operator_type=OperatorType.SPACECRAFT,
            activity_types=[ActivityType.EARTH_OBSERVATION],
            size_class=SizeClass.MEDIUM,
            orbit_type=OrbitRegime.LEO,
            mass_kg=150,
            is_eu_established=True,
            has_uk_nexus=False,
            has_us_nexus=True,
        )

    def test_resolve_is_idempotent(self, leo_operator):
        catalog = get_full_catalog()

        assert resolve(leo_operator, catalog) == resolve(leo_operator, catalog)

    def test_output_preserves_catalog_order(self, leo_operator):
        catalog = get_full_catalog()
        positions = {req.id: i for i, req in enumerate(catalog)}

        result = resolve(leo_operator, catalog)
        indices = [positions[req.id] for req in result]

        assert indices == sorted(indices)

    def test_every_excluded_requirement_has_a_reason(self, leo_operator):
        catalog = get_full_catalog()
        applicable = {req.id for req in resolve(leo_operator, catalog)}

        for req in catalog:
            if req.id not in applicable:
                assert explain(leo_operator, req), req.id

    def test_uk_catalog_excluded_without_uk_nexus(self, leo_operator):
        result = resolve(leo_operator, get_full_catalog([Jurisdiction.UK_SIA]))

        assert result == []

    def test_leo_us_operator_gets_five_year_rule(self, leo_operator):
        ids = [req.id for req in resolve(leo_operator, get_full_catalog([Jurisdiction.US]))]

        assert "fcc-debris-5year-rule" in ids
        assert "faa-launch-license" not in ids
