"""
Tests for AssessmentService against an in-memory SQLite database.

1. Create scores immediately and stamps the catalog version
2. Status upsert: one row per (assessment, requirement), last write wins
3. Unknown requirement ids: rejected singly, ignored or rejected in bulk
4. Profile changes recompute; delete cascades status rows
5. Malformed stored JSON falls back to defaults
6. Result cache is invalidated on mutation
"""
import pytest
from sqlalchemy import inspect
from sqlalchemy.exc import IntegrityError
from sqlalchemy.pool import StaticPool

from app.database import Base, create_db_engine, init_db, make_session_factory
from app.models.db_models import AssessmentDB, RequirementStatusDB
from app.models.domain import (
    ComplianceStatus,
    Jurisdiction,
    OperatorProfile,
    OperatorType,
    OrbitRegime,
    RiskLevel,
    SizeClass,
)
from app.services.catalog import CATALOG_VERSION
from app.services.compliance import (
    AssessmentNotFoundError,
    AssessmentService,
    ExpiringCache,
    UnknownRequirementError,
)

C = ComplianceStatus


@pytest.fixture
def db_session():
    engine = create_db_engine("sqlite://", poolclass=StaticPool)
    init_db(engine)
    session = make_session_factory(engine)()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def cache():
    return ExpiringCache(ttl_seconds=300)


@pytest.fixture
def service(db_session, cache):
    return AssessmentService(db_session, cache)


@pytest.fixture
def eu_leo_profile():
    return OperatorProfile(
        operator_type=OperatorType.SPACECRAFT,
        size_class=SizeClass.SMALL,
        orbit_type=OrbitRegime.LEO,
        mass_kg=120,
        is_eu_established=True,
    )


@pytest.fixture
def assessment(service, eu_leo_profile):
    return service.create_assessment(
        name="LEO constellation",
        jurisdictions=[Jurisdiction.EU_SPACE_ACT],
        profile=eu_leo_profile,
        organization_id="org-1",
    )


# =============================================================================
# TEST: CREATE / READ
# =============================================================================

class TestSchema:

    def test_init_db_creates_tables_on_given_engine(self):
        engine = create_db_engine("sqlite://", poolclass=StaticPool)
        init_db(engine)

        tables = set(inspect(engine).get_table_names())
        assert {"assessments", "requirement_statuses"} <= tables


class TestCreate:

    def test_create_scores_immediately(self, assessment):
        assert assessment.overall_score == 0
        assert assessment.risk_level == RiskLevel.CRITICAL
        assert assessment.gap_count > 0
        assert assessment.catalog_version == CATALOG_VERSION
        assert assessment.scored_at is not None

    def test_profile_round_trips_through_storage(self, service, assessment, eu_leo_profile):
        loaded = service.load_profile(service.get_assessment(assessment.id))

        assert loaded == eu_leo_profile

    def test_requires_a_jurisdiction(self, service, eu_leo_profile):
        with pytest.raises(ValueError):
            service.create_assessment("empty", [], eu_leo_profile)

    def test_get_unknown_raises(self, service):
        with pytest.raises(AssessmentNotFoundError):
            service.get_assessment("missing")

    def test_list_filters_by_organization(self, service, assessment, eu_leo_profile):
        service.create_assessment("other", [Jurisdiction.NIS2], eu_leo_profile, organization_id="org-2")

        assert [a.id for a in service.list_assessments("org-1")] == [assessment.id]
        assert len(service.list_assessments()) == 2


# =============================================================================
# TEST: STATUS STORE
# =============================================================================

class TestStatusStore:

    def test_upsert_keeps_one_row_last_write_wins(self, service, db_session, assessment):
        service.set_requirement_status(assessment.id, "eu-sa-art6-authorization", C.PARTIAL, "draft")
        service.set_requirement_status(assessment.id, "eu-sa-art6-authorization", C.COMPLIANT, "filed")

        rows = db_session.query(RequirementStatusDB).filter_by(assessment_id=assessment.id).all()

        assert len(rows) == 1
        assert rows[0].status == C.COMPLIANT
        assert rows[0].notes == "filed"

    def test_unique_constraint_enforced(self, db_session, assessment):
        db_session.add_all([
            RequirementStatusDB(id="s1", assessment_id=assessment.id,
                                requirement_id="eu-sa-art6-authorization", status=C.COMPLIANT),
            RequirementStatusDB(id="s2", assessment_id=assessment.id,
                                requirement_id="eu-sa-art6-authorization", status=C.PARTIAL),
        ])
        with pytest.raises(IntegrityError):
            db_session.flush()
        db_session.rollback()

    def test_status_update_recomputes_score(self, service, assessment):
        before = assessment.overall_score
        service.set_requirement_status(assessment.id, "eu-sa-art6-authorization", C.COMPLIANT)

        assert service.get_assessment(assessment.id).overall_score > before

    def test_unknown_requirement_rejected(self, service, assessment):
        with pytest.raises(UnknownRequirementError):
            service.set_requirement_status(assessment.id, "nis2-001", C.COMPLIANT)

    def test_bulk_ignores_unknown_by_default(self, service, assessment):
        result = service.apply_status_updates(assessment.id, [
            {"requirement_id": "eu-sa-art6-authorization", "status": "compliant"},
            {"requirement_id": "bogus-id", "status": "compliant"},
        ])

        assert result == {"updated": ["eu-sa-art6-authorization"], "ignored": ["bogus-id"]}

    def test_bulk_strict_rejects_before_writing(self, service, db_session, assessment):
        with pytest.raises(UnknownRequirementError):
            service.apply_status_updates(assessment.id, [
                {"requirement_id": "eu-sa-art6-authorization", "status": "compliant"},
                {"requirement_id": "bogus-id", "status": "compliant"},
            ], ignore_unknown=False)

        assert db_session.query(RequirementStatusDB).count() == 0

    def test_all_compliant_scores_100_and_low_risk(self, service, assessment):
        applicable = service.applicable_for(service.get_assessment(assessment.id))
        service.apply_status_updates(assessment.id, [
            {"requirement_id": r.id, "status": C.COMPLIANT} for r in applicable
        ])

        stored = service.get_assessment(assessment.id)
        results = service.get_results(assessment.id)

        assert stored.overall_score == 100
        assert stored.risk_level == RiskLevel.LOW
        assert stored.gap_count == 0
        assert results["gaps"] == []


# =============================================================================
# TEST: PROFILE, DELETE, DEFENSIVE PARSING
# =============================================================================

class TestLifecycle:

    def test_profile_change_changes_applicable_set(self, service, assessment, eu_leo_profile):
        before = service.get_results(assessment.id)["applicable_count"]
        launcher = OperatorProfile(operator_type=OperatorType.LAUNCH_SITE, size_class=SizeClass.SMALL)

        service.update_profile(assessment.id, launcher)

        assert service.get_results(assessment.id)["applicable_count"] != before

    def test_delete_cascades_statuses(self, service, db_session, assessment):
        service.set_requirement_status(assessment.id, "eu-sa-art6-authorization", C.COMPLIANT)
        service.delete_assessment(assessment.id)

        assert db_session.query(AssessmentDB).count() == 0
        assert db_session.query(RequirementStatusDB).count() == 0
        with pytest.raises(AssessmentNotFoundError):
            service.get_results(assessment.id)

    def test_malformed_profile_json_falls_back(self, service, db_session, assessment):
        stored = service.get_assessment(assessment.id)
        stored.profile_data = {"operator_type": "starship", "mass_kg": "heavy", "size_class": "small"}
        db_session.commit()

        profile = service.load_profile(stored)

        assert profile.operator_type is None
        assert profile.mass_kg is None
        assert profile.size_class == SizeClass.SMALL

    def test_non_dict_profile_falls_back_to_empty(self, service, db_session, assessment):
        stored = service.get_assessment(assessment.id)
        stored.profile_data = ["not", "a", "profile"]
        db_session.commit()

        assert service.load_profile(stored) == OperatorProfile()
        assert service.get_results(assessment.id)["applicable_count"] > 0

    def test_unknown_stored_jurisdiction_ignored(self, service, db_session, assessment):
        stored = service.get_assessment(assessment.id)
        stored.jurisdictions = ["eu_space_act", "mars"]
        db_session.commit()

        assert service.load_jurisdictions(stored) == [Jurisdiction.EU_SPACE_ACT]


# =============================================================================
# TEST: RESULTS AND CACHE
# =============================================================================

class TestResults:

    def test_results_cached_until_mutation(self, service, cache, assessment):
        first = service.get_results(assessment.id)
        assert cache.get(assessment.id) is first

        service.set_requirement_status(assessment.id, "eu-sa-art6-authorization", C.COMPLIANT)

        assert cache.get(assessment.id) is None
        assert service.get_results(assessment.id)["score"]["overall"] > first["score"]["overall"]

    def test_stale_catalog_version_flagged(self, service, db_session, assessment):
        stored = service.get_assessment(assessment.id)
        stored.catalog_version = "2000.0"
        db_session.commit()

        results = service.get_results(assessment.id)
        assert results["is_stale"] is True
        assert results["scored_catalog_version"] == "2000.0"

        service.set_requirement_status(assessment.id, "eu-sa-art6-authorization", C.PARTIAL)
        assert service.get_results(assessment.id)["is_stale"] is False

    def test_results_match_stored_fields(self, service, assessment):
        service.set_requirement_status(assessment.id, "eu-sa-art58-debris-plan", C.COMPLIANT)
        stored = service.get_assessment(assessment.id)
        results = service.get_results(assessment.id)

        assert results["score"]["overall"] == stored.overall_score
        assert results["score"]["mandatory"] == stored.mandatory_score
        assert results["risk_level"] == stored.risk_level.value
        assert len(results["gaps"]) == stored.gap_count
