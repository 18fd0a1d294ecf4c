"""
Assessment Service

Owns assessment persistence and the status store:
- create / update / delete assessments
- upsert per-requirement statuses (one row per assessment + requirement,
  last write wins)
- recompute cached score fields after every mutation

The applicable requirement set is never stored. It is resolved from the
stored profile each time, so cached scores reflect the catalog version
recorded in catalog_version at scoring time.
"""
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Optional
from uuid import uuid4

from sqlalchemy.orm import Session

from ...models.db_models import AssessmentDB, RequirementStatusDB
from ...models.domain import (
    AssessmentResult,
    ComplianceStatus,
    Jurisdiction,
    OperatorProfile,
    Requirement,
)
from ..catalog import CATALOG_VERSION, get_full_catalog
from .applicability import resolve
from .errors import AssessmentNotFoundError, UnknownRequirementError
from .profile import profile_from_dict, profile_to_dict
from .result_cache import ExpiringCache
from .scoring import assess

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


class AssessmentService:
    """Assessment lifecycle and status store."""

    def __init__(self, db_session: Session, cache: Optional[ExpiringCache] = None):
        self.db = db_session
        self.cache = cache

    # =========================================================================
    # LOADING
    # =========================================================================

    def get_assessment(self, assessment_id: str) -> AssessmentDB:
        assessment = self.db.query(AssessmentDB).filter(AssessmentDB.id == assessment_id).first()
        if assessment is None:
            raise AssessmentNotFoundError(assessment_id)
        return assessment

    def list_assessments(self, organization_id: Optional[str] = None) -> List[AssessmentDB]:
        query = self.db.query(AssessmentDB)
        if organization_id is not None:
            query = query.filter(AssessmentDB.organization_id == organization_id)
        return query.order_by(AssessmentDB.created_at.desc()).all()

    def load_profile(self, assessment: AssessmentDB) -> OperatorProfile:
        return profile_from_dict(assessment.profile_data)

    def load_jurisdictions(self, assessment: AssessmentDB) -> List[Jurisdiction]:
        raw = assessment.jurisdictions
        if not isinstance(raw, list):
            logger.warning(f"Assessment {assessment.id} has malformed jurisdictions: {raw!r}")
            return []
        jurisdictions = []
        for value in raw:
            try:
                jurisdictions.append(Jurisdiction(value))
            except ValueError:
                logger.warning(f"Assessment {assessment.id}: ignoring unknown jurisdiction {value!r}")
        return jurisdictions

    def catalog_for(self, assessment: AssessmentDB) -> List[Requirement]:
        return get_full_catalog(self.load_jurisdictions(assessment))

    def applicable_for(self, assessment: AssessmentDB) -> List[Requirement]:
        return resolve(self.load_profile(assessment), self.catalog_for(assessment))

    def status_map(self, assessment: AssessmentDB) -> Dict[str, ComplianceStatus]:
        return {row.requirement_id: row.status for row in assessment.statuses}

    # =========================================================================
    # MUTATIONS
    # =========================================================================

    def create_assessment(
        self,
        name: str,
        jurisdictions: Iterable[Jurisdiction],
        profile: OperatorProfile,
        organization_id: Optional[str] = None,
    ) -> AssessmentDB:
        selected = []
        for jurisdiction in jurisdictions:
            if jurisdiction not in selected:
                selected.append(jurisdiction)
        if not selected:
            raise ValueError("At least one jurisdiction is required")

        assessment = AssessmentDB(
            id=str(uuid4()),
            organization_id=organization_id,
            name=name,
            jurisdictions=[j.value for j in selected],
            profile_data=profile_to_dict(profile),
            category_scores={},
        )
        self.db.add(assessment)
        self.recompute(assessment)
        self.db.commit()
        self.db.refresh(assessment)

        logger.info(
            f"Created assessment {assessment.id} ({', '.join(assessment.jurisdictions)}): "
            f"score={assessment.overall_score} risk={assessment.risk_level.value}"
        )
        return assessment

    def update_profile(self, assessment_id: str, profile: OperatorProfile) -> AssessmentDB:
        assessment = self.get_assessment(assessment_id)
        assessment.profile_data = profile_to_dict(profile)
        self.recompute(assessment)
        self.db.commit()
        self._invalidate(assessment_id)
        return assessment

    def set_requirement_status(
        self,
        assessment_id: str,
        requirement_id: str,
        status: ComplianceStatus,
        notes: Optional[str] = None,
    ) -> RequirementStatusDB:
        """Create or overwrite the status of one requirement. Rejects unknown ids."""
        assessment = self.get_assessment(assessment_id)
        known = {req.id for req in self.catalog_for(assessment)}
        if requirement_id not in known:
            raise UnknownRequirementError(requirement_id)

        row = self._upsert_status(assessment, requirement_id, status, notes)
        self.recompute(assessment)
        self.db.commit()
        self._invalidate(assessment_id)
        return row

    def apply_status_updates(
        self,
        assessment_id: str,
        updates: Iterable[Dict[str, Any]],
        ignore_unknown: bool = True,
    ) -> Dict[str, List[str]]:
        """
        Bulk upsert of {"requirement_id", "status", "notes"} records.

        Unknown requirement ids are skipped and reported when ignore_unknown
        is set; otherwise the whole batch is rejected before any write.
        Later updates for the same id win.
        """
        assessment = self.get_assessment(assessment_id)
        known = {req.id for req in self.catalog_for(assessment)}
        updates = list(updates)

        unknown = [u["requirement_id"] for u in updates if u["requirement_id"] not in known]
        if unknown and not ignore_unknown:
            raise UnknownRequirementError(unknown)
        if unknown:
            logger.warning(f"Assessment {assessment_id}: ignoring unknown requirement ids {unknown}")

        updated = []
        for update in updates:
            requirement_id = update["requirement_id"]
            if requirement_id not in known:
                continue
            self._upsert_status(
                assessment,
                requirement_id,
                ComplianceStatus(update["status"]),
                update.get("notes"),
            )
            if requirement_id not in updated:
                updated.append(requirement_id)

        self.recompute(assessment)
        self.db.commit()
        self._invalidate(assessment_id)
        return {"updated": updated, "ignored": unknown}

    def delete_assessment(self, assessment_id: str) -> None:
        assessment = self.get_assessment(assessment_id)
        self.db.delete(assessment)
        self.db.commit()
        self._invalidate(assessment_id)
        logger.info(f"Deleted assessment {assessment_id}")

    def _upsert_status(
        self,
        assessment: AssessmentDB,
        requirement_id: str,
        status: ComplianceStatus,
        notes: Optional[str],
    ) -> RequirementStatusDB:
        row = next((r for r in assessment.statuses if r.requirement_id == requirement_id), None)
        if row is None:
            row = RequirementStatusDB(
                id=str(uuid4()),
                assessment_id=assessment.id,
                requirement_id=requirement_id,
                status=status,
                notes=notes,
            )
            assessment.statuses.append(row)
        else:
            row.status = status
            row.notes = notes
            row.updated_at = _utcnow()
        return row

    # =========================================================================
    # SCORING
    # =========================================================================

    def recompute(self, assessment: AssessmentDB) -> AssessmentResult:
        """Rescore against the current catalog and refresh the cached fields."""
        result = assess(self.applicable_for(assessment), self.status_map(assessment))

        assessment.overall_score = result.score.overall
        assessment.mandatory_score = result.score.mandatory
        assessment.category_scores = dict(result.score.by_category)
        assessment.risk_level = result.risk_level
        assessment.gap_count = len(result.gaps)
        assessment.catalog_version = CATALOG_VERSION
        assessment.scored_at = _utcnow()

        logger.info(
            f"Scored assessment {assessment.id}: overall={result.score.overall} "
            f"mandatory={result.score.mandatory} risk={result.risk_level.value} "
            f"gaps={len(result.gaps)}"
        )
        return result

    def get_results(self, assessment_id: str) -> Dict[str, Any]:
        """
        Live results against the running catalog.

        is_stale is True when the stored snapshot was scored against an older
        catalog version; it is cleared by the next mutation.
        """
        if self.cache is not None:
            cached = self.cache.get(assessment_id)
            if cached is not None:
                return cached

        assessment = self.get_assessment(assessment_id)
        result = assess(self.applicable_for(assessment), self.status_map(assessment))

        payload = result.to_dict()
        payload.update({
            "assessment_id": assessment.id,
            "catalog_version": CATALOG_VERSION,
            "scored_catalog_version": assessment.catalog_version,
            "is_stale": assessment.catalog_version != CATALOG_VERSION,
        })
        if self.cache is not None:
            self.cache.set(assessment_id, payload)
        return payload

    def _invalidate(self, assessment_id: str) -> None:
        if self.cache is not None:
            self.cache.invalidate(assessment_id)
