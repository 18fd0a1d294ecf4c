"""
Caelex Compliance Engine - Assessments API Router

Assessment lifecycle and the compliance status store:
create -> update statuses / profile -> read results and gaps -> delete.
Every mutation recomputes the stored score fields.
"""
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel, Field

from ..models.db_models import AssessmentDB
from ..models.domain import ComplianceStatus, Jurisdiction
from ..services.catalog import CATALOG_VERSION
from ..services.compliance import (
    AssessmentNotFoundError,
    AssessmentService,
)
from .common import OperatorProfileModel, get_assessment_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/assessments", tags=["assessments"])


# =============================================================================
# PYDANTIC MODELS
# =============================================================================

class CreateAssessmentRequest(BaseModel):
    """Request model for creating an assessment."""
    name: str = Field(..., min_length=1, max_length=255)
    jurisdictions: List[Jurisdiction] = Field(..., min_length=1, description="Frameworks to assess")
    profile: OperatorProfileModel
    organization_id: Optional[str] = Field(None, max_length=36)


class StatusUpdateRequest(BaseModel):
    """Request model for setting one requirement's status."""
    status: ComplianceStatus
    notes: Optional[str] = None


class BulkStatusItem(BaseModel):
    requirement_id: str
    status: ComplianceStatus
    notes: Optional[str] = None


class BulkStatusRequest(BaseModel):
    """Bulk status update. Unknown ids are ignored unless ignore_unknown is false."""
    updates: List[BulkStatusItem]
    ignore_unknown: bool = True


class RequirementStatusResponse(BaseModel):
    requirement_id: str
    status: str
    notes: Optional[str]
    updated_at: Optional[str]


class AssessmentResponse(BaseModel):
    """Assessment with its cached score fields."""
    id: str
    organization_id: Optional[str]
    name: str
    jurisdictions: List[str]
    profile: dict
    overall_score: Optional[int]
    mandatory_score: Optional[int]
    category_scores: dict
    risk_level: Optional[str]
    gap_count: Optional[int]
    catalog_version: Optional[str]
    is_stale: bool
    scored_at: Optional[str]
    created_at: Optional[str]
    updated_at: Optional[str]
    statuses: List[RequirementStatusResponse] = []


class AssessmentList(BaseModel):
    assessments: List[AssessmentResponse]
    total: int


class BulkStatusResponse(BaseModel):
    updated: List[str]
    ignored: List[str]
    overall_score: Optional[int]
    risk_level: Optional[str]


# =============================================================================
# HELPERS
# =============================================================================

def _iso(value) -> Optional[str]:
    return value.isoformat() if value else None


def _to_response(assessment: AssessmentDB, include_statuses: bool = True) -> AssessmentResponse:
    statuses = []
    if include_statuses:
        statuses = [
            RequirementStatusResponse(
                requirement_id=row.requirement_id,
                status=row.status.value,
                notes=row.notes,
                updated_at=_iso(row.updated_at),
            )
            for row in sorted(assessment.statuses, key=lambda r: r.requirement_id)
        ]
    return AssessmentResponse(
        id=assessment.id,
        organization_id=assessment.organization_id,
        name=assessment.name,
        jurisdictions=list(assessment.jurisdictions or []),
        profile=assessment.profile_data if isinstance(assessment.profile_data, dict) else {},
        overall_score=assessment.overall_score,
        mandatory_score=assessment.mandatory_score,
        category_scores=assessment.category_scores or {},
        risk_level=assessment.risk_level.value if assessment.risk_level else None,
        gap_count=assessment.gap_count,
        catalog_version=assessment.catalog_version,
        is_stale=assessment.catalog_version != CATALOG_VERSION,
        scored_at=_iso(assessment.scored_at),
        created_at=_iso(assessment.created_at),
        updated_at=_iso(assessment.updated_at),
        statuses=statuses,
    )


def _handle_unexpected(service: AssessmentService, action: str, e: Exception):
    service.db.rollback()
    logger.error(f"Error {action}: {e}")
    raise HTTPException(status_code=500, detail="Internal server error")


# =============================================================================
# API ENDPOINTS
# =============================================================================

@router.post("", response_model=AssessmentResponse)
async def create_assessment(
    request: CreateAssessmentRequest,
    service: AssessmentService = Depends(get_assessment_service),
):
    """Create an assessment and score it immediately."""
    try:
        assessment = service.create_assessment(
            name=request.name,
            jurisdictions=request.jurisdictions,
            profile=request.profile.to_profile(),
            organization_id=request.organization_id,
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        _handle_unexpected(service, "creating assessment", e)
    return _to_response(assessment)


@router.get("", response_model=AssessmentList)
async def list_assessments(
    organization_id: Optional[str] = Query(None),
    service: AssessmentService = Depends(get_assessment_service),
):
    """List assessments, newest first."""
    assessments = service.list_assessments(organization_id)
    return AssessmentList(
        assessments=[_to_response(a, include_statuses=False) for a in assessments],
        total=len(assessments),
    )


@router.get("/{assessment_id}", response_model=AssessmentResponse)
async def get_assessment(
    assessment_id: str,
    service: AssessmentService = Depends(get_assessment_service),
):
    """Get an assessment including its requirement statuses."""
    try:
        assessment = service.get_assessment(assessment_id)
    except AssessmentNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return _to_response(assessment)


@router.put("/{assessment_id}/profile", response_model=AssessmentResponse)
async def update_profile(
    assessment_id: str,
    profile: OperatorProfileModel,
    service: AssessmentService = Depends(get_assessment_service),
):
    """Replace the operator profile and rescore."""
    try:
        assessment = service.update_profile(assessment_id, profile.to_profile())
    except AssessmentNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        _handle_unexpected(service, "updating profile", e)
    return _to_response(assessment)


@router.put("/{assessment_id}/requirements/{requirement_id}", response_model=RequirementStatusResponse)
async def set_requirement_status(
    assessment_id: str,
    requirement_id: str,
    request: StatusUpdateRequest,
    service: AssessmentService = Depends(get_assessment_service),
):
    """Set the status of one requirement. Unknown requirement ids are rejected."""
    try:
        row = service.set_requirement_status(
            assessment_id, requirement_id, request.status, request.notes
        )
    except AssessmentNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        _handle_unexpected(service, "setting requirement status", e)
    return RequirementStatusResponse(
        requirement_id=row.requirement_id,
        status=row.status.value,
        notes=row.notes,
        updated_at=_iso(row.updated_at),
    )


@router.post("/{assessment_id}/statuses", response_model=BulkStatusResponse)
async def bulk_update_statuses(
    assessment_id: str,
    request: BulkStatusRequest,
    service: AssessmentService = Depends(get_assessment_service),
):
    """Apply several status updates and rescore once."""
    try:
        result = service.apply_status_updates(
            assessment_id,
            [u.model_dump() for u in request.updates],
            ignore_unknown=request.ignore_unknown,
        )
        assessment = service.get_assessment(assessment_id)
    except AssessmentNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        _handle_unexpected(service, "applying status updates", e)
    return BulkStatusResponse(
        updated=result["updated"],
        ignored=result["ignored"],
        overall_score=assessment.overall_score,
        risk_level=assessment.risk_level.value if assessment.risk_level else None,
    )


@router.get("/{assessment_id}/results")
async def get_results(
    assessment_id: str,
    service: AssessmentService = Depends(get_assessment_service),
):
    """Score, risk level and gap analysis against the current catalog."""
    try:
        return service.get_results(assessment_id)
    except AssessmentNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        _handle_unexpected(service, "computing results", e)


@router.get("/{assessment_id}/gaps")
async def get_gaps(
    assessment_id: str,
    service: AssessmentService = Depends(get_assessment_service),
):
    """Ordered gap list: high priority first, then requirement id."""
    try:
        results = service.get_results(assessment_id)
    except AssessmentNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        _handle_unexpected(service, "computing gaps", e)
    return {
        "assessment_id": assessment_id,
        "total": len(results["gaps"]),
        "gaps": results["gaps"],
    }


@router.delete("/{assessment_id}")
async def delete_assessment(
    assessment_id: str,
    service: AssessmentService = Depends(get_assessment_service),
):
    """Delete an assessment and all of its status rows."""
    try:
        service.delete_assessment(assessment_id)
    except AssessmentNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        _handle_unexpected(service, "deleting assessment", e)
    return {"deleted": True, "assessment_id": assessment_id}
