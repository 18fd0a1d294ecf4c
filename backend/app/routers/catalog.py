"""
Caelex Compliance Engine - Requirement Catalog API Router

Read-only access to the static requirement tables and the applicability
resolver. Nothing here touches the database.
"""
from typing import List, Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from ..models.domain import Jurisdiction
from ..services.catalog import CATALOG_VERSION, get_catalog, get_full_catalog, get_requirement
from ..services.compliance import explain, nis2_class_for, resolve
from .common import OperatorProfileModel


router = APIRouter(prefix="/catalog", tags=["catalog"])


# =============================================================================
# PYDANTIC MODELS
# =============================================================================

class ResolveRequest(BaseModel):
    """Resolve a profile against one or more catalogs."""
    profile: OperatorProfileModel
    jurisdictions: Optional[List[Jurisdiction]] = Field(
        None, description="Catalogs to resolve against (default: all)"
    )


class ExcludedRequirement(BaseModel):
    requirement_id: str
    failed_clauses: List[str]


class ResolveResponse(BaseModel):
    catalog_version: str
    nis2_classification: Optional[str] = Field(
        None, description="Null while the profile lacks the fields needed to classify"
    )
    applicable: List[dict]
    excluded: List[ExcludedRequirement]


# =============================================================================
# API ENDPOINTS
# =============================================================================

@router.post("/resolve", response_model=ResolveResponse)
async def resolve_profile(request: ResolveRequest):
    """
    Return the requirements that bind a profile, in catalog order, plus the
    excluded requirements with the clauses that excluded them.
    """
    profile = request.profile.to_profile()
    nis2_class = nis2_class_for(profile)
    catalog = get_full_catalog(request.jurisdictions)
    applicable = resolve(profile, catalog)
    applicable_ids = {req.id for req in applicable}

    excluded = [
        ExcludedRequirement(requirement_id=req.id, failed_clauses=explain(profile, req))
        for req in catalog
        if req.id not in applicable_ids
    ]

    return ResolveResponse(
        catalog_version=CATALOG_VERSION,
        nis2_classification=nis2_class.value if nis2_class else None,
        applicable=[req.to_dict() for req in applicable],
        excluded=excluded,
    )


@router.get("/requirements/{requirement_id}")
async def get_catalog_requirement(requirement_id: str):
    """Get a single requirement by id."""
    requirement = get_requirement(requirement_id)
    if requirement is None:
        raise HTTPException(status_code=404, detail=f"Requirement not found: {requirement_id}")
    return requirement.to_dict()


@router.get("/{jurisdiction}")
async def list_catalog(jurisdiction: Jurisdiction):
    """List every requirement of one jurisdiction's catalog."""
    requirements = get_catalog(jurisdiction)
    return {
        "jurisdiction": jurisdiction.value,
        "catalog_version": CATALOG_VERSION,
        "total": len(requirements),
        "requirements": [req.to_dict() for req in requirements],
    }
