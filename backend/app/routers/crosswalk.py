"""
Caelex Compliance Engine - Cross-Jurisdiction Crosswalk API Router

Reports implementation overlap between two frameworks for a profile.
Only requirements applicable to the profile on both sides are paired.
"""
from typing import List

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from ..models.domain import Jurisdiction
from ..services.catalog import get_catalog, get_mapping
from ..services.compliance import crosswalk, resolve, summarize_overlap
from .common import OperatorProfileModel


router = APIRouter(prefix="/crosswalk", tags=["crosswalk"])


class CrosswalkRequest(BaseModel):
    """Request model for an overlap analysis."""
    jurisdiction_a: Jurisdiction = Field(..., description="First framework")
    jurisdiction_b: Jurisdiction = Field(Jurisdiction.EU_SPACE_ACT, description="Second framework")
    profile: OperatorProfileModel


class CrosswalkResponse(BaseModel):
    jurisdiction_a: str
    jurisdiction_b: str
    applicable_a: int
    applicable_b: int
    overlaps: List[dict]
    summary: dict


@router.post("", response_model=CrosswalkResponse)
async def run_crosswalk(request: CrosswalkRequest):
    """
    Pair applicable requirements of two frameworks using the static mapping
    table and estimate the implementation weeks saved.
    """
    if request.jurisdiction_a == request.jurisdiction_b:
        raise HTTPException(status_code=400, detail="Crosswalk needs two different jurisdictions")
    try:
        mapping = get_mapping(request.jurisdiction_a, request.jurisdiction_b)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    profile = request.profile.to_profile()
    applicable_a = resolve(profile, get_catalog(request.jurisdiction_a))
    applicable_b = resolve(profile, get_catalog(request.jurisdiction_b))
    overlaps = crosswalk(applicable_a, applicable_b, mapping)

    return CrosswalkResponse(
        jurisdiction_a=request.jurisdiction_a.value,
        jurisdiction_b=request.jurisdiction_b.value,
        applicable_a=len(applicable_a),
        applicable_b=len(applicable_b),
        overlaps=[o.to_dict() for o in overlaps],
        summary=summarize_overlap(overlaps, min(len(applicable_a), len(applicable_b))),
    )
