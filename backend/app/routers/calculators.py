"""
Caelex Compliance Engine - Calculators API Router

Stateless rule calculators:
- deorbit: post-mission disposal deadline (5-year LEO / 25-year rule)
- nis2-classification: essential / important entity class and
  proportionality eligibility
"""
from datetime import date
from typing import Optional

from fastapi import APIRouter, HTTPException, Query
from pydantic import BaseModel

from ..models.domain import OrbitRegime
from ..services.compliance import (
    calculate_deorbit_deadline,
    classify_nis2_entity,
    is_eligible_for_proportionality,
)
from .common import OperatorProfileModel


router = APIRouter(prefix="/calculators", tags=["calculators"])


class NIS2ClassificationResponse(BaseModel):
    classification: str
    proportionality_eligible: bool


@router.get("/deorbit")
async def deorbit_deadline(
    orbit_regime: OrbitRegime = Query(..., description="LEO, MEO, GEO, HEO, cislunar or deep_space"),
    launch_date: date = Query(...),
    mission_duration_years: float = Query(..., gt=0),
    altitude_km: Optional[float] = Query(None, ge=0),
    planned_disposal_years: Optional[float] = Query(None, ge=0),
    has_propulsion: Optional[bool] = Query(None),
    is_constellation: bool = Query(False),
    satellite_count: Optional[int] = Query(None, ge=0),
):
    """Compute end of mission, disposal deadline and compliance status."""
    try:
        result = calculate_deorbit_deadline(
            orbit_regime=orbit_regime,
            altitude_km=altitude_km,
            launch_date=launch_date,
            mission_duration_years=mission_duration_years,
            planned_disposal_years=planned_disposal_years,
            has_propulsion=has_propulsion,
            is_constellation=is_constellation,
            satellite_count=satellite_count,
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return result.to_dict()


@router.post("/nis2-classification", response_model=NIS2ClassificationResponse)
async def nis2_classification(profile: OperatorProfileModel):
    """Classify the operator under NIS2 Art. 3."""
    operator_profile = profile.to_profile()
    return NIS2ClassificationResponse(
        classification=classify_nis2_entity(operator_profile).value,
        proportionality_eligible=is_eligible_for_proportionality(operator_profile),
    )
