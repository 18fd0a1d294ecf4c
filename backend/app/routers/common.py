"""
Caelex Compliance Engine - Shared Request Models and Dependencies
"""
from typing import List, Optional

from fastapi import Depends, Request
from pydantic import BaseModel, Field
from sqlalchemy.orm import Session

from ..database import get_db
from ..models.domain import (
    ActivityType,
    OperatorProfile,
    OperatorType,
    OrbitRegime,
    SizeClass,
)
from ..services.compliance import AssessmentService, ExpiringCache


class OperatorProfileModel(BaseModel):
    """Operator profile as supplied by callers. Unknown fields may be omitted."""
    operator_type: Optional[OperatorType] = Field(None, description="Operator role")
    activity_types: List[ActivityType] = Field(default_factory=list)
    size_class: Optional[SizeClass] = Field(None, description="EU SME size class")
    orbit_type: Optional[OrbitRegime] = None
    mass_kg: Optional[float] = Field(None, ge=0)
    altitude_km: Optional[float] = Field(None, ge=0)

    # Jurisdiction nexus
    is_eu_established: Optional[bool] = None
    is_third_country: Optional[bool] = None
    has_uk_nexus: Optional[bool] = None
    launches_from_uk: Optional[bool] = None
    involves_people: Optional[bool] = None
    has_us_nexus: Optional[bool] = None

    # Mission characteristics
    is_constellation: Optional[bool] = None
    satellite_count: Optional[int] = Field(None, ge=0)
    has_propulsion: Optional[bool] = None
    provides_remote_sensing: Optional[bool] = None
    is_commercial: Optional[bool] = None

    def to_profile(self) -> OperatorProfile:
        data = self.model_dump()
        data["activity_types"] = list(dict.fromkeys(data["activity_types"]))
        return OperatorProfile(**data)


def get_results_cache(request: Request) -> ExpiringCache:
    """The application-owned result cache."""
    return request.app.state.results_cache


def get_assessment_service(
    db: Session = Depends(get_db),
    cache: ExpiringCache = Depends(get_results_cache),
) -> AssessmentService:
    return AssessmentService(db, cache)
