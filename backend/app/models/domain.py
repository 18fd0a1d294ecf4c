"""
Caelex Compliance Engine - Domain Models

Plain in-memory records shared by the catalog, resolver, scoring engine,
crosswalk and calculators. Requirements are reference data created at
import time and never mutated; everything else is built per request.
"""

from __future__ import annotations
from dataclasses import dataclass, field, asdict
from datetime import date
from enum import Enum
from typing import Dict, List, Optional, Any, Tuple


# =============================================================================
# ENUMS
# =============================================================================

class Jurisdiction(str, Enum):
    EU_SPACE_ACT = "eu_space_act"
    NIS2 = "nis2"
    UK_SIA = "uk_sia"
    US = "us"


class OperatorType(str, Enum):
    SPACECRAFT = "spacecraft"
    LAUNCH_VEHICLE = "launch_vehicle"
    LAUNCH_SITE = "launch_site"
    ISOS = "isos"  # in-space operations and services
    DATA_PROVIDER = "data_provider"


class ActivityType(str, Enum):
    SATELLITE_COMMUNICATIONS = "satellite_communications"
    EARTH_OBSERVATION = "earth_observation"
    NAVIGATION = "navigation"
    LAUNCH = "launch"
    REENTRY = "reentry"
    IN_ORBIT_SERVICING = "in_orbit_servicing"
    GROUND_INFRASTRUCTURE = "ground_infrastructure"
    SPACE_SITUATIONAL_AWARENESS = "space_situational_awareness"
    SCIENTIFIC_RESEARCH = "scientific_research"
    SUBORBITAL = "suborbital"


class OrbitRegime(str, Enum):
    LEO = "LEO"
    MEO = "MEO"
    GEO = "GEO"
    HEO = "HEO"
    CISLUNAR = "cislunar"
    DEEP_SPACE = "deep_space"


class SizeClass(str, Enum):
    MICRO = "micro"
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


class ComplianceStatus(str, Enum):
    COMPLIANT = "compliant"
    PARTIAL = "partial"
    NON_COMPLIANT = "non_compliant"
    NOT_ASSESSED = "not_assessed"

    @property
    def contribution(self) -> float:
        return STATUS_CONTRIBUTIONS[self]


class Severity(str, Enum):
    CRITICAL = "critical"
    MAJOR = "major"
    MINOR = "minor"

    @property
    def weight(self) -> int:
        return SEVERITY_WEIGHTS[self]


class Category(str, Enum):
    """Shared requirement vocabulary across all jurisdictions."""
    AUTHORIZATION = "authorization"
    REGISTRATION = "registration"
    DEBRIS_MITIGATION = "debris_mitigation"
    CYBERSECURITY = "cybersecurity"
    INCIDENT_REPORTING = "incident_reporting"
    SAFETY = "safety"
    INSURANCE_LIABILITY = "insurance_liability"
    ENVIRONMENTAL = "environmental"
    SPECTRUM = "spectrum"
    SUPPLY_CHAIN = "supply_chain"
    BUSINESS_CONTINUITY = "business_continuity"
    GOVERNANCE = "governance"
    SUPERVISION = "supervision"
    REMOTE_SENSING = "remote_sensing"
    NATIONAL_SECURITY = "national_security"

    @property
    def weight(self) -> int:
        return CATEGORY_WEIGHTS[self]


class RiskLevel(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class GapPriority(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class Effort(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class EffortType(str, Enum):
    """How much work a mapped requirement pair shares across frameworks."""
    SINGLE_IMPLEMENTATION = "single_implementation"
    PARTIAL_OVERLAP = "partial_overlap"
    SEPARATE_EFFORT = "separate_effort"


class NIS2Classification(str, Enum):
    ESSENTIAL = "essential"
    IMPORTANT = "important"
    OUT_OF_SCOPE = "out_of_scope"


class DeorbitCompliance(str, Enum):
    COMPLIANT = "compliant"
    AT_RISK = "at_risk"
    NON_COMPLIANT = "non_compliant"


class Grade(str, Enum):
    A = "A"
    B = "B"
    C = "C"
    D = "D"
    F = "F"


# =============================================================================
# WEIGHT TABLES
# =============================================================================

STATUS_CONTRIBUTIONS: Dict[ComplianceStatus, float] = {
    ComplianceStatus.COMPLIANT: 1.0,
    ComplianceStatus.PARTIAL: 0.5,
    ComplianceStatus.NON_COMPLIANT: 0.0,
    ComplianceStatus.NOT_ASSESSED: 0.0,
}

SEVERITY_WEIGHTS: Dict[Severity, int] = {
    Severity.CRITICAL: 3,
    Severity.MAJOR: 2,
    Severity.MINOR: 1,
}

CATEGORY_WEIGHTS: Dict[Category, int] = {
    Category.AUTHORIZATION: 3,
    Category.DEBRIS_MITIGATION: 3,
    Category.CYBERSECURITY: 3,
    Category.SAFETY: 3,
    Category.INSURANCE_LIABILITY: 3,
    Category.INCIDENT_REPORTING: 2,
    Category.SPECTRUM: 2,
    Category.SUPPLY_CHAIN: 2,
    Category.BUSINESS_CONTINUITY: 2,
    Category.GOVERNANCE: 2,
    Category.REMOTE_SENSING: 2,
    Category.NATIONAL_SECURITY: 2,
    Category.REGISTRATION: 1,
    Category.ENVIRONMENTAL: 1,
    Category.SUPERVISION: 1,
}


# =============================================================================
# OPERATOR PROFILE
# =============================================================================

@dataclass
class OperatorProfile:
    """
    The entity being assessed.

    Any field may be left unknown (None / empty). Unknown fields never
    exclude a requirement; only a known value that contradicts a rule does.
    """
    operator_type: Optional[OperatorType] = None
    activity_types: List[ActivityType] = field(default_factory=list)
    size_class: Optional[SizeClass] = None
    orbit_type: Optional[OrbitRegime] = None
    mass_kg: Optional[float] = None
    altitude_km: Optional[float] = None

    # Jurisdiction nexus
    is_eu_established: Optional[bool] = None
    is_third_country: Optional[bool] = None
    has_uk_nexus: Optional[bool] = None
    launches_from_uk: Optional[bool] = None
    involves_people: Optional[bool] = None
    has_us_nexus: Optional[bool] = None

    # Mission characteristics
    is_constellation: Optional[bool] = None
    satellite_count: Optional[int] = None
    has_propulsion: Optional[bool] = None
    provides_remote_sensing: Optional[bool] = None
    is_commercial: Optional[bool] = None

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["operator_type"] = self.operator_type.value if self.operator_type else None
        data["activity_types"] = [a.value for a in self.activity_types]
        data["size_class"] = self.size_class.value if self.size_class else None
        data["orbit_type"] = self.orbit_type.value if self.orbit_type else None
        return data


PROFILE_FLAGS = (
    "is_eu_established",
    "is_third_country",
    "has_uk_nexus",
    "launches_from_uk",
    "involves_people",
    "has_us_nexus",
    "is_constellation",
    "has_propulsion",
    "provides_remote_sensing",
    "is_commercial",
)


# =============================================================================
# REQUIREMENTS
# =============================================================================

@dataclass(frozen=True)
class ApplicabilityRule:
    """
    Declarative applicability predicate.

    Every clause that is set must hold. Clause semantics:
    - operator_types / orbit_types / size_classes: membership
    - excluded_operator_types: non-membership
    - activity_types: any overlap with the profile's activities
    - mass_above_kg: strictly greater than; mass_up_to_kg: less or equal
    - required_flags: named boolean profile attributes must be True
    - nis2_classifications: membership of the profile's NIS2 entity class
    """
    operator_types: Optional[Tuple[OperatorType, ...]] = None
    excluded_operator_types: Optional[Tuple[OperatorType, ...]] = None
    activity_types: Optional[Tuple[ActivityType, ...]] = None
    orbit_types: Optional[Tuple[OrbitRegime, ...]] = None
    size_classes: Optional[Tuple[SizeClass, ...]] = None
    mass_above_kg: Optional[float] = None
    mass_up_to_kg: Optional[float] = None
    required_flags: Tuple[str, ...] = ()
    nis2_classifications: Optional[Tuple[NIS2Classification, ...]] = None

    def __post_init__(self):
        unknown = [f for f in self.required_flags if f not in PROFILE_FLAGS]
        if unknown:
            raise ValueError(f"Unknown profile flags in applicability rule: {unknown}")


@dataclass(frozen=True)
class Requirement:
    id: str
    jurisdiction: Jurisdiction
    article_ref: str
    title: str
    category: Category
    mandatory: bool = True
    severity: Severity = Severity.MAJOR
    applicability: Optional[ApplicabilityRule] = None
    description: str = ""
    implementation_weeks: Optional[int] = None
    guidance: str = ""
    eu_space_act_refs: Tuple[str, ...] = ()

    @property
    def weight(self) -> int:
        """Scoring weight: severity weight, doubled for mandatory requirements."""
        return self.severity.weight * (2 if self.mandatory else 1)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "jurisdiction": self.jurisdiction.value,
            "article_ref": self.article_ref,
            "title": self.title,
            "category": self.category.value,
            "mandatory": self.mandatory,
            "severity": self.severity.value,
            "description": self.description,
            "implementation_weeks": self.implementation_weeks,
            "guidance": self.guidance,
            "eu_space_act_refs": list(self.eu_space_act_refs),
        }


@dataclass
class RequirementStatus:
    requirement_id: str
    status: ComplianceStatus = ComplianceStatus.NOT_ASSESSED
    notes: Optional[str] = None
    assessment_id: Optional[str] = None


# =============================================================================
# SCORING OUTPUT
# =============================================================================

@dataclass
class ComplianceScore:
    overall: int
    mandatory: int
    recommended: int
    by_category: Dict[str, int] = field(default_factory=dict)
    by_jurisdiction: Dict[str, int] = field(default_factory=dict)
    grade: Grade = Grade.F

    def to_dict(self) -> Dict[str, Any]:
        return {
            "overall": self.overall,
            "mandatory": self.mandatory,
            "recommended": self.recommended,
            "by_category": dict(self.by_category),
            "by_jurisdiction": dict(self.by_jurisdiction),
            "grade": self.grade.value,
        }


@dataclass
class GapItem:
    requirement_id: str
    jurisdiction: Jurisdiction
    article_ref: str
    title: str
    category: Category
    mandatory: bool
    status: ComplianceStatus
    priority: GapPriority
    effort: Effort
    recommendation: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "requirement_id": self.requirement_id,
            "jurisdiction": self.jurisdiction.value,
            "article_ref": self.article_ref,
            "title": self.title,
            "category": self.category.value,
            "mandatory": self.mandatory,
            "status": self.status.value,
            "priority": self.priority.value,
            "effort": self.effort.value,
            "recommendation": self.recommendation,
        }


@dataclass
class AssessmentResult:
    score: ComplianceScore
    risk_level: RiskLevel
    gaps: List[GapItem] = field(default_factory=list)
    applicable_count: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "score": self.score.to_dict(),
            "risk_level": self.risk_level.value,
            "gaps": [g.to_dict() for g in self.gaps],
            "applicable_count": self.applicable_count,
        }


# =============================================================================
# CROSSWALK
# =============================================================================

@dataclass(frozen=True)
class CrosswalkEntry:
    """One row of a static cross-framework mapping table."""
    source_id: str
    target_id: str
    effort_type: EffortType
    description: str = ""


@dataclass
class OverlapRequirement:
    requirement_a: str
    requirement_b: str
    jurisdiction_a: Jurisdiction
    jurisdiction_b: Jurisdiction
    effort_type: EffortType
    weeks_saved: float
    description: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "requirement_a": self.requirement_a,
            "requirement_b": self.requirement_b,
            "jurisdiction_a": self.jurisdiction_a.value,
            "jurisdiction_b": self.jurisdiction_b.value,
            "effort_type": self.effort_type.value,
            "weeks_saved": self.weeks_saved,
            "description": self.description,
        }


# =============================================================================
# DEORBIT
# =============================================================================

@dataclass
class DeorbitCalculation:
    orbit_regime: OrbitRegime
    altitude_km: Optional[float]
    launch_date: date
    mission_duration_years: float
    required_disposal_years: int
    applicable_rule: str
    end_of_mission_date: date
    disposal_deadline: date
    days_remaining: int
    compliance_status: DeorbitCompliance
    planned_disposal_years: Optional[float] = None
    warnings: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "orbit_regime": self.orbit_regime.value,
            "altitude_km": self.altitude_km,
            "launch_date": self.launch_date.isoformat(),
            "mission_duration_years": self.mission_duration_years,
            "required_disposal_years": self.required_disposal_years,
            "applicable_rule": self.applicable_rule,
            "end_of_mission_date": self.end_of_mission_date.isoformat(),
            "disposal_deadline": self.disposal_deadline.isoformat(),
            "days_remaining": self.days_remaining,
            "compliance_status": self.compliance_status.value,
            "planned_disposal_years": self.planned_disposal_years,
            "warnings": list(self.warnings),
        }
