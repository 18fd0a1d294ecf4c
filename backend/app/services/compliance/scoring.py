"""
Compliance Scoring Engine

Aggregates applicable requirements and their statuses into:
- ComplianceScore (overall, mandatory-only, recommended-only, per category,
  per jurisdiction, letter grade)
- RiskLevel
- an ordered gap list

Scores are weighted averages on a 0-100 integer scale. A requirement's
weight is its severity weight, doubled when mandatory. A requirement with
no status row counts as not_assessed. An empty group scores 100 (nothing
is outstanding).
"""
from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, Iterable, List, Mapping, Optional, Union

from ...models.domain import (
    AssessmentResult,
    Category,
    ComplianceScore,
    ComplianceStatus,
    Effort,
    GapItem,
    GapPriority,
    Grade,
    Requirement,
    RequirementStatus,
    RiskLevel,
)


# =============================================================================
# CONFIGURATION
# =============================================================================

RISK_THRESHOLDS = (
    (80, RiskLevel.LOW),
    (60, RiskLevel.MEDIUM),
    (40, RiskLevel.HIGH),
)

GRADE_THRESHOLDS = (
    (90, Grade.A),
    (80, Grade.B),
    (70, Grade.C),
    (60, Grade.D),
)

HIGH_WEIGHT_CATEGORY = 3

GAP_STATUSES = frozenset({ComplianceStatus.NON_COMPLIANT, ComplianceStatus.NOT_ASSESSED})

EFFORT_BY_CATEGORY: Dict[Category, Effort] = {
    Category.SAFETY: Effort.HIGH,
    Category.INSURANCE_LIABILITY: Effort.HIGH,
    Category.REGISTRATION: Effort.LOW,
}

PRIORITY_ORDER = {GapPriority.HIGH: 0, GapPriority.MEDIUM: 1, GapPriority.LOW: 2}

RISK_ORDER = [RiskLevel.LOW, RiskLevel.MEDIUM, RiskLevel.HIGH, RiskLevel.CRITICAL]

StatusInput = Union[Mapping[str, ComplianceStatus], Iterable[RequirementStatus]]


# =============================================================================
# HELPERS
# =============================================================================

def round_half_up(value: Union[Decimal, int, float, str]) -> int:
    """Round to an integer with halves away from zero. Floats go through str()."""
    if not isinstance(value, Decimal):
        value = Decimal(str(value))
    return int(value.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def status_map(statuses: Optional[StatusInput]) -> Dict[str, ComplianceStatus]:
    """Normalize statuses to {requirement_id: ComplianceStatus}."""
    if statuses is None:
        return {}
    if isinstance(statuses, Mapping):
        return {rid: ComplianceStatus(s) for rid, s in statuses.items()}
    return {s.requirement_id: ComplianceStatus(s.status) for s in statuses}


def _status_of(req: Requirement, statuses: Dict[str, ComplianceStatus]) -> ComplianceStatus:
    return statuses.get(req.id, ComplianceStatus.NOT_ASSESSED)


def weighted_score(requirements: List[Requirement], statuses: Dict[str, ComplianceStatus]) -> int:
    total_weight = sum(req.weight for req in requirements)
    if total_weight == 0:
        return 100
    earned = sum(
        Decimal(req.weight) * Decimal(str(_status_of(req, statuses).contribution))
        for req in requirements
    )
    return round_half_up(earned * 100 / Decimal(total_weight))


def grade_for(score: int) -> Grade:
    for threshold, grade in GRADE_THRESHOLDS:
        if score >= threshold:
            return grade
    return Grade.F


# =============================================================================
# SCORING
# =============================================================================

def score(applicable: List[Requirement], statuses: Optional[StatusInput] = None) -> ComplianceScore:
    statuses = status_map(statuses)

    by_category: Dict[str, List[Requirement]] = {}
    by_jurisdiction: Dict[str, List[Requirement]] = {}
    for req in applicable:
        by_category.setdefault(req.category.value, []).append(req)
        by_jurisdiction.setdefault(req.jurisdiction.value, []).append(req)

    overall = weighted_score(applicable, statuses)
    return ComplianceScore(
        overall=overall,
        mandatory=weighted_score([r for r in applicable if r.mandatory], statuses),
        recommended=weighted_score([r for r in applicable if not r.mandatory], statuses),
        by_category={k: weighted_score(v, statuses) for k, v in by_category.items()},
        by_jurisdiction={k: weighted_score(v, statuses) for k, v in by_jurisdiction.items()},
        grade=grade_for(overall),
    )


def risk_level(
    applicable: List[Requirement],
    statuses: Optional[StatusInput],
    overall: int,
) -> RiskLevel:
    """
    Map the overall score to a risk level.

    Any mandatory requirement left non_compliant or not_assessed raises the
    level to at least HIGH regardless of score.
    """
    level = RiskLevel.CRITICAL
    for threshold, candidate in RISK_THRESHOLDS:
        if overall >= threshold:
            level = candidate
            break

    statuses = status_map(statuses)
    unresolved_mandatory = any(
        req.mandatory and _status_of(req, statuses) in GAP_STATUSES
        for req in applicable
    )
    if unresolved_mandatory and RISK_ORDER.index(level) < RISK_ORDER.index(RiskLevel.HIGH):
        level = RiskLevel.HIGH
    return level


# =============================================================================
# GAP ANALYSIS
# =============================================================================

def gap_priority(req: Requirement) -> GapPriority:
    high_weight = req.category.weight >= HIGH_WEIGHT_CATEGORY
    if req.mandatory and high_weight:
        return GapPriority.HIGH
    if req.mandatory or high_weight:
        return GapPriority.MEDIUM
    return GapPriority.LOW


def gap_effort(req: Requirement) -> Effort:
    return EFFORT_BY_CATEGORY.get(req.category, Effort.MEDIUM)


def _recommendation(req: Requirement, status: ComplianceStatus) -> str:
    if req.guidance:
        return req.guidance
    if status == ComplianceStatus.NOT_ASSESSED:
        return f"Assess compliance with {req.article_ref} ({req.title})"
    return f"Implement measures to satisfy {req.article_ref} ({req.title})"


def gap_analysis(applicable: List[Requirement], statuses: Optional[StatusInput] = None) -> List[GapItem]:
    """Every non_compliant / not_assessed requirement, high priority first, then by id."""
    statuses = status_map(statuses)
    gaps = []
    for req in applicable:
        status = _status_of(req, statuses)
        if status not in GAP_STATUSES:
            continue
        gaps.append(GapItem(
            requirement_id=req.id,
            jurisdiction=req.jurisdiction,
            article_ref=req.article_ref,
            title=req.title,
            category=req.category,
            mandatory=req.mandatory,
            status=status,
            priority=gap_priority(req),
            effort=gap_effort(req),
            recommendation=_recommendation(req, status),
        ))
    gaps.sort(key=lambda g: (PRIORITY_ORDER[g.priority], g.requirement_id))
    return gaps


def assess(applicable: List[Requirement], statuses: Optional[StatusInput] = None) -> AssessmentResult:
    """Score, risk level and gaps in one pass over the same status map."""
    statuses = status_map(statuses)
    compliance_score = score(applicable, statuses)
    return AssessmentResult(
        score=compliance_score,
        risk_level=risk_level(applicable, statuses, compliance_score.overall),
        gaps=gap_analysis(applicable, statuses),
        applicable_count=len(applicable),
    )
