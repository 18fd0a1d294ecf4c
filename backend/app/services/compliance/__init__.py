"""
Compliance Engine Services

Profile -> Applicability Resolver -> applicable requirements
applicable requirements + statuses -> Scoring Engine -> score / risk / gaps

- resolve / explain: applicability filtering
- score / risk_level / gap_analysis / assess: scoring engine
- crosswalk / summarize_overlap: cross-framework overlap
- calculate_deorbit_deadline: post-mission disposal deadlines
- classify_nis2_entity: NIS2 essential / important classification
- AssessmentService: persistence and status store
"""

from .applicability import resolve, explain, is_applicable, nis2_class_for
from .scoring import score, risk_level, gap_analysis, assess
from .crosswalk import crosswalk, summarize_overlap, WEEKS_SAVED
from .deorbit import calculate_deorbit_deadline, parse_orbit_regime
from .nis2_classification import classify_nis2_entity, is_eligible_for_proportionality
from .profile import profile_from_dict, profile_to_dict
from .result_cache import ExpiringCache
from .errors import (
    ComplianceError,
    AssessmentNotFoundError,
    UnknownRequirementError,
)
from .assessment_service import AssessmentService

__all__ = [
    'resolve',
    'explain',
    'is_applicable',
    'nis2_class_for',
    'score',
    'risk_level',
    'gap_analysis',
    'assess',
    'crosswalk',
    'summarize_overlap',
    'WEEKS_SAVED',
    'calculate_deorbit_deadline',
    'parse_orbit_regime',
    'classify_nis2_entity',
    'is_eligible_for_proportionality',
    'profile_from_dict',
    'profile_to_dict',
    'ExpiringCache',
    'ComplianceError',
    'AssessmentNotFoundError',
    'UnknownRequirementError',
    'AssessmentService',
]
