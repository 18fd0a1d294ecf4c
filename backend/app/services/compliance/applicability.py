"""
Applicability Resolver

Filters a requirement catalog against an operator profile.

Rules:
- Output preserves catalog order; the function is pure and idempotent.
- A requirement without an applicability rule is a universal baseline.
- A clause only fails on a KNOWN profile value that contradicts it. An
  unknown field (None / empty activity list) never excludes a requirement.
"""
from typing import Iterable, List, Optional

from ...models.domain import (
    ApplicabilityRule,
    NIS2Classification,
    OperatorProfile,
    Requirement,
)
from .nis2_classification import classify_nis2_entity


def nis2_class_for(profile: OperatorProfile) -> Optional[NIS2Classification]:
    """NIS2 class used by rule matching; None when it cannot be determined yet."""
    if profile.size_class is None:
        definitely_out = profile.is_eu_established is False and profile.is_third_country is False
        if not definitely_out:
            return None
    return classify_nis2_entity(profile)


def failed_clauses(
    rule: Optional[ApplicabilityRule],
    profile: OperatorProfile,
    nis2_class: Optional[NIS2Classification] = None,
) -> List[str]:
    """Names of the rule clauses the profile contradicts. Empty means applicable."""
    if rule is None:
        return []

    failures = []

    if rule.operator_types is not None and profile.operator_type is not None:
        if profile.operator_type not in rule.operator_types:
            failures.append("operator_types")

    if rule.excluded_operator_types is not None and profile.operator_type is not None:
        if profile.operator_type in rule.excluded_operator_types:
            failures.append("excluded_operator_types")

    if rule.activity_types is not None and profile.activity_types:
        if not any(a in rule.activity_types for a in profile.activity_types):
            failures.append("activity_types")

    if rule.orbit_types is not None and profile.orbit_type is not None:
        if profile.orbit_type not in rule.orbit_types:
            failures.append("orbit_types")

    if rule.size_classes is not None and profile.size_class is not None:
        if profile.size_class not in rule.size_classes:
            failures.append("size_classes")

    if profile.mass_kg is not None:
        if rule.mass_above_kg is not None and not profile.mass_kg > rule.mass_above_kg:
            failures.append("mass_above_kg")
        if rule.mass_up_to_kg is not None and not profile.mass_kg <= rule.mass_up_to_kg:
            failures.append("mass_up_to_kg")

    for flag in rule.required_flags:
        if getattr(profile, flag) is False:
            failures.append(flag)

    if rule.nis2_classifications is not None and nis2_class is not None:
        if nis2_class not in rule.nis2_classifications:
            failures.append("nis2_classifications")

    return failures


def is_applicable(
    requirement: Requirement,
    profile: OperatorProfile,
    nis2_class: Optional[NIS2Classification] = None,
) -> bool:
    return not failed_clauses(requirement.applicability, profile, nis2_class)


def resolve(profile: OperatorProfile, catalog: Iterable[Requirement]) -> List[Requirement]:
    """Return the requirements of `catalog` that bind `profile`, in catalog order."""
    nis2_class = nis2_class_for(profile)
    return [req for req in catalog if is_applicable(req, profile, nis2_class)]


def explain(profile: OperatorProfile, requirement: Requirement) -> List[str]:
    """Why `requirement` does not apply to `profile` (empty when it does)."""
    return failed_clauses(requirement.applicability, profile, nis2_class_for(profile))
