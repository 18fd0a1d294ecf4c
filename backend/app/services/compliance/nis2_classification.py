"""
NIS2 Entity Classification

Space operators fall under Annex I (sectors of high criticality). The
entity class follows the size-cap rule of Art. 3:
- large enterprises are essential
- medium enterprises are important, or essential when they operate
  ground infrastructure or satellite communications (critical
  infrastructure supporting other sectors)
- small enterprises are important
- micro enterprises are out of scope
Entities neither established in the EU nor serving it as third-country
operators are out of scope.
"""
from ...models.domain import ActivityType, NIS2Classification, OperatorProfile, SizeClass

CRITICAL_INFRASTRUCTURE_ACTIVITIES = frozenset({
    ActivityType.GROUND_INFRASTRUCTURE,
    ActivityType.SATELLITE_COMMUNICATIONS,
})


def operates_critical_infrastructure(profile: OperatorProfile) -> bool:
    return any(a in CRITICAL_INFRASTRUCTURE_ACTIVITIES for a in profile.activity_types)


def classify_nis2_entity(profile: OperatorProfile) -> NIS2Classification:
    if profile.is_eu_established is False and not profile.is_third_country:
        return NIS2Classification.OUT_OF_SCOPE

    size = profile.size_class
    if size is None or size == SizeClass.MICRO:
        return NIS2Classification.OUT_OF_SCOPE
    if size == SizeClass.LARGE:
        return NIS2Classification.ESSENTIAL
    if size == SizeClass.MEDIUM:
        if operates_critical_infrastructure(profile):
            return NIS2Classification.ESSENTIAL
        return NIS2Classification.IMPORTANT
    return NIS2Classification.IMPORTANT


def is_eligible_for_proportionality(profile: OperatorProfile) -> bool:
    """Whether Art. 21(1) proportionality can lighten the risk-management measures."""
    if profile.size_class == SizeClass.LARGE:
        return False
    if profile.size_class == SizeClass.MEDIUM and operates_critical_infrastructure(profile):
        return False
    return True
