"""
Operator profile (de)serialization.

Used for JSON read back from storage. Caller input is validated by the
pydantic request models instead. Malformed fields are dropped with a
warning and the rest of the profile is kept.
"""
import json
import logging
from typing import Any, Dict, Optional

from ...models.domain import (
    ActivityType,
    OperatorProfile,
    OrbitRegime,
    OperatorType,
    PROFILE_FLAGS,
    SizeClass,
)

logger = logging.getLogger(__name__)

ENUM_FIELDS = {
    "operator_type": OperatorType,
    "size_class": SizeClass,
    "orbit_type": OrbitRegime,
}
NUMERIC_FIELDS = ("mass_kg", "altitude_km")


def _drop(message: str):
    logger.warning(f"Ignoring malformed stored profile field: {message}")


def profile_from_dict(data: Any) -> OperatorProfile:
    if isinstance(data, str):
        try:
            data = json.loads(data)
        except ValueError:
            _drop("profile is not valid JSON")
            return OperatorProfile()
    if data is None:
        return OperatorProfile()
    if not isinstance(data, dict):
        _drop(f"profile must be an object, got {type(data).__name__}")
        return OperatorProfile()

    kwargs: Dict[str, Any] = {}

    for name, enum_cls in ENUM_FIELDS.items():
        raw = data.get(name)
        if raw is None:
            continue
        try:
            kwargs[name] = enum_cls(raw)
        except ValueError:
            _drop(f"{name}={raw!r} is not a valid {enum_cls.__name__}")

    raw_activities = data.get("activity_types") or []
    if not isinstance(raw_activities, list):
        _drop("activity_types must be a list")
        raw_activities = []
    activities = []
    for raw in raw_activities:
        try:
            activity = ActivityType(raw)
        except ValueError:
            _drop(f"activity_types contains unknown value {raw!r}")
            continue
        if activity not in activities:
            activities.append(activity)
    kwargs["activity_types"] = activities

    for name in NUMERIC_FIELDS:
        raw = data.get(name)
        if raw is None:
            continue
        if isinstance(raw, bool) or not isinstance(raw, (int, float)) or raw < 0:
            _drop(f"{name} must be a non-negative number")
            continue
        kwargs[name] = float(raw)

    count = data.get("satellite_count")
    if count is not None:
        if isinstance(count, bool) or not isinstance(count, int) or count < 0:
            _drop("satellite_count must be a non-negative integer")
        else:
            kwargs["satellite_count"] = count

    for flag in PROFILE_FLAGS:
        raw = data.get(flag)
        if raw is None:
            continue
        if not isinstance(raw, bool):
            _drop(f"{flag} must be a boolean")
            continue
        kwargs[flag] = raw

    return OperatorProfile(**kwargs)


def profile_to_dict(profile: Optional[OperatorProfile]) -> Dict[str, Any]:
    return (profile or OperatorProfile()).to_dict()
