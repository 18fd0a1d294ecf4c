"""
Deorbit Deadline Calculator

Post-mission disposal periods:
- LEO (regime LEO, or altitude below 2,000 km): 5 years, FCC 47 CFR
  § 25.114(d)(14)(iv)
- every other regime: 25 years, IADC guideline

end_of_mission = launch_date + mission duration
disposal_deadline = end_of_mission + required disposal years

Orbit regime strings are validated by parse_orbit_regime() (or the API
layer's enum) before they reach calculate_deorbit_deadline().
"""
from datetime import date
from typing import Optional

from dateutil.relativedelta import relativedelta

from ...models.domain import DeorbitCalculation, DeorbitCompliance, OrbitRegime


# =============================================================================
# CONFIGURATION
# =============================================================================

LEO_ALTITUDE_LIMIT_KM = 2000
LEO_DISPOSAL_YEARS = 5
DEFAULT_DISPOSAL_YEARS = 25
LARGE_CONSTELLATION_SIZE = 10

LEO_RULE = "FCC 5-Year Post-Mission Disposal Rule (47 CFR § 25.114(d)(14)(iv))"
DEFAULT_RULE = "IADC 25-Year Post-Mission Disposal Guideline"


def parse_orbit_regime(value: str) -> OrbitRegime:
    """Validate an orbit regime string. Raises ValueError listing valid values."""
    try:
        return OrbitRegime(value)
    except ValueError:
        valid = [r.value for r in OrbitRegime]
        raise ValueError(f"Invalid orbit regime '{value}'. Must be one of: {valid}")


def is_leo(orbit_regime: OrbitRegime, altitude_km: Optional[float] = None) -> bool:
    if orbit_regime == OrbitRegime.LEO:
        return True
    return altitude_km is not None and altitude_km < LEO_ALTITUDE_LIMIT_KM


def _add_years(start: date, years: float) -> date:
    """Add a possibly fractional number of years, rounded to whole months."""
    months = int(round(years * 12))
    return start + relativedelta(months=months)


def calculate_deorbit_deadline(
    orbit_regime: OrbitRegime,
    altitude_km: Optional[float],
    launch_date: date,
    mission_duration_years: float,
    planned_disposal_years: Optional[float] = None,
    has_propulsion: Optional[bool] = None,
    is_constellation: bool = False,
    satellite_count: Optional[int] = None,
    today: Optional[date] = None,
) -> DeorbitCalculation:
    if mission_duration_years <= 0:
        raise ValueError("mission_duration_years must be positive")
    if planned_disposal_years is not None and planned_disposal_years < 0:
        raise ValueError("planned_disposal_years cannot be negative")

    today = today or date.today()

    leo = is_leo(orbit_regime, altitude_km)
    required_years = LEO_DISPOSAL_YEARS if leo else DEFAULT_DISPOSAL_YEARS
    rule = LEO_RULE if leo else DEFAULT_RULE

    end_of_mission = _add_years(launch_date, mission_duration_years)
    deadline = end_of_mission + relativedelta(years=required_years)
    days_remaining = (deadline - today).days

    warnings = []
    if has_propulsion is False:
        warnings.append(
            "No propulsion system: disposal relies on natural orbital decay, "
            "which must be demonstrated to meet the deadline"
        )
    if is_constellation and satellite_count is not None and satellite_count > LARGE_CONSTELLATION_SIZE:
        warnings.append(
            f"Large constellation ({satellite_count} satellites): enhanced disposal "
            f"reliability and coordination requirements may apply"
        )

    if planned_disposal_years is not None:
        if planned_disposal_years > required_years:
            status = DeorbitCompliance.NON_COMPLIANT
            warnings.append(
                f"Planned disposal of {planned_disposal_years:g} years exceeds the "
                f"{required_years}-year limit"
            )
        else:
            status = DeorbitCompliance.COMPLIANT
    elif days_remaining < 0:
        status = DeorbitCompliance.NON_COMPLIANT
    else:
        status = DeorbitCompliance.AT_RISK

    return DeorbitCalculation(
        orbit_regime=orbit_regime,
        altitude_km=altitude_km,
        launch_date=launch_date,
        mission_duration_years=mission_duration_years,
        required_disposal_years=required_years,
        applicable_rule=rule,
        end_of_mission_date=end_of_mission,
        disposal_deadline=deadline,
        days_remaining=days_remaining,
        compliance_status=status,
        planned_disposal_years=planned_disposal_years,
        warnings=warnings,
    )
