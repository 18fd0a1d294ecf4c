"""
Tests for the Deorbit Deadline Calculator.

1. Rule selection: 5-year (LEO / below 2,000 km) vs 25-year
2. Date arithmetic via relativedelta
3. Compliance status and warnings
4. Orbit regime validation happens at the input boundary
"""
from datetime import date

import pytest

from app.models.domain import DeorbitCompliance, OrbitRegime
from app.services.compliance.deorbit import (
    DEFAULT_RULE,
    LEO_RULE,
    calculate_deorbit_deadline,
    parse_orbit_regime,
)

TODAY = date(2026, 1, 1)


class TestRuleSelection:

    def test_leo_five_year_example(self):
        """LEO, 500 km, launched 2025-01-01, 5-year mission."""
        result = calculate_deorbit_deadline(
            orbit_regime=OrbitRegime.LEO,
            altitude_km=500,
            launch_date=date(2025, 1, 1),
            mission_duration_years=5,
            today=TODAY,
        )

        assert result.required_disposal_years == 5
        assert result.end_of_mission_date == date(2030, 1, 1)
        assert result.disposal_deadline == date(2035, 1, 1)
        assert result.applicable_rule == LEO_RULE

    def test_geo_twenty_five_years(self):
        result = calculate_deorbit_deadline(
            orbit_regime=OrbitRegime.GEO,
            altitude_km=35786,
            launch_date=date(2025, 3, 15),
            mission_duration_years=15,
            today=TODAY,
        )

        assert result.required_disposal_years == 25
        assert result.end_of_mission_date == date(2040, 3, 15)
        assert result.disposal_deadline == date(2065, 3, 15)
        assert result.applicable_rule == DEFAULT_RULE

    def test_low_altitude_non_leo_regime_uses_five_year_rule(self):
        """HEO perigee-style altitude under 2,000 km still selects the 5-year rule."""
        result = calculate_deorbit_deadline(
            orbit_regime=OrbitRegime.HEO,
            altitude_km=1999,
            launch_date=date(2025, 1, 1),
            mission_duration_years=1,
            today=TODAY,
        )

        assert result.required_disposal_years == 5

    def test_altitude_threshold_is_exclusive(self):
        result = calculate_deorbit_deadline(
            orbit_regime=OrbitRegime.MEO,
            altitude_km=2000,
            launch_date=date(2025, 1, 1),
            mission_duration_years=1,
            today=TODAY,
        )

        assert result.required_disposal_years == 25

    def test_fractional_mission_years(self):
        result = calculate_deorbit_deadline(
            orbit_regime=OrbitRegime.LEO,
            altitude_km=None,
            launch_date=date(2025, 1, 31),
            mission_duration_years=2.5,
            today=TODAY,
        )

        assert result.end_of_mission_date == date(2027, 7, 31)
        assert result.disposal_deadline == date(2032, 7, 31)

    def test_leap_day_launch(self):
        result = calculate_deorbit_deadline(
            orbit_regime=OrbitRegime.LEO,
            altitude_km=550,
            launch_date=date(2024, 2, 29),
            mission_duration_years=1,
            today=TODAY,
        )

        assert result.end_of_mission_date == date(2025, 2, 28)


class TestComplianceStatus:

    def _calc(self, **overrides):
        params = dict(
            orbit_regime=OrbitRegime.LEO,
            altitude_km=500,
            launch_date=date(2025, 1, 1),
            mission_duration_years=5,
            today=TODAY,
        )
        params.update(overrides)
        return calculate_deorbit_deadline(**params)

    def test_no_plan_future_deadline_is_at_risk(self):
        result = self._calc()

        assert result.compliance_status == DeorbitCompliance.AT_RISK
        assert result.days_remaining == (date(2035, 1, 1) - TODAY).days

    def test_no_plan_past_deadline_is_non_compliant(self):
        result = self._calc(launch_date=date(2000, 1, 1), mission_duration_years=2)

        assert result.compliance_status == DeorbitCompliance.NON_COMPLIANT
        assert result.days_remaining < 0

    def test_plan_within_limit_is_compliant(self):
        result = self._calc(planned_disposal_years=5)

        assert result.compliance_status == DeorbitCompliance.COMPLIANT
        assert result.warnings == []

    def test_plan_over_limit_is_non_compliant_with_warning(self):
        result = self._calc(planned_disposal_years=7)

        assert result.compliance_status == DeorbitCompliance.NON_COMPLIANT
        assert any("exceeds the 5-year limit" in w for w in result.warnings)

    def test_every_status_value_is_reachable(self):
        produced = {
            self._calc().compliance_status,
            self._calc(planned_disposal_years=5).compliance_status,
            self._calc(planned_disposal_years=7).compliance_status,
        }

        assert produced == set(DeorbitCompliance)

    def test_no_propulsion_warning(self):
        result = self._calc(has_propulsion=False)

        assert any("No propulsion" in w for w in result.warnings)

    def test_large_constellation_warning(self):
        assert any("constellation" in w for w in self._calc(is_constellation=True, satellite_count=11).warnings)
        assert self._calc(is_constellation=True, satellite_count=10).warnings == []

    def test_rejects_non_positive_duration(self):
        with pytest.raises(ValueError):
            self._calc(mission_duration_years=0)


class TestOrbitRegimeValidation:

    def test_parse_valid(self):
        assert parse_orbit_regime("LEO") == OrbitRegime.LEO
        assert parse_orbit_regime("deep_space") == OrbitRegime.DEEP_SPACE

    def test_parse_invalid_lists_valid_values(self):
        with pytest.raises(ValueError) as exc:
            parse_orbit_regime("SSO")

        assert "LEO" in str(exc.value)
        assert "cislunar" in str(exc.value)
