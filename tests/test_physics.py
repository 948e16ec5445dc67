"""Tests for drivetrain formulas and tire geometry."""

import math

import pytest

from torquecurve.physics.drivetrain import (
    calculate_power_kw,
    calculate_wheel_torque,
    calculate_wheel_rpm,
    calculate_speed_ms,
)
from torquecurve.physics.tires import (
    TIRE_SIZE_PRESETS,
    circumference_from_diameter,
    diameter_from_circumference,
    tire_circumference_from_size,
    parse_tire_size,
    circumference_from_tire_code,
)


class TestPower:
    """Test power from torque and RPM."""
    
    def test_known_value(self):
        """Test 100 N·m at 1000 rpm gives about 10.47 kW."""
        assert calculate_power_kw(100, 1000) == pytest.approx(10.472, abs=1e-3)
        
    def test_zero_rpm(self):
        """Test no power at zero rpm."""
        assert calculate_power_kw(450.0, 0) == 0.0
        
    def test_zero_torque(self):
        """Test no power at zero torque."""
        assert calculate_power_kw(0, 6500) == 0.0
        
    def test_zero_is_not_negative_zero(self):
        """Test the zero result carries a positive sign."""
        assert math.copysign(1.0, calculate_power_kw(-10.0, 0)) == 1.0
        
    def test_linear_in_rpm(self):
        """Test power doubles with rpm at constant torque."""
        assert calculate_power_kw(200, 4000) == pytest.approx(2 * calculate_power_kw(200, 2000))


class TestWheelTorque:
    """Test torque multiplication through the drivetrain."""
    
    def test_known_value(self):
        """Test wheel torque is the product of torque and both ratios."""
        assert calculate_wheel_torque(200, 2.5, 3.5) == pytest.approx(1750)
        
    def test_zero_engine_torque(self):
        """Test no wheel torque without engine torque."""
        assert calculate_wheel_torque(0, 3.2, 4.1) == 0.0
        
    def test_increases_with_gear_ratio(self):
        """Test shorter gears multiply torque more."""
        ratios = [0.8, 1.0, 1.6, 2.4, 3.9]
        torques = [calculate_wheel_torque(300, r, 3.73) for r in ratios]
        assert all(a < b for a, b in zip(torques, torques[1:]))


class TestSpeed:
    """Test road speed from RPM and gearing."""
    
    def test_known_value(self):
        """Test speed for a known rpm, gearing and tire."""
        assert calculate_speed_ms(3000, 2.0, 3.5, 2.0) == pytest.approx(14.286, abs=1e-3)
        
    def test_zero_rpm(self):
        """Test standing still at zero rpm."""
        assert calculate_speed_ms(0, 3.1, 4.1, 1.98) == 0.0
        
    def test_wheel_rpm(self):
        """Test wheel rpm divides engine rpm by the total ratio."""
        assert calculate_wheel_rpm(7000, 2.0, 3.5) == pytest.approx(1000.0)
        
    def test_decreases_with_gear_ratio(self):
        """Test shorter gears give lower speed at the same rpm."""
        ratios = [0.8, 1.0, 1.6, 2.4, 3.9]
        speeds = [calculate_speed_ms(5000, r, 3.73, 2.0) for r in ratios]
        assert all(a > b for a, b in zip(speeds, speeds[1:]))


class TestTires:
    """Test tire circumference helpers."""
    
    def test_diameter_round_trip(self):
        """Test diameter and circumference conversions invert each other."""
        assert diameter_from_circumference(circumference_from_diameter(0.63)) == pytest.approx(0.63)
        
    def test_circumference_from_size(self):
        """Test circumference from width, aspect ratio and rim."""
        # 225/45R17: 2 * 101.25 mm sidewall + 431.8 mm rim = 634.3 mm
        circumference = tire_circumference_from_size(225, 45, 17)
        assert circumference == pytest.approx(0.6343 * math.pi)
        
    @pytest.mark.parametrize("size", [(0, 45, 17), (225, 0, 17), (225, 45, -1)])
    def test_non_positive_size(self, size):
        """Test incomplete tire sizes give no circumference."""
        assert tire_circumference_from_size(*size) is None
        
    @pytest.mark.parametrize("code", ["225/45R17", "225/45r17", " 225 / 45 ZR 17 "])
    def test_parse_tire_size(self, code):
        """Test tire size codes in common spellings."""
        assert parse_tire_size(code) == (225.0, 45.0, 17.0)
        
    @pytest.mark.parametrize("code", ["", "225-45-17", "P225/45", "225/45R"])
    def test_parse_invalid_tire_size(self, code):
        """Test malformed tire size codes are rejected."""
        with pytest.raises(ValueError, match="Unrecognized tire size"):
            parse_tire_size(code)
            
    def test_circumference_from_tire_code(self):
        """Test circumference straight from a size code."""
        assert circumference_from_tire_code("205/55R16") == pytest.approx(
            tire_circumference_from_size(205, 55, 16)
        )
        
    def test_presets_match_computed_sizes(self):
        """Test preset circumferences are within a few percent of their nominal size."""
        for label, circumference in TIRE_SIZE_PRESETS:
            computed = circumference_from_tire_code(label.split()[0])
            assert computed == pytest.approx(circumference, rel=0.04)
