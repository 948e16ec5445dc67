"""Tests for torque/power/speed curve generation."""

import math

import numpy as np
import pytest

from torquecurve.car.dataset import DataSet, GearConfig, TorqueDataPoint
from torquecurve.units.presets import UnitSelection
from torquecurve.physics.curves import (
    TorqueThreshold,
    CurveConfig,
    round_half_up,
    valid_points,
    effective_gear_ratios,
    build_rpm_curves,
    build_speed_curves,
    build_chart_data,
    show_speed_chart,
)


def make_points(*pairs):
    return [TorqueDataPoint(rpm, torque) for rpm, torque in pairs]


@pytest.fixture
def geared_car():
    return DataSet(
        name="Test Car",
        data=make_points((3000, 100), (1000, 100), (0, 0), (2000, 100)),
        gear_config=GearConfig(final_drive_ratio=3.5, gear_ratios=[2.0, 0, 1.0], tire_circumference=2.0),
    )


class TestValidPoints:
    """Test sample filtering and ordering."""
    
    def test_sorted_by_rpm(self):
        """Test samples come out in ascending rpm order."""
        points = valid_points(make_points((3000, 250), (1000, 150), (2000, 200)))
        assert [p.rpm for p in points] == [1000, 2000, 3000]
        
    def test_strict_threshold_drops_zero_torque(self):
        """Test the default threshold needs positive torque."""
        points = valid_points(make_points((0, 0), (1000, 0), (2000, 10)))
        assert points == make_points((2000, 10))
        
    def test_inclusive_threshold_keeps_zero_torque(self):
        """Test the inclusive threshold keeps zero torque."""
        config = CurveConfig(torque_threshold=TorqueThreshold.INCLUSIVE)
        points = valid_points(make_points((1000, 0), (0, 0), (2000, 10)), config)
        assert points == make_points((0, 0), (1000, 0), (2000, 10))
        
    def test_negative_values_dropped(self):
        """Test negative rpm or torque is never plotted."""
        config = CurveConfig(torque_threshold="inclusive")
        points = valid_points(make_points((-100, 50), (1000, -5), (1500, 80)), config)
        assert points == make_points((1500, 80))
        
    def test_non_finite_values_dropped(self):
        """Test NaN and infinite samples are skipped."""
        points = valid_points(make_points((math.nan, 50), (1000, math.inf), (1500, 80)))
        assert points == make_points((1500, 80))
        
    def test_ties_keep_entry_order(self):
        """Test samples with equal rpm keep their entry order."""
        points = valid_points(make_points((2000, 1), (1000, 2), (2000, 3), (1000, 4)))
        assert [p.torque for p in points] == [2, 4, 1, 3]


class TestGearRatios:
    """Test gear ratio selection for speed curves."""
    
    def test_placeholders_removed(self):
        """Test zero and negative ratios are skipped."""
        config = GearConfig(gear_ratios=[3.5, 0, 1.4, -1])
        assert effective_gear_ratios(config) == [3.5, 1.4]
        
    def test_no_gears_is_direct_drive(self):
        """Test a car without gears uses a single 1:1 gear."""
        assert effective_gear_ratios(GearConfig()) == [1.0]
        
    def test_only_placeholders_is_direct_drive(self):
        """Test only placeholder ratios fall back to 1:1."""
        assert effective_gear_ratios(GearConfig(gear_ratios=[0, 0])) == [1.0]


class TestRpmCurves:
    """Test torque and power vs RPM."""
    
    def test_torque_in_entry_unit(self):
        """Test the torque curve keeps the entered values."""
        car = DataSet("Car", make_points((2000, 200), (1000, 150)))
        curves = build_rpm_curves(car, UnitSelection.from_standard("imperial"))
        
        assert curves.name == "Car"
        assert curves.torque.shape == (2, 2)
        assert curves.torque.tolist() == [[1000.0, 150.0], [2000.0, 200.0]]
        
    def test_power_converted_and_rounded(self):
        """Test power is converted to hp and rounded to 2 decimals."""
        car = DataSet("Car", make_points((1000, 150)))
        curves = build_rpm_curves(car, UnitSelection.from_standard("imperial"))
        
        rpm, power = curves.power[0]
        assert rpm == 1000.0
        assert power == pytest.approx(28.56, abs=1e-9)
        
    def test_metric_power(self):
        """Test power in kW for N·m input."""
        car = DataSet("Car", make_points((1000, 100)))
        curves = build_rpm_curves(car, UnitSelection.from_standard("si"))
        assert curves.power[0, 1] == pytest.approx(10.47)
        
    def test_empty_dataset(self):
        """Test a car with only placeholder rows gives empty series."""
        curves = build_rpm_curves(DataSet("Empty", make_points((0, 0))))
        assert curves.torque.shape == (0, 2)
        assert curves.power.shape == (0, 2)


class TestSpeedCurves:
    """Test per-gear wheel torque and power vs speed."""
    
    def test_one_curve_per_positive_gear(self, geared_car):
        """Test each real gear gets a labelled curve."""
        curves = build_speed_curves(geared_car, UnitSelection.from_standard("si"))
        
        assert [c.label for c in curves] == ["G1", "G2"]
        assert [c.gear_ratio for c in curves] == [2.0, 1.0]
        assert curves[0].series_name == "Test Car G1"
        
    def test_speed_and_wheel_torque(self, geared_car):
        """Test speed in km/h and wheel torque in N·m."""
        curves = build_speed_curves(geared_car, UnitSelection.from_standard("metric"))
        first_gear = curves[0]
        
        speed, wheel_torque = first_gear.wheel_torque[-1]
        assert speed == pytest.approx(14.2857 * 3.6, abs=1e-3)
        assert wheel_torque == pytest.approx(700.0)
        np.testing.assert_array_equal(first_gear.power[:, 0], first_gear.wheel_torque[:, 0])
        
    def test_speed_ordered_with_rpm(self, geared_car):
        """Test speed rises along the curve."""
        curves = build_speed_curves(geared_car, UnitSelection.from_standard("si"))
        speeds = curves[1].wheel_torque[:, 0]
        assert np.all(np.diff(speeds) > 0)
        
    def test_higher_gear_is_faster(self, geared_car):
        """Test a taller gear reaches higher speed at the same rpm."""
        first, second = build_speed_curves(geared_car)
        assert np.all(second.wheel_torque[:, 0] > first.wheel_torque[:, 0])
        
    def test_direct_drive_unlabelled(self):
        """Test a single-gear car gets one unlabelled curve."""
        car = DataSet(
            "EV",
            make_points((1000, 300)),
            GearConfig(final_drive_ratio=9.0, tire_circumference=2.1),
        )
        curves = build_speed_curves(car)
        
        assert len(curves) == 1
        assert curves[0].label == ""
        assert curves[0].gear_ratio == 1.0
        assert curves[0].series_name == "EV"
        
    @pytest.mark.parametrize("config", [
        GearConfig(final_drive_ratio=3.5),
        GearConfig(tire_circumference=2.0),
        GearConfig(gear_ratios=[3.0, 2.0]),
    ])
    def test_incomplete_drivetrain_has_no_curves(self, config):
        """Test no speed curves without final drive and tire."""
        car = DataSet("Car", make_points((1000, 100)), config)
        assert build_speed_curves(car) == []


class TestChartData:
    """Test building curves for several cars."""
    
    def test_invisible_cars_skipped(self, geared_car):
        """Test hidden cars produce no curves."""
        hidden = DataSet("Hidden", make_points((1000, 100)), visible=False)
        chart = build_chart_data([geared_car, hidden])
        
        assert [c.name for c in chart.rpm_curves] == ["Test Car"]
        assert {c.name for c in chart.speed_curves} == {"Test Car"}
        assert chart.show_speed_chart
        
    def test_no_speed_chart_without_drivetrain(self):
        """Test the speed chart is hidden without drivetrain data."""
        car = DataSet("Car", make_points((1000, 100)))
        chart = build_chart_data([car])
        
        assert len(chart.rpm_curves) == 1
        assert not chart.show_speed_chart
        assert not show_speed_chart([car])
        
    def test_show_speed_chart_ignores_hidden_cars(self, geared_car):
        """Test hidden cars do not enable the speed chart."""
        geared_car.visible = False
        assert not show_speed_chart([geared_car])


class TestRounding:
    """Test display rounding."""
    
    def test_two_decimals(self):
        """Test rounding to two decimals by default."""
        assert round_half_up(1.234) == 1.23
        
    def test_halves_round_up(self):
        """Test halves round towards positive infinity."""
        assert round_half_up(2.5, 0) == 3.0
        assert round_half_up(-2.5, 0) == -2.0
