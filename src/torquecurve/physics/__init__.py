"""
Physics module - Quantities derived from torque data and gearing.

This module contains:
- Drivetrain: power, wheel torque and road speed formulas
- Tires: circumference from diameter or tire size code
- Curves: per-car series for torque/power vs RPM and vs speed
"""

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
from torquecurve.physics.curves import (
    TorqueThreshold,
    CurveConfig,
    RpmCurves,
    GearCurves,
    ChartData,
    valid_points,
    effective_gear_ratios,
    build_rpm_curves,
    build_speed_curves,
    build_chart_data,
    show_speed_chart,
)

__all__ = [
    "calculate_power_kw",
    "calculate_wheel_torque",
    "calculate_wheel_rpm",
    "calculate_speed_ms",
    "TIRE_SIZE_PRESETS",
    "circumference_from_diameter",
    "diameter_from_circumference",
    "tire_circumference_from_size",
    "parse_tire_size",
    "circumference_from_tire_code",
    "TorqueThreshold",
    "CurveConfig",
    "RpmCurves",
    "GearCurves",
    "ChartData",
    "valid_points",
    "effective_gear_ratios",
    "build_rpm_curves",
    "build_speed_curves",
    "build_chart_data",
    "show_speed_chart",
]
