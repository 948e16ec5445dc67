"""
torquecurve - Dyno-style torque, power and speed curves for cars.

This package provides:
- Unit conversion between torque, power and speed unit families
- Derived power, wheel torque and road speed from torque data and gearing
- Curve series for torque/power vs RPM and per-gear vs speed
- A JSON import/export contract for a car's data
- A small library of preset cars
"""

__version__ = "0.1.0"

from torquecurve.units import UnitSelection, UnitStandard
from torquecurve.car import DataSet, GearConfig, TorqueDataPoint
from torquecurve.physics import CurveConfig, build_chart_data
from torquecurve.io import ImportResult, export_car_to_json, parse_car_json

__all__ = [
    "UnitSelection",
    "UnitStandard",
    "DataSet",
    "GearConfig",
    "TorqueDataPoint",
    "CurveConfig",
    "build_chart_data",
    "ImportResult",
    "export_car_to_json",
    "parse_car_json",
    "__version__",
]
