"""
Units module - Unit families, conversions and presets.

This module contains:
- TorqueUnit, PowerUnit, SpeedUnit: closed unit enumerations
- to_nm, convert_power, convert_speed: scalar conversions
- UnitStandard, UnitPreset, UnitSelection: named unit bundles
"""

from torquecurve.units.conversions import (
    TorqueUnit,
    PowerUnit,
    SpeedUnit,
    TORQUE_UNIT_LABELS,
    POWER_UNIT_LABELS,
    SPEED_UNIT_LABELS,
    to_nm,
    convert_power,
    convert_speed,
    torque_label,
    power_label,
    speed_label,
)
from torquecurve.units.presets import (
    UnitStandard,
    UnitPreset,
    UnitSelection,
    UNIT_PRESETS,
    STANDARD_LABELS,
    get_preset,
)

__all__ = [
    "TorqueUnit",
    "PowerUnit",
    "SpeedUnit",
    "TORQUE_UNIT_LABELS",
    "POWER_UNIT_LABELS",
    "SPEED_UNIT_LABELS",
    "to_nm",
    "convert_power",
    "convert_speed",
    "torque_label",
    "power_label",
    "speed_label",
    "UnitStandard",
    "UnitPreset",
    "UnitSelection",
    "UNIT_PRESETS",
    "STANDARD_LABELS",
    "get_preset",
]
