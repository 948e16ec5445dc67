"""
Unit conversions - Scalar torque, power and speed conversions.

Provides:
- Torque normalization to N·m
- Power conversion from kW to the selected power unit
- Speed conversion from m/s to the selected speed unit
- Static display labels for every unit
"""

from enum import Enum
from types import MappingProxyType
from typing import Mapping


# Physical constants
LBFT_TO_NM = 1.35582
KW_TO_HP = 1.34102  # mechanical horsepower
KW_TO_PS = 1.35962  # metric horsepower
MS_TO_KMH = 3.6
MS_TO_MPH = 2.23694


class TorqueUnit(str, Enum):
    """Torque units accepted for data entry."""
    LBFT = "lbft"
    NM = "nm"


class PowerUnit(str, Enum):
    """Power units available for display."""
    KW = "kw"
    HP = "hp"
    PS = "ps"


class SpeedUnit(str, Enum):
    """Speed units available for display."""
    MPH = "mph"
    KMH = "kmh"
    MS = "ms"


TORQUE_UNIT_LABELS: Mapping[TorqueUnit, str] = MappingProxyType({
    TorqueUnit.LBFT: "lb·ft",
    TorqueUnit.NM: "N·m",
})

POWER_UNIT_LABELS: Mapping[PowerUnit, str] = MappingProxyType({
    PowerUnit.KW: "kW",
    PowerUnit.HP: "hp",
    PowerUnit.PS: "PS",
})

SPEED_UNIT_LABELS: Mapping[SpeedUnit, str] = MappingProxyType({
    SpeedUnit.MPH: "mph",
    SpeedUnit.KMH: "km/h",
    SpeedUnit.MS: "m/s",
})


def to_nm(value: float, unit: TorqueUnit | str) -> float:
    """Convert a torque value to newton-meters.
    
    Args:
        value: Torque in the given unit
        unit: Unit the value is expressed in
        
    Returns:
        Torque in N·m
    """
    if TorqueUnit(unit) is TorqueUnit.LBFT:
        return value * LBFT_TO_NM
    return value


def convert_power(kw: float, unit: PowerUnit | str) -> float:
    """Convert power from kilowatts to the given unit.
    
    No rounding is applied; display rounding is up to the caller.
    
    Args:
        kw: Power in kW
        unit: Target power unit
        
    Returns:
        Power in the target unit
    """
    unit = PowerUnit(unit)
    if unit is PowerUnit.HP:
        return kw * KW_TO_HP
    if unit is PowerUnit.PS:
        return kw * KW_TO_PS
    return kw


def convert_speed(ms: float, unit: SpeedUnit | str) -> float:
    """Convert speed from meters per second to the given unit.
    
    Args:
        ms: Speed in m/s
        unit: Target speed unit
        
    Returns:
        Speed in the target unit
    """
    unit = SpeedUnit(unit)
    if unit is SpeedUnit.KMH:
        return ms * MS_TO_KMH
    if unit is SpeedUnit.MPH:
        return ms * MS_TO_MPH
    return ms


def torque_label(unit: TorqueUnit | str) -> str:
    """Display label for a torque unit."""
    return TORQUE_UNIT_LABELS[TorqueUnit(unit)]


def power_label(unit: PowerUnit | str) -> str:
    """Display label for a power unit."""
    return POWER_UNIT_LABELS[PowerUnit(unit)]


def speed_label(unit: SpeedUnit | str) -> str:
    """Display label for a speed unit."""
    return SPEED_UNIT_LABELS[SpeedUnit(unit)]
