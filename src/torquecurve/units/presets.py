"""
Unit presets - Named bundles of torque, power and speed units.

A non-custom UnitStandard always maps to exactly one preset. Selecting it
overwrites all three individual unit choices.
"""

from dataclasses import dataclass, replace
from enum import Enum
from types import MappingProxyType
from typing import Mapping

from torquecurve.units.conversions import TorqueUnit, PowerUnit, SpeedUnit


class UnitStandard(str, Enum):
    """Unit standards offered to the user."""
    IMPERIAL = "imperial"
    METRIC = "metric"
    METRIC_PS = "metric-ps"
    SI = "si"
    CUSTOM = "custom"


@dataclass(frozen=True)
class UnitPreset:
    """Torque, power and speed units for one standard."""
    torque: TorqueUnit
    power: PowerUnit
    speed: SpeedUnit


UNIT_PRESETS: Mapping[UnitStandard, UnitPreset] = MappingProxyType({
    UnitStandard.IMPERIAL: UnitPreset(TorqueUnit.LBFT, PowerUnit.HP, SpeedUnit.MPH),
    UnitStandard.METRIC: UnitPreset(TorqueUnit.NM, PowerUnit.KW, SpeedUnit.KMH),
    UnitStandard.METRIC_PS: UnitPreset(TorqueUnit.NM, PowerUnit.PS, SpeedUnit.KMH),
    UnitStandard.SI: UnitPreset(TorqueUnit.NM, PowerUnit.KW, SpeedUnit.MS),
})

STANDARD_LABELS: Mapping[UnitStandard, str] = MappingProxyType({
    UnitStandard.IMPERIAL: "Imperial (lb·ft, hp, mph)",
    UnitStandard.METRIC: "Metric (N·m, kW, km/h)",
    UnitStandard.METRIC_PS: "Metric PS (N·m, PS, km/h)",
    UnitStandard.SI: "SI (N·m, kW, m/s)",
    UnitStandard.CUSTOM: "Custom",
})


def get_preset(standard: UnitStandard | str) -> UnitPreset | None:
    """Get the preset for a standard.
    
    Args:
        standard: Unit standard
        
    Returns:
        Matching preset, or None for the custom standard
    """
    return UNIT_PRESETS.get(UnitStandard(standard))


@dataclass(frozen=True)
class UnitSelection:
    """The user's current unit choice.
    
    Immutable; every change returns a new selection.
    """
    standard: UnitStandard = UnitStandard.IMPERIAL
    torque: TorqueUnit = TorqueUnit.LBFT
    power: PowerUnit = PowerUnit.HP
    speed: SpeedUnit = SpeedUnit.MPH
    
    def __post_init__(self):
        """Coerce plain strings to enum members and check the preset."""
        object.__setattr__(self, "standard", UnitStandard(self.standard))
        object.__setattr__(self, "torque", TorqueUnit(self.torque))
        object.__setattr__(self, "power", PowerUnit(self.power))
        object.__setattr__(self, "speed", SpeedUnit(self.speed))
        
        preset = get_preset(self.standard)
        if preset is not None and preset != self.preset:
            raise ValueError(f"Units do not match the {self.standard.value} preset")
    
    @classmethod
    def from_standard(cls, standard: UnitStandard | str) -> "UnitSelection":
        """Create a selection matching a standard's preset.
        
        The custom standard starts from the imperial units.
        """
        return cls().with_standard(standard)
    
    def with_standard(self, standard: UnitStandard | str) -> "UnitSelection":
        """Switch standard.
        
        Args:
            standard: New unit standard
            
        Returns:
            New selection; all three units follow the preset unless the
            standard is custom, in which case they are kept.
        """
        standard = UnitStandard(standard)
        preset = get_preset(standard)
        if preset is None:
            return replace(self, standard=standard)
        return UnitSelection(standard, preset.torque, preset.power, preset.speed)
    
    def with_units(
        self,
        torque: TorqueUnit | str | None = None,
        power: PowerUnit | str | None = None,
        speed: SpeedUnit | str | None = None,
    ) -> "UnitSelection":
        """Pick individual units.
        
        Individual choices only exist under the custom standard, so the
        returned selection is always custom.
        """
        return UnitSelection(
            UnitStandard.CUSTOM,
            self.torque if torque is None else torque,
            self.power if power is None else power,
            self.speed if speed is None else speed,
        )
    
    @property
    def preset(self) -> UnitPreset:
        """Units in effect as a preset triple."""
        return UnitPreset(self.torque, self.power, self.speed)
