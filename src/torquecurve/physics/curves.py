"""
Curve generation - Per-point torque, power and speed series for charting.

Provides:
- Sample filtering and stable RPM ordering
- Torque and power vs RPM curves
- Per-gear wheel torque and power vs road speed curves

Every series is an (n, 2) float array of (x, y) pairs ordered by RPM.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List
import math
import numpy as np

from torquecurve.car.dataset import DataSet, GearConfig, TorqueDataPoint
from torquecurve.units.conversions import to_nm, convert_power, convert_speed
from torquecurve.units.presets import UnitSelection
from torquecurve.physics.drivetrain import (
    calculate_power_kw,
    calculate_wheel_torque,
    calculate_speed_ms,
)


class TorqueThreshold(str, Enum):
    """Which torque values count as a plottable sample."""
    STRICT = "strict"        # torque > 0
    INCLUSIVE = "inclusive"  # torque >= 0


@dataclass
class CurveConfig:
    """Configuration for curve generation."""
    torque_threshold: TorqueThreshold = TorqueThreshold.STRICT
    power_decimals: int = 2


@dataclass
class RpmCurves:
    """Torque and power against engine speed for one car."""
    name: str
    torque: np.ndarray  # (rpm, torque in entry unit)
    power: np.ndarray   # (rpm, power in display unit)


@dataclass
class GearCurves:
    """Wheel torque and power against road speed for one gear."""
    name: str
    label: str
    gear_ratio: float
    wheel_torque: np.ndarray  # (speed, N·m)
    power: np.ndarray         # (speed, power in display unit)
    
    @property
    def series_name(self) -> str:
        """Car name with the gear label appended when there is one."""
        return f"{self.name} {self.label}" if self.label else self.name


@dataclass
class ChartData:
    """All curves for a set of cars."""
    rpm_curves: List[RpmCurves] = field(default_factory=list)
    speed_curves: List[GearCurves] = field(default_factory=list)
    
    @property
    def show_speed_chart(self) -> bool:
        """Check if any car produced speed-domain curves."""
        return len(self.speed_curves) > 0


def round_half_up(value: float, decimals: int = 2) -> float:
    """Round for display, halves rounding towards +inf."""
    scale = 10 ** decimals
    return float(np.floor(value * scale + 0.5) / scale)


def _as_series(pairs: List[tuple]) -> np.ndarray:
    if not pairs:
        return np.empty((0, 2), dtype=float)
    return np.asarray(pairs, dtype=float)


def valid_points(
    points: Iterable[TorqueDataPoint],
    config: CurveConfig | None = None,
) -> List[TorqueDataPoint]:
    """Select plottable samples and order them by RPM.
    
    Args:
        points: Raw samples in entry order
        config: Curve configuration (threshold policy)
        
    Returns:
        Finite samples with rpm >= 0 passing the torque threshold, sorted
        ascending by rpm. Ties keep their entry order.
    """
    config = config or CurveConfig()
    strict = TorqueThreshold(config.torque_threshold) is TorqueThreshold.STRICT
    
    selected = []
    for point in points:
        if not (math.isfinite(point.rpm) and math.isfinite(point.torque)):
            continue
        if point.rpm < 0:
            continue
        if point.torque < 0 or (strict and point.torque == 0):
            continue
        selected.append(point)
    
    return sorted(selected, key=lambda point: point.rpm)


def effective_gear_ratios(gear_config: GearConfig) -> List[float]:
    """Gear ratios to derive speed curves for.
    
    Returns:
        Strictly positive configured ratios, or [1.0] for a single
        direct-drive gear when none are configured
    """
    return gear_config.positive_gear_ratios() or [1.0]


def build_rpm_curves(
    dataset: DataSet,
    units: UnitSelection | None = None,
    config: CurveConfig | None = None,
) -> RpmCurves:
    """Build torque and power vs RPM curves for one car.
    
    Args:
        dataset: Car to plot
        units: Entry torque unit and display power unit
        config: Curve configuration
        
    Returns:
        RpmCurves; torque stays in the entry unit, power is rounded
    """
    units = units or UnitSelection()
    config = config or CurveConfig()
    
    torque_pairs = []
    power_pairs = []
    for point in valid_points(dataset.data, config):
        torque_nm = to_nm(point.torque, units.torque)
        power_kw = calculate_power_kw(torque_nm, point.rpm)
        power = round_half_up(convert_power(power_kw, units.power), config.power_decimals)
        torque_pairs.append((point.rpm, point.torque))
        power_pairs.append((point.rpm, power))
    
    return RpmCurves(
        name=dataset.name,
        torque=_as_series(torque_pairs),
        power=_as_series(power_pairs),
    )


def build_speed_curves(
    dataset: DataSet,
    units: UnitSelection | None = None,
    config: CurveConfig | None = None,
) -> List[GearCurves]:
    """Build per-gear wheel torque and power vs speed curves for one car.
    
    Args:
        dataset: Car to plot
        units: Entry torque unit, display power and speed units
        config: Curve configuration
        
    Returns:
        One GearCurves per gear, empty if the car lacks a final drive ratio
        or tire circumference
    """
    gear_config = dataset.gear_config
    if not gear_config.has_speed_data:
        return []
    
    units = units or UnitSelection()
    config = config or CurveConfig()
    points = valid_points(dataset.data, config)
    labelled = len(gear_config.positive_gear_ratios()) > 0
    final_drive = gear_config.final_drive_ratio
    circumference = gear_config.tire_circumference
    
    curves = []
    for index, gear_ratio in enumerate(effective_gear_ratios(gear_config)):
        torque_pairs = []
        power_pairs = []
        for point in points:
            torque_nm = to_nm(point.torque, units.torque)
            speed_ms = calculate_speed_ms(point.rpm, gear_ratio, final_drive, circumference)
            speed = convert_speed(speed_ms, units.speed)
            wheel_torque = calculate_wheel_torque(torque_nm, gear_ratio, final_drive)
            power_kw = calculate_power_kw(torque_nm, point.rpm)
            power = round_half_up(convert_power(power_kw, units.power), config.power_decimals)
            torque_pairs.append((speed, wheel_torque))
            power_pairs.append((speed, power))
        
        curves.append(GearCurves(
            name=dataset.name,
            label=f"G{index + 1}" if labelled else "",
            gear_ratio=gear_ratio,
            wheel_torque=_as_series(torque_pairs),
            power=_as_series(power_pairs),
        ))
    
    return curves


def show_speed_chart(datasets: Iterable[DataSet]) -> bool:
    """Check if any visible car can be plotted against speed."""
    return any(ds.visible and ds.gear_config.has_speed_data for ds in datasets)


def build_chart_data(
    datasets: Iterable[DataSet],
    units: UnitSelection | None = None,
    config: CurveConfig | None = None,
) -> ChartData:
    """Build every curve for the visible cars.
    
    Args:
        datasets: Cars in display order
        units: Current unit selection
        config: Curve configuration
        
    Returns:
        ChartData with RPM curves for each visible car and speed curves for
        each visible car with complete drivetrain data
    """
    chart = ChartData()
    for dataset in datasets:
        if not dataset.visible:
            continue
        chart.rpm_curves.append(build_rpm_curves(dataset, units, config))
        chart.speed_curves.extend(build_speed_curves(dataset, units, config))
    return chart
