"""
Car dataset - Measured torque samples and drivetrain configuration.

Plain value types handed to the curve builders and the import/export
contract:
- TorqueDataPoint: one dyno sample
- GearConfig: final drive, gear ratios and tire circumference
- DataSet: a named car with display settings
"""

from dataclasses import dataclass, field
from typing import List


# Dataset colors, cycled as cars are added
DATASET_COLORS = [
    "#ff6b6b",
    "#4ecdc4",
    "#feca57",
    "#ff9ff3",
    "#54a0ff",
    "#5f27cd",
]


@dataclass(frozen=True)
class TorqueDataPoint:
    """Single torque sample at an engine speed."""
    rpm: float
    torque: float
    
    @property
    def is_empty(self) -> bool:
        """Placeholder row with neither rpm nor torque entered."""
        return self.rpm <= 0 and self.torque <= 0
    
    def to_dict(self) -> dict:
        """Serializable form of the sample."""
        return {"rpm": self.rpm, "torque": self.torque}


@dataclass
class GearConfig:
    """Drivetrain configuration of a car.
    
    None means "not configured". Without both a final drive ratio and a
    tire circumference no speed-based curves can be derived.
    """
    final_drive_ratio: float | None = None
    gear_ratios: List[float] = field(default_factory=list)
    tire_circumference: float | None = None  # meters
    
    def positive_gear_ratios(self) -> List[float]:
        """Gear ratios with zero/negative placeholders removed, order kept."""
        return [ratio for ratio in self.gear_ratios if ratio > 0]
        
    @property
    def has_speed_data(self) -> bool:
        """Check if speed can be derived from this configuration."""
        return self.final_drive_ratio is not None and self.tire_circumference is not None


@dataclass
class DataSet:
    """A car's torque data plus display settings."""
    name: str
    data: List[TorqueDataPoint] = field(default_factory=list)
    gear_config: GearConfig = field(default_factory=GearConfig)
    visible: bool = True
    color: str = DATASET_COLORS[0]
    smooth_curve: bool = False
    
    def non_empty_points(self) -> List[TorqueDataPoint]:
        """Data points excluding placeholder rows."""
        return [point for point in self.data if not point.is_empty]


def new_dataset(index: int) -> DataSet:
    """Create a blank car for slot ``index``.
    
    Args:
        index: Zero-based position of the car in the list
        
    Returns:
        Dataset named "Car N" with a single placeholder row
    """
    return DataSet(
        name=f"Car {index + 1}",
        data=[TorqueDataPoint(0, 0)],
        color=DATASET_COLORS[index % len(DATASET_COLORS)],
    )
