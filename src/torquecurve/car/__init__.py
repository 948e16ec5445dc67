"""
Car module - Torque data and drivetrain configuration of a car.

This module contains:
- TorqueDataPoint: a single rpm/torque sample
- GearConfig: final drive, gear ratios and tire circumference
- DataSet: a named car with display settings
- library: bundled preset cars (import torquecurve.car.library)
"""

from torquecurve.car.dataset import (
    TorqueDataPoint,
    GearConfig,
    DataSet,
    DATASET_COLORS,
    new_dataset,
)

__all__ = [
    "TorqueDataPoint",
    "GearConfig",
    "DataSet",
    "DATASET_COLORS",
    "new_dataset",
]
