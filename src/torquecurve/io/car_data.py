"""
Car data contract - JSON export and import of a single car.

Provides:
- Export of a dataset as the portable CarRecord JSON shape
- Strict, fail-fast validation of imported JSON text
- Permissive normalization of the optional drivetrain fields

The exported record leaves out display settings (color, visibility,
smoothing) and stores the wheel as a diameter in meters instead of the
circumference kept in memory.
"""

from dataclasses import dataclass, field
from typing import Any, List, TypedDict
import copy
import json
import logging
import numpy as np

from torquecurve.car.dataset import DataSet, GearConfig, TorqueDataPoint
from torquecurve.physics.tires import (
    circumference_from_diameter,
    diameter_from_circumference,
)

logger = logging.getLogger(__name__)


PARSE_ERROR = "Failed to parse JSON file"
FORMAT_ERROR = "Invalid file format"
NAME_ERROR = "Missing or invalid car name"
DATA_ERROR = "Missing or invalid torque data"
POINT_ERROR = "Invalid data point format"
EMPTY_ERROR = "No valid data points found"


class _DataPointRecord(TypedDict):
    rpm: float
    torque: float


class CarRecord(TypedDict, total=False):
    """Serialized car. Only name and data are always present."""
    name: str
    data: List[_DataPointRecord]
    wheelDiameter: float
    finalDriveRatio: float
    gears: List[float]


class NumpyEncoder(json.JSONEncoder):
    """JSON encoder that handles numpy types."""
    
    def default(self, obj):
        if isinstance(obj, np.integer):
            return int(obj)
        if isinstance(obj, np.floating):
            return float(obj)
        if isinstance(obj, np.ndarray):
            return obj.tolist()
        return super().default(obj)


def car_to_record(dataset: DataSet) -> CarRecord:
    """Project a dataset onto the export shape.
    
    Args:
        dataset: Car to export
        
    Returns:
        Record with keys in export order: name, data, then wheelDiameter,
        finalDriveRatio and gears when they are configured
    """
    gear_config = dataset.gear_config
    record: CarRecord = {
        "name": dataset.name,
        "data": [point.to_dict() for point in dataset.non_empty_points()],
    }
    
    if gear_config.tire_circumference is not None:
        record["wheelDiameter"] = diameter_from_circumference(gear_config.tire_circumference)
    
    if gear_config.final_drive_ratio is not None:
        record["finalDriveRatio"] = gear_config.final_drive_ratio
    
    gears = gear_config.positive_gear_ratios()
    if gears:
        record["gears"] = gears
    
    return record


def export_car_to_json(dataset: DataSet, indent: int | None = 2) -> str:
    """Serialize a car to JSON text.
    
    Args:
        dataset: Car to export
        indent: JSON indentation, None for compact output
        
    Returns:
        JSON document (deterministic for identical input)
    """
    return json.dumps(car_to_record(dataset), indent=indent, ensure_ascii=False, cls=NumpyEncoder)


@dataclass
class ImportedCar:
    """Fields recovered from an imported file."""
    name: str
    data: List[TorqueDataPoint] = field(default_factory=list)
    gear_config: GearConfig = field(default_factory=GearConfig)


@dataclass
class ImportResult:
    """Outcome of an import: either data or an error message."""
    success: bool
    data: ImportedCar | None = None
    error: str | None = None
    
    @classmethod
    def ok(cls, car: ImportedCar) -> "ImportResult":
        return cls(success=True, data=car)
    
    @classmethod
    def fail(cls, error: str) -> "ImportResult":
        return cls(success=False, error=error)
    
    def to_dataset(self, base: DataSet | None = None) -> DataSet:
        """Apply the imported fields to a dataset.
        
        Args:
            base: Dataset whose display settings are kept (defaults used
                if None). It is not modified.
                
        Returns:
            New dataset with the imported name, data and gear config
            
        Raises:
            ValueError: If the import failed
        """
        if not self.success or self.data is None:
            raise ValueError(self.error or PARSE_ERROR)
        
        base = base or DataSet(name=self.data.name)
        return DataSet(
            name=self.data.name,
            data=list(self.data.data),
            gear_config=copy.deepcopy(self.data.gear_config),
            visible=base.visible,
            color=base.color,
            smooth_curve=base.smooth_curve,
        )


def _reject_constant(name: str):
    raise ValueError(f"Non-standard JSON constant: {name}")


def _is_number(value: Any) -> bool:
    # bool is an int subclass but is not a JSON number
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _positive_number(value: Any) -> float | None:
    if _is_number(value) and value > 0:
        return value
    return None


def _unwrap_record(parsed: Any) -> dict | None:
    """Locate the car record in either the bare or the {car: ...} layout."""
    if not isinstance(parsed, dict):
        return None
    if isinstance(parsed.get("car"), dict):
        return parsed["car"]
    if parsed.get("name"):
        return parsed
    return None


def _normalize_gear_config(record: dict) -> GearConfig:
    gear_config = GearConfig()
    
    wheel_diameter = _positive_number(record.get("wheelDiameter"))
    if wheel_diameter is not None:
        gear_config.tire_circumference = circumference_from_diameter(wheel_diameter)
    
    gear_config.final_drive_ratio = _positive_number(record.get("finalDriveRatio"))
    
    gears = record.get("gears")
    if isinstance(gears, list):
        gear_config.gear_ratios = [g for g in gears if _positive_number(g) is not None]
    
    return gear_config


def parse_car_json(text: str) -> ImportResult:
    """Parse and validate a car from JSON text.
    
    Validation stops at the first failing rule. Missing or malformed
    optional drivetrain fields never fail the import; they are dropped.
    
    Args:
        text: JSON document, bare or wrapped as {"car": {...}}
        
    Returns:
        ImportResult carrying an ImportedCar or one fixed error message
    """
    try:
        parsed = json.loads(text, parse_constant=_reject_constant)
    except (ValueError, TypeError, RecursionError) as exc:
        logger.debug("Rejected car import: %s", exc)
        return ImportResult.fail(PARSE_ERROR)
    
    record = _unwrap_record(parsed)
    if record is None:
        return ImportResult.fail(FORMAT_ERROR)
    
    name = record.get("name")
    if not isinstance(name, str) or not name:
        return ImportResult.fail(NAME_ERROR)
    
    raw_points = record.get("data")
    if not isinstance(raw_points, list):
        return ImportResult.fail(DATA_ERROR)
    
    points = []
    for index, raw in enumerate(raw_points):
        if not isinstance(raw, dict) or not (_is_number(raw.get("rpm")) and _is_number(raw.get("torque"))):
            logger.debug("Rejected car import: bad data point at index %d", index)
            return ImportResult.fail(POINT_ERROR)
        points.append(TorqueDataPoint(rpm=raw["rpm"], torque=raw["torque"]))
    
    if len(points) == 0:
        return ImportResult.fail(EMPTY_ERROR)
    
    return ImportResult.ok(ImportedCar(
        name=name,
        data=points,
        gear_config=_normalize_gear_config(record),
    ))
