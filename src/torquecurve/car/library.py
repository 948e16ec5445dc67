"""Bundled library of preset cars.

Each car is a CarRecord JSON file under ``data/``; ``data/index.json``
assigns ids and categories. Files go through the same validation as user
imports, so a broken entry is logged and skipped rather than loaded.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import List
import copy
import json
import logging

from torquecurve.car.dataset import DataSet
from torquecurve.io.car_data import ImportedCar, parse_car_json

logger = logging.getLogger(__name__)

_DATA_DIR = Path(__file__).resolve().parent / "data"


@dataclass(frozen=True)
class PresetCar:
    """One library entry."""
    id: str
    category: str
    car: ImportedCar
    
    @property
    def name(self) -> str:
        return self.car.name
    
    def to_dataset(self) -> DataSet:
        """Fresh dataset for this car; callers may modify it freely."""
        car = copy.deepcopy(self.car)
        return DataSet(name=car.name, data=car.data, gear_config=car.gear_config)


def load_library(data_dir: Path = _DATA_DIR) -> List[PresetCar]:
    """Load every valid preset car listed in ``data_dir/index.json``.
    
    Args:
        data_dir: Directory holding index.json and the car files
        
    Returns:
        Preset cars in index order
    """
    index_file = Path(data_dir) / "index.json"
    try:
        entries = json.loads(index_file.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        logger.warning("Could not load car library index from %s: %s", index_file, exc)
        return []
    
    cars = []
    for entry in entries:
        car_file = Path(data_dir) / entry.get("file", "")
        try:
            text = car_file.read_text(encoding="utf-8")
        except OSError as exc:
            logger.warning("Skipping library car %s: %s", entry.get("id"), exc)
            continue
        
        result = parse_car_json(text)
        if not result.success:
            logger.warning("Skipping library car %s: %s", entry.get("id"), result.error)
            continue
        
        cars.append(PresetCar(id=entry["id"], category=entry.get("category", ""), car=result.data))
    
    return cars


PRESET_CARS: List[PresetCar] = load_library()


def get_categories() -> List[str]:
    """Categories in first-seen order."""
    return list(dict.fromkeys(car.category for car in PRESET_CARS))


def get_cars(category: str | None = None) -> List[PresetCar]:
    """All preset cars, or those in ``category``."""
    if category is None:
        return list(PRESET_CARS)
    return [car for car in PRESET_CARS if car.category == category]


def get_car(car_id: str) -> DataSet | None:
    """Dataset for a preset car id, or None if unknown."""
    for car in PRESET_CARS:
        if car.id == car_id:
            return car.to_dataset()
    return None
