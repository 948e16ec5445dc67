"""
IO module - Import and export of car data.

This module contains:
- car_data: the CarRecord JSON contract (export, parse, validate)
- files: filename handling and file-level export/import
"""

from torquecurve.io.car_data import (
    CarRecord,
    ImportedCar,
    ImportResult,
    car_to_record,
    export_car_to_json,
    parse_car_json,
)
from torquecurve.io.files import ExporterConfig, CarFileExporter, export_filename

__all__ = [
    "CarRecord",
    "ImportedCar",
    "ImportResult",
    "car_to_record",
    "export_car_to_json",
    "parse_car_json",
    "ExporterConfig",
    "CarFileExporter",
    "export_filename",
]
