#!/usr/bin/env python3
"""
Import/Export Example

Exports every preset car to JSON files, imports them back and checks that
the torque data and gearing survive the round trip.

Run with: python round_trip.py
"""

import logging
from pathlib import Path

from torquecurve.car import library
from torquecurve.io import ExporterConfig, CarFileExporter


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    
    output_dir = Path(__file__).parent / "output"
    exporter = CarFileExporter(ExporterConfig(output_dir=str(output_dir)))
    
    failures = 0
    for preset in library.get_cars():
        car = preset.to_dataset()
        path = exporter.export(car)
        result = exporter.load(path)
        
        if not result.success:
            print(f"{preset.id}: import failed ({result.error})")
            failures += 1
            continue
        
        imported = result.to_dataset(car)
        same_data = imported.data == car.non_empty_points()
        same_gears = imported.gear_config.gear_ratios == car.gear_config.positive_gear_ratios()
        status = "OK" if same_data and same_gears else "MISMATCH"
        print(f"{preset.id:<24} {path.name:<32} {status}")
        failures += status != "OK"
    
    return 1 if failures else 0


if __name__ == "__main__":
    raise SystemExit(main())
