#!/usr/bin/env python3
"""
Curve Report Example

This example demonstrates how to:
1. Load a preset car from the library
2. Pick a unit standard
3. Build torque/power vs RPM and per-gear speed curves
4. Print the peak values

Run with: python print_curves.py [car-id] [unit-standard]
"""

import argparse
import logging

import numpy as np

from torquecurve.car import library
from torquecurve.physics import CurveConfig, build_chart_data
from torquecurve.units import (
    UnitSelection,
    UnitStandard,
    STANDARD_LABELS,
    torque_label,
    power_label,
    speed_label,
)


def main():
    parser = argparse.ArgumentParser(description="Print torque, power and speed curves for a preset car")
    parser.add_argument("car_id", nargs="?", default="mazda-mx5-nd",
                        help="Preset car id")
    parser.add_argument("standard", nargs="?", default=UnitStandard.IMPERIAL.value,
                        choices=[s.value for s in UnitStandard if s is not UnitStandard.CUSTOM],
                        help="Unit standard")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug logging")
    args = parser.parse_args()
    
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    
    print("=" * 60)
    print("Torque Curve Report")
    print("=" * 60)
    
    car = library.get_car(args.car_id)
    if car is None:
        print(f"Unknown car: {args.car_id}")
        print(f"Available: {', '.join(c.id for c in library.get_cars())}")
        return 1
    
    units = UnitSelection.from_standard(args.standard)
    print(f"\nCar:   {car.name}")
    print(f"Units: {STANDARD_LABELS[units.standard]}")
    
    chart = build_chart_data([car], units, CurveConfig())
    
    rpm_curves = chart.rpm_curves[0]
    peak_torque = rpm_curves.torque[np.argmax(rpm_curves.torque[:, 1])]
    peak_power = rpm_curves.power[np.argmax(rpm_curves.power[:, 1])]
    print(f"\nPeak torque: {peak_torque[1]:.1f} {torque_label(units.torque)} @ {peak_torque[0]:.0f} rpm")
    print(f"Peak power:  {peak_power[1]:.1f} {power_label(units.power)} @ {peak_power[0]:.0f} rpm")
    
    if not chart.show_speed_chart:
        print("\nNo drivetrain data; speed curves unavailable.")
        return 0
    
    print(f"\n{'Gear':<6}{'Ratio':>8}{'Top speed':>14}{'Max wheel torque':>20}")
    for gear in chart.speed_curves:
        top_speed = gear.wheel_torque[-1, 0]
        max_wheel_torque = gear.wheel_torque[:, 1].max()
        print(f"{gear.label or '-':<6}{gear.gear_ratio:>8.3f}"
              f"{top_speed:>10.1f} {speed_label(units.speed):<4}{max_wheel_torque:>15.0f} N·m")
    
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
