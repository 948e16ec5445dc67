"""
Tire geometry - Converting tire descriptions into rolling circumference.

Circumference is the only tire quantity stored on a GearConfig. Wheel
diameter and metric tire size codes ("225/45R17") are converted here.
"""

import re
from typing import List, Tuple
import numpy as np


INCH_TO_MM = 25.4

# Common sizes offered as presets: (label, circumference in meters)
TIRE_SIZE_PRESETS: List[Tuple[str, float]] = [
    ("205/55R16 (0.627m)", 1.97),
    ("215/45R17 (0.617m)", 1.94),
    ("225/45R17 (0.630m)", 1.98),
    ("225/40R18 (0.624m)", 1.96),
    ("235/40R18 (0.637m)", 2.0),
    ("245/40R18 (0.640m)", 2.01),
    ("255/35R18 (0.624m)", 1.96),
    ("265/35R18 (0.637m)", 2.0),
    ("275/35R19 (0.659m)", 2.07),
    ("285/30R19 (0.637m)", 2.0),
    ("295/30R20 (0.665m)", 2.09),
    ("305/30R20 (0.672m)", 2.11),
]

_TIRE_SIZE_RE = re.compile(
    r"^\s*(\d+(?:\.\d+)?)\s*/\s*(\d+(?:\.\d+)?)\s*Z?R\s*(\d+(?:\.\d+)?)\s*$",
    re.IGNORECASE,
)


def circumference_from_diameter(diameter_m: float) -> float:
    """Rolling circumference (m) of a wheel with the given diameter (m)."""
    return diameter_m * np.pi


def diameter_from_circumference(circumference_m: float) -> float:
    """Wheel diameter (m) for the given rolling circumference (m)."""
    return circumference_m / np.pi


def tire_circumference_from_size(
    width_mm: float,
    aspect_ratio: float,
    rim_inches: float,
) -> float | None:
    """Calculate rolling circumference from a metric tire size.
    
    Args:
        width_mm: Section width in mm (the "225" in 225/45R17)
        aspect_ratio: Sidewall height as % of width (the "45")
        rim_inches: Rim diameter in inches (the "17")
        
    Returns:
        Circumference in meters, or None if any input is not positive
    """
    if width_mm <= 0 or aspect_ratio <= 0 or rim_inches <= 0:
        return None
    sidewall_mm = width_mm * (aspect_ratio / 100)
    diameter_mm = 2 * sidewall_mm + rim_inches * INCH_TO_MM
    return circumference_from_diameter(diameter_mm / 1000)


def parse_tire_size(code: str) -> Tuple[float, float, float]:
    """Split a tire size code into width, aspect ratio and rim size.
    
    Args:
        code: Size code such as "225/45R17" or "245/35 ZR19"
        
    Returns:
        (width_mm, aspect_ratio, rim_inches)
        
    Raises:
        ValueError: If the code is not a metric tire size
    """
    match = _TIRE_SIZE_RE.match(code)
    if match is None:
        raise ValueError(f"Unrecognized tire size: {code!r}")
    width, aspect, rim = (float(group) for group in match.groups())
    return width, aspect, rim


def circumference_from_tire_code(code: str) -> float | None:
    """Rolling circumference (m) for a tire size code."""
    return tire_circumference_from_size(*parse_tire_size(code))
