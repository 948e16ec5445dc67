"""
Drivetrain physics - Quantities derived from engine torque and gearing.

Provides:
- Power from torque and engine speed
- Torque at the wheels through gear and final drive
- Road speed from engine speed, gearing and tire circumference

All inputs are expected finite; callers filter bad samples upstream.
"""

import numpy as np


def calculate_power_kw(torque_nm: float, rpm: float) -> float:
    """Calculate power from torque and engine speed.
    
    P (kW) = T (N·m) * ω (rad/s) / 1000, with ω = rpm * 2π / 60.
    
    Args:
        torque_nm: Engine torque in N·m
        rpm: Engine speed
        
    Returns:
        Power in kW (exactly 0.0 when either input is zero)
    """
    if torque_nm == 0 or rpm == 0:
        return 0.0
    return torque_nm * rpm * 2 * np.pi / 60000.0


def calculate_wheel_torque(
    engine_torque_nm: float,
    gear_ratio: float,
    final_drive_ratio: float,
) -> float:
    """Calculate torque at the wheels.
    
    Args:
        engine_torque_nm: Torque from engine in N·m
        gear_ratio: Transmission gear ratio
        final_drive_ratio: Final drive ratio
        
    Returns:
        Wheel torque in N·m
    """
    if engine_torque_nm == 0:
        return 0.0
    return engine_torque_nm * gear_ratio * final_drive_ratio


def calculate_wheel_rpm(rpm: float, gear_ratio: float, final_drive_ratio: float) -> float:
    """Calculate wheel RPM from engine RPM.
    
    Both ratios must be strictly positive.
    """
    return rpm / (gear_ratio * final_drive_ratio)


def calculate_speed_ms(
    rpm: float,
    gear_ratio: float,
    final_drive_ratio: float,
    tire_circumference: float,
) -> float:
    """Calculate vehicle speed (m/s) from engine RPM.
    
    Args:
        rpm: Engine speed
        gear_ratio: Transmission gear ratio, > 0
        final_drive_ratio: Final drive ratio, > 0
        tire_circumference: Rolling circumference in meters
        
    Returns:
        Vehicle speed in m/s
    """
    if rpm == 0:
        return 0.0
    wheel_rpm = calculate_wheel_rpm(rpm, gear_ratio, final_drive_ratio)
    # Speed = wheel circumference * RPM / 60
    return wheel_rpm * tire_circumference / 60.0
