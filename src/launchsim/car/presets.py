"""
Car presets - Parameter sets for real production cars.

Numbers come from manufacturer data sheets and dyno plots; the torque
curves are closed-form fits of those plots in lb-ft.

Published figures for the real cars:
- Audi R8 V10: 0-60 mph in 3.2-3.8 s, top speed ~200 mph
- Tesla Model S Plaid: 0-60 mph ~2 s, 0-100 mph ~4 s, peak ~1020 hp

The model does not reach them. Both presets run on the default tire law
(peak mu 1.1), lose a quarter of the tire force to the drivetrain and
have no launch or traction control, so they are grip limited off the
line. The R8 is modelled front driven: its front tires spin up through
gears 2 to 6 within half a second, then hold just under the 8000 rpm
shift point in gear 6 while the car catches up with them. The model's
0-60 times are the *_ZERO_TO_SIXTY_S constants below, reproduced to
within ZERO_TO_SIXTY_TOLERANCE_S.
"""

from enum import Enum
from typing import Callable, Dict
import numpy as np

from launchsim.car.car import Car, CarConfig
from launchsim.car.chassis import ChassisConfig, DriveWheels
from launchsim.car.engine import EngineConfig
from launchsim.car.torque_curve import FunctionTorqueCurve
from launchsim.car.transmission import TransmissionConfig


# Simulated 0-60 mph at dt = 1e-4 s from the first forward gear
AUDI_R8_ZERO_TO_SIXTY_S = 9.2
TESLA_PLAID_ZERO_TO_SIXTY_S = 4.6
ZERO_TO_SIXTY_TOLERANCE_S = 0.5


class CarType(Enum):
    """Available car presets."""
    AUDI_R8 = "audi-r8"
    TESLA_MODEL_S_PLAID = "tesla-model-s-plaid"

    @classmethod
    def from_name(cls, name: str) -> "CarType":
        """Look up a preset by its CLI name.

        Args:
            name: Preset name, e.g. "audi-r8"

        Returns:
            Matching CarType
        """
        key = name.strip().lower().replace("_", "-")
        for car_type in cls:
            if car_type.value == key:
                return car_type
        raise KeyError(f"unknown car preset '{name}' (choose from {', '.join(cls.names())})")

    @classmethod
    def names(cls) -> list[str]:
        return [car_type.value for car_type in cls]


def audi_r8_torque(rpm: float) -> float:
    """Audi R8 5.2 FSI V10 torque fit (lb-ft)."""
    return (
        -4371.57 * (rpm / 12600.0 - 1.0) ** 3
        - 0.0000588218 * (rpm - 1.0) ** 2
        + rpm
        - 4082.43
    )


def tesla_plaid_torque(rpm: float) -> float:
    """Tesla Model S Plaid tri-motor torque fit (lb-ft)."""
    return float(-387.669 * np.tanh(rpm / 5000.0 - 1.98572) + 683.534)


def _audi_r8() -> CarConfig:
    return CarConfig(
        engine=EngineConfig(
            idle_rpm=1000,
            max_rpm=8700,
            torque_curve=FunctionTorqueCurve(audi_r8_torque, "audi_r8"),
        ),
        transmission=TransmissionConfig(
            gear_ratios=[-2.65, 0.0, 3.133, 2.588, 1.880, 1.140, 0.898, 0.884, 0.653],
            diff_ratio=3.59,
        ),
        chassis=ChassisConfig(
            wheel_radius_m=0.254,
            wheelbase_m=2.64922,
            ride_height_m=1.24,
            front_weight_fraction=0.44,
            total_mass_kg=1587.12,
            wheel_mass_kg=40.0,
            drive_wheels=DriveWheels.FRONT,
        ),
        drag_coefficient=0.34,
        rolling_resistance_coefficient=10.2,
    )


def _tesla_model_s_plaid() -> CarConfig:
    return CarConfig(
        engine=EngineConfig(
            idle_rpm=1000,
            max_rpm=23300,
            torque_curve=FunctionTorqueCurve(tesla_plaid_torque, "tesla_plaid"),
        ),
        transmission=TransmissionConfig(
            gear_ratios=[-1.0, 0.0, 1.0],
            diff_ratio=7.5,
        ),
        chassis=ChassisConfig(
            wheel_radius_m=0.2667,
            wheelbase_m=2.9591,
            ride_height_m=1.332,
            front_weight_fraction=0.48,
            total_mass_kg=2184.501,
            wheel_mass_kg=44.0,
            drive_wheels=DriveWheels.ALL,
        ),
        drag_coefficient=0.24,
        rolling_resistance_coefficient=10.2,
    )


PRESETS: Dict[CarType, Callable[[], CarConfig]] = {
    CarType.AUDI_R8: _audi_r8,
    CarType.TESLA_MODEL_S_PLAID: _tesla_model_s_plaid,
}


def get_preset_config(car_type: CarType) -> CarConfig:
    """Build a fresh configuration for a preset.

    Args:
        car_type: Preset to build

    Returns:
        New CarConfig (safe to modify)
    """
    return PRESETS[car_type]()


def from_template(car_type: CarType) -> Car:
    """Build a car from a preset.

    Args:
        car_type: Preset to build

    Returns:
        Car at standstill in its first forward gear
    """
    return Car(get_preset_config(car_type), name=car_type.value)
