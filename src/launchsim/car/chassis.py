"""
Chassis component - Mass, weight transfer and drive layout.

Defines:
- Static axle loads from total mass and weight distribution
- Center of gravity height
- Longitudinal weight transfer
- Torque split between driven axles
"""

from dataclasses import dataclass
from enum import Enum
import numpy as np

from launchsim.car.traction import TractionModel
from launchsim.car.wheels import WheelPair


GRAVITY = 9.81

# CG height as a fraction of the overall body height
CG_HEIGHT_RATIO = 0.45


class DriveWheels(Enum):
    """Driven axle layout."""
    FRONT = "front"
    REAR = "rear"
    ALL = "all"


@dataclass
class ChassisConfig:
    """Configuration for the chassis and its two axles.

    Defaults describe a mid-size rear-wheel-drive sports car.
    """
    wheel_radius_m: float = 0.33
    wheelbase_m: float = 2.50
    ride_height_m: float = 1.25       # Body height used to estimate CG height
    front_weight_fraction: float = 0.45
    total_mass_kg: float = 1350.0
    wheel_mass_kg: float = 40.0       # Per axle (both wheels)
    drive_wheels: DriveWheels = DriveWheels.REAR

    # Tire force law shared by both axles (None = LaunchAssistTraction)
    traction: TractionModel | None = None

    def __post_init__(self) -> None:
        """Validate chassis parameters."""
        if self.wheel_radius_m <= 0.0:
            raise ValueError("wheel_radius_m must be > 0.0.")
        if self.wheelbase_m <= 0.0:
            raise ValueError("wheelbase_m must be > 0.0.")
        if self.ride_height_m < 0.0:
            raise ValueError("ride_height_m must be >= 0.0.")
        if not 0.0 <= self.front_weight_fraction <= 1.0:
            raise ValueError("front_weight_fraction must be between 0.0 and 1.0.")
        if self.total_mass_kg <= 0.0:
            raise ValueError("total_mass_kg must be > 0.0.")
        if self.wheel_mass_kg <= 0.0:
            raise ValueError("wheel_mass_kg must be > 0.0.")
        if isinstance(self.drive_wheels, str):
            self.drive_wheels = DriveWheels(self.drive_wheels.lower())


class Chassis:
    """Chassis owning both wheel pairs.

    Splits drivetrain torque over the driven axles and shifts normal
    load between axles in proportion to the longitudinal force.
    """

    def __init__(self, config: ChassisConfig | None = None):
        """Initialize chassis with optional custom configuration.

        Args:
            config: Chassis configuration. Uses defaults if None.
        """
        self.config = config or ChassisConfig()
        drive = self.config.drive_wheels

        self.front_wheels = WheelPair(
            self.config.wheel_radius_m,
            self.config.wheel_mass_kg,
            drive in (DriveWheels.FRONT, DriveWheels.ALL),
            self.config.traction,
            position="front",
        )
        self.rear_wheels = WheelPair(
            self.config.wheel_radius_m,
            self.config.wheel_mass_kg,
            drive in (DriveWheels.REAR, DriveWheels.ALL),
            self.config.traction,
            position="rear",
        )

        weight_n = self.config.total_mass_kg * GRAVITY
        self.static_load: tuple[float, float] = (
            weight_n * self.config.front_weight_fraction,
            weight_n * (1.0 - self.config.front_weight_fraction),
        )

        self.torque_distribution: tuple[float, float] = {
            DriveWheels.FRONT: (1.0, 0.0),
            DriveWheels.REAR: (0.0, 1.0),
            DriveWheels.ALL: (0.5, 0.5),
        }[drive]

        self._front_load, self._rear_load = self.static_load

    @property
    def drive_wheels(self) -> DriveWheels:
        return self.config.drive_wheels

    @property
    def cg_height(self) -> float:
        """Center of gravity height in meters."""
        return self.config.ride_height_m * CG_HEIGHT_RATIO

    @property
    def wheel_base(self) -> float:
        return self.config.wheelbase_m

    @property
    def axle_loads(self) -> tuple[float, float]:
        """Dynamic (front, rear) normal loads from the most recent tick."""
        return self._front_load, self._rear_load

    @property
    def driven_wheels(self) -> list[WheelPair]:
        """Wheel pairs receiving drivetrain torque."""
        return [w for w in (self.front_wheels, self.rear_wheels) if w.is_drive_wheel]

    def distribute_weight(self, drive_force: float) -> tuple[float, float]:
        """Get dynamic axle loads under a longitudinal force.

        Forward force moves load to the rear axle. Loads never go below
        zero (an axle cannot pull the road up).

        Args:
            drive_force: Longitudinal force on the body in N

        Returns:
            Tuple of (front_load, rear_load) in N
        """
        shift_to_rear = (self.cg_height / self.wheel_base) * drive_force
        total = self.static_load[0] + self.static_load[1]

        front = float(np.clip(self.static_load[0] - shift_to_rear, 0.0, total))
        rear = float(np.clip(self.static_load[1] + shift_to_rear, 0.0, total))
        return front, rear

    def get_wheel_force(
        self,
        drive_force: float,
        torque: float,
        vehicle_velocity: float,
        dt: float,
    ) -> float:
        """Step both axles and get the total longitudinal tire force.

        Weight transfer uses the drive force of the previous tick.

        Args:
            drive_force: Net longitudinal force from the previous tick in N
            torque: Total drivetrain torque at the axles in Nm
            vehicle_velocity: Longitudinal vehicle velocity in m/s
            dt: Time step in seconds

        Returns:
            Summed axle force in N
        """
        self._front_load, self._rear_load = self.distribute_weight(drive_force)
        front_share, rear_share = self.torque_distribution

        front_force = self.front_wheels.get_force(
            torque * front_share, self._front_load, vehicle_velocity, dt
        )
        rear_force = self.rear_wheels.get_force(
            torque * rear_share, self._rear_load, vehicle_velocity, dt
        )
        return front_force + rear_force

    def get_driven_angular_velocity(self) -> float:
        """Average angular velocity of the driven axles in rad/s."""
        driven = self.driven_wheels
        return sum(w.angular_velocity for w in driven) / len(driven)

    def reset(self, vehicle_velocity: float = 0.0) -> None:
        """Reset axles and loads.

        Args:
            vehicle_velocity: Initial vehicle velocity in m/s
        """
        self.front_wheels.reset(vehicle_velocity)
        self.rear_wheels.reset(vehicle_velocity)
        self._front_load, self._rear_load = self.static_load

    def get_state(self) -> dict:
        """Get current chassis state for telemetry.

        Returns:
            Dictionary containing chassis state values
        """
        return {
            "drive_wheels": self.config.drive_wheels.value,
            "total_mass_kg": self.config.total_mass_kg,
            "cg_height_m": self.cg_height,
            "front_load_n": self._front_load,
            "rear_load_n": self._rear_load,
            "front": self.front_wheels.get_state(),
            "rear": self.rear_wheels.get_state(),
        }
