"""
Car - Complete longitudinal vehicle model.

Integrates all car components:
- Engine
- Transmission
- Chassis (weight transfer, wheel pairs, tires)

and closes the loop between them once per tick: torque generation,
drivetrain transfer, weight transfer, tire traction, body integration
and RPM feedback.
"""

from dataclasses import dataclass, field
from typing import Any, Dict
import logging

from launchsim.car.engine import Engine, EngineConfig
from launchsim.car.transmission import Transmission, TransmissionConfig
from launchsim.car.chassis import Chassis, ChassisConfig, GRAVITY
from launchsim.car.wheels import RADS_TO_RPM


logger = logging.getLogger(__name__)

MPS_TO_KPH = 3.6
MPS_TO_MPH = 2.236936


@dataclass
class CarConfig:
    """Complete car configuration."""
    engine: EngineConfig = field(default_factory=EngineConfig)
    transmission: TransmissionConfig = field(default_factory=TransmissionConfig)
    chassis: ChassisConfig = field(default_factory=ChassisConfig)

    # Resistances: drag = v^2 * Cd, rolling = v * Crr
    drag_coefficient: float = 0.34
    rolling_resistance_coefficient: float = 10.2

    # Fraction of tire force surviving gearbox and differential losses
    drivetrain_efficiency: float = 0.75

    # Upshift when engine RPM exceeds this
    shift_rpm: int = 8000

    # Fixed throttle position for the whole run
    throttle: float = 1.0

    def __post_init__(self) -> None:
        """Validate car parameters."""
        if self.drag_coefficient < 0.0:
            raise ValueError("drag_coefficient must be >= 0.0.")
        if self.rolling_resistance_coefficient < 0.0:
            raise ValueError("rolling_resistance_coefficient must be >= 0.0.")
        if not 0.0 < self.drivetrain_efficiency <= 1.0:
            raise ValueError("drivetrain_efficiency must be in (0.0, 1.0].")
        if not 0.0 <= self.throttle <= 1.0:
            raise ValueError("throttle must be between 0.0 and 1.0.")


@dataclass
class CarState:
    """Translational state and force breakdown of the car."""
    velocity: float = 0.0              # Longitudinal, m/s
    acceleration: float = 0.0          # m/s^2
    distance: float = 0.0              # m
    elapsed_time: float = 0.0          # s
    ticks: int = 0

    drive_force: float = 0.0           # Net longitudinal force, N
    drag_force: float = 0.0            # N
    rolling_resistance_force: float = 0.0  # N
    horsepower: float = 0.0            # Display only


class Car:
    """Straight-line car accelerating at a fixed throttle.

    Owns the engine, transmission and chassis and advances them with a
    fixed-step explicit Euler update.

    Usage:
        car = Car()
        for _ in range(10000):
            car.update(0.0001)
        print(car.speed_kph, car.engine.rpm, car.transmission.gear)
    """

    def __init__(self, config: CarConfig | None = None, name: str = "car"):
        """Initialize car with optional configuration.

        Args:
            config: Car configuration. Uses defaults if None.
            name: Display name
        """
        self.config = config or CarConfig()
        self.name = name

        self.engine = Engine(self.config.engine)
        self.transmission = Transmission(self.config.transmission)
        self.chassis = Chassis(self.config.chassis)

        # Constant for the run (no fuel burn)
        self.mass: float = sum(self.chassis.static_load) / GRAVITY

        self.state = CarState()

    def reset(self, velocity: float = 0.0) -> None:
        """Reset car to a standing or rolling start.

        Args:
            velocity: Initial longitudinal velocity in m/s
        """
        self.engine.reset()
        self.transmission.reset()
        self.chassis.reset(velocity)
        self.state = CarState(velocity=velocity)
        if velocity != 0.0:
            self._update_rpm()

    @property
    def velocity(self) -> float:
        """Longitudinal velocity in m/s."""
        return self.state.velocity

    @property
    def acceleration(self) -> float:
        return self.state.acceleration

    @property
    def drive_force(self) -> float:
        return self.state.drive_force

    @property
    def drag_force(self) -> float:
        return self.state.drag_force

    @property
    def rolling_resistance_force(self) -> float:
        return self.state.rolling_resistance_force

    @property
    def horsepower(self) -> float:
        return self.state.horsepower

    @property
    def speed_kph(self) -> float:
        """Current speed in km/h."""
        return self.state.velocity * MPS_TO_KPH

    @property
    def speed_mph(self) -> float:
        """Current speed in mph."""
        return self.state.velocity * MPS_TO_MPH

    def _update_rpm(self) -> None:
        """Feed driven wheel speed back through the gearbox to the engine."""
        wheel_rpm = self.chassis.get_driven_angular_velocity() * RADS_TO_RPM
        self.engine.rpm = wheel_rpm * self.transmission.get_ratio()

    def update(self, dt: float) -> CarState:
        """Advance the car by one time step.

        Args:
            dt: Time step in seconds

        Returns:
            Updated car state
        """
        if dt <= 0.0:
            raise ValueError(f"dt must be > 0, got {dt}")

        state = self.state
        throttle = self.config.throttle

        if (
            self.engine.rpm > self.config.shift_rpm
            and self.transmission.gear < self.transmission.max_gear
        ):
            self.transmission.shift_up()
            logger.debug(
                "%s upshift to gear %s at %d rpm, %.1f km/h (t=%.4fs)",
                self.name,
                self.transmission.gear_label,
                self.engine.rpm,
                self.speed_kph,
                state.elapsed_time,
            )

        if self.engine.at_rev_limit:
            # Fuel cut: wheels keep turning but deliver no drive
            self.chassis.get_wheel_force(state.drive_force, 0.0, state.velocity, dt)
            drive_force = 0.0
        else:
            axle_torque = self.engine.get_torque(throttle) * self.transmission.get_ratio()
            drive_force = self.chassis.get_wheel_force(
                state.drive_force, axle_torque, state.velocity, dt
            )

        drive_force *= self.config.drivetrain_efficiency

        state.drag_force = state.velocity ** 2 * self.config.drag_coefficient
        state.rolling_resistance_force = state.velocity * self.config.rolling_resistance_coefficient
        state.drive_force = drive_force - (state.drag_force + state.rolling_resistance_force)

        state.acceleration = state.drive_force / self.mass
        state.velocity += state.acceleration * dt
        state.distance += state.velocity * dt
        state.elapsed_time += dt
        state.ticks += 1

        self._update_rpm()

        state.horsepower = self.engine.get_horsepower(self.engine.get_torque(throttle))

        return state

    def get_telemetry(self) -> Dict[str, Any]:
        """Get complete car telemetry.

        Read-only; safe to call at any cadence without disturbing the run.

        Returns:
            Dictionary containing all car telemetry data
        """
        return {
            "name": self.name,
            "state": {
                "time_s": self.state.elapsed_time,
                "ticks": self.state.ticks,
                "velocity_mps": self.state.velocity,
                "speed_kph": self.speed_kph,
                "speed_mph": self.speed_mph,
                "acceleration_mps2": self.state.acceleration,
                "distance_m": self.state.distance,
                "drive_force_n": self.state.drive_force,
                "drag_n": self.state.drag_force,
                "rolling_resistance_n": self.state.rolling_resistance_force,
                "horsepower": self.state.horsepower,
            },
            "engine": self.engine.get_state(),
            "transmission": self.transmission.get_state(),
            "chassis": self.chassis.get_state(),
        }
