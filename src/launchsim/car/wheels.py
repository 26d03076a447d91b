"""
Wheel pair component - One axle's two wheels treated as a unit.

Simulates:
- Longitudinal slip ratio
- Traction force through a pluggable traction model
- Wheel spin-up from drivetrain torque and traction reaction
"""

import numpy as np

from launchsim.car.traction import ContactState, LaunchAssistTraction, TractionModel


# rad/s -> rev/min
RADS_TO_RPM = 60.0 / (2.0 * np.pi)


class WheelPair:
    """Axle aggregate owning rotational inertia and tire state.

    get_force is the only mutator of angular velocity, slip and traction
    and is called once per tick.
    """

    def __init__(
        self,
        radius: float,
        mass: float,
        is_drive_wheel: bool,
        traction_model: TractionModel | None = None,
        position: str = "front",
    ):
        """Initialize wheel pair.

        Args:
            radius: Tire rolling radius in meters
            mass: Combined mass of both wheels in kg
            is_drive_wheel: Whether the drivetrain feeds this axle
            traction_model: Tire force law. Uses LaunchAssistTraction if None.
            position: Axle identifier ("front" or "rear")
        """
        if radius <= 0.0:
            raise ValueError("radius must be > 0.")
        if mass <= 0.0:
            raise ValueError("mass must be > 0.")

        self.radius = radius
        self.mass = mass
        self.is_drive_wheel = is_drive_wheel
        self.traction_model = traction_model or LaunchAssistTraction()
        self.position = position

        # Solid disc approximation
        self.inertia = mass * radius ** 2 / 2.0

        self._angular_velocity: float = 0.0
        self._slip_ratio: float = 0.0
        self._traction_force: float = 0.0
        self._normal_load: float = 0.0

        # Braking is not modelled; kept as the slot a brake system would drive
        self.brake_torque: float = 0.0

    @property
    def angular_velocity(self) -> float:
        """Wheel angular velocity in rad/s."""
        return self._angular_velocity

    @property
    def wheel_rpm(self) -> float:
        """Wheel speed in rev/min."""
        return self._angular_velocity * RADS_TO_RPM

    @property
    def surface_speed(self) -> float:
        """Tread speed in m/s."""
        return self._angular_velocity * self.radius

    @property
    def slip_ratio(self) -> float:
        """Slip ratio from the most recent tick."""
        return self._slip_ratio

    @property
    def traction_force(self) -> float:
        """Traction force in N from the most recent tick."""
        return self._traction_force

    @property
    def normal_load(self) -> float:
        """Normal load in N from the most recent tick."""
        return self._normal_load

    def get_slip(self, vehicle_velocity: float) -> float:
        """Calculate slip ratio against the vehicle's ground speed.

        Positive slip means the tread outruns the ground (driving),
        negative means it lags (braking). Zero at standstill.

        Args:
            vehicle_velocity: Longitudinal vehicle velocity in m/s

        Returns:
            Slip ratio
        """
        if vehicle_velocity == 0.0:
            return 0.0
        return (self.surface_speed - vehicle_velocity) / abs(vehicle_velocity)

    def get_force(
        self,
        axle_torque: float,
        normal_load: float,
        vehicle_velocity: float,
        dt: float,
    ) -> float:
        """Advance the axle one tick and get its propulsive force.

        Args:
            axle_torque: Drivetrain torque delivered to this axle in Nm
            normal_load: Vertical load on the axle in N
            vehicle_velocity: Longitudinal vehicle velocity in m/s
            dt: Time step in seconds

        Returns:
            Longitudinal force this axle contributes in N
        """
        if not self.is_drive_wheel and axle_torque != 0.0:
            raise ValueError(f"{self.position} axle is not driven but received {axle_torque} Nm")

        self._normal_load = normal_load
        self._slip_ratio = self.get_slip(vehicle_velocity)
        self._traction_force = self.traction_model.get_traction(ContactState(
            slip_ratio=self._slip_ratio,
            normal_load=normal_load,
            vehicle_velocity=vehicle_velocity,
            axle_torque=axle_torque,
            radius=self.radius,
        ))

        if not self.is_drive_wheel:
            # Free rolling; traction is reported but not propulsive
            self._angular_velocity = vehicle_velocity / self.radius
            return 0.0

        net_torque = axle_torque - self._traction_force * self.radius - self.brake_torque
        angular_acceleration = net_torque / self.inertia
        self._angular_velocity += angular_acceleration * dt

        return self._traction_force

    def reset(self, vehicle_velocity: float = 0.0) -> None:
        """Reset to rolling without slip at the given velocity.

        Args:
            vehicle_velocity: Initial vehicle velocity in m/s
        """
        self._angular_velocity = vehicle_velocity / self.radius
        self._slip_ratio = 0.0
        self._traction_force = 0.0
        self._normal_load = 0.0

    def get_state(self) -> dict:
        """Get current axle state for telemetry.

        Returns:
            Dictionary containing axle state values
        """
        return {
            "position": self.position,
            "is_drive_wheel": self.is_drive_wheel,
            "angular_velocity": self._angular_velocity,
            "wheel_rpm": self.wheel_rpm,
            "slip_ratio": self._slip_ratio,
            "traction_force_n": self._traction_force,
            "load_n": self._normal_load,
        }
