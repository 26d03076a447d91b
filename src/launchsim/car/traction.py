"""
Traction models - Longitudinal tire force laws.

Each model maps the state of a tire contact patch (slip ratio, normal
load, ...) to the longitudinal force the tire can put on the road. The
models are interchangeable; a WheelPair holds exactly one of them.

Provides:
- ClampedLinearTraction: linear in slip, saturating at peak grip
- LaunchAssistTraction: clamped linear law that can leave standstill
- PacejkaTraction: Magic Formula curve with post-peak falloff
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
import numpy as np


@dataclass(frozen=True)
class ContactState:
    """Inputs a traction model sees for one axle on one tick."""
    slip_ratio: float
    normal_load: float        # N
    vehicle_velocity: float   # m/s
    axle_torque: float = 0.0  # Nm supplied by the drivetrain
    radius: float = 1.0       # m


class TractionModel(ABC):
    """Longitudinal tire force law."""

    @abstractmethod
    def get_traction(self, contact: ContactState) -> float:
        """Get longitudinal traction force.

        Args:
            contact: Contact patch state for this tick

        Returns:
            Traction force in N (positive = driving)
        """

    def get_state(self) -> dict:
        return {"model": type(self).__name__}


class ClampedLinearTraction(TractionModel):
    """Linear slip stiffness saturating at peak grip.

    Force rises linearly with slip until it reaches the peak force, then
    stays there. Both stiffness and peak are quoted at the reference
    load and scale linearly with the actual normal load.
    """

    def __init__(
        self,
        stiffness: float = 44000.0,
        peak_force: float = 4400.0,
        reference_load: float = 4000.0,
    ):
        """Initialize the law.

        Args:
            stiffness: Force per unit slip ratio at reference load (N)
            peak_force: Saturation force at reference load (N)
            reference_load: Normal load the constants are quoted at (N)
        """
        if stiffness <= 0.0 or peak_force <= 0.0 or reference_load <= 0.0:
            raise ValueError("stiffness, peak_force and reference_load must be > 0.")
        self.stiffness = stiffness
        self.peak_force = peak_force
        self.reference_load = reference_load

    @property
    def peak_slip_ratio(self) -> float:
        """Slip ratio at which the force saturates."""
        return self.peak_force / self.stiffness

    def load_factor(self, normal_load: float) -> float:
        """Scale factor for a normal load (0 for an unloaded tire)."""
        if normal_load <= 0.0:
            return 0.0
        return normal_load / self.reference_load

    def get_traction(self, contact: ContactState) -> float:
        force = float(np.clip(
            self.stiffness * contact.slip_ratio,
            -self.peak_force,
            self.peak_force,
        ))
        return force * self.load_factor(contact.normal_load)

    def get_state(self) -> dict:
        return {
            "model": type(self).__name__,
            "stiffness": self.stiffness,
            "peak_force": self.peak_force,
            "reference_load": self.reference_load,
        }


class LaunchAssistTraction(ClampedLinearTraction):
    """Clamped linear law with a standstill launch rule.

    At exactly zero vehicle velocity the slip ratio is defined as 0, so a
    pure slip law never produces force and the car cannot move off. This
    law grants the momentary maximum traction the tire can carry (bounded
    by what the axle torque can push through the tire radius) on those
    ticks. Once the car rolls the plain clamped linear law applies.
    """

    def get_traction(self, contact: ContactState) -> float:
        if contact.vehicle_velocity == 0.0 and contact.axle_torque != 0.0:
            grip = self.peak_force * self.load_factor(contact.normal_load)
            pushable = abs(contact.axle_torque) / contact.radius
            return float(np.sign(contact.axle_torque)) * min(grip, pushable)
        return super().get_traction(contact)


class PacejkaTraction(TractionModel):
    """Longitudinal Pacejka Magic Formula.

    F = mu * Fz * sin(C * atan(B*s - E*(B*s - atan(B*s))))

    Grip peaks near 10% slip and falls off beyond it. There is no launch
    rule, so runs using this law should begin from a rolling start.
    """

    def __init__(
        self,
        peak_mu: float = 1.1,
        b: float = 10.0,
        c: float = 1.9,
        e: float = 0.97,
    ):
        """Initialize the law.

        Args:
            peak_mu: Peak friction coefficient
            b: Stiffness factor
            c: Shape factor
            e: Curvature factor
        """
        if peak_mu <= 0.0:
            raise ValueError("peak_mu must be > 0.")
        self.peak_mu = peak_mu
        self.b = b
        self.c = c
        self.e = e

    def get_traction(self, contact: ContactState) -> float:
        if contact.normal_load <= 0.0:
            return 0.0

        bs = self.b * abs(contact.slip_ratio)
        shape = np.sin(self.c * np.arctan(bs - self.e * (bs - np.arctan(bs))))
        force = float(self.peak_mu * contact.normal_load * shape)
        return force if contact.slip_ratio >= 0 else -force

    def get_state(self) -> dict:
        return {
            "model": type(self).__name__,
            "peak_mu": self.peak_mu,
            "b": self.b,
            "c": self.c,
            "e": self.e,
        }
