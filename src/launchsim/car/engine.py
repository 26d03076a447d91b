"""
Engine component - Torque generation for the longitudinal model.

Simulates:
- RPM-based torque curves
- Throttle scaling
- Unit conversion from dyno lb-ft to Nm
- Displayed (SAE) horsepower
"""

from dataclasses import dataclass, field
from typing import Callable
import numpy as np

from launchsim.car.torque_curve import TorqueCurve, TableTorqueCurve, as_torque_curve


# Nm per lb-ft
LBFT_TO_NM = 1.35582

# Torque (lb-ft) * RPM / 5252 = horsepower
HP_CONSTANT = 5252.0


@dataclass
class EngineConfig:
    """Configuration for a combustion (or electric) engine.

    Default values describe a generic naturally aspirated V10 with
    roughly 400 lb-ft of peak torque.
    """
    # RPM limits
    idle_rpm: int = 1000
    max_rpm: int = 8700

    # Torque curve in lb-ft; any rpm -> torque callable is accepted
    torque_curve: TorqueCurve | Callable[[float], float] = field(
        default_factory=lambda: TableTorqueCurve([
            (1000, 240.0),
            (3000, 330.0),
            (5000, 380.0),
            (6500, 400.0),
            (8700, 330.0),
        ])
    )

    # Multiplier taking the curve's unit to Nm
    torque_unit_factor: float = LBFT_TO_NM

    def __post_init__(self) -> None:
        """Validate RPM band and normalize the torque curve."""
        if self.idle_rpm < 0:
            raise ValueError("idle_rpm must be >= 0.")
        if self.idle_rpm >= self.max_rpm:
            raise ValueError("idle_rpm must be below max_rpm.")
        self.torque_curve = as_torque_curve(self.torque_curve)


class Engine:
    """Engine converting throttle and RPM into propulsive torque.

    RPM is an integer engine speed that is clamped to the
    [idle_rpm, max_rpm] band every time it is assigned, so the torque
    curve is only ever queried inside its valid domain.
    """

    def __init__(self, config: EngineConfig | None = None):
        """Initialize engine with optional custom configuration.

        Args:
            config: Engine configuration. Uses defaults if None.
        """
        self.config = config or EngineConfig()

        self._rpm: int = self.config.idle_rpm
        self._last_torque: float = 0.0

    @property
    def idle_rpm(self) -> int:
        return self.config.idle_rpm

    @property
    def max_rpm(self) -> int:
        return self.config.max_rpm

    @property
    def rpm(self) -> int:
        """Current engine RPM."""
        return self._rpm

    @rpm.setter
    def rpm(self, value: float) -> None:
        """Set engine RPM, clamped to valid range."""
        self._rpm = int(np.clip(value, self.config.idle_rpm, self.config.max_rpm))

    @property
    def last_torque(self) -> float:
        """Torque (Nm) returned by the most recent get_torque call."""
        return self._last_torque

    @property
    def at_rev_limit(self) -> bool:
        """Check if the engine sits on the rev limiter."""
        return self._rpm == self.config.max_rpm

    def get_torque(self, throttle: float) -> float:
        """Get output torque in Nm at the current RPM.

        Args:
            throttle: Throttle position (0.0 to 1.0)

        Returns:
            Engine torque in Nm
        """
        if not 0.0 <= throttle <= 1.0:
            raise ValueError(f"throttle must be within [0, 1], got {throttle}")
        if not self.config.idle_rpm <= self._rpm <= self.config.max_rpm:
            raise RuntimeError(
                f"engine rpm {self._rpm} outside torque curve domain "
                f"[{self.config.idle_rpm}, {self.config.max_rpm}]"
            )

        curve_torque = self.config.torque_curve.torque_at(self._rpm)
        self._last_torque = curve_torque * throttle * self.config.torque_unit_factor
        return self._last_torque

    def get_horsepower(self, torque: float | None = None) -> float:
        """Get SAE horsepower for a torque at the current RPM.

        Display only; never fed back into the physics.

        Args:
            torque: Torque in Nm (uses last_torque if None)

        Returns:
            Horsepower
        """
        torque = self._last_torque if torque is None else torque
        return (torque / LBFT_TO_NM) * self._rpm / HP_CONSTANT

    def reset(self) -> None:
        """Reset engine to idle."""
        self._rpm = self.config.idle_rpm
        self._last_torque = 0.0

    def get_state(self) -> dict:
        """Get current engine state for telemetry.

        Returns:
            Dictionary containing engine state values
        """
        return {
            "rpm": self._rpm,
            "torque_nm": self._last_torque,
            "horsepower": self.get_horsepower(),
            "rev_limiter_active": self.at_rev_limit,
        }
