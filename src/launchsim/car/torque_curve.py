"""
Torque curve strategies - Engine speed to raw torque mapping.

Provides:
- TorqueCurve: evaluation interface shared by all curves
- TableTorqueCurve: linear interpolation over measured points
- PolynomialTorqueCurve: closed-form polynomial fit
- FunctionTorqueCurve: adapter for any plain callable

Curves return torque in lb-ft, the unit manufacturer dyno sheets are
published in. The engine converts to Nm.
"""

from abc import ABC, abstractmethod
from typing import Callable, List, Sequence, Tuple
import numpy as np


class TorqueCurve(ABC):
    """Pure mapping from engine RPM to torque."""

    @abstractmethod
    def torque_at(self, rpm: float) -> float:
        """Get torque at the given engine speed.

        Args:
            rpm: Engine RPM

        Returns:
            Torque in lb-ft
        """

    def __call__(self, rpm: float) -> float:
        return self.torque_at(rpm)

    def sample(self, rpms: Sequence[float]) -> np.ndarray:
        """Evaluate the curve at several engine speeds.

        Args:
            rpms: Engine speeds to query

        Returns:
            Numpy array of torques in lb-ft
        """
        return np.array([self.torque_at(rpm) for rpm in rpms])

    def peak(self, idle_rpm: float, max_rpm: float, points: int = 200) -> Tuple[float, float]:
        """Find the peak torque inside an RPM band by sampling.

        Args:
            idle_rpm: Lower bound of the band
            max_rpm: Upper bound of the band
            points: Number of sample points

        Returns:
            Tuple of (rpm, torque) at the sampled peak
        """
        rpms = np.linspace(idle_rpm, max_rpm, points)
        torques = self.sample(rpms)
        idx = int(np.argmax(torques))
        return float(rpms[idx]), float(torques[idx])


class TableTorqueCurve(TorqueCurve):
    """Torque curve defined by (rpm, torque) points.

    Values between points are linearly interpolated, values outside the
    table hold the first/last point.
    """

    def __init__(self, points: List[Tuple[float, float]]):
        """Initialize from dyno points.

        Args:
            points: List of (rpm, torque_lbft) tuples
        """
        if len(points) < 2:
            raise ValueError("torque table needs at least two points")

        points = sorted(points)
        self.points = points
        self._rpms = np.array([p[0] for p in points], dtype=float)
        self._torques = np.array([p[1] for p in points], dtype=float)

    def torque_at(self, rpm: float) -> float:
        return float(np.interp(rpm, self._rpms, self._torques))


class PolynomialTorqueCurve(TorqueCurve):
    """Torque curve given as polynomial coefficients (highest power first)."""

    def __init__(self, coefficients: Sequence[float]):
        if len(coefficients) == 0:
            raise ValueError("polynomial needs at least one coefficient")
        self.coefficients = np.array(coefficients, dtype=float)

    def torque_at(self, rpm: float) -> float:
        return float(np.polyval(self.coefficients, rpm))


class FunctionTorqueCurve(TorqueCurve):
    """Adapter turning a plain ``rpm -> torque`` callable into a curve."""

    def __init__(self, func: Callable[[float], float], name: str = ""):
        self.func = func
        self.name = name or getattr(func, "__name__", "torque_curve")

    def torque_at(self, rpm: float) -> float:
        return float(self.func(rpm))


def as_torque_curve(curve: TorqueCurve | Callable[[float], float]) -> TorqueCurve:
    """Coerce a callable into a TorqueCurve.

    Args:
        curve: A TorqueCurve or any ``rpm -> torque`` callable

    Returns:
        TorqueCurve instance
    """
    if isinstance(curve, TorqueCurve):
        return curve
    if callable(curve):
        return FunctionTorqueCurve(curve)
    raise TypeError(f"torque curve must be callable, got {type(curve).__name__}")
