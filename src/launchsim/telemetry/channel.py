"""
Telemetry channel - A single recorded signal.

Provides:
- Bounded time-series buffer
- Running statistics
- Time window queries
"""

from collections import deque
from dataclasses import dataclass
from typing import Deque
import numpy as np


@dataclass
class ChannelConfig:
    """Configuration for a telemetry channel."""
    name: str = "unnamed"
    unit: str = ""
    precision: int = 3
    buffer_size: int = 100000


class TelemetryChannel:
    """Time series for one measurement.

    Oldest samples are dropped once the buffer is full. Min and max
    cover every sample ever recorded; the mean covers the buffer.
    """

    def __init__(self, config: ChannelConfig | None = None, name: str = "channel"):
        """Initialize channel.

        Args:
            config: Channel configuration
            name: Channel name (used if config not provided)
        """
        self.config = config or ChannelConfig(name=name)

        self._times: Deque[float] = deque(maxlen=self.config.buffer_size)
        self._values: Deque[float] = deque(maxlen=self.config.buffer_size)

        self._min: float = float("inf")
        self._max: float = float("-inf")
        self._count: int = 0

    @property
    def name(self) -> str:
        return self.config.name

    @property
    def unit(self) -> str:
        return self.config.unit

    @property
    def count(self) -> int:
        """Number of samples ever recorded."""
        return self._count

    @property
    def min_value(self) -> float:
        return self._min if self._count > 0 else 0.0

    @property
    def max_value(self) -> float:
        return self._max if self._count > 0 else 0.0

    @property
    def mean(self) -> float:
        """Mean of buffered values."""
        return float(np.mean(self._values)) if self._values else 0.0

    @property
    def last_value(self) -> float:
        return self._values[-1] if self._values else 0.0

    def record(self, time: float, value: float) -> None:
        """Record a new sample.

        Args:
            time: Simulation time in seconds
            value: Sample value
        """
        value = float(value)
        self._times.append(time)
        self._values.append(value)

        self._min = min(self._min, value)
        self._max = max(self._max, value)
        self._count += 1

    def get_values(self) -> np.ndarray:
        return np.array(self._values)

    def get_times(self) -> np.ndarray:
        return np.array(self._times)

    def get_range(self, start_time: float, end_time: float) -> tuple[np.ndarray, np.ndarray]:
        """Get samples inside a time window.

        Args:
            start_time: Start of window (inclusive)
            end_time: End of window (inclusive)

        Returns:
            Tuple of (times, values) arrays
        """
        times = self.get_times()
        values = self.get_values()
        mask = (times >= start_time) & (times <= end_time)
        return times[mask], values[mask]

    def clear(self) -> None:
        """Clear all recorded data."""
        self._times.clear()
        self._values.clear()
        self._min = float("inf")
        self._max = float("-inf")
        self._count = 0

    def get_state(self) -> dict:
        """Get channel summary.

        Returns:
            Dictionary with channel statistics
        """
        precision = self.config.precision
        has_data = self._count > 0
        return {
            "name": self.config.name,
            "unit": self.config.unit,
            "count": self._count,
            "min": round(self._min, precision) if has_data else None,
            "max": round(self._max, precision) if has_data else None,
            "mean": round(self.mean, precision) if has_data else None,
            "last": round(self.last_value, precision) if has_data else None,
        }
