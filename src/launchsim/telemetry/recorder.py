"""
Telemetry recorder - Records car telemetry over a run.

Provides:
- Standard longitudinal channels
- Sample rate limiting
- Read-only capture from a Car
"""

from dataclasses import dataclass, replace
from typing import Any, Dict, List, Optional

from launchsim.telemetry.channel import TelemetryChannel, ChannelConfig
from launchsim.car.car import Car


STANDARD_CHANNELS = {
    # Motion
    "speed_kph": ChannelConfig("speed_kph", "km/h", 1),
    "acceleration": ChannelConfig("acceleration", "m/s^2", 3),
    "distance": ChannelConfig("distance", "m", 2),

    # Forces
    "drive_force": ChannelConfig("drive_force", "N", 1),
    "drag": ChannelConfig("drag", "N", 1),
    "rolling_resistance": ChannelConfig("rolling_resistance", "N", 1),

    # Powertrain
    "rpm": ChannelConfig("rpm", "rpm", 0),
    "torque": ChannelConfig("torque", "Nm", 1),
    "horsepower": ChannelConfig("horsepower", "hp", 1),
    "gear": ChannelConfig("gear", "", 0),

    # Axles
    "front_slip": ChannelConfig("front_slip", "", 4),
    "rear_slip": ChannelConfig("rear_slip", "", 4),
    "front_traction": ChannelConfig("front_traction", "N", 1),
    "rear_traction": ChannelConfig("rear_traction", "N", 1),
    "front_load": ChannelConfig("front_load", "N", 1),
    "rear_load": ChannelConfig("rear_load", "N", 1),
}


@dataclass
class RecorderConfig:
    """Recorder configuration."""
    sample_rate_hz: float = 100.0        # Recording frequency in sim time
    channels: List[str] | None = None    # Channels to record (None = all)
    buffer_size: int = 100000            # Per-channel buffer size


class TelemetryRecorder:
    """Records car telemetry at a fixed simulated rate.

    Recording only reads from the car, so the simulated trajectory is
    the same with or without a recorder attached.
    """

    def __init__(
        self,
        config: RecorderConfig | None = None,
        car: Car | None = None,
    ):
        """Initialize recorder.

        Args:
            config: Recorder configuration
            car: Car to record (can be set later)
        """
        self.config = config or RecorderConfig()
        if self.config.sample_rate_hz <= 0.0:
            raise ValueError("sample_rate_hz must be > 0.")
        self._car = car

        self._channels: Dict[str, TelemetryChannel] = {}
        self._setup_channels()

        self._last_sample_time: float = float("-inf")
        self._sample_interval: float = 1.0 / self.config.sample_rate_hz

    def _setup_channels(self) -> None:
        """Set up telemetry channels."""
        channel_names = self.config.channels or list(STANDARD_CHANNELS.keys())

        unknown = [name for name in channel_names if name not in STANDARD_CHANNELS]
        if unknown:
            raise ValueError(
                f"unknown telemetry channel(s) {', '.join(unknown)} "
                f"(choose from {', '.join(STANDARD_CHANNELS)})"
            )

        for name in channel_names:
            cfg = replace(STANDARD_CHANNELS[name], buffer_size=self.config.buffer_size)
            self._channels[name] = TelemetryChannel(cfg)

    def set_car(self, car: Car) -> None:
        """Attach the car to sample when record() gets no telemetry."""
        self._car = car

    @property
    def channels(self) -> Dict[str, TelemetryChannel]:
        return self._channels

    @property
    def sample_count(self) -> int:
        """Number of samples taken (per channel)."""
        return max((ch.count for ch in self._channels.values()), default=0)

    def get_channel(self, name: str) -> Optional[TelemetryChannel]:
        return self._channels.get(name)

    def record(self, time: float, telemetry: Dict[str, Any] | None = None) -> bool:
        """Record telemetry if a sample is due.

        Args:
            time: Current simulation time
            telemetry: Telemetry dict (fetches from car if None)

        Returns:
            True if a sample was recorded
        """
        # Small tolerance against accumulated float error in sim time
        if time - self._last_sample_time < self._sample_interval - 1e-9:
            return False

        if telemetry is None and self._car is not None:
            telemetry = self._car.get_telemetry()
        if telemetry is None:
            return False

        self._last_sample_time = time
        self._record_from_telemetry(time, telemetry)
        return True

    def _record_from_telemetry(self, time: float, telemetry: Dict[str, Any]) -> None:
        """Extract values from telemetry and record to channels.

        Args:
            time: Timestamp
            telemetry: Full telemetry dictionary from Car.get_telemetry
        """
        state = telemetry.get("state", {})
        engine = telemetry.get("engine", {})
        transmission = telemetry.get("transmission", {})
        chassis = telemetry.get("chassis", {})
        front = chassis.get("front", {})
        rear = chassis.get("rear", {})

        channel_values = {
            "speed_kph": state.get("speed_kph", 0.0),
            "acceleration": state.get("acceleration_mps2", 0.0),
            "distance": state.get("distance_m", 0.0),
            "drive_force": state.get("drive_force_n", 0.0),
            "drag": state.get("drag_n", 0.0),
            "rolling_resistance": state.get("rolling_resistance_n", 0.0),
            "rpm": engine.get("rpm", 0),
            "torque": engine.get("torque_nm", 0.0),
            "horsepower": state.get("horsepower", 0.0),
            "gear": transmission.get("gear", 0),
            "front_slip": front.get("slip_ratio", 0.0),
            "rear_slip": rear.get("slip_ratio", 0.0),
            "front_traction": front.get("traction_force_n", 0.0),
            "rear_traction": rear.get("traction_force_n", 0.0),
            "front_load": chassis.get("front_load_n", 0.0),
            "rear_load": chassis.get("rear_load_n", 0.0),
        }

        for name, value in channel_values.items():
            if name in self._channels:
                self._channels[name].record(time, value)

    def get_current_values(self) -> Dict[str, float]:
        return {name: ch.last_value for name, ch in self._channels.items()}

    def get_statistics(self) -> Dict[str, Dict[str, Any]]:
        return {name: ch.get_state() for name, ch in self._channels.items()}

    def clear(self) -> None:
        """Clear all recorded data."""
        for channel in self._channels.values():
            channel.clear()
        self._last_sample_time = float("-inf")

    def get_state(self) -> dict:
        """Get recorder state.

        Returns:
            Dictionary containing recorder state
        """
        return {
            "car": self._car.name if self._car is not None else None,
            "sample_rate_hz": self.config.sample_rate_hz,
            "total_samples": self.sample_count,
            "channels": self.get_statistics(),
        }
