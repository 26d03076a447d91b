"""
Simulator - Fixed-step driver around a single car.

Provides:
- Lockstep time stepping (one Car.update per tick)
- Coarse, read-only sampling for display
- Telemetry collection
- 0-60 style speed target timing and top speed
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Tuple
import logging

from launchsim.car.car import Car, CarState
from launchsim.telemetry.recorder import TelemetryRecorder, RecorderConfig


logger = logging.getLogger(__name__)


@dataclass
class SimulatorConfig:
    """Simulator configuration."""
    # Time stepping
    dt: float = 0.0001               # Physics time step (10 kHz)
    duration_s: float | None = 5.0   # Simulated run length (None = until stopped)

    # Display sampling
    display_every: int = 1000        # Ticks between display samples (0 = never)

    # Speeds (mph) whose first crossing time is reported
    speed_targets_mph: Tuple[float, ...] = (60.0, 100.0)

    # Telemetry
    record_telemetry: bool = True
    telemetry_rate_hz: float = 100.0

    def __post_init__(self) -> None:
        if self.dt <= 0.0:
            raise ValueError("dt must be > 0.")
        if self.duration_s is not None and self.duration_s <= 0.0:
            raise ValueError("duration_s must be > 0 or None.")
        if self.display_every < 0:
            raise ValueError("display_every must be >= 0.")


@dataclass
class SimulationResult:
    """Summary of a run."""
    car_name: str
    ticks: int
    elapsed_time: float
    top_speed_mps: float
    target_times: Dict[float, float] = field(default_factory=dict)
    final_telemetry: Dict[str, Any] = field(default_factory=dict)

    @property
    def top_speed_kph(self) -> float:
        return self.top_speed_mps * 3.6

    @property
    def top_speed_mph(self) -> float:
        return self.top_speed_mps * 2.236936

    def to_dict(self) -> Dict[str, Any]:
        return {
            "car": self.car_name,
            "ticks": self.ticks,
            "elapsed_time_s": self.elapsed_time,
            "top_speed_kph": self.top_speed_kph,
            "top_speed_mph": self.top_speed_mph,
            "target_times_s": {f"0-{target:g} mph": t for target, t in self.target_times.items()},
        }


class Simulator:
    """Runs one car in lockstep and samples it for humans.

    Every tick is a single Car.update call. Display callbacks and the
    telemetry recorder only read the car, so the trajectory does not
    depend on how often the run is sampled.

    Usage:
        sim = Simulator(from_template(CarType.AUDI_R8))
        result = sim.run(on_sample=lambda car: print(Simulator.format_status(car)))
        print(result.target_times)
    """

    def __init__(self, car: Car | None = None, config: SimulatorConfig | None = None):
        """Initialize simulator.

        Args:
            car: Car to simulate. Uses a default Car if None.
            config: Simulator configuration. Uses defaults if None.
        """
        self.config = config or SimulatorConfig()
        self.car = car or Car()

        self.recorder: Optional[TelemetryRecorder] = None
        if self.config.record_telemetry:
            self.recorder = TelemetryRecorder(
                RecorderConfig(sample_rate_hz=self.config.telemetry_rate_hz),
                car=self.car,
            )

        self._sample_callbacks: List[Callable[[Car], None]] = []
        self._ticks: int = 0
        self._running: bool = False
        self._top_speed: float = 0.0
        self._target_times: Dict[float, float] = {}

    @property
    def ticks(self) -> int:
        """Ticks taken since the last reset."""
        return self._ticks

    @property
    def time(self) -> float:
        """Current simulation time."""
        return self.car.state.elapsed_time

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def target_times(self) -> Dict[float, float]:
        """Speed target (mph) -> first time reached, for targets reached so far."""
        return dict(self._target_times)

    @property
    def total_ticks(self) -> int | None:
        """Ticks in a full run (None when unbounded)."""
        if self.config.duration_s is None:
            return None
        return int(round(self.config.duration_s / self.config.dt))

    def add_sample_callback(self, callback: Callable[[Car], None]) -> None:
        """Add callback called at the display cadence.

        Args:
            callback: Function taking the car; must not mutate it
        """
        self._sample_callbacks.append(callback)

    def stop(self) -> None:
        """Stop a run in progress after the current tick."""
        self._running = False

    def reset(self, velocity: float = 0.0) -> None:
        """Reset car and run bookkeeping.

        Args:
            velocity: Initial car velocity in m/s
        """
        self.car.reset(velocity)
        self._ticks = 0
        self._running = False
        self._top_speed = abs(velocity)
        self._target_times.clear()
        if self.recorder is not None:
            self.recorder.clear()

    def step(self) -> CarState:
        """Advance the simulation by one tick.

        Returns:
            Car state after the tick
        """
        state = self.car.update(self.config.dt)
        self._ticks += 1

        self._top_speed = max(self._top_speed, state.velocity)
        speed_mph = self.car.speed_mph
        for target in self.config.speed_targets_mph:
            if target not in self._target_times and speed_mph >= target:
                self._target_times[target] = state.elapsed_time
                logger.info("%s: 0-%g mph in %.3f s", self.car.name, target, state.elapsed_time)

        if self.recorder is not None:
            self.recorder.record(state.elapsed_time)

        every = self.config.display_every
        if every and self._ticks % every == 0:
            for callback in self._sample_callbacks:
                callback(self.car)

        return state

    def run(
        self,
        on_sample: Callable[[Car], None] | None = None,
        max_ticks: int | None = None,
    ) -> SimulationResult:
        """Run until the configured duration elapses or stop() is called.

        Args:
            on_sample: Extra display callback for this run
            max_ticks: Override for the number of ticks to run

        Returns:
            Summary of the run
        """
        limit = max_ticks if max_ticks is not None else self.total_ticks
        if on_sample is not None:
            self.add_sample_callback(on_sample)

        logger.info(
            "Running %s: dt=%gs, %s",
            self.car.name,
            self.config.dt,
            f"{limit} ticks" if limit is not None else "until stopped",
        )

        self._running = True
        taken = 0
        try:
            while self._running and (limit is None or taken < limit):
                self.step()
                taken += 1
        finally:
            self._running = False
            if on_sample is not None:
                self._sample_callbacks.remove(on_sample)

        return self.get_result()

    def get_result(self) -> SimulationResult:
        """Summarize the run so far.

        Returns:
            SimulationResult for the current state
        """
        return SimulationResult(
            car_name=self.car.name,
            ticks=self._ticks,
            elapsed_time=self.car.state.elapsed_time,
            top_speed_mps=self._top_speed,
            target_times=self.target_times,
            final_telemetry=self.car.get_telemetry(),
        )

    @staticmethod
    def format_status(car: Car) -> str:
        """Render one human readable status line.

        Args:
            car: Car to describe

        Returns:
            Status line
        """
        return (
            f"t: {car.state.elapsed_time:6.3f} s "
            f"vel: {car.speed_kph:6.2f} km/h "
            f"acc: {car.acceleration:5.2f} m/s^2 "
            f"drive force: {int(car.drive_force)} N "
            f"hp: {int(car.horsepower)} "
            f"drag: {int(car.drag_force)} N "
            f"rolling res: {int(car.rolling_resistance_force)} N "
            f"rpm: {car.engine.rpm} "
            f"torque: {int(car.engine.last_torque)} Nm "
            f"gear: {car.transmission.gear_label}"
        )

    def get_state(self) -> Dict[str, Any]:
        """Get simulation state.

        Returns:
            Dictionary containing simulation state
        """
        return {
            "config": {
                "dt": self.config.dt,
                "duration_s": self.config.duration_s,
                "display_every": self.config.display_every,
            },
            "running": self._running,
            "ticks": self._ticks,
            "time": self.time,
            "top_speed_mps": self._top_speed,
            "target_times": self.target_times,
        }
