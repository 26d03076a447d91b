"""
Transmission component - Gearbox and differential.

Simulates:
- Gear ratio table indexed by gear (reverse, neutral, forward gears)
- Differential (final drive) ratio
- Sequential upshifts
"""

from dataclasses import dataclass, field
from typing import List


@dataclass
class TransmissionConfig:
    """Configuration for a sequential gearbox.

    Gear index 0 is reverse. A 0.0 ratio is neutral. The default table
    follows a seven speed dual clutch box.
    """
    gear_ratios: List[float] = field(default_factory=lambda: [
        -2.65,  # Reverse
        0.0,    # Neutral
        3.13,   # 1st
        2.59,   # 2nd
        1.88,   # 3rd
        1.14,   # 4th
        0.90,   # 5th
        0.88,   # 6th
        0.65,   # 7th
    ])

    # Differential ratio
    diff_ratio: float = 3.59

    # Starting gear index (None = first forward gear)
    initial_gear: int | None = None

    def __post_init__(self) -> None:
        """Validate the ratio table."""
        if len(self.gear_ratios) == 0:
            raise ValueError("gear_ratios must not be empty.")
        if self.diff_ratio <= 0.0:
            raise ValueError("diff_ratio must be > 0.0.")
        if self.initial_gear is not None and not 0 <= self.initial_gear < len(self.gear_ratios):
            raise ValueError(
                f"initial_gear {self.initial_gear} outside 0..{len(self.gear_ratios) - 1}."
            )


class Transmission:
    """Sequential gearbox with a fixed differential.

    Gears only move upwards during a run; the car decides when to shift.
    """

    def __init__(self, config: TransmissionConfig | None = None):
        """Initialize transmission with optional custom configuration.

        Args:
            config: Transmission configuration. Uses defaults if None.
        """
        self.config = config or TransmissionConfig()

        self._gear: int = self._starting_gear()

    def _starting_gear(self) -> int:
        if self.config.initial_gear is not None:
            return self.config.initial_gear
        return self.first_forward_gear

    @property
    def gear(self) -> int:
        """Current gear index."""
        return self._gear

    @property
    def max_gear(self) -> int:
        """Highest gear index."""
        return len(self.config.gear_ratios) - 1

    @property
    def diff_ratio(self) -> float:
        return self.config.diff_ratio

    @property
    def first_forward_gear(self) -> int:
        """Index of the lowest gear with a positive ratio."""
        for index, ratio in enumerate(self.config.gear_ratios):
            if ratio > 0.0:
                return index
        return self.max_gear

    @property
    def gear_label(self) -> str:
        """Human readable gear ("R", "N", "1", "2", ...)."""
        ratio = self.config.gear_ratios[self._gear]
        if ratio < 0.0:
            return "R"
        if ratio == 0.0:
            return "N"
        return str(self._gear - self.first_forward_gear + 1)

    def get_ratio(self) -> float:
        """Get total drive ratio (gear ratio * differential).

        Returns:
            Total drive ratio for the current gear
        """
        if not 0 <= self._gear <= self.max_gear:
            raise IndexError(f"invalid gear {self._gear} (max {self.max_gear})")
        return self.config.gear_ratios[self._gear] * self.config.diff_ratio

    def shift_up(self) -> bool:
        """Move up one gear.

        Returns:
            True if the gear changed
        """
        if self._gear >= self.max_gear:
            return False
        self._gear += 1
        return True

    def set_gear(self, gear: int) -> bool:
        """Directly set gear (for initialization or special cases).

        Args:
            gear: Target gear index

        Returns:
            True if gear set successfully
        """
        if gear < 0 or gear > self.max_gear:
            return False
        self._gear = gear
        return True

    def reset(self) -> None:
        """Reset transmission to its starting gear."""
        self._gear = self._starting_gear()

    def get_state(self) -> dict:
        """Get current transmission state for telemetry.

        Returns:
            Dictionary containing transmission state values
        """
        return {
            "gear": self._gear,
            "gear_label": self.gear_label,
            "gear_ratio": self.config.gear_ratios[self._gear],
            "total_ratio": self.get_ratio(),
        }
