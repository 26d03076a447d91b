"""
Simulation module - Fixed-step driver around a single car.

This module contains:
- Simulator: Runs the per-tick update and samples state for display
- SimulationResult: Summary of a finished run (0-60 style times, top speed)
"""

from launchsim.simulation.simulator import Simulator, SimulatorConfig, SimulationResult

__all__ = [
    "Simulator",
    "SimulatorConfig",
    "SimulationResult",
]
