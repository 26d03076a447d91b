"""
LaunchSim - A straight-line vehicle dynamics simulator.

This package advances a discrete-time model of a car accelerating at full
throttle and exposes its state every tick:
- Engine torque curves, gearbox and differential
- Longitudinal weight transfer and tire slip/traction
- Wheel and body integration with RPM feedback
- Presets of real cars for 0-60 and top speed validation
- Telemetry recording and export
"""

__version__ = "0.1.0"

from launchsim.simulation.simulator import Simulator
from launchsim.car.car import Car

__all__ = ["Simulator", "Car", "__version__"]
