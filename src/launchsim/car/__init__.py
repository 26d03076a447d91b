"""
Car module - Longitudinal vehicle model.

This module contains all car-related components:
- TorqueCurve: RPM to torque mapping strategies
- Engine: Torque generation, RPM band
- Transmission: Gear ratios, differential, upshifts
- Traction models: Slip to tire force laws
- WheelPair: Axle inertia, slip and traction state
- Chassis: Weight transfer, torque split
- Car: Per-tick integration tying everything together
- Presets: Real car parameter sets
"""

from launchsim.car.car import Car, CarConfig, CarState
from launchsim.car.engine import Engine, EngineConfig
from launchsim.car.transmission import Transmission, TransmissionConfig
from launchsim.car.chassis import Chassis, ChassisConfig, DriveWheels
from launchsim.car.wheels import WheelPair
from launchsim.car.traction import (
    ContactState,
    TractionModel,
    ClampedLinearTraction,
    LaunchAssistTraction,
    PacejkaTraction,
)
from launchsim.car.torque_curve import (
    TorqueCurve,
    TableTorqueCurve,
    PolynomialTorqueCurve,
    FunctionTorqueCurve,
)
from launchsim.car.presets import (
    CarType,
    get_preset_config,
    from_template,
    AUDI_R8_ZERO_TO_SIXTY_S,
    TESLA_PLAID_ZERO_TO_SIXTY_S,
    ZERO_TO_SIXTY_TOLERANCE_S,
)

__all__ = [
    "Car",
    "CarConfig",
    "CarState",
    "Engine",
    "EngineConfig",
    "Transmission",
    "TransmissionConfig",
    "Chassis",
    "ChassisConfig",
    "DriveWheels",
    "WheelPair",
    "ContactState",
    "TractionModel",
    "ClampedLinearTraction",
    "LaunchAssistTraction",
    "PacejkaTraction",
    "TorqueCurve",
    "TableTorqueCurve",
    "PolynomialTorqueCurve",
    "FunctionTorqueCurve",
    "CarType",
    "get_preset_config",
    "from_template",
    "AUDI_R8_ZERO_TO_SIXTY_S",
    "TESLA_PLAID_ZERO_TO_SIXTY_S",
    "ZERO_TO_SIXTY_TOLERANCE_S",
]
