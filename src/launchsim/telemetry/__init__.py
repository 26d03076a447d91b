"""
Telemetry module - Recording and export of run data.

This module contains:
- TelemetryRecorder: Samples car state over a run
- TelemetryChannel: Individual data channel
- TelemetryExporter: Export telemetry to CSV, JSON and NumPy
"""

from launchsim.telemetry.recorder import TelemetryRecorder, RecorderConfig
from launchsim.telemetry.channel import TelemetryChannel, ChannelConfig
from launchsim.telemetry.exporter import TelemetryExporter, ExporterConfig

__all__ = [
    "TelemetryRecorder",
    "RecorderConfig",
    "TelemetryChannel",
    "ChannelConfig",
    "TelemetryExporter",
    "ExporterConfig",
]
