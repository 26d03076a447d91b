#!/usr/bin/env python3
"""
Telemetry Analysis Example

This example demonstrates how to:
1. Record telemetry during a launch
2. Read channel statistics
3. Find shift points in the recorded gear channel
4. Export telemetry to CSV, JSON and NumPy

Run with: python record_telemetry.py
"""

from pathlib import Path

import numpy as np

from launchsim.car import CarType, from_template
from launchsim.telemetry import TelemetryRecorder, TelemetryExporter, RecorderConfig
from launchsim.telemetry.exporter import ExporterConfig


def main():
    print("=" * 60)
    print("LaunchSim Telemetry Recording Example")
    print("=" * 60)

    output_dir = Path(__file__).parent / "output"

    # Step 1: Car and recorder
    print("\n1. Setting up...")
    car = from_template(CarType.TESLA_MODEL_S_PLAID)
    recorder = TelemetryRecorder(RecorderConfig(sample_rate_hz=200.0), car=car)
    print(f"   Car: {car.name}")
    print(f"   Recording {len(recorder.channels)} channels at {recorder.config.sample_rate_hz:g} Hz")

    # Step 2: Launch for four simulated seconds
    print("\n2. Launching (40000 ticks at 10 kHz)...")
    for tick in range(40000):
        car.update(0.0001)
        recorder.record(car.state.elapsed_time)
        if (tick + 1) % 10000 == 0:
            print(f"   t={car.state.elapsed_time:.1f} s: {car.speed_kph:.1f} km/h")

    # Step 3: Statistics
    print("\n3. Telemetry statistics:")
    stats = recorder.get_statistics()
    for name in ("speed_kph", "acceleration", "rpm", "horsepower", "rear_load"):
        s = stats[name]
        print(f"   {name:<14} min {s['min']:>10} max {s['max']:>10} mean {s['mean']:>10}")

    # Step 4: Shift points
    print("\n4. Shift points:")
    gear = recorder.get_channel("gear")
    gears, times = gear.get_values(), gear.get_times()
    shifts = np.flatnonzero(np.diff(gears) > 0) + 1
    if len(shifts) == 0:
        print("   No shifts")
    for i in shifts:
        print(f"   {times[i]:.3f} s -> gear index {int(gears[i])}")

    # Step 5: Export
    print("\n5. Exporting telemetry...")
    exporter = TelemetryExporter(ExporterConfig(output_dir=str(output_dir)))
    print(f"   CSV: {exporter.export_csv(recorder, 'launch.csv')}")
    print(f"   JSON: {exporter.export_json(recorder, 'launch.json')}")
    print(f"   NumPy: {exporter.export_numpy(recorder, 'launch.npz')}")

    print("\n" + "=" * 60)
    print(f"Telemetry exported to: {output_dir}")
    print("=" * 60)


if __name__ == "__main__":
    main()
