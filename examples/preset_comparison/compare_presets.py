#!/usr/bin/env python3
"""
Preset Comparison Example

This example demonstrates how to:
1. Build every preset car
2. Run each one from standstill for the same simulated time
3. Compare 0-60 / 0-100 mph times and top speed

Run with: python compare_presets.py
"""

from launchsim import Simulator
from launchsim.car import CarType, from_template
from launchsim.simulation import SimulatorConfig


def main():
    print("=" * 60)
    print("LaunchSim Preset Comparison")
    print("=" * 60)

    config = SimulatorConfig(duration_s=8.0, display_every=20000, record_telemetry=False)
    results = []

    for car_type in CarType:
        car = from_template(car_type)
        print(f"\n{car.name}: {car.mass:.0f} kg, "
              f"{car.chassis.config.drive_wheels.value} wheel drive, "
              f"{car.transmission.max_gear + 1} gear slots")

        sim = Simulator(car, config)
        result = sim.run(on_sample=lambda c: print("   " + Simulator.format_status(c)))
        results.append(result)

    print("\n" + "-" * 60)
    print(f"{'car':<24}{'0-60 mph':>10}{'0-100 mph':>11}{'top km/h':>11}")
    for result in results:
        t60 = result.target_times.get(60.0)
        t100 = result.target_times.get(100.0)
        print(f"{result.car_name:<24}"
              f"{(f'{t60:.2f} s' if t60 is not None else '-'):>10}"
              f"{(f'{t100:.2f} s' if t100 is not None else '-'):>11}"
              f"{result.top_speed_kph:>11.1f}")
    print("=" * 60)


if __name__ == "__main__":
    main()
