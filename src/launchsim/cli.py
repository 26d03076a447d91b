"""
LaunchSim command line runner.

Runs a preset car from standstill at full throttle, printing its state
at a coarse cadence and a 0-60 / top speed summary at the end.

Usage:
    launchsim                              # Audi R8, 5 simulated seconds
    launchsim --car tesla-model-s-plaid    # Another preset
    launchsim --duration 0                 # Run until Ctrl-C
    launchsim --export-csv run.csv         # Save telemetry
"""

import argparse
import logging
import sys
from pathlib import Path

from launchsim.car.presets import CarType, from_template
from launchsim.simulation.simulator import Simulator, SimulatorConfig
from launchsim.telemetry.exporter import TelemetryExporter, ExporterConfig


logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="launchsim",
        description="Straight-line vehicle dynamics simulator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    # Audi R8 for 5 simulated seconds
    launchsim

    # Tesla Model S Plaid, print every 0.5 s of simulated time
    launchsim --car tesla-model-s-plaid --display-every 5000

    # Start the R8 in a specific gear index
    launchsim --gear 3

    # Run until interrupted, saving telemetry
    launchsim --duration 0 --export-csv run.csv
        """
    )

    sim_group = parser.add_argument_group("Simulation")
    sim_group.add_argument(
        "--car",
        choices=CarType.names(),
        default=CarType.AUDI_R8.value,
        help="Car preset (default: audi-r8)"
    )
    sim_group.add_argument(
        "--dt",
        type=float,
        default=0.0001,
        help="Physics time step in seconds (default: 0.0001)"
    )
    sim_group.add_argument(
        "--duration",
        type=float,
        default=5.0,
        help="Simulated seconds to run, 0 = until interrupted (default: 5.0)"
    )
    sim_group.add_argument(
        "--gear",
        type=int,
        help="Starting gear index (default: first forward gear)"
    )
    sim_group.add_argument(
        "--display-every",
        type=int,
        default=1000,
        metavar="TICKS",
        help="Ticks between status lines, 0 = quiet (default: 1000)"
    )

    out_group = parser.add_argument_group("Output")
    out_group.add_argument(
        "--export-csv",
        type=Path,
        help="Write recorded telemetry to this CSV file"
    )
    out_group.add_argument(
        "--export-json",
        type=Path,
        help="Write recorded telemetry to this JSON file"
    )
    out_group.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Log level (default: WARNING)"
    )
    out_group.add_argument(
        "--log-file",
        type=Path,
        help="Also write logs to this file"
    )

    args = parser.parse_args(argv)
    if args.dt <= 0.0:
        parser.error(f"--dt must be > 0, got {args.dt:g}")
    if args.duration < 0.0:
        parser.error(f"--duration must be >= 0 (0 = until interrupted), got {args.duration:g}")
    if args.display_every < 0:
        parser.error(f"--display-every must be >= 0, got {args.display_every}")
    return args


def setup_logging(level: str, log_file: Path | None = None) -> None:
    """Configure logging."""
    log_format = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]

    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=getattr(logging, level),
        format=log_format,
        handlers=handlers,
    )


def print_summary(result) -> None:
    """Print the end-of-run summary."""
    print("\n" + "=" * 60)
    print(f"{result.car_name}: {result.elapsed_time:.3f} s simulated over {result.ticks} ticks")
    print(f"Top speed: {result.top_speed_kph:.1f} km/h ({result.top_speed_mph:.1f} mph)")
    for target, elapsed in sorted(result.target_times.items()):
        print(f"0-{target:g} mph: {elapsed:.3f} s")
    print("=" * 60)


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    setup_logging(args.log_level, args.log_file)

    car = from_template(CarType.from_name(args.car))
    if args.gear is not None and not car.transmission.set_gear(args.gear):
        print(f"Invalid gear {args.gear} (0..{car.transmission.max_gear})", file=sys.stderr)
        return 2

    record = args.export_csv is not None or args.export_json is not None
    config = SimulatorConfig(
        dt=args.dt,
        duration_s=args.duration if args.duration > 0 else None,
        display_every=args.display_every,
        record_telemetry=record,
    )
    sim = Simulator(car, config)

    try:
        sim.run(on_sample=lambda c: print(Simulator.format_status(c)))
    except KeyboardInterrupt:
        logger.info("Interrupted after %d ticks", sim.ticks)

    print_summary(sim.get_result())

    if sim.recorder is not None:
        exporter = TelemetryExporter(ExporterConfig(output_dir="."))
        if args.export_csv:
            print(f"Telemetry CSV: {exporter.export_csv(sim.recorder, args.export_csv)}")
        if args.export_json:
            print(f"Telemetry JSON: {exporter.export_json(sim.recorder, args.export_json)}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
