"""
Telemetry exporter - Write recorded runs to disk.

Provides:
- CSV export (one row per sample)
- JSON export with channel statistics
- Compressed NumPy archive
"""

from dataclasses import dataclass
from pathlib import Path
from typing import List
import csv
import json
import logging
import numpy as np

from launchsim.telemetry.recorder import TelemetryRecorder


logger = logging.getLogger(__name__)


class NumpyEncoder(json.JSONEncoder):
    """JSON encoder that handles numpy types."""

    def default(self, obj):
        if isinstance(obj, np.integer):
            return int(obj)
        if isinstance(obj, np.floating):
            return float(obj)
        if isinstance(obj, np.bool_):
            return bool(obj)
        if isinstance(obj, np.ndarray):
            return obj.tolist()
        return super().default(obj)


@dataclass
class ExporterConfig:
    """Exporter configuration."""
    output_dir: str = "./telemetry_data"
    include_metadata: bool = True


class TelemetryExporter:
    """Export recorded telemetry for analysis in external tools."""

    def __init__(self, config: ExporterConfig | None = None):
        """Initialize exporter.

        Args:
            config: Exporter configuration
        """
        self.config = config or ExporterConfig()
        self._output_path = Path(self.config.output_dir)

    def _resolve(self, filename: str | Path) -> Path:
        path = Path(filename)
        if not path.is_absolute():
            path = self._output_path / path
        path.parent.mkdir(parents=True, exist_ok=True)
        return path

    def export_csv(
        self,
        recorder: TelemetryRecorder,
        filename: str | Path = "telemetry.csv",
        channels: List[str] | None = None,
    ) -> Path:
        """Export telemetry to CSV.

        All channels of a recorder are sampled together, so rows line up
        on the shared time base.

        Args:
            recorder: Telemetry recorder with data
            filename: Output filename (relative to output_dir) or path
            channels: Channels to export (None = all)

        Returns:
            Path to exported file
        """
        output_file = self._resolve(filename)
        names = channels if channels is not None else list(recorder.channels.keys())
        missing = [name for name in names if name not in recorder.channels]
        if missing:
            raise ValueError(f"recorder has no channel(s) {', '.join(missing)}")
        selected = [recorder.channels[name] for name in names]

        lengths = {len(ch.get_times()) for ch in selected}
        if len(lengths) > 1:
            raise ValueError(
                "channels are not on a shared time base: "
                + ", ".join(f"{ch.name}={len(ch.get_times())}" for ch in selected)
            )

        times = selected[0].get_times() if selected else np.array([])
        columns = [ch.get_values() for ch in selected]

        with open(output_file, "w", newline="") as f:
            writer = csv.writer(f)
            writer.writerow(["time"] + names)
            for i, t in enumerate(times):
                row = [f"{t:.4f}"]
                for ch, values in zip(selected, columns):
                    row.append(f"{values[i]:.{ch.config.precision}f}")
                writer.writerow(row)

        logger.info("Wrote %d samples to %s", len(times), output_file)
        return output_file

    def export_json(
        self,
        recorder: TelemetryRecorder,
        filename: str | Path = "telemetry.json",
    ) -> Path:
        """Export telemetry to JSON.

        Args:
            recorder: Telemetry recorder with data
            filename: Output filename (relative to output_dir) or path

        Returns:
            Path to exported file
        """
        output_file = self._resolve(filename)

        data = {
            "metadata": recorder.get_state() if self.config.include_metadata else {},
            "channels": {},
        }
        for name, channel in recorder.channels.items():
            data["channels"][name] = {
                "unit": channel.unit,
                "times": channel.get_times(),
                "values": channel.get_values(),
            }

        with open(output_file, "w") as f:
            json.dump(data, f, indent=2, cls=NumpyEncoder)

        logger.info("Wrote telemetry JSON to %s", output_file)
        return output_file

    def export_numpy(
        self,
        recorder: TelemetryRecorder,
        filename: str | Path = "telemetry.npz",
    ) -> Path:
        """Export telemetry to a compressed NumPy archive.

        Args:
            recorder: Telemetry recorder with data
            filename: Output filename (relative to output_dir) or path

        Returns:
            Path to exported file
        """
        output_file = self._resolve(filename)

        arrays = {}
        for name, channel in recorder.channels.items():
            arrays[f"{name}_times"] = channel.get_times()
            arrays[f"{name}_values"] = channel.get_values()

        np.savez_compressed(output_file, **arrays)

        logger.info("Wrote telemetry archive to %s", output_file)
        return output_file
