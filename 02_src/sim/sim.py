"""SIM - demo producer that records a fixed scenario."""

import argparse
import math
import sys
from pathlib import Path

from fundamentals.config import DEFAULT_PORT, DEFAULT_RECORDING_PATH
from fundamentals.logging_config import get_logger, setup_logging
from fundamentals.sdk import Logger, Plotter, ThreeDPlotter

logger = get_logger(__name__)


class Sim:
    """Builds a sine-wave plot and an animated 3D spiral into one recording."""

    def __init__(
        self,
        name: str = "Test Logger",
        output: Path = DEFAULT_RECORDING_PATH,
        plot_points: int = 100,
        frames: int = 100,
        points_per_frame: int = 50,
    ):
        self._name = name
        self._output = Path(output)
        self._plot_points = plot_points
        self._frames = frames
        self._points_per_frame = points_per_frame

    def record(self, rec: Logger) -> None:
        """Log the scenario into `rec`."""
        plotter = Plotter("Test Plotter")
        for i in range(self._plot_points):
            x = i / 20.0
            plotter.add_point(x, math.sin(x * 10.0))
        logger.info("Logging Test Plotter")
        plotter.log(rec.recording)

        # 10 frames per second; the spiral grows and rotates over time
        view = ThreeDPlotter("Test 3D View")
        for frame in range(self._frames):
            t = frame * 0.1
            points = []
            for i in range(self._points_per_frame):
                angle = i * 0.2 + t
                radius = i * 0.1 + t * 0.5
                points.append(
                    (
                        math.cos(angle) * radius,
                        math.sin(angle) * radius,
                        i * 0.1 + math.sin(t),
                    )
                )
            view.add_points(points, t)
        logger.info("Logging 3D View")
        view.log(rec.recording)

    def run(self) -> Logger:
        """Record the scenario; the recording is saved when the scope exits."""
        with Logger(self._name, path=self._output) as rec:
            self.record(rec)
        return rec


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Record the demo scenario")
    parser.add_argument(
        "-o", "--output", default=str(DEFAULT_RECORDING_PATH), help="Recording file"
    )
    parser.add_argument(
        "--bridge", action="store_true", help="Serve the recording after saving it"
    )
    parser.add_argument("-p", "--port", type=int, default=DEFAULT_PORT)
    parser.add_argument("--exit-after-serve", action="store_true")
    parser.add_argument("--open-browser", action="store_true")
    args = parser.parse_args(argv)

    setup_logging()
    logger.info("Starting Test Logger")
    rec = Sim(output=Path(args.output)).run()

    if args.bridge:
        logger.info("Launching Bridge")
        return rec.launch_bridge(
            port=args.port,
            exit_after_serve=args.exit_after_serve,
            open_browser=args.open_browser,
        )
    return 0


if __name__ == "__main__":
    sys.exit(main())
