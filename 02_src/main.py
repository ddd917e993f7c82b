"""Main entry point for the Fundamentals bridge server."""

import argparse
import sys
from pathlib import Path

from dotenv import load_dotenv

from fundamentals.config import BridgeConfig
from fundamentals.logging_config import setup_logging
from fundamentals.server import run


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Replay a recorded visualization session to web viewers"
    )
    parser.add_argument("-a", "--address", help="Address to bind (default: 127.0.0.1)")
    parser.add_argument("-p", "--port", type=int, help="Port to listen on (default: 3031)")
    parser.add_argument("-i", "--input", help="Path to the input recording file")
    parser.add_argument(
        "--exit-after-serve",
        action="store_true",
        default=None,
        help="Exit after serving the first request",
    )
    parser.add_argument(
        "--open-browser",
        action="store_true",
        default=None,
        help="Open the viewer in a browser on startup",
    )
    parser.add_argument("--static-dir", help="Directory with the built web viewer")
    return parser


def config_from_args(args: argparse.Namespace) -> BridgeConfig:
    """Environment defaults, overridden by any flags given."""
    config = BridgeConfig.from_env()
    if args.address:
        config.host = args.address
    if args.port is not None:
        config.port = args.port
    if args.input:
        config.input_path = Path(args.input)
    if args.exit_after_serve is not None:
        config.exit_after_serve = args.exit_after_serve
    if args.open_browser is not None:
        config.open_browser = args.open_browser
    if args.static_dir:
        config.static_dir = Path(args.static_dir)
    return config


def main(argv: list[str] | None = None) -> int:
    """Run the bridge."""
    project_root = Path(__file__).resolve().parent.parent
    load_dotenv(project_root / ".env")

    args = build_parser().parse_args(argv)
    setup_logging()

    try:
        config = config_from_args(args)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    return run(config)


if __name__ == "__main__":
    sys.exit(main())
