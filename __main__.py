"""
Pendulum Metronome - Main entry point
Run with: python __main__.py [--bpm N]
"""

import sys
import math
import argparse
from pathlib import Path

# Add project root to path if needed
sys.path.insert(0, str(Path(__file__).parent))

from pendulum_metronome.gui.main_app import main as launch
from config.settings import DEFAULT_BPM, SOUND_BACKEND, LOG_LEVEL


def positive_bpm(value: str) -> float:
    """argparse type for a positive tempo."""
    try:
        bpm = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid BPM: {value!r}")
    if not math.isfinite(bpm) or bpm <= 0:
        raise argparse.ArgumentTypeError("BPM must be a positive number")
    return bpm


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Pendulum Metronome - visual metronome with a swinging pendulum",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Start at the default tempo
  python __main__.py

  # Start at 96 BPM with the system bell instead of synthesized cues
  python __main__.py --bpm 96 --sound-backend bell
        """
    )
    parser.add_argument('--bpm', type=positive_bpm, default=DEFAULT_BPM,
                        help=f'Starting BPM (default: {DEFAULT_BPM:g})')
    parser.add_argument('--sound-backend', choices=['auto', 'pygame', 'bell', 'none'],
                        default=SOUND_BACKEND,
                        help=f'Sound backend (default: {SOUND_BACKEND})')
    parser.add_argument('--log-level', default=LOG_LEVEL,
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        type=str.upper,
                        help=f'Logging level (default: {LOG_LEVEL})')
    return parser


def main(argv=None):
    """Main entry point for the Pendulum Metronome CLI."""
    args = build_parser().parse_args(argv)
    launch(bpm=args.bpm, sound_backend=args.sound_backend, log_level=args.log_level)


if __name__ == '__main__':
    main()
