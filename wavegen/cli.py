"""
Command-line entry point for wavegen.

Usage::

    # One second of a 440 Hz sine tone
    wavegen sine sine.wav

    # White noise, written to white.wav
    python -m wavegen white
"""

import argparse
import logging
from typing import List, Optional

from riffwave.config import LOG_LEVELS, config
from wavegen import WaveGenerator, WaveType


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wavegen",
        description="Generate one second of a waveform as a 16-bit PCM WAV file.",
    )
    parser.add_argument(
        "wave_type",
        type=WaveType.from_name,
        metavar="WAVE_TYPE",
        help="Waveform kind: " + ", ".join(t.value for t in WaveType) + ".",
    )
    parser.add_argument(
        "output",
        nargs="?",
        default=None,
        help="Output WAV path (default: <wave_type>.wav).",
    )
    parser.add_argument(
        "--log-level",
        default=config.log_level,
        choices=LOG_LEVELS,
        type=str.upper,
        help=f"Logging verbosity (default: {config.log_level}).",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(level=args.log_level, format=LOG_FORMAT)

    output = args.output or f"{args.wave_type.value}.wav"

    generator = WaveGenerator()
    generator.generate(args.wave_type)
    try:
        total = generator.save(output)
    except OSError as e:
        logger.error(f"Failed to save {output}: {e}")
        return 1

    logger.info(f"Wrote {output} ({total} bytes)")
    return 0
