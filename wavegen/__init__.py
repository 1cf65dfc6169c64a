"""
Waveform synthesis for the RIFF/WAVE encoder.
"""

from wavegen.generators import (
    WaveType,
    sample_count,
    generate_sine,
    generate_white_noise,
    generate_square,
    generate_sawtooth,
    generate_triangle,
    generate_samples,
)
from wavegen.session import WaveGenerator

__all__ = [
    # Generators
    "WaveType",
    "sample_count",
    "generate_sine",
    "generate_white_noise",
    "generate_square",
    "generate_sawtooth",
    "generate_triangle",
    "generate_samples",
    # Session
    "WaveGenerator",
]
