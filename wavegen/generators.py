"""
Waveform sample generators.
Each generator fills one second of interleaved signed 16-bit samples.
"""

import logging
import math
import random
from enum import Enum
from typing import Callable, Dict, List, Optional

from riffwave.chunks import FormatChunk
from riffwave.config import SynthConfig


logger = logging.getLogger(__name__)


class WaveType(Enum):
    """Selectable waveform kinds."""
    SINE = "sine"
    SQUARE = "square"
    SAWTOOTH = "sawtooth"
    TRIANGLE = "triangle"
    WHITE = "white"

    @classmethod
    def from_name(cls, name: str) -> "WaveType":
        """Parse a wave type name, ignoring case."""
        try:
            return cls(name.strip().lower())
        except ValueError:
            valid = ", ".join(t.value for t in cls)
            raise ValueError(f"Unknown wave type {name!r} (expected one of: {valid})") from None


def sample_count(fmt: FormatChunk) -> int:
    """Number of output slots for one second of audio: rate x channels."""
    return fmt.sample_rate * fmt.channels


def generate_sine(
    fmt: FormatChunk,
    frequency: float = 440.0,
    amplitude: int = 32760,
) -> List[int]:
    """
    Generate a sine tone, identical on every channel.

    The angular step is spread over the whole output buffer, and each frame
    takes its value from the output index of its first slot. Loop starts stop
    ``channels - 1`` indices before the end so a frame is never written past
    the buffer. Values are truncated toward zero, not rounded.
    """
    size = sample_count(fmt)
    channels = fmt.channels
    step = 2.0 * math.pi * frequency / size

    samples: List[int] = []
    for i in range(0, size - (channels - 1), channels):
        value = int(amplitude * math.sin(step * i))
        samples.extend([value] * channels)
    return samples


def generate_white_noise(
    fmt: FormatChunk,
    rng: Optional[random.Random] = None,
    noise_range: int = 32760,
) -> List[int]:
    """Uniform white noise, one independent draw per output slot.

    Without ``rng`` a fresh generator seeded from OS entropy is used.
    """
    if rng is None:
        rng = random.Random()
    return [rng.randint(-noise_range, noise_range) for _ in range(sample_count(fmt))]


def generate_square(fmt: FormatChunk) -> List[int]:
    """Not implemented yet; produces no samples."""
    return []


def generate_sawtooth(fmt: FormatChunk) -> List[int]:
    """Not implemented yet; produces no samples."""
    return []


def generate_triangle(fmt: FormatChunk) -> List[int]:
    """Not implemented yet; produces no samples."""
    return []


def generate_samples(
    wave_type: WaveType,
    fmt: FormatChunk,
    synth: Optional[SynthConfig] = None,
    rng: Optional[random.Random] = None,
) -> List[int]:
    """
    Dispatch to the generator for ``wave_type``.

    Args:
        wave_type: Waveform kind
        fmt: Target sample format (channels and sample rate)
        synth: Frequency and amplitude settings, defaults when omitted
        rng: Random source for white noise

    Returns:
        Interleaved samples
    """
    synth = synth or SynthConfig()
    generators: Dict[WaveType, Callable[[], List[int]]] = {
        WaveType.SINE: lambda: generate_sine(fmt, synth.frequency, synth.amplitude),
        WaveType.SQUARE: lambda: generate_square(fmt),
        WaveType.SAWTOOTH: lambda: generate_sawtooth(fmt),
        WaveType.TRIANGLE: lambda: generate_triangle(fmt),
        WaveType.WHITE: lambda: generate_white_noise(fmt, rng, synth.noise_range),
    }
    samples = generators[wave_type]()
    if not samples:
        logger.warning(f"Wave type {wave_type.value} is not implemented, data chunk left empty")
    return samples
