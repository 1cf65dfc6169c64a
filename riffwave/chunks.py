"""
In-memory model of a RIFF/WAVE PCM file.
One header chunk, one format chunk and one data chunk.
"""

from dataclasses import dataclass, field
from typing import List

from riffwave.config import SUPPORTED_BITS_PER_SAMPLE, FormatConfig


# Bytes per serialized sample; samples are always written as <i16
SAMPLE_WIDTH = SUPPORTED_BITS_PER_SAMPLE // 8

PCM_FORMAT_TAG = 1
PCM_FORMAT_CHUNK_SIZE = 16


@dataclass
class HeaderChunk:
    """RIFF container header.

    ``file_length`` is the total file length minus 8. It is unknown until
    every sample has been written, so it starts as a 0 placeholder and is
    patched by the encoder.
    """
    chunk_id: bytes = b"RIFF"
    file_length: int = 0
    riff_type: bytes = b"WAVE"


@dataclass(frozen=True)
class FormatChunk:
    """PCM format descriptor (the ``fmt `` chunk)."""
    channels: int = 2
    sample_rate: int = 44100
    bits_per_sample: int = SUPPORTED_BITS_PER_SAMPLE
    chunk_id: bytes = field(default=b"fmt ", init=False)
    chunk_size: int = field(default=PCM_FORMAT_CHUNK_SIZE, init=False)
    tag: int = field(default=PCM_FORMAT_TAG, init=False)

    def __post_init__(self):
        # Reuse the config validation so both layers agree on what is legal
        FormatConfig(
            sample_rate=self.sample_rate,
            channels=self.channels,
            bits_per_sample=self.bits_per_sample,
        )

    @classmethod
    def from_config(cls, fmt: FormatConfig) -> "FormatChunk":
        return cls(
            channels=fmt.channels,
            sample_rate=fmt.sample_rate,
            bits_per_sample=fmt.bits_per_sample,
        )

    @property
    def bytes_per_sample(self) -> int:
        return self.bits_per_sample // 8

    @property
    def block_align(self) -> int:
        return self.channels * self.bytes_per_sample

    @property
    def avg_bytes_per_sec(self) -> int:
        return self.sample_rate * self.block_align


@dataclass
class DataChunk:
    """Interleaved signed 16-bit samples (frame 0 ch 0, frame 0 ch 1, ...)."""
    samples: List[int] = field(default_factory=list)
    chunk_id: bytes = field(default=b"data", init=False)

    @property
    def chunk_size(self) -> int:
        """Serialized byte length of ``samples``."""
        return len(self.samples) * SAMPLE_WIDTH


@dataclass
class WaveFile:
    """The three chunks of one generation session."""
    header: HeaderChunk = field(default_factory=HeaderChunk)
    format: FormatChunk = field(default_factory=FormatChunk)
    data: DataChunk = field(default_factory=DataChunk)

    @classmethod
    def create(cls, channels: int = 2, sample_rate: int = 44100) -> "WaveFile":
        return cls.from_config(FormatConfig(sample_rate=sample_rate, channels=channels))

    @classmethod
    def from_config(cls, fmt: FormatConfig) -> "WaveFile":
        return cls(
            header=HeaderChunk(),
            format=FormatChunk.from_config(fmt),
            data=DataChunk(),
        )
