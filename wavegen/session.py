"""
Waveform generation session.
Owns one WaveFile model from generation through save.
"""

import logging
import os
import random
from dataclasses import replace
from typing import Optional, Union

from riffwave.chunks import DataChunk, FormatChunk, HeaderChunk, WaveFile
from riffwave.config import AppConfig, config as default_config
from riffwave.wav import save_wav, wav_bytes
from wavegen.generators import WaveType, generate_samples


logger = logging.getLogger(__name__)


class WaveGenerator:
    """
    Generates one waveform and saves it as a WAV file.

    All three chunks are created together when the session starts. The data
    chunk is populated by exactly one ``generate`` call; afterwards only the
    header file length changes, when the encoder patches it on save.
    """

    def __init__(
        self,
        channels: Optional[int] = None,
        sample_rate: Optional[int] = None,
        config: Optional[AppConfig] = None,
    ):
        self._config = config or default_config
        fmt = self._config.format
        if channels is not None or sample_rate is not None:
            fmt = replace(
                fmt,
                channels=channels if channels is not None else fmt.channels,
                sample_rate=sample_rate if sample_rate is not None else fmt.sample_rate,
            )
        self._wave = WaveFile.from_config(fmt)
        self._wave_type: Optional[WaveType] = None

    @property
    def wave(self) -> WaveFile:
        return self._wave

    @property
    def header(self) -> HeaderChunk:
        return self._wave.header

    @property
    def format(self) -> FormatChunk:
        return self._wave.format

    @property
    def data(self) -> DataChunk:
        return self._wave.data

    @property
    def wave_type(self) -> Optional[WaveType]:
        return self._wave_type

    def generate(self, wave_type: WaveType, rng: Optional[random.Random] = None) -> None:
        """Fill the data chunk with one second of ``wave_type`` samples."""
        if self._wave_type is not None:
            raise RuntimeError(
                f"Data chunk already holds {self._wave_type.value} samples; "
                "start a new session to generate another waveform"
            )

        samples = generate_samples(wave_type, self.format, self._config.synth, rng)
        self._wave.data.samples = samples
        self._wave_type = wave_type
        logger.info(f"Generated {wave_type.value}: {len(samples)} samples ({self.data.chunk_size} bytes)")

    def save(self, path: Union[str, os.PathLike]) -> int:
        """Write the WAV file to ``path``; returns the number of bytes written."""
        return save_wav(self._wave, path)

    def to_bytes(self) -> bytes:
        """Encode the WAV file in memory."""
        return wav_bytes(self._wave)
