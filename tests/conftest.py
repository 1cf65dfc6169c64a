import struct
import wave

import pytest

from riffwave.config import AppConfig, FormatConfig, SynthConfig


@pytest.fixture
def app_config():
    """Fixed defaults, independent of the process environment."""
    return AppConfig(format=FormatConfig(), synth=SynthConfig(), log_level="INFO")


@pytest.fixture
def read_wav():
    """Parse a WAV file with the standard library reader.

    Returns (params, samples) where samples is the flat interleaved list.
    """
    def _read(path):
        with wave.open(str(path), "rb") as wf:
            params = wf.getparams()
            frames = wf.readframes(wf.getnframes())
        count = len(frames) // 2
        return params, list(struct.unpack(f"<{count}h", frames))

    return _read
