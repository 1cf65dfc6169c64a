"""
RIFF/WAVE container model and encoder.
"""

from riffwave.config import config, AppConfig, FormatConfig, SynthConfig, LOG_LEVELS
from riffwave.chunks import HeaderChunk, FormatChunk, DataChunk, WaveFile
from riffwave.wav import (
    HEADER_SIZE,
    encode_header,
    encode_format,
    encode_data,
    write_wav,
    save_wav,
    wav_bytes,
)

__all__ = [
    "config",
    "AppConfig",
    "FormatConfig",
    "SynthConfig",
    "LOG_LEVELS",
    "HeaderChunk",
    "FormatChunk",
    "DataChunk",
    "WaveFile",
    "HEADER_SIZE",
    "encode_header",
    "encode_format",
    "encode_data",
    "write_wav",
    "save_wav",
    "wav_bytes",
]
