"""
Configuration settings for waveform generation.
Centralized configuration management with environment variable support.
"""

import os
from dataclasses import dataclass, field


# Only 16-bit linear PCM is written
SUPPORTED_BITS_PER_SAMPLE = 16

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass(frozen=True)
class FormatConfig:
    """PCM sample format configuration."""
    sample_rate: int = 44100
    channels: int = 2
    bits_per_sample: int = SUPPORTED_BITS_PER_SAMPLE

    def __post_init__(self):
        if self.sample_rate < 1:
            raise ValueError(f"sample_rate must be positive, got {self.sample_rate}")
        if self.channels < 1:
            raise ValueError(f"channels must be positive, got {self.channels}")
        if self.bits_per_sample != SUPPORTED_BITS_PER_SAMPLE:
            raise ValueError(
                f"only {SUPPORTED_BITS_PER_SAMPLE}-bit PCM is supported, "
                f"got {self.bits_per_sample}"
            )


@dataclass(frozen=True)
class SynthConfig:
    """Waveform synthesis parameters."""
    frequency: float = 440.0   # concert A
    amplitude: int = 32760     # headroom below the 16-bit maximum
    noise_range: int = 32760   # white noise draws from [-noise_range, noise_range]


@dataclass
class AppConfig:
    """Main application configuration."""
    format: FormatConfig = field(default_factory=FormatConfig)
    synth: SynthConfig = field(default_factory=SynthConfig)
    log_level: str = "INFO"

    def __post_init__(self):
        if self.log_level not in LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {', '.join(LOG_LEVELS)}, got {self.log_level!r}"
            )

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Create configuration from environment variables."""
        return cls(
            format=FormatConfig(
                sample_rate=int(os.getenv("WAVEGEN_SAMPLE_RATE", "44100")),
                channels=int(os.getenv("WAVEGEN_CHANNELS", "2")),
            ),
            synth=SynthConfig(
                frequency=float(os.getenv("WAVEGEN_FREQUENCY", "440.0")),
            ),
            log_level=os.getenv("WAVEGEN_LOG_LEVEL", "INFO").upper(),
        )


# Global configuration instance
config = AppConfig.from_env()
