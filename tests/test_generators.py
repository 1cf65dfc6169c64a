"""Tests for waveform sample generation."""

import random

import pytest

from riffwave.chunks import DataChunk, FormatChunk
from riffwave.config import SynthConfig
from wavegen.generators import (
    WaveType,
    generate_samples,
    generate_sine,
    generate_white_noise,
    sample_count,
)


class TestWaveType:
    def test_all_kinds_present(self):
        assert [t.value for t in WaveType] == ["sine", "square", "sawtooth", "triangle", "white"]

    @pytest.mark.parametrize("name", ["sine", "SINE", " Sine "])
    def test_from_name_ignores_case(self, name):
        assert WaveType.from_name(name) is WaveType.SINE

    def test_from_name_unknown(self):
        with pytest.raises(ValueError, match="expected one of"):
            WaveType.from_name("pulse")


@pytest.mark.parametrize("channels,rate", [(1, 8000), (2, 44100), (3, 11025)])
@pytest.mark.parametrize("wave_type", [WaveType.SINE, WaveType.WHITE])
def test_sample_count_is_rate_times_channels(wave_type, channels, rate):
    fmt = FormatChunk(channels=channels, sample_rate=rate)
    samples = generate_samples(wave_type, fmt, rng=random.Random(1))
    assert len(samples) == sample_count(fmt) == rate * channels
    assert DataChunk(samples=samples).chunk_size == len(samples) * 2


class TestSine:
    def test_quarter_turn_steps(self):
        fmt = FormatChunk(channels=1, sample_rate=4)
        assert generate_sine(fmt, frequency=1.0) == [0, 32760, 0, -32760]

    def test_channels_carry_the_same_value(self):
        fmt = FormatChunk(channels=2, sample_rate=4)
        assert generate_sine(fmt, frequency=1.0) == [0, 0, 32760, 32760, 0, 0, -32760, -32760]

    def test_truncates_toward_zero(self):
        # 5 * sin(pi/4) = 3.54 and 5 * sin(5pi/4) = -3.54
        fmt = FormatChunk(channels=1, sample_rate=8)
        assert generate_sine(fmt, frequency=1.0, amplitude=5) == [0, 3, 5, 3, 0, -3, -5, -3]

    def test_default_format(self):
        samples = generate_sine(FormatChunk())
        assert len(samples) == 88200
        assert samples[0] == 0
        assert samples[0::2] == samples[1::2]
        assert max(samples) <= 32760
        assert min(samples) >= -32760

    def test_uses_synth_config(self):
        fmt = FormatChunk(channels=1, sample_rate=4)
        samples = generate_samples(WaveType.SINE, fmt, SynthConfig(frequency=1.0, amplitude=100))
        assert samples == [0, 100, 0, -100]


class TestWhiteNoise:
    def test_range(self):
        samples = generate_white_noise(FormatChunk(), rng=random.Random(7))
        assert len(samples) == 88200
        assert all(-32760 <= s <= 32760 for s in samples)

    def test_seeded_rng_is_reproducible(self):
        fmt = FormatChunk(channels=1, sample_rate=100)
        assert generate_white_noise(fmt, random.Random(3)) == generate_white_noise(fmt, random.Random(3))

    def test_unseeded_runs_differ(self):
        fmt = FormatChunk()
        assert generate_white_noise(fmt) != generate_white_noise(fmt)

    def test_channels_are_independent(self):
        samples = generate_white_noise(FormatChunk(), rng=random.Random(11))
        assert samples[0::2] != samples[1::2]


@pytest.mark.parametrize("wave_type", [WaveType.SQUARE, WaveType.SAWTOOTH, WaveType.TRIANGLE])
def test_unimplemented_kinds_are_empty(wave_type):
    samples = generate_samples(wave_type, FormatChunk())
    assert samples == []
    assert DataChunk(samples=samples).chunk_size == 0
