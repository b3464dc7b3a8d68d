import numpy as np
import pytest
import soundfile as sf

from diarization_report.adapters.audio_loader import SoundfileAudioLoader
from diarization_report.errors import AudioIOError


def _tone(sr: int, seconds: float) -> np.ndarray:
    t = np.arange(int(sr * seconds)) / sr
    return (0.2 * np.sin(2 * np.pi * 220.0 * t)).astype(np.float32)


def test_loads_16k_mono_unchanged(tmp_path):
    path = tmp_path / "mono.wav"
    sf.write(path, _tone(16_000, 1.0), 16_000)

    audio = SoundfileAudioLoader().load(path)

    assert audio.sample_rate == 16_000
    assert audio.sample_count == 16_000
    assert audio.samples.dtype == np.float32
    assert audio.samples.ndim == 1


def test_downmixes_stereo(tmp_path):
    path = tmp_path / "stereo.wav"
    left = _tone(16_000, 0.5)
    sf.write(path, np.stack([left, np.zeros_like(left)], axis=1), 16_000, subtype="FLOAT")

    audio = SoundfileAudioLoader().load(path)

    assert audio.sample_count == 8_000
    np.testing.assert_allclose(audio.samples, left / 2, atol=1e-6)


def test_resamples_to_16k(tmp_path):
    path = tmp_path / "phone.wav"
    sf.write(path, _tone(8_000, 2.0), 8_000)

    audio = SoundfileAudioLoader().load(path)

    assert audio.sample_rate == 16_000
    assert abs(audio.sample_count - 32_000) <= 2


def test_missing_file_raises_audio_io_error(tmp_path):
    with pytest.raises(AudioIOError, match="Audio not found"):
        SoundfileAudioLoader().load(tmp_path / "nope.wav")


def test_undecodable_file_raises_audio_io_error(tmp_path):
    path = tmp_path / "junk.wav"
    path.write_bytes(b"not really audio")

    with pytest.raises(AudioIOError, match="Unable to decode"):
        SoundfileAudioLoader().load(path)
