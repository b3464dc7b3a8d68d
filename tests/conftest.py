from __future__ import annotations

from pathlib import Path
from typing import Sequence

import numpy as np
import pytest

from diarization_report.domain import SAMPLE_RATE, AudioBuffer, ModelBundle, Segment
from diarization_report.util.config import DiarizationConfig


class FakeModelProvider:
    def __init__(self, error: Exception | None = None) -> None:
        self.error = error
        self.calls = 0

    def acquire(self) -> ModelBundle:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return ModelBundle(pipeline=object(), model_id="fake/diarizer")


class FakeAudioLoader:
    def __init__(self, samples: int = SAMPLE_RATE, error: Exception | None = None) -> None:
        self.samples = samples
        self.error = error
        self.paths: list[str] = []

    def load(self, path) -> AudioBuffer:
        self.paths.append(str(path))
        if self.error is not None:
            raise self.error
        return AudioBuffer(samples=np.zeros(self.samples, dtype=np.float32))


class FakeDiarizationEngine:
    """Returns a fixed, alternating two-speaker timeline."""

    def __init__(self, segments: Sequence[Segment] | None = None, error: Exception | None = None) -> None:
        self.segments = list(segments) if segments is not None else [
            Segment(0.0, 0.5, "0"),
            Segment(0.5, 1.0, "1"),
        ]
        self.error = error
        self.configs: list[DiarizationConfig] = []
        self.audio: list[AudioBuffer] = []

    def run(self, bundle: ModelBundle, config: DiarizationConfig, audio: AudioBuffer) -> list[Segment]:
        self.configs.append(config)
        self.audio.append(audio)
        if self.error is not None:
            raise self.error
        return list(self.segments)


@pytest.fixture
def provider() -> FakeModelProvider:
    return FakeModelProvider()


@pytest.fixture
def loader() -> FakeAudioLoader:
    return FakeAudioLoader()


@pytest.fixture
def engine() -> FakeDiarizationEngine:
    return FakeDiarizationEngine()


@pytest.fixture
def audio_path(tmp_path: Path) -> Path:
    path = tmp_path / "sample.wav"
    path.write_bytes(b"RIFF")
    return path
