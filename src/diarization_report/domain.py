"""Value types and collaborator protocols shared by the pipeline and adapters."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Protocol, Sequence, Union

import numpy as np

from .util.config import DiarizationConfig

SAMPLE_RATE = 16_000


@dataclass(frozen=True)
class AudioBuffer:
    """Mono PCM samples at ``SAMPLE_RATE``."""

    samples: np.ndarray
    sample_rate: int = SAMPLE_RATE

    @property
    def sample_count(self) -> int:
        return int(self.samples.shape[0])


@dataclass(frozen=True)
class Segment:
    """A ``[start, end)`` span attributed to one speaker."""

    start_time_seconds: float
    end_time_seconds: float
    speaker_id: str

    @property
    def duration(self) -> float:
        return self.end_time_seconds - self.start_time_seconds


@dataclass
class ModelBundle:
    """Whatever the provider loaded; only the matching engine looks inside."""

    pipeline: Any
    model_id: str
    device: str = "cpu"
    metadata: Dict[str, Any] = field(default_factory=dict)


class ModelProvider(Protocol):
    def acquire(self) -> ModelBundle: ...


class AudioLoader(Protocol):
    def load(self, path: Union[str, Path]) -> AudioBuffer: ...


class DiarizationEngine(Protocol):
    def run(
        self, bundle: ModelBundle, config: DiarizationConfig, audio: AudioBuffer
    ) -> Sequence[Segment]: ...


__all__ = [
    "AudioBuffer",
    "AudioLoader",
    "DiarizationEngine",
    "ModelBundle",
    "ModelProvider",
    "SAMPLE_RATE",
    "Segment",
]
