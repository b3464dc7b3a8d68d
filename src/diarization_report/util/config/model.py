# Pretrained pipeline + input format expected by it
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ModelConfig:
    model_id: str = "pyannote/speaker-diarization-3.1"
    sample_rate: int = 16_000         # engine input rate; audio is resampled to this
    token_env: str = "HUGGINGFACE_TOKEN"
    device: str | None = None         # None → cuda when available, else cpu
