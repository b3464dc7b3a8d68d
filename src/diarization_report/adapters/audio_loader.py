"""Decode an audio file into a mono 16 kHz buffer."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

import librosa
import numpy as np
import soundfile as sf

from ..domain import SAMPLE_RATE, AudioBuffer
from ..errors import AudioIOError

logger = logging.getLogger(__name__)


class SoundfileAudioLoader:
    """Reads anything libsndfile understands (wav/flac/ogg/mp3)."""

    def __init__(self, target_sr: int = SAMPLE_RATE) -> None:
        self.target_sr = target_sr

    def load(self, path: Union[str, Path]) -> AudioBuffer:
        path = Path(path)
        if not path.is_file():
            raise AudioIOError(f"Audio not found: {path}")

        try:
            audio, sr = sf.read(str(path), dtype="float32", always_2d=False)
        except (RuntimeError, OSError) as exc:  # LibsndfileError is a RuntimeError
            raise AudioIOError(f"Unable to decode {path}: {exc}") from exc

        if audio.ndim > 1:
            audio = np.mean(audio, axis=1)

        if sr != self.target_sr:
            logger.debug("Resampling %s from %d Hz to %d Hz", path.name, sr, self.target_sr)
            audio = librosa.resample(audio, orig_sr=sr, target_sr=self.target_sr)

        return AudioBuffer(samples=np.ascontiguousarray(audio, dtype=np.float32), sample_rate=self.target_sr)
