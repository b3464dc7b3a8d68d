"""Timing metrics derived from one diarization run."""

from __future__ import annotations

import logging
import time
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator

from ..domain import SAMPLE_RATE, AudioBuffer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RunMetrics:
    duration: float
    processing_time: float
    rtfx: float


def audio_duration(audio: AudioBuffer) -> float:
    return audio.sample_count / float(SAMPLE_RATE)


def real_time_factor(duration: float, processing_time: float) -> float:
    """``duration / processing_time``; ``0.0`` when no time elapsed."""
    if processing_time <= 0.0:
        logger.warning(
            "Processing time %.6fs too small to compute RTFx; reporting 0.0", processing_time
        )
        return 0.0
    return duration / processing_time


def compute_metrics(audio: AudioBuffer, processing_time: float) -> RunMetrics:
    duration = audio_duration(audio)
    return RunMetrics(
        duration=duration,
        processing_time=processing_time,
        rtfx=real_time_factor(duration, processing_time),
    )


@dataclass
class Stopwatch:
    elapsed: float = 0.0


@contextmanager
def monotonic_timer() -> Iterator[Stopwatch]:
    """Time the enclosed block with ``time.perf_counter``."""
    watch = Stopwatch()
    start = time.perf_counter()
    try:
        yield watch
    finally:
        watch.elapsed = time.perf_counter() - start
