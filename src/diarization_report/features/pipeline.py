"""Model init → audio load → diarization, run strictly in sequence.

Each step wraps collaborator failures in the matching error from
:mod:`diarization_report.errors`; the first failure propagates and the
remaining steps never run.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence, Union

from ..domain import AudioBuffer, AudioLoader, DiarizationEngine, ModelBundle, ModelProvider, Segment
from ..errors import AudioIOError, DiarizationReportError, InitializationError, ProcessingError
from ..util.config import DiarizationConfig, describe_speaker_count
from .metrics import RunMetrics, compute_metrics, monotonic_timer
from .report import Report, build_report

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PipelineResult:
    audio: AudioBuffer
    segments: Sequence[Segment]
    metrics: RunMetrics
    report: Report


def initialize_models(provider: ModelProvider) -> ModelBundle:
    try:
        bundle = provider.acquire()
    except DiarizationReportError:
        raise
    except Exception as exc:
        raise InitializationError(f"Failed to initialize models: {exc}") from exc
    logger.info("Models initialized")
    return bundle


def load_audio(loader: AudioLoader, audio_path: Union[str, Path]) -> AudioBuffer:
    try:
        audio = loader.load(audio_path)
    except DiarizationReportError:
        raise
    except Exception as exc:
        raise AudioIOError(f"Failed to load audio file {audio_path}: {exc}") from exc
    logger.info("Loaded audio: %d samples", audio.sample_count)
    return audio


def diarize(
    engine: DiarizationEngine, bundle: ModelBundle, config: DiarizationConfig, audio: AudioBuffer
) -> tuple[list[Segment], float]:
    """Run the engine; returns the segments and the monotonic seconds it took."""
    try:
        with monotonic_timer() as watch:
            segments = list(engine.run(bundle, config, audio))
    except DiarizationReportError:
        raise
    except Exception as exc:
        raise ProcessingError(f"Failed to process audio file: {exc}") from exc
    return segments, watch.elapsed


def log_run_header(audio_path: Union[str, Path], config: DiarizationConfig) -> None:
    logger.info("Processing audio file: %s", audio_path)
    logger.info("   Clustering threshold: %s", config.clustering_threshold)
    logger.info("   Number of clusters: %s", describe_speaker_count(config.num_clusters, "automatic"))
    logger.info("   Max speakers: %s", describe_speaker_count(config.max_speakers, "unlimited"))


def run_pipeline(
    audio_path: Union[str, Path],
    config: DiarizationConfig,
    *,
    provider: ModelProvider,
    loader: AudioLoader,
    engine: DiarizationEngine,
) -> PipelineResult:
    log_run_header(audio_path, config)

    bundle = initialize_models(provider)
    audio = load_audio(loader, audio_path)
    segments, elapsed = diarize(engine, bundle, config, audio)

    metrics = compute_metrics(audio, elapsed)
    report = build_report(audio_path, segments, metrics)

    logger.info("Diarization completed in %.1fs", metrics.processing_time)
    logger.info("   Real-time factor (RTFx): %.2fx", metrics.rtfx)
    logger.info("   Found %d segments", len(segments))
    logger.info("   Detected speakers: %d", len(report.speakers))

    return PipelineResult(audio=audio, segments=segments, metrics=metrics, report=report)
