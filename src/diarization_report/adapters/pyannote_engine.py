"""pyannote.audio implementations of the model provider and diarization engine."""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from ..domain import AudioBuffer, ModelBundle, Segment
from ..errors import InitializationError, ProcessingError
from ..util.config import DiarizationConfig, Fixed, ModelConfig
from .huggingface import ensure_hf_token

logger = logging.getLogger(__name__)


def _resolve_device(requested: Optional[str]) -> str:
    if requested:
        return requested
    import torch

    return "cuda" if torch.cuda.is_available() else "cpu"


class PyannoteModelProvider:
    """Fetches the pretrained pipeline (cached by huggingface_hub after the first download)."""

    def __init__(self, cfg: ModelConfig | None = None, token_getter: Callable[[], str] | None = None) -> None:
        self.cfg = cfg or ModelConfig()
        self._token_getter = token_getter or (lambda: ensure_hf_token(self.cfg.token_env))

    def acquire(self) -> ModelBundle:
        # heavy libs (import late)
        import torch
        from pyannote.audio import Pipeline

        token = self._token_getter()
        device = _resolve_device(self.cfg.device)
        logger.debug("Loading %s on %s", self.cfg.model_id, device)

        # pyannote 4.x renamed use_auth_token → token
        try:
            pipeline = Pipeline.from_pretrained(self.cfg.model_id, token=token)
        except TypeError:
            pipeline = Pipeline.from_pretrained(self.cfg.model_id, use_auth_token=token)
        if pipeline is None:
            raise InitializationError(
                f"Could not load {self.cfg.model_id}; accept its user conditions on huggingface.co"
            )

        pipeline.to(torch.device(device))
        return ModelBundle(pipeline=pipeline, model_id=self.cfg.model_id, device=device)


def _apply_threshold(pipeline: Any, threshold: float) -> None:
    params = pipeline.parameters(instantiated=True)
    clustering = params.get("clustering")
    if not isinstance(clustering, dict) or "threshold" not in clustering:
        logger.warning("Pipeline exposes no clustering threshold; ignoring %s", threshold)
        return
    clustering["threshold"] = threshold
    pipeline.instantiate(params)
    logger.debug("Applied clustering threshold %s", threshold)


def _speaker_kwargs(config: DiarizationConfig) -> dict[str, int]:
    kwargs: dict[str, int] = {}
    if isinstance(config.num_clusters, Fixed):
        kwargs["num_speakers"] = config.num_clusters.count
    if isinstance(config.max_speakers, Fixed):
        kwargs["max_speakers"] = config.max_speakers.count
    return kwargs


def annotation_to_segments(output: Any) -> list[Segment]:
    """Flatten a pyannote ``Annotation`` (or 4.x ``DiarizeOutput``) into segments."""
    annotation = getattr(output, "speaker_diarization", output)
    return [
        Segment(
            start_time_seconds=float(turn.start),
            end_time_seconds=float(turn.end),
            speaker_id=str(label),
        )
        for turn, _, label in annotation.itertracks(yield_label=True)
    ]


class PyannoteDiarizationEngine:
    def run(self, bundle: ModelBundle, config: DiarizationConfig, audio: AudioBuffer) -> list[Segment]:
        import torch

        pipeline = bundle.pipeline
        _apply_threshold(pipeline, config.clustering_threshold)

        kwargs = _speaker_kwargs(config)
        waveform = torch.from_numpy(audio.samples).unsqueeze(0)
        logger.debug("Running diarization with %s", kwargs or "automatic speaker count")
        try:
            output = pipeline({"waveform": waveform, "sample_rate": audio.sample_rate}, **kwargs)
        except Exception as exc:
            raise ProcessingError(f"[diarize] failed: {exc}") from exc

        segments = annotation_to_segments(output)
        if config.debug_mode:
            for seg in segments:
                logger.debug(
                    "  %8.3f → %8.3f  %s", seg.start_time_seconds, seg.end_time_seconds, seg.speaker_id
                )
        return segments
