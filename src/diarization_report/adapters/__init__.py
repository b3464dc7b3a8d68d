"""Adapter layer for external dependencies."""

from __future__ import annotations

from importlib import import_module
from typing import Any

__all__ = [
    "PyannoteDiarizationEngine",
    "PyannoteModelProvider",
    "SoundfileAudioLoader",
    "ensure_hf_token",
]

_ATTR_TO_MODULE = {
    "PyannoteDiarizationEngine": (
        "diarization_report.adapters.pyannote_engine",
        "PyannoteDiarizationEngine",
    ),
    "PyannoteModelProvider": (
        "diarization_report.adapters.pyannote_engine",
        "PyannoteModelProvider",
    ),
    "SoundfileAudioLoader": (
        "diarization_report.adapters.audio_loader",
        "SoundfileAudioLoader",
    ),
    "ensure_hf_token": (
        "diarization_report.adapters.huggingface",
        "ensure_hf_token",
    ),
}


def __getattr__(name: str) -> Any:
    try:
        module_name, attr_name = _ATTR_TO_MODULE[name]
    except KeyError as exc:
        raise AttributeError(f"module {__name__} has no attribute {name}") from exc
    module = import_module(module_name)
    return getattr(module, attr_name)
