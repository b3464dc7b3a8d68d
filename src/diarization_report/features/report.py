"""Typed report structure and its JSON encoding."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Iterable, Sequence

from ..domain import Segment
from .metrics import RunMetrics


@dataclass(frozen=True)
class ReportSegment:
    start: float
    end: float
    duration: float
    speaker: str

    @classmethod
    def from_segment(cls, segment: Segment) -> "ReportSegment":
        return cls(
            start=float(segment.start_time_seconds),
            end=float(segment.end_time_seconds),
            duration=float(segment.end_time_seconds - segment.start_time_seconds),
            speaker=str(segment.speaker_id),
        )


@dataclass(frozen=True)
class Report:
    video_id: str
    duration: float
    processing_time: float
    rtfx: float
    speakers: tuple[str, ...]
    segments: tuple[ReportSegment, ...]

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["speakers"] = list(self.speakers)
        data["segments"] = [asdict(seg) for seg in self.segments]
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Report":
        return cls(
            video_id=str(data["video_id"]),
            duration=float(data["duration"]),
            processing_time=float(data["processing_time"]),
            rtfx=float(data["rtfx"]),
            speakers=tuple(str(s) for s in data["speakers"]),
            segments=tuple(
                ReportSegment(
                    start=float(s["start"]),
                    end=float(s["end"]),
                    duration=float(s["duration"]),
                    speaker=str(s["speaker"]),
                )
                for s in data["segments"]
            ),
        )


def video_id_for(audio_path: str | Path) -> str:
    """File name without directory or final extension."""
    return Path(audio_path).stem


def distinct_speakers(segments: Iterable[Segment]) -> tuple[str, ...]:
    return tuple(sorted({seg.speaker_id for seg in segments}))


def build_report(audio_path: str | Path, segments: Sequence[Segment], metrics: RunMetrics) -> Report:
    return Report(
        video_id=video_id_for(audio_path),
        duration=metrics.duration,
        processing_time=metrics.processing_time,
        rtfx=metrics.rtfx,
        speakers=distinct_speakers(segments),
        segments=tuple(ReportSegment.from_segment(seg) for seg in segments),
    )


def encode_report(report: Report) -> str:
    # allow_nan=False: the report must stay plain JSON
    return json.dumps(report.to_dict(), ensure_ascii=False, indent=2, allow_nan=False)


def decode_report(text: str) -> Report:
    return Report.from_dict(json.loads(text))
