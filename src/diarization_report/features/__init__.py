"""Pipeline steps: run, measure, report, write."""

from .metrics import RunMetrics, compute_metrics, real_time_factor
from .output import write_report
from .pipeline import PipelineResult, run_pipeline
from .report import Report, ReportSegment, build_report, decode_report, encode_report

__all__ = [
    "PipelineResult",
    "Report",
    "ReportSegment",
    "RunMetrics",
    "build_report",
    "compute_metrics",
    "decode_report",
    "encode_report",
    "real_time_factor",
    "run_pipeline",
    "write_report",
]
