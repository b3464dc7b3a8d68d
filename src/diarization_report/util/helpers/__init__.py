# Helper subpackage exports.
# Re-export helper functions so callers can do:
#   from diarization_report.util.helpers import atomic_write_text

from .atomic_json import atomic_write_text

__all__ = [
    "atomic_write_text",
]
