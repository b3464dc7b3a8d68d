"""Speaker-attributed segmentation reports for a single audio file."""

__version__ = "0.1.0"
