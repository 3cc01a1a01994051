"""Console to-do list with a flat-file task store."""

__version__ = "0.1.0"
