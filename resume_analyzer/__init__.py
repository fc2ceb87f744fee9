"""Resume-to-job analysis engine: extraction, scoring and suggestions."""

__version__ = "0.1.0"
