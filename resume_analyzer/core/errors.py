from __future__ import annotations


class UnsupportedDocumentError(ValueError):
    """Raised when a document's extension has no text extractor."""

    def __init__(self, extension: str, supported: tuple[str, ...]):
        shown = extension or "(none)"
        super().__init__(
            f"Unsupported file type '{shown}'. Supported types: {', '.join(supported)}"
        )
        self.extension = extension


class AnalysisCancelledError(RuntimeError):
    def __init__(self, step: str):
        super().__init__(f"Analysis cancelled before step '{step}'.")
        self.step = step


class LevelModelLoadError(RuntimeError):
    pass
