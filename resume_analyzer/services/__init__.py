from .analyzer_service import analyze_resume

__all__ = ["analyze_resume"]
