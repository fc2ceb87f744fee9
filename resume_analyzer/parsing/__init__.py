from .parse import SUPPORTED_EXTENSIONS, extract_text

__all__ = ["SUPPORTED_EXTENSIONS", "extract_text"]
