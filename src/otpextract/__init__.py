"""Verification code extraction and ranking for message bodies."""

from .core.models import Code, CodeType
from .pipeline.extractor import CodeExtractor, extract

__all__ = ["__version__", "Code", "CodeType", "CodeExtractor", "extract"]

__version__ = "0.1.0"
