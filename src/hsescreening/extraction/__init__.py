"""Extraction providers turning resume text into structured candidate fields."""

from __future__ import annotations

from .base import ExtractionError, ExtractionProvider
from .gemini import GeminiExtractionProvider
from .static import StaticExtractionProvider

__all__ = [
    "ExtractionError",
    "ExtractionProvider",
    "GeminiExtractionProvider",
    "StaticExtractionProvider",
]
