"""Utilities for turning resume files into plain text."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Iterable, Sequence

import pymupdf4llm

SUPPORTED_SUFFIXES: tuple[str, ...] = (".pdf", ".txt")


class UnsupportedFileType(ValueError):
    """Raised for resume files that are neither PDF nor plain text."""


class TextExtractionError(OSError):
    """Raised when a supported file cannot be parsed into text."""


def extract_text(
    path: str | Path,
    *,
    exclude_patterns: Sequence[str] | None = None,
) -> str:
    """Return the text of a PDF or plain-text resume.

    Parameters
    ----------
    path:
        Path to the source resume.
    exclude_patterns:
        Optional substrings (case-sensitive); any line containing one is
        dropped, together with a trailing page counter such as ``1 / 3``.
    """

    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(path)

    suffix = path.suffix.lower()
    if suffix == ".pdf":
        try:
            text = pymupdf4llm.to_markdown(str(path))
        except (RuntimeError, ValueError) as exc:
            # pymupdf.FileDataError is a RuntimeError.
            raise TextExtractionError(f"Could not read PDF {path.name}: {exc}") from exc
    elif suffix == ".txt":
        text = path.read_text(encoding="utf-8", errors="replace")
    else:
        raise UnsupportedFileType(f"Unsupported resume file type: {path.name}")

    if not exclude_patterns:
        return text

    patterns = _build_patterns(exclude_patterns)
    cleaned_lines: list[str] = []
    for line in text.splitlines():
        if line.strip() and any(pattern.search(line) for pattern in patterns):
            continue
        cleaned_lines.append(line)
    return "\n".join(cleaned_lines)


def is_supported(path: str | Path) -> bool:
    return Path(path).suffix.lower() in SUPPORTED_SUFFIXES


def _build_patterns(excludes: Iterable[str]) -> list[re.Pattern[str]]:
    patterns: list[re.Pattern[str]] = []
    for text in excludes:
        escaped = re.escape(text)
        pattern = re.compile(rf"{escaped}(?:\s+\d+\s*/\s*\d+)?")
        patterns.append(pattern)
    return patterns


__all__ = [
    "SUPPORTED_SUFFIXES",
    "TextExtractionError",
    "UnsupportedFileType",
    "extract_text",
    "is_supported",
]
