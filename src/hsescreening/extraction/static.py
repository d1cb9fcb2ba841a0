"""Fixture-backed extraction provider for offline runs."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping

from ..schemas import JobRequirements
from .base import ExtractionError


class StaticExtractionProvider:
    """Serve precomputed extraction payloads keyed by resume file name."""

    name = "static"

    def __init__(self, payloads: Mapping[str, dict[str, Any]]):
        self._payloads = dict(payloads)

    @classmethod
    def from_jsonl(cls, path: str | Path | None) -> "StaticExtractionProvider":
        """Load ``{"file_name": ..., "extraction": {...}}`` records, one per line."""
        if path is None:
            raise ValueError("Static extraction provider requires a fixtures path.")
        path = Path(path)
        payloads: dict[str, dict[str, Any]] = {}
        with path.open("r", encoding="utf-8") as handle:
            for idx, line in enumerate(handle, start=1):
                raw = line.strip()
                if not raw:
                    continue
                try:
                    record = json.loads(raw)
                except json.JSONDecodeError as exc:
                    raise ValueError(f"{path.name} line {idx}: invalid JSON ({exc})") from exc
                file_name = record.get("file_name") if isinstance(record, dict) else None
                if not file_name:
                    raise ValueError(f"{path.name} line {idx}: missing file_name field")
                payloads[file_name] = record.get("extraction", {})
        return cls(payloads)

    def file_names(self) -> list[str]:
        return list(self._payloads)

    def extract(self, text: str, *, job: JobRequirements, file_name: str) -> dict[str, Any]:
        try:
            payload = self._payloads[file_name]
        except KeyError as exc:
            raise ExtractionError(f"No extraction fixture for {file_name!r}") from exc
        # Non-mapping fixtures are passed through and rejected by the evaluator.
        return dict(payload) if isinstance(payload, Mapping) else payload
