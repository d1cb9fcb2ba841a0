"""Configuration management utilities."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from ..schemas import JobRequirements

_SUFFIXES: tuple[str, ...] = (".yaml", ".yml")


class ConfigManager:
    """Simple YAML-backed configuration loader."""

    def __init__(self, base_path: str | Path):
        self._base_path = Path(base_path)

    def load(self, name: str) -> dict[str, Any]:
        """Load a YAML configuration by name without file extension."""
        path = self._resolve(name)
        with path.open("r", encoding="utf-8") as handle:
            return yaml.safe_load(handle) or {}

    def job_requirements(self, name: str) -> JobRequirements:
        """Load a job-requirements profile; a top-level ``job`` key is optional."""
        data = self.load(name)
        if isinstance(data, dict) and "job" in data:
            data = data["job"]
        return JobRequirements.model_validate(data)

    def _resolve(self, name: str) -> Path:
        for suffix in _SUFFIXES:
            candidate = self._base_path / f"{name}{suffix}"
            if candidate.exists():
                return candidate
        raise FileNotFoundError(self._base_path / f"{name}.yaml")


def load_yaml(path: str | Path) -> dict[str, Any]:
    """Load a single YAML document from ``path``."""
    path = Path(path)
    return ConfigManager(path.parent).load(path.stem)


__all__ = ["ConfigManager", "load_yaml"]
