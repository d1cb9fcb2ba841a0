"""Screening pipeline assembly and execution."""

from __future__ import annotations

import json
import uuid
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Iterable, Sequence

import pendulum
import structlog

from . import __version__
from .core import CandidateEvaluator, ValidationError
from .core.validation import coerce_extraction
from .extraction import ExtractionError, ExtractionProvider
from .pdf_utils import UnsupportedFileType, extract_text, is_supported
from .schemas import CandidateResult, JobRequirements


class ResumeTextLoader:
    """Load resume text through the PDF/plain-text utilities."""

    def __init__(self, *, exclude_patterns: Sequence[str] | None = None) -> None:
        self._exclude_patterns = list(exclude_patterns) if exclude_patterns else None

    def supports(self, path: Path) -> bool:
        return is_supported(path)

    def load(self, path: Path) -> str:
        return extract_text(path, exclude_patterns=self._exclude_patterns)


@dataclass(slots=True)
class ScreeningFailure:
    """A resume that could not be evaluated."""

    file_name: str
    error: str
    error_field: str | None = None


@dataclass(slots=True)
class ScreeningBatch:
    """Outcome of screening one upload batch."""

    results: list[CandidateResult] = field(default_factory=list)
    failures: list[ScreeningFailure] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)


class CandidateRoster:
    """Session-held candidate list; each new batch is placed in front."""

    def __init__(self) -> None:
        self._candidates: tuple[CandidateResult, ...] = ()

    def prepend(self, batch: Iterable[CandidateResult]) -> None:
        self._candidates = tuple(batch) + self._candidates

    @property
    def candidates(self) -> tuple[CandidateResult, ...]:
        return self._candidates

    def __len__(self) -> int:
        return len(self._candidates)


class OutputWriter:
    """Persist screening outcomes."""

    def write(self, path: Path, payload: dict | list[dict]) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(
            json.dumps(payload, ensure_ascii=False, indent=2),
            encoding="utf-8",
        )


class ScreeningPipeline:
    """End-to-end screening orchestrator.

    Files are processed one at a time, in the order given. A failure in one
    file is recorded and the rest of the batch continues.
    """

    def __init__(
        self,
        *,
        evaluator: CandidateEvaluator,
        provider: ExtractionProvider,
        text_loader: ResumeTextLoader | None = None,
        writer: OutputWriter | None = None,
        roster: CandidateRoster | None = None,
        id_factory: Callable[[], str] | None = None,
        clock: Callable[[], Any] | None = None,
    ) -> None:
        self._evaluator = evaluator
        self._provider = provider
        self._text_loader = text_loader or ResumeTextLoader()
        self._writer = writer or OutputWriter()
        self._roster = roster if roster is not None else CandidateRoster()
        self._id_factory = id_factory or (lambda: uuid.uuid4().hex)
        self._clock = clock or (lambda: pendulum.now("UTC"))
        self._logger = structlog.get_logger(__name__)

    @property
    def roster(self) -> CandidateRoster:
        return self._roster

    def screen(self, paths: Iterable[Path], *, job: JobRequirements) -> ScreeningBatch:
        batch = ScreeningBatch()

        for path in paths:
            path = Path(path)
            if not self._text_loader.supports(path):
                batch.skipped.append(path.name)
                self._logger.info("resume.skipped", file_name=path.name, reason="unsupported_type")
                continue

            try:
                result = self._screen_one(path, job)
            except ValidationError as exc:
                self._record_failure(batch, path, str(exc), error_field=exc.field)
                continue
            except (ExtractionError, UnsupportedFileType, OSError) as exc:
                self._record_failure(batch, path, str(exc))
                continue

            batch.results.append(result)
            self._logger.info(
                "screening.result",
                candidate_id=result.id,
                file_name=result.file_name,
                designation=result.designation.value,
                match_score=result.match_score,
                score_version=result.score_version,
            )

        self._roster.prepend(batch.results)
        self._logger.info(
            "screening.batch_complete",
            completed=len(batch.results),
            failed=len(batch.failures),
            skipped=len(batch.skipped),
        )
        return batch

    def run(
        self,
        *,
        paths: Iterable[Path],
        job: JobRequirements,
        output_path: Path,
    ) -> ScreeningBatch:
        batch = self.screen(paths, job=job)
        self._writer.write(output_path, self.render(batch, job=job))
        return batch

    def render(self, batch: ScreeningBatch, *, job: JobRequirements) -> dict[str, Any]:
        metadata = {
            "candidate_count": len(batch.results),
            "failure_count": len(batch.failures),
            "skipped": batch.skipped,
            "score_version": self._evaluator.policy.score_version,
            "provider": getattr(self._provider, "name", type(self._provider).__name__),
            "job": job.model_dump(by_alias=True),
            "timestamp": self._clock().to_iso8601_string(),
            "app_version": __version__,
        }
        return {
            "metadata": metadata,
            "results": [
                result.model_dump(mode="json", by_alias=True) for result in batch.results
            ],
            "failures": [
                {"fileName": failure.file_name, "error": failure.error, "field": failure.error_field}
                for failure in batch.failures
            ],
        }

    def _screen_one(self, path: Path, job: JobRequirements) -> CandidateResult:
        text = self._text_loader.load(path)
        payload = self._provider.extract(text, job=job, file_name=path.name)
        extraction = coerce_extraction(payload)
        evaluation = self._evaluator.evaluate(extraction, job)
        return CandidateResult(
            **extraction.model_dump(),
            id=self._id_factory(),
            file_name=path.name,
            match_score=evaluation.match_score,
            designation=evaluation.designation,
            score_version=evaluation.score_version,
            timestamp=self._clock(),
            status="completed",
        )

    def _record_failure(
        self,
        batch: ScreeningBatch,
        path: Path,
        error: str,
        *,
        error_field: str | None = None,
    ) -> None:
        batch.failures.append(
            ScreeningFailure(file_name=path.name, error=error, error_field=error_field)
        )
        self._logger.warning("resume.failed", file_name=path.name, error=error, field=error_field)
