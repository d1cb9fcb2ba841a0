from __future__ import annotations

import itertools
import json
from pathlib import Path
from types import SimpleNamespace
from typing import Any

import httpx
import pendulum

from hsescreening.core import CandidateEvaluator
from hsescreening.extraction import ExtractionError, GeminiExtractionProvider, StaticExtractionProvider
from hsescreening.pipeline import CandidateRoster, ScreeningPipeline
from hsescreening.schemas import DEFAULT_JOB_REQUIREMENTS, Designation


def write_resume(directory: Path, name: str, text: str = "resume body") -> Path:
    path = directory / name
    path.write_text(text, encoding="utf-8")
    return path


class RecordingProvider:
    name = "recording"

    def __init__(self, payloads: dict[str, Any]):
        self._payloads = payloads
        self.calls: list[tuple[str, str]] = []

    def extract(self, text, *, job, file_name):
        self.calls.append((file_name, text))
        payload = self._payloads[file_name]
        if isinstance(payload, Exception):
            raise payload
        return payload


def build_pipeline(provider, roster: CandidateRoster | None = None) -> ScreeningPipeline:
    counter = itertools.count(1)
    return ScreeningPipeline(
        evaluator=CandidateEvaluator(),
        provider=provider,
        roster=roster,
        id_factory=lambda: f"cand-{next(counter)}",
        clock=lambda: pendulum.datetime(2025, 1, 15, 9, 30),
    )


def test_pipeline_evaluates_each_resume_in_order(tmp_path: Path):
    first = write_resume(tmp_path, "a.txt", "Alice resume")
    second = write_resume(tmp_path, "b.txt", "Bob resume")
    provider = RecordingProvider(
        {
            "a.txt": {
                "fullName": "Alice",
                "yearsOfExperience": 16,
                "hasNebosh": True,
                "hasLevel6": True,
                "hasAdosh": True,
                "natureOfExperienceFound": ["Rail", "Bridges"],
            },
            "b.txt": {
                "fullName": "Bob",
                "yearsOfExperience": 2,
                "natureOfExperienceFound": [],
            },
        }
    )
    pipeline = build_pipeline(provider)

    batch = pipeline.screen([first, second], job=DEFAULT_JOB_REQUIREMENTS)

    assert provider.calls == [("a.txt", "Alice resume"), ("b.txt", "Bob resume")]
    assert [result.full_name for result in batch.results] == ["Alice", "Bob"]
    alice, bob = batch.results
    assert alice.id == "cand-1"
    assert alice.designation is Designation.MANAGER
    assert alice.match_score == 100
    assert alice.status == "completed"
    assert alice.score_version == "graduated.v1"
    assert bob.designation is Designation.INSPECTOR
    assert bob.match_score == 8
    assert batch.failures == []


def test_pipeline_skips_and_continues_after_failures(tmp_path: Path):
    paths = [
        write_resume(tmp_path, "broken.txt"),
        write_resume(tmp_path, "offline.txt"),
        write_resume(tmp_path, "notes.docx"),
        write_resume(tmp_path, "good.txt"),
    ]
    provider = RecordingProvider(
        {
            "broken.txt": {"yearsOfExperience": "unknown", "natureOfExperienceFound": []},
            "offline.txt": ExtractionError("Gemini API error: 503"),
            "good.txt": {"yearsOfExperience": 6, "natureOfExperienceFound": ["Villa"]},
        }
    )
    pipeline = build_pipeline(provider)

    batch = pipeline.screen(paths, job=DEFAULT_JOB_REQUIREMENTS)

    assert [result.file_name for result in batch.results] == ["good.txt"]
    assert batch.results[0].designation is Designation.OFFICER
    assert [failure.file_name for failure in batch.failures] == ["broken.txt", "offline.txt"]
    assert batch.failures[0].error_field == "yearsOfExperience"
    assert batch.failures[1].error_field is None
    assert batch.skipped == ["notes.docx"]


def test_roster_prepends_new_batches(tmp_path: Path):
    roster = CandidateRoster()
    provider = RecordingProvider(
        {
            "first.txt": {"fullName": "First", "yearsOfExperience": 1, "natureOfExperienceFound": []},
            "second.txt": {"fullName": "Second", "yearsOfExperience": 1, "natureOfExperienceFound": []},
        }
    )
    pipeline = build_pipeline(provider, roster=roster)

    pipeline.screen([write_resume(tmp_path, "first.txt")], job=DEFAULT_JOB_REQUIREMENTS)
    pipeline.screen([write_resume(tmp_path, "second.txt")], job=DEFAULT_JOB_REQUIREMENTS)

    assert [candidate.full_name for candidate in roster.candidates] == ["Second", "First"]
    assert len(roster) == 2


def test_pipeline_run_writes_json_document(tmp_path: Path):
    resume = write_resume(tmp_path, "omar.txt")
    provider = StaticExtractionProvider(
        {
            "omar.txt": {
                "fullName": "Omar",
                "email": "omar@example.com",
                "yearsOfExperience": 11,
                "hasNebosh": True,
                "natureOfExperienceFound": ["Offshore platforms"],
            }
        }
    )
    output = tmp_path / "out" / "results.json"

    build_pipeline(provider).run(paths=[resume], job=DEFAULT_JOB_REQUIREMENTS, output_path=output)

    rendered = json.loads(output.read_text(encoding="utf-8"))
    assert rendered["metadata"]["candidate_count"] == 1
    assert rendered["metadata"]["score_version"] == "graduated.v1"
    assert rendered["metadata"]["provider"] == "static"
    result = rendered["results"][0]
    assert result["fileName"] == "omar.txt"
    assert result["designation"] == "HSE/Safety Engineer"
    assert result["matchScore"] == 53
    assert result["timestamp"].startswith("2025-01-15T09:30:00")
    assert rendered["metadata"]["timestamp"] == "2025-01-15T09:30:00Z"
    assert rendered["failures"] == []


def test_pipeline_records_corrupt_pdf_and_writes_remaining_results(tmp_path: Path):
    corrupt = tmp_path / "a_broken.pdf"
    corrupt.write_bytes(b"this is not a pdf document")
    good = write_resume(tmp_path, "b_good.txt")
    provider = RecordingProvider(
        {"b_good.txt": {"yearsOfExperience": 12, "natureOfExperienceFound": []}}
    )
    output = tmp_path / "results.json"

    batch = build_pipeline(provider).run(
        paths=[corrupt, good], job=DEFAULT_JOB_REQUIREMENTS, output_path=output
    )

    assert [failure.file_name for failure in batch.failures] == ["a_broken.pdf"]
    assert [result.file_name for result in batch.results] == ["b_good.txt"]
    assert [call[0] for call in provider.calls] == ["b_good.txt"]
    rendered = json.loads(output.read_text(encoding="utf-8"))
    assert rendered["failures"][0]["fileName"] == "a_broken.pdf"
    assert rendered["results"][0]["designation"] == "HSE/Safety Engineer"


class FlakyModels:
    def __init__(self, responses: list[Any]):
        self._responses = list(responses)

    def generate_content(self, **kwargs: Any) -> SimpleNamespace:
        response = self._responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return SimpleNamespace(text=response)


def test_pipeline_records_gemini_transport_errors(tmp_path: Path):
    client = SimpleNamespace(
        models=FlakyModels(
            [
                httpx.ConnectError("dns failure"),
                json.dumps({"yearsOfExperience": 5, "natureOfExperienceFound": ["Rail"]}),
            ]
        )
    )
    provider = GeminiExtractionProvider(client=client)
    paths = [write_resume(tmp_path, "first.txt"), write_resume(tmp_path, "second.txt")]

    batch = build_pipeline(provider).screen(paths, job=DEFAULT_JOB_REQUIREMENTS)

    assert [failure.file_name for failure in batch.failures] == ["first.txt"]
    assert "dns failure" in batch.failures[0].error
    assert batch.results[0].file_name == "second.txt"
    assert batch.results[0].designation is Designation.OFFICER
