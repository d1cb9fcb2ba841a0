"""Google Gemini extraction provider."""

from __future__ import annotations

import json
from typing import Any

import httpx
import structlog
from google import genai
from google.genai import errors as genai_errors
from google.genai import types

from ..schemas import JobRequirements
from .base import ExtractionError

DEFAULT_MODEL = "gemini-2.5-flash"

PROMPT_TEMPLATE = """\
Act as a professional HSE (Health, Safety, and Environment) recruiter.
Analyze the following resume text and extract key details strictly as requested.

Target certifications:
- NEBOSH: look for "NEBOSH IGC", "NEBOSH NGC", or "NEBOSH".
- ADOSH/OSHAD: look for "ADOSH", "OSHAD", or "Abu Dhabi Occupational Safety and Health".
- LEVEL 6: look specifically for "NVQ Level 6", "OTHM Level 6", or "NEBOSH International Diploma" (IDip).

Nature of experience:
- Look for mentions of: {domains}.

Resume text:
{resume_text}
"""

_STRING = types.Schema(type=types.Type.STRING)

RESPONSE_SCHEMA = types.Schema(
    type=types.Type.OBJECT,
    properties={
        "fullName": _STRING,
        "email": _STRING,
        "phone": _STRING,
        "technicalSkills": types.Schema(type=types.Type.ARRAY, items=_STRING),
        "yearsOfExperience": types.Schema(
            type=types.Type.NUMBER,
            description="Total numeric years of experience",
        ),
        "highestDegree": _STRING,
        "hasNebosh": types.Schema(type=types.Type.BOOLEAN),
        "hasLevel6": types.Schema(
            type=types.Type.BOOLEAN,
            description="True ONLY if they have NVQ Level 6, OTHM 6, or NEBOSH Diploma",
        ),
        "hasAdosh": types.Schema(type=types.Type.BOOLEAN),
        "natureOfExperienceFound": types.Schema(type=types.Type.ARRAY, items=_STRING),
        "summary": _STRING,
    },
    required=[
        "fullName",
        "email",
        "yearsOfExperience",
        "hasNebosh",
        "hasLevel6",
        "hasAdosh",
        "natureOfExperienceFound",
    ],
)


def build_prompt(resume_text: str, job: JobRequirements) -> str:
    domains = ", ".join(job.nature_of_experience) or "any industry sector"
    return PROMPT_TEMPLATE.format(domains=domains, resume_text=resume_text)


def parse_response(text: str | None) -> dict[str, Any]:
    """Decode a JSON object from a model response, tolerating code fences."""
    if not text:
        raise ExtractionError("The model returned an empty response.")
    cleaned = text.strip()
    if cleaned.startswith("```"):
        cleaned = cleaned.split("\n", 1)[1] if "\n" in cleaned else cleaned[3:]
        if cleaned.endswith("```"):
            cleaned = cleaned[:-3]
        cleaned = cleaned.strip()
    try:
        data = json.loads(cleaned)
    except json.JSONDecodeError as exc:
        raise ExtractionError(f"Unexpected response format: {exc}") from exc
    if not isinstance(data, dict):
        raise ExtractionError("Unexpected response format: expected a JSON object.")
    return data


class GeminiExtractionProvider:
    """Extract candidate fields with a Gemini model and a JSON response schema."""

    name = "gemini"

    def __init__(
        self,
        api_key: str | None = None,
        model: str | None = None,
        *,
        client: Any | None = None,
        temperature: float = 0.1,
    ) -> None:
        self._api_key = api_key
        self._model = model or DEFAULT_MODEL
        self._client = client
        self._temperature = temperature
        self._logger = structlog.get_logger(__name__)

    @property
    def model(self) -> str:
        return self._model

    def extract(self, text: str, *, job: JobRequirements, file_name: str) -> dict[str, Any]:
        client = self._get_client()
        self._logger.info("extraction.request", file_name=file_name, model=self._model)
        try:
            response = client.models.generate_content(
                model=self._model,
                contents=build_prompt(text, job),
                config=types.GenerateContentConfig(
                    response_mime_type="application/json",
                    response_schema=RESPONSE_SCHEMA,
                    temperature=self._temperature,
                ),
            )
        except genai_errors.APIError as exc:
            raise ExtractionError(f"Gemini API error: {exc}") from exc
        except httpx.HTTPError as exc:
            self._logger.warning("extraction.transport_failed", file_name=file_name, error=str(exc))
            raise ExtractionError(f"Gemini transport error: {exc}") from exc

        try:
            return parse_response(response.text)
        except ExtractionError:
            self._logger.warning("extraction.parse_failed", file_name=file_name)
            raise

    def _get_client(self) -> Any:
        if self._client is None:
            if not self._api_key:
                raise ExtractionError("No Gemini API key configured (set GEMINI_API_KEY).")
            self._client = genai.Client(api_key=self._api_key)
        return self._client
