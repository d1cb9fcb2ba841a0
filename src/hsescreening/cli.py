"""Typer CLI entrypoint for HSE resume screening."""

from __future__ import annotations

from pathlib import Path
from typing import Any, List, Optional

import typer
import yaml
from pydantic import ValidationError as PydanticValidationError

from .config import load_yaml
from .container import create_container
from .core import ValidationError, classify_designation
from .logging import configure_logging

app = typer.Typer(help="HSE recruitment screening CLI.")


@app.command()
def screen(
    resumes: List[Path] = typer.Argument(..., exists=True, readable=True, dir_okay=False, help="Resume files (.pdf or .txt)."),
    output: Path = typer.Option(
        ...,
        exists=False,
        file_okay=True,
        dir_okay=False,
        resolve_path=True,
        help="Output JSON path.",
    ),
    job: Optional[Path] = typer.Option(None, exists=True, readable=True, dir_okay=False, help="Job requirements YAML path."),
    config: Optional[Path] = typer.Option(None, exists=True, readable=True, dir_okay=False, help="YAML config path."),
    extractions: Optional[Path] = typer.Option(
        None,
        exists=True,
        readable=True,
        dir_okay=False,
        help="JSONL of precomputed extractions keyed by file name; skips the Gemini call.",
    ),
    policy: Optional[str] = typer.Option(None, help="Scoring policy: graduated, flat or graduated_skills."),
    log_level: str = typer.Option("INFO", help="Log level for structured logging."),
    gemini_api_key: Optional[str] = typer.Option(None, envvar="GEMINI_API_KEY", help="Gemini API key."),
) -> None:
    """Screen resumes and write designations and match scores as JSON."""
    settings: dict[str, Any] = {}
    if config:
        try:
            loaded = load_yaml(config)
        except yaml.YAMLError as exc:
            raise typer.BadParameter(f"Invalid YAML: {exc}", param_name="config") from exc
        if not isinstance(loaded, dict):
            raise typer.BadParameter("Config file must be a YAML object", param_name="config")
        settings = loaded

    core_settings = settings.get("core") or {}
    extraction_settings = settings.get("extraction") or {}
    settings["core"] = core_settings
    settings["extraction"] = extraction_settings
    if policy:
        core_settings["policy"] = policy
    if extractions:
        extraction_settings["provider"] = "static"
        extraction_settings["fixtures"] = str(extractions)
    if gemini_api_key and not extraction_settings.get("api_key"):
        extraction_settings["api_key"] = gemini_api_key
    if job:
        try:
            loaded_job = load_yaml(job)
        except yaml.YAMLError as exc:
            raise typer.BadParameter(f"Invalid YAML: {exc}", param_name="job") from exc
        if not isinstance(loaded_job, dict):
            raise typer.BadParameter("Job file must be a YAML object", param_name="job")
        settings["job"] = loaded_job.get("job", loaded_job)

    configure_logging(log_level)

    try:
        container = create_container(settings=settings)
        job_requirements = container.job_requirements()
        pipeline = container.pipeline()
    except (PydanticValidationError, ValueError) as exc:
        raise typer.BadParameter(str(exc)) from exc

    batch = pipeline.run(paths=resumes, job=job_requirements, output_path=output)
    typer.echo(
        f"Processed {len(batch.results)} candidates "
        f"({len(batch.failures)} failed, {len(batch.skipped)} skipped). Results saved to {output}."
    )


@app.command()
def classify(
    years: float = typer.Argument(..., help="Years of experience."),
    clamp_negative: bool = typer.Option(
        False,
        "--clamp-negative",
        help="Report negative years as Inspector instead of Not Qualified.",
    ),
) -> None:
    """Print the designation tier for a number of years of experience."""
    try:
        designation = classify_designation(
            years, allow_not_qualified_sentinel=not clamp_negative
        )
    except ValidationError as exc:
        raise typer.BadParameter(str(exc), param_name="years") from exc
    typer.echo(designation.value)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
