"""CLI interface for mixramp."""

import json
import logging
import sys
from enum import Enum
from pathlib import Path
from uuid import uuid4

import typer

from .application.mixramp_service import GenerateMixRamp
from .errors import MixRampError
from .infrastructure.logging_event_publisher import LoggingEventPublisher
from .ramps import render_tags
from .utils.config import MixRampConfig, load_config

app = typer.Typer(help="Compute MixRamp crossfade tags for an audio file.", add_completion=False)


class Backend(str, Enum):
    """Decoding library used to read the input file."""

    PEDALBOARD = "pedalboard"
    SOUNDFILE = "soundfile"


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _resolve_config(
    config_path: Path | None,
    chunk_seconds: float | None,
    backend: Backend | None,
    json_output: bool,
) -> MixRampConfig:
    base = load_config(config_path) if config_path is not None else MixRampConfig()
    overrides: dict[str, object] = {}
    if chunk_seconds is not None:
        overrides["chunk_seconds"] = chunk_seconds
    if backend is not None:
        overrides["backend"] = backend.value
    if json_output:
        overrides["output_format"] = "json"
    return MixRampConfig.model_validate({**base.model_dump(), **overrides})


@app.command("analyze")
def analyze_command(
    audiofile: Path = typer.Argument(..., help="Audio file to analyze."),
    config: Path | None = typer.Option(
        None, "--config", "-c", help="JSON or YAML file with analysis settings."
    ),
    chunk_seconds: float | None = typer.Option(
        None, "--chunk-seconds", help="Analysis chunk duration in seconds (default 0.10)."
    ),
    backend: Backend | None = typer.Option(
        None,
        "--backend",
        case_sensitive=False,
        help="Decoding library: pedalboard (default) or soundfile.",
    ),
    json_output: bool = typer.Option(False, "--json", help="Print the ramps as JSON instead of tags."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log analysis progress to stderr."),
) -> None:
    """Print MIXRAMP_REF, MIXRAMP_START and MIXRAMP_END for AUDIOFILE."""

    _configure_logging(verbose)
    try:
        settings = _resolve_config(config, chunk_seconds, backend, json_output)
    except (OSError, ValueError) as error:
        typer.echo(f"mixramp: invalid configuration: {error}", err=True)
        raise typer.Exit(code=2) from error

    service = GenerateMixRamp(config=settings, event_publisher=LoggingEventPublisher())
    try:
        result = service.run(audiofile, correlation_id=str(uuid4()))
    except MixRampError as error:
        typer.echo(f"mixramp: {error.message}", err=True)
        raise typer.Exit(code=1) from error

    if settings.output_format == "json":
        typer.echo(json.dumps(result.as_dict()))
        return
    for line in render_tags(result):
        typer.echo(line)


def main(prog_name: str = "mixramp") -> None:
    app(prog_name=prog_name)


if __name__ == "__main__":
    main()
