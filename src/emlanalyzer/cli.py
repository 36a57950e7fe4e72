"""emlanalyzer command-line interface."""

from __future__ import annotations

import asyncio
import json
import logging
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Annotated, NoReturn

import typer

from . import __version__
from .analyzer import EmlAnalyzer
from .config import Config, ConfigError, load_config
from .extractor.languages import LANGUAGE_NAMES
from .logging import configure_logging
from .message import MessageParseError

app = typer.Typer(help="Extract structured feature reports from .eml files.")
LOGGER = logging.getLogger(__name__)


@dataclass
class CLIState:
    """Stores shared CLI options."""

    config_path: Path | None


@app.callback()
def _emlanalyzer(
    ctx: typer.Context,
    config: Annotated[
        Path | None,
        typer.Option(
            "-c",
            "--config",
            help="Path to config (env EMLANALYZER_CONFIG or ~/.config/emlanalyzer/config.yaml).",
        ),
    ] = None,
) -> None:
    """Capture global CLI options."""

    resolved = config.expanduser() if config else None
    ctx.obj = CLIState(config_path=resolved)


@app.command()
def analyze(
    ctx: typer.Context,
    message: Annotated[Path, typer.Argument(..., help="Path to .eml message file.")],
    fetch_sizes: Annotated[
        bool | None,
        typer.Option(
            "--fetch-sizes/--no-fetch-sizes",
            help="Probe remote asset sizes over HTTP (overrides the config file).",
        ),
    ] = None,
    indent: Annotated[
        int,
        typer.Option("--indent", min=0, help="JSON indentation; 0 prints a single line."),
    ] = 2,
) -> None:
    """Print the feature report of a single message as JSON."""

    config = _load_environment(_state(ctx))
    options = config.options
    if fetch_sizes is not None:
        options = replace(options, fetch_external_assets_size=fetch_sizes)

    try:
        analyzer = EmlAnalyzer(message, options)
    except ConfigError as exc:
        _config_failure(exc)
    except MessageParseError as exc:
        typer.secho(f"Failed to parse message: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1) from exc

    asyncio.run(analyzer.run())
    report = analyzer.report.as_dict()
    typer.echo(json.dumps(report, indent=indent or None, ensure_ascii=False))


@app.command()
def languages(ctx: typer.Context) -> None:
    """List the language codes the report can name."""

    _load_environment(_state(ctx))
    for code, name in sorted(LANGUAGE_NAMES.items()):
        typer.echo(f"{code}\t{name}")


@app.command()
def version() -> None:
    """Print the installed version."""

    typer.echo(__version__)


def _state(ctx: typer.Context) -> CLIState:
    state = ctx.obj
    if not isinstance(state, CLIState):
        raise RuntimeError("CLI state missing from context.")
    return state


def _load_environment(state: CLIState) -> Config:
    try:
        config = load_config(state.config_path)
        configure_logging(config.logging)
    except ConfigError as exc:  # pragma: no cover - exercised via CLI tests
        _config_failure(exc)
    return config


def _config_failure(exc: ConfigError) -> NoReturn:
    typer.secho(f"Configuration error: {exc}", fg=typer.colors.RED, err=True)
    raise typer.Exit(2) from exc


def main() -> None:  # pragma: no cover - delegated to Typer
    app()


__all__ = ["app", "main"]
