from __future__ import annotations

import logging
from pathlib import Path

import typer
from pydantic import ValidationError

from tinytest.config import DEFAULT_CONFIG_NAME, RunConfig, load_config

app = typer.Typer(name="tinytest", help="Run tinytest test suites")


def _load_config(config: str | None) -> RunConfig:
    """Load --config, else ./tinytest.yaml when present, else defaults."""
    if config is not None:
        config_path = Path(config)
        if not config_path.exists():
            typer.echo(f"Error: config file not found: {config}", err=True)
            raise typer.Exit(1)
    else:
        config_path = Path(DEFAULT_CONFIG_NAME)
        if not config_path.exists():
            return RunConfig()

    try:
        return load_config(config_path)
    except (ValueError, ValidationError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


def _discover(
    paths: list[str], patterns: list[str], logger: logging.Logger | None = None
) -> None:
    from tinytest.discovery import collect_files, load_module, module_spec

    try:
        files = collect_files(paths, patterns)
        for f in files:
            module_spec(f)
    except (ValueError, FileNotFoundError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    # Errors raised by a test module's own code keep their traceback.
    for f in files:
        load_module(f, logger=logger)


@app.command()
def run(
    paths: list[str] | None = typer.Argument(
        None, help="Test files or directories (defaults to the configured paths)"
    ),
    config: str | None = typer.Option(
        None, "--config", "-c", help="Path to a tinytest YAML config"
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug output to terminal"
    ),
    color: bool | None = typer.Option(
        None, "--color/--no-color", help="Force colored summaries on or off"
    ),
    log_file: str | None = typer.Option(None, help="Write debug output to this file"),
):
    """Discover and run tests, exiting non-zero if any suite failed."""
    from tinytest.runner import Runner
    from tinytest.verbose import setup_logger

    run_config = _load_config(config)

    debug_file = log_file or run_config.log_file
    logger = setup_logger(
        Path(debug_file) if debug_file else None,
        verbose=verbose or run_config.verbose,
    )

    _discover(paths or run_config.paths, run_config.patterns, logger=logger)

    runner = Runner(
        color=color if color is not None else run_config.color, logger=logger
    )
    if runner.run_all():
        raise typer.Exit(1)


@app.command("list")
def list_tests(
    paths: list[str] | None = typer.Argument(
        None, help="Test files or directories (defaults to the configured paths)"
    ),
    config: str | None = typer.Option(
        None, "--config", "-c", help="Path to a tinytest YAML config"
    ),
):
    """Print registered tests in the order they would run."""
    from tinytest.state import get_session

    run_config = _load_config(config)
    _discover(paths or run_config.paths, run_config.patterns)

    registry = get_session().registry
    for case in registry:
        typer.echo(f"{case.suite}::{case.name}")
    typer.echo(f"{len(registry)} test(s) in {len(registry.suites())} suite(s)")
    registry.drain_all()
