"""Command-line interface for pathsearch.

Responsibilities:
- Expose executable search, resolution and version lookup commands.
- Resolve effective lookup configuration from flags, YAML and environment.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from .cli_rendering import echo_matches, exit_with_command_error
from .config import ConfigLoader, LookupConfig
from .errors import ExecutableNotFoundError, LookupStageError
from .runtime_tools import get_version_for_executable, resolve_executable, search
from .telemetry.logger import configure_logging

app = typer.Typer(
    name="pathsearch",
    no_args_is_help=True,
    help="Locate executables on PATH and report their file versions.",
)


def _load_config(config_path: Path | None) -> LookupConfig:
    """Load environment config, then layer YAML keys over it; failures become stage errors."""

    try:
        env_config = ConfigLoader.from_env()
    except ValueError as exc:
        raise LookupStageError(
            stage="config",
            detail=f"Invalid environment configuration: {exc}",
            hint="Fix or unset `PATHSEARCH_*` environment variables and rerun.",
        ) from exc
    if config_path is None:
        return env_config

    try:
        return ConfigLoader.from_yaml(config_path, base=env_config)
    except FileNotFoundError as exc:
        raise LookupStageError(
            stage="config",
            detail=f"Config file not found: `{config_path}`.",
            hint="Provide an existing path via `--config <path.yaml>`.",
        ) from exc
    except ValueError as exc:
        raise LookupStageError(
            stage="config",
            detail=f"Invalid config file `{config_path}`: {exc}",
            hint="Fix config schema/values and rerun.",
        ) from exc
    except Exception as exc:
        raise LookupStageError(
            stage="config",
            detail=f"Failed to load config file `{config_path}`: {exc}",
            hint="Verify YAML syntax and file permissions.",
        ) from exc


@app.callback()
def root(
    ctx: typer.Context,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Print all lookup events to stderr."),
    ] = False,
) -> None:
    """Locate executables on PATH and report their file versions."""

    ctx.obj = {"verbose": verbose}


def _configure_command_logging(ctx: typer.Context, config: LookupConfig) -> None:
    """Route lookup logs to stderr at the configured level, or DEBUG when verbose."""

    verbose = bool((ctx.obj or {}).get("verbose", False))
    configure_logging(level="DEBUG" if verbose else config.log_level)


@app.command("search")
def search_command(
    ctx: typer.Context,
    name: Annotated[str, typer.Argument(help="Executable name, with or without extension.")],
) -> None:
    """List every matching executable in the working directory and on PATH."""

    try:
        _configure_command_logging(ctx, _load_config(None))
        matches = search(name)
    except Exception as exc:
        exit_with_command_error("search", exc)

    if not matches:
        typer.secho(f"No matches for `{name}`.", fg=typer.colors.YELLOW, err=True)
        raise typer.Exit(code=1)
    echo_matches(matches)


@app.command("resolve")
def resolve_command(
    ctx: typer.Context,
    executable: Annotated[str, typer.Argument(help="Executable path or name.")],
) -> None:
    """Print the file that a version lookup would read."""

    try:
        _configure_command_logging(ctx, _load_config(None))
        resolved = resolve_executable(executable)
        if resolved is None:
            raise ExecutableNotFoundError(executable=executable)
    except Exception as exc:
        exit_with_command_error("resolve", exc)

    typer.echo(resolved)


@app.command("version")
def version_command(
    ctx: typer.Context,
    executable: Annotated[str, typer.Argument(help="Executable path or name.")],
    throw: Annotated[
        bool | None,
        typer.Option(
            "--throw/--no-throw",
            help="Fail when the executable is missing (overrides config).",
        ),
    ] = None,
    config_file: Annotated[
        Path | None,
        typer.Option("--config", help="Path to a YAML lookup config file."),
    ] = None,
) -> None:
    """Print the `major.minor.build` file version of an executable."""

    try:
        config = _load_config(config_file)
        _configure_command_logging(ctx, config)
        throw_if_not_found = throw if throw is not None else config.throw_if_not_found
        version = get_version_for_executable(executable, throw_if_not_found)
    except Exception as exc:
        exit_with_command_error("version", exc)

    typer.echo(version)


def main() -> None:
    """CLI entrypoint for console scripts."""
    app()


if __name__ == "__main__":
    main()
