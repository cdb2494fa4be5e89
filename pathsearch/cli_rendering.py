"""CLI output and error rendering helpers.

This module centralizes user-facing CLI presentation for command diagnostics
and lookup results.
"""

from __future__ import annotations

from typing import NoReturn, Sequence

import typer

from .errors import ExecutableNotFoundError, LookupStageError


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Print concise diagnostics for command failures and exit with code 1."""

    if isinstance(exc, (LookupStageError, ExecutableNotFoundError)):
        typer.secho(
            f"{command_name} failed at stage `{exc.stage}`: {exc.detail}",
            fg=typer.colors.RED,
            err=True,
        )
        if exc.hint:
            typer.secho(f"Hint: {exc.hint}", fg=typer.colors.YELLOW, err=True)
    else:
        typer.secho(f"{command_name} failed: {exc}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1) from exc


def echo_matches(matches: Sequence[str]) -> None:
    """Print one matching path per line, in search order."""

    for path in matches:
        typer.echo(path)
