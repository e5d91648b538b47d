"""
run-this — CLI entrypoint.

Usage:
    run-this [OPTIONS] [--] <command> [arguments]...
    python -m run_this.main -- git status

Runs <command> if it is on the search path and exits with its status.
Otherwise explains how to install it and exits with 127.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import TYPE_CHECKING

import click

from run_this import __version__
from run_this.core.observability.logging_config import resolve_level, setup_logging_from_env

if TYPE_CHECKING:
    from run_this.core.use_cases.run import RunResult

USAGE_LINE = "Usage: run-this [--] <command> [arguments]"


class PassthroughCommand(click.Command):
    """Command whose trailing arguments belong to the wrapped program.

    Click swallows a ``--`` separator while parsing. The raw argument
    list is kept in ``ctx.meta`` so the usage error can tell an empty
    invocation apart from a bare ``--``.
    """

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        ctx.meta["run_this.raw_args"] = list(args)
        return super().parse_args(ctx, args)


def _usage_error(ctx: click.Context) -> None:
    raw_args: list[str] = ctx.meta.get("run_this.raw_args", [])
    if "--" in raw_args:
        message = "No command specified after --."
    else:
        message = "No command specified."
    click.secho(message, fg="red", bold=True, err=True)
    click.echo(USAGE_LINE, err=True)


def _render_not_found(result: RunResult) -> None:
    command = result.command
    click.echo(
        f"{click.style('Command not found:', fg='red', bold=True)} "
        f"{click.style(command, fg='yellow')}",
        err=True,
    )
    click.echo(
        f"You don't have {click.style(command, fg='yellow')} installed on this system.",
        err=True,
    )

    err = result.config_error
    if err is not None:
        verb = "reading" if err.kind == "read" else "parsing"
        click.echo(
            f"{click.style(f'Error {verb} {err.path.name}:', fg='red', bold=True)} {err}",
            err=True,
        )

    guidance = result.guidance
    if guidance is not None:
        click.echo(err=True)
        click.secho(guidance.heading, fg="cyan", err=True)
        for line in guidance.lines:
            click.echo(f"  {line}", err=True)


@click.command(
    cls=PassthroughCommand,
    context_settings={
        "ignore_unknown_options": True,
        "allow_interspersed_args": False,
    },
)
@click.version_option(version=__version__, prog_name="run-this")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Only log errors.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False, dir_okay=False),
    default=None,
    help="Path to the guidance file (default: ./run-this.json).",
)
@click.argument("argv", nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
    argv: tuple[str, ...],
) -> None:
    """Run a command, or explain how to install it if it is missing.

    Options for run-this must come before the command. Anything that
    looks like one of them is read as an option, not a command name:
    put -- in front of a command whose name starts with a dash
    (run-this -- -v runs a program called -v).

    Examples:

        run-this git status

        run-this -- -weird-tool --flag
    """
    setup_logging_from_env(resolve_level(debug=debug, verbose=verbose, quiet=quiet))

    if not argv or not argv[0]:
        _usage_error(ctx)
        sys.exit(1)

    from run_this.core.use_cases.run import Outcome, run_command

    command, args = argv[0], list(argv[1:])
    result = run_command(
        command,
        args,
        config_path=Path(config_path) if config_path else None,
    )

    if result.outcome == Outcome.NOT_FOUND:
        _render_not_found(result)
    elif result.outcome == Outcome.SPAWN_ERROR:
        click.echo(
            f"{click.style('Error running command:', fg='red', bold=True)} {result.error}",
            err=True,
        )

    sys.exit(result.exit_code)


if __name__ == "__main__":
    cli()
