"""Typer CLI for Recall."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from recall.cli._helpers import console

app = typer.Typer(
    name="recall",
    help="Recall keybinds, shortcuts, commands and more.",
    no_args_is_help=False,
)


def version_callback(value: bool) -> None:
    if value:
        from recall import __version__

        console.print(f"recall {__version__}")
        raise typer.Exit()


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    config: Annotated[
        Path | None,
        typer.Option(
            "--config", "-c", metavar="FILE", help="Path to a different configuration file"
        ),
    ] = None,
    version: Annotated[
        bool | None,
        typer.Option("--version", callback=version_callback, is_eager=True),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Enable debug logging"),
    ] = False,
    log_file: Annotated[
        Path | None,
        typer.Option("--log-file", metavar="FILE", help="Write log output to FILE"),
    ] = None,
) -> None:
    """Page through your keybinds, shortcuts and commands."""
    from recall._log import get_logger, setup_logging
    from recall.cli._helpers import load_config_or_exit, resolve_config_path_or_exit

    # Debug output on stderr would draw over the TUI; it needs --log-file there.
    tui_mode = ctx.invoked_subcommand is None and log_file is None
    setup_logging(verbose=verbose and not tui_mode, log_file=log_file)

    config_path = resolve_config_path_or_exit(config)
    ctx.obj = config_path

    if ctx.invoked_subcommand is not None:
        return

    loaded = load_config_or_exit(config_path)

    from recall.tui import run_tui

    reason = run_tui(loaded)
    get_logger("cli").info("Quitting due to: %s", reason.text())


def init(ctx: typer.Context) -> None:
    """Initialize example config."""
    from rich.markup import escape

    from recall._log import get_logger
    from recall.cli._helpers import print_error
    from recall.navigation import QuitReason
    from recall.templates import write_example_config

    path: Path = ctx.obj
    try:
        write_example_config(path)
    except FileExistsError as e:
        print_error(f"{e} Refusing to overwrite.")
        raise typer.Exit(1) from None
    except OSError as e:
        print_error(f"Cannot write example config to {path}: {e}")
        raise typer.Exit(1) from None

    console.print(f"[green]Created[/green] example config in {escape(str(path))}")
    get_logger("cli").info("Quitting due to: %s", QuitReason.INIT_SUBCOMMAND_COMPLETED.text())


app.command()(init)


def app_entry() -> None:
    """Entry point for the CLI."""
    app()
