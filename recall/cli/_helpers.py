"""Shared CLI helpers: console and config loading with user-facing errors."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import typer
from rich.console import Console
from rich.markup import escape

if TYPE_CHECKING:
    from recall.models import Config

console = Console()


def print_error(message: object) -> None:
    console.print(f"[red]Error:[/red] {escape(str(message))}")


def resolve_config_path_or_exit(config: Path | None) -> Path:
    """Return *config* if given, otherwise the platform default path."""
    from recall._log import get_logger
    from recall.config import PathResolutionError, default_config_path

    logger = get_logger("cli")
    if config is not None:
        logger.info("Using custom config path: %s", config)
        return config

    try:
        path = default_config_path()
    except PathResolutionError as e:
        print_error(e)
        raise typer.Exit(1) from None
    logger.info("Using default config path: %s", path)
    return path


def load_config_or_exit(path: Path) -> Config:
    from recall._yaml import ParseError
    from recall.config import PathResolutionError
    from recall.loader import ConfigError, load_config

    try:
        return load_config(path)
    except PathResolutionError as e:
        print_error(e)
        console.print("Run [bold]recall init[/bold] to create an example config.")
        raise typer.Exit(1) from None
    except (ParseError, ConfigError) as e:
        print_error(e)
        raise typer.Exit(1) from None
