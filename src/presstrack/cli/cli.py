"""Typer CLI entrypoint for presstrack."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import click
import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.text import Text

from presstrack.cli.rendering import CliRenderer
from presstrack.commands import ArticleCommandDispatcher, CommandStatus
from presstrack.commands.types import ExitCommand
from presstrack.config import ConfigError, PresstrackConfig, load_config

app = typer.Typer(help="presstrack command interpreter")
_CONSOLE = Console()
_LOGGING_CONFIGURED = False
_EXIT_CODE = f"{ExitCommand.COMMAND_WORD}_parsed"

ConfigOption = Annotated[
    Path | None,
    typer.Option(
        "--config",
        file_okay=True,
        dir_okay=False,
        help="Path to presstrack config YAML/JSON file.",
    ),
]


def _configure_logging(level: str) -> None:
    """Configure Rich-backed logging once for CLI commands."""
    global _LOGGING_CONFIGURED  # noqa: PLW0603
    if _LOGGING_CONFIGURED:
        return
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(show_path=False, rich_tracebacks=True)],
    )
    _LOGGING_CONFIGURED = True


def _default_config_file() -> Path:
    """Return default config path under the current directory.

    Returns:
        YAML config path, or the JSON one when only that exists.
    """
    yaml_path = Path.cwd() / ".presstrack" / "config.yaml"
    json_path = Path.cwd() / ".presstrack" / "config.json"
    if not yaml_path.exists() and json_path.exists():
        return json_path
    return yaml_path


def _load_config_or_exit(config_file: Path | None) -> PresstrackConfig:
    """Load config, exiting with status 2 on invalid payloads.

    Raises:
        Exit: If the config file cannot be decoded or validated.
    """
    try:
        return load_config(config_file or _default_config_file())
    except ConfigError as exc:
        _CONSOLE.print(Text(str(exc), style="bold red"))
        raise typer.Exit(code=2) from exc


def _build_dispatcher(config: PresstrackConfig) -> ArticleCommandDispatcher:
    """Build dispatcher from config aliases.

    Raises:
        Exit: If an alias targets an unknown command word.
    """
    try:
        return ArticleCommandDispatcher(aliases=config.commands.aliases)
    except ValueError as exc:
        _CONSOLE.print(Text(f"Invalid config: {exc}", style="bold red"))
        raise typer.Exit(code=2) from exc


@app.command("parse")
def parse_command(
    text: Annotated[str, typer.Argument(help="Single command line to parse.")],
    config_file: ConfigOption = None,
) -> None:
    """Parse one command line and print the resulting command.

    Args:
        text: Raw command line.
        config_file: Optional config file path override.

    Raises:
        Exit: Raised with status 1 when the line does not parse.
    """
    config = _load_config_or_exit(config_file)
    _configure_logging(config.console.log_level.value)
    dispatcher = _build_dispatcher(config)
    result = dispatcher.interpret(text)
    CliRenderer(console=_CONSOLE).render(result)
    raise typer.Exit(code=0 if result.status == CommandStatus.OK else 1)


@app.command("shell")
def shell_command(config_file: ConfigOption = None) -> None:
    """Run an interactive loop parsing one command per line.

    Args:
        config_file: Optional config file path override.
    """
    config = _load_config_or_exit(config_file)
    _configure_logging(config.console.log_level.value)
    dispatcher = _build_dispatcher(config)
    renderer = CliRenderer(console=_CONSOLE)
    _CONSOLE.print(
        "presstrack shell. Commands: " + ", ".join(dispatcher.command_words),
        style="cyan",
    )
    while True:
        try:
            raw = typer.prompt(config.console.prompt.rstrip(), prompt_suffix=" ")
        except (EOFError, KeyboardInterrupt, click.Abort, typer.Abort):
            _CONSOLE.print("\nbye", style="yellow")
            break

        text = raw.strip()
        if not text:
            continue
        result = dispatcher.interpret(text)
        renderer.render(result)
        if result.code == _EXIT_CODE:
            _CONSOLE.print("bye", style="yellow")
            break


def main() -> None:
    """Run the Typer application."""
    app()
