"""Typer command handlers."""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

import typer

from core.errors import FormatError, InvalidArgumentError
from core.orchestrator import Orchestrator, RuntimeBundle
from core.runtime_config import configure_logging
from ui.tui.controller import ListController
from workspaces.renderer import parse_selection, render_lines


@dataclass
class CliOptions:
    """Global options shared by every subcommand."""

    config_path: Path | None = None
    verbose: bool = False


def _runtime(options: CliOptions, handler: logging.Handler | None = None) -> RuntimeBundle:
    orchestrator = Orchestrator(config_path=options.config_path)
    config = orchestrator.load_config()
    configure_logging(config, verbose=options.verbose, handler=handler)
    return orchestrator.wire(config)


def _highlight_color(bundle: RuntimeBundle) -> str | None:
    return bundle.config.get("display", {}).get("highlight_color") or None


def list_workspaces(options: CliOptions) -> None:
    """Print every live workspace with its label."""
    bundle = _runtime(options)
    for line in render_lines(bundle.operations.rows()):
        typer.echo(line)


def rename(options: CliOptions, index: int, words: list[str]) -> None:
    """Rename one workspace."""
    name = " ".join(words).strip()
    if not name:
        raise InvalidArgumentError("workspace name must not be empty")
    bundle = _runtime(options)
    bundle.operations.rename(index, name)


def create(options: CliOptions, count: int) -> None:
    """Ensure ``count`` workspaces exist."""
    bundle = _runtime(options)
    bundle.operations.create(count)


def switch(options: CliOptions, index: int) -> None:
    """Switch to a 1-based workspace."""
    bundle = _runtime(options)
    bundle.operations.switch(index)


def dynamic(options: CliOptions, state: str) -> None:
    """Turn dynamic workspaces on or off."""
    value = state.strip().lower()
    if value not in ("on", "off"):
        raise InvalidArgumentError("usage: gnav dynamic on|off")
    bundle = _runtime(options)
    bundle.operations.set_dynamic(value == "on")


def wofi_feed(options: CliOptions) -> None:
    """Emit fuzzy-finder lines, highlighting the active workspace."""
    bundle = _runtime(options)
    for line in render_lines(bundle.operations.rows(), highlight_color=_highlight_color(bundle)):
        typer.echo(line)


def wofi_select(options: CliOptions, stream: TextIO | None = None) -> None:
    """Switch to the workspace named by one ``index: label`` line on stdin."""
    source = stream if stream is not None else sys.stdin
    line = source.readline()
    if not line:
        raise FormatError("no input")
    selection = parse_selection(line)
    bundle = _runtime(options)
    bundle.operations.switch(selection.index)


def wofi_run(options: CliOptions) -> None:
    """Show the fuzzy finder and switch to whatever gets picked."""
    bundle = _runtime(options)
    lines = render_lines(bundle.operations.rows(), highlight_color=_highlight_color(bundle))
    selection = parse_selection(bundle.finder.choose(lines))
    bundle.operations.switch(selection.index)


def interactive(options: CliOptions) -> None:
    """Open the terminal workspace list."""
    from textual.logging import TextualHandler

    from ui.tui.app import run_app

    bundle = _runtime(options, handler=TextualHandler())
    marker = str(bundle.config.get("display", {}).get("active_marker", "*"))
    run_app(ListController(bundle.operations), active_marker=marker)
