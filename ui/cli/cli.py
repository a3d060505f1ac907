"""CLI entrypoint for gnav."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import typer

from core.errors import GnavError
from ui.cli import commands

app = typer.Typer(help="Name, create and switch desktop workspaces.", add_completion=False)


def _options(ctx: typer.Context) -> commands.CliOptions:
    return ctx.obj if isinstance(ctx.obj, commands.CliOptions) else commands.CliOptions()


def _run(action: Callable[[], None]) -> None:
    try:
        action()
    except GnavError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    config: Path | None = typer.Option(None, "--config", help="Alternate config YAML file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Without a subcommand, open the interactive workspace list."""
    ctx.obj = commands.CliOptions(config_path=config, verbose=verbose)
    if ctx.invoked_subcommand is None:
        _run(lambda: commands.interactive(ctx.obj))


@app.command("list")
def list_cmd(ctx: typer.Context) -> None:
    """Display workspace names."""
    _run(lambda: commands.list_workspaces(_options(ctx)))


@app.command("rename")
def rename_cmd(
    ctx: typer.Context,
    index: int = typer.Argument(..., help="1-based workspace index"),
    name: list[str] = typer.Argument(..., help="New name; words are joined with spaces"),
) -> None:
    """Rename a workspace."""
    _run(lambda: commands.rename(_options(ctx), index=index, words=name))


@app.command("create")
def create_cmd(ctx: typer.Context, count: int = typer.Argument(..., help="Total workspaces wanted")) -> None:
    """Add or expand static workspaces."""
    _run(lambda: commands.create(_options(ctx), count=count))


@app.command("switch")
def switch_cmd(ctx: typer.Context, index: int = typer.Argument(..., help="1-based workspace index")) -> None:
    """Switch to workspace by index."""
    _run(lambda: commands.switch(_options(ctx), index=index))


@app.command("dynamic")
def dynamic_cmd(ctx: typer.Context, state: str = typer.Argument(..., help="on or off")) -> None:
    """Enable/disable GNOME dynamic workspaces."""
    _run(lambda: commands.dynamic(_options(ctx), state=state))


@app.command("wofi-feed")
@app.command("wofi", hidden=True)
def wofi_feed_cmd(ctx: typer.Context) -> None:
    """Output workspace list for wofi."""
    _run(lambda: commands.wofi_feed(_options(ctx)))


@app.command("wofi-select")
@app.command("wofi-switch", hidden=True)
def wofi_select_cmd(ctx: typer.Context) -> None:
    """Switch workspace from an 'index: name' line on stdin."""
    _run(lambda: commands.wofi_select(_options(ctx)))


@app.command("wofi-run")
def wofi_run_cmd(ctx: typer.Context) -> None:
    """Interactive workspace selection with wofi."""
    _run(lambda: commands.wofi_run(_options(ctx)))


@app.command("interactive")
def interactive_cmd(ctx: typer.Context) -> None:
    """Launch text-based UI."""
    _run(lambda: commands.interactive(_options(ctx)))


def main() -> None:
    """Console script entrypoint."""
    app()


if __name__ == "__main__":
    main()
