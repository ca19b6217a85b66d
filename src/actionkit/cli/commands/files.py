"""Environment file CLI commands."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Optional

import typer
from rich.console import Console

from actionkit.cli.commands._shared import config_from_context
from actionkit.core.errors import ActionsError
from actionkit.core.protocol.files import WorkflowFiles
from actionkit.ui.console import files as ui_files

env_app = typer.Typer(name="env", help="Set or read variables via $GITHUB_ENV", no_args_is_help=True)
output_app = typer.Typer(name="output", help="Set step outputs via $GITHUB_OUTPUT", no_args_is_help=True)
state_app = typer.Typer(name="state", help="Save action state via $GITHUB_STATE", no_args_is_help=True)
summary_app = typer.Typer(
    name="summary", help="Write the job summary via $GITHUB_STEP_SUMMARY", no_args_is_help=True
)
path_app = typer.Typer(name="path", help="Prepend directories to PATH via $GITHUB_PATH", no_args_is_help=True)

console = Console(stderr=True)
stdout = Console()


def _files(ctx: typer.Context) -> WorkflowFiles:
    return WorkflowFiles(config=config_from_context(ctx))


def _run(action: Callable[[], object]) -> None:
    try:
        action()
    except ActionsError as exc:
        ui_files.render_error(console, exc)
        raise typer.Exit(1) from exc


def _read_value(value: Optional[str], from_file: Optional[Path]) -> str:
    if value is not None and from_file is not None:
        raise typer.BadParameter("provide VALUE or --from-file, not both")
    if from_file is not None:
        return from_file.read_text(encoding="utf-8")
    if value is None:
        raise typer.BadParameter("provide VALUE or --from-file")
    return value


ValueArgument = typer.Argument(None, help="Value (may contain newlines)")
FromFileOption = typer.Option(
    None, "--from-file", exists=True, dir_okay=False, help="Read the value from a file"
)


@env_app.command("set")
def env_set(
    ctx: typer.Context,
    key: str = typer.Argument(..., help="Variable name"),
    value: Optional[str] = ValueArgument,
    from_file: Optional[Path] = FromFileOption,
) -> None:
    """Set an environment variable for the following steps."""
    files = _files(ctx)
    content = _read_value(value, from_file)
    _run(lambda: files.set_env(key, content))
    ui_files.render_written(console, "env", key, files.resolve("env"))


@env_app.command("get")
def env_get(ctx: typer.Context, key: str = typer.Argument(..., help="Variable name")) -> None:
    """Print the current value of an environment variable."""
    value, ok = _files(ctx).get_env(key)
    ui_files.render_env_value(stdout if ok else console, key, value, ok)
    if not ok:
        raise typer.Exit(1)


@output_app.command("set")
def output_set(
    ctx: typer.Context,
    key: str = typer.Argument(..., help="Output name"),
    value: Optional[str] = ValueArgument,
    from_file: Optional[Path] = FromFileOption,
) -> None:
    """Set a step output."""
    files = _files(ctx)
    content = _read_value(value, from_file)
    _run(lambda: files.set_output(key, content))
    ui_files.render_written(console, "output", key, files.resolve("output"))


@state_app.command("set")
def state_set(
    ctx: typer.Context,
    key: str = typer.Argument(..., help="State name"),
    value: Optional[str] = ValueArgument,
    from_file: Optional[Path] = FromFileOption,
) -> None:
    """Save state for the action's post step."""
    files = _files(ctx)
    content = _read_value(value, from_file)
    _run(lambda: files.save_state(key, content))
    ui_files.render_written(console, "state", key, files.resolve("state"))


@summary_app.command("write")
def summary_write(
    ctx: typer.Context,
    text: Optional[str] = typer.Argument(None, help="Markdown content"),
    from_file: Optional[Path] = FromFileOption,
) -> None:
    """Replace the job summary with the given markdown."""
    files = _files(ctx)
    content = _read_value(text, from_file)
    _run(lambda: files.write_summary(content))
    ui_files.render_written(console, "summary", "markdown", files.resolve("summary"))


@path_app.command("add")
def path_add(ctx: typer.Context, directory: str = typer.Argument(..., help="Directory to prepend")) -> None:
    """Prepend a directory to PATH for the following steps."""
    files = _files(ctx)
    _run(lambda: files.add_path(directory))
    ui_files.render_written(console, "path", directory.strip(), files.resolve("path"))
