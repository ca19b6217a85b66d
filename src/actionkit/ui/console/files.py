"""Console UI for workflow file commands."""
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from actionkit.core.errors import ActionsError, ConfigurationError, TargetFileError


def render_error(console: Console, error: ActionsError) -> None:
    """Render an actionkit error."""
    if isinstance(error, ConfigurationError):
        console.print(f"[red]Not configured:[/red] {escape(str(error))}")
        console.print(f"[dim]Is this running inside a workflow step? ${error.variable} is empty.[/dim]")
    elif isinstance(error, TargetFileError):
        console.print(f"[red]Cannot write {escape(str(error.path))}:[/red] {escape(str(error.reason))}")
    else:
        console.print(f"[red]{escape(str(error))}[/red]")


def render_written(console: Console, what: str, key: str, path: Path) -> None:
    """Render confirmation of a record write."""
    console.print(f"[green]{what}[/green] [bold]{escape(key)}[/bold] [dim]-> {escape(str(path))}[/dim]")


def render_env_value(console: Console, key: str, value: str, ok: bool) -> None:
    """Render an environment lookup."""
    if not ok:
        console.print(f"[yellow]${escape(key)} is not set[/yellow]")
        return
    console.print(value, markup=False, highlight=False, soft_wrap=True)
