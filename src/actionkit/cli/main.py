import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from actionkit.cli.commands.files import env_app, output_app, path_app, state_app, summary_app
from actionkit.cli.commands.log import log_app

app = typer.Typer(
    name="actionkit",
    help="Emit GitHub Actions workflow commands and environment file records.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)
console = Console(stderr=True)

# Register subcommands
app.add_typer(log_app)
app.add_typer(env_app)
app.add_typer(output_app)
app.add_typer(state_app)
app.add_typer(summary_app)
app.add_typer(path_app)


@app.callback()
def main_callback(
    ctx: typer.Context,
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        help="Path to an actionkit.toml overriding variable names",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output to stderr"),
) -> None:
    """Shared options for every command."""
    if verbose:
        # stdout carries workflow commands, keep diagnostics off it.
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    ctx.obj = {"config_path": config}


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
