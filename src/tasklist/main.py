"""Main entry point for Tasklist."""

import typer

from tasklist import __version__
from tasklist.commands import config
from tasklist.commands.add_command import add_task
from tasklist.commands.delete_command import delete_task
from tasklist.commands.edit_command import edit_task
from tasklist.commands.list_command import list_tasks
from tasklist.commands.toggle_command import toggle_task
from tasklist.commands.ui_command import run_ui
from tasklist.utils.ui.console import get_console

app = typer.Typer(
    name="tasklist",
    help="A to-do list for the terminal",
    no_args_is_help=True,
)

console = get_console()

app.command("ui")(run_ui)
app.command("list")(list_tasks)
app.command("add")(add_task)
app.command("edit")(edit_task)
app.command("toggle")(toggle_task)
app.command("delete")(delete_task)
app.add_typer(config.app, name="config", help="Configuration management")


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]Tasklist[/bold] version [cyan]{__version__}[/cyan]")


def main() -> None:
    """Console script entry point."""
    app()


if __name__ == "__main__":
    main()
