"""Configuration management commands."""

from typing import Annotated, Any

import typer
from pydantic import ValidationError

from tasklist.services.config_service import get_config_service
from tasklist.utils.exit_codes import ERROR_INVALID_ARGS, ERROR_NOT_FOUND
from tasklist.utils.ui.console import get_console
from tasklist.utils.ui.formatters import format_output, format_success

from .decorators import AppError, command_wrapper

app = typer.Typer(help="Configuration management commands")
console = get_console()


def parse_value(value: str) -> Any:
    """Interpret a command-line value: booleans and ``null`` get their types."""
    lowered = value.lower()
    if lowered in ("true", "false"):
        return lowered == "true"
    if lowered in ("null", "none"):
        return None
    return value


@app.command("view")
@command_wrapper
def view_config(
    output: Annotated[
        str, typer.Option("--output", "-o", help="Output format")
    ] = "table",
) -> None:
    """View current configuration."""
    config_svc = get_config_service()
    format_output(config_svc.config.model_dump(), output)
    console.print(f"[dim]{config_svc.config_path}[/dim]")


@app.command("get")
@command_wrapper
def get_config(
    key: Annotated[str, typer.Argument(help="Configuration key (e.g. storage.backend)")],
) -> None:
    """Get a configuration value."""
    try:
        value = get_config_service().get(key)
    except KeyError as e:
        raise AppError(f"Configuration key '{key}' not found", ERROR_NOT_FOUND) from e
    console.print(value)


@app.command("set")
@command_wrapper
def set_config(
    key: Annotated[str, typer.Argument(help="Configuration key (e.g. storage.backend)")],
    value: Annotated[str, typer.Argument(help="Configuration value")],
) -> None:
    """Set a configuration value."""
    try:
        get_config_service().set(key, parse_value(value))
    except KeyError as e:
        raise AppError(f"Configuration key '{key}' not found", ERROR_NOT_FOUND) from e
    except ValidationError as e:
        errors = "; ".join(err["msg"] for err in e.errors())
        raise AppError(f"Invalid value for '{key}': {errors}", ERROR_INVALID_ARGS) from e
    format_success(f"Set {key} = {value}")


@app.command("reset")
@command_wrapper
def reset_config(
    yes: Annotated[bool, typer.Option("--yes", "-y", help="Skip confirmation")] = False,
) -> None:
    """Reset configuration to defaults."""
    if not yes and not typer.confirm("Reset configuration to defaults?"):
        raise typer.Exit(0)
    get_config_service().reset_config()
    format_success("Configuration reset to defaults")
