"""Config commands."""

import sys
from pathlib import Path

import cyclopts
import yaml
from pydantic import ValidationError
from rich.console import Console
from rich.syntax import Syntax

from vault.config import Config

app = cyclopts.App(name="config", help="Inspect vault configuration")

console = Console()


@app.command
def show() -> None:
    """Show current effective config (env vars, .env and VAULT_CONFIG_FILE)."""
    config = Config()  # type: ignore[call-arg]
    data = config.model_dump(mode="json")
    if data["auth"]["jwt"]["secret"]:
        data["auth"]["jwt"]["secret"] = "***"
    console.print(Syntax(yaml.safe_dump(data, sort_keys=False), "yaml"))


@app.command
def validate(path: Path) -> None:
    """Validate a YAML config file.

    Args:
        path: Path to the config file.
    """
    if not path.exists():
        console.print(f"[red]Error:[/red] {path} not found")
        sys.exit(1)

    try:
        Config.model_validate(yaml.safe_load(path.read_text()) or {})
    except (ValidationError, yaml.YAMLError) as e:
        console.print(f"[red]✗[/red] {path} is invalid: {e}")
        sys.exit(1)
    console.print(f"[green]✓[/green] {path} is valid")
