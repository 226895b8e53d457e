"""Actions command - list prompt actions or show one action's schema"""
import json
from typing import Optional

import typer

from actions import get_registry


def actions(
    schema: Optional[str] = typer.Option(None, "--schema", "-s", help="Print the parameter schema of an action"),
) -> None:
    """List available prompt actions"""
    registry = get_registry()

    if schema:
        if not registry.is_allowed(schema):
            typer.echo(f"Unknown action: {schema}", err=True)
            typer.echo(f"Available: {', '.join(registry.get_available_actions())}", err=True)
            raise typer.Exit(1)
        action = registry.get_action(schema)
        typer.echo(json.dumps(action.get_schema().model_dump(), indent=2))
        return

    typer.echo("=== Available Actions ===")
    typer.echo("")
    for item in registry.describe_actions():
        typer.echo(f"  {item['name']}")
        typer.echo(f"      {item['display_name']}: {item['description']}")
