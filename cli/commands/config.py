"""Config command - display current configuration"""
import typer

from core.config import get_config
from core.prompts import list_prompts


def config() -> None:
    """Show current configuration settings"""
    config = get_config()

    typer.echo("=== Current Configuration ===")
    typer.echo("")

    typer.echo("Application:")
    typer.echo(f"  Name: {config.app_name}")
    typer.echo(f"  Log Level: {config.log_level}")
    typer.echo("")

    typer.echo("Prompt Templates:")
    typer.echo(f"  Override Directory: {config.prompts_dir or 'Not set'}")
    typer.echo(f"  Templates: {', '.join(list_prompts())}")
    typer.echo("")

    typer.echo("Actions:")
    allowlist = config.action_allowlist
    typer.echo(f"  Enabled: {', '.join(allowlist) if allowlist else 'All'}")
    typer.echo("")

    typer.echo("API:")
    typer.echo(f"  Host: {config.api_host}")
    typer.echo(f"  Port: {config.api_port}")
    typer.echo("")

    typer.echo("Note: Override settings via .env file or environment variables")
    typer.echo("Example: PROMPTS_DIR=./my_prompts, ENABLED_ACTIONS=summary,translate")
