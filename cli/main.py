"""Prompt Kit CLI - Main entry point"""
import typer

from .commands import actions, run, config, serve

app = typer.Typer(
    name="prompt-kit",
    help="Prompt Kit - Build LLM prompts for summarizing, editing, translating and reviewing text",
    add_completion=False,
)


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Configure logging before any command runs"""
    from core.logging_config import setup_logging

    setup_logging("DEBUG" if verbose else None)


# Register subcommands
app.command(name="actions")(actions)
app.command(name="run")(run)
app.command(name="config")(config)
app.command(name="serve")(serve)


def main() -> None:
    """Main CLI entry point"""
    app()


if __name__ == "__main__":
    main()
