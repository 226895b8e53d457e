"""Run command - build a prompt with one action"""
from pathlib import Path
from typing import Any, Dict, Optional

import typer

from actions import get_registry
from core.prompt_builder import split_prompt


def _read_file(path: Optional[Path]) -> Optional[bytes]:
    if path is None:
        return None
    if not path.is_file():
        typer.echo(f"File not found: {path}", err=True)
        raise typer.Exit(1)
    return path.read_bytes()


def run(
    action_name: str = typer.Argument(..., help="Action name, see 'prompt-kit actions'"),
    text: Optional[str] = typer.Option(None, "--text", help="Text"),
    text_file: Optional[Path] = typer.Option(None, "--text-file", help="File with the text (UTF-8)"),
    source_text: Optional[str] = typer.Option(None, "--source-text", help="Source text"),
    source_text_file: Optional[Path] = typer.Option(None, "--source-text-file", help="File with the source text"),
    target_text: Optional[str] = typer.Option(None, "--target-text", help="Target text"),
    target_text_file: Optional[Path] = typer.Option(None, "--target-text-file", help="File with the target text"),
    instructions: Optional[str] = typer.Option(None, "--instructions", help="Edit instructions"),
    locale: Optional[str] = typer.Option(None, "--locale", help="Target locale"),
    source_language: Optional[str] = typer.Option(None, "--source-language", help="Source language"),
    target_language: Optional[str] = typer.Option(None, "--target-language", help="Target language"),
    target_audience: Optional[str] = typer.Option(None, "--target-audience", help="Target audience"),
    additional_prompt: Optional[str] = typer.Option(None, "--additional-prompt", help="Extra system prompt instructions"),
    split: bool = typer.Option(False, "--split", help="Print system and user prompts separately"),
) -> None:
    """Build a prompt - only the options you pass are sent to the action"""
    parameters: Dict[str, Any] = {
        "text": text,
        "text_file": _read_file(text_file),
        "source_text": source_text,
        "source_text_file": _read_file(source_text_file),
        "target_text": target_text,
        "target_text_file": _read_file(target_text_file),
        "instructions": instructions,
        "locale": locale,
        "source_language": source_language,
        "target_language": target_language,
        "target_audience": target_audience,
        "additional_prompt": additional_prompt,
    }
    parameters = {key: value for key, value in parameters.items() if value is not None}

    registry = get_registry()
    result = registry.execute_action(action_name, parameters)
    if not result.success:
        typer.echo(f"Error: {result.error}", err=True)
        raise typer.Exit(1)

    if not split:
        typer.echo(result.prompt)
        return

    parts = split_prompt(result.prompt, registry.get_action(action_name).response_format)
    if parts.system is not None:
        typer.echo("=== System ===")
        typer.echo(parts.system)
        typer.echo("")
    typer.echo("=== User ===")
    typer.echo(parts.user)
    if parts.response_format:
        typer.echo("")
        typer.echo(f"=== Response format: {parts.response_format} ===")
