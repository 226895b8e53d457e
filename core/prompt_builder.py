"""
Prompt Builder - assembles prompts from catalog templates.

Every function here is pure: inputs are resolved, substituted into
positional templates and, for two-part prompts, joined with the
system/user separator.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from core.exceptions import EmptyInputError
from core.prompts import format_prompt

logger = logging.getLogger(__name__)

PROMPT_SEPARATOR = ";;"
JSON_FORMAT = "json"


@dataclass(frozen=True)
class TextSource:
    """Inline text and/or file content making up one logical input."""
    text: Optional[str] = None
    file: Optional[bytes] = None
    label: str = "Text"
    file_label: str = "File"

    def resolve(self) -> str:
        return resolve_text(self.text, self.file, self.label, self.file_label)


@dataclass
class PromptParts:
    """A joined prompt split back into its halves."""
    system: Optional[str]
    user: str
    response_format: Optional[str] = None


def resolve_text(
    text: Optional[str],
    text_file: Optional[bytes],
    label: str = "Text",
    file_label: str = "File",
) -> str:
    """
    Resolve an inline text / file pair into a single string.

    Args:
        text: Inline text, None when not provided
        text_file: Raw file content (UTF-8), None when not provided
        label: Name of the inline input used in the error message
        file_label: Name of the file input used in the error message

    Returns:
        The inline text, the decoded file, or both joined by a space

    Raises:
        EmptyInputError: If both inputs are missing
    """
    if text is None and text_file is None:
        raise EmptyInputError(f"Both {label} and {file_label} inputs can't be empty", input_name=label)

    parts = []
    if text is not None:
        parts.append(text)
    if text_file is not None:
        # Invalid sequences become U+FFFD
        parts.append(text_file.decode("utf-8", errors="replace"))

    return " ".join(parts)


def join_prompts(*parts: str) -> str:
    return PROMPT_SEPARATOR.join(parts)


def append_instruction(system_prompt: str, instruction: Optional[str]) -> str:
    """Append the caller's additional instruction to a system prompt."""
    if instruction is None:
        return system_prompt
    return f"{system_prompt} {instruction}"


def build_simple_prompt(template: str, source: TextSource, *args: str) -> str:
    """Substitute a resolved text (followed by any extra values) into a template."""
    return format_prompt(template, source.resolve(), *args)


def build_system_user_prompt(
    system_prompt: str,
    user_template: str,
    user_args: Sequence[str],
    additional_instruction: Optional[str] = None,
) -> str:
    """
    Build a system/user prompt pair joined by the separator.

    Args:
        system_prompt: System prompt, already formatted if it takes arguments
        user_template: User template with positional placeholders
        user_args: Values for the user template, in placeholder order
        additional_instruction: Appended to the system prompt when provided

    Returns:
        "<system>;;<user>"
    """
    system = append_instruction(system_prompt, additional_instruction)
    user = format_prompt(user_template, *user_args)
    return join_prompts(system, user)


def build_review_prompt(
    system_prompt: str,
    user_template: str,
    source: TextSource,
    target: TextSource,
    additional_instruction: Optional[str] = None,
) -> str:
    """Two-text prompt where the user template takes (source, target)."""
    source_text = source.resolve()
    target_text = target.resolve()
    return build_system_user_prompt(
        system_prompt, user_template, [source_text, target_text], additional_instruction
    )


# Language annotation fragments. Missing values always yield "" so that
# every template position is still substituted.

def source_language_part(language: Optional[str]) -> str:
    return f"written in {language} " if language is not None else ""


def target_language_part(language: Optional[str]) -> str:
    return f"written in {language}" if language is not None else ""


def mqm_source_language_part(language: Optional[str]) -> str:
    return f"The {language} " if language is not None else ""


def mqm_target_language_part(language: Optional[str]) -> str:
    return f" into {language}" if language is not None else ""


def target_audience_part(audience: Optional[str]) -> str:
    return f" The target audience is {audience}" if audience is not None else ""


def build_translation_issues_prompt(
    system_template: str,
    user_template: str,
    source: TextSource,
    target: TextSource,
    source_language: Optional[str] = None,
    target_language: Optional[str] = None,
    additional_instruction: Optional[str] = None,
) -> str:
    """Review prompt whose system template is annotated with the text languages."""
    system_prompt = format_prompt(
        system_template,
        source_language_part(source_language),
        target_language_part(target_language),
    )
    return build_review_prompt(system_prompt, user_template, source, target, additional_instruction)


def build_mqm_prompt(
    system_prompt: str,
    user_template: str,
    source: TextSource,
    target: TextSource,
    source_language: Optional[str] = None,
    target_language: Optional[str] = None,
    target_audience: Optional[str] = None,
    additional_instruction: Optional[str] = None,
) -> str:
    """
    MQM assessment prompt.

    The user template receives (source language part, source text,
    target text, target language part, target audience part).
    """
    source_text = source.resolve()
    target_text = target.resolve()

    user_args = [
        mqm_source_language_part(source_language),
        source_text,
        target_text,
        mqm_target_language_part(target_language),
        target_audience_part(target_audience),
    ]
    return build_system_user_prompt(system_prompt, user_template, user_args, additional_instruction)


def with_response_format(prompt: str, response_format: str = JSON_FORMAT) -> str:
    """Mark the expected response shape as a trailing segment."""
    return join_prompts(prompt, response_format)


def split_prompt(prompt: str, response_format: Optional[str] = None) -> PromptParts:
    """
    Split a joined prompt on the first separator.

    A single-part prompt comes back as the user half with no system half.
    The trailing format segment is only removed when the caller says which
    format the action appends, since prompt text may itself end in ";;json".
    """
    found_format = None
    if response_format is not None:
        suffix = PROMPT_SEPARATOR + response_format
        if prompt.endswith(suffix):
            prompt = prompt[: -len(suffix)]
            found_format = response_format

    if PROMPT_SEPARATOR not in prompt:
        return PromptParts(system=None, user=prompt, response_format=found_format)

    system, user = prompt.split(PROMPT_SEPARATOR, 1)
    return PromptParts(system=system, user=user, response_format=found_format)
