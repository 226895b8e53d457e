"""Exceptions raised while building prompts"""

from typing import Optional


class PromptKitError(Exception):
    """Base class for prompt kit errors."""


class EmptyInputError(PromptKitError):
    """Raised when both the inline text and the file of a text input are missing."""

    def __init__(self, message: str, input_name: Optional[str] = None):
        super().__init__(message)
        self.input_name = input_name


class TemplateNotFoundError(PromptKitError, FileNotFoundError):
    """Raised when a prompt template is not present in the catalog."""

    def __init__(self, name: str, searched: Optional[list] = None):
        super().__init__(f"Prompt template not found: {name}")
        self.name = name
        self.searched = searched or []


class TemplateFormatError(PromptKitError, ValueError):
    """Raised when a template does not use ordinal placeholders ({0}, {1}, ...)."""

    def __init__(self, name: Optional[str], detail: str):
        label = f"'{name}'" if name else "(unnamed)"
        super().__init__(f"Prompt template {label} is malformed: {detail}")
        self.name = name
