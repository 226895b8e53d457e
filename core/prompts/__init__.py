"""
Prompt Template Catalog

Markdown prompt templates with ordinal placeholders ({0}, {1}, ...).
A directory configured through PROMPTS_DIR overrides the bundled files.
"""

import logging
import string
from pathlib import Path
from typing import Dict, List, Optional

from core.exceptions import TemplateFormatError, TemplateNotFoundError

logger = logging.getLogger(__name__)

_PROMPTS_DIR = Path(__file__).parent

SUMMARY = "Summary"
GENERATE_EDIT_SYSTEM = "GenerateEditSystem"
GENERATE_EDIT_USER = "GenerateEditUser"
POST_EDIT_MT_SYSTEM = "PostEditMtSystem"
FIND_TRANSLATION_ISSUES_SYSTEM = "FindTranslationIssuesSystem"
TRANSLATION_REVIEW = "TranslationReview"
MQM_REPORT_SYSTEM = "MqmReportSystem"
MQM_DIMENSION_VALUES_SYSTEM = "MqmDimensionValuesSystem"
MQM_USER = "MqmUser"
TRANSLATE = "Translate"
GET_LOCALIZABLE_CONTENT_FROM_IMAGE = "GetLocalizableContentFromImage"

# Number of positional arguments each template is formatted with
TEMPLATE_SLOTS: Dict[str, int] = {
    SUMMARY: 1,                                 # text
    GENERATE_EDIT_SYSTEM: 0,
    GENERATE_EDIT_USER: 2,                      # text, instructions
    POST_EDIT_MT_SYSTEM: 0,
    FIND_TRANSLATION_ISSUES_SYSTEM: 2,          # source language part, target language part
    TRANSLATION_REVIEW: 2,                      # source text, target text
    MQM_REPORT_SYSTEM: 0,
    MQM_DIMENSION_VALUES_SYSTEM: 0,
    MQM_USER: 5,                                # source lang, source, target, target lang, audience
    TRANSLATE: 2,                               # text, locale
    GET_LOCALIZABLE_CONTENT_FROM_IMAGE: 0,
}


def _search_dirs(prompts_dir: Optional[str] = None) -> List[Path]:
    if prompts_dir is None:
        from core.config import get_config

        prompts_dir = get_config().prompts_dir

    dirs = []
    if prompts_dir:
        dirs.append(Path(prompts_dir))
    dirs.append(_PROMPTS_DIR)
    return dirs


def get_prompt(name: str, prompts_dir: Optional[str] = None) -> str:
    """
    Read a prompt template from a .md file.

    Args:
        name: Template name (without .md extension)
        prompts_dir: Override directory. Defaults to PROMPTS_DIR from config.

    Returns:
        Template content as string
    """
    searched = []
    for directory in _search_dirs(prompts_dir):
        prompt_path = directory / f"{name}.md"
        searched.append(str(prompt_path))
        if prompt_path.exists():
            logger.debug(f"Loaded prompt template '{name}' from {prompt_path}")
            return prompt_path.read_text(encoding="utf-8").strip()

    raise TemplateNotFoundError(name, searched)


def list_prompts(prompts_dir: Optional[str] = None) -> List[str]:
    """List template names available in the catalog."""
    names = set()
    for directory in _search_dirs(prompts_dir):
        if directory.is_dir():
            names.update(path.stem for path in directory.glob("*.md"))
    return sorted(names)


def count_slots(template: str, name: Optional[str] = None) -> int:
    """
    Count the positional placeholders a template expects.

    Raises:
        TemplateFormatError: If the template has named fields or unbalanced braces
    """
    indexes = set()
    auto = 0
    try:
        fields = list(string.Formatter().parse(template))
    except ValueError as e:
        raise TemplateFormatError(name, str(e)) from e

    for _, field_name, _, _ in fields:
        if field_name is None:
            continue
        if field_name == "":
            indexes.add(auto)
            auto += 1
            continue
        index = field_name.split(".")[0].split("[")[0]
        if not index.isdigit():
            raise TemplateFormatError(name, f"named field '{{{field_name}}}', expected {{0}}, {{1}}, ...")
        indexes.add(int(index))
    return max(indexes) + 1 if indexes else 0


def format_prompt(template: str, *args: str) -> str:
    """
    Format a prompt template with positional values.

    Args:
        template: Template string with {0}, {1}, ... placeholders
        *args: Values substituted in order

    Returns:
        Formatted prompt string
    """
    return template.format(*args)
