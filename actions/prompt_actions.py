"""Prompt actions - one action per prompt the kit can build"""

import logging
from typing import List

from core import prompts
from core.models import (
    GenerateEditRequest,
    MqmRequest,
    PostEditMtRequest,
    PromptResponse,
    TextRequest,
    TranslateRequest,
    TranslationRequest,
)
from core.prompt_builder import (
    JSON_FORMAT,
    TextSource,
    build_mqm_prompt,
    build_review_prompt,
    build_simple_prompt,
    build_system_user_prompt,
    build_translation_issues_prompt,
    with_response_format,
)
from .base_action import BaseAction

logger = logging.getLogger(__name__)


def _source(request: PostEditMtRequest) -> TextSource:
    return TextSource(request.source_text, request.source_text_file, "Source text", "Source text file")


def _target(request: PostEditMtRequest) -> TextSource:
    return TextSource(request.target_text, request.target_text_file, "Target text", "Target text file")


class SummaryAction(BaseAction):
    request_model = TextRequest

    name = "summary"
    display_name = "Summary prompt"
    description = "Get prompt for summarizing text"

    def run(self, request: TextRequest) -> PromptResponse:
        source = TextSource(request.text, request.text_file)
        return PromptResponse(prompt=build_simple_prompt(prompts.get_prompt(prompts.SUMMARY), source))


class GenerateEditAction(BaseAction):
    """
    The instructions go into the user prompt as a positional value;
    unlike the review actions nothing is appended to the system prompt.
    """
    request_model = GenerateEditRequest

    name = "generate_edit"
    display_name = "Generate edit prompt"
    description = "Get prompt for editing the input text given an instructions"

    def run(self, request: GenerateEditRequest) -> PromptResponse:
        text = TextSource(request.text, request.text_file).resolve()
        prompt = build_system_user_prompt(
            prompts.get_prompt(prompts.GENERATE_EDIT_SYSTEM),
            prompts.get_prompt(prompts.GENERATE_EDIT_USER),
            [text, request.instructions],
        )
        return PromptResponse(prompt=prompt)


class PostEditMtAction(BaseAction):
    request_model = PostEditMtRequest

    name = "post_edit_mt"
    display_name = "Post-edit MT prompt"
    description = "Get prompt for reviewing MT translated text and generating a post-edited version"

    def run(self, request: PostEditMtRequest) -> PromptResponse:
        prompt = build_review_prompt(
            prompts.get_prompt(prompts.POST_EDIT_MT_SYSTEM),
            prompts.get_prompt(prompts.TRANSLATION_REVIEW),
            _source(request),
            _target(request),
            request.additional_prompt,
        )
        return PromptResponse(prompt=prompt)


class FindTranslationIssuesAction(BaseAction):
    request_model = TranslationRequest

    name = "find_translation_issues"
    display_name = "Find translation issues prompt"
    description = "Get prompt for reviewing text translation and generating a comment with the issue description"

    def run(self, request: TranslationRequest) -> PromptResponse:
        prompt = build_translation_issues_prompt(
            prompts.get_prompt(prompts.FIND_TRANSLATION_ISSUES_SYSTEM),
            prompts.get_prompt(prompts.TRANSLATION_REVIEW),
            _source(request),
            _target(request),
            source_language=request.source_language,
            target_language=request.target_language,
            additional_instruction=request.additional_prompt,
        )
        return PromptResponse(prompt=prompt)


class MqmReportAction(BaseAction):
    request_model = MqmRequest

    name = "mqm_report"
    display_name = "MQM report prompt"
    description = (
        "Get prompt for performing an LQA Analysis of the translation. "
        "The result will be in the MQM framework form."
    )

    system_template = prompts.MQM_REPORT_SYSTEM

    def build(self, request: MqmRequest) -> str:
        return build_mqm_prompt(
            prompts.get_prompt(self.system_template),
            prompts.get_prompt(prompts.MQM_USER),
            _source(request),
            _target(request),
            source_language=request.source_language,
            target_language=request.target_language,
            target_audience=request.target_audience,
            additional_instruction=request.additional_prompt,
        )

    def run(self, request: MqmRequest) -> PromptResponse:
        return PromptResponse(prompt=self.build(request))


class MqmDimensionValuesAction(MqmReportAction):
    """MQM prompt asking for per-dimension scores; the result is marked ';;json'."""

    name = "mqm_dimension_values"
    display_name = "MQM dimension values prompt"
    description = (
        "Get prompt for performing an LQA Analysis of the translation. "
        "The result will be in the MQM framework form, namely the scores "
        "(between 1 and 10) of each dimension."
    )

    system_template = prompts.MQM_DIMENSION_VALUES_SYSTEM
    response_format = JSON_FORMAT

    def run(self, request: MqmRequest) -> PromptResponse:
        return PromptResponse(prompt=with_response_format(self.build(request), self.response_format))


class TranslateAction(BaseAction):
    request_model = TranslateRequest

    name = "translate"
    display_name = "Translate prompt"
    description = "Get prompt for localizing the provided text"

    def run(self, request: TranslateRequest) -> PromptResponse:
        source = TextSource(request.text, request.text_file, "Text", "Text file")
        prompt = build_simple_prompt(prompts.get_prompt(prompts.TRANSLATE), source, request.locale)
        return PromptResponse(prompt=prompt)


class GetLocalizableContentFromImageAction(BaseAction):
    name = "get_localizable_content_from_image"
    display_name = "Get localizable content from image prompt"
    description = "Get prompt for retrieving localizable content from image"

    def run(self, request: None = None) -> PromptResponse:
        return PromptResponse(prompt=prompts.get_prompt(prompts.GET_LOCALIZABLE_CONTENT_FROM_IMAGE))


PROMPT_ACTIONS = [
    SummaryAction,
    GenerateEditAction,
    PostEditMtAction,
    FindTranslationIssuesAction,
    MqmReportAction,
    MqmDimensionValuesAction,
    TranslateAction,
    GetLocalizableContentFromImageAction,
]


def register_prompt_actions(registry) -> List[str]:
    """Register every prompt action and return their names."""
    names = []
    for action_cls in PROMPT_ACTIONS:
        action = action_cls()
        registry.register(action)
        names.append(action.name)
    logger.debug(f"Registered {len(names)} prompt actions")
    return names
