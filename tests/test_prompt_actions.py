"""Prompt action tests."""

import pytest

from actions.prompt_actions import (
    FindTranslationIssuesAction,
    GenerateEditAction,
    GetLocalizableContentFromImageAction,
    MqmDimensionValuesAction,
    MqmReportAction,
    PostEditMtAction,
    SummaryAction,
    TranslateAction,
)
from core import prompts
from core.exceptions import EmptyInputError
from core.prompt_builder import PROMPT_SEPARATOR, split_prompt


class TestSummaryAction:

    def test_summary_with_custom_template(self, custom_prompts):
        custom_prompts("Summary", "Summarize: {0}")

        response = SummaryAction().execute(text="Hello world")

        assert response.prompt == "Summarize: Hello world"

    def test_summary_text_and_file(self):
        response = SummaryAction().execute(text="Hello", text_file=b"world")

        assert response.prompt == prompts.format_prompt(prompts.get_prompt(prompts.SUMMARY), "Hello world")
        assert PROMPT_SEPARATOR not in response.prompt

    def test_summary_requires_text(self):
        with pytest.raises(EmptyInputError, match="Both Text and File inputs can't be empty"):
            SummaryAction().execute()


class TestGenerateEditAction:

    def test_instructions_only_in_user_prompt(self):
        response = GenerateEditAction().execute(text="teh text", instructions="Fix typos")

        parts = split_prompt(response.prompt)
        assert parts.system == prompts.get_prompt(prompts.GENERATE_EDIT_SYSTEM)
        assert "Fix typos" not in parts.system
        assert parts.user == prompts.format_prompt(
            prompts.get_prompt(prompts.GENERATE_EDIT_USER), "teh text", "Fix typos"
        )

    def test_requires_text(self):
        with pytest.raises(EmptyInputError, match="Both Text and File inputs"):
            GenerateEditAction().execute(instructions="Fix typos")

    def test_additional_prompt_is_rejected(self):
        ok, error = GenerateEditAction().validate_parameters(
            {"text": "a", "instructions": "b", "additional_prompt": "c"}
        )
        assert not ok
        assert "additional_prompt" in error


class TestPostEditMtAction:

    def test_without_additional_prompt(self, review_request):
        response = PostEditMtAction().execute(**review_request)

        parts = split_prompt(response.prompt)
        assert parts.system == prompts.get_prompt(prompts.POST_EDIT_MT_SYSTEM)
        assert parts.user == prompts.format_prompt(
            prompts.get_prompt(prompts.TRANSLATION_REVIEW), "Bonjour le monde", "Hello world"
        )
        assert response.prompt.count(PROMPT_SEPARATOR) == 1

    def test_with_additional_prompt(self, review_request):
        response = PostEditMtAction().execute(additional_prompt="Use British spelling.", **review_request)

        system = split_prompt(response.prompt).system
        assert system == prompts.get_prompt(prompts.POST_EDIT_MT_SYSTEM) + " Use British spelling."

    def test_target_from_file(self):
        response = PostEditMtAction().execute(source_text="Hola", target_text_file="Hello".encode("utf-8"))

        assert split_prompt(response.prompt).user.endswith("Hello")

    @pytest.mark.parametrize(
        "params,message",
        [
            ({"target_text": "Hello"}, "Both Source text and Source text file inputs can't be empty"),
            ({"source_text": "Hola"}, "Both Target text and Target text file inputs can't be empty"),
        ],
    )
    def test_missing_inputs_are_named(self, params, message):
        with pytest.raises(EmptyInputError) as exc_info:
            PostEditMtAction().execute(**params)
        assert str(exc_info.value) == message


class TestFindTranslationIssuesAction:

    def test_source_language_only(self, custom_prompts, review_request):
        custom_prompts("FindTranslationIssuesSystem", "Source <{0}> target <{1}>")

        response = FindTranslationIssuesAction().execute(source_language="French", **review_request)

        system = split_prompt(response.prompt).system
        assert system == "Source <written in French > target <>"

    def test_bundled_template_with_languages(self, review_request):
        response = FindTranslationIssuesAction().execute(
            source_language="French",
            target_language="English",
            additional_prompt="Ignore punctuation.",
            **review_request,
        )

        system = split_prompt(response.prompt).system
        assert "written in French " in system
        assert "written in English" in system
        assert system.endswith(" Ignore punctuation.")

    def test_without_languages(self, review_request):
        response = FindTranslationIssuesAction().execute(**review_request)

        system = split_prompt(response.prompt).system
        assert system == prompts.format_prompt(
            prompts.get_prompt(prompts.FIND_TRANSLATION_ISSUES_SYSTEM), "", ""
        )
        assert "written in" not in system


class TestMqmActions:

    def test_mqm_report_user_prompt(self, custom_prompts, review_request):
        custom_prompts("MqmUser", "{0}|{1}|{2}|{3}|{4}")

        response = MqmReportAction().execute(
            source_language="French",
            target_language="English",
            target_audience="children",
            **review_request,
        )

        parts = split_prompt(response.prompt)
        assert parts.system == prompts.get_prompt(prompts.MQM_REPORT_SYSTEM)
        assert parts.user == "The French |Bonjour le monde|Hello world| into English| The target audience is children"
        assert parts.response_format is None

    def test_mqm_report_additional_prompt(self, review_request):
        response = MqmReportAction().execute(additional_prompt="Focus on terminology.", **review_request)

        assert split_prompt(response.prompt).system.endswith(" Focus on terminology.")

    def test_dimension_values_appends_json_marker(self, custom_prompts, review_request):
        custom_prompts("MqmReportSystem", "Assess the translation.")
        custom_prompts("MqmDimensionValuesSystem", "Assess the translation.")
        params = dict(review_request, source_language="French", target_audience="experts")

        report = MqmReportAction().execute(**params)
        dimensions = MqmDimensionValuesAction().execute(**params)

        assert dimensions.prompt == report.prompt + ";;json"
        assert dimensions.prompt.count(PROMPT_SEPARATOR) == 2

    def test_dimension_values_uses_its_system_template(self, review_request):
        action = MqmDimensionValuesAction()
        response = action.execute(**review_request)

        parts = split_prompt(response.prompt, action.response_format)
        assert parts.system == prompts.get_prompt(prompts.MQM_DIMENSION_VALUES_SYSTEM)
        assert parts.response_format == "json"

    def test_report_target_ending_in_marker_is_not_a_format(self):
        action = MqmReportAction()
        response = action.execute(source_text="a", target_text="b;;json")

        parts = split_prompt(response.prompt, action.response_format)
        assert action.response_format is None
        assert parts.response_format is None
        assert parts.user.endswith("b;;json")

    def test_missing_target(self):
        with pytest.raises(EmptyInputError, match="Target text"):
            MqmDimensionValuesAction().execute(source_text="Hola")


class TestTranslateAction:

    def test_translate(self, custom_prompts):
        custom_prompts("Translate", "Localize to {1}: {0}")

        response = TranslateAction().execute(text="Hello", locale="fr-FR")

        assert response.prompt == "Localize to fr-FR: Hello"

    def test_requires_text(self):
        with pytest.raises(EmptyInputError, match="Both Text and Text file inputs can't be empty"):
            TranslateAction().execute(locale="fr-FR")


class TestGetLocalizableContentFromImageAction:

    def test_returns_template_verbatim(self):
        response = GetLocalizableContentFromImageAction().execute()

        assert response.prompt == prompts.get_prompt(prompts.GET_LOCALIZABLE_CONTENT_FROM_IMAGE)

    def test_rejects_parameters(self):
        ok, error = GetLocalizableContentFromImageAction().validate_parameters({"text": "x"})
        assert not ok
        assert "takes no parameters" in error

    def test_schema_has_no_properties(self):
        schema = GetLocalizableContentFromImageAction().get_schema()
        assert schema.parameters["properties"] == {}


class TestFileDecoding:

    def test_invalid_utf8_file_still_builds(self, custom_prompts):
        custom_prompts("Summary", "Summarize: {0}")

        response = SummaryAction().execute(text_file=b"caf\xe9")

        assert response.prompt == "Summarize: caf\ufffd"
