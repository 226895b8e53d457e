"""Action registry tests."""

import pytest

from actions import ActionRegistry, get_registry, reset_registry
from actions.prompt_actions import PROMPT_ACTIONS, SummaryAction, register_prompt_actions
from core.config import reset_config


EXPECTED_ACTIONS = [
    "summary",
    "generate_edit",
    "post_edit_mt",
    "find_translation_issues",
    "mqm_report",
    "mqm_dimension_values",
    "translate",
    "get_localizable_content_from_image",
]


class TestActionRegistry:
    """Test cases for ActionRegistry."""

    @pytest.fixture
    def registry(self):
        registry = ActionRegistry()
        register_prompt_actions(registry)
        return registry

    def test_all_actions_registered(self, registry):
        assert registry.get_available_actions() == EXPECTED_ACTIONS
        assert len(PROMPT_ACTIONS) == len(EXPECTED_ACTIONS)

    def test_duplicate_registration(self, registry):
        with pytest.raises(ValueError, match="already registered"):
            registry.register(SummaryAction())

    def test_execute_success(self, registry):
        result = registry.execute_action("summary", {"text": "Hello world"})

        assert result.success
        assert "Hello world" in result.prompt
        assert result.error is None
        assert result.execution_time_ms is not None

    def test_empty_input_error_surfaced_verbatim(self, registry):
        result = registry.execute_action("post_edit_mt", {"source_text": "Hola"})

        assert not result.success
        assert result.prompt is None
        assert result.error == "Both Target text and Target text file inputs can't be empty"

    def test_unknown_action(self, registry):
        result = registry.execute_action("nope", {})

        assert not result.success
        assert result.error == "Action 'nope' not found"

    def test_validation_failure(self, registry):
        result = registry.execute_action("translate", {"text": "Hello"})

        assert not result.success
        assert result.error.startswith("Parameter validation failed:")
        assert "locale" in result.error

    def test_unexpected_parameter(self, registry):
        result = registry.execute_action("summary", {"text": "Hello", "locale": "fr"})

        assert not result.success
        assert "locale" in result.error

    def test_allowlist(self, registry):
        registry.set_allowlist(["summary", "translate"])

        assert registry.get_available_actions() == ["summary", "translate"]
        assert registry.is_allowed("summary")
        assert not registry.is_allowed("mqm_report")

        result = registry.execute_action("mqm_report", {})
        assert result.error == "Action 'mqm_report' is not in allowlist"

    def test_allowlist_reset(self, registry):
        registry.set_allowlist(["summary"])
        registry.set_allowlist(None)

        assert registry.get_available_actions() == EXPECTED_ACTIONS

    def test_allowlist_drops_unknown_names(self, registry):
        enabled = registry.set_allowlist(["summary", "summarize", "translate"])

        assert enabled == ["summary", "translate"]
        assert not registry.is_allowed("summarize")

    def test_describe_actions_follows_allowlist(self, registry):
        registry.set_allowlist(["mqm_report"])

        assert registry.describe_actions() == [
            {
                "name": "mqm_report",
                "display_name": "MQM report prompt",
                "description": registry.get_action("mqm_report").description,
            }
        ]

    def test_register_requires_pydantic_request_model(self):
        class BrokenAction(SummaryAction):
            name = "broken"
            request_model = dict

        with pytest.raises(TypeError, match="pydantic"):
            ActionRegistry().register(BrokenAction())

    def test_invalid_utf8_file_succeeds(self, registry):
        result = registry.execute_action("summary", {"text_file": b"caf\xe9"})

        assert result.success
        assert "caf\ufffd" in result.prompt

    def test_schema(self, registry):
        schema = registry.get_action("mqm_report").get_schema()

        assert schema.name == "mqm_report"
        assert schema.display_name == "MQM report prompt"
        assert "target_audience" in schema.parameters["properties"]
        assert "prompt" in schema.returns["properties"]


class TestGlobalRegistry:

    def test_singleton(self):
        assert get_registry() is get_registry()

    def test_reset(self):
        first = get_registry()
        reset_registry()
        assert get_registry() is not first

    def test_allowlist_from_config(self, monkeypatch):
        monkeypatch.setenv("ENABLED_ACTIONS", "summary, translate")
        reset_config()

        assert get_registry().get_available_actions() == ["summary", "translate"]
