"""Global test configuration and fixtures."""

import pytest

from actions import reset_registry
from core.config import reset_config


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Give every test a fresh config and registry."""
    for var in ("PROMPTS_DIR", "ENABLED_ACTIONS"):
        monkeypatch.delenv(var, raising=False)
    # Keep INFO records out of CLI output
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    reset_config()
    reset_registry()
    yield
    reset_config()
    reset_registry()


@pytest.fixture
def custom_prompts(tmp_path, monkeypatch):
    """Point PROMPTS_DIR at a temporary directory and return a template writer."""
    monkeypatch.setenv("PROMPTS_DIR", str(tmp_path))
    reset_config()

    def write(name: str, content: str) -> None:
        (tmp_path / f"{name}.md").write_text(content, encoding="utf-8")

    return write


@pytest.fixture
def review_request():
    """Source/target request shared by the review actions."""
    return {
        "source_text": "Bonjour le monde",
        "target_text": "Hello world",
    }
