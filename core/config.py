"""Application configuration loaded from environment and .env file"""

import logging
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class AppConfig(BaseSettings):
    """Prompt kit settings."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_name: str = "prompt-kit"

    # Directory with .md templates that take precedence over the bundled catalog
    prompts_dir: Optional[str] = None

    log_level: str = "INFO"

    api_host: str = "127.0.0.1"
    api_port: int = 8000

    # Comma separated action names; empty means every registered action
    enabled_actions: Optional[str] = None

    @property
    def action_allowlist(self) -> Optional[List[str]]:
        """Parsed ENABLED_ACTIONS value."""
        if not self.enabled_actions:
            return None
        return [name.strip() for name in self.enabled_actions.split(",") if name.strip()]


_config: Optional[AppConfig] = None


def get_config() -> AppConfig:
    """Get the global AppConfig instance."""
    global _config
    if _config is None:
        _config = AppConfig()
        logger.debug(f"Configuration loaded: {_config.model_dump()}")
    return _config


def reset_config() -> None:
    """Drop the cached configuration (mainly for testing)."""
    global _config
    _config = None
