"""FastAPI application exposing the prompt actions"""

import logging

from fastapi import FastAPI

from app.routes import prompts
from core.config import get_config
from core.logging_config import setup_logging

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Build the API application."""
    config = get_config()
    setup_logging(config.log_level)

    api = FastAPI(
        title=config.app_name,
        description="Build LLM prompts for summarizing, editing, translating and reviewing text",
    )
    api.include_router(prompts.router)

    logger.info("API application created")
    return api


app = create_app()
