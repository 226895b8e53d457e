"""Prompt API routes - list and run prompt actions"""

import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, HTTPException, Body

from actions import ActionSchema, get_registry
from core.models import PromptResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/actions", tags=["actions"])


@router.get("")
def list_actions() -> List[Dict[str, str]]:
    """
    List the available prompt actions.

    Returns:
        Name, title and description of every enabled action
    """
    return get_registry().describe_actions()


@router.get("/{action_name}/schema")
def get_action_schema(action_name: str) -> ActionSchema:
    """Get the parameter schema of an action."""
    registry = get_registry()
    if not registry.is_allowed(action_name):
        raise HTTPException(status_code=404, detail=f"Action '{action_name}' not found")
    return registry.get_action(action_name).get_schema()


@router.post("/{action_name}")
def run_action(
    action_name: str,
    parameters: Optional[Dict[str, Any]] = Body(None, description="Action parameters"),
) -> PromptResponse:
    """
    Build a prompt with the given action.

    File inputs are passed as UTF-8 strings.

    Returns:
        The built prompt
    """
    registry = get_registry()
    if not registry.is_allowed(action_name):
        raise HTTPException(status_code=404, detail=f"Action '{action_name}' not found")

    result = registry.execute_action(action_name, parameters or {})
    if not result.success:
        logger.info(f"Action '{action_name}' rejected: {result.error}")
        raise HTTPException(status_code=422, detail=result.error)

    return PromptResponse(prompt=result.prompt)
