"""Prompt actions and the registry that dispatches them by name"""

from .base_action import ActionResult, ActionSchema, BaseAction
from .action_registry import ActionRegistry, get_registry, reset_registry

__all__ = [
    "ActionResult",
    "ActionSchema",
    "BaseAction",
    "ActionRegistry",
    "get_registry",
    "reset_registry",
]
