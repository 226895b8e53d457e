"""Action registry for managing available prompt actions"""

import time
from typing import Dict, Optional, List, Any, Set
from pydantic import BaseModel
from .base_action import BaseAction, ActionResult
from core.exceptions import PromptKitError
import logging

logger = logging.getLogger(__name__)


class ActionRegistry:
    """Name -> prompt action lookup with an optional set of enabled actions."""

    def __init__(self):
        self._actions: Dict[str, BaseAction] = {}
        # None enables every registered action
        self._enabled: Optional[Set[str]] = None

    def register(self, action: BaseAction) -> None:
        """Register a prompt action under its name."""
        if action.name in self._actions:
            raise ValueError(f"Action '{action.name}' is already registered")

        model = action.request_model
        if model is not None and not (isinstance(model, type) and issubclass(model, BaseModel)):
            raise TypeError(f"Action '{action.name}' request model must be a pydantic model")

        self._actions[action.name] = action
        logger.info(f"Registered action: {action.name} ({action.display_name})")

    def get_action(self, action_name: str) -> Optional[BaseAction]:
        return self._actions.get(action_name)

    def is_allowed(self, action_name: str) -> bool:
        """Registered and not disabled by the allowlist."""
        if action_name not in self._actions:
            return False
        return self._enabled is None or action_name in self._enabled

    def enabled_actions(self) -> List[BaseAction]:
        """Enabled actions in registration order."""
        return [action for name, action in self._actions.items() if self.is_allowed(name)]

    def get_available_actions(self) -> List[str]:
        return [action.name for action in self.enabled_actions()]

    def describe_actions(self) -> List[Dict[str, str]]:
        """Name, title and description of every enabled action."""
        return [
            {"name": action.name, "display_name": action.display_name, "description": action.description}
            for action in self.enabled_actions()
        ]

    def set_allowlist(self, action_names: Optional[List[str]]) -> List[str]:
        """
        Restrict the registry to the given actions.

        Names that are not registered prompt actions are dropped with a
        warning. Returns the names that end up enabled.
        """
        if action_names is None:
            self._enabled = None
            logger.info("Action allowlist cleared")
            return self.get_available_actions()

        unknown = [name for name in action_names if name not in self._actions]
        if unknown:
            logger.warning(
                f"Ignoring unknown actions in allowlist: {', '.join(unknown)} "
                f"(registered: {', '.join(self._actions)})"
            )

        self._enabled = {name for name in action_names if name in self._actions}
        enabled = self.get_available_actions()
        logger.info(f"Action allowlist set: {enabled}")
        return enabled

    def execute_action(
        self,
        action_name: str,
        parameters: Dict[str, Any],
        validate: bool = True
    ) -> ActionResult:
        """Execute an action with given parameters."""
        action = self.get_action(action_name)
        if action is None:
            return ActionResult(
                success=False,
                error=f"Action '{action_name}' not found"
            )

        if not self.is_allowed(action_name):
            return ActionResult(
                success=False,
                error=f"Action '{action_name}' is not in allowlist"
            )

        if validate:
            is_valid, error_msg = action.validate_parameters(parameters)
            if not is_valid:
                return ActionResult(
                    success=False,
                    error=f"Parameter validation failed: {error_msg}"
                )

        start_time = time.perf_counter()
        try:
            response = action.execute(**parameters)
        except PromptKitError as e:
            logger.warning(f"Action '{action_name}' failed: {e}")
            return ActionResult(success=False, error=str(e))
        except Exception as e:
            logger.error(f"Action '{action_name}' execution failed: {e}", exc_info=True)
            return ActionResult(
                success=False,
                error=f"Action execution failed: {str(e)}"
            )

        execution_time = (time.perf_counter() - start_time) * 1000
        logger.info(f"Action '{action_name}' executed in {execution_time:.2f}ms")
        return ActionResult(
            success=True,
            prompt=response.prompt,
            execution_time_ms=execution_time
        )


# Global action registry instance
_registry: Optional[ActionRegistry] = None


def get_registry() -> ActionRegistry:
    """Get the global action registry with all prompt actions registered."""
    global _registry
    if _registry is None:
        from core.config import get_config
        from .prompt_actions import register_prompt_actions

        _registry = ActionRegistry()
        register_prompt_actions(_registry)

        allowlist = get_config().action_allowlist
        if allowlist is not None:
            _registry.set_allowlist(allowlist)
    return _registry


def reset_registry() -> None:
    """Reset the global action registry (mainly for testing)."""
    global _registry
    _registry = None
