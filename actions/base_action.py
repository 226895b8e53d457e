"""Base action interface and abstract class"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, Type

from pydantic import BaseModel, ConfigDict, Field, ValidationError
import logging

from core.models import PromptResponse

logger = logging.getLogger(__name__)


class ActionResult(BaseModel):
    """Standard action execution result."""
    success: bool = Field(..., description="Whether the action execution was successful")
    prompt: Optional[str] = Field(None, description="Built prompt")
    error: Optional[str] = Field(None, description="Error message if execution failed")
    execution_time_ms: Optional[float] = Field(None, description="Action execution time in milliseconds")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "success": True,
                "prompt": "Summarize the following text...",
                "error": None,
                "execution_time_ms": 0.42,
            }
        }
    )


class ActionSchema(BaseModel):
    """Action schema definition for validation and documentation."""
    name: str = Field(..., description="Action name")
    display_name: str = Field(..., description="Human-readable action title")
    description: str = Field(..., description="Action description")
    parameters: Dict[str, Any] = Field(..., description="Action parameter schema (JSON Schema format)")
    returns: Dict[str, Any] = Field(..., description="Action return schema (JSON Schema format)")


class BaseAction(ABC):
    """Abstract base class for all prompt actions."""

    # Pydantic model of the action input; None for actions without inputs
    request_model: Optional[Type[BaseModel]] = None

    # Format segment appended after the prompt, e.g. "json"
    response_format: Optional[str] = None

    @property
    @abstractmethod
    def name(self) -> str:
        """Action identifier."""
        pass

    @property
    @abstractmethod
    def display_name(self) -> str:
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        """Human-readable action description."""
        pass

    @abstractmethod
    def run(self, request: Optional[BaseModel]) -> PromptResponse:
        """Build the prompt for a validated request."""
        pass

    def parse_request(self, parameters: Dict[str, Any]) -> Optional[BaseModel]:
        """Turn raw parameters into the action's request model."""
        if self.request_model is None:
            if parameters:
                raise ValueError(f"Action '{self.name}' takes no parameters")
            return None
        return self.request_model.model_validate(parameters)

    def execute(self, **kwargs: Any) -> PromptResponse:
        """Execute the action with given parameters."""
        return self.run(self.parse_request(kwargs))

    def get_schema(self) -> ActionSchema:
        """Get action schema for validation and documentation."""
        if self.request_model is None:
            parameters: Dict[str, Any] = {"type": "object", "properties": {}}
        else:
            parameters = self.request_model.model_json_schema()

        return ActionSchema(
            name=self.name,
            display_name=self.display_name,
            description=self.description,
            parameters=parameters,
            returns=PromptResponse.model_json_schema(),
        )

    def validate_parameters(self, parameters: Dict[str, Any]) -> tuple[bool, Optional[str]]:
        """Validate action parameters against the request model."""
        try:
            self.parse_request(parameters)
        except ValidationError as e:
            errors = "; ".join(
                f"{'.'.join(str(loc) for loc in err['loc']) or 'request'}: {err['msg']}"
                for err in e.errors()
            )
            return False, errors
        except ValueError as e:
            return False, str(e)

        return True, None
