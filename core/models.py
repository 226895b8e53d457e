"""Request and response schemas for prompt actions"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class PromptRequestBase(BaseModel):
    """Common settings for action requests."""

    model_config = ConfigDict(extra="forbid")


class TextRequest(PromptRequestBase):
    text: Optional[str] = Field(None, description="Text")
    text_file: Optional[bytes] = Field(None, description="Text file content (UTF-8)")


class GenerateEditRequest(TextRequest):
    instructions: str = Field(..., description="Instructions describing the edit")


class TranslateRequest(TextRequest):
    locale: str = Field(..., description="Target locale, e.g. fr-FR")


class PostEditMtRequest(PromptRequestBase):
    source_text: Optional[str] = Field(None, description="Source text")
    source_text_file: Optional[bytes] = Field(None, description="Source text file content (UTF-8)")
    target_text: Optional[str] = Field(None, description="Target text")
    target_text_file: Optional[bytes] = Field(None, description="Target text file content (UTF-8)")
    additional_prompt: Optional[str] = Field(None, description="Additional system prompt instructions")


class TranslationRequest(PostEditMtRequest):
    source_language: Optional[str] = Field(None, description="Source language")
    target_language: Optional[str] = Field(None, description="Target language")


class MqmRequest(TranslationRequest):
    target_audience: Optional[str] = Field(None, description="Target audience of the translation")


class PromptResponse(BaseModel):
    """Prompt returned by an action."""
    prompt: str = Field(..., description="Prompt; system and user parts are joined by ';;'")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "prompt": "You are a skilled editor...;;Text:\nHello world\n\nInstructions:\nFix typos",
            }
        }
    )
