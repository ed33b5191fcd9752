"""
LLM-specific data models for the request/response cycle.

These models are internal to the LLM layer and describe the raw exchange with
the chat-completions endpoint. They are kept separate from the business models
(ClassificationResult) so the client can be swapped without touching
normalization.
"""

from typing import Any, Dict, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class ChatMessage(BaseModel):
    """A single role-tagged message."""
    model_config = ConfigDict(frozen=True)
    
    role: Literal["system", "user", "assistant"]
    content: str


class LLMGenerationRequest(BaseModel):
    """
    Standardized request sent to an LLM client implementation.
    """
    model_config = ConfigDict(frozen=True)
    
    messages: list[ChatMessage] = Field(..., min_length=1, description="Ordered conversation (system + user)")
    model: str = Field(..., description="Model identifier (e.g., 'gpt-4o')")
    temperature: float = Field(default=0.1, ge=0.0, le=2.0, description="Sampling temperature")
    response_format: Optional[Dict[str, Any]] = Field(
        default_factory=lambda: {"type": "json_object"},
        description="Response format directive; JSON object mode by default"
    )
    max_tokens: Optional[int] = Field(default=None, ge=1, description="Maximum tokens to generate")


class LLMGenerationResponse(BaseModel):
    """
    Raw generated text plus metadata for logging and metrics.
    
    The content is untrusted; parsing and normalization happen in the classifier.
    """
    model_config = ConfigDict(frozen=True)
    
    content: str = Field(default="", description="Generated text (expected to be a JSON object)")
    model_version: str = Field(..., description="Model that actually served the request")
    finish_reason: Optional[str] = Field(default=None, description="Why generation stopped: 'stop', 'length', ...")
    prompt_tokens: Optional[int] = Field(default=None, description="Tokens in prompt")
    completion_tokens: Optional[int] = Field(default=None, description="Tokens in completion")
    usage_tokens: Optional[int] = Field(default=None, description="Total tokens used")
    latency_ms: int = Field(..., ge=0, description="Round-trip latency in milliseconds")
