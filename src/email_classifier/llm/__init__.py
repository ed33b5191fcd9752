"""
LLM client abstraction and implementations.

Components:
- BaseLLMClient: Abstract base class for LLM clients
- OpenAIClient: Chat-completions implementation over httpx
- PromptBuilder: Constructs classification prompts
- exceptions: LLM-specific exceptions
"""

from email_classifier.llm.base_client import BaseLLMClient
from email_classifier.llm.openai_client import OpenAIClient
from email_classifier.llm.prompt_builder import PromptBuilder
from email_classifier.llm.exceptions import (
    LLMClientError,
    LLMConnectionError,
    LLMTimeoutError,
    LLMAuthenticationError,
    LLMRateLimitError,
    LLMGenerationError,
)

__all__ = [
    "BaseLLMClient",
    "OpenAIClient",
    "PromptBuilder",
    "LLMClientError",
    "LLMConnectionError",
    "LLMTimeoutError",
    "LLMAuthenticationError",
    "LLMRateLimitError",
    "LLMGenerationError",
]
