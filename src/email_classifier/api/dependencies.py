"""
FastAPI dependency injection for the Email Classifier.

Expensive resources (HTTP client, prompt templates, repository) are built once
per process and handed to the routes through Depends(). Tests replace them
with app.dependency_overrides.
"""

from functools import lru_cache
from pathlib import Path
from typing import Optional

from email_classifier.classification.engine import ClassificationEngine
from email_classifier.classification.remote import RemoteClassifier
from email_classifier.config import Settings, settings
from email_classifier.llm.base_client import BaseLLMClient
from email_classifier.llm.openai_client import OpenAIClient
from email_classifier.llm.prompt_builder import PromptBuilder
from email_classifier.persistence.redis_client import RedisClient
from email_classifier.persistence.repository import ClassificationRepository, create_repository


@lru_cache()
def get_settings() -> Settings:
    """
    Get settings singleton.
    """
    return settings


def current_api_key() -> Optional[str]:
    """API key as currently configured; read on every call, never cached."""
    return get_settings().OPENAI_API_KEY


@lru_cache()
def get_llm_client() -> BaseLLMClient:
    """
    Get singleton chat-completions client.
    
    The client keeps an internal connection pool; nothing is opened until the
    first remote classification. The bearer key is looked up per request, so
    the client and the engine always agree on the current key.
    """
    current = get_settings()
    return OpenAIClient(
        api_key_provider=current_api_key,
        base_url=current.OPENAI_BASE_URL,
        timeout=current.OPENAI_TIMEOUT,
    )


@lru_cache()
def get_prompt_builder() -> PromptBuilder:
    """
    Get singleton prompt builder (templates are loaded once).
    """
    current = get_settings()
    return PromptBuilder(
        templates_dir=Path(current.PROMPT_TEMPLATES_DIR),
        default_model=current.OPENAI_MODEL,
        default_temperature=current.LLM_TEMPERATURE,
    )


@lru_cache()
def get_classification_engine() -> ClassificationEngine:
    """
    Get singleton classification engine.
    
    The API key is looked up on every classification, not captured here.
    """
    current = get_settings()
    remote_classifier = RemoteClassifier(
        llm_client=get_llm_client(),
        prompt_builder=get_prompt_builder(),
    )
    return ClassificationEngine(
        remote_classifier=remote_classifier,
        api_key_provider=current_api_key,
        placeholder=current.DEMO_API_KEY_PLACEHOLDER,
        non_production_marker=current.NON_PRODUCTION_KEY_MARKER,
    )


@lru_cache()
def get_repository() -> ClassificationRepository:
    """
    Get singleton repository for the configured STORAGE_BACKEND.
    """
    current = get_settings()
    redis_client = None
    if current.STORAGE_BACKEND.lower() == "redis":
        redis_client = RedisClient.get_async_client(current)
    return create_repository(
        current.STORAGE_BACKEND,
        redis_client=redis_client,
        ttl_seconds=current.RESULT_TTL_SECONDS,
        history_limit=current.HISTORY_LIMIT,
    )
