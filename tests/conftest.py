"""Shared test fixtures and configuration for all tests.

This conftest.py provides common fixtures used across unit and integration tests.
"""

import json
from pathlib import Path
from typing import Any, Callable, Dict

import pytest

from email_classifier.config import PACKAGE_DIR, Settings


@pytest.fixture
def test_settings() -> Settings:
    """Test settings with safe defaults (fallback mode, in-memory storage).
    
    Override specific settings in individual tests as needed:
        def test_something(test_settings):
            test_settings.OPENAI_API_KEY = "sk-proj-test"
    """
    return Settings(
        # === Application ===
        APP_NAME="Email Classifier (Test)",
        APP_VERSION="0.1.0",
        ENVIRONMENT="development",
        DEBUG=True,
        LOG_LEVEL="DEBUG",
        
        # === OpenAI ===
        OPENAI_API_KEY=None,
        OPENAI_BASE_URL="https://api.test/v1",
        OPENAI_MODEL="gpt-4o",
        OPENAI_TIMEOUT=5,
        
        # === Persistence ===
        STORAGE_BACKEND="memory",
        REDIS_URL="redis://localhost:6379/0",
        HISTORY_LIMIT=50,
        
        PROMETHEUS_ENABLED=False,
    )


@pytest.fixture
def fixtures_dir() -> Path:
    """Path to test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def templates_dir() -> Path:
    """Prompt templates shipped with the package."""
    return PACKAGE_DIR / "prompts"


@pytest.fixture
def sample_emails(fixtures_dir: Path) -> Dict[str, str]:
    """Sample email bodies keyed by the category the keyword rules assign."""
    with open(fixtures_dir / "sample_emails.json") as f:
        return json.load(f)


@pytest.fixture
def chat_completion_payload(fixtures_dir: Path) -> Dict[str, Any]:
    """Raw /chat/completions response body with a valid classification."""
    with open(fixtures_dir / "chat_completion_response.json") as f:
        return json.load(f)


@pytest.fixture
def make_chat_completion() -> Callable[..., Dict[str, Any]]:
    """Factory fixture for /chat/completions bodies with custom content.
    
    Usage:
        def test_something(make_chat_completion):
            body = make_chat_completion('{"primaryCategory": "lead"}')
    """
    def _create(content: Any, model: str = "gpt-4o-2024-08-06") -> Dict[str, Any]:
        return {
            "id": "chatcmpl-test",
            "object": "chat.completion",
            "model": model,
            "choices": [
                {
                    "index": 0,
                    "message": {"role": "assistant", "content": content},
                    "finish_reason": "stop",
                }
            ],
            "usage": {"prompt_tokens": 210, "completion_tokens": 64, "total_tokens": 274},
        }
    
    return _create
