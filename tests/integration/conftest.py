"""Integration test fixtures.

API tests run the real FastAPI app in-process with TestClient. The model
provider is replaced by httpx.MockTransport and storage by an in-memory
repository, so no external service is needed. Redis tests are skipped when
Redis is not reachable.
"""

from typing import Callable, Optional

import httpx
import pytest
from fastapi.testclient import TestClient
from redis.asyncio import Redis as AsyncRedis

from email_classifier.api.dependencies import (
    get_classification_engine,
    get_llm_client,
    get_repository,
)
from email_classifier.classification.engine import ClassificationEngine
from email_classifier.classification.remote import RemoteClassifier
from email_classifier.llm.openai_client import OpenAIClient
from email_classifier.llm.prompt_builder import PromptBuilder
from email_classifier.main import app
from email_classifier.persistence.repository import InMemoryClassificationRepository


@pytest.fixture
async def check_async_redis():
    """Check if Redis is available for async operations.
    
    Skips tests if Redis is not reachable.
    """
    try:
        client = AsyncRedis.from_url("redis://localhost:6379/15")
        await client.ping()
        await client.aclose()
    except Exception as e:
        pytest.skip(f"Redis not available: {e}")


@pytest.fixture
async def real_async_redis_client(check_async_redis):
    """Real AsyncRedis client on database 15 (test database), flushed around each test."""
    client = AsyncRedis.from_url("redis://localhost:6379/15", decode_responses=True)
    
    await client.flushdb()
    
    yield client
    
    await client.flushdb()
    await client.aclose()


@pytest.fixture
def repository() -> InMemoryClassificationRepository:
    """Fresh in-memory store per test."""
    return InMemoryClassificationRepository(history_limit=50)


@pytest.fixture
def chat_handler(chat_completion_payload):
    """Mutable holder for the MockTransport handler; defaults to a valid complaint reply."""
    state = {
        "handler": lambda request: httpx.Response(200, json=chat_completion_payload),
        "requests": [],
    }
    return state


@pytest.fixture
def api_client(repository, chat_handler, templates_dir) -> Callable[..., TestClient]:
    """Factory for a TestClient wired to the given API key.
    
    Usage:
        def test_something(api_client):
            client = api_client(api_key="sk-proj-test")
    """
    def _create(api_key: Optional[str] = None) -> TestClient:
        def transport_handler(request: httpx.Request) -> httpx.Response:
            chat_handler["requests"].append(request)
            return chat_handler["handler"](request)
        
        llm_client = OpenAIClient(
            api_key=api_key,
            base_url="https://api.test/v1",
            timeout=5,
            transport=httpx.MockTransport(transport_handler),
        )
        engine = ClassificationEngine(
            remote_classifier=RemoteClassifier(
                llm_client=llm_client,
                prompt_builder=PromptBuilder(templates_dir),
            ),
            api_key_provider=lambda: api_key,
        )
        
        app.dependency_overrides[get_classification_engine] = lambda: engine
        app.dependency_overrides[get_llm_client] = lambda: llm_client
        app.dependency_overrides[get_repository] = lambda: repository
        return TestClient(app)
    
    yield _create
    
    app.dependency_overrides.clear()
