"""Unit test fixtures (mocks and stubs).

Provides mock objects for testing without external dependencies.
"""

from datetime import datetime, timedelta
from unittest.mock import AsyncMock, MagicMock

import pytest

from email_classifier.llm.prompt_builder import PromptBuilder
from email_classifier.models.llm_models import LLMGenerationResponse


class FakeClock:
    """Callable clock that tests can move forward."""
    
    def __init__(self, now: datetime):
        self.now = now
    
    def __call__(self) -> datetime:
        return self.now
    
    def advance(self, **kwargs) -> None:
        self.now = self.now + timedelta(**kwargs)


@pytest.fixture
def fake_clock() -> FakeClock:
    """Clock fixed at local noon today (timezone-aware)."""
    noon = datetime.now().astimezone().replace(hour=12, minute=0, second=0, microsecond=0)
    return FakeClock(noon)


@pytest.fixture
def make_llm_response():
    """Factory fixture for LLMGenerationResponse with custom content."""
    def _create(content: str) -> LLMGenerationResponse:
        return LLMGenerationResponse(
            content=content,
            model_version="gpt-4o-2024-08-06",
            finish_reason="stop",
            prompt_tokens=210,
            completion_tokens=64,
            usage_tokens=274,
            latency_ms=850,
        )
    
    return _create


@pytest.fixture
def mock_llm_client(make_llm_response):
    """Mock chat-completions client returning a valid complaint classification."""
    mock = AsyncMock()
    mock.generate = AsyncMock(return_value=make_llm_response(
        '{"primaryCategory": "complaint", '
        '"confidenceScores": {"complaint": 90, "query": 5, "feedback": 3, "lead": 2}, '
        '"analysisSummary": ["Negative tone", "Refund requested"]}'
    ))
    mock.health_check = AsyncMock(return_value=True)
    return mock


@pytest.fixture
def prompt_builder(templates_dir) -> PromptBuilder:
    """Real prompt builder over the packaged templates."""
    return PromptBuilder(templates_dir=templates_dir)


@pytest.fixture
def mock_async_redis():
    """Mock AsyncRedis client for unit tests."""
    mock = AsyncMock()
    mock.setex = AsyncMock(return_value=True)
    mock.zadd = AsyncMock(return_value=1)
    mock.zremrangebyscore = AsyncMock(return_value=0)
    mock.zrevrange = AsyncMock(return_value=[])
    mock.zrangebyscore = AsyncMock(return_value=[])
    mock.mget = AsyncMock(return_value=[])
    mock.ping = AsyncMock(return_value=True)
    
    # Transactional pipeline: commands are queued synchronously, execute() is awaited
    pipe = MagicMock()
    pipe.setex.return_value = pipe
    pipe.zadd.return_value = pipe
    pipe.zremrangebyscore.return_value = pipe
    pipe.execute = AsyncMock(return_value=[True, 1, 0])
    pipe.__aenter__.return_value = pipe
    pipe.__aexit__.return_value = False
    mock.pipeline = MagicMock(return_value=pipe)
    return mock
