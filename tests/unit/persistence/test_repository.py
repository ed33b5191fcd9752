"""
Unit tests for the in-memory repository and shared record helpers.
"""

from datetime import datetime, timezone

import pytest

from email_classifier.models.output_models import ClassificationResult, ConfidenceScores
from email_classifier.persistence.repository import (
    InMemoryClassificationRepository,
    RedisClassificationRepository,
    build_record,
    count_by_category,
    create_repository,
    start_of_local_day,
)


def make_result(category: str, summary=None) -> ClassificationResult:
    return ClassificationResult(
        primary_category=category,
        confidence_scores=ConfidenceScores(complaint=10, query=20, feedback=30, lead=40),
        analysis_summary=summary if summary is not None else ["First insight", "Second insight"],
    )


@pytest.fixture
def repository(fake_clock) -> InMemoryClassificationRepository:
    return InMemoryClassificationRepository(history_limit=50, clock=fake_clock)


def test_build_record_joins_summary():
    created_at = datetime(2025, 3, 14, 9, 30, tzinfo=timezone.utc)
    record = build_record("Where is my parcel?", make_result("query"), created_at)
    
    assert record.analysis_summary == "First insight; Second insight"
    assert record.email_content == "Where is my parcel?"
    assert record.primary_category == "query"
    assert record.confidence_scores.lead == 40
    assert record.created_at == created_at
    assert len(record.id) == 36


def test_build_record_ids_are_unique():
    created_at = datetime(2025, 3, 14, tzinfo=timezone.utc)
    ids = {build_record("text", make_result("lead"), created_at).id for _ in range(20)}
    assert len(ids) == 20


def test_build_record_with_empty_summary():
    created_at = datetime(2025, 3, 14, tzinfo=timezone.utc)
    record = build_record("text", make_result("lead", summary=[]), created_at)
    assert record.analysis_summary == ""


def test_start_of_local_day():
    now = datetime(2025, 3, 14, 15, 45, 12, 999, tzinfo=timezone.utc)
    midnight = start_of_local_day(now)
    
    local_now = now.astimezone()
    assert midnight.tzinfo is not None
    assert midnight.date() == local_now.date()
    assert (midnight.hour, midnight.minute, midnight.second, midnight.microsecond) == (0, 0, 0, 0)
    assert midnight <= now


def test_count_by_category_ignores_unknown_for_buckets():
    created_at = datetime(2025, 3, 14, tzinfo=timezone.utc)
    records = [
        build_record("a", make_result("complaint"), created_at),
        build_record("b", make_result("complaint"), created_at),
        build_record("c", make_result("lead"), created_at),
        build_record("d", make_result("spam"), created_at),
    ]
    
    stats = count_by_category(records)
    
    assert stats.complaints == 2
    assert stats.leads == 1
    assert stats.queries == 0
    assert stats.feedback == 0
    assert stats.total == 4


@pytest.mark.asyncio
async def test_save_returns_stored_record(repository, fake_clock):
    record = await repository.save("The box arrived damaged.", make_result("complaint"))
    
    assert record.created_at == fake_clock.now
    history = await repository.get_history()
    assert history == [record]


@pytest.mark.asyncio
async def test_empty_repository(repository):
    stats = await repository.get_stats()
    
    assert await repository.get_history() == []
    assert stats.model_dump() == {
        "complaints": 0,
        "queries": 0,
        "feedback": 0,
        "leads": 0,
        "total": 0,
    }


@pytest.mark.asyncio
async def test_stats_count_today_only(repository, fake_clock):
    fake_clock.advance(days=-1)
    await repository.save("Old complaint about a refund", make_result("complaint"))
    fake_clock.advance(days=1)
    
    await repository.save("I want to buy ten units", make_result("lead"))
    await repository.save("Where can I find the manual?", make_result("query"))
    await repository.save("Another question about sizes", make_result("query"))
    
    stats = await repository.get_stats()
    
    assert stats.complaints == 0
    assert stats.leads == 1
    assert stats.queries == 2
    assert stats.feedback == 0
    assert stats.total == 3
    # Yesterday's record still shows in history
    assert len(await repository.get_history()) == 4


@pytest.mark.asyncio
async def test_history_newest_first(repository, fake_clock):
    first = await repository.save("first email text", make_result("query"))
    fake_clock.advance(seconds=5)
    second = await repository.save("second email text", make_result("lead"))
    fake_clock.advance(seconds=5)
    third = await repository.save("third email text", make_result("feedback"))
    
    history = await repository.get_history()
    
    assert [record.id for record in history] == [third.id, second.id, first.id]


@pytest.mark.asyncio
async def test_history_is_limited(fake_clock):
    repository = InMemoryClassificationRepository(history_limit=3, clock=fake_clock)
    saved = []
    for index in range(5):
        saved.append(await repository.save(f"email number {index}", make_result("query")))
        fake_clock.advance(minutes=1)
    
    history = await repository.get_history()
    
    assert [record.id for record in history] == [record.id for record in reversed(saved[2:])]


@pytest.mark.asyncio
async def test_default_history_limit_is_fifty(fake_clock):
    repository = InMemoryClassificationRepository(clock=fake_clock)
    for index in range(55):
        await repository.save(f"email number {index}", make_result("query"))
        fake_clock.advance(seconds=1)
    
    history = await repository.get_history()
    
    assert len(history) == 50
    assert history[0].email_content == "email number 54"
    assert (await repository.get_stats()).total == 55


@pytest.mark.asyncio
async def test_in_memory_ping(repository):
    assert await repository.ping() is True


def test_create_repository_memory():
    repository = create_repository("memory", history_limit=10)
    
    assert isinstance(repository, InMemoryClassificationRepository)
    assert repository.history_limit == 10


def test_create_repository_is_case_insensitive():
    assert isinstance(create_repository("Memory"), InMemoryClassificationRepository)


def test_create_repository_redis(mock_async_redis):
    repository = create_repository("redis", redis_client=mock_async_redis, ttl_seconds=60)
    
    assert isinstance(repository, RedisClassificationRepository)
    assert repository.redis is mock_async_redis
    assert repository.ttl_seconds == 60


def test_create_repository_redis_without_client():
    with pytest.raises(ValueError, match="requires a redis client"):
        create_repository("redis")


def test_create_repository_unknown_backend():
    with pytest.raises(ValueError, match="Unknown storage backend"):
        create_repository("postgres")
