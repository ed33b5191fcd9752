"""
Repository pattern for classification records.

Two backends share one async interface:
- InMemoryClassificationRepository: dict in process memory (default, demo)
- RedisClassificationRepository: Redis, for deployments with several workers

Redis storage strategy:
- Records: String per record, key = "classification:record:{id}", JSON with TTL
- Index by timestamp: Sorted set "classification:index" (score = created_at epoch)
- Writes: record, index entry and index pruning go through one MULTI/EXEC pipeline
"""

import uuid
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Callable, Iterable, Optional

import structlog
from redis.asyncio import Redis as AsyncRedis

from email_classifier.models.enums import CategoryEnum
from email_classifier.models.output_models import (
    ClassificationResult,
    ClassificationStats,
    EmailClassification,
)

logger = structlog.get_logger(__name__)

SUMMARY_SEPARATOR = "; "

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def start_of_local_day(now: datetime) -> datetime:
    """Midnight of the server's local day containing `now` (timezone-aware)."""
    local = now.astimezone()
    return local.replace(hour=0, minute=0, second=0, microsecond=0)


def build_record(
    email_content: str,
    result: ClassificationResult,
    created_at: datetime,
) -> EmailClassification:
    """Wrap a result with a fresh id and timestamp."""
    return EmailClassification(
        id=str(uuid.uuid4()),
        email_content=email_content,
        primary_category=result.primary_category,
        confidence_scores=result.confidence_scores,
        analysis_summary=SUMMARY_SEPARATOR.join(str(item) for item in result.analysis_summary),
        created_at=created_at,
    )


def count_by_category(records: Iterable[EmailClassification]) -> ClassificationStats:
    """
    Tally records per category.
    
    Records with a category outside the taxonomy count toward total only.
    """
    counts = {category.value: 0 for category in CategoryEnum}
    total = 0
    for record in records:
        total += 1
        if record.primary_category in counts:
            counts[record.primary_category] += 1
    
    return ClassificationStats(
        complaints=counts[CategoryEnum.COMPLAINT.value],
        queries=counts[CategoryEnum.QUERY.value],
        feedback=counts[CategoryEnum.FEEDBACK.value],
        leads=counts[CategoryEnum.LEAD.value],
        total=total,
    )


class ClassificationRepository(ABC):
    """Storage for classification records."""
    
    def __init__(self, history_limit: int = 50, clock: Clock = utc_now):
        self.history_limit = history_limit
        self.clock = clock
    
    @abstractmethod
    async def save(self, email_content: str, result: ClassificationResult) -> EmailClassification:
        """Persist a classification and return the stored record."""
    
    @abstractmethod
    async def get_stats(self) -> ClassificationStats:
        """Counts of records created since local midnight."""
    
    @abstractmethod
    async def get_history(self) -> list[EmailClassification]:
        """Most recent records, newest first, at most history_limit."""
    
    async def ping(self) -> bool:
        return True


class InMemoryClassificationRepository(ClassificationRepository):
    """
    Process-local repository. Contents are lost on restart.
    """
    
    def __init__(self, history_limit: int = 50, clock: Clock = utc_now):
        super().__init__(history_limit, clock)
        self._records: dict[str, EmailClassification] = {}
    
    async def save(self, email_content: str, result: ClassificationResult) -> EmailClassification:
        record = build_record(email_content, result, self.clock())
        self._records[record.id] = record
        logger.info(
            "Saved classification",
            record_id=record.id,
            category=record.primary_category,
        )
        return record
    
    async def get_stats(self) -> ClassificationStats:
        since = start_of_local_day(self.clock())
        return count_by_category(
            record for record in self._records.values() if record.created_at >= since
        )
    
    async def get_history(self) -> list[EmailClassification]:
        records = sorted(
            self._records.values(),
            key=lambda record: record.created_at,
            reverse=True,
        )
        return records[: self.history_limit]


class RedisClassificationRepository(ClassificationRepository):
    """
    Redis-backed repository with per-record TTL.
    """
    
    RECORD_PREFIX = "classification:record:"
    INDEX_KEY = "classification:index"
    
    def __init__(
        self,
        redis_client: AsyncRedis,
        ttl_seconds: int = 604800,
        history_limit: int = 50,
        clock: Clock = utc_now,
    ):
        """
        Initialize repository.
        
        Args:
            redis_client: Async Redis client (decode_responses=True)
            ttl_seconds: How long records are kept
            history_limit: Maximum records returned by get_history
            clock: Source of "now" (tests pass a fixed clock)
        """
        super().__init__(history_limit, clock)
        self.redis = redis_client
        self.ttl_seconds = ttl_seconds
    
    def _record_key(self, record_id: str) -> str:
        return f"{self.RECORD_PREFIX}{record_id}"
    
    async def save(self, email_content: str, result: ClassificationResult) -> EmailClassification:
        record = build_record(email_content, result, self.clock())
        timestamp = record.created_at.timestamp()
        
        # Record and index entry are written together or not at all
        async with self.redis.pipeline(transaction=True) as pipe:
            pipe.setex(
                name=self._record_key(record.id),
                time=self.ttl_seconds,
                value=record.model_dump_json(),
            )
            pipe.zadd(self.INDEX_KEY, {record.id: timestamp})
            pipe.zremrangebyscore(self.INDEX_KEY, "-inf", timestamp - self.ttl_seconds)
            await pipe.execute()
        
        logger.info(
            "Saved classification",
            record_id=record.id,
            category=record.primary_category,
            ttl=self.ttl_seconds,
        )
        return record
    
    async def _load(self, record_ids: list[str]) -> list[EmailClassification]:
        if not record_ids:
            return []
        payloads = await self.redis.mget([self._record_key(record_id) for record_id in record_ids])
        return [
            EmailClassification.model_validate_json(payload)
            for payload in payloads
            if payload is not None
        ]
    
    async def get_stats(self) -> ClassificationStats:
        since = start_of_local_day(self.clock()).timestamp()
        record_ids = await self.redis.zrangebyscore(self.INDEX_KEY, since, "+inf")
        return count_by_category(await self._load(record_ids))
    
    async def _prune_expired(self) -> None:
        """Drop index entries whose records have outlived the TTL."""
        cutoff = self.clock().timestamp() - self.ttl_seconds
        await self.redis.zremrangebyscore(self.INDEX_KEY, "-inf", cutoff)
    
    async def get_history(self) -> list[EmailClassification]:
        await self._prune_expired()
        record_ids = await self.redis.zrevrange(self.INDEX_KEY, 0, self.history_limit - 1)
        return await self._load(record_ids)
    
    async def ping(self) -> bool:
        try:
            return bool(await self.redis.ping())
        except Exception as e:
            logger.warning("Redis ping failed", error=str(e))
            return False


def create_repository(
    backend: str,
    redis_client: Optional[AsyncRedis] = None,
    ttl_seconds: int = 604800,
    history_limit: int = 50,
) -> ClassificationRepository:
    """
    Build the repository for a STORAGE_BACKEND value ("memory" or "redis").
    
    Raises:
        ValueError: unknown backend, or "redis" without a client
    """
    backend = backend.lower()
    if backend == "memory":
        return InMemoryClassificationRepository(history_limit=history_limit)
    if backend == "redis":
        if redis_client is None:
            raise ValueError("Redis backend requires a redis client")
        return RedisClassificationRepository(
            redis_client, ttl_seconds=ttl_seconds, history_limit=history_limit
        )
    raise ValueError(f"Unknown storage backend: {backend}")
