"""
Persistence layer.

- redis_client.py: async Redis connection pooling
- repository.py: classification record storage (in-memory or Redis)
"""

from email_classifier.persistence.redis_client import RedisClient
from email_classifier.persistence.repository import (
    ClassificationRepository,
    InMemoryClassificationRepository,
    RedisClassificationRepository,
    create_repository,
)

__all__ = [
    "RedisClient",
    "ClassificationRepository",
    "InMemoryClassificationRepository",
    "RedisClassificationRepository",
    "create_repository",
]
