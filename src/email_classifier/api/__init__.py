"""
FastAPI API routes and endpoints.

- routes.py: classify, stats, history and health endpoints
- dependencies.py: Dependency injection for engine, client, repository
- models.py: API-specific response models
- error_handlers.py: Exception handlers for structured error responses
- middleware.py: Request id tracing
"""

from email_classifier.api import dependencies, error_handlers, models
from email_classifier.api.routes import router

__all__ = [
    "router",
    "dependencies",
    "error_handlers",
    "models",
]
