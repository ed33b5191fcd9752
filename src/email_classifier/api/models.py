"""
API-specific response models.

Domain payloads (ClassificationResult, ClassificationStats,
EmailClassification) are returned directly; these models cover the rest.
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response for health check endpoint."""
    
    status: str = Field(
        description="Overall health status",
        examples=["healthy", "degraded", "unhealthy"]
    )
    version: str = Field(
        description="Service version",
        examples=["0.1.0"]
    )
    classifier_mode: str = Field(
        description="Classifier currently answering requests",
        examples=["fallback", "remote"]
    )
    services: dict[str, str] = Field(
        description="Dependency-specific health status",
        examples=[{"llm": "ok", "storage": "ok"}]
    )
    timestamp: datetime = Field(
        default_factory=datetime.utcnow,
        description="Health check timestamp (UTC)"
    )


class ErrorResponse(BaseModel):
    """Error body returned by every failing endpoint."""
    
    message: str = Field(
        description="Human-readable error message"
    )
    errors: Optional[list[dict[str, Any]]] = Field(
        default=None,
        description="Field-level validation errors (400 responses only)"
    )
