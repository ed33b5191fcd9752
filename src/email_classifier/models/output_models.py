"""
Output data models for the Email Classifier.

All models serialize in camelCase (primaryCategory, confidenceScores, ...)
so the JSON shape matches what the web client consumes.
"""

from datetime import datetime
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from email_classifier.models.enums import CategoryEnum


Score = Union[int, float]


class ConfidenceScores(BaseModel):
    """
    Per-category confidence, each in [0, 100].
    
    Scores are independent; nothing requires them to sum to 100.
    """
    
    model_config = ConfigDict(frozen=True)
    
    complaint: Score = 0
    query: Score = 0
    feedback: Score = 0
    lead: Score = 0
    
    def as_dict(self) -> dict[str, Score]:
        return {category.value: getattr(self, category.value) for category in CategoryEnum}


class ClassificationResult(BaseModel):
    """
    Canonical classification output.
    
    Produced once per classification call and never mutated. The storage
    layer wraps it in an EmailClassification with its own id and timestamp.
    """
    
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )
    
    primary_category: str = Field(
        ...,
        description="Lower-case category name (complaint, query, feedback, lead)",
    )
    confidence_scores: ConfidenceScores = Field(
        ...,
        description="Confidence per category, each clamped to [0, 100]",
    )
    analysis_summary: list[Any] = Field(
        ...,
        description="Short explanations in the order they were produced",
    )


class EmailClassification(BaseModel):
    """Stored classification record."""
    
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )
    
    id: str = Field(..., description="Record identifier (UUID4)")
    email_content: str
    primary_category: str
    confidence_scores: ConfidenceScores
    analysis_summary: Optional[str] = Field(
        default=None,
        description="Summary items joined with '; '",
    )
    created_at: datetime


class ClassificationStats(BaseModel):
    """Counts of classifications created today, by category."""
    
    complaints: int = 0
    queries: int = 0
    feedback: int = 0
    leads: int = 0
    total: int = 0
