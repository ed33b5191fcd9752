"""
Pydantic data models for the Email Classifier.

Includes:
- Enums (CategoryEnum, ClassifierMode, ErrorKind)
- Input models (ClassificationRequest)
- Output models (ConfidenceScores, ClassificationResult, EmailClassification, ClassificationStats)
- LLM models (ChatMessage, LLMGenerationRequest, LLMGenerationResponse)
"""

from email_classifier.models.enums import (
    CATEGORY_DEFINITIONS,
    CategoryEnum,
    ClassifierMode,
    ErrorKind,
)
from email_classifier.models.input_models import ClassificationRequest
from email_classifier.models.output_models import (
    ConfidenceScores,
    ClassificationResult,
    EmailClassification,
    ClassificationStats,
)
from email_classifier.models.llm_models import (
    ChatMessage,
    LLMGenerationRequest,
    LLMGenerationResponse,
)

__all__ = [
    # Enums
    "CATEGORY_DEFINITIONS",
    "CategoryEnum",
    "ClassifierMode",
    "ErrorKind",
    # Input models
    "ClassificationRequest",
    # Output models
    "ConfidenceScores",
    "ClassificationResult",
    "EmailClassification",
    "ClassificationStats",
    # LLM models
    "ChatMessage",
    "LLMGenerationRequest",
    "LLMGenerationResponse",
]
