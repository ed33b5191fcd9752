"""
Input data models for the Email Classifier.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from email_classifier.config import settings


class ClassificationRequest(BaseModel):
    """Body of POST /api/classify."""
    
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )
    
    email_content: str = Field(..., description="Raw email text to classify")
    
    @field_validator("email_content")
    @classmethod
    def check_min_length(cls, value: str) -> str:
        if len(value) < settings.MIN_EMAIL_LENGTH:
            raise ValueError(
                f"Email content must be at least {settings.MIN_EMAIL_LENGTH} characters long"
            )
        return value
