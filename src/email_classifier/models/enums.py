"""
Enumerations for Email Classifier data models.
"""

from enum import Enum


class CategoryEnum(str, Enum):
    """
    Closed taxonomy of email categories.
    
    Single-label classification: each email has exactly one primary category.
    """
    
    COMPLAINT = "complaint"
    QUERY = "query"
    FEEDBACK = "feedback"
    LEAD = "lead"


# Definitions sent to the model, in prompt order
CATEGORY_DEFINITIONS: dict[CategoryEnum, str] = {
    CategoryEnum.COMPLAINT: "Customer expressing dissatisfaction, issues, or problems with products/services",
    CategoryEnum.QUERY: "Customer seeking information, support, or clarification about products/services",
    CategoryEnum.FEEDBACK: "Customer providing suggestions, reviews, or constructive input about experiences",
    CategoryEnum.LEAD: "Potential customer showing interest in products/services or sales opportunities",
}


class ClassifierMode(str, Enum):
    """Which classifier answers a request."""
    
    FALLBACK = "fallback"
    REMOTE = "remote"


class ErrorKind(str, Enum):
    """
    Failure kind carried by ClassificationError.
    
    Lets the HTTP layer pick a status code without inspecting message text.
    """
    
    CREDENTIAL = "credential"
    UPSTREAM = "upstream"
