"""
Classification core.

- mode.py: picks the classifier from the configured API key
- fallback.py: ordered keyword rules (offline, deterministic)
- remote.py: chat-completions adapter
- normalization.py: lenient parsing and clamping of model output
- engine.py: per-call dispatch used by the API
"""

from email_classifier.classification.engine import ClassificationEngine
from email_classifier.classification.exceptions import (
    CLASSIFICATION_FAILED_MESSAGE,
    ClassificationError,
)
from email_classifier.classification.fallback import (
    DEFAULT_RULE,
    FALLBACK_RULES,
    KeywordRule,
    classify_fallback,
)
from email_classifier.classification.mode import select_mode
from email_classifier.classification.normalization import (
    DEFAULT_ANALYSIS_SUMMARY,
    normalize_classification,
    parse_model_content,
)
from email_classifier.classification.remote import RemoteClassifier

__all__ = [
    "ClassificationEngine",
    "ClassificationError",
    "CLASSIFICATION_FAILED_MESSAGE",
    "KeywordRule",
    "FALLBACK_RULES",
    "DEFAULT_RULE",
    "classify_fallback",
    "select_mode",
    "DEFAULT_ANALYSIS_SUMMARY",
    "parse_model_content",
    "normalize_classification",
    "RemoteClassifier",
]
