"""
Classification engine.

Entry point used by the HTTP layer: consults the mode selector on every call
and dispatches to the keyword fallback or the remote classifier.
"""

from typing import Callable, Optional

import structlog

from email_classifier.classification.exceptions import ClassificationError
from email_classifier.classification.fallback import classify_fallback
from email_classifier.classification.mode import (
    DEFAULT_KEY_PLACEHOLDER,
    NON_PRODUCTION_KEY_MARKER,
    select_mode,
)
from email_classifier.classification.remote import RemoteClassifier
from email_classifier.models.enums import ClassifierMode
from email_classifier.models.output_models import ClassificationResult
from email_classifier.monitoring.metrics import (
    classification_failures_total,
    category_label,
    classifications_total,
)


logger = structlog.get_logger(__name__)


class ClassificationEngine:
    """
    Choose a classifier per call and return its result.
    
    Args:
        remote_classifier: Adapter used in REMOTE mode
        api_key_provider: Returns the currently configured API key; read on
            every call so a key change takes effect without a restart
        placeholder: Key value that means "not configured"
        non_production_marker: Substring that marks a non-production key
    """
    
    def __init__(
        self,
        remote_classifier: RemoteClassifier,
        api_key_provider: Callable[[], Optional[str]],
        placeholder: str = DEFAULT_KEY_PLACEHOLDER,
        non_production_marker: str = NON_PRODUCTION_KEY_MARKER,
    ):
        self.remote_classifier = remote_classifier
        self.api_key_provider = api_key_provider
        self.placeholder = placeholder
        self.non_production_marker = non_production_marker
    
    def current_mode(self) -> ClassifierMode:
        return select_mode(
            self.api_key_provider(),
            placeholder=self.placeholder,
            non_production_marker=self.non_production_marker,
        )
    
    async def classify(self, email_content: str) -> ClassificationResult:
        """
        Classify one email.
        
        Raises:
            ClassificationError: only in REMOTE mode, when the remote call fails
        """
        mode = self.current_mode()
        
        if mode is ClassifierMode.FALLBACK:
            result = classify_fallback(email_content)
        else:
            try:
                result = await self.remote_classifier.classify(email_content)
            except ClassificationError as e:
                classification_failures_total.labels(kind=e.kind.value).inc()
                raise
        
        classifications_total.labels(
            category=category_label(result.primary_category), mode=mode.value
        ).inc()
        logger.info(
            "Email classified",
            mode=mode.value,
            category=category_label(result.primary_category),
            email_length=len(email_content),
        )
        return result
