"""
Remote classifier adapter.

Builds the classification prompt, makes exactly one chat-completions call,
then parses and normalizes the reply. Any failure of the call itself is
reported as a single ClassificationError; a malformed reply is not a failure.
"""

import structlog

from email_classifier.classification.exceptions import ClassificationError
from email_classifier.classification.normalization import (
    normalize_classification,
    parse_model_content,
)
from email_classifier.llm.base_client import BaseLLMClient
from email_classifier.llm.exceptions import LLMAuthenticationError
from email_classifier.llm.prompt_builder import PromptBuilder
from email_classifier.models.enums import ErrorKind
from email_classifier.models.output_models import ClassificationResult
from email_classifier.monitoring.metrics import (
    KNOWN_CATEGORIES,
    category_label,
    unknown_category_total,
)


logger = structlog.get_logger(__name__)

LOGGED_CATEGORY_MAX_LENGTH = 64


class RemoteClassifier:
    """
    Classify emails with a remote chat-completions model.
    
    Holds no per-request state; one instance serves concurrent requests.
    """
    
    def __init__(self, llm_client: BaseLLMClient, prompt_builder: PromptBuilder):
        self.llm_client = llm_client
        self.prompt_builder = prompt_builder
    
    async def classify(self, email_content: str) -> ClassificationResult:
        """
        Classify one email.
        
        Raises:
            ClassificationError: the remote call failed (kind=CREDENTIAL when
                the key was missing or rejected, UPSTREAM otherwise)
        """
        request = self.prompt_builder.build_request(email_content)
        
        try:
            response = await self.llm_client.generate(request)
        except LLMAuthenticationError as e:
            logger.error("Remote classification rejected credential", error=str(e))
            raise ClassificationError(kind=ErrorKind.CREDENTIAL) from e
        except Exception as e:
            logger.error(
                "Remote classification failed",
                error=str(e),
                error_type=type(e).__name__,
            )
            raise ClassificationError(kind=ErrorKind.UPSTREAM) from e
        
        result = normalize_classification(parse_model_content(response.content))
        
        if result.primary_category not in KNOWN_CATEGORIES:
            unknown_category_total.inc()
            logger.warning(
                "Model answered with a category outside the taxonomy",
                category=result.primary_category[:LOGGED_CATEGORY_MAX_LENGTH],
            )
        
        logger.info(
            "Remote classification completed",
            category=category_label(result.primary_category),
            model=response.model_version,
            latency_ms=response.latency_ms,
        )
        return result
