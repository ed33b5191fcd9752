"""
Abstract base client for LLM inference.

Defines the interface that LLM client implementations must adhere to, so the
remote classifier can be exercised with any backend (or a test double).
"""

from abc import ABC, abstractmethod

import structlog

from email_classifier.models.llm_models import LLMGenerationRequest, LLMGenerationResponse


logger = structlog.get_logger(__name__)


class BaseLLMClient(ABC):
    """
    Abstract base class for LLM inference clients.
    
    Responsibilities:
    - Send generation requests to the inference endpoint
    - Parse responses into LLMGenerationResponse
    - Translate transport failures into LLMClientError subclasses
    
    Does NOT handle:
    - Prompt construction (that's PromptBuilder's job)
    - Parsing or normalizing the generated JSON (that's RemoteClassifier's job)
    - Retries (there are none; callers wrap the call if they need them)
    """
    
    def __init__(self, base_url: str, timeout: int = 60, **kwargs):
        """
        Initialize base client.
        
        Args:
            base_url: Base URL of the inference endpoint (e.g., https://api.openai.com/v1)
            timeout: Request timeout in seconds
            **kwargs: Additional provider-specific config
        """
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.extra_config = kwargs
        
        logger.info(
            "Initialized LLM client",
            client_class=self.__class__.__name__,
            base_url=self.base_url,
            timeout=timeout,
        )
    
    @abstractmethod
    async def generate(self, request: LLMGenerationRequest) -> LLMGenerationResponse:
        """
        Generate a completion.
        
        Args:
            request: Standardized generation request
            
        Returns:
            LLMGenerationResponse with generated text and metadata
            
        Raises:
            LLMAuthenticationError: Credential missing or rejected
            LLMRateLimitError: Rate limit or quota exceeded
            LLMConnectionError: Network errors
            LLMTimeoutError: Request exceeded timeout
            LLMGenerationError: Server-side or malformed-response errors
        """
        pass
    
    @abstractmethod
    async def health_check(self) -> bool:
        """
        Check whether the endpoint is reachable with the configured credential.
        
        Returns:
            True if healthy, False otherwise. Never raises.
        """
        pass
    
    async def close(self):
        """
        Close client connections. Default implementation does nothing.
        """
        logger.debug("Closing LLM client", client_class=self.__class__.__name__)
    
    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"base_url={self.base_url}, "
            f"timeout={self.timeout}s)"
        )
