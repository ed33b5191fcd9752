"""
OpenAI-compatible chat-completions client.

Communicates with the /chat/completions endpoint using httpx AsyncClient. Supports:
- JSON object response mode (response_format)
- Connection pooling via a lazily created persistent client
- Health checks via GET /models
"""

import time
from typing import Callable, Optional

import httpx
import structlog

from email_classifier.llm.base_client import BaseLLMClient
from email_classifier.llm.exceptions import (
    LLMAuthenticationError,
    LLMClientError,
    LLMConnectionError,
    LLMGenerationError,
    LLMRateLimitError,
    LLMTimeoutError,
)
from email_classifier.models.llm_models import LLMGenerationRequest, LLMGenerationResponse
from email_classifier.monitoring.metrics import llm_latency_seconds, llm_tokens_total


logger = structlog.get_logger(__name__)


class OpenAIClient(BaseLLMClient):
    """
    Chat-completions client using httpx for async HTTP communication.

    API Endpoints:
    - POST /chat/completions: Generate a completion
    - GET /models: List models (used as health check)

    Exactly one HTTP request is sent per generate() call.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        api_key_provider: Optional[Callable[[], Optional[str]]] = None,
        base_url: str = "https://api.openai.com/v1",
        timeout: int = 60,
        connection_limits: Optional[httpx.Limits] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        **kwargs
    ):
        """
        Initialize the client.

        Args:
            api_key: Static bearer credential; may be None when only the fallback classifier runs
            api_key_provider: Returns the current credential; read on every request and
                takes precedence over api_key
            base_url: API base URL
            timeout: Request timeout in seconds
            connection_limits: httpx connection pool limits (default: 10 max connections)
            transport: Optional httpx transport (tests pass httpx.MockTransport)
            **kwargs: Additional config
        """
        super().__init__(base_url, timeout, **kwargs)
        self._api_key = api_key
        self._api_key_provider = api_key_provider

        if connection_limits is None:
            connection_limits = httpx.Limits(
                max_keepalive_connections=5,
                max_connections=10,
                keepalive_expiry=30.0
            )

        self._client: Optional[httpx.AsyncClient] = None
        self._connection_limits = connection_limits
        self._transport = transport

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the async HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=httpx.Timeout(self.timeout),
                limits=self._connection_limits,
                transport=self._transport,
            )
            logger.debug("Created new httpx AsyncClient")
        return self._client

    def _current_api_key(self) -> Optional[str]:
        if self._api_key_provider is not None:
            return self._api_key_provider()
        return self._api_key

    @staticmethod
    def _auth_headers(api_key: str) -> dict:
        return {"Authorization": f"Bearer {api_key}"}

    def _build_payload(self, request: LLMGenerationRequest) -> dict:
        payload = {
            "model": request.model,
            "messages": [message.model_dump() for message in request.messages],
            "temperature": request.temperature,
        }
        if request.response_format is not None:
            payload["response_format"] = request.response_format
        if request.max_tokens is not None:
            payload["max_tokens"] = request.max_tokens
        return payload

    async def generate(self, request: LLMGenerationRequest) -> LLMGenerationResponse:
        """
        Generate a completion with POST /chat/completions.

        Payload:
        {
            "model": "gpt-4o",
            "messages": [{"role": "system", ...}, {"role": "user", ...}],
            "response_format": {"type": "json_object"},
            "temperature": 0.1
        }

        The returned content is passed back verbatim; a null message content
        becomes an empty string.
        """
        api_key = self._current_api_key()
        if not api_key:
            raise LLMAuthenticationError("API key not configured")

        start_time = time.time()
        payload = self._build_payload(request)

        logger.info(
            "Sending chat completion request",
            model=request.model,
            message_count=len(request.messages),
            temperature=request.temperature,
            response_format=request.response_format,
        )

        try:
            client = await self._get_client()
            response = await client.post(
                "/chat/completions", json=payload, headers=self._auth_headers(api_key)
            )
            response.raise_for_status()
            data = response.json()

            choices = data.get("choices") or []
            if not choices:
                raise LLMGenerationError(
                    "Response contained no choices",
                    details={"response": data}
                )

            choice = choices[0]
            content = (choice.get("message") or {}).get("content") or ""
            usage = data.get("usage") or {}
            model_version = data.get("model", request.model)
            latency_ms = int((time.time() - start_time) * 1000)

            logger.info(
                "Chat completion successful",
                model=model_version,
                latency_ms=latency_ms,
                prompt_tokens=usage.get("prompt_tokens"),
                completion_tokens=usage.get("completion_tokens"),
                finish_reason=choice.get("finish_reason"),
            )

            llm_latency_seconds.labels(
                model=model_version, success="true"
            ).observe(latency_ms / 1000.0)
            if usage.get("prompt_tokens"):
                llm_tokens_total.labels(
                    model=model_version, token_type="prompt"
                ).inc(usage["prompt_tokens"])
            if usage.get("completion_tokens"):
                llm_tokens_total.labels(
                    model=model_version, token_type="completion"
                ).inc(usage["completion_tokens"])

            return LLMGenerationResponse(
                content=content,
                model_version=model_version,
                finish_reason=choice.get("finish_reason"),
                prompt_tokens=usage.get("prompt_tokens"),
                completion_tokens=usage.get("completion_tokens"),
                usage_tokens=usage.get("total_tokens"),
                latency_ms=latency_ms,
            )

        except httpx.HTTPStatusError as e:
            self._observe_failure(request, start_time)
            status_code = e.response.status_code
            error_text = e.response.text

            logger.error(
                "Chat completion HTTP error",
                status_code=status_code,
                error_text=error_text[:500],
            )

            details = {"status": status_code, "error": error_text[:500]}
            if status_code in (401, 403):
                raise LLMAuthenticationError(
                    f"Authentication rejected: {status_code}", details=details
                ) from e
            if status_code == 429:
                raise LLMRateLimitError(
                    "Rate limit or quota exceeded", details=details
                ) from e
            raise LLMGenerationError(
                f"Chat completion error: {status_code}", details=details
            ) from e

        except httpx.TimeoutException as e:
            self._observe_failure(request, start_time)
            logger.warning("Chat completion timeout", timeout=self.timeout, error=str(e))
            raise LLMTimeoutError(
                f"Request timeout after {self.timeout}s",
                details={"timeout": self.timeout}
            ) from e

        except httpx.TransportError as e:
            self._observe_failure(request, start_time)
            logger.warning("Chat completion network error", error=str(e))
            raise LLMConnectionError(
                f"Network error: {str(e)}",
                details={"error_type": type(e).__name__}
            ) from e

        except LLMClientError:
            self._observe_failure(request, start_time)
            raise

        except Exception as e:
            self._observe_failure(request, start_time)
            logger.error(
                "Unexpected error in chat completion",
                error=str(e),
                error_type=type(e).__name__,
            )
            raise LLMGenerationError(
                f"Unexpected error: {str(e)}",
                details={"error_type": type(e).__name__}
            ) from e

    def _observe_failure(self, request: LLMGenerationRequest, start_time: float) -> None:
        llm_latency_seconds.labels(
            model=request.model, success="false"
        ).observe(time.time() - start_time)

    async def health_check(self) -> bool:
        """
        Check endpoint health via GET /models.

        Returns False without a network call when no key is configured.
        """
        api_key = self._current_api_key()
        if not api_key:
            return False
        try:
            client = await self._get_client()
            response = await client.get(
                "/models", timeout=5.0, headers=self._auth_headers(api_key)
            )
            response.raise_for_status()
            logger.debug("LLM health check passed")
            return True
        except Exception as e:
            logger.warning("LLM health check failed", error=str(e))
            return False

    async def close(self):
        """Close the HTTP client connection."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            logger.debug("Closed chat completions client connection")

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
