"""
Custom exceptions for the LLM client layer.

These exceptions let the remote classifier tell an authentication problem
apart from a transient upstream failure when it reports the error.
"""


class LLMClientError(Exception):
    """
    Base exception for all LLM client errors.
    
    All LLM-specific exceptions inherit from this to allow catching
    any LLM-related error with a single except clause.
    """
    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class LLMConnectionError(LLMClientError):
    """
    Raised when unable to reach the inference endpoint.
    
    Includes network errors, DNS failures, refused connections, etc.
    """
    pass


class LLMTimeoutError(LLMConnectionError):
    """
    Raised when the request exceeds the client timeout.
    """
    pass


class LLMAuthenticationError(LLMClientError):
    """
    Raised when the endpoint rejects the credential (HTTP 401/403),
    or when no credential is configured at all.
    """
    pass


class LLMRateLimitError(LLMClientError):
    """
    Raised when the endpoint rate-limits the request or the quota is exhausted (HTTP 429).
    """
    pass


class LLMGenerationError(LLMClientError):
    """
    Raised when the endpoint returns an error during generation.
    
    Examples:
    - Model not found
    - Invalid request parameters
    - Server error
    - Response body without choices
    """
    pass
