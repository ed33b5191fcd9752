"""
Classification exceptions.

ClassificationError is the only error the classification engine raises.
It keeps the human-readable message the web client has always shown and
adds an explicit kind so the HTTP layer does not have to sniff message text.
"""

from email_classifier.models.enums import ErrorKind


CLASSIFICATION_FAILED_MESSAGE = (
    "Failed to classify email. Please check your OpenAI API key and try again."
)


class ClassificationError(Exception):
    """
    Raised when the remote classifier call fails.
    
    Attributes:
        message: Human-readable description
        kind: ErrorKind.CREDENTIAL when the credential was missing or rejected,
            ErrorKind.UPSTREAM for every other remote failure
    """
    
    def __init__(
        self,
        message: str = CLASSIFICATION_FAILED_MESSAGE,
        kind: ErrorKind = ErrorKind.UPSTREAM,
    ):
        super().__init__(message)
        self.message = message
        self.kind = kind
    
    @property
    def is_credential_error(self) -> bool:
        return self.kind is ErrorKind.CREDENTIAL
