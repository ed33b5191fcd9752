"""
Classifier mode selection.

Decides from the configured API key whether the remote model or the
keyword classifier answers.
"""

from typing import Optional

from email_classifier.models.enums import ClassifierMode


DEFAULT_KEY_PLACEHOLDER = "default_key"
NON_PRODUCTION_KEY_MARKER = "sk-or-v1"


def select_mode(
    api_key: Optional[str],
    placeholder: str = DEFAULT_KEY_PLACEHOLDER,
    non_production_marker: str = NON_PRODUCTION_KEY_MARKER,
) -> ClassifierMode:
    """
    Pick the classifier for a configured credential.
    
    Returns FALLBACK when the key is missing or empty, equals the placeholder,
    or contains the non-production marker. Any other key selects REMOTE.
    
    Examples:
        >>> select_mode(None)
        <ClassifierMode.FALLBACK: 'fallback'>
        >>> select_mode("sk-or-v1-abc")
        <ClassifierMode.FALLBACK: 'fallback'>
        >>> select_mode("sk-proj-abc")
        <ClassifierMode.REMOTE: 'remote'>
    """
    if not api_key or api_key == placeholder:
        return ClassifierMode.FALLBACK
    if non_production_marker and non_production_marker in api_key:
        return ClassifierMode.FALLBACK
    return ClassifierMode.REMOTE
