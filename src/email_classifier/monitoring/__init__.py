"""Monitoring and metrics instrumentation for the Email Classifier.

Exports custom Prometheus metrics for operational monitoring and alerting.
"""

from email_classifier.monitoring.metrics import (
    KNOWN_CATEGORIES,
    UNKNOWN_CATEGORY_LABEL,
    category_label,
    classification_failures_total,
    classifications_total,
    llm_latency_seconds,
    llm_tokens_total,
    unknown_category_total,
)

__all__ = [
    "KNOWN_CATEGORIES",
    "UNKNOWN_CATEGORY_LABEL",
    "category_label",
    "classifications_total",
    "classification_failures_total",
    "unknown_category_total",
    "llm_latency_seconds",
    "llm_tokens_total",
]
