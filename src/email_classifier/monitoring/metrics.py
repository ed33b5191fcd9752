"""Custom Prometheus metrics for the Email Classifier.

Exposed at /metrics alongside the HTTP metrics from the instrumentator.
Alert rules worth configuring:
- classification_failures_total (remote model unavailable or misconfigured key)
- unknown_category_total (model answering outside the taxonomy)
"""

from prometheus_client import Counter, Histogram

from email_classifier.models.enums import CategoryEnum

KNOWN_CATEGORIES = frozenset(category.value for category in CategoryEnum)
UNKNOWN_CATEGORY_LABEL = "unknown"


def category_label(category: str) -> str:
    """Bounded label value: a taxonomy name, or "unknown" for anything else."""
    return category if category in KNOWN_CATEGORIES else UNKNOWN_CATEGORY_LABEL


# === Classification Metrics ===

classifications_total = Counter(
    "classifications_total",
    "Total classifications by primary category and classifier mode",
    ["category", "mode"],
)
"""
Labels:
- category: complaint, query, feedback, lead, or "unknown" for any other
  remote answer (see category_label)
- mode: fallback (keyword rules), remote (LLM)

A high fallback share in production means OPENAI_API_KEY is missing or a
non-production key was deployed.
"""

classification_failures_total = Counter(
    "classification_failures_total",
    "Total failed classifications by error kind",
    ["kind"],
)
"""
Labels:
- kind: credential (authentication rejected), upstream (network, quota, server)

Alert thresholds:
- CRITICAL: any credential failure
- WARN: upstream failure rate > 5% of remote classifications
"""

unknown_category_total = Counter(
    "unknown_category_total",
    "Remote classifications whose primary category is outside the taxonomy",
)

# === LLM Performance Metrics ===

llm_latency_seconds = Histogram(
    "llm_latency_seconds",
    "LLM generation latency in seconds",
    ["model", "success"],
    buckets=[0.25, 0.5, 1.0, 2.0, 5.0, 10.0, 30.0, 60.0],
)

llm_tokens_total = Counter(
    "llm_tokens_total",
    "Total tokens consumed by model and type",
    ["model", "token_type"],
)
"""
Labels:
- model: Model name
- token_type: prompt (input tokens), completion (output tokens)

Used for cost estimation.
"""
