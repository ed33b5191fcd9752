"""
Parsing and normalization of untrusted model output.

Two steps, both lenient:
1. parse_model_content: raw text -> dict. Anything that is not a JSON object
   (empty text, malformed JSON, arrays, scalars) becomes {}.
2. normalize_classification: dict -> ClassificationResult, clamping scores into
   [0, 100] and filling defaults for missing or mistyped fields.

Neither step raises; a malformed reply degrades to the defaults instead of
failing the request.
"""

import json
import math
from typing import Any

import structlog

from email_classifier.models.enums import CategoryEnum
from email_classifier.models.output_models import ClassificationResult, ConfidenceScores, Score


logger = structlog.get_logger(__name__)

DEFAULT_CATEGORY = CategoryEnum.QUERY.value

DEFAULT_ANALYSIS_SUMMARY: tuple[str, ...] = (
    "Email analysis completed",
    "Classification based on content analysis",
)

MIN_SCORE = 0
MAX_SCORE = 100


def parse_model_content(content: str | None) -> dict:
    """
    Parse the model reply into a dict, or {} when it isn't a JSON object.
    
    Examples:
        >>> parse_model_content('{"primaryCategory": "lead"}')
        {'primaryCategory': 'lead'}
        >>> parse_model_content("not json")
        {}
    """
    if not content or not content.strip():
        logger.warning("Model returned empty content")
        return {}
    
    try:
        parsed = json.loads(content)
    except json.JSONDecodeError as e:
        logger.warning(
            "Model returned malformed JSON",
            parse_error=f"{e.msg} at line {e.lineno} col {e.colno}",
            content_snippet=content[:500],
        )
        return {}
    
    if not isinstance(parsed, dict):
        logger.warning(
            "Model returned JSON that is not an object",
            json_type=type(parsed).__name__,
        )
        return {}
    
    return parsed


def clamp_score(value: Any) -> Score:
    """
    Clamp a raw score into [0, 100].
    
    Missing, boolean, non-numeric and NaN values count as 0. Numeric strings
    are converted. Integers stay integers.
    """
    if value is None or isinstance(value, bool):
        return MIN_SCORE
    if not isinstance(value, (int, float)):
        try:
            value = float(value)
        except (TypeError, ValueError):
            return MIN_SCORE
    if isinstance(value, float) and math.isnan(value):
        return MIN_SCORE
    return max(MIN_SCORE, min(MAX_SCORE, value))


def normalize_scores(raw_scores: Any) -> ConfidenceScores:
    if not isinstance(raw_scores, dict):
        raw_scores = {}
    return ConfidenceScores(**{
        category.value: clamp_score(raw_scores.get(category.value))
        for category in CategoryEnum
    })


def normalize_category(raw_category: Any) -> str:
    """
    Lower-case the reported category, defaulting to "query".
    
    Names outside the taxonomy are passed through as-is.
    """
    if not isinstance(raw_category, str) or not raw_category:
        return DEFAULT_CATEGORY
    return raw_category.lower()


def normalize_summary(raw_summary: Any) -> list:
    if isinstance(raw_summary, list):
        return raw_summary
    return list(DEFAULT_ANALYSIS_SUMMARY)


def normalize_classification(parsed: dict) -> ClassificationResult:
    """Build the canonical result from a parsed (possibly empty) reply."""
    return ClassificationResult(
        primary_category=normalize_category(parsed.get("primaryCategory")),
        confidence_scores=normalize_scores(parsed.get("confidenceScores")),
        analysis_summary=normalize_summary(parsed.get("analysisSummary")),
    )
