"""
Keyword fallback classifier.

Deterministic, offline substitute for the remote model. The rules are an
ordered list evaluated top to bottom; the first rule with a matching keyword
decides the whole result. Scores are fixed illustrative values, not statistics.
"""

from dataclasses import dataclass

from email_classifier.models.enums import CategoryEnum
from email_classifier.models.output_models import ClassificationResult, ConfidenceScores


@dataclass(frozen=True)
class KeywordRule:
    """One branch of the fallback decision list."""
    
    category: CategoryEnum
    keywords: tuple[str, ...]
    scores: ConfidenceScores
    summary: tuple[str, ...]
    
    def matches(self, lowered_text: str) -> bool:
        return any(keyword in lowered_text for keyword in self.keywords)
    
    def to_result(self) -> ClassificationResult:
        return ClassificationResult(
            primary_category=self.category.value,
            confidence_scores=self.scores,
            analysis_summary=list(self.summary),
        )


# Priority order: complaint, lead, feedback
FALLBACK_RULES: tuple[KeywordRule, ...] = (
    KeywordRule(
        category=CategoryEnum.COMPLAINT,
        keywords=("disappointed", "problem", "issue", "refund", "damaged", "complaint"),
        scores=ConfidenceScores(complaint=85, query=10, feedback=3, lead=2),
        summary=(
            "Strong negative sentiment detected",
            "Keywords indicate dissatisfaction with product/service",
            "Request for resolution or refund identified",
            "Demo mode: Real AI would provide deeper analysis",
        ),
    ),
    KeywordRule(
        category=CategoryEnum.LEAD,
        keywords=("interested", "pricing", "purchase", "buy", "quote"),
        scores=ConfidenceScores(complaint=5, query=15, feedback=5, lead=75),
        summary=(
            "Sales interest indicators found",
            "Potential customer engagement detected",
            "Commercial inquiry patterns identified",
            "Demo mode: Real AI would analyze intent more accurately",
        ),
    ),
    KeywordRule(
        category=CategoryEnum.FEEDBACK,
        keywords=("suggest", "feedback", "recommend", "improve"),
        scores=ConfidenceScores(complaint=10, query=20, feedback=65, lead=5),
        summary=(
            "Constructive input patterns detected",
            "Suggestion or improvement focus identified",
            "Customer engagement with product experience",
            "Demo mode: Real AI would analyze sentiment nuances",
        ),
    ),
)

DEFAULT_RULE = KeywordRule(
    category=CategoryEnum.QUERY,
    keywords=(),
    scores=ConfidenceScores(complaint=25, query=50, feedback=15, lead=10),
    summary=(
        "Demo mode: Using keyword-based classification",
        "Real AI analysis requires valid OpenAI API key",
    ),
)


def match_rule(email_text: str) -> KeywordRule:
    """Return the first rule whose keywords occur in the text, else DEFAULT_RULE."""
    lowered = email_text.lower()
    for rule in FALLBACK_RULES:
        if rule.matches(lowered):
            return rule
    return DEFAULT_RULE


def classify_fallback(email_text: str) -> ClassificationResult:
    """
    Classify by case-insensitive keyword substring search.
    
    Never fails and never touches the network; identical input always
    produces an identical result.
    """
    return match_rule(email_text).to_result()
