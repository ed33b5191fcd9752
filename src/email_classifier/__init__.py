"""
Email Classifier service.

Classifies customer emails into one of four categories:
- complaint
- query
- feedback
- lead

Each classification carries per-category confidence scores and a short
rationale. A remote chat-completions model is used when a production API key
is configured; otherwise a deterministic keyword classifier answers.

Architecture: FastAPI orchestrator + OpenAI-compatible inference + normalization
"""

__version__ = "0.1.0"
