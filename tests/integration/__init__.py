"""
Integration tests for the Email Classifier.

Test components together:
- API endpoints through FastAPI TestClient (model provider mocked at the HTTP transport)
- Redis repository against a live Redis (skipped when unavailable)
"""
