"""
Unit tests for the Email Classifier.

Test individual components in isolation:
- Mode selection and keyword fallback
- Normalization of model output
- Remote classifier and engine dispatch
- Prompt builder and chat-completions client
- Repositories
"""
