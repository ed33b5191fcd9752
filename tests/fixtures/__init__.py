"""
Test fixtures for the Email Classifier.

Contains sample data for testing:
- sample_emails.json: One email per keyword branch plus a multi-keyword email
- chat_completion_response.json: /chat/completions body with a valid classification
"""
