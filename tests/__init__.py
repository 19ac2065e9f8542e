"""Test package for the document Q&A assistant.

Structure:
    - unit/: ingestion, gateway parsing, chat state and theme tests
    - integration/: HTTP API tests through the real FastAPI app

No test reaches the network: the model gateway is mocked or faked.
Uses pytest with pytest-check for soft assertions.
"""
