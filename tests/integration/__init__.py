"""Integration tests for the FastAPI app with the model gateway faked."""
