"""FastAPI endpoints for document Q&A.

Endpoints:
    - GET /health: Service health status
    - POST /documents/extract: Text extraction from an uploaded file
    - POST /qa/ask: Answer a question from supplied document context
"""
