"""Document Q&A - ask questions answered strictly from a supplied document.

Combines NiceGUI for the browser interface, FastAPI for the JSON API,
Agno for the model call, pypdf for PDF text, and Pydantic for data
validation.

Components:
    - parsing: file validation and text extraction
    - chat: document and conversation state
    - agent: prompt construction and structured answer parsing
    - api: HTTP endpoints
    - ui: NiceGUI page and theme preference
    - models: shared schemas
"""

__version__ = "0.1.0"
