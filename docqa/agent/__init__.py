"""Agno agent logic for context-grounded question answering.

Responsibilities:
    - Agent initialization with OpenAI-compatible models
    - Prompt construction from document context and question
    - JSON answer parsing with plain-text fallback
    - Wrapping provider failures into QAError

Keeps no conversation memory: every question is answered from the
document alone.
"""

from docqa.agent.config import AgentConfig, get_agent_config
from docqa.agent.qa_agent import (
    InvalidResponseError,
    QAError,
    QAService,
    get_qa_service,
    parse_qa_response,
)

__all__ = [
    "AgentConfig",
    "InvalidResponseError",
    "QAError",
    "QAService",
    "get_agent_config",
    "get_qa_service",
    "parse_qa_response",
]
