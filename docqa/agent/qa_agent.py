"""Agno-backed question answering over a single document.

Sends the document context and one question to the model, asking for a
JSON object with ``answer`` and ``sources``, and validates the reply.

Each call is a single round trip: no retries, no caching, no history.
The model's JSON is parsed here rather than by agno so that free-text
replies can degrade to a plain answer instead of failing.
"""

import json
import logging

from agno.agent import Agent
from agno.models.openai import OpenAIChat
from agno.run.base import RunStatus
from pydantic import BaseModel

from docqa.agent.config import AgentConfig, get_agent_config
from docqa.agent.prompts import (
    QA_DESCRIPTION,
    QA_EXPECTED_OUTPUT,
    QA_INSTRUCTIONS,
    build_prompt,
)
from docqa.models.schemas import QAResult

logger = logging.getLogger(__name__)


class QAError(Exception):
    """Raised when an answer could not be obtained from the model."""


class InvalidResponseError(QAError):
    """Raised when the model's JSON does not match the answer schema."""


def parse_qa_response(text: str) -> QAResult:
    """Turn raw model output into a QAResult.

    Output that is not shaped like a JSON object is taken as a plain
    answer with no sources.

    Args:
        text: Raw text returned by the model.

    Returns:
        The parsed answer and its string sources.

    Raises:
        InvalidResponseError: If the JSON lacks a string ``answer`` or a
            ``sources`` array.
        json.JSONDecodeError: If the text looks like an object but is not JSON.
    """
    json_text = text.strip()
    if not json_text.startswith("{") or not json_text.endswith("}"):
        return QAResult(answer=json_text, sources=[])

    parsed = json.loads(json_text)
    answer = parsed.get("answer") if isinstance(parsed, dict) else None
    sources = parsed.get("sources") if isinstance(parsed, dict) else None

    if not isinstance(answer, str) or not isinstance(sources, list):
        raise InvalidResponseError("Invalid response structure in AI response.")

    return QAResult(answer=answer, sources=[s for s in sources if isinstance(s, str)])


class QAService:
    """Service wrapping the agno agent used to answer questions.

    Wraps agno's Agent with:
    - A JSON answer schema requested from the model
    - Local parsing with plain-text fallback
    - Centralized error handling
    """

    def __init__(self, config: AgentConfig | None = None) -> None:
        """Initialize the QA service.

        Args:
            config: Optional agent configuration.
                    Loads from environment if not provided.
        """
        self._config = config or get_agent_config()
        self._agent = self._create_agent()

    def _create_agent(self) -> Agent:
        model = OpenAIChat(
            id=self._config.model_name,
            api_key=self._config.api_key,
            base_url=self._config.base_url,
            temperature=self._config.temperature,
            max_tokens=self._config.max_tokens,
            max_retries=self._config.max_retries,
        )

        return Agent(
            model=model,
            description=QA_DESCRIPTION,
            instructions=QA_INSTRUCTIONS,
            expected_output=QA_EXPECTED_OUTPUT,
            # JSON mode with the answer schema; parsing stays on our side
            output_schema=QAResult,
            use_json_mode=True,
            parse_response=False,
            markdown=False,
        )

    async def answer(self, context: str, question: str) -> QAResult:
        """Answer a question using only the given context.

        Args:
            context: Full document text.
            question: The user's question.

        Returns:
            QAResult with the answer and supporting excerpts.

        Raises:
            QAError: If the model call fails or its reply is malformed.
        """
        prompt = build_prompt(context, question)
        try:
            response = await self._agent.arun(prompt)
            # agno reports provider failures on the run output instead of raising
            if response.status == RunStatus.error:
                raise QAError(response.content or "model run failed")
            content = response.content
            if isinstance(content, BaseModel):
                content = content.model_dump_json()
            return parse_qa_response(content or "")
        except Exception as e:
            logger.error(f"Error calling LLM API: {e}")
            error_cls = InvalidResponseError if isinstance(e, InvalidResponseError) else QAError
            raise error_cls(f"Failed to get response from AI: {e}") from e


# Module-level singleton instance
_qa_service: QAService | None = None


def get_qa_service() -> QAService:
    """Get or create the global QA service."""
    global _qa_service
    if _qa_service is None:
        _qa_service = QAService()
    return _qa_service
