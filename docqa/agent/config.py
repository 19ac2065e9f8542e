"""Model settings for document question answering, read from the environment.

``LLM_BASE_URL`` lets the OpenAI client talk to any compatible endpoint.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

load_dotenv()


class AgentConfig(BaseModel):
    """Settings used to build the answering model.

    The key comes from ``LLM_API_KEY``, then ``OPENAI_API_KEY``. Requests
    are made once: ``max_retries`` defaults to 0 so a failed call reaches
    the user instead of being repeated by the client.
    """

    api_key: str = Field(
        default_factory=lambda: os.getenv("LLM_API_KEY", os.getenv("OPENAI_API_KEY", "")),
        description="Provider API key",
    )
    base_url: str | None = Field(
        default_factory=lambda: os.getenv("LLM_BASE_URL") or None,
        description="OpenAI-compatible endpoint, None for api.openai.com",
    )
    model_name: str = Field(
        default_factory=lambda: os.getenv("LLM_MODEL", "gpt-4o-mini"),
        description="Model id sent with each request",
    )
    temperature: float = Field(
        default=0.2,
        ge=0.0,
        le=2.0,
        description="Sampling temperature for answers",
    )
    max_tokens: int = Field(
        default=2048,
        ge=1,
        le=128000,
        description="Upper bound on answer length in tokens",
    )
    max_retries: int = Field(
        default=0,
        ge=0,
        description="Client-side retries per question",
    )

    @field_validator("api_key")
    @classmethod
    def validate_api_key(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("API key required. Set LLM_API_KEY or OPENAI_API_KEY in .env")
        return v.strip()


def get_agent_config() -> AgentConfig:
    """Build settings from the current environment.

    Raises:
        pydantic.ValidationError: If neither key variable is set.
    """
    return AgentConfig()
