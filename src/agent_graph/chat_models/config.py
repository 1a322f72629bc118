# agent_graph/chat_models/config.py
"""
Settings for the OpenAI-compatible chat adapter.

Nothing is read from the environment implicitly: build a
``ChatModelConfig`` yourself, or call ``ChatModelConfig.from_env()`` which
loads an optional ``.env`` file (key=value lines) and reads the
``DEEPSEEK_*`` variables.
"""
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional, Union

from dotenv import find_dotenv, load_dotenv
from openai import AsyncOpenAI
from pydantic import BaseModel, ConfigDict, Field, field_validator

from agent_graph.errors import ConfigurationError

logger = logging.getLogger(__name__)

API_KEY_ENV = "DEEPSEEK_API_KEY"
BASE_URL_ENV = "DEEPSEEK_BASE_URL"
MODEL_ENV = "DEEPSEEK_MODEL"

DEFAULT_BASE_URL = "https://api.deepseek.com"
DEFAULT_MODEL = "deepseek-chat"


class ChatModelConfig(BaseModel):
    """Connection settings for an OpenAI-compatible chat-completion endpoint."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    api_key: str = Field(..., repr=False)
    base_url: str = DEFAULT_BASE_URL
    model: str = DEFAULT_MODEL
    timeout: Optional[float] = Field(default=None, gt=0)

    @field_validator("api_key", "model")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be empty")
        return value

    @classmethod
    def from_env(cls, env_file: Union[str, Path, None] = None) -> "ChatModelConfig":
        """
        Build a config from environment variables.

        Variables already set in the environment win over the ``.env`` file.
        Without ``env_file`` the nearest ``.env`` above the working
        directory is used, if any.
        """
        path = str(env_file) if env_file is not None else find_dotenv(usecwd=True)
        if path:
            logger.debug("Loading environment from %s", path)
            load_dotenv(path, override=False)

        api_key = os.getenv(API_KEY_ENV, "")
        if not api_key.strip():
            raise ConfigurationError(f"{API_KEY_ENV} is not set")
        return cls(
            api_key=api_key,
            base_url=os.getenv(BASE_URL_ENV) or DEFAULT_BASE_URL,
            model=os.getenv(MODEL_ENV) or DEFAULT_MODEL,
        )

    def create_client(self) -> AsyncOpenAI:
        kwargs = {"api_key": self.api_key, "base_url": self.base_url}
        if self.timeout is not None:
            kwargs["timeout"] = self.timeout
        return AsyncOpenAI(**kwargs)
