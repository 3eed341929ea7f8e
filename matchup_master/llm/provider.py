"""LLM provider abstraction for Anthropic and Ollama."""

import logging
from abc import ABC, abstractmethod
from typing import Any

import anthropic
import httpx
import ollama

from matchup_master.config import Config
from matchup_master.errors import GenerationError, MalformedResponse

logger = logging.getLogger(__name__)


class LLMProvider(ABC):
    """Abstract LLM interface."""

    @abstractmethod
    def generate(self, system_prompt: str, user_prompt: str) -> str:
        """Generate response from LLM.

        Raises:
            GenerationError: if the service call fails
            MalformedResponse: if the response carries no text
        """
        pass


class OllamaProvider(LLMProvider):
    """Local Ollama LLM provider."""

    def __init__(self, client: Any = None):
        self.client = client if client is not None else ollama.Client(host=Config.OLLAMA_BASE_URL)
        self.model = Config.OLLAMA_MODEL

    def generate(self, system_prompt: str, user_prompt: str) -> str:
        """Generate response using Ollama."""
        logger.debug(f"Calling Ollama model: {self.model}")

        try:
            response = self.client.chat(
                model=self.model,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt},
                ],
            )
        except (ollama.ResponseError, httpx.HTTPError, ConnectionError) as e:
            raise GenerationError(f"Ollama error: {e}") from e

        try:
            text = response["message"]["content"]
        except (KeyError, TypeError) as e:
            raise MalformedResponse("Invalid response format from Ollama") from e

        if not isinstance(text, str) or not text.strip():
            raise MalformedResponse("Ollama returned an empty response")
        return text


class AnthropicProvider(LLMProvider):
    """Anthropic Claude LLM provider."""

    def __init__(self, client: Any = None):
        self.client = client if client is not None else anthropic.Anthropic(api_key=Config.ANTHROPIC_API_KEY)
        self.model = Config.ANTHROPIC_MODEL
        self.max_tokens = Config.STRATEGY_MAX_TOKENS

    def generate(self, system_prompt: str, user_prompt: str) -> str:
        """Generate response using Claude."""
        logger.debug(f"Calling Anthropic model: {self.model}")

        try:
            response = self.client.messages.create(
                model=self.model,
                max_tokens=self.max_tokens,
                system=system_prompt,
                messages=[{"role": "user", "content": user_prompt}],
            )
        except anthropic.APIError as e:
            raise GenerationError(f"Anthropic API error: {e}") from e

        for block in getattr(response, "content", None) or []:
            if getattr(block, "type", None) == "text" and isinstance(getattr(block, "text", None), str):
                if block.text.strip():
                    return block.text

        raise MalformedResponse("Invalid response format from Anthropic: no text content")


def get_llm_provider() -> LLMProvider:
    """Factory function to get LLM provider based on config."""
    if Config.LLM_PROVIDER == "ollama":
        return OllamaProvider()
    elif Config.LLM_PROVIDER == "anthropic":
        return AnthropicProvider()
    else:
        raise ValueError(f"Unknown LLM provider: {Config.LLM_PROVIDER}")
