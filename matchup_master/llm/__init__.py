"""LLM provider abstraction."""

from .provider import AnthropicProvider, LLMProvider, OllamaProvider, get_llm_provider

__all__ = ["AnthropicProvider", "LLMProvider", "OllamaProvider", "get_llm_provider"]
