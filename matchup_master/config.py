"""Configuration management for MatchupMaster."""

import os
from dotenv import load_dotenv

load_dotenv()


class Config:
    """Centralized configuration via environment variables."""

    # LLM Provider
    LLM_PROVIDER: str = os.getenv("LLM_PROVIDER", "anthropic")

    # Anthropic Settings
    ANTHROPIC_API_KEY: str = os.getenv("ANTHROPIC_API_KEY", "")
    ANTHROPIC_MODEL: str = os.getenv("ANTHROPIC_MODEL", "claude-sonnet-4-20250514")

    # Ollama Settings
    OLLAMA_BASE_URL: str = os.getenv("OLLAMA_BASE_URL", "http://localhost:11434")
    OLLAMA_MODEL: str = os.getenv("OLLAMA_MODEL", "llama3.1:8b")

    # Strategy generation
    STRATEGY_MAX_TOKENS: int = int(os.getenv("STRATEGY_MAX_TOKENS", "2000"))

    # Assets (local paths or http(s) URLs); empty means bundled/none
    UNITS_SOURCE: str = os.getenv("UNITS_SOURCE", "")
    UNIT_STATS_SOURCE: str = os.getenv("UNIT_STATS_SOURCE", "")
    STRATEGY_CORPUS_SOURCE: str = os.getenv("STRATEGY_CORPUS_SOURCE", "")
    ASSET_TIMEOUT: float = float(os.getenv("ASSET_TIMEOUT", "30"))

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    @classmethod
    def validate(cls) -> None:
        """Validate configuration settings."""
        if cls.LLM_PROVIDER not in ("ollama", "anthropic"):
            raise ValueError(f"Invalid LLM_PROVIDER: {cls.LLM_PROVIDER}")

        if cls.LLM_PROVIDER == "anthropic" and not cls.ANTHROPIC_API_KEY:
            raise ValueError("ANTHROPIC_API_KEY required when using anthropic provider")

        if cls.STRATEGY_MAX_TOKENS <= 0:
            raise ValueError(f"STRATEGY_MAX_TOKENS must be positive, got {cls.STRATEGY_MAX_TOKENS}")
