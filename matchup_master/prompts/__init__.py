"""Prompt templates for LLM calls."""

from .strategy import (
    STRATEGY_SYSTEM_PROMPT,
    STRATEGY_USER_PROMPT,
    StrategyRequest,
    build_strategy_prompt,
    compose_strategy_prompt,
    format_unit_roster,
)

__all__ = [
    "STRATEGY_SYSTEM_PROMPT",
    "STRATEGY_USER_PROMPT",
    "StrategyRequest",
    "build_strategy_prompt",
    "compose_strategy_prompt",
    "format_unit_roster",
]
