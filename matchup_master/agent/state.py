"""State schema for the strategy graph."""

from typing import Optional, TypedDict

from matchup_master.prompts.strategy import StrategyRequest


class StrategyState(TypedDict, total=False):
    """State for one strategy request."""

    # Input
    request: StrategyRequest

    # Rendered prompts
    system_prompt: str
    user_prompt: str

    # LLM interaction
    llm_response: Optional[str]  # Raw LLM output
    strategy: Optional[str]  # Narrative handed back to the caller

    # Error handling
    error: Optional[str]  # Human-readable message if any
    error_type: Optional[str]  # Exception class name, e.g. "MalformedResponse"
