"""LangGraph pipeline for strategy generation.

compose_prompt -> generate_strategy -> extract_strategy -> END

Generation failures end the run early with `error` set; they are never turned
into an empty strategy.
"""

import logging
from typing import Any, Callable, Optional

from langgraph.graph import END, StateGraph

from matchup_master.errors import MalformedResponse
from matchup_master.llm import LLMProvider, get_llm_provider
from matchup_master.prompts.strategy import STRATEGY_SYSTEM_PROMPT, build_strategy_prompt
from .state import StrategyState

logger = logging.getLogger(__name__)


def compose_prompt_node(state: StrategyState) -> dict[str, Any]:
    """Render the strategy prompt from the request."""
    request = state["request"]
    logger.info(
        f"Composing strategy prompt: opponent={list(request.opponent_units)}, "
        f"own={list(request.own_units)}"
    )
    return {
        "system_prompt": STRATEGY_SYSTEM_PROMPT,
        "user_prompt": build_strategy_prompt(request),
    }


def make_generate_strategy_node(
    llm: Optional[LLMProvider] = None,
) -> Callable[[StrategyState], dict[str, Any]]:
    """Build the node that sends the prompt to the LLM."""

    def generate_strategy_node(state: StrategyState) -> dict[str, Any]:
        provider = llm if llm is not None else get_llm_provider()
        try:
            response = provider.generate(state["system_prompt"], state["user_prompt"])
            logger.debug(f"LLM response: {response}")
            return {"llm_response": response}
        except Exception as e:
            logger.error(f"Strategy generation failed: {e}", exc_info=True)
            return {"llm_response": None, "error": str(e), "error_type": type(e).__name__}

    return generate_strategy_node


def extract_strategy_node(state: StrategyState) -> dict[str, Any]:
    """Pull the narrative out of the raw response."""
    response = state.get("llm_response") or ""
    strategy = response.strip()

    if not strategy:
        logger.warning("LLM returned no strategy text")
        return {
            "strategy": None,
            "error": "Invalid response format: no strategy text returned",
            "error_type": MalformedResponse.__name__,
        }

    logger.info("Strategy generated successfully")
    return {"strategy": strategy}


def _route_after_generate(state: StrategyState) -> str:
    return "end" if state.get("error") else "extract"


def create_strategy_graph(llm: Optional[LLMProvider] = None):
    """Build the LangGraph state machine.

    Args:
        llm: Provider to use; defaults to the configured provider
    """
    workflow = StateGraph(StrategyState)

    workflow.add_node("compose_prompt", compose_prompt_node)
    workflow.add_node("generate_strategy", make_generate_strategy_node(llm))
    workflow.add_node("extract_strategy", extract_strategy_node)

    workflow.set_entry_point("compose_prompt")
    workflow.add_edge("compose_prompt", "generate_strategy")
    workflow.add_conditional_edges(
        "generate_strategy",
        _route_after_generate,
        {"extract": "extract_strategy", "end": END},
    )
    workflow.add_edge("extract_strategy", END)

    return workflow.compile()
