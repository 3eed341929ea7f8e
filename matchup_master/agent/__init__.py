"""LangGraph pipeline for strategy generation."""

from .state import StrategyState
from .graph import create_strategy_graph

__all__ = ["StrategyState", "create_strategy_graph"]
