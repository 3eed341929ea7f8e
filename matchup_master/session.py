"""Per-session strategy state: both selections and the in-flight request."""

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Optional

from matchup_master.agent import create_strategy_graph
from matchup_master.llm import LLMProvider
from matchup_master.prompts.strategy import StrategyRequest
from matchup_master.selection import MatchupSet

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StrategyOutcome:
    """Result of a strategy request: a narrative or a failure message."""

    narrative: Optional[str] = None
    error: Optional[str] = None
    error_type: Optional[str] = None
    superseded: bool = False

    @property
    def ok(self) -> bool:
        return self.narrative is not None and self.error is None

    @classmethod
    def from_state(cls, state: Mapping[str, Any]) -> "StrategyOutcome":
        if state.get("error"):
            return cls(error=state["error"], error_type=state.get("error_type"))
        return cls(narrative=state.get("strategy"))


class StrategySession:
    """Owns one player's selections and at most one pending strategy request.

    Starting a new request while another is pending cancels the stale one;
    its caller receives an outcome with ``superseded=True``.
    """

    def __init__(self, llm: Optional[LLMProvider] = None, graph: Any = None):
        self.opponent = MatchupSet()
        self.own = MatchupSet()
        self._graph = graph if graph is not None else create_strategy_graph(llm)
        self._pending: Optional[asyncio.Task] = None

    def toggle_opponent(self, name: str) -> MatchupSet:
        self.opponent = self.opponent.toggle(name)
        return self.opponent

    def toggle_own(self, name: str) -> MatchupSet:
        self.own = self.own.toggle(name)
        return self.own

    def select(self, opponent: Iterable[str] = (), own: Iterable[str] = ()) -> None:
        """Replace both selections at once."""
        self.opponent = MatchupSet.of(opponent)
        self.own = MatchupSet.of(own)

    def clear_opponent(self) -> None:
        self.opponent = self.opponent.clear()

    def clear_own(self) -> None:
        self.own = self.own.clear()

    @property
    def pending(self) -> bool:
        return self._pending is not None and not self._pending.done()

    async def request_strategy(self, corpus_text: str = "") -> StrategyOutcome:
        """Generate a strategy for the current selections.

        Raises:
            IncompleteSelection: if either selection is empty; nothing is sent
        """
        request = StrategyRequest.from_selections(self.opponent, self.own, corpus_text)

        if self.pending:
            logger.info("Superseding in-flight strategy request")
            self._pending.cancel()

        task = asyncio.ensure_future(self._graph.ainvoke({"request": request}))
        self._pending = task

        try:
            result = await task
        except asyncio.CancelledError:
            if self._pending is not task:
                return StrategyOutcome(error="Superseded by a newer request", superseded=True)
            raise
        finally:
            if self._pending is task:
                self._pending = None

        outcome = StrategyOutcome.from_state(result)
        if not outcome.ok:
            logger.warning(f"Strategy request failed ({outcome.error_type}): {outcome.error}")
        return outcome
