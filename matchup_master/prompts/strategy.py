"""Strategy prompt - the single LLM call behind a strategy request.

Renders the opponent's units, the player's units and the strategy notes into a
fixed template. Rendering is pure: identical inputs give identical text.
"""

from dataclasses import dataclass
from typing import Sequence, Tuple

from matchup_master.data.roster import UNIT_ROSTER
from matchup_master.selection import MatchupSet, validate_ready

STRATEGY_SYSTEM_PROMPT = """You are a professional Mechabellum player and mentor. You have a comprehensive understanding of the game mechanics and systems at play.

Be concise and actionable. Only recommend units that exist in the game."""


STRATEGY_USER_PROMPT = """I need a comprehensive strategy for this situation in the game Mechabellum:

OPPONENT'S UNITS: {opponent_units}
YOUR UNITS: {own_units}

Mechabellum is a round-based, large-scale auto-battler where you spend a fixed supply budget each wave to recruit and upgrade mechanized units, position them on a hex grid, and then watch the AI resolve combat in real time. Victory hinges on counter-picking enemy compositions, leveraging unit synergies (air, artillery, swarm, etc.), and adapting between waves with tactical redeployments and tech upgrades that snowball economic momentum.

Please keep in mind that the only units that are in the game are the following and that any other units should not be referenced in the generated strategy: {unit_roster}

Use these strategy notes as supporting context:

## Strategy Notes
{strategy_notes}

Please provide your response in this format:

UNITS I SHOULD USE:
- A tier list of units that are good against the opponent's units, they can be units I have or units that I don't have.
- Give yellow star emojis for the relative effectiveness of each unit as a counter
- Provide a short explanation for why each unit is effective as a counter

OVERALL STRATEGY:
- Recommended unit positioning and formation
- Suggested tech progression order

WEAKNESSES TO WATCH:
- Potential vulnerabilities in your composition
- How to mitigate these weaknesses"""


@dataclass(frozen=True)
class StrategyRequest:
    """Everything the strategy prompt needs, fixed at construction."""

    opponent_units: Tuple[str, ...]
    own_units: Tuple[str, ...]
    corpus_text: str = ""

    @classmethod
    def from_selections(
        cls, opponent: MatchupSet, own: MatchupSet, corpus_text: str = ""
    ) -> "StrategyRequest":
        """Build a request from both selections.

        Raises:
            IncompleteSelection: if either selection is empty
        """
        validate_ready(opponent, own)
        return cls(
            opponent_units=tuple(opponent),
            own_units=tuple(own),
            corpus_text=corpus_text,
        )


def format_unit_roster(roster: Sequence[str] = UNIT_ROSTER) -> str:
    """Render the closed unit vocabulary.

    Names are upper-cased so the roster never repeats the exact spelling of
    the selected units listed above it.
    """
    return ", ".join(name.upper() for name in roster)


def compose_strategy_prompt(
    opponent_units: Sequence[str],
    own_units: Sequence[str],
    corpus_text: str,
) -> str:
    """Build the user prompt for strategy generation.

    Args:
        opponent_units: Opponent unit names, listed in the given order
        own_units: Our unit names, listed in the given order
        corpus_text: Strategy notes, embedded verbatim

    Returns:
        Formatted user prompt
    """
    return STRATEGY_USER_PROMPT.format(
        opponent_units=", ".join(opponent_units),
        own_units=", ".join(own_units),
        unit_roster=format_unit_roster(),
        strategy_notes=corpus_text,
    )


def build_strategy_prompt(request: StrategyRequest) -> str:
    """Build the user prompt from a validated StrategyRequest."""
    return compose_strategy_prompt(request.opponent_units, request.own_units, request.corpus_text)
