"""Nine Men's Morris rules engine and terminal front-end."""

from morris.core.models import ActionResult, Outcome, Phase, Player, RuleError
from morris.core.rules import GameSnapshot, GameState, RulesEngine

__all__ = [
    "ActionResult",
    "GameSnapshot",
    "GameState",
    "Outcome",
    "Phase",
    "Player",
    "RuleError",
    "RulesEngine",
]
