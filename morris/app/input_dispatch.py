"""Single-point input dispatch for presentation layers."""

from __future__ import annotations

from morris.core.models import ActionResult, Phase, RuleError
from morris.core.rules import RulesEngine


def dispatch_point(engine: RulesEngine, point: int) -> ActionResult:
    """Route a clicked/typed point to the action the engine state calls for."""
    state = engine.state
    if state.phase is Phase.GAME_OVER:
        return ActionResult.failed(RuleError.INVALID_STATE, "The game is over.")
    if state.pending_removal:
        return engine.remove_piece(point)
    if state.phase is Phase.PLACEMENT:
        return engine.place_piece(point)
    if state.selection is None or state.board.occupant(point) is state.current_player:
        return engine.select_for_movement(point)
    return engine.attempt_move(point)
