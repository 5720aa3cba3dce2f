from morris.app.input_dispatch import dispatch_point
from morris.core.models import Outcome, Phase, Player, RuleError
from morris.core.rules import RulesEngine
from tests.morris.helpers import layout_of, make_engine


def test_dispatch_places_then_removes_during_placement(engine: RulesEngine) -> None:
    for point in (0, 3, 1, 5):
        assert dispatch_point(engine, point).outcome is Outcome.NO_MILL
    assert dispatch_point(engine, 2).outcome is Outcome.MILL_FORMED
    assert dispatch_point(engine, 0).error is RuleError.ILLEGAL_ACTION
    assert dispatch_point(engine, 5).outcome is Outcome.REMOVED
    assert engine.state.current_player is Player.BLACK


def test_dispatch_selects_reselects_and_moves() -> None:
    engine = make_engine(layout_of((0, 9, 14, 23), (1, 4, 12, 20)))
    assert dispatch_point(engine, 0).outcome is Outcome.SELECTED
    assert dispatch_point(engine, 9).outcome is Outcome.SELECTED
    assert engine.state.selection == 9
    assert dispatch_point(engine, 9).outcome is Outcome.DESELECTED
    assert dispatch_point(engine, 5).error is RuleError.ILLEGAL_ACTION

    dispatch_point(engine, 9)
    assert dispatch_point(engine, 8).outcome is Outcome.NO_MILL
    assert engine.state.board.occupant(8) is Player.WHITE
    assert engine.state.current_player is Player.BLACK


def test_dispatch_invalid_destination_deselects() -> None:
    engine = make_engine(layout_of((0, 9, 14, 23), (1, 4, 12, 20)))
    dispatch_point(engine, 0)
    result = dispatch_point(engine, 7)
    assert result.outcome is Outcome.INVALID_MOVE
    assert engine.state.selection is None
    assert engine.state.current_player is Player.WHITE


def test_dispatch_rejects_everything_after_game_over() -> None:
    engine = make_engine(layout_of((1, 3, 4, 14), (0, 2, 5, 7)))
    dispatch_point(engine, 14)
    assert dispatch_point(engine, 6).outcome is Outcome.GAME_OVER
    assert engine.state.phase is Phase.GAME_OVER
    result = dispatch_point(engine, 1)
    assert result.error is RuleError.INVALID_STATE
    assert not result.ok
