from __future__ import annotations

from morris.core.board import BoardState
from morris.core.models import Phase, Player
from morris.core.rules import GameState, RulesEngine

# Interleaved placements that never form a mill for either side.
WHITE_FILL = (0, 2, 8, 10, 13, 15, 17, 19, 22)
BLACK_FILL = (1, 3, 4, 5, 7, 9, 11, 12, 14)


def make_engine(
    layout: dict[int, Player],
    *,
    current: Player = Player.WHITE,
    phase: Phase = Phase.MOVEMENT,
    in_hand: dict[Player, int] | None = None,
) -> RulesEngine:
    hands = in_hand if in_hand is not None else {Player.WHITE: 0, Player.BLACK: 0}
    state = GameState(
        board=BoardState.from_layout(layout),
        current_player=current,
        phase=phase,
        pieces_in_hand=dict(hands),
    )
    return RulesEngine(state)


def layout_of(white: tuple[int, ...], black: tuple[int, ...]) -> dict[int, Player]:
    layout = {point: Player.WHITE for point in white}
    layout.update({point: Player.BLACK for point in black})
    return layout
