"""Derived highlight data built from engine snapshots."""

from __future__ import annotations

from dataclasses import dataclass

from morris.core.board import BoardState
from morris.core.models import Phase, Player
from morris.core.rules import GameSnapshot
from morris.core.topology import BOARD_POSITIONS, MILLS


@dataclass(frozen=True, slots=True)
class BoardView:
    """Everything a presentation layer needs to redraw the board."""

    board: tuple[Player | None, ...]
    positions: tuple[tuple[int, int], ...]
    current_player: Player
    selection: int | None
    valid_destinations: tuple[int, ...]
    removable_points: tuple[int, ...]
    mill_points: frozenset[int]
    status: str
    counts: dict[Player, str]
    message: str


def build_board_view(snapshot: GameSnapshot) -> BoardView:
    """Project a snapshot into presentation data."""
    board = _board_from_snapshot(snapshot)
    return BoardView(
        board=snapshot.board,
        positions=BOARD_POSITIONS,
        current_player=snapshot.current_player,
        selection=snapshot.selection,
        valid_destinations=_valid_destinations(board, snapshot),
        removable_points=_removable_points(board, snapshot),
        mill_points=_mill_points(snapshot),
        status=status_text(snapshot),
        counts={player: count_text(snapshot, player) for player in Player},
        message=snapshot.last_message,
    )


def status_text(snapshot: GameSnapshot) -> str:
    """Return the one-line phase/status label."""
    if snapshot.phase is Phase.GAME_OVER and snapshot.winner is not None:
        return f"Game over: {snapshot.winner.label} wins"
    if snapshot.pending_removal:
        return "Remove opponent's piece"
    return f"Phase: {snapshot.phase.value.capitalize()}"


def count_text(snapshot: GameSnapshot, player: Player) -> str:
    return (
        f"{player.label} Remaining: {snapshot.pieces_in_hand[player]} "
        f"On Board: {snapshot.pieces_on_board[player]}"
    )


def _board_from_snapshot(snapshot: GameSnapshot) -> BoardState:
    layout = {point: owner for point, owner in enumerate(snapshot.board) if owner is not None}
    return BoardState.from_layout(layout)


def _valid_destinations(board: BoardState, snapshot: GameSnapshot) -> tuple[int, ...]:
    if snapshot.phase is not Phase.MOVEMENT or snapshot.selection is None:
        return ()
    return board.destinations(snapshot.selection)


def _removable_points(board: BoardState, snapshot: GameSnapshot) -> tuple[int, ...]:
    if not snapshot.pending_removal:
        return ()
    return board.removable(snapshot.current_player.opponent)


def _mill_points(snapshot: GameSnapshot) -> frozenset[int]:
    points: set[int] = set()
    for mill in MILLS:
        owners = {snapshot.board[point] for point in mill}
        if len(owners) == 1 and None not in owners:
            points.update(mill)
    return frozenset(points)
