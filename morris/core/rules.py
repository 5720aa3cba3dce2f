"""Rule validation and turn resolution logic."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from morris.core.board import BoardState
from morris.core.models import (
    FLYING_PIECE_COUNT,
    MIN_PIECES,
    PIECES_PER_PLAYER,
    ActionResult,
    Mill,
    Outcome,
    PieceCounts,
    Phase,
    Player,
    RuleError,
)
from morris.core.topology import in_range

logger = logging.getLogger(__name__)


def _full_hands() -> dict[Player, int]:
    return {Player.WHITE: PIECES_PER_PLAYER, Player.BLACK: PIECES_PER_PLAYER}


@dataclass(slots=True)
class GameState:
    """Runtime game state, owned by a single RulesEngine."""

    board: BoardState = field(default_factory=BoardState)
    current_player: Player = Player.WHITE
    phase: Phase = Phase.PLACEMENT
    pieces_in_hand: dict[Player, int] = field(default_factory=_full_hands)
    pending_removal: bool = False
    selection: int | None = None
    winner: Player | None = None
    last_message: str = "White to place."
    history: list[str] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class GameSnapshot:
    """Read-only view of GameState for presentation layers."""

    current_player: Player
    phase: Phase
    pieces_in_hand: PieceCounts
    pieces_on_board: PieceCounts
    board: tuple[Player | None, ...]
    pending_removal: bool
    selection: int | None
    winner: Player | None
    last_message: str

    def total_pieces(self, player: Player) -> int:
        return self.pieces_in_hand[player] + self.pieces_on_board[player]


class RulesEngine:
    """Nine Men's Morris state machine.

    Every action returns an ``ActionResult``; rejected actions leave the state
    untouched apart from the documented deselect on an illegal move.
    """

    def __init__(self, state: GameState | None = None) -> None:
        self._state = state if state is not None else GameState()

    @property
    def state(self) -> GameState:
        return self._state

    def snapshot(self) -> GameSnapshot:
        """Return an immutable copy of the current state."""
        state = self._state
        return GameSnapshot(
            current_player=state.current_player,
            phase=state.phase,
            pieces_in_hand=PieceCounts.from_mapping(state.pieces_in_hand),
            pieces_on_board=PieceCounts(
                white=state.board.count(Player.WHITE), black=state.board.count(Player.BLACK)
            ),
            board=state.board.occupancy(),
            pending_removal=state.pending_removal,
            selection=state.selection,
            winner=state.winner,
            last_message=state.last_message,
        )

    # Queries

    def is_occupied(self, point: int) -> bool:
        return self._state.board.is_occupied(point)

    def is_valid_placement(self, point: int) -> bool:
        """Return whether a piece may be placed on the point right now."""
        return (
            self._state.phase is Phase.PLACEMENT
            and in_range(point)
            and not self._state.board.is_occupied(point)
        )

    def mill_at(self, point: int) -> Mill | None:
        return self._state.board.mill_at(point)

    def mills_at(self, point: int) -> tuple[Mill, ...]:
        return self._state.board.mills_at(point)

    def is_flying(self, player: Player) -> bool:
        """Return whether the player is down to flying pieces."""
        return self._state.board.count(player) == FLYING_PIECE_COUNT

    def legal_destinations(self, point: int) -> tuple[int, ...]:
        """Return movement targets for the piece on the point."""
        if self._state.phase is not Phase.MOVEMENT:
            return ()
        return self._state.board.destinations(point)

    def has_legal_move(self, player: Player) -> bool:
        return self._state.board.can_move(player)

    def can_remove(self, point: int) -> bool:
        """Apply the mill-protection rule to an opponent piece."""
        return point in self.removable_points()

    def removable_points(self) -> tuple[int, ...]:
        return self._state.board.removable(self._state.current_player.opponent)

    def total_pieces(self, player: Player) -> int:
        return self._state.pieces_in_hand[player] + self._state.board.count(player)

    # Actions

    def place_piece(self, point: int) -> ActionResult:
        """Place a piece from the mover's hand."""
        state = self._state
        if state.phase is not Phase.PLACEMENT:
            return self._reject(RuleError.INVALID_STATE, "Placement phase is over.")
        if state.pending_removal:
            return self._reject(RuleError.INVALID_STATE, "Remove an opposing piece first.")
        if not in_range(point):
            return self._reject(RuleError.ILLEGAL_ACTION, f"Point {point} is off the board.")
        if not self.is_valid_placement(point):
            return self._reject(RuleError.ILLEGAL_ACTION, f"Point {point} is not free.")

        player = state.current_player
        state.board.place(point, player)
        state.pieces_in_hand[player] -= 1
        logger.debug(
            "placed player=%s point=%d in_hand=%d", player, point, state.pieces_in_hand[player]
        )
        if all(count == 0 for count in state.pieces_in_hand.values()):
            state.phase = Phase.MOVEMENT
            logger.info("phase=%s", state.phase)

        return self._complete_action(point, f"{player.label} placed at {point}")

    def select_for_movement(self, point: int) -> ActionResult:
        """Select, reselect or deselect one of the mover's pieces."""
        state = self._state
        if state.phase is not Phase.MOVEMENT or state.pending_removal:
            return self._reject(RuleError.INVALID_STATE, "No piece can be selected now.")
        if state.board.occupant(point) is not state.current_player:
            label = state.current_player.label
            return self._reject(RuleError.ILLEGAL_ACTION, f"Point {point} is not a {label} piece.")
        if state.selection == point:
            state.selection = None
            logger.debug("deselected point=%d", point)
            return ActionResult.succeeded(Outcome.DESELECTED, f"Deselected {point}.")
        state.selection = point
        logger.debug("selected point=%d", point)
        return ActionResult.succeeded(Outcome.SELECTED, f"Selected {point}.")

    def attempt_move(self, to_point: int) -> ActionResult:
        """Move the selected piece to the target point."""
        state = self._state
        if state.phase is not Phase.MOVEMENT or state.pending_removal or state.selection is None:
            return self._reject(RuleError.INVALID_STATE, "Select a piece before moving.")

        from_point = state.selection
        state.selection = None
        if to_point not in state.board.destinations(from_point):
            return self._reject(
                RuleError.ILLEGAL_ACTION,
                f"Cannot move {from_point} to {to_point}.",
                outcome=Outcome.INVALID_MOVE,
            )

        player = state.current_player
        state.board.move(from_point, to_point)
        logger.debug("moved player=%s from=%d to=%d", player, from_point, to_point)
        return self._complete_action(to_point, f"{player.label} moved {from_point} to {to_point}")

    def remove_piece(self, point: int) -> ActionResult:
        """Remove an opposing piece after forming a mill."""
        state = self._state
        if not state.pending_removal:
            return self._reject(RuleError.INVALID_STATE, "No mill pending a removal.")
        if not self.can_remove(point):
            return self._reject(RuleError.ILLEGAL_ACTION, f"Point {point} cannot be removed.")

        state.board.clear(point)
        state.pending_removal = False
        logger.info("removed player=%s point=%d", state.current_player.opponent, point)
        message = f"{state.current_player.label} removed {point}."
        if self._check_winner():
            return self._finish_game(message)
        self._record(message)
        self._advance_turn()
        return ActionResult.succeeded(Outcome.REMOVED, message)

    # Transitions

    def _complete_action(self, point: int, description: str) -> ActionResult:
        state = self._state
        mill = state.board.mill_at(point)
        if mill is not None and state.board.count(state.current_player.opponent) > 0:
            state.pending_removal = True
            message = f"{description}: mill {list(mill)}."
            self._record(message)
            logger.info("mill_formed player=%s mill=%s", state.current_player, mill)
            return ActionResult.succeeded(Outcome.MILL_FORMED, message, mill=mill)

        message = f"{description}."
        if self._check_winner():
            return self._finish_game(message)
        self._record(message)
        self._advance_turn()
        return ActionResult.succeeded(Outcome.NO_MILL, message)

    def _check_winner(self) -> bool:
        state = self._state
        opponent = state.current_player.opponent
        if self.total_pieces(opponent) < MIN_PIECES:
            return True
        return state.phase is Phase.MOVEMENT and not state.board.can_move(opponent)

    def _finish_game(self, message: str) -> ActionResult:
        state = self._state
        state.phase = Phase.GAME_OVER
        state.winner = state.current_player
        state.selection = None
        self._record(message)
        self._record(f"{state.winner.label} wins.")
        logger.info(
            "game_over winner=%s white=%d black=%d",
            state.winner,
            self.total_pieces(Player.WHITE),
            self.total_pieces(Player.BLACK),
        )
        return ActionResult.succeeded(Outcome.GAME_OVER, state.last_message)

    def _advance_turn(self) -> None:
        state = self._state
        state.current_player = state.current_player.opponent
        state.selection = None
        logger.debug("turn player=%s", state.current_player)

    def _record(self, message: str) -> None:
        self._state.last_message = message
        self._state.history.append(message)

    def _reject(
        self, error: RuleError, message: str, outcome: Outcome = Outcome.REJECTED
    ) -> ActionResult:
        logger.debug("rejected error=%s reason=%s", error, message)
        return ActionResult.failed(error, message, outcome=outcome)
