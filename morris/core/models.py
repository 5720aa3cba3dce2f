"""Core domain models used by game logic."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum

PIECES_PER_PLAYER = 9
FLYING_PIECE_COUNT = 3
MIN_PIECES = 3

Mill = tuple[int, int, int]


class Player(StrEnum):
    """Piece owner and turn holder."""

    WHITE = "WHITE"
    BLACK = "BLACK"

    @property
    def opponent(self) -> Player:
        return Player.BLACK if self is Player.WHITE else Player.WHITE

    @property
    def label(self) -> str:
        return self.value.capitalize()


class Phase(StrEnum):
    """Game phase."""

    PLACEMENT = "PLACEMENT"
    MOVEMENT = "MOVEMENT"
    GAME_OVER = "GAME_OVER"


class RuleError(StrEnum):
    """Reason an action was rejected."""

    INVALID_STATE = "INVALID_STATE"
    ILLEGAL_ACTION = "ILLEGAL_ACTION"


class Outcome(StrEnum):
    """Result of a single engine action."""

    NO_MILL = "NO_MILL"
    MILL_FORMED = "MILL_FORMED"
    SELECTED = "SELECTED"
    DESELECTED = "DESELECTED"
    REMOVED = "REMOVED"
    GAME_OVER = "GAME_OVER"
    INVALID_MOVE = "INVALID_MOVE"
    REJECTED = "REJECTED"


@dataclass(frozen=True, slots=True)
class ActionResult:
    """Outcome of an engine action, success or rejection."""

    outcome: Outcome
    error: RuleError | None = None
    message: str = ""
    mill: Mill | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def succeeded(cls, outcome: Outcome, message: str, mill: Mill | None = None) -> ActionResult:
        """Build a success result."""
        return cls(outcome=outcome, message=message, mill=mill)

    @classmethod
    def failed(
        cls, error: RuleError, message: str, outcome: Outcome = Outcome.REJECTED
    ) -> ActionResult:
        """Build a rejection result."""
        return cls(outcome=outcome, error=error, message=message)


@dataclass(frozen=True, slots=True)
class PieceCounts:
    """Per-player piece count, indexable by ``Player``."""

    white: int
    black: int

    def __getitem__(self, player: Player) -> int:
        return self.white if player is Player.WHITE else self.black

    @classmethod
    def from_mapping(cls, counts: Mapping[Player, int]) -> PieceCounts:
        return cls(white=counts[Player.WHITE], black=counts[Player.BLACK])
