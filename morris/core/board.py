"""Board state representation and mutation helpers."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from morris.core.models import FLYING_PIECE_COUNT, Mill, Player
from morris.core.topology import MILLS_BY_POINT, POINT_COUNT, are_adjacent, in_range

EMPTY = 0

_CODES: dict[Player, int] = {Player.WHITE: 1, Player.BLACK: 2}
_PLAYERS: dict[int, Player] = {code: player for player, code in _CODES.items()}


@dataclass(slots=True)
class BoardState:
    """Numpy-backed point -> occupant mapping."""

    cells: np.ndarray = field(default_factory=lambda: np.zeros(POINT_COUNT, dtype=np.int8))

    def __post_init__(self) -> None:
        if self.cells.shape != (POINT_COUNT,):
            self.cells = np.zeros(POINT_COUNT, dtype=np.int8)

    @classmethod
    def from_layout(cls, layout: dict[int, Player]) -> BoardState:
        """Build a board from an explicit point -> player mapping."""
        board = cls()
        for point, player in layout.items():
            board.place(point, player)
        return board

    def occupant(self, point: int) -> Player | None:
        """Return the player holding the point, if any."""
        if not in_range(point):
            return None
        return _PLAYERS.get(int(self.cells[point]))

    def is_occupied(self, point: int) -> bool:
        return in_range(point) and bool(self.cells[point] != EMPTY)

    def place(self, point: int, player: Player) -> None:
        """Put a piece of ``player`` on an empty point."""
        if not in_range(point) or self.is_occupied(point):
            raise ValueError(f"Point {point} is not free.")
        self.cells[point] = _CODES[player]

    def clear(self, point: int) -> Player:
        """Empty an occupied point and return its former owner."""
        owner = self.occupant(point)
        if owner is None:
            raise ValueError(f"Point {point} is empty.")
        self.cells[point] = EMPTY
        return owner

    def move(self, from_point: int, to_point: int) -> None:
        """Relocate a piece to an empty point."""
        if not in_range(to_point) or self.is_occupied(to_point):
            raise ValueError(f"Point {to_point} is not free.")
        owner = self.clear(from_point)
        self.cells[to_point] = _CODES[owner]

    def pieces(self, player: Player) -> tuple[int, ...]:
        """Return the points held by ``player`` in ascending order."""
        return tuple(int(point) for point in np.flatnonzero(self.cells == _CODES[player]))

    def count(self, player: Player) -> int:
        return int(np.count_nonzero(self.cells == _CODES[player]))

    def empty_points(self) -> tuple[int, ...]:
        return tuple(int(point) for point in np.flatnonzero(self.cells == EMPTY))

    def occupancy(self) -> tuple[Player | None, ...]:
        """Return the full board as a tuple indexed by point."""
        return tuple(_PLAYERS.get(int(code)) for code in self.cells)

    def mills_at(self, point: int) -> tuple[Mill, ...]:
        """Return every formed mill passing through the occupied point."""
        owner = self.occupant(point)
        if owner is None:
            return ()
        code = _CODES[owner]
        return tuple(
            mill for mill in MILLS_BY_POINT[point] if all(self.cells[p] == code for p in mill)
        )

    def mill_at(self, point: int) -> Mill | None:
        """Return the first formed mill through the point, if any."""
        formed = self.mills_at(point)
        return formed[0] if formed else None

    def in_mill(self, point: int) -> bool:
        return bool(self.mills_at(point))

    def destinations(self, point: int) -> tuple[int, ...]:
        """Return legal targets for the piece on ``point``.

        A player down to exactly three pieces flies to any empty point;
        otherwise the piece slides to an empty adjacent point.
        """
        owner = self.occupant(point)
        if owner is None:
            return ()
        if self.count(owner) == FLYING_PIECE_COUNT:
            return self.empty_points()
        return tuple(p for p in self.empty_points() if are_adjacent(point, p))

    def can_move(self, player: Player) -> bool:
        """Return whether any piece of ``player`` has a legal destination."""
        return any(self.destinations(point) for point in self.pieces(player))

    def removable(self, player: Player) -> tuple[int, ...]:
        """Return the pieces of ``player`` an opposing mill may take.

        Pieces inside a mill are protected unless every piece is in one.
        """
        held = self.pieces(player)
        free = tuple(point for point in held if not self.in_mill(point))
        return free if free else held
