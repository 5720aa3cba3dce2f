"""Plain-text board renderer."""

from __future__ import annotations

from morris.app.projection import BoardView
from morris.core.models import Player

WHITE_PIECE = "W"
BLACK_PIECE = "B"
EMPTY_POINT = "."
SELECTED_MARK = "*"
TARGET_MARK = "o"

_TEMPLATE = (
    "{0}-----------{1}-----------{2}",
    "|           |           |",
    "|   {8}-------{9}-------{10}   |",
    "|   |       |       |   |",
    "|   |   {16}---{17}---{18}   |   |",
    "|   |   |       |   |   |",
    "{3}---{11}---{19}       {20}---{12}---{4}",
    "|   |   |       |   |   |",
    "|   |   {21}---{22}---{23}   |   |",
    "|   |       |       |   |",
    "|   {13}-------{14}-------{15}   |",
    "|           |           |",
    "{5}-----------{6}-----------{7}",
)

_LEGEND = (
    "0-----------1-----------2",
    "|   8-------9------10   |",
    "|   |  16--17--18   |   |",
    "3--11--19      20--12---4",
    "|   |  21--22--23   |   |",
    "|  13------14------15   |",
    "5-----------6-----------7",
)


def point_glyph(view: BoardView, point: int) -> str:
    """Return the single character drawn for a point."""
    owner = view.board[point]
    if point == view.selection:
        return SELECTED_MARK
    if owner is Player.WHITE:
        return WHITE_PIECE
    if owner is Player.BLACK:
        return BLACK_PIECE
    if point in view.valid_destinations:
        return TARGET_MARK
    return EMPTY_POINT


def board_to_lines(view: BoardView) -> list[str]:
    """Return the board diagram, top row first."""
    glyphs = [point_glyph(view, point) for point in range(len(view.board))]
    return [row.format(*glyphs) for row in _TEMPLATE]


def render_board(view: BoardView, *, legend: bool = False) -> str:
    """Render board, status and counts as one text block."""
    lines = board_to_lines(view)
    lines.append("")
    lines.append(view.status)
    lines.append(f"Current player: {view.current_player.label}")
    lines.extend(view.counts[player] for player in Player)
    if view.removable_points:
        lines.append(f"Removable: {', '.join(str(p) for p in view.removable_points)}")
    if view.valid_destinations:
        lines.append(f"Targets: {', '.join(str(p) for p in view.valid_destinations)}")
    if legend:
        lines.append("")
        lines.append("Point numbers:")
        lines.extend(_LEGEND)
    return "\n".join(lines)
