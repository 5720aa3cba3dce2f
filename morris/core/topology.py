"""Fixed 24-point board graph: mills, adjacency and drawing coordinates.

Points are numbered row by row within each square, outer square first:

    0-----------1-----------2
    |           |           |
    |   8-------9------10   |
    |   |       |       |   |
    |   |  16--17--18   |   |
    |   |   |       |   |   |
    3--11--19      20--12---4
    |   |   |       |   |   |
    |   |  21--22--23   |   |
    |   |       |       |   |
    |  13------14------15   |
    |           |           |
    5-----------6-----------7
"""

from __future__ import annotations

from morris.core.models import Mill

POINT_COUNT = 24

MILLS: tuple[Mill, ...] = (
    # Horizontal
    (0, 1, 2),
    (5, 6, 7),
    (8, 9, 10),
    (13, 14, 15),
    (16, 17, 18),
    (21, 22, 23),
    # Vertical
    (0, 3, 5),
    (2, 4, 7),
    (8, 11, 13),
    (10, 12, 15),
    (16, 19, 21),
    (18, 20, 23),
    # Spokes between squares
    (1, 9, 17),
    (3, 11, 19),
    (4, 12, 20),
    (6, 14, 22),
)


def _build_adjacency(mills: tuple[Mill, ...]) -> dict[int, frozenset[int]]:
    """Link consecutive points of every mill line."""
    links: dict[int, set[int]] = {point: set() for point in range(POINT_COUNT)}
    for first, middle, last in mills:
        links[first].add(middle)
        links[middle].update((first, last))
        links[last].add(middle)
    return {point: frozenset(neighbours) for point, neighbours in links.items()}


ADJACENCY: dict[int, frozenset[int]] = _build_adjacency(MILLS)

MILLS_BY_POINT: dict[int, tuple[Mill, ...]] = {
    point: tuple(mill for mill in MILLS if point in mill) for point in range(POINT_COUNT)
}

# Percent coordinates of each point inside a square board widget.
BOARD_POSITIONS: tuple[tuple[int, int], ...] = (
    (2, 2), (50, 2), (98, 2),
    (2, 50), (98, 50),
    (2, 98), (50, 98), (98, 98),
    (18, 18), (50, 18), (82, 18),
    (18, 50), (82, 50),
    (18, 82), (50, 82), (82, 82),
    (34, 34), (50, 34), (66, 34),
    (34, 50), (66, 50),
    (34, 66), (50, 66), (66, 66),
)  # fmt: skip


def in_range(point: int) -> bool:
    """Return whether the point id exists on the board."""
    return 0 <= point < POINT_COUNT


def are_adjacent(first: int, second: int) -> bool:
    """Return whether two points share a board line segment."""
    return in_range(first) and second in ADJACENCY[first]
