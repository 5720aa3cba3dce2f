from __future__ import annotations

import pytest

from morris.core.rules import RulesEngine
from tests.morris.helpers import BLACK_FILL, WHITE_FILL


@pytest.fixture
def engine() -> RulesEngine:
    return RulesEngine()


@pytest.fixture
def filled_engine() -> RulesEngine:
    engine = RulesEngine()
    for white_point, black_point in zip(WHITE_FILL, BLACK_FILL):
        engine.place_piece(white_point)
        engine.place_piece(black_point)
    return engine
