"""Interactive terminal front-end."""

from __future__ import annotations

import logging
from collections.abc import Callable

from morris.app.input_dispatch import dispatch_point
from morris.app.projection import build_board_view
from morris.core.models import Outcome, Phase
from morris.core.rules import RulesEngine
from morris.ui.text_view import render_board

logger = logging.getLogger(__name__)

QUIT_COMMANDS = frozenset({"q", "quit", "exit"})


def prompt_for(engine: RulesEngine) -> str:
    """Return the input prompt matching the engine state."""
    state = engine.state
    player = state.current_player.label
    if state.pending_removal:
        return f"{player}, choose a piece to remove: "
    if state.phase is Phase.PLACEMENT:
        return f"{player}, place a piece: "
    if state.selection is None:
        return f"{player}, select a piece: "
    return f"{player}, move {state.selection} to: "


def run_console(
    engine: RulesEngine | None = None,
    *,
    read: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
    legend: bool = True,
) -> RulesEngine:
    """Play one game by reading point ids line by line."""
    engine = engine if engine is not None else RulesEngine()
    write(render_board(build_board_view(engine.snapshot()), legend=legend))
    while engine.state.phase is not Phase.GAME_OVER:
        try:
            raw = read(prompt_for(engine)).strip().lower()
        except EOFError:
            break
        if raw in QUIT_COMMANDS:
            break
        try:
            point = int(raw)
        except ValueError:
            write(f"Enter a point number 0-23 or 'q' to quit (got {raw!r}).")
            continue
        result = dispatch_point(engine, point)
        if not result.ok:
            write(f"{result.message} ({result.error})")
            if result.outcome is Outcome.INVALID_MOVE:
                write(render_board(build_board_view(engine.snapshot())))
            continue
        write(result.message)
        write(render_board(build_board_view(engine.snapshot())))

    logger.info("console_exit phase=%s winner=%s", engine.state.phase, engine.state.winner)
    return engine
