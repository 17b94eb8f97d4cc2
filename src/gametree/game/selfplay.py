"""Self-play driver: let an engine play both sides of a game.

Useful for checking a game logic end to end, e.g. that two perfect
players draw tic-tac-toe from the empty board.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from gametree.engine.search import IEngine, SearchResult

_LOGGER = logging.getLogger(__name__)

MoveCallback = Callable[[int, SearchResult[Any]], None]  # ply, result


@dataclass(slots=True, frozen=True)
class GameRecord:
    """Moves played by :func:`play_game` and how the game ended."""

    moves: tuple[Any, ...]
    scores: tuple[int, ...]
    final_state: Any
    final_score: int
    nodes: int
    finished: bool

    @property
    def plies(self) -> int:
        return len(self.moves)


def play_game(
    engine: IEngine,
    state: Any,
    *,
    max_plies: int | None = None,
    copy: bool = True,
    on_move: MoveCallback | None = None,
) -> GameRecord:
    """Play engine-chosen moves from *state* until the game stops.

    The game stops when the state is terminal, the side to act has no
    move, or *max_plies* moves were played.  With ``copy=False`` the moves
    are applied to *state* itself.

    Args:
        engine: Engine picking every move; its logic applies them.
        state: Starting position.
        max_plies: Optional cap on the number of moves played.
        copy: Play on a snapshot of *state* instead of *state* itself.
        on_move: ``(ply, result)``, called after each move is applied.
    """
    if max_plies is not None and max_plies < 0:
        raise ValueError("max_plies must be >= 0")

    logic = engine.logic
    current = logic.copy_state(state) if copy else state
    moves: list[Any] = []
    scores: list[int] = []
    nodes = 0

    while not logic.is_terminal(current):
        if max_plies is not None and len(moves) >= max_plies:
            break
        result = engine.find_best_move(current)
        nodes += result.nodes
        if result.best_move is None:
            _LOGGER.warning("Self-play stopped: no legal move at ply %d", len(moves))
            break

        logic.apply_move(current, result.best_move)
        moves.append(result.best_move)
        scores.append(result.score)
        if on_move is not None:
            on_move(len(moves), result)

    finished = logic.is_terminal(current)
    return GameRecord(
        moves=tuple(moves),
        scores=tuple(scores),
        final_state=current,
        final_score=logic.evaluate(current),
        nodes=nodes,
        finished=finished,
    )
