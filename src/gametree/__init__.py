"""Generic two-player game-tree search (minimax with alpha-beta pruning).

Quick start::

    from gametree import MinimaxEngine, SearchLimits

    engine = MinimaxEngine(MyGameLogic(), SearchLimits(max_moves=9, max_depth=9))
    result = engine.find_best_move(state)
    print(result.best_move, result.score, result.nodes)
"""

from gametree.core import (
    DRAW_SCORE,
    SCORE_LIMIT,
    SCORE_MARGIN,
    SCORE_MAX,
    SCORE_MIN,
    WIN_SCORE,
    ContractViolationError,
    MoveBuffer,
    MoveCapacityError,
    Score,
    SearchError,
    clamp_score,
    is_sentinel,
    mate_score,
)
from gametree.engine import (
    EmptyNodePolicy,
    IEngine,
    MinimaxEngine,
    SearchLimits,
    SearchResult,
)
from gametree.game import GameRecord, IGameLogic, play_game

__version__ = "0.1.0"

__all__ = [
    # Core
    "DRAW_SCORE",
    "SCORE_LIMIT",
    "SCORE_MARGIN",
    "SCORE_MAX",
    "SCORE_MIN",
    "WIN_SCORE",
    "ContractViolationError",
    "MoveBuffer",
    "MoveCapacityError",
    "Score",
    "SearchError",
    "clamp_score",
    "is_sentinel",
    "mate_score",
    # Game
    "GameRecord",
    "IGameLogic",
    "play_game",
    # Engine
    "EmptyNodePolicy",
    "IEngine",
    "MinimaxEngine",
    "SearchLimits",
    "SearchResult",
]
