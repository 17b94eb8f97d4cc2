"""Core layer: score domain, move buffer and error taxonomy.

Quick start::

    from gametree.core import MoveBuffer, SCORE_MAX

    buf = MoveBuffer(9)
    buf.append((1, 1))
"""

from gametree.core.buffer import MoveBuffer
from gametree.core.errors import (
    ContractViolationError,
    MoveCapacityError,
    SearchError,
)
from gametree.core.scores import (
    DRAW_SCORE,
    SCORE_LIMIT,
    SCORE_MARGIN,
    SCORE_MAX,
    SCORE_MIN,
    WIN_SCORE,
    Score,
    clamp_score,
    initial_best,
    is_sentinel,
    mate_score,
)

__all__ = [
    # Scores
    "DRAW_SCORE",
    "SCORE_LIMIT",
    "SCORE_MARGIN",
    "SCORE_MAX",
    "SCORE_MIN",
    "WIN_SCORE",
    "Score",
    "clamp_score",
    "initial_best",
    "is_sentinel",
    "mate_score",
    # Buffers
    "MoveBuffer",
    # Errors
    "ContractViolationError",
    "MoveCapacityError",
    "SearchError",
]
