"""Score domain: absolute evaluations and their extreme sentinels.

Scores are plain ``int`` values seen from the maximizing side: larger is
better for it, whoever is to move.  The two sentinels act as "infinity"
when seeding the search window.  They sit below the signed 16-bit bound so
that negating or comparing any score stays inside the range a small target
would store it in::

    SCORE_MIN = -32_000 < 0 < SCORE_MAX = 32_000 < SCORE_LIMIT = 32_767
"""

from __future__ import annotations

from typing import Final, TypeAlias

Score: TypeAlias = int

SCORE_LIMIT: Final = 32_767
SCORE_MAX: Final = 32_000
SCORE_MIN: Final = -SCORE_MAX
SCORE_MARGIN: Final = SCORE_LIMIT - SCORE_MAX

# Decided-game magnitude for capability authors; stays clear of the sentinels.
WIN_SCORE: Final = SCORE_MAX - 1_000
DRAW_SCORE: Final = 0


def clamp_score(score: int) -> Score:
    """Clamp *score* into ``[SCORE_MIN, SCORE_MAX]``."""
    if score > SCORE_MAX:
        return SCORE_MAX
    if score < SCORE_MIN:
        return SCORE_MIN
    return score


def is_sentinel(score: int) -> bool:
    """True if *score* is one of the two window sentinels."""
    return score in (SCORE_MIN, SCORE_MAX)


def mate_score(ply: int) -> Score:
    """Win score discounted by *ply* so faster wins rank higher."""
    if ply < 0:
        raise ValueError("ply must be >= 0")
    return max(WIN_SCORE - ply, DRAW_SCORE + 1)


def initial_best(maximizing: bool) -> Score:
    """Worst possible score for the side described by *maximizing*."""
    return SCORE_MIN if maximizing else SCORE_MAX
