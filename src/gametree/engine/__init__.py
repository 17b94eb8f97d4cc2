"""Search engine package: limits, results and the minimax searcher."""

from gametree.engine.minimax import MinimaxEngine
from gametree.engine.search import (
    EmptyNodePolicy,
    IEngine,
    SearchLimits,
    SearchResult,
)

__all__ = [
    "EmptyNodePolicy",
    "IEngine",
    "MinimaxEngine",
    "SearchLimits",
    "SearchResult",
]
