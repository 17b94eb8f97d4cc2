"""Shared engine search models and protocol."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, Any, Generic, Protocol, TypeVar

if TYPE_CHECKING:
    from gametree.game.interfaces import IGameLogic

MoveT = TypeVar("MoveT")


class EmptyNodePolicy(StrEnum):
    """What to do with a non-terminal state that has no legal moves."""

    RAISE = "raise"
    EVALUATE = "evaluate"
    SENTINEL = "sentinel"


@dataclass(slots=True, frozen=True)
class SearchLimits:
    """Bounds and switches fixed for the lifetime of an engine.

    Attributes:
        max_moves: Branching bound, the capacity of every move buffer.
        max_depth: Ply bound, counted from the root.
        alpha_beta: Prune with the alpha-beta window.  *False* runs a
            full-width minimax over the same tree.
        empty_node_policy: Handling of non-terminal states without moves.
        strict_capacity: Raise instead of truncating when move generation
            overflows a buffer.
    """

    max_moves: int = 64
    max_depth: int = 5
    alpha_beta: bool = True
    empty_node_policy: EmptyNodePolicy = EmptyNodePolicy.RAISE
    strict_capacity: bool = False

    def __post_init__(self) -> None:
        if self.max_moves < 1:
            raise ValueError("Move capacity must be >= 1")
        if self.max_depth < 1:
            raise ValueError("Search depth must be >= 1")
        if not isinstance(self.empty_node_policy, EmptyNodePolicy):
            object.__setattr__(
                self, "empty_node_policy", EmptyNodePolicy(self.empty_node_policy)
            )

    def replace(self, **changes: Any) -> SearchLimits:
        """Copy of these limits with *changes* applied (and re-validated)."""
        return dataclasses.replace(self, **changes)


@dataclass(slots=True, frozen=True)
class SearchResult(Generic[MoveT]):
    """Outcome of one root search.

    ``best_move`` is *None* when the root state has no legal move; ``score``
    then holds the initial sentinel of the side to act.
    """

    best_move: MoveT | None
    score: int
    nodes: int
    depth: int
    root_scores: tuple[tuple[MoveT, int], ...] = ()
    truncated: bool = False

    @property
    def has_move(self) -> bool:
        return self.best_move is not None


class IEngine(Protocol):
    """Protocol for engines that pick a move for the side to act."""

    @property
    def logic(self) -> IGameLogic[Any, Any]: ...

    def find_best_move(self, state: Any) -> SearchResult[Any]: ...
