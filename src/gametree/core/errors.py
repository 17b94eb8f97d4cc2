"""Exceptions raised by the search engine."""

from __future__ import annotations


class SearchError(Exception):
    """Base class for search failures caused by a misbehaving game logic."""


class ContractViolationError(SearchError):
    """A non-terminal state produced no legal moves.

    Args:
        depth: Remaining depth of the node where it happened.
        ply: Distance of that node from the root.
    """

    def __init__(self, depth: int, ply: int) -> None:
        super().__init__(
            f"Non-terminal state has no legal moves (ply {ply}, depth {depth}); "
            "is_terminal() must be True whenever generate_moves() returns 0"
        )
        self.depth = depth
        self.ply = ply


class MoveCapacityError(SearchError):
    """Move generation wrote more moves than the buffer can hold."""

    def __init__(self, capacity: int, attempted: int) -> None:
        super().__init__(
            f"Move generation produced {attempted} moves, "
            f"buffer capacity is {capacity}"
        )
        self.capacity = capacity
        self.attempted = attempted
