"""Abstract interfaces for the game layer.

Follows Dependency Inversion: the search engine depends on
:class:`IGameLogic`, never on a concrete game.  Consumers subclass it
for their own state and move types.
"""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Generic, TypeVar

if TYPE_CHECKING:
    from gametree.core.buffer import MoveBuffer

StateT = TypeVar("StateT")
MoveT = TypeVar("MoveT")


# ── Game capability contract ────────────────────────────────────────────────


class IGameLogic(ABC, Generic[StateT, MoveT]):
    """Game-specific behaviour the search engine calls into.

    The engine treats states and moves as opaque values: it only copies
    states (through :meth:`copy_state`) and hands both back to these
    methods.

    Contract: whenever :meth:`generate_moves` would write no move for a
    state, :meth:`is_terminal` must be *True* for that state.
    """

    @abstractmethod
    def evaluate(self, state: StateT) -> int:
        """Absolute evaluation of *state*.

        Higher values favour the maximizing side regardless of who is to
        move.  Called at depth-limit and terminal nodes.
        """

    @abstractmethod
    def generate_moves(self, state: StateT, buffer: MoveBuffer[MoveT]) -> int:
        """Append the legal moves of the side to act into *buffer*.

        The buffer arrives empty and holds at most ``buffer.capacity``
        moves.  Returns how many moves were written; 0 only when no legal
        move exists.
        """

    @abstractmethod
    def apply_move(self, state: StateT, move: MoveT) -> None:
        """Play *move* on *state* in place.  Must not mutate *move*."""

    @abstractmethod
    def is_terminal(self, state: StateT) -> bool:
        """Is the game decided (win, loss or draw) at *state*?"""

    @abstractmethod
    def is_maximizing_player(self, state: StateT) -> bool:
        """Is the side to act in *state* the maximizing one?"""

    def copy_state(self, state: StateT) -> StateT:
        """Independent snapshot of *state*.

        Defaults to :func:`copy.deepcopy`; override with a cheaper copy
        when the state type allows it.
        """
        return copy.deepcopy(state)
