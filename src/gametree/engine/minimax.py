"""Depth-bounded minimax search with alpha-beta pruning."""

from __future__ import annotations

import logging
from typing import Generic, TypeVar

from gametree.core.buffer import MoveBuffer
from gametree.core.errors import ContractViolationError, MoveCapacityError
from gametree.core.scores import SCORE_MAX, SCORE_MIN, initial_best
from gametree.engine.search import EmptyNodePolicy, IEngine, SearchLimits, SearchResult
from gametree.game.interfaces import IGameLogic

_LOGGER = logging.getLogger(__name__)

StateT = TypeVar("StateT")
MoveT = TypeVar("MoveT")


class MinimaxEngine(IEngine, Generic[StateT, MoveT]):
    """Game-agnostic searcher driven by an :class:`IGameLogic`.

    All move buffers are allocated here, one per ply, from the limits;
    :meth:`find_best_move` reuses them on every call.  The engine keeps a
    reference to *logic* and calls it synchronously; it is not safe to
    share one engine between threads.

    Args:
        logic: Game capability implementation.
        limits: Search bounds.  Defaults to :class:`SearchLimits`.
        max_moves: Overrides ``limits.max_moves``.
        max_depth: Overrides ``limits.max_depth``.
    """

    __slots__ = ("_logic", "_limits", "_buffers", "_nodes", "_best_score", "_truncated")

    def __init__(
        self,
        logic: IGameLogic[StateT, MoveT],
        limits: SearchLimits | None = None,
        *,
        max_moves: int | None = None,
        max_depth: int | None = None,
    ) -> None:
        limits = limits or SearchLimits()
        overrides: dict[str, int] = {}
        if max_moves is not None:
            overrides["max_moves"] = max_moves
        if max_depth is not None:
            overrides["max_depth"] = max_depth
        if overrides:
            limits = limits.replace(**overrides)

        self._logic = logic
        self._limits = limits
        # Ply p enumerates into buffer p; leaves at ply max_depth never do.
        self._buffers: tuple[MoveBuffer[MoveT], ...] = tuple(
            MoveBuffer(limits.max_moves) for _ in range(limits.max_depth)
        )
        self._nodes = 0
        self._best_score = SCORE_MIN
        self._truncated = False

    # ── Accessors ────────────────────────────────────────────────────────

    @property
    def logic(self) -> IGameLogic[StateT, MoveT]:
        return self._logic

    @property
    def limits(self) -> SearchLimits:
        return self._limits

    @property
    def best_score(self) -> int:
        """Score of the move returned by the most recent search."""
        return self._best_score

    @property
    def nodes_searched(self) -> int:
        """Recursive search calls made by the most recent search."""
        return self._nodes

    # ── Root ─────────────────────────────────────────────────────────────

    def find_best_move(self, state: StateT) -> SearchResult[MoveT]:
        """Pick the best move for the side to act in *state*.

        Root moves are tried in generation order and each one is searched
        with the full window, so ``root_scores`` holds exact values.  Ties
        keep the earliest move.  *state* itself is never mutated.
        """
        logic = self._logic
        max_depth = self._limits.max_depth
        self._nodes = 0
        self._truncated = False

        maximizing = logic.is_maximizing_player(state)
        self._best_score = initial_best(maximizing)

        count = self._generate(state, ply=0)
        if count == 0:
            _LOGGER.debug("No legal move at the root")
            return SearchResult(
                best_move=None,
                score=self._best_score,
                nodes=0,
                depth=max_depth,
                truncated=self._truncated,
            )

        buffer = self._buffers[0]
        best_move: MoveT | None = None
        best_score = self._best_score
        root_scores: list[tuple[MoveT, int]] = []

        for idx in range(count):
            move = buffer[idx]
            child = logic.copy_state(state)
            logic.apply_move(child, move)

            score = self._search(
                child,
                max_depth - 1,
                SCORE_MIN,
                SCORE_MAX,
                not maximizing,
                ply=1,
            )
            root_scores.append((move, score))

            if (score > best_score) if maximizing else (score < best_score):
                best_score = score
                best_move = move

        if best_move is None:
            # Every move scored the starting sentinel; keep the first one.
            best_move = root_scores[0][0]

        self._best_score = best_score
        _LOGGER.debug(
            "Searched %d root moves to depth %d: best score %d, %d nodes",
            count,
            max_depth,
            best_score,
            self._nodes,
        )
        return SearchResult(
            best_move=best_move,
            score=best_score,
            nodes=self._nodes,
            depth=max_depth,
            root_scores=tuple(root_scores),
            truncated=self._truncated,
        )

    # ── Recursive search ─────────────────────────────────────────────────

    def _search(
        self,
        state: StateT,
        depth: int,
        alpha: int,
        beta: int,
        maximizing: bool,
        ply: int,
    ) -> int:
        self._nodes += 1
        logic = self._logic

        if depth == 0 or logic.is_terminal(state):
            return logic.evaluate(state)

        count = self._generate(state, ply)
        if count == 0:
            return self._empty_node_score(state, depth, maximizing, ply)

        buffer = self._buffers[ply]
        prune = self._limits.alpha_beta

        if maximizing:
            best = SCORE_MIN
            for idx in range(count):
                child = logic.copy_state(state)
                logic.apply_move(child, buffer[idx])
                score = self._search(child, depth - 1, alpha, beta, False, ply + 1)

                if score > best:
                    best = score
                if prune:
                    if best > alpha:
                        alpha = best
                    if beta <= alpha:
                        break  # Beta cutoff
            return best

        best = SCORE_MAX
        for idx in range(count):
            child = logic.copy_state(state)
            logic.apply_move(child, buffer[idx])
            score = self._search(child, depth - 1, alpha, beta, True, ply + 1)

            if score < best:
                best = score
            if prune:
                if best < beta:
                    beta = best
                if beta <= alpha:
                    break  # Alpha cutoff
        return best

    # ── Helpers ──────────────────────────────────────────────────────────

    def _generate(self, state: StateT, ply: int) -> int:
        """Fill the buffer of *ply* and return how many moves to search."""
        buffer = self._buffers[ply]
        buffer.clear()
        count = self._logic.generate_moves(state, buffer)

        stored = len(buffer)
        attempted = max(count, stored + buffer.dropped)
        if attempted > buffer.capacity:
            self._on_overflow(buffer.capacity, attempted, ply)
        return max(0, min(count, stored))

    def _on_overflow(self, capacity: int, attempted: int, ply: int) -> None:
        if self._limits.strict_capacity:
            raise MoveCapacityError(capacity, attempted)
        if not self._truncated:
            _LOGGER.warning(
                "Move buffer overflow at ply %d: %d moves, capacity %d; "
                "searching the first %d",
                ply,
                attempted,
                capacity,
                capacity,
            )
        self._truncated = True

    def _empty_node_score(
        self,
        state: StateT,
        depth: int,
        maximizing: bool,
        ply: int,
    ) -> int:
        policy = self._limits.empty_node_policy
        if policy is EmptyNodePolicy.SENTINEL:
            return initial_best(maximizing)
        if policy is EmptyNodePolicy.EVALUATE:
            _LOGGER.warning(
                "Non-terminal state without moves at ply %d; evaluating it", ply
            )
            return self._logic.evaluate(state)
        raise ContractViolationError(depth=depth, ply=ply)
