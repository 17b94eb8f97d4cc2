"""Game logics used by the test suite.

``TicTacToe`` is a complete 3x3 game.  ``TreeLogic`` walks an explicit
game tree written as nested lists: an ``int`` is a leaf (terminal, with
that score), a ``list`` is an inner node whose children are the moves.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field

from gametree.core.buffer import MoveBuffer
from gametree.core.scores import DRAW_SCORE, mate_score
from gametree.game.interfaces import IGameLogic

# ── Tic-tac-toe ─────────────────────────────────────────────────────────────

_LINES = (
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    (0, 4, 8),
    (2, 4, 6),
)


@dataclass(slots=True)
class Board:
    """3x3 board, cells indexed 0-8 row by row.  X maximizes."""

    cells: list[str] = field(default_factory=lambda: [" "] * 9)
    to_move: str = "X"

    @classmethod
    def parse(cls, rows: str, to_move: str | None = None) -> Board:
        """Board from a 9-character string such as ``"XX.OO...."``."""
        cells = [" " if ch == "." else ch for ch in rows.replace("\n", "")]
        if len(cells) != 9:
            raise ValueError(f"Expected 9 cells, got {len(cells)}")
        if to_move is None:
            to_move = "X" if cells.count("X") == cells.count("O") else "O"
        return cls(cells, to_move)

    def winner(self) -> str | None:
        for a, b, c in _LINES:
            mark = self.cells[a]
            if mark != " " and mark == self.cells[b] == self.cells[c]:
                return mark
        return None

    @property
    def filled(self) -> int:
        return 9 - self.cells.count(" ")


class TicTacToe(IGameLogic[Board, int]):
    """Tic-tac-toe with faster wins scored higher."""

    def evaluate(self, state: Board) -> int:
        winner = state.winner()
        if winner == "X":
            return mate_score(state.filled)
        if winner == "O":
            return -mate_score(state.filled)
        return DRAW_SCORE

    def generate_moves(self, state: Board, buffer: MoveBuffer[int]) -> int:
        return buffer.extend(idx for idx, cell in enumerate(state.cells) if cell == " ")

    def apply_move(self, state: Board, move: int) -> None:
        state.cells[move] = state.to_move
        state.to_move = "O" if state.to_move == "X" else "X"

    def is_terminal(self, state: Board) -> bool:
        return state.winner() is not None or " " not in state.cells

    def is_maximizing_player(self, state: Board) -> bool:
        return state.to_move == "X"

    def copy_state(self, state: Board) -> Board:
        return Board(list(state.cells), state.to_move)


# ── Explicit game trees ─────────────────────────────────────────────────────

Tree = int | list["Tree"]


@dataclass(slots=True)
class TreeState:
    path: tuple[int, ...] = ()


class TreeLogic(IGameLogic[TreeState, int]):
    """Game over a nested-list tree, recording every evaluated leaf path.

    Args:
        tree: Root node.
        root_maximizing: Whether the side to act at the root maximizes.
        heuristic: Score given to inner nodes evaluated at the depth limit
            (or, under the evaluate policy, to move-less inner nodes).
    """

    def __init__(self, tree: Tree, root_maximizing: bool = True, heuristic: int = 0) -> None:
        self.tree = tree
        self.root_maximizing = root_maximizing
        self.heuristic = heuristic
        self.evaluated: list[tuple[int, ...]] = []

    def node(self, state: TreeState) -> Tree:
        node = self.tree
        for idx in state.path:
            assert isinstance(node, list)
            node = node[idx]
        return node

    def evaluate(self, state: TreeState) -> int:
        self.evaluated.append(state.path)
        node = self.node(state)
        return node if isinstance(node, int) else self.heuristic

    def generate_moves(self, state: TreeState, buffer: MoveBuffer[int]) -> int:
        node = self.node(state)
        if isinstance(node, int):
            return 0
        return buffer.extend(range(len(node)))

    def apply_move(self, state: TreeState, move: int) -> None:
        state.path = state.path + (move,)

    def is_terminal(self, state: TreeState) -> bool:
        return isinstance(self.node(state), int)

    def is_maximizing_player(self, state: TreeState) -> bool:
        return self.root_maximizing == (len(state.path) % 2 == 0)

    def copy_state(self, state: TreeState) -> TreeState:
        return TreeState(state.path)


def plain_minimax(tree: Tree, maximizing: bool) -> int:
    """Reference minimax over a whole tree, no pruning and no depth limit."""
    if isinstance(tree, int):
        return tree
    values = [plain_minimax(child, not maximizing) for child in tree]
    return max(values) if maximizing else min(values)


def count_nodes(tree: Tree) -> int:
    """Nodes below the root (the root itself is not a search call)."""
    if isinstance(tree, int):
        return 0
    return sum(1 + count_nodes(child) for child in tree)


def random_tree(rng: random.Random, depth: int, max_branching: int = 4) -> Tree:
    """Uniform-depth tree with random branching and leaf scores."""
    if depth == 0:
        return rng.randint(-50, 50)
    return [
        random_tree(rng, depth - 1, max_branching)
        for _ in range(rng.randint(1, max_branching))
    ]
