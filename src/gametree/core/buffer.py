"""Fixed-capacity move buffer."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar, overload

MoveT = TypeVar("MoveT")


class MoveBuffer(Generic[MoveT]):
    """Ordered move storage with a capacity fixed at construction.

    Slots are allocated once and reused after :meth:`clear`.  Appending to
    a full buffer stores nothing: :meth:`append` returns *False* and the
    buffer remembers the overflow in :attr:`truncated` / :attr:`dropped`.
    """

    __slots__ = ("_slots", "_count", "_dropped")

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("Buffer capacity must be >= 1")
        self._slots: list[MoveT | None] = [None] * capacity
        self._count = 0
        self._dropped = 0

    @property
    def capacity(self) -> int:
        return len(self._slots)

    @property
    def is_full(self) -> bool:
        return self._count == len(self._slots)

    @property
    def truncated(self) -> bool:
        """True if an append was refused since the last clear."""
        return self._dropped > 0

    @property
    def dropped(self) -> int:
        return self._dropped

    def append(self, move: MoveT) -> bool:
        if self._count == len(self._slots):
            self._dropped += 1
            return False
        self._slots[self._count] = move
        self._count += 1
        return True

    def extend(self, moves: Iterable[MoveT]) -> int:
        """Append every move in *moves*; return how many were stored."""
        stored = 0
        for move in moves:
            if self.append(move):
                stored += 1
        return stored

    def clear(self) -> None:
        # Release references held by used slots.
        for idx in range(self._count):
            self._slots[idx] = None
        self._count = 0
        self._dropped = 0

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[MoveT]:
        for idx in range(self._count):
            yield self._slots[idx]  # type: ignore[misc]

    @overload
    def __getitem__(self, index: int) -> MoveT: ...

    @overload
    def __getitem__(self, index: slice) -> list[MoveT]: ...

    def __getitem__(self, index: int | slice) -> MoveT | list[MoveT]:
        if isinstance(index, slice):
            return self._slots[: self._count][index]  # type: ignore[return-value]
        if index < 0:
            index += self._count
        if not 0 <= index < self._count:
            raise IndexError("MoveBuffer index out of range")
        return self._slots[index]  # type: ignore[return-value]

    def __repr__(self) -> str:
        return f"MoveBuffer({len(self)}/{self.capacity})"
