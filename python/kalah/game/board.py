from __future__ import annotations

from dataclasses import dataclass, replace
from typing import List, Tuple


PlayerId = int

SIDE_A: PlayerId = 1
SIDE_B: PlayerId = 2

HOLES = 6
INITIAL_MARBLES = 4
TOTAL_MARBLES = 2 * HOLES * INITIAL_MARBLES


# Flip between sides
def opponent(side: PlayerId) -> PlayerId:
    return SIDE_B if side == SIDE_A else SIDE_A


@dataclass(frozen=True)
class Board:
    """Snapshot of both rows and both stores.

    Side A is always the maximizing side of the search. Holes are indexed
    0..5 in sowing order, so hole ``i`` of A faces hole ``i`` of B.
    """

    store_a: int
    store_b: int
    holes_a: Tuple[int, ...]
    holes_b: Tuple[int, ...]

    def __post_init__(self) -> None:
        for name in ("holes_a", "holes_b"):
            row = tuple(getattr(self, name))
            if len(row) != HOLES:
                raise ValueError(f"{name} must have {HOLES} holes, got {len(row)}")
            object.__setattr__(self, name, row)

        counts = (self.store_a, self.store_b) + self.holes_a + self.holes_b
        if any(count < 0 for count in counts):
            raise ValueError("Marble counts must be non-negative")

    @classmethod
    def opening(cls) -> "Board":
        row = (INITIAL_MARBLES,) * HOLES
        return cls(store_a=0, store_b=0, holes_a=row, holes_b=row)

    def holes(self, side: PlayerId) -> Tuple[int, ...]:
        return self.holes_a if side == SIDE_A else self.holes_b

    def store(self, side: PlayerId) -> int:
        return self.store_a if side == SIDE_A else self.store_b

    def total_marbles(self) -> int:
        return self.store_a + self.store_b + sum(self.holes_a) + sum(self.holes_b)

    def sow(self, side: PlayerId, hole: int) -> "Board":
        """Play ``hole`` for ``side`` and return the resulting board.

        Marbles go around the mover's row, the mover's store and the
        opponent's row, skipping the opponent's store. A last marble that
        lands in an empty own hole pulls in the opponent's marbles at the
        same index.
        """

        if not 0 <= hole < HOLES:
            raise IndexError(f"Hole index out of range: {hole}")

        own: List[int] = list(self.holes(side))
        other: List[int] = list(self.holes(opponent(side)))
        store = self.store(side)

        marbles = own[hole]
        if marbles == 0:
            raise ValueError(f"Cannot sow from empty hole {hole}")
        own[hole] = 0
        index = hole + 1

        while marbles > 0:
            while index < HOLES and marbles > 0:
                if marbles == 1 and own[index] == 0:
                    own[index] += other[index]
                    other[index] = 0
                own[index] += 1
                index += 1
                marbles -= 1

            if marbles == 0:
                break

            store += 1
            marbles -= 1
            if marbles == 0:
                break

            index = 0
            while index < HOLES and marbles > 0:
                other[index] += 1
                index += 1
                marbles -= 1
            index = 0

        if side == SIDE_A:
            return replace(self, store_a=store, holes_a=tuple(own), holes_b=tuple(other))
        return replace(self, store_b=store, holes_a=tuple(other), holes_b=tuple(own))
