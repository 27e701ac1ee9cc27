"""Text codec for board snapshots and chosen moves."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from .game.board import HOLES, TOTAL_MARBLES, Board


# player, store 1, holes 1, store 2, holes 2
FIELD_COUNT = 2 * HOLES + 3


class ProtocolError(ValueError):
    pass


@dataclass(frozen=True)
class Snapshot:
    player: int
    board: Board

    @property
    def a_to_move(self) -> bool:
        return self.player == 1


def parse_snapshot(text: str) -> Snapshot:
    """Parse ``player store1 holes1... store2 holes2...`` into a snapshot.

    Player 1 always sits on side A.
    """

    tokens = text.split()
    if len(tokens) != FIELD_COUNT:
        raise ProtocolError(f"Expected {FIELD_COUNT} integers, got {len(tokens)}")

    try:
        values: List[int] = [int(token) for token in tokens]
    except ValueError as exc:
        raise ProtocolError("Snapshot values must be integers") from exc

    player = values[0]
    if player not in (1, 2):
        raise ProtocolError(f"Player must be 1 or 2, got {player}")

    try:
        board = Board(
            store_a=values[1],
            holes_a=tuple(values[2 : 2 + HOLES]),
            store_b=values[2 + HOLES],
            holes_b=tuple(values[3 + HOLES :]),
        )
    except ValueError as exc:
        raise ProtocolError(str(exc)) from exc

    total = board.total_marbles()
    if total != TOTAL_MARBLES:
        raise ProtocolError(f"Board holds {total} marbles, expected {TOTAL_MARBLES}")

    return Snapshot(player=player, board=board)


def encode_move(hole: int) -> str:
    """Render a 0-based hole index as the 1-based answer."""

    if not 0 <= hole < HOLES:
        raise ProtocolError(f"No move to encode: {hole}")
    return str(hole + 1)
