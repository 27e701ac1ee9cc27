"""Game-over and turn-continuation rules built on top of :mod:`kalah.game.board`."""

from __future__ import annotations

from typing import Tuple

from .board import HOLES, Board


# Own holes, own store, opponent holes
LAP = 2 * HOLES + 1


def finalize(board: Board) -> Board:
    """Sweep each side's remaining marbles into its own store."""

    return Board(
        store_a=board.store_a + sum(board.holes_a),
        store_b=board.store_b + sum(board.holes_b),
        holes_a=(0,) * HOLES,
        holes_b=(0,) * HOLES,
    )


def is_terminal(board: Board) -> Tuple[bool, Board]:
    """Return whether either row is empty, plus the board to score from.

    The second item is the finalized board when the game is over and the
    unchanged input otherwise.
    """

    if not any(board.holes_a) or not any(board.holes_b):
        return True, finalize(board)
    return False, board


def grants_extra_turn(hole: int, marbles: int) -> bool:
    """Whether sowing ``marbles`` from ``hole`` ends in the mover's store."""

    distance = HOLES - hole
    return marbles >= distance and (marbles - distance) % LAP == 0


def next_to_move(a_to_move: bool, extra_turn: bool) -> bool:
    return a_to_move if extra_turn else not a_to_move
