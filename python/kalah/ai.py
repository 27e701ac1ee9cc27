from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from .game.board import HOLES, SIDE_A, SIDE_B, TOTAL_MARBLES, Board
from .game.rules import grants_extra_turn, is_terminal, next_to_move


LOG = logging.getLogger("kalah.ai")

Score = int

NO_MOVE = -1
DEFAULT_DEPTH = 10
WIN_SCORE = 1000


@dataclass(frozen=True)
class HeuristicWeights:
    """Fixed weights of the linear evaluation terms."""

    score: int = 3
    own_holes: int = 1
    opponent_holes: int = -1


DEFAULT_WEIGHTS = HeuristicWeights()


@dataclass(frozen=True)
class SearchResult:
    move: int
    score: Score


# Static score of a leaf, from A's point of view
def evaluate(
    board: Board,
    perspective_is_a: bool,
    depth: int,
    weights: HeuristicWeights = DEFAULT_WEIGHTS,
) -> Score:
    diff = board.store_a - board.store_b

    if perspective_is_a:
        mine, theirs = sum(board.holes_a), sum(board.holes_b)
    else:
        mine, theirs = sum(board.holes_b), sum(board.holes_a)

    half = TOTAL_MARBLES // 2

    if (mine > theirs and is_terminal(board)[0]) or board.store_a > half:
        return WIN_SCORE * depth

    if (theirs < mine and is_terminal(board)[0]) or board.store_b > half:
        return -WIN_SCORE * depth

    if not perspective_is_a:
        mine = -mine
        theirs = -theirs

    return diff * weights.score + mine * weights.own_holes + theirs * weights.opponent_holes


class MinimaxAgent:
    def __init__(self, depth: int = DEFAULT_DEPTH, weights: HeuristicWeights = DEFAULT_WEIGHTS) -> None:
        if depth < 1:
            raise ValueError(f"Search depth must be at least 1, got {depth}")
        self.depth = depth
        self.weights = weights
        self.nodes_searched = 0

    def choose_move(self, board: Board, a_to_move: bool) -> int:
        # Root entry point: hole index for the side to move
        self.nodes_searched = 0
        result = self._search(board, self.depth, -math.inf, math.inf, a_to_move)
        LOG.debug(
            "Chose hole %d with score %d after %d nodes",
            result.move,
            result.score,
            self.nodes_searched,
        )
        return result.move

    def score_node(self, board: Board, depth: int, alpha: float, beta: float, a_to_move: bool) -> Score:
        self.nodes_searched = 0
        return self._search(board, depth, alpha, beta, a_to_move).score

    def _search(self, board: Board, depth: int, alpha: float, beta: float, a_to_move: bool) -> SearchResult:
        # Depth-limited minimax core
        self.nodes_searched += 1

        terminal, final_board = is_terminal(board)
        if terminal or depth == 0:
            return SearchResult(NO_MOVE, evaluate(final_board, a_to_move, depth, self.weights))

        side = SIDE_A if a_to_move else SIDE_B
        holes = board.holes(side)

        best_move = NO_MOVE
        best_score = -math.inf if a_to_move else math.inf

        for hole in range(HOLES):
            marbles = holes[hole]
            if marbles == 0:
                continue

            child = board.sow(side, hole)
            follower = next_to_move(a_to_move, grants_extra_turn(hole, marbles))
            value = self._search(child, depth - 1, alpha, beta, follower).score

            if a_to_move:
                if value > best_score:
                    best_score = value
                    best_move = hole
                alpha = max(alpha, value)
            else:
                if value < best_score:
                    best_score = value
                    best_move = hole
                beta = min(beta, value)

            if beta <= alpha:
                break

        return SearchResult(best_move, best_score)

    @property
    def description(self) -> str:
        return f"Minimax(depth={self.depth})"


__all__ = [
    "DEFAULT_DEPTH",
    "DEFAULT_WEIGHTS",
    "NO_MOVE",
    "WIN_SCORE",
    "HeuristicWeights",
    "MinimaxAgent",
    "SearchResult",
    "evaluate",
]
