"""Command-line entry point: read a board snapshot on stdin, print the best hole."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .ai import DEFAULT_DEPTH, NO_MOVE, MinimaxAgent
from .protocol import ProtocolError, encode_move, parse_snapshot


LOG = logging.getLogger("kalah.cli")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Kalah next-move engine")
    parser.add_argument("--depth", type=int, default=DEFAULT_DEPTH)
    parser.add_argument("--log-level", default="WARNING")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.WARNING))

    try:
        snapshot = parse_snapshot(sys.stdin.read())
    except ProtocolError as exc:
        LOG.error("Malformed board snapshot: %s", exc)
        return 1

    try:
        agent = MinimaxAgent(depth=args.depth)
    except ValueError as exc:
        LOG.error("%s", exc)
        return 1

    LOG.info("Searching for player %d with %s", snapshot.player, agent.description)
    move = agent.choose_move(snapshot.board, snapshot.a_to_move)
    if move == NO_MOVE:
        LOG.warning("No move available for player %d", snapshot.player)
        return 1

    LOG.info("Searched %d nodes", agent.nodes_searched)
    sys.stdout.write(encode_move(move))
    sys.stdout.flush()
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI invocation
    sys.exit(main())
