#!/usr/bin/env python3
"""
CLI tool to replay a single turn offline

Reads a saved /move request body and prints the safe moves and the move
the service would choose for it.

Usage:
    python decide_move.py <path_to_request.json>

Examples:
    # Decide with the default bounds rule
    python decide_move.py ./turn_42.json

    # Reproducible choice with the corrected bounds rule, board included
    python decide_move.py ./turn_42.json --strict-bounds --seed 7 --show-board
"""

import os
import sys
import json
import argparse
import logging
import random

# Add parent directory to path for imports
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain.errors import RequestDecodeError  # noqa: E402
from domain.game_state import GameRequest  # noqa: E402
from domain.rules import compute_safe_moves  # noqa: E402
from players import RandomPlayer  # noqa: E402

logger = logging.getLogger(__name__)


def load_request(file_path: str) -> GameRequest:
    """Load and decode a request body from a local JSON file"""
    if not os.path.exists(file_path):
        raise FileNotFoundError(f"Request file not found: {file_path}")

    with open(file_path, 'r') as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise RequestDecodeError(f"invalid JSON: {e}") from e

    return GameRequest.from_json(data)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description='Choose a move for a saved Battlesnake /move request',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )
    parser.add_argument('request_file', help='Path to a /move request body (JSON)')
    parser.add_argument(
        '--strict-bounds',
        action='store_true',
        help='Bound y by height - 1 instead of height + 1'
    )
    parser.add_argument('--seed', type=int, default=None, help='Seed for the move generator')
    parser.add_argument('--show-board', action='store_true', help='Print the board before the move')
    parser.add_argument('--verbose', action='store_true', help='Enable debug logging')
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        game_request = load_request(args.request_file)
    except (FileNotFoundError, RequestDecodeError) as e:
        logger.error(str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 1

    player = RandomPlayer(
        rng=random.Random(args.seed) if args.seed is not None else None,
        strict_bounds=args.strict_bounds,
    )
    safe_moves = compute_safe_moves(game_request.you.head, game_request.board, args.strict_bounds)

    if args.show_board:
        print(game_request.board.render())
        print()

    print(f"Safe moves: {', '.join(sorted(safe_moves)) or '(none)'}")
    print(f"Move: {player.select_move(safe_moves)}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
