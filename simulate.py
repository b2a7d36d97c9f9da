#!/usr/bin/env python3
"""
Random-play match simulator.
Plays full matches by picking uniformly among the legal tokens of each roll
and reports how the seats fared.
"""

import argparse
import sys
from collections import Counter
from typing import Optional

import numpy as np
from dotenv import load_dotenv
from loguru import logger

from ludo_core import GameConfig, LudoError, LudoGame, RandomDice, TurnPhase

# Load environment configuration
load_dotenv()


def parse_args(argv=None) -> argparse.Namespace:
    config = GameConfig.from_env()
    parser = argparse.ArgumentParser(
        description="Simulate random-play Ludo matches",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("--players", type=int, default=4, help="Seats per match (2-4)")
    parser.add_argument("--games", type=int, default=10, help="Number of matches")
    parser.add_argument("--seed", type=int, default=config.dice_seed, help="Random seed")
    parser.add_argument(
        "--max-turns",
        type=int,
        default=config.max_turns,
        help="Maximum rolls per match before declaring a draw",
    )
    parser.add_argument(
        "--manual-single-move",
        action="store_true",
        help="Require a selection even when only one token can move",
    )
    parser.add_argument("--log-level", type=str, default=config.log_level)
    parser.add_argument("--quiet", action="store_true", help="Only log the summary")
    args = parser.parse_args(argv)
    args.auto_apply = config.auto_apply_single_move and not args.manual_single_move
    return args


def play_match(
    game: LudoGame, rng: np.random.Generator, max_turns: int
) -> tuple[Optional[int], int, int]:
    """
    Drive a match to completion.

    Returns:
        (winner_id or None on timeout, rolls taken, tokens captured)
    """
    rolls = 0
    captures = 0
    while not game.game_over and rolls < max_turns:
        result = game.roll_dice()
        rolls += 1
        captures += len(result.captured)
        if game.turn.phase is TurnPhase.AWAITING_MOVE:
            choice = int(rng.choice(result.legal_token_ids))
            game.select_token(choice)
            captures += len(game.last_move.captured)
    return game.turn.winner_id, rolls, captures


def main(argv=None) -> int:
    args = parse_args(argv)
    logger.remove()
    logger.add(sys.stderr, level=args.log_level)

    rng = np.random.default_rng(args.seed)
    dice = RandomDice(args.seed)
    config = GameConfig(auto_apply_single_move=args.auto_apply, dice_seed=args.seed)
    try:
        game = LudoGame(args.players, dice=dice, config=config)
    except LudoError as exc:
        logger.error(f"Cannot start simulation: {exc}")
        return 2

    wins: Counter = Counter()
    roll_counts = []
    capture_counts = []
    draws = 0
    for game_number in range(1, args.games + 1):
        game.restart()
        winner, rolls, captures = play_match(game, rng, args.max_turns)
        roll_counts.append(rolls)
        capture_counts.append(captures)
        if winner is None:
            draws += 1
            if not args.quiet:
                logger.info(f"Game {game_number}: DRAW after {rolls} rolls")
            continue
        wins[winner] += 1
        if not args.quiet:
            color = game.players[winner].color.value
            logger.info(
                f"Game {game_number}: player {winner} ({color}) wins after "
                f"{rolls} rolls, {captures} captures"
            )

    logger.info(f"Played {args.games} {args.players}-player games")
    for player in game.players:
        logger.info(f"   • Player {player.player_id} ({player.color.value}): {wins[player.player_id]} wins")
    if draws:
        logger.info(f"   • Draws: {draws}")
    if roll_counts:
        logger.info(
            f"   • Rolls per game: mean {np.mean(roll_counts):.1f}, max {int(np.max(roll_counts))}"
        )
        logger.info(f"   • Captures per game: mean {np.mean(capture_counts):.1f}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
