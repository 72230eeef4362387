"""
Interactive play script for Block Blast.

Allows playing manually in the terminal or watching random play statistics.
"""
import argparse
import sys
import time
from pathlib import Path
from typing import Any, Dict, Optional
from tqdm import tqdm

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from game.config import GameConfig, load_config
from game.engine import GameEngine, play_random_game
from game.renderer import Renderer, clear_screen
from utils.logger import SessionLogger, MetricsTracker


def create_logger(config: Dict[str, Any], name: str, log_dir: Optional[str] = None) -> Optional[SessionLogger]:
    """Create a session logger if logging is enabled in config or forced by --log-dir."""
    log_config = config.get('logging', {}) or {}
    if log_dir is None and not log_config.get('enabled', False):
        return None
    return SessionLogger(log_dir or log_config.get('log_dir', 'logs'), name)


def parse_move(parts, engine: GameEngine):
    """Turn 'idx row col' tokens into (piece, row, col)."""
    piece_idx, row, col = int(parts[0]), int(parts[1]), int(parts[2])
    if piece_idx < 0:
        raise IndexError(piece_idx)
    return engine.queue[piece_idx], row, col


def play_manual(game_config: GameConfig, seed: int, logger: Optional[SessionLogger] = None) -> None:
    """
    Play Block Blast manually in the terminal.

    Args:
        game_config: Rule constants
        seed: Random seed
        logger: Optional session logger
    """
    engine = GameEngine(config=game_config, seed=seed, logger=logger)
    renderer = Renderer()
    highlight = None

    print("\n" + "=" * 60)
    print("BLOCK BLAST - Manual Play")
    print("=" * 60)
    print("\nControls:")
    print("  Enter move as: piece_idx row col (e.g., '0 3 4')")
    print("  Preview with: ? piece_idx row col")
    print("  Type 'q' to quit")
    print("  Type 'r' to restart")
    print("=" * 60 + "\n")

    while True:
        clear_screen()
        print(renderer.render_game_state(engine, highlight))
        highlight = None

        if engine.is_game_over():
            print("\n*** GAME OVER! ***")
            print(f"Final Score: {engine.score:,}")
            print(f"Moves: {engine.moves_made}")

            action = input("\nPlay again? (y/n): ").strip().lower()
            if action == 'y':
                engine.reset()
                continue
            break

        try:
            user_input = input("\nEnter move (piece row col): ").strip().lower()

            if user_input == 'q':
                print("Thanks for playing!")
                break
            elif user_input == 'r':
                engine.reset()
                continue

            parts = user_input.split()
            preview = bool(parts) and parts[0] == '?'
            if preview:
                parts = parts[1:]
            if len(parts) != 3:
                print("Invalid input. Use format: piece row col")
                time.sleep(1)
                continue

            piece, row, col = parse_move(parts, engine)

            if preview:
                engine.select(piece)
                highlight = engine.preview(row, col)
                if not highlight:
                    print("Piece does not fit there.")
                    time.sleep(1)
                continue

            if not engine.can_place(piece, row, col):
                print("Invalid move! Try again.")
                time.sleep(1)
                continue

            result = engine.place(piece, row, col)

            if result.lines_cleared > 0:
                print(f"\n*** Cleared {result.lines_cleared} lines! "
                      f"+{result.score_gained} points ***")
                time.sleep(1)

        except (ValueError, IndexError):
            print("Invalid input. Use format: piece row col")
            time.sleep(1)

    if logger is not None:
        logger.save_summary(engine.get_statistics())


def play_random(
    game_config: GameConfig,
    num_games: int,
    seed: int,
    logger: Optional[SessionLogger] = None,
) -> Dict[str, Dict[str, float]]:
    """
    Play random games and show statistics.

    Args:
        game_config: Rule constants
        num_games: Number of games to play
        seed: Random seed
        logger: Optional session logger shared by all games
    """
    tracker = MetricsTracker(window_size=num_games)

    for i in tqdm(range(num_games), desc="Random games"):
        stats = play_random_game(seed=seed + i, config=game_config, logger=logger)
        tracker.add('score', stats['score'])
        tracker.add('moves', stats['moves_made'])
        tracker.add('lines', stats['total_lines_cleared'])

    print("\n" + "=" * 60)
    print("RANDOM AGENT STATISTICS")
    print("=" * 60)
    print(f"Games: {num_games}")
    print(f"Mean Score: {tracker.get_mean('score'):.1f} ± {tracker.get_std('score'):.1f}")
    print(f"Max Score: {tracker.get_max('score'):.0f}")
    print(f"Mean Moves: {tracker.get_mean('moves'):.1f}")
    print(f"Mean Lines: {tracker.get_mean('lines'):.1f}")
    print("=" * 60)

    summaries = tracker.get_all_summaries()
    if logger is not None:
        logger.save_summary(summaries)
    return summaries


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Play Block Blast")
    parser.add_argument(
        "--mode",
        type=str,
        choices=["manual", "random"],
        default="manual",
        help="Play mode: play manually or watch random play statistics"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to YAML config (e.g. config/default.yaml)"
    )
    parser.add_argument(
        "--games",
        type=int,
        default=None,
        help="Number of games to play (random mode)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed"
    )
    parser.add_argument(
        "--log-dir",
        type=str,
        default=None,
        help="Write a JSONL event log to this directory"
    )

    args = parser.parse_args()

    config = load_config(args.config) if args.config else {}
    try:
        game_config = GameConfig.from_dict(config)
    except ValueError as e:
        print(f"Invalid config: {e}")
        sys.exit(1)

    play_config = config.get('play', {}) or {}
    seed = args.seed if args.seed is not None else play_config.get('seed', 42)
    games = args.games if args.games is not None else play_config.get('games', 10)

    logger = create_logger(config, args.mode, args.log_dir)

    if args.mode == "manual":
        play_manual(game_config, seed=seed, logger=logger)
    elif args.mode == "random":
        play_random(game_config, num_games=games, seed=seed, logger=logger)


if __name__ == "__main__":
    main()
