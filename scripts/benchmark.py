"""
Performance benchmark script for Block Blast.

Tests the speed of the game engine.
"""
import argparse
import sys
import time
from pathlib import Path
from typing import Dict, Any
from tqdm import tqdm

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


def benchmark_engine(num_games: int = 200, seed: int = 42) -> Dict[str, float]:
    """
    Benchmark the game engine speed.

    Args:
        num_games: Number of games to play
        seed: Random seed

    Returns:
        Dictionary of benchmark results
    """
    from game.engine import GameEngine

    total_moves = 0
    total_time = 0.0

    for i in tqdm(range(num_games), desc="Benchmarking engine"):
        engine = GameEngine(seed=seed + i)

        start = time.perf_counter()
        while not engine.is_game_over():
            valid_moves = engine.get_valid_moves()
            if not valid_moves:
                break
            piece, row, col = valid_moves[engine.rng.integers(len(valid_moves))]
            engine.place(piece, row, col)
            total_moves += 1
        total_time += time.perf_counter() - start

    return {
        'num_games': num_games,
        'total_moves': total_moves,
        'total_time': total_time,
        'moves_per_second': total_moves / total_time if total_time > 0 else 0.0,
        'games_per_second': num_games / total_time if total_time > 0 else 0.0,
        'avg_moves_per_game': total_moves / num_games if num_games > 0 else 0.0,
    }


def benchmark_game_over_check(num_checks: int = 10000, seed: int = 42) -> Dict[str, float]:
    """Time the exhaustive game-over search on a fresh board."""
    from game.engine import GameEngine

    engine = GameEngine(seed=seed)
    start = time.perf_counter()
    for _ in range(num_checks):
        engine.check_game_over()
    total_time = time.perf_counter() - start

    return {
        'num_checks': num_checks,
        'total_time': total_time,
        'checks_per_second': num_checks / total_time if total_time > 0 else 0.0,
    }


def print_results(title: str, results: Dict[str, Any]) -> None:
    print(f"\n{title}")
    print("-" * 40)
    for key, value in results.items():
        if isinstance(value, float):
            print(f"  {key}: {value:,.2f}")
        else:
            print(f"  {key}: {value:,}")


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Benchmark Block Blast")
    parser.add_argument("--games", type=int, default=200, help="Number of games")
    parser.add_argument("--checks", type=int, default=10000, help="Number of game-over checks")
    parser.add_argument("--seed", type=int, default=42, help="Random seed")
    args = parser.parse_args()

    print_results("ENGINE", benchmark_engine(args.games, args.seed))
    print_results("GAME-OVER CHECK", benchmark_game_over_check(args.checks, args.seed))


if __name__ == "__main__":
    main()
