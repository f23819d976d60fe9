#!/usr/bin/env python3
"""CLI entry point for the Rinkipingis scoreboard.

Usage:
    python main.py play              Launch the Pygame scoreboard
    python main.py text              Keep score in the terminal
    python main.py demo [rallies]    Play a random match and print the board
    python main.py chart [rallies]   Play a random match and save a score chart
    python main.py test              Run all tests
"""

import sys
import os

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

OUTPUT_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "output")

TEXT_HELP = "Commands: l=point left  r=point right  u=undo  y=redo  q=quit"


def _rallies_arg(default=60):
    if len(sys.argv) > 2 and sys.argv[2].isdigit():
        return int(sys.argv[2])
    return default


def _random_history(rallies, seed=7):
    """Play `rallies` random points between two named players."""
    import random
    from scoring import history as histories
    from scoring.types import Player

    rng = random.Random(seed)
    history = histories.create_matches("Alice", "Bob", rng=rng)
    for _ in range(rallies):
        history = histories.point(history, Player.random(rng))
    return history


def cmd_play():
    """Launch the Pygame scoreboard."""
    print("Launching Rinkipingis scoreboard...")
    print("Controls: TAB=switch name  ENTER=start  A/L=point  U=undo  R=redo  N=new  Q=quit")
    print("-" * 60)
    from scoreboard.app import run_app
    run_app()


def cmd_text():
    """Keep score in the terminal."""
    from scoreboard.layout import render_text
    from scoreboard.session import ScoreboardSession
    from scoring.types import Player

    session = ScoreboardSession()
    try:
        session.left_name = input("Left player: ")
        session.right_name = input("Right player: ")
    except EOFError:
        print("\n  No player names given.")
        return
    session.start()

    actions = {
        "l": lambda: session.point(Player.LEFT),
        "r": lambda: session.point(Player.RIGHT),
        "u": session.undo,
        "y": session.redo,
    }

    print(TEXT_HELP)
    while True:
        print("=" * 40)
        print(render_text(session.history))
        print(f"  {session.message}")
        try:
            command = input("> ").strip().lower()
        except EOFError:
            break
        if command == "q":
            break
        if command not in actions:
            print(f"  Unknown command: {command!r}. {TEXT_HELP}")
            continue
        actions[command]()


def cmd_demo():
    """Play a random match and print the board."""
    from scoreboard.layout import render_text

    rallies = _rallies_arg()
    print("=" * 60)
    print(f"  RANDOM MATCH: {rallies} rallies")
    print("=" * 60)
    history = _random_history(rallies)
    print(render_text(history))
    print()
    left, right = history.current.score
    print(f"  Games: {left} - {right}")
    print(f"  Snapshots in history: {len(history.matches)}")
    print("=" * 60)


def cmd_chart():
    """Play a random match and save the game score chart."""
    import matplotlib.pyplot as plt
    from scoreboard.charts import chart_game_scores

    print("Generating game score chart...")
    print("-" * 60)
    os.makedirs(OUTPUT_DIR, exist_ok=True)
    path = os.path.join(OUTPUT_DIR, "game_scores.png")
    chart_game_scores(_random_history(_rallies_arg()), save_path=path)
    plt.close("all")
    print(f"\nDone! Chart saved to {path}")


def cmd_test():
    """Run all tests."""
    import subprocess
    print("Running tests...")
    print("-" * 60)
    result = subprocess.run(
        [sys.executable, "-m", "pytest", "tests/", "-v"],
        cwd=os.path.dirname(os.path.abspath(__file__)),
    )
    sys.exit(result.returncode)


COMMANDS = {
    "play": cmd_play,
    "text": cmd_text,
    "demo": cmd_demo,
    "chart": cmd_chart,
    "test": cmd_test,
}


def main():
    if len(sys.argv) < 2 or sys.argv[1] not in COMMANDS:
        print(__doc__)
        print("Available commands:")
        for name, func in COMMANDS.items():
            print(f"  {name:12s} {func.__doc__}")
        sys.exit(1)

    COMMANDS[sys.argv[1]]()


if __name__ == "__main__":
    main()
