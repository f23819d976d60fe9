"""Matplotlib charts of a match: points per game for both players."""

import matplotlib
matplotlib.use("Agg")  # Non-interactive backend
import matplotlib.pyplot as plt
import numpy as np

from scoring import history as histories
from scoring.types import MatchHistory, OngoingGame, Player

LEFT_COLOR = "#4ecdc4"
RIGHT_COLOR = "#e94560"


def _style_chart(ax, title):
    """Apply dark theme styling to chart."""
    ax.set_facecolor("#0f0f1a")
    ax.set_title(title, color="#e0e0e0", fontsize=13, fontweight="bold", pad=12)
    ax.tick_params(colors="#888888", labelsize=9)
    ax.spines["top"].set_visible(False)
    ax.spines["right"].set_visible(False)
    ax.spines["bottom"].set_color("#333333")
    ax.spines["left"].set_color("#333333")
    ax.xaxis.label.set_color("#aaaaaa")
    ax.yaxis.label.set_color("#aaaaaa")


def chart_game_scores(history: MatchHistory, save_path=None):
    """Grouped bar chart: points of each player in every game.

    The ongoing game is included (hatched) when any point has been played
    in it.
    """
    match = history.current
    shown = list(match.finished_games)
    current = match.current_game
    ongoing = isinstance(current, OngoingGame) and current.points_left + current.points_right > 0
    if ongoing:
        shown.append(current)

    left_name = histories.player_name(history, Player.LEFT)
    right_name = histories.player_name(history, Player.RIGHT)
    left_games, right_games = match.score

    fig, ax = plt.subplots(figsize=(8, 5))
    fig.set_facecolor("#0f0f1a")
    _style_chart(ax, f"{left_name} {left_games} - {right_games} {right_name}")

    x = np.arange(len(shown))
    width = 0.38
    left_points = [g.points_left for g in shown]
    right_points = [g.points_right for g in shown]

    left_bars = ax.bar(x - width / 2, left_points, width, color=LEFT_COLOR, label=left_name, alpha=0.85)
    right_bars = ax.bar(x + width / 2, right_points, width, color=RIGHT_COLOR, label=right_name, alpha=0.85)
    for bars, values in ((left_bars, left_points), (right_bars, right_points)):
        for bar, value in zip(bars, values):
            ax.text(
                bar.get_x() + bar.get_width() / 2, bar.get_height() + 0.2,
                str(value), ha="center", va="bottom", fontsize=8, color="#aaa",
            )
    if ongoing:
        left_bars[-1].set_hatch("//")
        right_bars[-1].set_hatch("//")

    labels = [f"Game {i + 1}" for i in range(len(shown))]
    if ongoing:
        labels[-1] += " (live)"
    ax.set_xticks(x)
    ax.set_xticklabels(labels)
    ax.set_ylabel("Points")
    ax.legend(facecolor="#1a1a2e", edgecolor="#333", labelcolor="#e0e0e0", fontsize=9)
    ax.grid(True, alpha=0.15, axis="y")

    plt.tight_layout()
    if save_path:
        fig.savefig(save_path, dpi=150, facecolor=fig.get_facecolor())
    return fig
