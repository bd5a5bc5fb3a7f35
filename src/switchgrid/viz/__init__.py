"""
Visualization utilities.

- Board heatmaps (lit / unlit)
- Toggle masks
- Leaderboard bars
"""

from switchgrid.viz.board import (
    plot_board,
    plot_toggle_mask,
    plot_scores,
    save_figure,
)

__all__ = [
    "plot_board",
    "plot_toggle_mask",
    "plot_scores",
    "save_figure",
]
