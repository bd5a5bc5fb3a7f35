"""
Board rendering with matplotlib.

Static pictures of the engine state for demos and debugging:
- plot_board: a grid, lit cells bright, unlit cells dark
- plot_toggle_mask: which cells one click flips (pattern + clipping)
- plot_scores: leaderboard as a bar chart of times

Row 0 is drawn at the top, matching how the board is laid out on screen.
"""

from __future__ import annotations
from pathlib import Path
from typing import TYPE_CHECKING, Sequence

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.colors import ListedColormap
from matplotlib.figure import Figure
from matplotlib.axes import Axes

from switchgrid.core.grid import toggle_mask
from switchgrid.scoring.scores import format_time

if TYPE_CHECKING:
    from switchgrid.core.grid import Grid
    from switchgrid.core.patterns import Pattern
    from switchgrid.scoring.scores import Score


# Unlit: deep slate, lit: warm white
CMAP_BOARD = ListedColormap([(0.145, 0.157, 0.196), (0.993, 0.978, 0.925)], name="board")
CLICK_COLOR = "tab:red"


def _draw_cells(ax: Axes, state: np.ndarray, cmap=CMAP_BOARD) -> None:
    size = state.shape[0]
    ax.imshow(state.astype(np.uint8), cmap=cmap, vmin=0, vmax=1, origin="upper", aspect="equal")

    # Cell borders
    ax.set_xticks(np.arange(-0.5, size, 1), minor=True)
    ax.set_yticks(np.arange(-0.5, size, 1), minor=True)
    ax.grid(which="minor", color="grey", linewidth=1.5)
    ax.tick_params(which="minor", length=0)
    ax.set_xticks(range(size))
    ax.set_yticks(range(size))
    ax.set_xlabel("col")
    ax.set_ylabel("row")


def plot_board(
    grid: "Grid",
    title: str = "",
    ax: Axes | None = None,
    clicks: Sequence[tuple[int, int]] = (),
    figsize: tuple[float, float] = (5, 5),
) -> tuple[Figure, Axes]:
    """
    Plot a grid.

    Args:
        grid: Board to draw
        title: Plot title
        ax: Existing axes to plot on (creates new figure if None)
        clicks: Cells to mark with a dot (e.g. scramble picks)
        figsize: Figure size if creating new figure

    Returns:
        (fig, ax) tuple
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
    else:
        fig = ax.figure

    _draw_cells(ax, grid.lit)

    if clicks:
        rows, cols = zip(*clicks)
        ax.scatter(cols, rows, color=CLICK_COLOR, s=60, zorder=5)

    ax.set_title(title or f"{grid.size}×{grid.size} board, {grid.lit_count} lit")
    return fig, ax


def plot_toggle_mask(
    pattern: "Pattern",
    size: int,
    row: int,
    col: int,
    ax: Axes | None = None,
    figsize: tuple[float, float] = (5, 5),
) -> tuple[Figure, Axes]:
    """Plot the cells flipped by clicking (row, col) with a pattern."""
    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
    else:
        fig = ax.figure

    _draw_cells(ax, toggle_mask(size, row, col, pattern))
    ax.scatter([col], [row], color=CLICK_COLOR, s=80, marker="x", zorder=5)
    ax.set_title(f"{pattern.name} at ({row}, {col})")
    return fig, ax


def plot_scores(
    scores: Sequence["Score"],
    title: str = "Leaderboard",
    ax: Axes | None = None,
    figsize: tuple[float, float] = (8, 5),
) -> tuple[Figure, Axes]:
    """Horizontal bar chart of score times, fastest on top."""
    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
    else:
        fig = ax.figure

    if not scores:
        ax.text(0.5, 0.5, "No scores yet", ha="center", va="center", transform=ax.transAxes)
        ax.set_axis_off()
        ax.set_title(title)
        return fig, ax

    positions = np.arange(len(scores))
    times = [score.time / 10 for score in scores]
    labels = [f"#{i + 1}  {score.moves} moves" for i, score in enumerate(scores)]

    bars = ax.barh(positions, times, color="steelblue")
    for bar, score in zip(bars, scores):
        ax.text(bar.get_width(), bar.get_y() + bar.get_height() / 2,
                f" {format_time(score.time)}", va="center", fontsize=9)

    ax.set_yticks(positions)
    ax.set_yticklabels(labels)
    ax.invert_yaxis()
    ax.set_xlabel("time (s)")
    ax.set_title(title)
    return fig, ax


def save_figure(fig: Figure, path: str | Path, dpi: int = 150, **kwargs) -> None:
    """Save figure to file, creating parent directories."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(path, dpi=dpi, bbox_inches="tight", **kwargs)
