"""
Dot-plot plotting
"""
import matplotlib.pyplot as plt
import numpy as np
from typing import Optional, Sequence, Tuple


def plot_dotplot(
    grid: np.ndarray,
    seq1: Sequence,
    seq2: Sequence,
    figsize: Tuple[int, int] = (8, 8),
    font_size: int = 8,
    marker_size: float = 20.0,
    show_labels: bool = True,
    title: Optional[str] = None,
) -> plt.Figure:
    """
    Draw the identity grid as a scatter of matching cells.
    - seq2 along the x axis (top), seq1 down the y axis.
    - Symbol tick labels only when show_labels=True (turn off for long input).
    """
    fig, ax = plt.subplots(figsize=figsize)

    rows, cols = np.nonzero(grid)
    ax.scatter(cols, rows, s=marker_size, c="k", marker="s")

    n_rows, n_cols = grid.shape
    ax.set_xlim(-0.5, max(n_cols, 1) - 0.5)
    ax.set_ylim(max(n_rows, 1) - 0.5, -0.5)
    ax.set_aspect("equal")
    ax.xaxis.tick_top()

    if show_labels:
        ax.set_xticks(range(n_cols))
        ax.set_yticks(range(n_rows))
        ax.set_xticklabels([str(c) for c in seq2], fontsize=font_size)
        ax.set_yticklabels([str(c) for c in seq1], fontsize=font_size)

    ax.set_xlabel("Sequence 2", fontsize=font_size)
    ax.set_ylabel("Sequence 1", fontsize=font_size)
    ax.xaxis.set_label_position("top")

    if title:
        ax.set_title(title, fontsize=font_size + 2, fontweight="bold", pad=20)

    plt.tight_layout()
    return fig
