"""
Score matrix plotting (heatmap with traceback path)
"""
import matplotlib.pyplot as plt
from typing import Optional, Sequence, Tuple
from .pairwise import AlignmentResult


# ---------- helpers ----------
def _axis_labels(seq: Sequence) -> list:
    """leading '-' for the gap border row/column"""
    return ["-"] + [str(c) for c in seq]


# ---------- main API ----------
def plot_score_matrix(
    result: AlignmentResult,
    figsize: Tuple[int, int] = (8, 8),
    annotate: bool = True,
    show_path: bool = True,
    font_size: int = 8,
    cmap: str = "viridis",
    title: Optional[str] = None,
) -> plt.Figure:
    """
    Draw the Needleman-Wunsch matrix as a heatmap.
    - Rows follow seq1, columns follow seq2 (index 0 = gap border).
    - Cell values printed when annotate=True.
    - Traceback path drawn as a line with markers.
    """
    matrix = result.matrix
    fig, ax = plt.subplots(figsize=figsize)

    im = ax.imshow(matrix, cmap=cmap, aspect="equal", origin="upper")
    fig.colorbar(im, ax=ax, fraction=0.046, pad=0.04, label="score")

    n_rows, n_cols = matrix.shape
    ax.set_xticks(range(n_cols))
    ax.set_yticks(range(n_rows))
    ax.set_xticklabels(_axis_labels(result.seq2_original), fontsize=font_size)
    ax.set_yticklabels(_axis_labels(result.seq1_original), fontsize=font_size)
    ax.xaxis.tick_top()

    if annotate:
        on_path = set(result.path) if show_path else set()
        for i in range(n_rows):
            for j in range(n_cols):
                ax.text(j, i, f"{int(matrix[i, j])}", ha="center", va="center",
                        fontsize=font_size,
                        fontweight="bold" if (i, j) in on_path else "normal",
                        color="white")

    if show_path and result.path:
        rows = [i for i, _ in result.path]
        cols = [j for _, j in result.path]
        ax.plot(cols, rows, "r-", lw=2, alpha=0.7)
        ax.plot(cols, rows, "ro", ms=4, alpha=0.7)

    if title is None:
        title = f"Needleman-Wunsch score matrix (score = {result.score})"
    ax.set_title(title, fontsize=font_size + 2, fontweight="bold", pad=20)

    plt.tight_layout()
    return fig
