"""
Plain-text rendering of score matrices and alignments
"""

from typing import Iterable, Optional, Sequence, Tuple

import numpy as np

from .pairwise import AlignmentResult


def matrix_to_string(
    matrix: np.ndarray,
    seq1: Sequence,
    seq2: Sequence,
    path: Optional[Iterable[Tuple[int, int]]] = None
) -> str:
    """
    Render the DP matrix as a text table.

    Rows are labelled with seq1 symbols, columns with seq2 symbols; row 0 and
    column 0 are the gap borders. If ``path`` is given every cell gets a
    one-character suffix, '*' when the cell lies on the path.

    Example:
        >>> result = compute_alignment("AC", "CA")
        >>> print(matrix_to_string(result.matrix, "AC", "CA"))
                 C    A
        -----------------
          |    0  -1  -2
          A |   -1  -1   0
          C |   -2   0  -1
        <BLANKLINE>
    """
    n_rows, n_cols = matrix.shape
    on_path = set(path) if path is not None else None

    lines = []
    lines.append("     " + "".join(f" {str(c):>4}" for c in seq2))
    lines.append("-----" + "----" * n_cols)

    for i in range(n_rows):
        label = "  | " if i == 0 else f" {str(seq1[i - 1]):>2} | "
        cells = []
        for j in range(n_cols):
            cell = f" {int(matrix[i, j]):3d}"
            if on_path is not None:
                cell += "*" if (i, j) in on_path else " "
            cells.append(cell)
        lines.append(label + "".join(cells))

    return "\n".join(lines) + "\n"


def alignment_to_string(result: AlignmentResult, width: int = 60) -> str:
    """Score line followed by wrapped blocks of seq1 / match line / seq2"""
    if width <= 0:
        raise ValueError(f"width must be positive, got {width}")

    lines = [f"Score: {result.score}", ""]
    match = result.match_string
    for start in range(0, len(result.seq1_aligned), width):
        end = start + width
        lines.append(f"seq1: {result.seq1_aligned[start:end]}")
        lines.append(f"      {match[start:end]}")
        lines.append(f"seq2: {result.seq2_aligned[start:end]}")
        lines.append("")
    return "\n".join(lines)


def format_report(result: AlignmentResult) -> str:
    """Matrix section followed by the score and both aligned sequences"""
    out = []
    out.append("===== NEEDLEMAN-WUNSCH DP MATRIX =====\n")
    out.append(matrix_to_string(result.matrix, result.seq1_original, result.seq2_original))
    out.append("\n===== ALIGNMENT =====\n")
    out.append(f"Score: {result.score}\n\n")
    out.append(result.seq1_aligned + "\n")
    out.append(result.seq2_aligned + "\n")
    return "".join(out)
