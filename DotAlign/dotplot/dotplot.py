"""
Dot-plot identity grid between two sequences.

grid[i, j] is True iff seq1[i] == seq2[j]. Comparison is case-sensitive on
the symbols as given; callers upper-case nucleotide input beforehand.
"""
import asyncio
from typing import Sequence

import numpy as np


def _encode_codepoints(seq: str) -> np.ndarray:
    """str -> int64 array of code points (one per symbol)"""
    return np.fromiter(map(ord, seq), dtype=np.int64, count=len(seq))


class DotPlotEngine:
    """Builds the identity grid; str input is compared vectorised."""

    def build(self, seq1: Sequence, seq2: Sequence) -> np.ndarray:
        if isinstance(seq1, str) and isinstance(seq2, str):
            c1 = _encode_codepoints(seq1)
            c2 = _encode_codepoints(seq2)
            grid = c1[:, None] == c2[None, :]
        else:
            grid = np.zeros((len(seq1), len(seq2)), dtype=bool)
            for i, a in enumerate(seq1):
                for j, b in enumerate(seq2):
                    grid[i, j] = a == b

        grid.flags.writeable = False
        return grid


def compute_dotplot(seq1: Sequence, seq2: Sequence) -> np.ndarray:
    """
    Identity grid of shape (len(seq1), len(seq2)).

    Example:
        >>> compute_dotplot("ACG", "AG").astype(int)
        array([[1, 0],
               [0, 0],
               [0, 1]])
    """
    return DotPlotEngine().build(seq1, seq2)


async def compute_dotplot_async(seq1: Sequence, seq2: Sequence) -> np.ndarray:
    """Async version: runs compute_dotplot in the default executor."""
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, compute_dotplot, seq1, seq2)


def dotplot_to_string(
    grid: np.ndarray,
    seq1: Sequence,
    seq2: Sequence,
    mark: str = "*",
    blank: str = " "
) -> str:
    """Text grid: seq2 across the top, one row per seq1 symbol."""
    lines = ["      " + "".join(f"{str(c):>2}" for c in seq2)]
    for i, a in enumerate(seq1):
        cells = "".join(f"{mark if grid[i, j] else blank:>2}" for j in range(len(seq2)))
        lines.append(f"{str(a):>2} | " + cells)
    return "\n".join(lines) + "\n"
