"""
Pairwise Global Alignment Module
Needleman-Wunsch with linear gap penalty and deterministic traceback
"""

import asyncio
import warnings
from dataclasses import dataclass, field
from typing import Optional, Sequence, Tuple, Union

import numpy as np

from .scoring import DEFAULT_SCORING, ScoringModel


GAP = '-'

# (len1 + 1) * (len2 + 1) above this triggers a RuntimeWarning (int64 -> ~200 MB)
DEFAULT_MAX_CELLS = 25_000_000

Path = Tuple[Tuple[int, int], ...]


@dataclass(frozen=True, eq=False)
class AlignmentResult:
    """Store alignment results and metadata"""
    seq1_aligned: str
    seq2_aligned: str
    score: int
    matrix: np.ndarray
    path: Path
    seq1_original: Sequence = ""
    seq2_original: Sequence = ""
    scoring: ScoringModel = field(default=DEFAULT_SCORING)

    def __str__(self) -> str:
        """String representation of alignment"""
        return (
            f"Alignment Score: {self.score}\n"
            f"Type: global\n"
            f"Identity: {self.identity:.2%}\n"
            f"Gaps: {self.gaps}\n"
            f"Length: {len(self.seq1_aligned)}\n"
        )

    @property
    def match_string(self) -> str:
        """'|' identical, '.' mismatch, ' ' gap"""
        out = []
        for a, b in zip(self.seq1_aligned, self.seq2_aligned):
            if a == GAP or b == GAP:
                out.append(' ')
            elif a == b:
                out.append('|')
            else:
                out.append('.')
        return ''.join(out)

    @property
    def identity(self) -> float:
        length = len(self.seq1_aligned)
        return self.nmatch() / length if length > 0 else 0.0

    @property
    def gaps(self) -> int:
        return self.seq1_aligned.count(GAP) + self.seq2_aligned.count(GAP)

    def nmatch(self) -> int:
        """Number of matching positions"""
        return sum(1 for a, b in zip(self.seq1_aligned, self.seq2_aligned)
                   if a == b and a != GAP)

    def on_path(self, i: int, j: int) -> bool:
        """True if matrix cell (i, j) was visited by the traceback"""
        return (i, j) in self.path


class AlignmentMatrixBuilder:
    """Fill the Needleman-Wunsch score matrix"""

    def __init__(self, max_cells: int = DEFAULT_MAX_CELLS):
        self.max_cells = max_cells

    def _initialize_matrix(self, len1: int, len2: int, gap: int) -> np.ndarray:
        """Borders hold cumulative gap cost (no free end gaps)"""
        matrix = np.zeros((len1 + 1, len2 + 1), dtype=np.int64)
        matrix[:, 0] = np.arange(len1 + 1, dtype=np.int64) * gap
        matrix[0, :] = np.arange(len2 + 1, dtype=np.int64) * gap
        return matrix

    def build(
        self,
        seq1: Sequence,
        seq2: Sequence,
        scoring: ScoringModel = DEFAULT_SCORING,
        verbose: bool = False
    ) -> np.ndarray:
        """
        Build the (len1 + 1) x (len2 + 1) score matrix.

        Parameters:
        -----------
        seq1, seq2 : sequence
            Sequences to align (rows follow seq1, columns follow seq2)
        scoring : ScoringModel
            Match / mismatch / gap values
        verbose : bool
            If True, display fill progress

        Returns:
        --------
        np.ndarray
            Read-only int64 matrix; the bottom-right cell is the alignment score
        """
        len1, len2 = len(seq1), len(seq2)
        cells = (len1 + 1) * (len2 + 1)
        if cells > self.max_cells:
            warnings.warn(
                f"Score matrix of {len1 + 1} x {len2 + 1} ({cells} cells) exceeds "
                f"max_cells={self.max_cells}; time and memory grow as len1 * len2",
                RuntimeWarning,
                stacklevel=2,
            )

        gap = scoring.gap()
        matrix = self._initialize_matrix(len1, len2, gap)

        if verbose:
            print(f"\nFilling alignment matrix for sequences of length {len1} x {len2}")
            print(f"Total cells to compute: {len1 * len2}")
            print("Computing ", end="")

        # row-major, one row at a time on plain ints
        prev = matrix[0].tolist()
        for i in range(1, len1 + 1):
            a = seq1[i - 1]
            row = [prev[0] + gap]
            for j in range(1, len2 + 1):
                diag = prev[j - 1] + scoring.substitution_score(a, seq2[j - 1])
                up = prev[j] + gap
                left = row[j - 1] + gap
                row.append(max(diag, up, left))
            matrix[i] = row
            prev = row

            if verbose and i % max(1, len1 // 10) == 0:
                print("█", end="", flush=True)

        if verbose:
            print(" 100.0%")
            print(f"✓ Matrix computation complete!")

        matrix.flags.writeable = False
        return matrix


class TracebackEngine:
    """Reconstruct one optimal alignment from a filled score matrix"""

    def traceback(
        self,
        seq1: Sequence,
        seq2: Sequence,
        matrix: np.ndarray,
        scoring: ScoringModel = DEFAULT_SCORING
    ) -> AlignmentResult:
        """
        Walk from (len1, len2) back to (0, 0).

        Moves are tried in the order diagonal, up, left; the first one that
        reproduces the cell value wins. If none does, or on the borders, the
        move is forced: up while i > 0, otherwise left.
        """
        len1, len2 = len(seq1), len(seq2)
        if matrix.shape != (len1 + 1, len2 + 1):
            raise ValueError(
                f"Matrix shape {matrix.shape} does not match sequences "
                f"({len1 + 1}, {len2 + 1})"
            )

        gap = scoring.gap()
        aligned1, aligned2 = [], []
        i, j = len1, len2
        path = [(i, j)]

        while i > 0 or j > 0:
            if i > 0 and j > 0:
                current = int(matrix[i, j])
                diag = int(matrix[i - 1, j - 1]) + scoring.substitution_score(seq1[i - 1], seq2[j - 1])
                up = int(matrix[i - 1, j]) + gap
                left = int(matrix[i, j - 1]) + gap

                if current == diag:
                    aligned1.append(seq1[i - 1])
                    aligned2.append(seq2[j - 1])
                    i -= 1
                    j -= 1
                elif current == up:
                    aligned1.append(seq1[i - 1])
                    aligned2.append(GAP)
                    i -= 1
                elif current == left:
                    aligned1.append(GAP)
                    aligned2.append(seq2[j - 1])
                    j -= 1
                else:
                    # no neighbour reproduces the cell: consume seq1
                    aligned1.append(seq1[i - 1])
                    aligned2.append(GAP)
                    i -= 1
            elif i == 0:
                aligned1.append(GAP)
                aligned2.append(seq2[j - 1])
                j -= 1
            else:
                aligned1.append(seq1[i - 1])
                aligned2.append(GAP)
                i -= 1
            path.append((i, j))

        return AlignmentResult(
            seq1_aligned=''.join(map(str, reversed(aligned1))),
            seq2_aligned=''.join(map(str, reversed(aligned2))),
            score=int(matrix[len1, len2]),
            matrix=matrix,
            path=tuple(path),
            seq1_original=seq1,
            seq2_original=seq2,
            scoring=scoring
        )


class GlobalAligner:
    """Needleman-Wunsch global aligner with linear gap penalty"""

    def __init__(
        self,
        scoring: Optional[ScoringModel] = None,
        max_cells: int = DEFAULT_MAX_CELLS
    ):
        """
        Initialize aligner

        Parameters:
        -----------
        scoring : ScoringModel, optional
            Scoring values (default match=+1, mismatch=-1, gap=-1)
        max_cells : int
            Matrix size above which a RuntimeWarning is issued
        """
        self.scoring = scoring if scoring is not None else DEFAULT_SCORING
        self.builder = AlignmentMatrixBuilder(max_cells=max_cells)
        self.tracer = TracebackEngine()

    def align(
        self,
        seq1: Sequence,
        seq2: Sequence,
        score_only: bool = False,
        verbose: bool = False
    ) -> Union[AlignmentResult, int]:
        """
        Perform global pairwise alignment

        Parameters:
        -----------
        seq1 : str
            First sequence (rows of the matrix)
        seq2 : str
            Second sequence (columns of the matrix)
        score_only : bool
            If True, skip the traceback and return only the score
        verbose : bool
            If True, display progress during alignment

        Returns:
        --------
        AlignmentResult or int
            Alignment result object or score if score_only=True
        """
        scoring = self.scoring

        if verbose:
            print("\n" + "="*70)
            print("GLOBAL ALIGNMENT (NEEDLEMAN-WUNSCH)")
            print("="*70)
            print(f"Sequence 1: {seq1}")
            print(f"Sequence 2: {seq2}")
            print(f"Match: {scoring.match}, Mismatch: {scoring.mismatch}, Gap: {scoring.gap_penalty}")
            print("="*70)

        matrix = self.builder.build(seq1, seq2, scoring, verbose=verbose)

        if score_only:
            score = int(matrix[len(seq1), len(seq2)])
            if verbose:
                print(f"\nFinal score: {score}")
                print("="*70 + "\n")
            return score

        result = self.tracer.traceback(seq1, seq2, matrix, scoring)

        if verbose:
            print(f"✓ Traceback complete! Alignment length: {len(result.seq1_aligned)}")
            print(f"\nALIGNMENT RESULTS")
            print("="*70)
            print(f"Score: {result.score}")
            print(f"Identity: {result.identity:.2%} ({result.nmatch()} matches)")
            print(f"Gaps: {result.gaps}")
            print("="*70 + "\n")

        return result


def compute_alignment(
    seq1: Sequence,
    seq2: Sequence,
    scoring: Optional[ScoringModel] = None,
    verbose: bool = False
) -> AlignmentResult:
    """
    Global alignment of two sequences.

    Examples:
    ---------
    >>> result = compute_alignment("GATTACA", "GCATGCU")
    >>> result.seq1_aligned, result.seq2_aligned, result.score
    ('G-ATTACA', 'GCA-TGCU', 0)
    """
    return GlobalAligner(scoring=scoring).align(seq1, seq2, verbose=verbose)


async def compute_alignment_async(
    seq1: Sequence,
    seq2: Sequence,
    scoring: Optional[ScoringModel] = None
) -> AlignmentResult:
    """
    Async version: runs compute_alignment in the default executor.
    (Does not speed up the computation; only keeps the event loop free.)
    """
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(
        None,
        lambda: compute_alignment(seq1, seq2, scoring=scoring)
    )
