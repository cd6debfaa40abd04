"""
Command line entry point: dot-plot and global alignment of two sequences
"""

import argparse
import sys

from DotAlign.app.sequence_io import read_first_sequence
from DotAlign.dotplot import compute_dotplot, dotplot_to_string
from DotAlign.seq_alignment import (
    ScoringModel,
    compute_alignment,
    format_report,
    alignment_to_string,
    matrix_to_string,
)


DEFAULT_SEQ1 = "TTTTGGGCGATAGCTAAAGCTC"
DEFAULT_SEQ2 = "ATTGGGCGGTAGCTTAAGGTC"

parser = argparse.ArgumentParser(
    prog="dotalign",
    description="Dot-plot and Needleman-Wunsch global alignment of two sequences."
)
parser.add_argument(
    "seq1",
    nargs="?",
    default=None,
    type=str,
    help="First sequence. Defaults to the reference pair if neither sequence nor FASTA is given."
)
parser.add_argument(
    "seq2",
    nargs="?",
    default=None,
    type=str,
    help="Second sequence."
)
parser.add_argument(
    "--fasta1", "-f1",
    dest="fasta1",
    required=False,
    default=None,
    type=str,
    help="FASTA file for the first sequence (first record is used). Overrides seq1."
)
parser.add_argument(
    "--fasta2", "-f2",
    dest="fasta2",
    required=False,
    default=None,
    type=str,
    help="FASTA file for the second sequence (first record is used). Overrides seq2."
)
parser.add_argument(
    "--match",
    dest="match",
    default=1,
    type=int,
    help="Score for identical symbols."
)
parser.add_argument(
    "--mismatch",
    dest="mismatch",
    default=-1,
    type=int,
    help="Score for different symbols."
)
parser.add_argument(
    "--gap",
    dest="gap",
    default=-1,
    type=int,
    help="Linear gap penalty."
)
parser.add_argument(
    "--mode", "-m",
    dest="mode",
    choices=["dotplot", "align", "both"],
    default="both",
    help="What to compute."
)
parser.add_argument(
    "--show-path",
    action="store_true",
    dest="show_path",
    default=False,
    help="Mark traceback cells with '*' in the printed matrix."
)
parser.add_argument(
    "--width", "-w",
    dest="width",
    default=60,
    type=int,
    help="Block width of the wrapped alignment view."
)
parser.add_argument(
    "--plot", "-p",
    dest="plot",
    default=None,
    type=str,
    help="Path prefix for PNG figures (<prefix>_dotplot.png, <prefix>_matrix.png)."
)
parser.add_argument(
    "--verbose", "-v",
    action="store_true",
    dest="verbose",
    default=False,
    help="Print alignment progress."
)


def _resolve_sequences(args):
    seq1, seq2 = args.seq1, args.seq2
    if args.fasta1 is not None:
        seq1 = read_first_sequence(args.fasta1)
    if args.fasta2 is not None:
        seq2 = read_first_sequence(args.fasta2)
    if seq1 is None and seq2 is None:
        seq1, seq2 = DEFAULT_SEQ1, DEFAULT_SEQ2
    seq1 = (seq1 or "").strip().upper()
    seq2 = (seq2 or "").strip().upper()
    return seq1, seq2


def _save_plots(prefix, seq1, seq2, grid, result):
    import matplotlib
    matplotlib.use("Agg")
    import matplotlib.pyplot as plt
    from DotAlign.dotplot.dotplot_plot import plot_dotplot
    from DotAlign.seq_alignment.matrix_plot import plot_score_matrix

    written = []
    if grid is not None:
        fig = plot_dotplot(grid, seq1, seq2, title="Dot plot")
        fig.savefig(f"{prefix}_dotplot.png")
        plt.close(fig)
        written.append(f"{prefix}_dotplot.png")
    if result is not None:
        fig = plot_score_matrix(result)
        fig.savefig(f"{prefix}_matrix.png")
        plt.close(fig)
        written.append(f"{prefix}_matrix.png")
    return written


def run(args):
    try:
        seq1, seq2 = _resolve_sequences(args)
    except (OSError, ValueError) as e:
        parser.error(str(e))

    if not seq1 or not seq2:
        parser.error("Both sequences must be provided.")

    grid = None
    result = None

    if args.mode in ("dotplot", "both"):
        grid = compute_dotplot(seq1, seq2)
        print("===== DOT PLOT =====")
        print(dotplot_to_string(grid, seq1, seq2))

    if args.mode in ("align", "both"):
        scoring = ScoringModel(match=args.match, mismatch=args.mismatch, gap_penalty=args.gap)
        result = compute_alignment(seq1, seq2, scoring=scoring, verbose=args.verbose)
        if args.show_path:
            print("===== NEEDLEMAN-WUNSCH DP MATRIX =====")
            print(matrix_to_string(result.matrix, seq1, seq2, path=result.path))
            print(alignment_to_string(result, width=args.width))
        else:
            print(format_report(result))

    if args.plot is not None:
        for written in _save_plots(args.plot, seq1, seq2, grid, result):
            print(f"Wrote {written}")

    return 0


def main(argv=None):
    args = parser.parse_args(argv)
    if args.width <= 0:
        parser.error("--width must be positive")
    return run(args)


if __name__ == "__main__":
    sys.exit(main())
