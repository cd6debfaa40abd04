"""
Sequence Alignment Module
Provides Needleman-Wunsch global alignment with linear scoring
"""

from .scoring import (
    ScoringModel,
    DEFAULT_SCORING
)
from .pairwise import (
    AlignmentMatrixBuilder,
    TracebackEngine,
    GlobalAligner,
    AlignmentResult,
    compute_alignment,
    compute_alignment_async
)
from .formatting import (
    matrix_to_string,
    alignment_to_string,
    format_report
)

__all__ = [
    "ScoringModel",
    "DEFAULT_SCORING",
    "AlignmentMatrixBuilder",
    "TracebackEngine",
    "GlobalAligner",
    "AlignmentResult",
    "compute_alignment",
    "compute_alignment_async",
    "matrix_to_string",
    "alignment_to_string",
    "format_report"
]
