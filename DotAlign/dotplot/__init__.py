"""
Dot-plot Module
Identity grids between two sequences
"""

from .dotplot import (
    DotPlotEngine,
    compute_dotplot,
    compute_dotplot_async,
    dotplot_to_string
)

__all__ = [
    "DotPlotEngine",
    "compute_dotplot",
    "compute_dotplot_async",
    "dotplot_to_string"
]
