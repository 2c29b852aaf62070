"""Needleman-Wunsch global pairwise alignment."""

from .types import (
    DEFAULT_SCORING,
    GAP,
    AlignmentRequest,
    AlignmentResult,
    ScoringSchema,
)
from .algorithms import NeedlemanWunschAligner, align, build_matrix, score, traceback

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_SCORING",
    "GAP",
    "AlignmentRequest",
    "AlignmentResult",
    "ScoringSchema",
    "NeedlemanWunschAligner",
    "align",
    "build_matrix",
    "score",
    "traceback",
]
