"""Algorithms for the project."""

from .base import PairwiseAligner
from .matrix import build_matrix
from .trace import align, score, traceback
from .needleman_wunsch import NeedlemanWunschAligner


__all__ = [
    "PairwiseAligner",
    "NeedlemanWunschAligner",
    "build_matrix",
    "traceback",
    "align",
    "score",
]
