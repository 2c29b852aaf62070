"""Traceback through a filled Needleman-Wunsch matrix."""

from __future__ import annotations

from typing import List, Sequence

import numpy as np

from nwalign.algorithms.matrix import build_matrix
from nwalign.types import DEFAULT_SCORING, GAP, AlignmentResult, ScoringSchema


def traceback(
    matrix: np.ndarray, seq1: Sequence[str], seq2: Sequence[str]
) -> AlignmentResult:
    """Walk from (m, n) back to (0, 0) and recover one optimal alignment.

    Moves are chosen in a fixed order. A diagonal step is taken whenever the
    current symbols are equal, or when the diagonal neighbour is at least as
    large as both others. Otherwise "left" (consume ``seq1`` only, neighbour
    ``matrix[i-1][j]``) is preferred over "up" (consume ``seq2`` only,
    neighbour ``matrix[i][j-1]``).
    """
    i, j = len(seq1), len(seq2)
    aligned_1: List[str] = []
    aligned_2: List[str] = []

    while i > 0 and j > 0:
        diag = matrix[i - 1, j - 1]
        up = matrix[i, j - 1]
        left = matrix[i - 1, j]

        if seq1[i - 1] == seq2[j - 1] or (diag >= up and diag >= left):
            aligned_1.append(seq1[i - 1])
            aligned_2.append(seq2[j - 1])
            i -= 1
            j -= 1
        elif left >= up and left >= diag:
            aligned_1.append(seq1[i - 1])
            aligned_2.append(GAP)
            i -= 1
        else:  # up is the strict maximum
            aligned_1.append(GAP)
            aligned_2.append(seq2[j - 1])
            j -= 1

    while i > 0:
        aligned_1.append(seq1[i - 1])
        aligned_2.append(GAP)
        i -= 1
    while j > 0:
        aligned_1.append(GAP)
        aligned_2.append(seq2[j - 1])
        j -= 1

    aligned_1.reverse()
    aligned_2.reverse()

    return AlignmentResult(
        aligned_seq1="".join(aligned_1),
        aligned_seq2="".join(aligned_2),
        matrix=matrix,
    )


def align(
    seq1: Sequence[str],
    seq2: Sequence[str],
    scoring: ScoringSchema = DEFAULT_SCORING,
) -> AlignmentResult:
    """Globally align two sequences."""
    matrix = build_matrix(seq1, seq2, scoring)
    return traceback(matrix, seq1, seq2)


def score(alignment: AlignmentResult, scoring: ScoringSchema) -> int:
    """Realized score of an alignment, recomputed column by column."""
    return alignment.score(scoring)


__all__ = ["traceback", "align", "score"]
