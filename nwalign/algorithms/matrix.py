"""Score matrix construction for Needleman-Wunsch global alignment."""

from __future__ import annotations

from typing import Sequence

import numpy as np

from nwalign.types import ScoringSchema

MATRIX_DTYPE = np.int64
MATRIX_INT_MAX = int(np.iinfo(MATRIX_DTYPE).max)


def _matrix_dtype(m: int, n: int, scoring: ScoringSchema):
    """int64 when no cell can overflow it, Python ints (object dtype) otherwise.

    A cell scores an alignment of at most m + n columns, so its magnitude is
    bounded by (m + n) times the largest absolute score.
    """
    largest = max(abs(scoring.match), abs(scoring.mismatch), abs(scoring.gap))
    if largest * (m + n) > MATRIX_INT_MAX:
        return object
    return MATRIX_DTYPE


def _initialize_matrix(m: int, n: int, scoring: ScoringSchema) -> np.ndarray:
    """Allocate the (m+1) x (n+1) table and seed the boundary row and column."""
    gap = scoring.gap
    mat = np.zeros((m + 1, n + 1), dtype=_matrix_dtype(m, n, scoring))
    for i in range(1, m + 1):
        mat[i, 0] = mat[i - 1, 0] + gap
    for j in range(1, n + 1):
        mat[0, j] = mat[0, j - 1] + gap
    return mat


def _fill_interior(
    mat: np.ndarray,
    seq1: Sequence[str],
    seq2: Sequence[str],
    scoring: ScoringSchema,
) -> None:
    """Apply the recurrence row by row; each cell depends on its three predecessors."""
    gap = scoring.gap
    for i in range(1, len(seq1) + 1):
        for j in range(1, len(seq2) + 1):
            diag_val = mat[i - 1, j - 1] + scoring.pair_score(seq1[i - 1], seq2[j - 1])
            up_val = mat[i - 1, j] + gap
            left_val = mat[i, j - 1] + gap
            mat[i, j] = max(diag_val, up_val, left_val)


def build_matrix(
    seq1: Sequence[str], seq2: Sequence[str], scoring: ScoringSchema
) -> np.ndarray:
    """Build the filled DP score matrix for ``seq1`` against ``seq2``.

    Cell (i, j) holds the best score of the length-i prefix of ``seq1``
    against the length-j prefix of ``seq2``. The returned array is read-only.
    """
    mat = _initialize_matrix(len(seq1), len(seq2), scoring)
    _fill_interior(mat, seq1, seq2, scoring)
    mat.setflags(write=False)
    return mat


__all__ = ["build_matrix", "MATRIX_DTYPE"]
