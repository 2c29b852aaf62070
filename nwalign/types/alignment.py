"""Alignment types."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple

import numpy as np

from .scoring import ScoringSchema

GAP = "-"


@dataclass(frozen=True)
class AlignmentResult:
    """Result of a pairwise global alignment.

    Attributes:
        aligned_seq1: First input with gap placeholders inserted
        aligned_seq2: Second input with gap placeholders inserted
        matrix: The (m+1) x (n+1) score matrix the alignment was traced from
    """

    aligned_seq1: str
    aligned_seq2: str
    matrix: np.ndarray = field(compare=False, repr=False)

    def __post_init__(self):
        if len(self.aligned_seq1) != len(self.aligned_seq2):
            raise ValueError(
                "aligned_seq1 and aligned_seq2 must have the same length "
                f"({len(self.aligned_seq1)} != {len(self.aligned_seq2)})."
            )

    @property
    def columns(self) -> int:
        """Number of columns in the alignment."""
        return len(self.aligned_seq1)

    @property
    def matrix_score(self) -> int:
        """Optimal score according to the DP matrix (its bottom-right cell)."""
        return int(self.matrix[-1, -1])

    def score(self, scoring: ScoringSchema) -> int:
        """Score the realized alignment column by column.

        Equal symbols add ``match``; otherwise a gap on either side adds
        ``gap``; otherwise ``mismatch``. This does not read the matrix, so it
        can differ from :attr:`matrix_score` when the traceback resolved a tie
        differently from the recurrence.
        """
        total = 0
        for a, b in zip(self.aligned_seq1, self.aligned_seq2):
            if a == b:
                total += scoring.match
            elif a == GAP or b == GAP:
                total += scoring.gap
            else:
                total += scoring.mismatch
        return total

    def ungapped(self) -> Tuple[str, str]:
        """Both aligned sequences with gap placeholders removed."""
        return (
            self.aligned_seq1.replace(GAP, ""),
            self.aligned_seq2.replace(GAP, ""),
        )

    def path(self) -> List[Tuple[int, int]]:
        """Matrix cells visited by the alignment, from (0, 0) to (m, n).

        Every gap symbol is read as a placeholder, so the path is only exact
        when the inputs themselves contain no gap symbols
        (:class:`~nwalign.types.AlignmentRequest` rejects such inputs).
        """
        i = j = 0
        cells = [(0, 0)]
        for a, b in zip(self.aligned_seq1, self.aligned_seq2):
            if a != GAP:
                i += 1
            if b != GAP:
                j += 1
            cells.append((i, j))
        return cells

    def to_dict(self, scoring: ScoringSchema) -> Dict[str, Any]:
        """Plain-data record: aligned sequences, realized score and matrix."""
        return {
            "seq1": self.aligned_seq1,
            "seq2": self.aligned_seq2,
            "score": self.score(scoring),
            "matrix_score": self.matrix_score,
            "matrix": self.matrix.tolist(),
        }

    def __str__(self) -> str:
        class_name = self.__class__.__name__
        rows, cols = self.matrix.shape
        return (
            f"{class_name} (\n"
            f"   columns: {self.columns}\n"
            f"   seq1: {self.aligned_seq1}\n"
            f"   seq2: {self.aligned_seq2}\n"
            f"   matrix: {rows} x {cols} (corner {self.matrix_score})\n"
            f")"
        )


__all__ = ["AlignmentResult", "GAP"]
