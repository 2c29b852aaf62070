"""Needleman-Wunsch aligner bound to a single scoring schema."""

from __future__ import annotations

from typing import Sequence

from nwalign.algorithms.base import PairwiseAligner
from nwalign.algorithms.trace import align
from nwalign.types import DEFAULT_SCORING, AlignmentResult, ScoringSchema


class NeedlemanWunschAligner(PairwiseAligner):
    """Global alignment with linear gap scores."""

    def __init__(self, scoring: ScoringSchema = DEFAULT_SCORING):
        if not isinstance(scoring, ScoringSchema):
            raise ValueError("scoring must be a ScoringSchema.")
        self.scoring = scoring

    def align(
        self,
        seq1: Sequence[str],
        seq2: Sequence[str],
    ) -> AlignmentResult:
        """Compute the global alignment for the provided sequences."""
        return align(seq1, seq2, self.scoring)

    def score(self, alignment: AlignmentResult) -> int:
        """Realized score of ``alignment`` under this aligner's schema."""
        return alignment.score(self.scoring)


__all__ = ["NeedlemanWunschAligner"]
