"""Shared interfaces for pairwise alignment algorithms."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from nwalign.types import AlignmentResult


class PairwiseAligner(ABC):
    """Abstract base class for pairwise alignment algorithms."""

    @abstractmethod
    def align(
        self,
        seq1: Sequence[str],
        seq2: Sequence[str],
    ) -> AlignmentResult:
        """Align two sequences."""
        raise NotImplementedError


__all__ = ["PairwiseAligner"]
