"""Types for the project."""

from .scoring import ScoringSchema, DEFAULT_SCORING
from .alignment import AlignmentResult, GAP
from .request import AlignmentRequest


__all__ = [
    "ScoringSchema",
    "DEFAULT_SCORING",
    "AlignmentResult",
    "AlignmentRequest",
    "GAP",
]
