"""Alignment request record."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .alignment import GAP
from .scoring import DEFAULT_SCORING, ScoringSchema


@dataclass(frozen=True)
class AlignmentRequest:
    """Two input sequences and the schema to align them with."""

    seq1: str
    seq2: str
    scoring: ScoringSchema = field(default=DEFAULT_SCORING)
    name: Optional[str] = None

    def __post_init__(self) -> None:
        for label in ("seq1", "seq2"):
            value = getattr(self, label)
            if not isinstance(value, str):
                raise ValueError(
                    f"{label} must be a string, got {type(value).__name__}"
                )
            if GAP in value:
                raise ValueError(
                    f"{label} must not contain the gap symbol {GAP!r}"
                )
        if not isinstance(self.scoring, ScoringSchema):
            raise ValueError("scoring must be a ScoringSchema.")

    def with_scoring(self, scoring: ScoringSchema) -> "AlignmentRequest":
        """Return a copy of this request using a different schema."""
        return AlignmentRequest(
            seq1=self.seq1, seq2=self.seq2, scoring=scoring, name=self.name
        )


__all__ = ["AlignmentRequest"]
