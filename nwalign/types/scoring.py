"""Scoring schema for Needleman-Wunsch global alignment."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Mapping, Tuple

SCORING_KEYS: Tuple[str, str, str] = ("match", "mismatch", "gap")


def _validate_score(name: str, value: Any) -> None:
    # bool is a subclass of int; a JSON `true` is not a score.
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(
            f"scoring_schema.{name} must be an integer, got {type(value).__name__}"
        )


@dataclass(frozen=True)
class ScoringSchema:
    """Rewards/penalties for matches, mismatches and gaps.

    No constraints are placed on sign or relative magnitude.
    """

    match: int
    mismatch: int
    gap: int

    def __post_init__(self) -> None:
        for name in SCORING_KEYS:
            _validate_score(name, getattr(self, name))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ScoringSchema":
        """Build a schema from a mapping, filling missing keys from the default."""
        unexpected = [key for key in data if key not in SCORING_KEYS]
        if unexpected:
            raise ValueError(f"scoring_schema has unexpected keys: {unexpected}")
        values = DEFAULT_SCORING.to_dict()
        values.update(data)
        return cls(**values)

    def to_dict(self) -> Dict[str, int]:
        return asdict(self)

    def pair_score(self, a: str, b: str) -> int:
        """Score of aligning symbol ``a`` against symbol ``b`` (no gaps)."""
        return self.match if a == b else self.mismatch


DEFAULT_SCORING = ScoringSchema(match=1, mismatch=-1, gap=0)


__all__ = ["ScoringSchema", "DEFAULT_SCORING", "SCORING_KEYS"]
