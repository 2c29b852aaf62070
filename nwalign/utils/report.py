"""Human-readable console report for an alignment."""

from __future__ import annotations

from typing import List

from nwalign.types import AlignmentResult, ScoringSchema


def format_matrix(alignment: AlignmentResult) -> str:
    """Tab-separated rows of the score matrix."""
    return "\n".join(
        " \t".join(str(int(cell)) for cell in row) + " \t"
        for row in alignment.matrix
    )


def format_alignment(alignment: AlignmentResult) -> str:
    """Return a human-readable two-line alignment string."""
    return "\n".join(
        [
            f"Seq1:: {alignment.aligned_seq1}",
            f"Seq2:: {alignment.aligned_seq2}",
        ]
    )


def format_report(alignment: AlignmentResult, scoring: ScoringSchema) -> str:
    """Full report: realized score, aligned pair and score matrix."""
    realized = alignment.score(scoring)
    lines: List[str] = ["Results", ""]
    lines.append(f"Score: {realized}")
    if realized != alignment.matrix_score:
        lines.append(f"Matrix score: {alignment.matrix_score}")
    lines.append(format_alignment(alignment))
    lines.append("Matrix:: ")
    lines.append(format_matrix(alignment))
    return "\n".join(lines)


__all__ = ["format_matrix", "format_alignment", "format_report"]
