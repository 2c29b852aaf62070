"""Functions for working with FASTA files."""

from typing import List, Optional

import skbio.io
from skbio import Sequence

from nwalign.types import DEFAULT_SCORING, AlignmentRequest, ScoringSchema


def sequence_from_skbio(record: Sequence) -> str:
    """Convert a scikit-bio record to a plain string, keeping its case."""
    return str(record)


def read_fasta(file_path: str, ids: List[str] = None) -> List[Sequence]:
    """Read a FASTA file and return its records, optionally filtered by id."""
    records: List[Sequence] = []
    for record in skbio.io.read(str(file_path), format="fasta", constructor=Sequence):
        if ids and record.metadata["id"] not in ids:
            continue
        records.append(record)
    return records


def read_fasta_pair(
    file_path: str,
    scoring: Optional[ScoringSchema] = None,
) -> AlignmentRequest:
    """Build an AlignmentRequest from the first two records of a FASTA file."""
    records = read_fasta(file_path)
    if len(records) < 2:
        raise ValueError(
            f"Expected at least two FASTA records in {file_path}; found {len(records)}."
        )

    first, second = records[:2]
    name = f"{first.metadata.get('id', '')}_vs_{second.metadata.get('id', '')}"
    return AlignmentRequest(
        seq1=sequence_from_skbio(first),
        seq2=sequence_from_skbio(second),
        scoring=scoring if scoring is not None else DEFAULT_SCORING,
        name=name,
    )


__all__ = ["read_fasta", "read_fasta_pair"]
