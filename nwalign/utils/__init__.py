"""Utility functions for the project."""

from .fasta import read_fasta, read_fasta_pair
from .serialization import (
    dump_result,
    load_request,
    request_from_dict,
    request_to_dict,
    result_to_dict,
    scoring_from_dict,
)
from .report import format_alignment, format_matrix, format_report

__all__ = [
    "read_fasta",
    "read_fasta_pair",
    "dump_result",
    "load_request",
    "request_from_dict",
    "request_to_dict",
    "result_to_dict",
    "scoring_from_dict",
    "format_alignment",
    "format_matrix",
    "format_report",
]
