#!/usr/bin/env python3
"""Run a Needleman-Wunsch global alignment on an input record and report it."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

# Ensure repository modules are importable when invoked as a script
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from nwalign.algorithms import NeedlemanWunschAligner  # pylint: disable=C0413
from nwalign.types import AlignmentRequest, ScoringSchema  # pylint: disable=C0413
from nwalign.utils import (  # pylint: disable=C0413
    dump_result,
    format_report,
    load_request,
    read_fasta_pair,
    request_to_dict,
    result_to_dict,
)


def override_scoring(request: AlignmentRequest, args: argparse.Namespace) -> AlignmentRequest:
    """Apply --match/--mismatch/--gap flags on top of the record's schema."""
    overrides = {
        key: getattr(args, key)
        for key in ("match", "mismatch", "gap")
        if getattr(args, key) is not None
    }
    if not overrides:
        return request
    values = request.scoring.to_dict()
    values.update(overrides)
    return request.with_scoring(ScoringSchema(**values))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Globally align two sequences with Needleman-Wunsch."
    )
    parser.add_argument(
        "input",
        type=Path,
        help="Input record (JSON or YAML) with seq1, seq2 and scoring_schema.",
    )
    parser.add_argument(
        "output",
        type=Path,
        nargs="?",
        default=None,
        help="Where to write the result record (.json, .yaml or .yml).",
    )
    parser.add_argument(
        "--fasta",
        action="store_true",
        help="Treat INPUT as a FASTA file and align its first two records.",
    )
    parser.add_argument("--match", type=int, default=None, help="Match score.")
    parser.add_argument("--mismatch", type=int, default=None, help="Mismatch score.")
    parser.add_argument("--gap", type=int, default=None, help="Gap score.")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    if not args.input.exists():
        raise FileNotFoundError(f"Input file not found: {args.input}")

    print("Reading files...")
    if args.fasta:
        request = read_fasta_pair(str(args.input))
    else:
        request = load_request(args.input)
    request = override_scoring(request, args)

    print("Input:: ")
    print(json.dumps(request_to_dict(request), indent=2))
    print()

    aligner = NeedlemanWunschAligner(request.scoring)
    alignment = aligner.align(request.seq1, request.seq2)

    print(format_report(alignment, request.scoring))

    print("\nOutput:: ")
    print(json.dumps(result_to_dict(alignment, request.scoring), indent=2))

    if args.output is not None:
        written = dump_result(alignment, request.scoring, args.output)
        print(f"\nWrote alignment to {written}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
