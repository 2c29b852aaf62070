"""Unit tests for scoring, request and alignment result types."""

from __future__ import annotations

import numpy as np
import pytest

from nwalign.algorithms import align
from nwalign.types import (
    DEFAULT_SCORING,
    AlignmentRequest,
    AlignmentResult,
    ScoringSchema,
)


def _empty_matrix(m: int, n: int) -> np.ndarray:
    return np.zeros((m + 1, n + 1), dtype=int)


def test_default_scoring_values():
    assert DEFAULT_SCORING == ScoringSchema(match=1, mismatch=-1, gap=0)


def test_scoring_from_dict_fills_missing_keys_from_default():
    scoring = ScoringSchema.from_dict({"gap": -2})
    assert scoring == ScoringSchema(match=1, mismatch=-1, gap=-2)


def test_scoring_round_trips_through_dict():
    scoring = ScoringSchema(match=5, mismatch=-4, gap=-10)
    assert scoring.to_dict() == {"match": 5, "mismatch": -4, "gap": -10}


def test_scoring_rejects_unknown_keys():
    with pytest.raises(ValueError, match="unexpected keys"):
        ScoringSchema.from_dict({"match": 1, "gap_open": -3})


@pytest.mark.parametrize("bad", [1.5, "1", None, True])
def test_scoring_rejects_non_integer_values(bad):
    with pytest.raises(ValueError, match="must be an integer"):
        ScoringSchema(match=bad, mismatch=-1, gap=0)


def test_scoring_is_immutable():
    with pytest.raises(AttributeError):
        DEFAULT_SCORING.match = 10


def test_request_rejects_non_string_sequences():
    with pytest.raises(ValueError, match="seq2 must be a string"):
        AlignmentRequest(seq1="ACGT", seq2=["A", "C"])


def test_request_with_scoring_keeps_sequences():
    request = AlignmentRequest(seq1="AC", seq2="GT", name="pair")
    updated = request.with_scoring(ScoringSchema(match=2, mismatch=-2, gap=-1))

    assert request.scoring == DEFAULT_SCORING
    assert (updated.seq1, updated.seq2, updated.name) == ("AC", "GT", "pair")
    assert updated.scoring.match == 2


def test_alignment_result_rejects_unequal_lengths():
    with pytest.raises(ValueError, match="same length"):
        AlignmentResult(aligned_seq1="AC-", aligned_seq2="AC", matrix=_empty_matrix(2, 2))


def test_alignment_result_path_walks_from_origin_to_corner():
    result = align("GATTACA", "GCATGCU", ScoringSchema(match=1, mismatch=-1, gap=-1))

    assert result.path() == [
        (0, 0),
        (1, 1),
        (1, 2),
        (2, 3),
        (3, 3),
        (4, 4),
        (5, 5),
        (6, 6),
        (7, 7),
    ]


def test_alignment_result_path_of_empty_alignment():
    result = AlignmentResult(aligned_seq1="", aligned_seq2="", matrix=_empty_matrix(0, 0))
    assert result.path() == [(0, 0)]


def test_alignment_result_to_dict_uses_plain_ints():
    scoring = ScoringSchema(match=1, mismatch=-1, gap=-1)
    record = align("AC", "A", scoring).to_dict(scoring)

    assert record["seq1"] == "AC"
    assert record["seq2"] == "A-"
    assert record["score"] == 0
    assert record["matrix_score"] == 0
    assert record["matrix"] == [[0, -1], [-1, 1], [-2, 0]]
    assert all(type(cell) is int for row in record["matrix"] for cell in row)


def test_alignment_result_str_mentions_sequences_and_shape():
    text = str(align("AAA", "AAA"))
    assert "seq1: AAA" in text
    assert "4 x 4" in text


@pytest.mark.parametrize("field_name", ["seq1", "seq2"])
def test_request_rejects_gap_symbol(field_name):
    values = {"seq1": "ACGT", "seq2": "AGT"}
    values[field_name] = "A-GT"
    with pytest.raises(ValueError, match=f"{field_name} must not contain the gap symbol"):
        AlignmentRequest(**values)


def test_large_scores_align_and_score_exactly():
    big = 2**70
    scoring = ScoringSchema(match=big, mismatch=-1, gap=-big)
    result = align("AA", "A", scoring)

    assert (result.aligned_seq1, result.aligned_seq2) == ("AA", "-A")
    assert result.matrix_score == 0
    assert result.score(scoring) == 0
