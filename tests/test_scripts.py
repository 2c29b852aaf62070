"""Tests for the command-line scripts."""

from __future__ import annotations

import json

import pytest

from scripts.align import main as align_main


def _write_input(tmp_path, payload) -> str:
    path = tmp_path / "input.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return str(path)


def test_align_script_writes_output_record(tmp_path, capsys):
    input_path = _write_input(
        tmp_path,
        {
            "seq1": "GATTACA",
            "seq2": "GCATGCU",
            "scoring_schema": {"match": 1, "mismatch": -1, "gap": -1},
        },
    )
    output_path = tmp_path / "output.json"

    assert align_main([input_path, str(output_path)]) == 0

    record = json.loads(output_path.read_text(encoding="utf-8"))
    assert record["seq1"] == "G-ATTACA"
    assert record["seq2"] == "GCA-TGCU"
    assert record["score"] == 0
    assert record["matrix"][7][7] == 0

    stdout = capsys.readouterr().out
    assert "Reading files..." in stdout
    assert "Seq1:: G-ATTACA" in stdout

    output_echo = stdout.split("Output:: ", 1)[1].split("\nWrote alignment", 1)[0]
    assert json.loads(output_echo) == record


def test_align_script_flags_override_record_scoring(tmp_path):
    input_path = _write_input(tmp_path, {"seq1": "ACG", "seq2": ""})
    output_path = tmp_path / "output.yaml"

    align_main([input_path, str(output_path), "--gap", "-2"])

    text = output_path.read_text(encoding="utf-8")
    assert "score: -6" in text


def test_align_script_reads_fasta(tmp_path, capsys):
    path = tmp_path / "pair.fa"
    path.write_text(">a\nAAA\n>b\nAAA\n", encoding="utf-8")

    align_main([str(path), "--fasta"])

    assert "Score: 3" in capsys.readouterr().out


def test_align_script_missing_input(tmp_path):
    with pytest.raises(FileNotFoundError):
        align_main([str(tmp_path / "missing.json")])


def test_plot_matrix_writes_image(tmp_path):
    from nwalign.algorithms import align
    from nwalign.types import ScoringSchema
    from scripts.plot_matrix import plot_score_matrix

    alignment = align("GATTACA", "GCATGCU", ScoringSchema(match=1, mismatch=-1, gap=-1))
    written = plot_score_matrix(alignment, "GATTACA", "GCATGCU", tmp_path / "gattaca")

    assert written == tmp_path / "gattaca.png"
    assert written.stat().st_size > 0
