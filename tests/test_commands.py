"""
Tests for the query and check commands.

The commands format lattice results; these check key substrings of the human
output and the structure of the JSON output.
"""

from __future__ import annotations

import json

from isograph.commands.check import run_check
from isograph.commands.query import (
    run_boundary,
    run_cover,
    run_explain,
    run_implied,
    run_impossible,
    run_prohibited,
)


def test_boundary_json(capsys) -> None:
    assert run_boundary(["G1a"], output_json=True) == 0

    data = json.loads(capsys.readouterr().out)
    assert data["anomalies"] == ["G1a"]
    assert data["not"] == ["read-atomic", "read-committed"]
    assert "strict-serializable" in data["also-not"]


def test_boundary_json_canonical(capsys) -> None:
    run_boundary(["G1a"], friendly=False, output_json=True)

    data = json.loads(capsys.readouterr().out)
    assert data["not"] == ["PL-2", "read-atomic"]
    assert "PL-SS" in data["also-not"]


def test_boundary_human_output(capsys) -> None:
    assert run_boundary(["G1a"]) == 0

    output = capsys.readouterr().out
    assert "Boundary for: G1a" in output
    assert "read-committed" in output


def test_prohibited_json(capsys) -> None:
    assert run_prohibited(["read-uncommitted"], output_json=True) == 0

    data = json.loads(capsys.readouterr().out)
    assert data["prohibited"] == ["G0", "cyclic-versions", "duplicate-elements"]


def test_impossible_lists_possible_models(capsys) -> None:
    assert run_impossible(["G2-realtime"], output_json=True) == 0

    data = json.loads(capsys.readouterr().out)
    assert data["impossible"] == ["strict-serializable"]
    assert "serializable" in data["possible"]
    assert "strict-serializable" not in data["possible"]


def test_implied_human_output(capsys) -> None:
    assert run_implied(["linearizable"]) == 0

    output = capsys.readouterr().out
    assert "Models implied by linearizable (8)" in output
    assert "read-your-writes" in output


def test_cover_strongest_and_weakest(capsys) -> None:
    run_cover(["serializable", "strict-serializable"], output_json=True)
    assert json.loads(capsys.readouterr().out)["strongest"] == ["strict-serializable"]

    run_cover(["serializable", "strict-serializable"], weakest=True, output_json=True)
    assert json.loads(capsys.readouterr().out)["weakest"] == ["serializable"]


def test_explain_model(capsys) -> None:
    assert run_explain("serializable", output_json=True) == 0

    data = json.loads(capsys.readouterr().out)
    assert data["model"]["canonical"] == "PL-3"
    assert data["model"]["friendly"] == "serializable"
    assert "PL-SS" in data["model"]["implied_by"]
    assert data["model"]["directly_prohibits"] == ["G1", "G2", "internal"]
    assert "anomaly" not in data


def test_explain_anomaly(capsys) -> None:
    assert run_explain("G1a", output_json=True) == 0

    data = json.loads(capsys.readouterr().out)
    assert data["anomaly"]["implies"] == ["G1"]
    assert data["anomaly"]["implied_by"] == ["dirty-update", "incompatible-order"]
    assert data["anomaly"]["directly_prohibited_by"] == [
        "causal-cerone",
        "parallel-snapshot-isolation",
        "prefix",
        "read-atomic",
    ]


def test_explain_unknown_tag(capsys) -> None:
    assert run_explain("G-bogus") == 1

    captured = capsys.readouterr()
    assert "Unknown model or anomaly: G-bogus" in captured.err


def test_check_reports_violation(write_claims, capsys) -> None:
    path = write_claims(
        'claims_id = "append"\nmodels = ["serializable"]\nanomalies = ["G-single"]\n'
    )

    assert run_check(path, output_json=True) == 1

    data = json.loads(capsys.readouterr().out)
    assert data["claims_id"] == "append"
    assert data["valid"] is False
    assert data["violations"] == ["G-single"]
    assert data["violated_models"] == ["serializable"]


def test_check_human_output_when_valid(write_claims, capsys) -> None:
    path = write_claims(
        'claims_id = "register"\nmodels = ["read-committed"]\nanomalies = ["G2-item"]\n'
    )

    assert run_check(path) == 0

    output = capsys.readouterr().out
    assert "Claims: register" in output
    assert "consistent with the claimed models" in output


def test_check_invalid_file(write_claims, capsys) -> None:
    path = write_claims('models = ["serializable"]\n')

    assert run_check(path) == 1
    assert "claims_id" in capsys.readouterr().err
