"""Serialization utilities for alignment requests and results (load and save)."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Mapping

import yaml

from nwalign.types import (
    DEFAULT_SCORING,
    AlignmentRequest,
    AlignmentResult,
    ScoringSchema,
)

JSON_SUFFIXES = (".json",)
YAML_SUFFIXES = (".yaml", ".yml")


def _record_suffix(path: Path, context: str) -> str:
    suffix = path.suffix.lower()
    if suffix not in JSON_SUFFIXES + YAML_SUFFIXES:
        raise ValueError(
            f"Unsupported {context} format {suffix!r}; "
            f"expected one of {list(JSON_SUFFIXES + YAML_SUFFIXES)}"
        )
    return suffix


def _require_string(payload: Mapping[str, Any], key: str) -> str:
    if key not in payload:
        raise ValueError(f"input record missing required field: {key!r}")
    value = payload[key]
    if not isinstance(value, str):
        raise ValueError(f"{key} must be a string, got {type(value).__name__}")
    return value


def scoring_from_dict(data: Any) -> ScoringSchema:
    """Build a ScoringSchema from an optional ``scoring_schema`` value."""
    if data is None:
        return DEFAULT_SCORING
    if not isinstance(data, Mapping):
        raise ValueError(
            f"scoring_schema must be a mapping, got {type(data).__name__}"
        )
    return ScoringSchema.from_dict(data)


def request_from_dict(payload: Any) -> AlignmentRequest:
    """Validate a plain input record and convert it to an AlignmentRequest."""
    if not isinstance(payload, Mapping):
        raise ValueError(
            f"input record must be a mapping, got {type(payload).__name__}"
        )
    return AlignmentRequest(
        seq1=_require_string(payload, "seq1"),
        seq2=_require_string(payload, "seq2"),
        scoring=scoring_from_dict(payload.get("scoring_schema")),
        name=payload.get("name"),
    )


def load_request(path: Path) -> AlignmentRequest:
    """Load an alignment request from a JSON or YAML file; the suffix selects the parser."""
    path = Path(path)
    suffix = _record_suffix(path, "input")
    with path.open("r", encoding="utf-8") as handle:
        if suffix in JSON_SUFFIXES:
            payload = json.load(handle)
        else:
            payload = yaml.safe_load(handle)
    return request_from_dict(payload)


def request_to_dict(request: AlignmentRequest) -> Dict[str, Any]:
    """Convert an AlignmentRequest back into the input record layout."""
    record: Dict[str, Any] = {
        "seq1": request.seq1,
        "seq2": request.seq2,
        "scoring_schema": request.scoring.to_dict(),
    }
    if request.name is not None:
        record["name"] = request.name
    return record


def result_to_dict(
    alignment: AlignmentResult, scoring: ScoringSchema
) -> Dict[str, Any]:
    """Convert an AlignmentResult into the output record layout."""
    return alignment.to_dict(scoring)


def dump_result(
    alignment: AlignmentResult, scoring: ScoringSchema, path: Path
) -> Path:
    """Write the output record to ``path``; the suffix selects JSON or YAML."""
    path = Path(path)
    suffix = _record_suffix(path, "output")

    payload = result_to_dict(alignment, scoring)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as handle:
        if suffix in JSON_SUFFIXES:
            json.dump(payload, handle)
        else:
            yaml.safe_dump(payload, handle, sort_keys=False)
    return path


__all__ = [
    "scoring_from_dict",
    "request_from_dict",
    "request_to_dict",
    "load_request",
    "result_to_dict",
    "dump_result",
]
