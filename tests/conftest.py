"""Shared fixtures for share documents."""
from __future__ import annotations

import json
from pathlib import Path

import pytest

CANONICAL_DOCUMENT = {
    "keys": {"n": 4, "k": 3},
    "1": {"base": "10", "value": "4"},
    "2": {"base": "2", "value": "111"},
    "3": {"base": "10", "value": "12"},
    "6": {"base": "4", "value": "213"},
}


@pytest.fixture
def canonical_document() -> dict:
    return json.loads(json.dumps(CANONICAL_DOCUMENT))


@pytest.fixture
def write_document(tmp_path):
    """Return a helper that stores a document as JSON and returns its path."""

    def _write(document, name: str = "input.json") -> Path:
        path = tmp_path / name
        if isinstance(document, str):
            path.write_text(document, encoding="utf-8")
        else:
            path.write_text(json.dumps(document), encoding="utf-8")
        return path

    return _write
