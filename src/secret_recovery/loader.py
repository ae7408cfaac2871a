"""Share document loading and share selection.

The document is a JSON object with a ``"keys"`` object holding ``n`` and
``k`` plus one object per share, keyed by its decimal index::

    {
        "keys": {"n": 4, "k": 3},
        "1": {"base": "10", "value": "4"},
        "2": {"base": "2", "value": "111"}
    }

Only indices ``1..n`` are considered. Shares are selected in ascending index
order and selection stops at the ``k``-th present share.
"""
from __future__ import annotations

import json
import logging
import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

from . import radix
from .errors import InputUnreadable, InsufficientShares, MalformedInput
from .shamir import Share

_logger = logging.getLogger(__name__)

_DECIMAL = re.compile(r"[+-]?[0-9]+")
_INDEX_KEY = re.compile(r"[1-9][0-9]*")


@dataclass(frozen=True)
class ShareRecord:
    index: int
    base: int
    value: str


@dataclass(frozen=True)
class ShareDocument:
    n: int
    k: int
    records: tuple[ShareRecord, ...] = field(default_factory=tuple)


def _as_int(raw: Any, where: str) -> int:
    if isinstance(raw, bool):
        raise MalformedInput(f"{where} must be an integer, got {raw!r}")
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str) and _DECIMAL.fullmatch(raw):
        return int(raw)
    raise MalformedInput(f"{where} must be an integer, got {raw!r}")


def _require(obj: Mapping[str, Any], key: str, where: str) -> Any:
    if key not in obj:
        raise MalformedInput(f"Missing key {key!r} in {where}")
    return obj[key]


def _parse_record(index: int, raw: Any) -> ShareRecord:
    where = f"share {index}"
    if not isinstance(raw, Mapping):
        raise MalformedInput(f"{where} must be an object")
    base = _as_int(_require(raw, "base", where), f"{where} base")
    value = _require(raw, "value", where)
    if not isinstance(value, str):
        raise MalformedInput(f"{where} value must be a string, got {value!r}")
    return ShareRecord(index=index, base=base, value=value)


def parse_document(data: Any) -> ShareDocument:
    """Extract a typed :class:`ShareDocument` from parsed JSON."""
    if not isinstance(data, Mapping):
        raise MalformedInput("Share document must be a JSON object")
    keys = _require(data, "keys", "document")
    if not isinstance(keys, Mapping):
        raise MalformedInput("'keys' must be an object")
    n = _as_int(_require(keys, "n", "'keys'"), "n")
    k = _as_int(_require(keys, "k", "'keys'"), "k")
    if n < 0:
        raise MalformedInput(f"n must not be negative, got {n}")
    if k < 1:
        raise MalformedInput(f"k must be positive, got {k}")

    # Only keys actually present are visited, however large n is.
    indices = sorted(
        int(key) for key in data if isinstance(key, str) and _INDEX_KEY.fullmatch(key) and int(key) <= n
    )
    records = tuple(_parse_record(index, data[str(index)]) for index in indices)
    return ShareDocument(n=n, k=k, records=records)


def load_document(path: str | os.PathLike[str]) -> ShareDocument:
    """Read and parse the share document at ``path``."""
    file_path = Path(path)
    if not file_path.is_file():
        raise InputUnreadable(f"Cannot read {file_path.name} at {file_path.absolute()}")
    try:
        text = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise InputUnreadable(f"Cannot read {file_path.absolute()}: {exc}") from exc
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise MalformedInput(f"Invalid JSON in {file_path.name}: {exc}") from exc

    document = parse_document(data)
    _logger.debug(
        "Loaded %s: n=%d k=%d, %d share records", file_path, document.n, document.k, len(document.records)
    )
    return document


def select_shares(document: ShareDocument) -> list[Share]:
    """Decode the first ``k`` present records in ascending index order."""
    shares: list[Share] = []
    for record in document.records:
        if len(shares) >= document.k:
            break
        shares.append(Share(x=record.index, y=radix.decode(record.value, record.base)))
    if len(shares) < document.k:
        raise InsufficientShares(f"Found only {len(shares)} shares, but k = {document.k}")
    _logger.debug("Selected shares at x=%s", [share.x for share in shares])
    return shares


__all__ = ["ShareRecord", "ShareDocument", "parse_document", "load_document", "select_shares"]
