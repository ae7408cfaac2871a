"""Run a complete recovery and report it as a value instead of raising."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import List, Optional

from .errors import RecoveryError
from .loader import ShareDocument, load_document, select_shares
from .shamir import DivisionMode, Share, interpolate_at_zero

_logger = logging.getLogger(__name__)


@dataclass
class RecoveryOutcome:
    secret: Optional[int] = None
    error: Optional[RecoveryError] = None
    shares: List[Share] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.error is None


def recover_document(document: ShareDocument, *, division: DivisionMode = "exact") -> RecoveryOutcome:
    outcome = RecoveryOutcome()
    try:
        outcome.shares = select_shares(document)
        outcome.secret = interpolate_at_zero(outcome.shares, document.k, division=division)
    except RecoveryError as exc:
        _logger.debug("Recovery failed: %s", exc)
        outcome.error = exc
    return outcome


def recover_file(path: str | os.PathLike[str], *, division: DivisionMode = "exact") -> RecoveryOutcome:
    """Load ``path`` and interpolate its first ``k`` shares at zero."""
    try:
        document = load_document(path)
    except RecoveryError as exc:
        _logger.debug("Could not load %s: %s", path, exc)
        return RecoveryOutcome(error=exc)
    return recover_document(document, division=division)


__all__ = ["RecoveryOutcome", "recover_document", "recover_file"]
