# SPDX-FileCopyrightText: 2025 secret-recovery contributors
# SPDX-License-Identifier: MIT
#
# conftest.py: test environment
#   • src/ on sys.path so the package imports without installation
#   • SECRET_RECOVERY_* overrides from the shell do not leak into tests

from __future__ import annotations

import os
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent
SRC = ROOT / "src"
if SRC.is_dir():
    sys.path.insert(0, str(SRC))  # so that imports resolve against src/

for _name in [name for name in os.environ if name.startswith("SECRET_RECOVERY_")]:
    del os.environ[_name]
