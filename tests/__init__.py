"""Test package for fpl_consistency."""

from __future__ import annotations

import sys
from pathlib import Path


# fpl_consistency lives under src/ and reads its bundled
# data/metrics_latest.json relative to the package, so the tests import it
# straight from the checkout's src/ tree when it is not pip-installed.
SRC_ROOT = Path(__file__).resolve().parents[1] / "src"
if SRC_ROOT.is_dir() and str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))
