"""Shared pytest setup.

The parser modules live under the flat `src.*` namespace and are not installed as a distribution,
so the checkout root goes first on the import path.
"""

from __future__ import annotations

import sys
from pathlib import Path

CHECKOUT_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(CHECKOUT_ROOT))
