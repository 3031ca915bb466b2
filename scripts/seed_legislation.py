#!/usr/bin/env python3
"""Seed the legislation store without installing the package.

    python scripts/seed_legislation.py [URL ...] [--database-url URL]
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project source is importable when running the script directly.
_project_root = Path(__file__).resolve().parent.parent
_src = _project_root / "src"
if str(_src) not in sys.path:
    sys.path.insert(0, str(_src))

from lawvely.seed import main  # noqa: E402

if __name__ == "__main__":
    sys.exit(main())
