"""Module entry-point for ``python -m tf_negative_coverage``."""
from __future__ import annotations

from .cli import main

if __name__ == "__main__":
    raise SystemExit(main())
