"""Development entry point (no install needed).

Why here:
- The packages live under `src/`, so a plain checkout cannot import `cli` or
  `core` until that directory is on `sys.path`.
- Lets both programs run without the console scripts:
  `python -m main product 6 7`, `python -m main print-file notes.txt`.
"""

from __future__ import annotations

import sys
from pathlib import Path

SRC_DIR = Path(__file__).resolve().parent / "src"


def _ensure_src_on_path() -> None:
    if str(SRC_DIR) not in sys.path:
        sys.path.insert(0, str(SRC_DIR))


def main(argv: list[str] | None = None) -> None:
    _ensure_src_on_path()

    from cli.main import run  # noqa: PLC0415

    run(argv)


if __name__ == "__main__":
    main()
