"""``python -m greetings``: same behaviour as the ``greetings`` console script."""

from __future__ import annotations

from .entry import main

if __name__ == "__main__":
    raise SystemExit(main())
