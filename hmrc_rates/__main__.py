"""Allow ``python -m hmrc_rates``."""

from __future__ import annotations

from hmrc_rates.cli import main

if __name__ == "__main__":  # pragma: no cover - thin wrapper
    raise SystemExit(main())
