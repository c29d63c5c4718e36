from __future__ import annotations

from fleet_profile.cli import main


if __name__ == "__main__":
    raise SystemExit(main())
