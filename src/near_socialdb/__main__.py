from __future__ import annotations

from near_socialdb.interface.cli.app import main

if __name__ == "__main__":
    raise SystemExit(main())
