from __future__ import annotations

USER_AGENT = "near-socialdb-client/0.1.0"
DEFAULT_TIMEOUT = 10
DEFAULT_FINALITY = "final"
