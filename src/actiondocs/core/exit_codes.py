from __future__ import annotations

OK = 0
ERR_DOCS = 3
ERR_CONFIG = 4
ERR_INTERNAL = 99
