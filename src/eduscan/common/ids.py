from __future__ import annotations

import uuid


def new_id(prefix: str) -> str:
    """Fresh surrogate id such as ``ATT-3f9c0a12b7de``."""
    return f"{prefix}-{uuid.uuid4().hex[:12]}"
