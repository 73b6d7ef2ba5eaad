# folio/util/stable_id.py
from __future__ import annotations

import re


def stable_hash(raw: str) -> str:
    """Return a short deterministic hash of ``raw``.

    Cheap rolling hash; stable across processes (unlike ``hash()``), so ids
    derived from it survive snapshot save/load.
    """
    h = 0
    for ch in raw:
        h = (h * 131 + ord(ch)) & 0xFFFFFFFF
    return f"{h:08x}"


def slugify(s: str) -> str:
    return re.sub(r"[^a-z0-9]+", "-", str(s).lower()).strip("-")
