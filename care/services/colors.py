"""Avatar colours for profiles without a picture."""
from __future__ import annotations

import hashlib

PALETTE = (
    '#2563eb', '#16a34a', '#dc2626', '#9333ea', '#ea580c',
    '#0891b2', '#ca8a04', '#db2777', '#4f46e5', '#059669',
)


def color_for(seed: str) -> str:
    digest = hashlib.sha1((seed or '').lower().encode()).digest()
    return PALETTE[digest[0] % len(PALETTE)]
