"""Gravatar URL derivation."""

import hashlib
from urllib.parse import urlencode

GRAVATAR_BASE_URL = "https://www.gravatar.com/avatar"

# 200px, rated PG, "mystery man" fallback
DEFAULT_OPTIONS = {"s": "200", "r": "pg", "d": "mm"}


def gravatar_url(email: str, **options: str) -> str:
    """Return the Gravatar image URL for ``email``."""
    digest = hashlib.md5(email.strip().lower().encode("utf-8")).hexdigest()
    query = urlencode({**DEFAULT_OPTIONS, **options})
    return f"{GRAVATAR_BASE_URL}/{digest}?{query}"
