"""
Anonymous listener identity
---------------------------

There are no logins on the player. A listener is recognised by a short
SHA-256 digest of the client address and the User-Agent header, so the
same browser on the same connection always maps to the same fingerprint.
Different people behind one NAT with the same browser build collide; that
approximation is accepted.
"""
from __future__ import annotations

import hashlib
from typing import Final

from django.conf import settings

UNKNOWN: Final = "unknown"
FINGERPRINT_LENGTH: Final = 16


def fingerprint(address: str | None, user_agent: str | None) -> str:
    """16 hex characters of sha256("<address>-<user agent>")."""
    combined = f"{address or UNKNOWN}-{user_agent or UNKNOWN}"
    return hashlib.sha256(combined.encode("utf-8")).hexdigest()[:FINGERPRINT_LENGTH]


def client_address(request) -> str | None:
    if settings.RADIO_TRUST_X_FORWARDED_FOR:
        forwarded = request.META.get("HTTP_X_FORWARDED_FOR", "")
        first = forwarded.split(",")[0].strip()
        if first:
            return first
    return request.META.get("REMOTE_ADDR")


def user_fingerprint(request) -> str:
    return fingerprint(client_address(request), request.META.get("HTTP_USER_AGENT"))
