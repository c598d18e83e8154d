"""
Bearer token helpers.

Tokens are issued by an external identity provider and signed with a single
shared HMAC secret. We only need the `sub` claim; `exp` is enforced when present.
"""

from __future__ import annotations

import time
from typing import Any

import jwt

DEFAULT_ALGORITHM = "HS256"


class AuthSecurityError(RuntimeError):
    pass


def now_epoch_s() -> int:
    return int(time.time())


def build_access_token(
    *,
    subject: str,
    secret: str,
    algorithm: str = DEFAULT_ALGORITHM,
    expires_in_s: int | None = 24 * 60 * 60,
    extra_claims: dict[str, Any] | None = None,
) -> str:
    issued_at = now_epoch_s()
    payload: dict[str, Any] = {"sub": subject, "iat": issued_at}
    if expires_in_s is not None:
        payload["exp"] = issued_at + expires_in_s
    if extra_claims:
        payload.update(extra_claims)
    return jwt.encode(payload, secret, algorithm=algorithm)


def decode_access_token(token: str, *, secret: str, algorithm: str = DEFAULT_ALGORITHM) -> str:
    """
    Verify the token and return its subject claim.
    """
    raw = (token or "").strip()
    if not raw:
        raise AuthSecurityError("Access token is empty.")

    try:
        # Pinning `algorithms` rejects alg=none and any non-HMAC header.
        payload = jwt.decode(raw, secret, algorithms=[algorithm])
    except jwt.ExpiredSignatureError as exc:
        raise AuthSecurityError("Access token is expired.") from exc
    except jwt.InvalidTokenError as exc:
        raise AuthSecurityError("Invalid access token.") from exc

    subject = payload.get("sub")
    if not isinstance(subject, str) or not subject.strip():
        raise AuthSecurityError("Invalid access token subject.")
    return subject
