"""
Signed cookie carrying the client's tracked dog.

The tracked dog is the record a client most recently created or
searched for.  Rather than holding it in a module‑level variable shared
by every request, its id travels with the client in a cookie of the form
``payload.signature``: the payload is base64url encoded JSON
(``{"dog_id": 7, "exp": 1700000000}``) and the signature is an
HMAC‑SHA256 of the encoded payload keyed with ``settings.secret_key``.
A cookie that fails verification or has expired is ignored, leaving the
client with no tracked dog.
"""

import base64
import binascii
import hashlib
import hmac
import json
import time
from typing import Optional

from fastapi import Request, Response

from .config import settings


def _b64_url_encode(data: bytes) -> str:
    """Base64‑url encode bytes without padding."""
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("utf-8")


def _b64_url_decode(data: str) -> bytes:
    """Decode base64‑url encoded string, adding padding if necessary."""
    padding = "=" * (-len(data) % 4)
    return base64.urlsafe_b64decode(data + padding)


def _sign(message: bytes, secret: str) -> bytes:
    """Compute HMAC‑SHA256 signature of a message using the given secret."""
    return hmac.new(secret.encode("utf-8"), message, hashlib.sha256).digest()


def create_tracking_token(dog_id: int, expires_delta: Optional[int] = None) -> str:
    """Create a signed token naming ``dog_id`` as the tracked dog.

    Parameters
    ----------
    dog_id : int
        Identifier of the dog to track.
    expires_delta : Optional[int]
        Lifetime of the token in seconds.  Defaults to
        ``settings.tracking_cookie_max_age``.
    """
    lifetime = expires_delta if expires_delta is not None else settings.tracking_cookie_max_age
    payload = {"dog_id": int(dog_id), "exp": int(time.time()) + lifetime}
    payload_b64 = _b64_url_encode(json.dumps(payload, separators=(",", ":")).encode("utf-8"))
    signature_b64 = _b64_url_encode(_sign(payload_b64.encode("utf-8"), settings.secret_key))
    return f"{payload_b64}.{signature_b64}"


def decode_tracking_token(token: Optional[str]) -> Optional[int]:
    """Verify a tracking token and return the dog id it carries.

    Returns ``None`` when the token is missing, malformed, carries a bad
    signature or has expired.
    """
    if not token:
        return None
    parts = token.split(".")
    if len(parts) != 2:
        return None
    payload_b64, signature_b64 = parts
    try:
        actual_sig = _b64_url_decode(signature_b64)
        expected_sig = _sign(payload_b64.encode("utf-8"), settings.secret_key)
        # Constant‑time comparison to prevent timing attacks
        if not hmac.compare_digest(expected_sig, actual_sig):
            return None
        data = json.loads(_b64_url_decode(payload_b64).decode("utf-8"))
    except (binascii.Error, UnicodeDecodeError, ValueError):
        return None
    if not isinstance(data, dict):
        return None
    exp = data.get("exp")
    dog_id = data.get("dog_id")
    if not isinstance(exp, int) or exp < int(time.time()):
        return None
    if not isinstance(dog_id, int):
        return None
    return dog_id


def get_tracked_dog_id(request: Request) -> Optional[int]:
    """Dependency returning the id of the caller's tracked dog, if any."""
    return decode_tracking_token(request.cookies.get(settings.tracking_cookie_name))


def set_tracked_dog(response: Response, dog_id: int) -> None:
    """Point the caller's tracking cookie at ``dog_id``."""
    response.set_cookie(
        key=settings.tracking_cookie_name,
        value=create_tracking_token(dog_id),
        max_age=settings.tracking_cookie_max_age,
        httponly=True,
        samesite="lax",
    )
