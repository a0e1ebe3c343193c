"""HTTP Basic credential helpers."""

import base64
import binascii
import hmac
from typing import Optional, Tuple


def parse_basic_auth(header: Optional[str]) -> Optional[Tuple[str, str]]:
    """Decode ``Basic <b64(user:password)>``. Returns None if malformed."""
    if not header or not header.startswith("Basic "):
        return None
    try:
        decoded = base64.b64decode(header[6:].strip(), validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError):
        return None
    user, sep, password = decoded.partition(":")
    if not sep:
        return None
    return user, password


def check_basic_auth(header: Optional[str], user: str, password: str) -> bool:
    credentials = parse_basic_auth(header)
    if credentials is None:
        return False
    return credentials[0] == user and credentials[1] == password


def check_token(supplied: Optional[str], expected: str) -> bool:
    if supplied is None:
        return False
    return hmac.compare_digest(supplied.encode("utf-8"), expected.encode("utf-8"))
