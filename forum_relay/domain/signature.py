"""GitHub webhook signature (``x-hub-signature-256``) verification."""

import hashlib
import hmac
from typing import Optional

SIGNATURE_PREFIX = "sha256="
_EXPECTED_LENGTH = len(SIGNATURE_PREFIX) + hashlib.sha256().digest_size * 2


def sign(raw_body: bytes, secret: bytes) -> str:
    """Return the header value GitHub would send for ``raw_body``."""
    return SIGNATURE_PREFIX + hmac.new(secret, raw_body, hashlib.sha256).hexdigest()


def verify(raw_body: bytes, provided_signature: Optional[str], secret: bytes) -> bool:
    """Check ``provided_signature`` against the HMAC of the raw body.

    Never raises: absent, malformed or wrong-length signatures are False.
    The digest comparison itself is constant time.
    """
    if not isinstance(provided_signature, str) or not provided_signature:
        return False
    if len(provided_signature) != _EXPECTED_LENGTH:
        return False
    if not provided_signature.startswith(SIGNATURE_PREFIX):
        return False
    try:
        provided = provided_signature.encode("ascii")
    except UnicodeEncodeError:
        return False
    expected = sign(raw_body, secret).encode("ascii")
    return hmac.compare_digest(expected, provided)
