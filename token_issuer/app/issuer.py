# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Coze-JWT-Issuer contributors

"""Coze JWT construction and signing.

Builds the claim set and JOSE header for a Coze OAuth JWT, decodes the
configured key material and hands both to a ``JWTSigner``. Every call is
independent: no caching, no retries, no fallback key.
"""

import base64
import binascii
import time
from collections.abc import Callable
from typing import Any

from coze_jwt_signer import JWTSigner, KeyMaterialError, LocalJWTSigner
from coze_logging import Logger, create_logger

from . import SIGNING_ALGORITHM
from .config import DEFAULT_AUDIENCE, DEFAULT_EXPIRES_IN
from .errors import SigningError
from .models import TokenClaims

logger = create_logger(name="token_issuer.issuer")

# Substrings that crypto libraries put in errors about unparseable keys
MALFORMED_KEY_MARKERS = (
    "PEM routines",
    "Could not deserialize key data",
    "Could not parse the provided",
)


def decode_private_key(private_key_b64: str) -> str:
    """Decode base64 key material into PEM text.

    Literal ``\\n`` sequences are replaced with real newlines, since secret
    stores often flatten multi-line PEM values into one escaped line.

    Args:
        private_key_b64: Base64 text wrapping a PEM private key

    Returns:
        PEM text

    Raises:
        KeyMaterialError: If the value is not base64-encoded UTF-8 text
    """
    try:
        pem = base64.b64decode(private_key_b64).decode("utf-8")
    except (binascii.Error, ValueError) as e:
        raise KeyMaterialError(f"Private key is not base64-encoded UTF-8 text: {e}") from e

    return pem.replace("\\n", "\n")


def token_headers(key_id: str) -> dict[str, Any]:
    """JOSE header for a Coze JWT. ``kid`` is passed through unvalidated."""
    return {
        "alg": SIGNING_ALGORITHM,
        "typ": "JWT",
        "kid": key_id,
    }


def looks_like_malformed_key(error: BaseException) -> bool:
    """Return True if ``error`` (or its cause) points at bad key material."""
    while error is not None:
        if isinstance(error, KeyMaterialError):
            return True
        if any(marker in str(error) for marker in MALFORMED_KEY_MARKERS):
            return True
        error = error.__cause__
    return False


def issue_token(
    private_key_b64: str,
    identity_id: str,
    key_id: str,
    audience: str = DEFAULT_AUDIENCE,
    ttl_seconds: int = DEFAULT_EXPIRES_IN,
    *,
    signer: JWTSigner | None = None,
    clock: Callable[[], float] = time.time,
    log: Logger | None = None,
) -> str:
    """Issue a signed JWT asserting a Coze app identity.

    Args:
        private_key_b64: Base64-encoded PEM RSA private key
        identity_id: Coze OAuth app id (``iss``)
        key_id: Public key fingerprint (``kid``)
        audience: Coze API endpoint (``aud``)
        ttl_seconds: Token lifetime in seconds, must be positive
        signer: Signer to use; defaults to an RS256 ``LocalJWTSigner``
        clock: Source of the current unix time
        log: Logger for diagnostics; defaults to the module logger

    Returns:
        Compact JWT string

    Raises:
        ValueError: If ttl_seconds is not a positive integer
        SigningError: If key decoding or signing fails. The message is
            generic; details are logged and chained as ``__cause__``.
    """
    if isinstance(ttl_seconds, bool) or not isinstance(ttl_seconds, int) or ttl_seconds <= 0:
        raise ValueError(f"ttl_seconds must be a positive integer, got {ttl_seconds!r}")

    log = log or logger
    signer = signer or LocalJWTSigner(SIGNING_ALGORITHM)

    try:
        claims = TokenClaims.create(identity_id, audience, ttl_seconds, clock())
        private_key_pem = decode_private_key(private_key_b64)
        token = signer.sign(token_headers(key_id), claims.to_dict(), private_key_pem)
    except Exception as e:
        log.error(
            "Failed to generate Coze JWT",
            coze_app_id=identity_id,
            key_id=key_id,
            error_type=type(e).__name__,
            error=str(e),
        )
        if looks_like_malformed_key(e):
            log.error(
                "Private key looks malformed: check the PEM format and that "
                "COZE_PRIVATE_KEY holds the base64-encoded key with its line breaks intact"
            )
        raise SigningError("Failed to generate Coze JWT") from e

    log.info(
        "Coze JWT generated",
        coze_app_id=identity_id,
        key_id=key_id,
        audience=audience,
        jti=claims.jwt_id,
        expires_at=claims.expires_at,
    )
    return token
