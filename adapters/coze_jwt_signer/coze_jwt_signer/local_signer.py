# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Coze-JWT-Issuer contributors

"""In-process JWT signing backed by PyJWT and cryptography."""

from typing import Any

import jwt
from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.rsa import RSAPrivateKey

from .exceptions import JWTSignerError, KeyMaterialError
from .signer import JWTSigner

SUPPORTED_ALGORITHMS = ("RS256", "RS384", "RS512")


class LocalJWTSigner(JWTSigner):
    """JWT signer that signs locally with an RSA private key.

    The key is supplied per call as PEM text, parsed with ``cryptography``
    and handed to ``jwt.encode``. Supported algorithms: RS256, RS384, RS512.
    """

    def __init__(self, algorithm: str = "RS256"):
        """Initialize local JWT signer.

        Args:
            algorithm: Signing algorithm (RS256, RS384, RS512)

        Raises:
            JWTSignerError: If algorithm is unsupported
        """
        if algorithm not in SUPPORTED_ALGORITHMS:
            raise JWTSignerError(
                f"Unsupported algorithm: {algorithm}. "
                f"Supported: {', '.join(SUPPORTED_ALGORITHMS)}"
            )
        super().__init__(algorithm)

    def load_private_key(self, private_key_pem: str | bytes) -> RSAPrivateKey:
        """Parse a PEM private key and check it matches the algorithm.

        Args:
            private_key_pem: Unencrypted PEM private key (PKCS#1 or PKCS#8)

        Returns:
            RSA private key object

        Raises:
            KeyMaterialError: If the PEM cannot be parsed or is not RSA
        """
        if isinstance(private_key_pem, str):
            private_key_pem = private_key_pem.encode("utf-8")

        try:
            private_key = serialization.load_pem_private_key(private_key_pem, password=None)
        except (ValueError, TypeError, UnsupportedAlgorithm) as e:
            raise KeyMaterialError(f"Failed to load private key: {e}") from e

        if not isinstance(private_key, RSAPrivateKey):
            raise KeyMaterialError(f"Private key must be RSA for {self.algorithm}")

        return private_key

    def sign(
        self,
        headers: dict[str, Any],
        claims: dict[str, Any],
        private_key_pem: str,
    ) -> str:
        private_key = self.load_private_key(private_key_pem)

        try:
            return jwt.encode(
                claims,
                private_key,
                algorithm=self.algorithm,
                headers=headers,
            )
        except (jwt.PyJWTError, ValueError, TypeError) as e:
            raise JWTSignerError(f"Signing failed: {e}") from e
