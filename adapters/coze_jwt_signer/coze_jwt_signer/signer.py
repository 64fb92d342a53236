# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Coze-JWT-Issuer contributors

"""Abstract base class for JWT signing operations."""

from abc import ABC, abstractmethod
from typing import Any


class JWTSigner(ABC):
    """Abstract base class for JWT signing operations.

    Implementations receive the JOSE header, the claim set and the PEM
    private key for a single token and return the compact serialization
    (``header.payload.signature``).

    Attributes:
        algorithm: JWT signing algorithm (e.g., "RS256")
    """

    def __init__(self, algorithm: str):
        self.algorithm = algorithm

    @abstractmethod
    def sign(
        self,
        headers: dict[str, Any],
        claims: dict[str, Any],
        private_key_pem: str,
    ) -> str:
        """Sign a claim set and return the compact token.

        Args:
            headers: JOSE header fields (alg, typ, kid)
            claims: JWT claim set
            private_key_pem: PEM-encoded private key

        Returns:
            Compact JWT string

        Raises:
            KeyMaterialError: If the private key cannot be parsed
            JWTSignerError: If signing fails for any other reason
        """
        pass
