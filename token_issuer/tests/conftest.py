# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Coze-JWT-Issuer contributors

"""Pytest configuration for token issuer tests."""

import base64
from typing import Any

import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

from coze_jwt_signer import JWTSigner
from coze_logging import SilentLogger
from token_issuer.app.config import IssuerConfig


class FakeSigner(JWTSigner):
    """Signer double that records calls and returns or raises on demand."""

    def __init__(self, token: str = "header.payload.signature", error: Exception | None = None):
        super().__init__("RS256")
        self.token = token
        self.error = error
        self.calls: list[tuple[dict[str, Any], dict[str, Any], str]] = []

    def sign(self, headers, claims, private_key_pem):
        self.calls.append((headers, claims, private_key_pem))
        if self.error is not None:
            raise self.error
        return self.token


@pytest.fixture(scope="session")
def rsa_private_key():
    """Generate an RSA key once for the whole session."""
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="session")
def private_key_pem(rsa_private_key) -> str:
    return rsa_private_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    ).decode("utf-8")


@pytest.fixture(scope="session")
def private_key_b64(private_key_pem) -> str:
    return base64.b64encode(private_key_pem.encode("utf-8")).decode("ascii")


@pytest.fixture
def issuer_config(private_key_b64) -> IssuerConfig:
    return IssuerConfig(private_key=private_key_b64)


@pytest.fixture
def silent_logger() -> SilentLogger:
    return SilentLogger()


@pytest.fixture
def fake_signer() -> FakeSigner:
    return FakeSigner()
