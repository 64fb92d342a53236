# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Coze-JWT-Issuer contributors

"""Value objects for a single token request."""

import json
import uuid
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class IssueRequest:
    """Validated parameters for one issuance.

    Attributes:
        identity_id: Coze OAuth app id, becomes the ``iss`` claim
        key_id: Public key fingerprint, becomes the ``kid`` header
        audience: Coze API endpoint, becomes the ``aud`` claim
        ttl_seconds: Token lifetime in seconds
    """

    identity_id: str
    key_id: str
    audience: str
    ttl_seconds: int


@dataclass(frozen=True)
class TokenClaims:
    """JWT claim set asserting a Coze app identity."""

    issued_at: int
    expires_at: int
    jwt_id: str
    audience: str
    issuer: str

    @classmethod
    def create(cls, identity_id: str, audience: str, ttl_seconds: int, now: float) -> "TokenClaims":
        """Build claims for a token valid from ``now`` for ``ttl_seconds``.

        ``now`` is truncated to whole seconds and a fresh UUID4 is drawn for
        ``jti`` on every call.
        """
        issued_at = int(now)
        return cls(
            issued_at=issued_at,
            expires_at=issued_at + ttl_seconds,
            jwt_id=str(uuid.uuid4()),
            audience=audience,
            issuer=identity_id,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "iat": self.issued_at,
            "exp": self.expires_at,
            "jti": self.jwt_id,
            "aud": self.audience,
            "iss": self.issuer,
        }


@dataclass(frozen=True)
class TokenRequest:
    """Transport-neutral view of an inbound HTTP request."""

    method: str
    body: str | bytes | None = None


@dataclass(frozen=True)
class TokenResponse:
    """Transport-neutral HTTP response with a JSON body."""

    status_code: int
    body: dict[str, Any]
    headers: dict[str, str] = field(default_factory=dict)

    @classmethod
    def json(cls, status_code: int, body: dict[str, Any], headers: dict[str, str] | None = None) -> "TokenResponse":
        merged = {"Content-Type": "application/json"}
        if headers:
            merged.update(headers)
        return cls(status_code=status_code, body=body, headers=merged)

    def to_json(self) -> str:
        return json.dumps(self.body, ensure_ascii=False)
