# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Coze-JWT-Issuer contributors

"""Token issuer configuration.

Configuration comes from environment variables and is read once per
process into an immutable ``IssuerConfig``. The config object is passed
to the request handler explicitly so tests can substitute their own.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass, field

DEFAULT_AUDIENCE = "api.coze.cn"
DEFAULT_EXPIRES_IN = 600

PRIVATE_KEY_ENV = "COZE_PRIVATE_KEY"
DEFAULT_AUDIENCE_ENV = "COZE_DEFAULT_AUDIENCE"
DEFAULT_EXPIRES_IN_ENV = "COZE_DEFAULT_EXPIRES_IN"


@dataclass(frozen=True)
class IssuerConfig:
    """Process-wide issuer settings.

    Attributes:
        private_key: Base64-encoded PEM RSA private key, or None when unset.
            Excluded from ``repr`` so it never reaches logs.
        default_audience: Audience used when a request omits one
        default_expires_in: Token lifetime in seconds used when a request omits one
    """

    private_key: str | None = field(default=None, repr=False)
    default_audience: str = DEFAULT_AUDIENCE
    default_expires_in: int = DEFAULT_EXPIRES_IN

    @property
    def has_private_key(self) -> bool:
        return bool(self.private_key and self.private_key.strip())


def _get_positive_int(environ: Mapping[str, str], key: str, default: int) -> int:
    value = environ.get(key)
    if value is None:
        return default
    try:
        parsed = int(value)
    except ValueError:
        return default
    return parsed if parsed > 0 else default


def load_issuer_config(environ: Mapping[str, str] | None = None) -> IssuerConfig:
    """Load issuer configuration from the environment.

    Args:
        environ: Mapping to read instead of ``os.environ`` (for tests)

    Returns:
        IssuerConfig instance. A missing private key is not an error here;
        the handler reports it per request.

    Example:
        >>> config = load_issuer_config({"COZE_PRIVATE_KEY": "LS0tLS1CRUdJTi..."})
        >>> config.default_audience
        'api.coze.cn'
    """
    environ = environ if environ is not None else os.environ

    return IssuerConfig(
        private_key=environ.get(PRIVATE_KEY_ENV) or None,
        default_audience=environ.get(DEFAULT_AUDIENCE_ENV) or DEFAULT_AUDIENCE,
        default_expires_in=_get_positive_int(environ, DEFAULT_EXPIRES_IN_ENV, DEFAULT_EXPIRES_IN),
    )
