# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Coze-JWT-Issuer contributors

"""JWT signing adapter for the Coze JWT issuer.

Wraps the RS256 signing primitive behind a small interface so token
construction can be tested against a fake signer.
"""

from .exceptions import JWTSignerError, KeyMaterialError
from .local_signer import LocalJWTSigner
from .signer import JWTSigner

__all__ = [
    "JWTSigner",
    "LocalJWTSigner",
    "JWTSignerError",
    "KeyMaterialError",
]
