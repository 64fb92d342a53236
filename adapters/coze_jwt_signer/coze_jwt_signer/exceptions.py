# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Coze-JWT-Issuer contributors

"""Exceptions for JWT signing operations."""


class JWTSignerError(Exception):
    """Base exception for JWT signing errors."""
    pass


class KeyMaterialError(JWTSignerError):
    """Raised when the private key cannot be decoded or parsed."""
    pass
