# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Coze-JWT-Issuer contributors

"""Exceptions raised while serving a token request.

Each exception carries the HTTP status code and the caller-safe message
of the response it turns into.
"""

from collections.abc import Sequence


class TokenIssuerError(Exception):
    """Base exception for token request failures."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ClientInputError(TokenIssuerError):
    """The request itself is unacceptable."""

    status_code = 400


class MethodNotAllowedError(ClientInputError):
    """The request used an HTTP verb other than the issuance verb."""

    status_code = 405

    def __init__(self, message: str, allowed: Sequence[str] = ("POST",)):
        super().__init__(message)
        self.allowed = tuple(allowed)


class ConfigurationError(TokenIssuerError):
    """Required process configuration is missing."""

    status_code = 500


class SigningError(TokenIssuerError):
    """Key decoding or JWT signing failed."""

    status_code = 500
