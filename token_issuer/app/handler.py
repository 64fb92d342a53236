# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Coze-JWT-Issuer contributors

"""Request handling for the Coze JWT endpoint.

``handle`` runs a short validation pipeline (method, configuration, body,
required fields), delegates to the issuer and turns every outcome into a
``TokenResponse``. Failures are raised as ``TokenIssuerError`` subclasses
by the helpers below and converted at the ``handle`` boundary.
"""

import json
from typing import Any

from coze_jwt_signer import JWTSigner
from coze_logging import Logger, create_logger

from . import ALLOWED_METHOD
from .config import IssuerConfig
from .errors import (
    ClientInputError,
    ConfigurationError,
    MethodNotAllowedError,
    SigningError,
    TokenIssuerError,
)
from .issuer import issue_token
from .models import IssueRequest, TokenRequest, TokenResponse

logger = create_logger(name="token_issuer.handler")

METHOD_NOT_ALLOWED_MESSAGE = f"Only {ALLOWED_METHOD} requests are allowed."
MISSING_KEY_MESSAGE = "Server configuration error: signing key is not configured."
UNPARSEABLE_BODY_MESSAGE = "Unable to parse request body; it must be valid JSON."
NOT_AN_OBJECT_MESSAGE = "Request body must be a JSON object."
MISSING_PARAMS_MESSAGE = "Request body is missing required parameters: cozeAppId and keyId."
INVALID_AUDIENCE_MESSAGE = "audience must be a non-empty string."
INVALID_EXPIRES_IN_MESSAGE = "expiresIn must be a positive integer number of seconds."
SIGNING_FAILED_MESSAGE = "Failed to generate Coze JWT; check the function logs for details."
SUCCESS_MESSAGE = "Coze JWT generated successfully."


def _is_non_empty_str(value: Any) -> bool:
    return isinstance(value, str) and bool(value)


def _check_method(method: str) -> None:
    if (method or "").upper() != ALLOWED_METHOD:
        raise MethodNotAllowedError(METHOD_NOT_ALLOWED_MESSAGE, allowed=(ALLOWED_METHOD,))


def _require_private_key(config: IssuerConfig) -> str:
    if not config.has_private_key:
        raise ConfigurationError(MISSING_KEY_MESSAGE)
    return config.private_key


def _parse_body(body: str | bytes | None) -> dict[str, Any]:
    if not body:
        raise ClientInputError(UNPARSEABLE_BODY_MESSAGE)

    try:
        if isinstance(body, bytes):
            body = body.decode("utf-8")
        payload = json.loads(body)
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ClientInputError(UNPARSEABLE_BODY_MESSAGE) from e

    if not isinstance(payload, dict):
        raise ClientInputError(NOT_AN_OBJECT_MESSAGE)
    return payload


def _coerce_expires_in(raw: Any, default: int) -> int:
    if raw is None:
        return default
    if isinstance(raw, bool):
        raise ClientInputError(INVALID_EXPIRES_IN_MESSAGE)
    if isinstance(raw, float) and raw.is_integer():
        raw = int(raw)
    if not isinstance(raw, int) or raw <= 0:
        raise ClientInputError(INVALID_EXPIRES_IN_MESSAGE)
    return raw


def _extract_issue_request(payload: dict[str, Any], config: IssuerConfig) -> IssueRequest:
    coze_app_id = payload.get("cozeAppId")
    key_id = payload.get("keyId")
    if not _is_non_empty_str(coze_app_id) or not _is_non_empty_str(key_id):
        raise ClientInputError(MISSING_PARAMS_MESSAGE)

    audience = payload.get("audience")
    if audience is None:
        audience = config.default_audience
    elif not _is_non_empty_str(audience):
        raise ClientInputError(INVALID_AUDIENCE_MESSAGE)

    return IssueRequest(
        identity_id=coze_app_id,
        key_id=key_id,
        audience=audience,
        ttl_seconds=_coerce_expires_in(payload.get("expiresIn"), config.default_expires_in),
    )


def _error_response(error: TokenIssuerError, log: Logger) -> TokenResponse:
    details: dict[str, Any] = {"status_code": error.status_code, "reason": error.message}
    if error.__cause__ is not None:
        details["error"] = str(error.__cause__)

    if error.status_code >= 500:
        log.error("Token request failed", **details)
    else:
        log.warning("Token request rejected", **details)

    headers = None
    if isinstance(error, MethodNotAllowedError):
        headers = {"Allow": ", ".join(error.allowed)}

    message = SIGNING_FAILED_MESSAGE if isinstance(error, SigningError) else error.message
    return TokenResponse.json(error.status_code, {"message": message}, headers)


def handle(
    request: TokenRequest,
    config: IssuerConfig,
    *,
    signer: JWTSigner | None = None,
    log: Logger | None = None,
) -> TokenResponse:
    """Serve one token request.

    Args:
        request: Inbound request (method and raw body)
        config: Process-wide issuer configuration
        signer: Signer passed through to ``issue_token``
        log: Logger for diagnostics; defaults to the module logger

    Returns:
        TokenResponse. 405 for a non-POST verb, 500 when the key is not
        configured, 400 for an unparseable body or missing/invalid fields,
        500 when signing fails, 200 with ``{message, token}`` otherwise.
    """
    log = log or logger

    try:
        _check_method(request.method)
        private_key = _require_private_key(config)
        issue_request = _extract_issue_request(_parse_body(request.body), config)
        token = issue_token(
            private_key,
            issue_request.identity_id,
            issue_request.key_id,
            issue_request.audience,
            issue_request.ttl_seconds,
            signer=signer,
            log=log,
        )
    except TokenIssuerError as e:
        return _error_response(e, log)

    log.info(
        "Token request served",
        coze_app_id=issue_request.identity_id,
        key_id=issue_request.key_id,
        ttl_seconds=issue_request.ttl_seconds,
    )
    return TokenResponse.json(200, {"message": SUCCESS_MESSAGE, "token": token})
