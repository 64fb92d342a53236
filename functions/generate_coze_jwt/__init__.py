# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Coze-JWT-Issuer contributors

"""
Azure Function: Coze JWT generator
HTTP triggered function that issues RS256 JWTs for the Coze OAuth JWT flow.
"""

import azure.functions as func

from coze_jwt_signer import LocalJWTSigner
from coze_logging import create_logger
from token_issuer.app import SIGNING_ALGORITHM
from token_issuer.app.config import IssuerConfig, load_issuer_config
from token_issuer.app.handler import handle
from token_issuer.app.models import TokenRequest

logger = create_logger(name="generate_coze_jwt")

# Initialized once per function instance and reused across invocations
_issuer_config: IssuerConfig | None = None
_signer: LocalJWTSigner | None = None


def get_issuer_config() -> IssuerConfig:
    """Get or load the issuer configuration.

    Configuration is read from the Function App settings on first use and
    kept for the lifetime of the function instance.
    """
    global _issuer_config

    if _issuer_config is None:
        _issuer_config = load_issuer_config()
        logger.info(
            "Issuer configuration loaded",
            private_key_configured=_issuer_config.has_private_key,
            default_audience=_issuer_config.default_audience,
            default_expires_in=_issuer_config.default_expires_in,
        )
    return _issuer_config


def get_signer() -> LocalJWTSigner:
    """Get or create the signer instance."""
    global _signer

    if _signer is None:
        _signer = LocalJWTSigner(SIGNING_ALGORITHM)
    return _signer


def main(req: func.HttpRequest) -> func.HttpResponse:
    """
    Azure Function entry point - triggered by an HTTP request.

    Expects a POST with a JSON body
    ``{"cozeAppId": ..., "keyId": ..., "audience"?: ..., "expiresIn"?: ...}``.

    Args:
        req: Incoming HTTP request

    Returns:
        JSON response with ``message`` and, on success, ``token``
    """
    logger.info("Coze JWT function triggered", method=req.method, url=req.url)

    response = handle(
        TokenRequest(method=req.method, body=req.get_body()),
        get_issuer_config(),
        signer=get_signer(),
    )

    return func.HttpResponse(
        body=response.to_json(),
        status_code=response.status_code,
        headers=response.headers,
        mimetype="application/json",
        charset="utf-8",
    )
