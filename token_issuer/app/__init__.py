# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Coze-JWT-Issuer contributors

"""Token issuer application package."""

__version__ = "0.1.0"

# HTTP verb that requests a token
ALLOWED_METHOD = "POST"

# JWT signing algorithm required by the Coze OAuth JWT flow
SIGNING_ALGORITHM = "RS256"
