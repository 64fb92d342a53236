# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Coze-JWT-Issuer contributors

"""Setup configuration for the Coze JWT issuer.

Installs the logging and signing adapters together with the token issuer
service so the Azure Function and the test suite can import them.
"""

from setuptools import setup

setup(
    name="coze-jwt-issuer",
    version="0.1.0",
    description="Serverless issuer of RS256 JWTs for the Coze OAuth JWT flow",
    author="Coze-JWT-Issuer contributors",
    license="MIT",
    packages=[
        "coze_logging",
        "coze_jwt_signer",
        "token_issuer",
        "token_issuer.app",
    ],
    package_dir={
        "coze_logging": "adapters/coze_logging/coze_logging",
        "coze_jwt_signer": "adapters/coze_jwt_signer/coze_jwt_signer",
    },
    install_requires=[
        "PyJWT>=2.8.0",  # For JWT encoding
        "cryptography>=44.0.1",  # For RSA key parsing and RS256 signatures
        "azure-functions>=1.18.0",  # For the HTTP-triggered function entry point
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
        ],
        "test": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
        ],
    },
    python_requires=">=3.10",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)
