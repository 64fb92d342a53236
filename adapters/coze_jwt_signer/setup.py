# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Coze-JWT-Issuer contributors

"""Setup configuration for coze_jwt_signer adapter."""

from setuptools import find_packages, setup

setup(
    name="coze-jwt-signer",
    version="0.1.0",
    description="JWT signing adapter for the Coze JWT issuer",
    author="Coze-JWT-Issuer contributors",
    license="MIT",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "PyJWT>=2.8.0",
        "cryptography>=44.0.1",
    ],
    extras_require={
        "dev": [
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
    ],
)
