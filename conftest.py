# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Coze-JWT-Issuer contributors

"""Root conftest.py to make the service, function and adapters importable from all tests."""

import sys
from pathlib import Path

_repo_root = Path(__file__).parent

for _path in [_repo_root, *sorted((_repo_root / "adapters").glob("coze_*"))]:
    if str(_path) not in sys.path:
        sys.path.insert(0, str(_path))
