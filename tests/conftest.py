"""
Pytest configuration: put src/ and scripts/ on sys.path before test imports.
"""

import sys
from pathlib import Path

_tests_dir = Path(__file__).resolve().parent
_repo_root = _tests_dir.parent

for _path in (_repo_root / "src", _repo_root / "scripts"):
    if str(_path) not in sys.path:
        sys.path.insert(0, str(_path))

REPO_ROOT = _repo_root
