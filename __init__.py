from __future__ import annotations

"""Compatibility shim so ``uilocator`` imports work from the repository root.

The package itself lives at ``src/uilocator``. Running from the parent folder
would otherwise pick this directory up as an empty namespace package.
"""

from pathlib import Path

__version__ = "0.1.0"

_repo_pkg_dir = Path(__file__).resolve().parent
_src_pkg_dir = _repo_pkg_dir / "src" / "uilocator"
if _src_pkg_dir.is_dir():
    src_path = str(_src_pkg_dir)
    if src_path not in __path__:
        __path__.append(src_path)
