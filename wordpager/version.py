from __future__ import annotations

import importlib.metadata
import subprocess
from pathlib import Path
from typing import Optional


def _run_git(args: list[str], cwd: Path) -> Optional[str]:
    try:
        out = subprocess.check_output(["git", *args], cwd=str(cwd), stderr=subprocess.DEVNULL)
        return out.decode().strip() or None
    except (subprocess.CalledProcessError, FileNotFoundError, OSError):
        return None


def get_package_version() -> str:
    try:
        return importlib.metadata.version("wordpager")
    except importlib.metadata.PackageNotFoundError:
        return "unknown"


def get_commit() -> Optional[str]:
    here = Path(__file__).resolve().parent
    commit = _run_git(["rev-parse", "HEAD"], cwd=here)
    # Use short (7-character) git hashes when available
    return commit[:7] if commit else None


def get_version_string() -> str:
    version = get_package_version()
    commit = get_commit()
    return f"wordpager {version} ({commit})" if commit else f"wordpager {version}"
