"""
Path resolver for promo-impact.

Rules
-----
* base_dir → $PROMO_IMPACT_HOME if set, else the project root
             (or the directory of the executable when frozen)
* data_dir → base_dir/data  (portable first); fallback ~/PromoImpact/data
* logs_dir → base_dir/logs  (portable first); fallback ~/PromoImpact/logs

NEVER use os.getcwd() or relative Path("...") strings in runtime code;
always call one of the functions below.
"""

import os
import sys
from pathlib import Path

APP_DIR_NAME = "PromoImpact"
HOME_ENV_VAR = "PROMO_IMPACT_HOME"


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _get_base_dir() -> Path:
    """
    Return the application's root directory.

    - $PROMO_IMPACT_HOME: explicit override
    - frozen: directory that contains the executable
    - dev: project root (src/promo_impact/utils/paths.py → three levels up)
    """
    override = os.environ.get(HOME_ENV_VAR)
    if override:
        return Path(override).expanduser().resolve()
    if getattr(sys, "frozen", False):
        return Path(sys.executable).resolve().parent
    return Path(__file__).resolve().parents[3]


def _try_writable(path: Path) -> bool:
    """
    Return True if *path* can be created and used as a writable directory.

    Uses a canary-file probe so permission issues (read-only installs,
    site-packages) are detected up front.
    """
    try:
        path.mkdir(parents=True, exist_ok=True)
        canary = path / ".write_probe"
        canary.touch()
        canary.unlink()
        return True
    except (OSError, PermissionError):
        return False


def _home_dir(sub: str) -> Path:
    """Return ~/PromoImpact/<sub> (honours %APPDATA% on Windows)."""
    root = os.environ.get("APPDATA") or str(Path.home())
    return Path(root) / APP_DIR_NAME / sub


def _resolve(sub: str) -> Path:
    primary = _get_base_dir() / sub
    if _try_writable(primary):
        return primary
    fallback = _home_dir(sub)
    fallback.mkdir(parents=True, exist_ok=True)
    return fallback


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def get_data_dir() -> Path:
    """
    Data directory (settings.json, input bundles).

    Priority:
      1. <base_dir>/data
      2. ~/PromoImpact/data  ← fallback if base_dir is read-only
    """
    return _resolve("data")


def get_logs_dir() -> Path:
    """
    Logs directory.

    Priority:
      1. <base_dir>/logs
      2. ~/PromoImpact/logs
    """
    return _resolve("logs")
