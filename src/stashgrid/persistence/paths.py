from __future__ import annotations

from pathlib import Path

from platformdirs import user_data_dir

APP_NAME = "stashgrid"


def default_data_dir() -> Path:
    """Return the platform-specific directory for durable inventory saves."""
    return Path(user_data_dir(appname=APP_NAME))


def ensure_dir(path: Path) -> Path:
    path.mkdir(parents=True, exist_ok=True)
    return path
