from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

from .core.geometry import GridGeometry
from .persistence.gateway import DEFAULT_SESSION_KEY
from .persistence.paths import default_data_dir

logger = logging.getLogger(__name__)

CONFIG_ENV = "STASHGRID_CONFIG"
CONFIG_PATHS = [
    Path("configs/stashgrid.json"),
]


@dataclass
class StashConfig:
    """
    Inventory configuration with sensible defaults.

    You can override by providing configs/stashgrid.json (or a file named by
    the STASHGRID_CONFIG environment variable) with keys:
      - grid_width, grid_height: int cells (default 10 x 10)
      - cell_size: int pixels per cell (default 40)
      - container_margin: int pixels the drop container extends past the grid (default 10)
      - session_key: str key for the session store (default "dndInventory")
      - save_filename: str durable save file name (default "inventory_save.json")
      - data_dir: str directory for the durable save (default: platform user data dir)
      - sound_volume: float 0..1 (default 0.3)
      - sounds_enabled: bool (default true)
    """

    grid_width: int = 10
    grid_height: int = 10
    cell_size: int = 40
    container_margin: int = 10
    session_key: str = DEFAULT_SESSION_KEY
    save_filename: str = "inventory_save.json"
    data_dir: Optional[str] = None
    sound_volume: float = 0.3
    sounds_enabled: bool = True

    def __post_init__(self) -> None:
        if self.grid_width < 1 or self.grid_height < 1:
            raise ValueError("grid dimensions must be positive")
        if self.cell_size < 1:
            raise ValueError("cell_size must be positive")
        if self.container_margin < 0:
            raise ValueError("container_margin must not be negative")

    def geometry(self) -> GridGeometry:
        return GridGeometry(width=self.grid_width, height=self.grid_height, cell_size=self.cell_size)

    def save_path(self) -> Path:
        base = Path(self.data_dir) if self.data_dir else default_data_dir()
        return base / self.save_filename

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "StashConfig":
        known = {f.name for f in fields(StashConfig)}
        unknown = sorted(set(data) - known)
        if unknown:
            logger.warning("Ignoring unknown config keys: %s", ", ".join(unknown))
        return StashConfig(**{k: v for k, v in data.items() if k in known})

    @staticmethod
    def load(path: Optional[Path] = None) -> "StashConfig":
        candidates = []
        if path is not None:
            candidates.append(Path(path))
        elif os.getenv(CONFIG_ENV):
            candidates.append(Path(os.environ[CONFIG_ENV]))
        else:
            candidates.extend(CONFIG_PATHS)
        for candidate in candidates:
            if not candidate.exists():
                continue
            try:
                data = json.loads(candidate.read_text(encoding="utf-8"))
            except (OSError, json.JSONDecodeError) as e:
                logger.warning("Failed to load config from %s: %s", candidate, e)
                continue
            if not isinstance(data, dict):
                logger.warning("Config at %s must be an object mapping", candidate)
                continue
            try:
                cfg = StashConfig.from_dict(data)
            except (TypeError, ValueError) as e:
                logger.warning("Invalid config values in %s: %s", candidate, e)
                continue
            logger.info("Loaded config from %s", candidate)
            return cfg
        return StashConfig()
