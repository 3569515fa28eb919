from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Dict, Optional, Protocol

from ..core.errors import PersistenceCorrupt, PersistenceUnavailable
from .paths import ensure_dir

logger = logging.getLogger(__name__)


class SessionStore(Protocol):
    """Fast key/value cache scoped to the current client session."""

    def get_item(self, key: str) -> Optional[str]:  # pragma: no cover - protocol method
        ...

    def set_item(self, key: str, value: str) -> None:  # pragma: no cover - protocol method
        ...


class DurableStore(Protocol):
    """Cross-session text storage at a fixed location."""

    def read_text(self) -> Optional[str]:  # pragma: no cover - protocol method
        ...

    def write_text(self, text: str) -> None:  # pragma: no cover - protocol method
        ...


class MemorySessionStore:
    """Dict-backed session store. Lives as long as the host process."""

    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        self._data: Dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._data[key] = value


class JSONFileStore:
    """Durable store writing a single file atomically.

    Strategy: write path.tmp, flush and fsync, then os.replace over the target
    so a crash never leaves a half-written save behind.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def read_text(self) -> Optional[str]:
        if not self.path.exists():
            return None
        try:
            return self.path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            raise PersistenceCorrupt(f"{self.path} is not valid UTF-8: {exc}") from exc
        except OSError as exc:
            raise PersistenceUnavailable(f"Cannot read {self.path}: {exc}") from exc

    def write_text(self, text: str) -> None:
        tmp = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            ensure_dir(self.path.parent)
            with tmp.open("w", encoding="utf-8") as f:
                f.write(text)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp, self.path)
        except OSError as exc:
            try:
                tmp.unlink(missing_ok=True)
            except OSError:
                logger.warning("Could not remove temporary file %s", tmp)
            raise PersistenceUnavailable(f"Cannot write {self.path}: {exc}") from exc
        logger.debug("Wrote %d bytes to %s", len(text), self.path)
