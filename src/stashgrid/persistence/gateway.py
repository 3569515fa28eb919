from __future__ import annotations

import logging
from typing import Callable, Iterable, List, Optional

from ..core.errors import PersistenceCorrupt
from ..core.models import Item
from .backends import DurableStore, SessionStore
from .codec import deserialize, serialize

logger = logging.getLogger(__name__)

DEFAULT_SESSION_KEY = "dndInventory"


class PersistenceGateway:
    """Layered load and best-effort save of the inventory.

    Load order: session store, then durable store, then built-in defaults.
    Saves go to every backend that is present. Either backend may be missing;
    no failure of a backend ever reaches the caller.
    """

    def __init__(
        self,
        defaults: Callable[[], Iterable[Item]],
        *,
        session: Optional[SessionStore] = None,
        durable: Optional[DurableStore] = None,
        session_key: str = DEFAULT_SESSION_KEY,
    ) -> None:
        self._defaults = defaults
        self.session = session
        self.durable = durable
        self.session_key = session_key

    def load_initial(self) -> List[Item]:
        if self.session is not None:
            try:
                items = self._parse(self.session.get_item(self.session_key))
                if items is not None:
                    logger.info("Loaded inventory from session store")
                    return items
            except Exception:  # noqa: BLE001 any backend failure falls through
                logger.exception("Failed to load inventory from session store")
        if self.durable is not None:
            try:
                items = self._parse(self.durable.read_text())
                if items is not None:
                    logger.info("Loaded inventory from durable store")
                    return items
            except Exception:  # noqa: BLE001
                logger.exception("Failed to load inventory from durable store")
        logger.info("Using default inventory")
        return list(self._defaults())

    def persist(self, items: Iterable[Item]) -> None:
        snapshot = list(items)
        if self.session is not None:
            try:
                self.session.set_item(self.session_key, serialize(snapshot))
                logger.debug("Saved inventory to session store")
            except Exception:  # noqa: BLE001
                logger.exception("Failed to save inventory to session store")
        if self.durable is not None:
            try:
                self.durable.write_text(serialize(snapshot, indent=2))
                logger.debug("Saved inventory to durable store")
            except Exception:  # noqa: BLE001
                logger.exception("Failed to save inventory to durable store")

    @staticmethod
    def _parse(text: Optional[str]) -> Optional[List[Item]]:
        if text is None or not text.strip():
            return None
        try:
            return deserialize(text)
        except PersistenceCorrupt as exc:
            logger.warning("Ignoring corrupt inventory data: %s", exc)
            return None
