from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Optional, Sequence, Tuple

from .audio.notifier import NotificationSink, SoundNotifier
from .catalog import default_items
from .config import StashConfig
from .core.events import ITEMS_CHANGED, EventBus
from .core.geometry import Point, SurfaceLayout
from .core.models import Item, ItemTemplate
from .core.store import InventoryStore
from .factory import ItemFactory, SpawnResult
from .interaction.drag import DragSession, DropOutcome
from .persistence.backends import DurableStore, JSONFileStore, SessionStore
from .persistence.gateway import PersistenceGateway
from .utils.random_provider import RandomProvider

logger = logging.getLogger(__name__)

_UNSET: Any = object()


class InventoryManager:
    """Composes the inventory services for a host application.

    The host supplies whichever storage backends exist in its environment;
    passing None for a backend means that channel is unavailable. Every
    committed change in the store is written through the persistence gateway.
    """

    def __init__(
        self,
        config: Optional[StashConfig] = None,
        *,
        session_store: Optional[SessionStore] = None,
        durable_store: Optional[DurableStore] = _UNSET,
        notifier: Optional[NotificationSink] = None,
        rng: Optional[RandomProvider] = None,
        id_factory: Optional[Callable[[], str]] = None,
        defaults: Callable[[], Sequence[Item]] = default_items,
    ) -> None:
        self.config = config or StashConfig()
        self.geometry = self.config.geometry()
        self.bus = EventBus()
        if durable_store is _UNSET:
            durable_store = JSONFileStore(self.config.save_path())
        self.gateway = PersistenceGateway(
            defaults,
            session=session_store,
            durable=durable_store,
            session_key=self.config.session_key,
        )
        self.store = InventoryStore(self.geometry, bus=self.bus, defaults=defaults)
        self.notifier = notifier or SoundNotifier(
            enabled=self.config.sounds_enabled, volume=self.config.sound_volume
        )
        self.drag = DragSession(self.store, self.notifier)
        factory_kwargs: Dict[str, Any] = {"rng": rng, "notifier": self.notifier}
        if id_factory is not None:
            factory_kwargs["id_factory"] = id_factory
        self.factory = ItemFactory(self.store, **factory_kwargs)
        self.bus.on(ITEMS_CHANGED, self._persist)

    @property
    def items(self) -> Tuple[Item, ...]:
        return self.store.snapshot()

    def bootstrap(self) -> Tuple[Item, ...]:
        self.store.load(self.gateway.load_initial())
        return self.items

    def layout_at(self, origin: Point) -> SurfaceLayout:
        return self.geometry.layout_at(origin, margin=self.config.container_margin)

    def add_random_item(self, templates: Optional[Sequence[ItemTemplate]] = None) -> SpawnResult:
        return self.factory.spawn(templates)

    def reset_inventory(self) -> None:
        self.store.reset_to_defaults()

    def pick_up(self, item_id: str, pointer: Point, layout: SurfaceLayout) -> bool:
        return self.drag.pick_up(item_id, pointer, layout)

    def drag_to(self, pointer: Point, layout: SurfaceLayout) -> Optional[bool]:
        return self.drag.move(pointer, layout)

    def release(self, pointer: Point, layout: SurfaceLayout) -> Optional[DropOutcome]:
        return self.drag.release(pointer, layout)

    def _persist(self, _event: str, payload: Dict[str, Any]) -> None:
        self.gateway.persist(payload.get("items", ()))
