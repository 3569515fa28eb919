from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from .audio.notifier import NotificationSink, NullNotifier, notify_safely
from .catalog import ITEM_TEMPLATES
from .core.errors import NoSpaceAvailable, StashError
from .core.events import SPAWN_FAILED
from .core.models import Item, ItemTemplate
from .core.placement import first_free_position
from .core.store import InventoryStore
from .utils.random_provider import RandomProvider

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SpawnResult:
    template: ItemTemplate
    item: Optional[Item] = None
    error: Optional[StashError] = None

    @property
    def ok(self) -> bool:
        return self.item is not None


def _uuid_id() -> str:
    return uuid.uuid4().hex


class ItemFactory:
    """Creates random items and drops them into the first free cell."""

    def __init__(
        self,
        store: InventoryStore,
        *,
        templates: Sequence[ItemTemplate] = ITEM_TEMPLATES,
        rng: Optional[RandomProvider] = None,
        id_factory: Callable[[], str] = _uuid_id,
        notifier: Optional[NotificationSink] = None,
    ) -> None:
        self.store = store
        self.templates = tuple(templates)
        self.rng = rng or RandomProvider()
        self.id_factory = id_factory
        self.notifier = notifier or NullNotifier()

    def spawn(self, templates: Optional[Sequence[ItemTemplate]] = None) -> SpawnResult:
        pool = tuple(templates) if templates is not None else self.templates
        if not pool:
            raise ValueError("Template pool must not be empty")
        template = self.rng.choice(pool)
        position = first_free_position(template.probe(), self.store.snapshot(), self.store.geometry)
        if position is None:
            logger.warning("No space left in inventory for %s", template.name)
            self.store.bus.emit(SPAWN_FAILED, {"template": template})
            return SpawnResult(template, error=NoSpaceAvailable("No space left in inventory!"))
        item = template.materialize(self._fresh_id(), position)
        result = self.store.add(item)
        if not result.ok:
            return SpawnResult(template, error=result.error)
        logger.info("Spawned %s (%s) at (%d, %d)", item.name, item.id, position.x, position.y)
        notify_safely(self.notifier, item.drop_sound)
        return SpawnResult(template, item=item)

    def _fresh_id(self) -> str:
        item_id = self.id_factory()
        while item_id in self.store:
            item_id = self.id_factory()
        return item_id
