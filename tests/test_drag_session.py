import pytest

from stashgrid.core.errors import NotFound, PlacementConflict
from stashgrid.core.events import DRAG_RESOLVED
from stashgrid.core.geometry import Point
from stashgrid.core.models import Position
from stashgrid.core.store import InventoryStore
from stashgrid.interaction.drag import IDLE, DragSession, Dragging, Resolution

from conftest import make_item


def pixel(cx, cy, dx=5, dy=5):
    """Pointer position inside cell (cx, cy) of a grid whose origin is (100, 50)."""
    return Point(100 + cx * 40 + dx, 50 + cy * 40 + dy)


@pytest.fixture()
def store(geometry):
    return InventoryStore(geometry)


@pytest.fixture()
def session(store, notifier):
    return DragSession(store, notifier)


def test_drag_and_release_repositions(store, session, layout, sounds, notifier):
    store.add(make_item("A", 1, 2, w=1, h=3, sounds=sounds))

    assert session.pick_up("A", pixel(1, 2), layout) is True
    assert session.is_dragging
    assert session.move(pixel(5, 5), layout) is True

    outcome = session.release(pixel(5, 5), layout)

    assert outcome.resolution is Resolution.REPOSITION
    assert outcome.position == Position(5, 5)
    assert store.get("A").position == Position(5, 5)
    assert session.state is IDLE
    assert notifier.calls == ["pickup.wav", "drop.wav"]


def test_grab_offset_is_snapped_to_cells(store, session, layout):
    store.add(make_item("A", 1, 2, w=1, h=3))
    # Grab the sword by its second cell
    session.pick_up("A", pixel(1, 3, dx=17, dy=12), layout)
    assert session.state.grab_offset == Point(0, 40)

    outcome = session.release(pixel(5, 6, dx=3, dy=30), layout)
    assert outcome.position == Position(5, 5)


def test_release_outside_container_deletes(store, session, layout, sounds, notifier):
    store.add(make_item("A", 1, 2, w=1, h=3, sounds=sounds))
    session.pick_up("A", pixel(1, 2), layout)

    outcome = session.release(Point(0, 0), layout)

    assert outcome.resolution is Resolution.DELETE
    assert "A" not in store
    assert notifier.calls == ["pickup.wav", "drop.wav"]


def test_release_on_other_item_reverts(store, session, layout, notifier):
    store.add(make_item("A", 0, 0))
    store.add(make_item("B", 2, 2))
    session.pick_up("A", pixel(0, 0), layout)

    assert session.move(pixel(2, 2), layout) is False
    assert session.state.colliding is True

    outcome = session.release(pixel(2, 2), layout)
    assert outcome.resolution is Resolution.REVERT
    assert isinstance(outcome.error, PlacementConflict)
    assert outcome.position == Position(0, 0)
    assert store.get("A").position == Position(0, 0)
    # Drop notification fires for reverts too (items without sounds notify None)
    assert len(notifier.calls) == 2


def test_release_in_container_margin_reverts(store, session, layout):
    store.add(make_item("A", 0, 0))
    session.pick_up("A", pixel(0, 0), layout)
    # Inside the container, left of and above the grid surface
    outcome = session.release(Point(95, 45), layout)
    assert outcome.resolution is Resolution.REVERT
    assert store.get("A").position == Position(0, 0)


def test_container_edge_counts_as_inside(store, session, layout):
    store.add(make_item("A", 0, 0))
    session.pick_up("A", pixel(0, 0), layout)
    outcome = session.release(Point(layout.container.x, layout.container.y), layout)
    assert outcome.resolution is Resolution.REVERT
    assert "A" in store


def test_drop_back_on_original_cell(store, session, layout):
    store.add(make_item("A", 3, 3, w=2, h=2))
    session.pick_up("A", pixel(4, 4), layout)
    assert session.move(pixel(4, 4), layout) is True
    outcome = session.release(pixel(4, 4), layout)
    assert outcome.resolution is Resolution.REPOSITION
    assert store.get("A").position == Position(3, 3)


def test_move_off_grid_is_neutral(store, session, layout):
    store.add(make_item("A", 0, 0))
    session.pick_up("A", pixel(0, 0), layout)

    assert session.move(Point(95, 45), layout) is False
    state = session.state
    assert isinstance(state, Dragging)
    assert state.candidate is None
    assert state.colliding is False
    assert state.pointer == Point(95, 45)


def test_move_never_mutates_store(store, session, layout):
    store.add(make_item("A", 0, 0))
    before = store.snapshot()
    session.pick_up("A", pixel(0, 0), layout)
    for cx in range(-2, 12):
        session.move(pixel(cx, 4), layout)
    assert store.snapshot() == before


def test_move_and_release_while_idle_do_nothing(session, layout):
    assert session.move(pixel(1, 1), layout) is None
    assert session.release(pixel(1, 1), layout) is None
    assert session.state is IDLE


def test_pick_up_rejections(store, session, layout):
    assert session.pick_up("missing", pixel(0, 0), layout) is False
    assert session.state is IDLE

    store.add(make_item("A", 0, 0))
    store.add(make_item("B", 5, 5))
    assert session.pick_up("A", pixel(0, 0), layout) is True
    assert session.pick_up("B", pixel(5, 5), layout) is False
    assert session.dragged_item_id == "A"


def test_item_removed_mid_drag_resolves_as_revert(store, session, layout):
    store.add(make_item("A", 0, 0))
    session.pick_up("A", pixel(0, 0), layout)
    store.remove("A")

    assert session.move(pixel(3, 3), layout) is False
    outcome = session.release(pixel(3, 3), layout)
    assert outcome.resolution is Resolution.REVERT
    assert isinstance(outcome.error, NotFound)
    assert session.state is IDLE


def test_resolution_is_published(store, session, layout):
    seen = []
    store.bus.on(DRAG_RESOLVED, lambda name, payload: seen.append(payload["outcome"].resolution))
    store.add(make_item("A", 0, 0))
    session.pick_up("A", pixel(0, 0), layout)
    session.release(Point(-500, -500), layout)
    assert seen == [Resolution.DELETE]


class FailingSink:
    def notify(self, sound_ref):
        raise RuntimeError("audio device lost")


def test_failing_sink_does_not_break_drag(store, layout, sounds, caplog):
    session = DragSession(store, FailingSink())
    seen = []
    store.bus.on(DRAG_RESOLVED, lambda name, payload: seen.append(payload["outcome"].resolution))
    store.add(make_item("A", 1, 2, sounds=sounds))

    assert session.pick_up("A", pixel(1, 2), layout) is True
    outcome = session.release(Point(0, 0), layout)

    assert outcome.resolution is Resolution.DELETE
    assert "A" not in store
    assert seen == [Resolution.DELETE]
    assert session.state is IDLE
    assert "Notification sink failed" in caplog.text
