from stashgrid.core.geometry import Point, Rect
from stashgrid.core.models import ItemProperty, Rarity
from stashgrid.core.store import InventoryStore
from stashgrid.interaction.drag import DragSession
from stashgrid.ui.view_model import InventoryViewModel

from conftest import make_item


def build(geometry):
    store = InventoryStore(geometry)
    store.add(make_item("A", 1, 2, w=1, h=3, rarity=Rarity.UNCOMMON))
    store.add(make_item("B", 5, 5, w=2, h=2, properties=(ItemProperty("Weight", "4 lb", "#ffffff"),)))
    session = DragSession(store)
    return store, session, InventoryViewModel(session)


def test_visible_items_have_pixel_rects(geometry, layout):
    _, _, vm = build(geometry)
    views = {v.item_id: v for v in vm.visible_items(layout)}
    assert views["A"].rect == Rect(140, 130, 40, 120)
    assert views["A"].rarity == "uncommon"
    assert views["B"].rarity == "common"


def test_dragged_item_hidden_and_drawn_as_ghost(geometry, layout):
    _, session, vm = build(geometry)
    session.pick_up("A", Point(145, 135), layout)
    session.move(Point(312, 262), layout)

    assert [v.item_id for v in vm.visible_items(layout)] == ["B"]
    ghost = vm.drag_ghost()
    assert ghost.rect == Rect(312, 262, 40, 120)
    assert ghost.colliding is True  # lands on B at (5, 5)


def test_no_ghost_while_idle(geometry):
    _, _, vm = build(geometry)
    assert vm.drag_ghost() is None


def test_item_at_hit_tests_footprints(geometry, layout):
    _, _, vm = build(geometry)
    assert vm.item_at(Point(145, 215), layout).id == "A"
    assert vm.item_at(Point(105, 55), layout) is None
    assert vm.item_at(Point(0, 0), layout) is None


def test_tooltip_lines(geometry, layout):
    _, session, vm = build(geometry)
    lines = vm.tooltip("B")
    assert lines[0].value == "Item B"
    assert (lines[1].label, lines[1].value, lines[1].color) == ("Weight", "4 lb", "#ffffff")
    assert lines[-1].value == "Common item"
    assert vm.tooltip("A")[-1].value == "Uncommon item"
    assert vm.tooltip("missing") == []

    session.pick_up("A", Point(145, 135), layout)
    assert vm.tooltip("B") == []
