import sys
from pathlib import Path

import pytest

# Ensure 'src' is on sys.path for test imports without installing the package
ROOT = Path(__file__).resolve().parents[1]
src = ROOT / "src"
if str(src) not in sys.path:
    sys.path.insert(0, str(src))

from stashgrid.core.geometry import GridGeometry, Point  # noqa: E402
from stashgrid.core.models import Item, Position, Size, SoundRefs  # noqa: E402


def make_item(item_id, x, y, w=1, h=1, **kwargs):
    return Item(id=item_id, name=kwargs.pop("name", f"Item {item_id}"), position=Position(x, y), size=Size(w, h), **kwargs)


class RecordingNotifier:
    def __init__(self):
        self.calls = []

    def notify(self, sound_ref):
        self.calls.append(sound_ref)


@pytest.fixture()
def geometry():
    return GridGeometry(10, 10, 40)


@pytest.fixture()
def layout(geometry):
    return geometry.layout_at(Point(100, 50), margin=10)


@pytest.fixture()
def notifier():
    return RecordingNotifier()


@pytest.fixture()
def sounds():
    return SoundRefs(pickup="pickup.wav", drop="drop.wav")
