"""
Shared fakes for the pure-Python snapping tests.

FakeCanvas / FakeLine implement the host canvas and drawable line
protocols with plain lists so the core can be exercised without Qt.
"""
from __future__ import annotations

import pytest

from snap_guides.core.models import Shape


class FakeLine:
    """Minimal drawable line recording what the controller did to it."""

    def __init__(self, coords, settings):
        self.coords = tuple(coords)
        self.settings = settings
        self._color = "black"
        self._shown = True
        self.set_endpoints_calls = 0

    def endpoints(self):
        return self.coords

    def set_endpoints(self, x1, y1, x2, y2):
        self.set_endpoints_calls += 1
        self.coords = (x1, y1, x2, y2)

    def color(self):
        return self._color

    def set_color(self, color):
        self._color = color

    def is_shown(self):
        return self._shown

    def set_shown(self, shown):
        self._shown = bool(shown)


class FakeCanvas:
    def __init__(self, objects=()):
        self.objects = list(objects)
        self.handlers = {}
        self.renders = 0

    def get_objects(self):
        return list(self.objects)

    def add(self, obj):
        self.objects.append(obj)

    def remove(self, obj):
        self.objects = [o for o in self.objects if o is not obj]

    def request_render(self):
        self.renders += 1

    def on(self, event, callback):
        self.handlers.setdefault(event, []).append(callback)

    def off(self, event, callback):
        callbacks = self.handlers.get(event, [])
        if callback in callbacks:
            callbacks.remove(callback)

    def emit(self, event, *args):
        for cb in list(self.handlers.get(event, [])):
            cb(*args)

    def lines(self):
        return [o for o in self.objects if isinstance(o, FakeLine)]


@pytest.fixture()
def shape_a():
    """50x50 shape stored by its center at (100, 100)."""
    return Shape(left=100, top=100, width=50, height=50,
                 origin_x="center", origin_y="center", name="A")


@pytest.fixture()
def shape_b():
    """20x20 shape stored by its top-left corner; center is (118, 310)."""
    return Shape(left=108, top=300, width=20, height=20,
                 origin_x="left", origin_y="top", name="B")


@pytest.fixture()
def canvas(shape_a, shape_b):
    return FakeCanvas([shape_a, shape_b])
