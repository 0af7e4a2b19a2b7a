"""A scene holding diagram items and a view that pans and zooms over it."""

from __future__ import annotations

from typing import Union

from erdview.items import (
    EntityItem,
    LinkItem,
    LinkLineItem,
    PropertyItem,
    PropertyLineItem,
    _Canvas,
)
from erdview.models import ERDModel, Point

SCALE_FACTOR = 1.15
PANNING_CURSOR = "closed_hand"

Item = Union[EntityItem, LinkItem, PropertyItem, LinkLineItem, PropertyLineItem]


class ERDScene:
    """The set of items making up a displayed diagram."""

    def __init__(self) -> None:
        self.items: list[Item] = []

    def load_model(self, erd_model: ERDModel) -> None:
        """Add an item for every element of the diagram."""
        self.items.extend(EntityItem(m) for m in erd_model.entities())
        self.items.extend(LinkItem(m) for m in erd_model.links())
        self.items.extend(PropertyItem(m) for m in erd_model.properties())
        self.items.extend(LinkLineItem(m) for m in erd_model.link_lines())
        self.items.extend(PropertyLineItem(m) for m in erd_model.property_lines())

    def draw(self, canvas: _Canvas) -> None:
        """Draw every item, lower stacking levels first."""
        for item in sorted(self.items, key=lambda i: i.z_value):
            item.draw(canvas)


class ERDSceneView:
    """Viewport state: shift-drag pans, ctrl-wheel zooms.

    Each event handler returns True when it consumed the event.
    """

    def __init__(self, scene: ERDScene | None = None) -> None:
        self.scene = scene if scene is not None else ERDScene()
        self.scale = 1.0
        self.scroll = Point(0, 0)
        self.is_panning = False
        self.cursor: str | None = None
        self._pan_start = Point(0, 0)

    def mouse_press(self, x: float, y: float, left_button: bool, shift: bool) -> bool:
        if left_button and shift:
            self.is_panning = True
            self._pan_start = Point(x, y)
            self.cursor = PANNING_CURSOR
            return True
        return False

    def mouse_move(self, x: float, y: float) -> bool:
        if not self.is_panning:
            return False
        current = Point(x, y)
        self.scroll = self.scroll - (current - self._pan_start)
        self._pan_start = current
        return True

    def mouse_release(self) -> bool:
        if not self.is_panning:
            return False
        self.cursor = None
        self.is_panning = False
        return True

    def wheel(self, delta_y: float, ctrl: bool) -> bool:
        if not ctrl:
            return False
        if delta_y > 0:
            self.scale *= SCALE_FACTOR
        else:
            self.scale /= SCALE_FACTOR
        return True