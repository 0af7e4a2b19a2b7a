"""Drawable diagram items built on top of the data models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Protocol, Sequence

from erdview.models import (
    EntityModel,
    ERDItemModel,
    LineModel,
    LinkLineModel,
    LinkModel,
    Point,
    PropertyLineModel,
    PropertyModel,
)

FILL_COLOR = "gray"
LINE_WIDTH = 1.5
# Width of the invisible stroke that gives a line its clickable area.
_STROKE_WIDTH = 10.0


class ItemType(IntEnum):
    """Kinds of drawable items."""

    ENTITY = 0
    LINK = 1
    PROPERTY = 2
    PROPERTY_LINE = 3
    LINK_LINE = 4


class ZValue(IntEnum):
    """Stacking levels; higher values are drawn on top."""

    ERD_ITEM = 0
    ANCHOR_ITEM = 1


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its top-left corner and size."""

    x: float
    y: float
    width: float
    height: float

    @property
    def left(self) -> float:
        return self.x

    @property
    def top(self) -> float:
        return self.y

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def center(self) -> Point:
        return Point(self.x + self.width / 2, self.y + self.height / 2)


class _Canvas(Protocol):
    def draw_rect(self, rect: Rect, fill: str) -> None: ...

    def draw_ellipse(self, rect: Rect, fill: str) -> None: ...

    def draw_polygon(self, points: Sequence[Point], fill: str) -> None: ...

    def draw_text(self, position: Point, text: str, centered: bool) -> None: ...

    def draw_polyline(self, points: Sequence[Point], width: float) -> None: ...


_ENTITY_RECT = Rect(-50, -30, 100, 60)
_DIAMOND = (Point(-50, 0), Point(0, 30), Point(50, 0), Point(0, -30))


def _translated(rect: Rect, offset: Point) -> Rect:
    return Rect(rect.x + offset.x, rect.y + offset.y, rect.width, rect.height)


class ERDItem:
    """Base of every drawable item; wraps the model it shows."""

    def __init__(self, model: ERDItemModel) -> None:
        self.model = model
        self.z_value = ZValue.ERD_ITEM

    def id(self) -> int:
        return self.model.id


class EntityItem(ERDItem):
    """A box showing an entity's name; moving it moves its model."""

    item_type = ItemType.ENTITY
    model: EntityModel

    def __init__(self, model: EntityModel) -> None:
        super().__init__(model)
        self._pos = model.position

    @property
    def pos(self) -> Point:
        return self._pos

    def set_pos(self, point: Point) -> None:
        """Move the item and keep its model's position in step."""
        self._pos = point
        self.model.position = point

    def bounding_rect(self) -> Rect:
        """The item's extent relative to its position."""
        return _ENTITY_RECT

    def _scene_rect(self) -> Rect:
        return _translated(self.bounding_rect(), self._pos)

    def draw(self, canvas: _Canvas) -> None:
        rect = self._scene_rect()
        canvas.draw_rect(rect, FILL_COLOR)
        canvas.draw_text(rect.center, self.model.name, centered=True)


class LinkItem(EntityItem):
    """A diamond showing a relationship's name."""

    item_type = ItemType.LINK
    model: LinkModel

    def diamond(self) -> tuple[Point, ...]:
        """The diamond's corners relative to the item's position."""
        return _DIAMOND

    def draw(self, canvas: _Canvas) -> None:
        canvas.draw_polygon([corner + self.pos for corner in self.diamond()], FILL_COLOR)
        canvas.draw_text(self._scene_rect().center, self.model.name, centered=True)


class PropertyItem(EntityItem):
    """An ellipse showing an attribute's name."""

    item_type = ItemType.PROPERTY
    model: PropertyModel

    def draw(self, canvas: _Canvas) -> None:
        rect = self._scene_rect()
        canvas.draw_ellipse(rect, FILL_COLOR)
        canvas.draw_text(rect.center, self.model.name, centered=True)


class LineItem(ERDItem):
    """A rectilinear line drawn through the nodes its moves describe."""

    model: LineModel

    def nodes(self) -> list[Point]:
        """Points of the line: the start, then one per move, x and y in turn."""
        current = self.model.position
        result = [current]
        for index, move in enumerate(self.model):
            step = Point(move, 0) if index % 2 == 0 else Point(0, move)
            current = current + step
            result.append(current)
        return result

    def bounding_rect(self) -> Rect:
        """Extent of the line widened by its clickable stroke."""
        nodes = self.nodes()
        xs = [node.x for node in nodes]
        ys = [node.y for node in nodes]
        half = _STROKE_WIDTH / 2
        return Rect(
            min(xs) - half,
            min(ys) - half,
            max(xs) - min(xs) + _STROKE_WIDTH,
            max(ys) - min(ys) + _STROKE_WIDTH,
        )

    def draw(self, canvas: _Canvas) -> None:
        canvas.draw_polyline(self.nodes(), LINE_WIDTH)


class LinkLineItem(LineItem):
    """A line to a link, labelled with its cardinalities at its start."""

    item_type = ItemType.LINK_LINE
    model: LinkLineModel

    def label(self) -> str:
        return f"{self.model.min_cardinality},{self.model.max_cardinality}"

    def draw(self, canvas: _Canvas) -> None:
        canvas.draw_text(self.model.position, self.label(), centered=False)
        canvas.draw_polyline(self.nodes(), LINE_WIDTH)


class PropertyLineItem(LineItem):
    """A line from an entity to one of its properties."""

    item_type = ItemType.PROPERTY_LINE
    model: PropertyLineModel