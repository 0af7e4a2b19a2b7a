"""Data models for entity-relationship diagrams."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Union, overload


@dataclass(frozen=True)
class Point:
    """A point on the diagram plane."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: object) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: object) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x - other.x, self.y - other.y)


@dataclass(eq=False)
class ERDItemModel:
    """Base for every diagram element; elements compare by identity."""

    id: int


@dataclass(eq=False)
class EntityModel(ERDItemModel):
    """A named element placed at a position."""

    name: str = ""
    position: Point = field(default_factory=Point)


@dataclass(eq=False)
class LinkModel(EntityModel):
    """A relationship between entities."""


@dataclass(eq=False)
class PropertyModel(EntityModel):
    """An attribute of an entity."""


@dataclass(eq=False)
class LineModel(ERDItemModel):
    """A rectilinear line: a start position and alternating x/y moves."""

    position: Point
    moves: list[int]

    def __post_init__(self) -> None:
        self.moves = list(self.moves)

    def __iter__(self) -> Iterator[int]:
        return iter(self.moves)

    def __len__(self) -> int:
        return len(self.moves)

    @overload
    def __getitem__(self, index: int) -> int: ...

    @overload
    def __getitem__(self, index: slice) -> list[int]: ...

    def __getitem__(self, index: Union[int, slice]) -> Union[int, list[int]]:
        return self.moves[index]


@dataclass(eq=False)
class LinkLineModel(LineModel):
    """A line joining an entity to a link, with cardinalities."""

    entity_id: int
    link_id: int
    min_cardinality: str
    max_cardinality: str


@dataclass(eq=False)
class PropertyLineModel(LineModel):
    """A line joining an entity to one of its properties."""

    entity_id: int
    property_id: int


class ERDModel:
    """A whole diagram: collections of entities, properties, links and lines."""

    def __init__(self) -> None:
        # dicts used as insertion-ordered identity sets
        self._entities: dict[EntityModel, None] = {}
        self._properties: dict[PropertyModel, None] = {}
        self._links: dict[LinkModel, None] = {}
        self._property_lines: dict[PropertyLineModel, None] = {}
        self._link_lines: dict[LinkLineModel, None] = {}

    def _bucket(self, item: ERDItemModel) -> dict:
        if isinstance(item, LinkModel):
            return self._links
        if isinstance(item, PropertyModel):
            return self._properties
        if isinstance(item, EntityModel):
            return self._entities
        if isinstance(item, LinkLineModel):
            return self._link_lines
        if isinstance(item, PropertyLineModel):
            return self._property_lines
        raise TypeError(f"cannot hold an item of type {type(item).__name__}")

    def add(self, item: ERDItemModel) -> None:
        """Add an item to the collection matching its kind."""
        self._bucket(item)[item] = None

    def remove(self, item: ERDItemModel) -> None:
        """Remove an item; removing an absent item does nothing."""
        self._bucket(item).pop(item, None)

    def entities(self) -> tuple[EntityModel, ...]:
        return tuple(self._entities)

    def properties(self) -> tuple[PropertyModel, ...]:
        return tuple(self._properties)

    def links(self) -> tuple[LinkModel, ...]:
        return tuple(self._links)

    def property_lines(self) -> tuple[PropertyLineModel, ...]:
        return tuple(self._property_lines)

    def link_lines(self) -> tuple[LinkLineModel, ...]:
        return tuple(self._link_lines)