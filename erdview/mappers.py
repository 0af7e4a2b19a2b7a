"""Conversion between diagram models and their JSON representation."""

from __future__ import annotations

import math
from collections.abc import Callable, Mapping
from typing import Any, TypeVar

from erdview.models import (
    EntityModel,
    ERDModel,
    LineModel,
    LinkLineModel,
    LinkModel,
    Point,
    PropertyLineModel,
    PropertyModel,
)

_ENTITIES = "entities"
_LINKS = "links"
_PROPERTIES = "properties"
_PROPERTY_LINES = "propertyLines"
_LINK_LINES = "linkLines"

_T = TypeVar("_T")


class MappingError(ValueError):
    """Raised when a JSON document does not describe a valid diagram element."""


def _is_number(value: Any) -> bool:
    return (
        isinstance(value, (int, float))
        and not isinstance(value, bool)
        and math.isfinite(value)
    )


def _require_object(data: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise MappingError(f"{what} must be a JSON object")
    return data


def _number(data: Mapping[str, Any], key: str) -> float:
    value = data.get(key)
    if key not in data or not _is_number(value):
        raise MappingError(f"field {key!r} must be a number")
    return value


def _integer(data: Mapping[str, Any], key: str) -> int:
    return int(_number(data, key))


def _string(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    if not isinstance(value, str):
        raise MappingError(f"field {key!r} must be a string")
    return value


def _object(data: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    value = data.get(key)
    if not isinstance(value, Mapping):
        raise MappingError(f"field {key!r} must be an object")
    return value


def _array(data: Mapping[str, Any], key: str) -> list[Any]:
    value = data.get(key)
    if not isinstance(value, list):
        raise MappingError(f"field {key!r} must be an array")
    return value


def position_from_json(data: Mapping[str, Any]) -> Point:
    """Read a point from an object with numeric ``x`` and ``y``."""
    data = _require_object(data, "position")
    return Point(float(_number(data, "x")), float(_number(data, "y")))


def position_to_json(point: Point) -> dict[str, float]:
    return {"x": point.x, "y": point.y}


def entity_from_json(data: Mapping[str, Any]) -> EntityModel:
    """Read an entity from an object with ``id``, ``name`` and ``position``."""
    data = _require_object(data, "entity")
    ident = _integer(data, "id")
    name = _string(data, "name")
    position = position_from_json(_object(data, "position"))
    return EntityModel(ident, name, position)


def entity_to_json(model: EntityModel) -> dict[str, Any]:
    return {
        "id": model.id,
        "name": model.name,
        "position": position_to_json(model.position),
    }


def link_from_json(data: Mapping[str, Any]) -> LinkModel:
    entity = entity_from_json(data)
    return LinkModel(entity.id, entity.name, entity.position)


def link_to_json(model: LinkModel) -> dict[str, Any]:
    return entity_to_json(model)


def property_from_json(data: Mapping[str, Any]) -> PropertyModel:
    entity = entity_from_json(data)
    return PropertyModel(entity.id, entity.name, entity.position)


def property_to_json(model: PropertyModel) -> dict[str, Any]:
    return entity_to_json(model)


def line_from_json(data: Mapping[str, Any]) -> LineModel:
    """Read a line from an object with ``id``, ``position`` and ``moves``."""
    data = _require_object(data, "line")
    ident = _integer(data, "id")
    position_data = _object(data, "position")
    moves_data = _array(data, "moves")
    position = position_from_json(position_data)
    moves = []
    for move in moves_data:
        if not _is_number(move):
            raise MappingError("every move must be a number")
        moves.append(int(move))
    return LineModel(ident, position, moves)


def line_to_json(model: LineModel) -> dict[str, Any]:
    return {
        "id": model.id,
        "position": position_to_json(model.position),
        "moves": list(model),
    }


def link_line_from_json(data: Mapping[str, Any]) -> LinkLineModel:
    """Read a line joining an entity to a link, with its cardinalities."""
    line = line_from_json(data)
    return LinkLineModel(
        line.id,
        line.position,
        list(line),
        _integer(data, "entityId"),
        _integer(data, "linkId"),
        _string(data, "minCardinality"),
        _string(data, "maxCardinality"),
    )


def link_line_to_json(model: LinkLineModel) -> dict[str, Any]:
    result = line_to_json(model)
    result["entityId"] = model.entity_id
    result["linkId"] = model.link_id
    result["minCardinality"] = model.min_cardinality
    result["maxCardinality"] = model.max_cardinality
    return result


def property_line_from_json(data: Mapping[str, Any]) -> PropertyLineModel:
    """Read a line joining an entity to one of its properties."""
    line = line_from_json(data)
    return PropertyLineModel(
        line.id,
        line.position,
        list(line),
        _integer(data, "entityId"),
        _integer(data, "propertyId"),
    )


def property_line_to_json(model: PropertyLineModel) -> dict[str, Any]:
    result = line_to_json(model)
    result["entityId"] = model.entity_id
    result["propertyId"] = model.property_id
    return result


def _read_all(
    items: list[Any], reader: Callable[[Mapping[str, Any]], _T], model: ERDModel
) -> None:
    for item in items:
        if not isinstance(item, Mapping):
            raise MappingError("every diagram element must be a JSON object")
        model.add(reader(item))


def erd_from_json(data: Mapping[str, Any]) -> ERDModel:
    """Read a whole diagram; any malformed part raises :class:`MappingError`."""
    data = _require_object(data, "diagram")
    sections = {
        key: _array(data, key)
        for key in (_ENTITIES, _LINKS, _PROPERTIES, _PROPERTY_LINES, _LINK_LINES)
    }
    model = ERDModel()
    _read_all(sections[_ENTITIES], entity_from_json, model)
    _read_all(sections[_PROPERTIES], property_from_json, model)
    _read_all(sections[_LINKS], link_from_json, model)
    _read_all(sections[_PROPERTY_LINES], property_line_from_json, model)
    _read_all(sections[_LINK_LINES], link_line_from_json, model)
    return model


def erd_to_json(model: ERDModel) -> dict[str, list[dict[str, Any]]]:
    return {
        _ENTITIES: [entity_to_json(m) for m in model.entities()],
        _PROPERTIES: [property_to_json(m) for m in model.properties()],
        _LINKS: [link_to_json(m) for m in model.links()],
        _PROPERTY_LINES: [property_line_to_json(m) for m in model.property_lines()],
        _LINK_LINES: [link_line_to_json(m) for m in model.link_lines()],
    }