import pytest

from erdview.models import (
    ERDModel,
    EntityModel,
    LineModel,
    LinkLineModel,
    LinkModel,
    Point,
    PropertyLineModel,
    PropertyModel,
)


def _link_line(ident=10):
    return LinkLineModel(ident, Point(1, 2), [5, 6], 1, 2, "0", "N")


def _property_line(ident=11):
    return PropertyLineModel(ident, Point(3, 4), [7], 1, 3)


def test_point_default_is_origin():
    assert Point() == Point(0, 0)


def test_point_add_then_sub_round_trip():
    a = Point(1.5, -2.0)
    b = Point(3.0, 4.25)
    assert (a + b) - b == a
    assert (a + b) == (b + a)


def test_point_sub_self_is_origin():
    p = Point(7, 9)
    assert p - p == Point()


def test_point_add_rejects_non_point():
    with pytest.raises(TypeError):
        Point(1, 1) + 3


def test_entity_defaults():
    entity = EntityModel(7)
    assert entity.id == 7
    assert entity.name == ""
    assert entity.position == Point(0, 0)


def test_entity_is_mutable():
    entity = EntityModel(1, "Student", Point(10, 20))
    entity.name = "Teacher"
    entity.position = Point(5, 6)
    assert entity.name == "Teacher"
    assert entity.position == Point(5, 6)


def test_entities_compare_by_identity():
    a = EntityModel(1, "A")
    b = EntityModel(1, "A")
    assert a != b
    assert a == a


def test_line_sequence_protocol():
    moves = [10, -20, 30]
    line = LineModel(3, Point(1, 1), moves)
    assert list(line) == moves
    assert len(line) == len(moves)
    assert line[1] == moves[1]
    assert line[-1] == moves[-1]
    assert line[0:2] == moves[0:2]


def test_line_copies_moves():
    moves = [1, 2]
    line = LineModel(3, Point(), moves)
    moves.append(3)
    assert list(line) == [1, 2]


def test_link_line_fields():
    line = _link_line()
    assert line.entity_id == 1
    assert line.link_id == 2
    assert line.min_cardinality == "0"
    assert line.max_cardinality == "N"
    assert list(line) == [5, 6]


def test_property_line_fields():
    line = _property_line()
    assert line.entity_id == 1
    assert line.property_id == 3
    assert line.position == Point(3, 4)


def test_erd_model_starts_empty():
    model = ERDModel()
    assert model.entities() == ()
    assert model.properties() == ()
    assert model.links() == ()
    assert model.property_lines() == ()
    assert model.link_lines() == ()


def test_add_dispatches_by_kind():
    model = ERDModel()
    entity = EntityModel(1)
    prop = PropertyModel(2)
    link = LinkModel(3)
    link_line = _link_line()
    prop_line = _property_line()
    for item in (entity, prop, link, link_line, prop_line):
        model.add(item)
    assert model.entities() == (entity,)
    assert model.properties() == (prop,)
    assert model.links() == (link,)
    assert model.link_lines() == (link_line,)
    assert model.property_lines() == (prop_line,)


def test_add_is_idempotent_per_object():
    model = ERDModel()
    entity = EntityModel(1)
    model.add(entity)
    model.add(entity)
    assert model.entities() == (entity,)


def test_equal_looking_objects_are_distinct_members():
    model = ERDModel()
    a = EntityModel(1, "A")
    b = EntityModel(1, "A")
    model.add(a)
    model.add(b)
    assert len(model.entities()) == 2


def test_insertion_order_kept():
    model = ERDModel()
    items = [EntityModel(i) for i in range(5)]
    for item in items:
        model.add(item)
    assert list(model.entities()) == items


def test_remove():
    model = ERDModel()
    link = LinkModel(3)
    other = LinkModel(4)
    model.add(link)
    model.add(other)
    model.remove(link)
    assert model.links() == (other,)


def test_remove_absent_leaves_model_unchanged():
    model = ERDModel()
    kept = PropertyModel(1)
    model.add(kept)
    model.remove(PropertyModel(2))
    assert model.properties() == (kept,)


def test_plain_line_is_rejected():
    model = ERDModel()
    with pytest.raises(TypeError):
        model.add(LineModel(1, Point(), []))
    with pytest.raises(TypeError):
        model.remove(LineModel(1, Point(), []))