# erdview

`erdview` reads entity-relationship diagrams described in JSON, checks that
every part of the document is well formed, builds a scene of entities, links
(relationships), properties (attributes) and the lines that join them, and
renders that scene as SVG.

It has no dependencies beyond the Python standard library (Python 3.10 or
later).

## Installing

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Rendering a diagram

```
erdview diagram.json
erdview diagram.json -o diagram.svg
```

The command loads the file, builds the diagram and writes it as SVG to
standard output, or to the file given with `-o` / `--output`. The drawing
has:

* entities as gray rectangles (100 × 60) with the name in the middle,
* links as gray diamonds with the name in the middle,
* properties as gray ellipses with the name in the middle,
* lines as black polylines of width 1.5; link lines also carry the label
  `min,max` at their starting point.

The SVG `viewBox` encloses everything drawn, with a margin of 10 units.

If the file cannot be read, is not valid JSON, or does not match the format
below, the command prints `erdview: cannot open <file>: <reason>` to standard
error and exits with status 1.

## The file format

A diagram is one JSON object with five arrays, all of them required:

```json
{
  "entities": [
    {"id": 1, "name": "Student", "position": {"x": 0, "y": 0}}
  ],
  "links": [
    {"id": 2, "name": "attends", "position": {"x": 200, "y": 0}}
  ],
  "properties": [
    {"id": 3, "name": "name", "position": {"x": 0, "y": -120}}
  ],
  "propertyLines": [
    {"id": 4, "position": {"x": 0, "y": -30}, "moves": [0, -60],
     "entityId": 1, "propertyId": 3}
  ],
  "linkLines": [
    {"id": 5, "position": {"x": 50, "y": 0}, "moves": [100],
     "entityId": 1, "linkId": 2,
     "minCardinality": "0", "maxCardinality": "N"}
  ]
}
```

* Entities, links and properties each have a numeric `id`, a string `name`
  and a `position` with numeric `x` and `y`.
* Lines have a numeric `id`, start at `position` and follow `moves`, a list
  of numbers that alternate between horizontal and vertical steps: the first
  move shifts along x, the second along y, the third along x again, and so on.
* Property lines name the entity and the property they join (`entityId`,
  `propertyId`).
* Link lines name the entity and the link they join (`entityId`, `linkId`)
  and carry `minCardinality` and `maxCardinality` as strings.

Numbers must be finite and booleans are not accepted as numbers. Ids and
moves are truncated to integers; positions are kept as floats. Extra keys are
ignored.

## Using it from Python

```python
from erdview.app import load_erd_file
from erdview.mappers import erd_to_json

model = load_erd_file("diagram.json")
for entity in model.entities():
    print(entity.id, entity.name, entity.position)

document = erd_to_json(model)
```

### `erdview.models`

`Point` (frozen, with `+` and `-`), `EntityModel`, `LinkModel`,
`PropertyModel`, `LineModel` (iterable over its `moves`, with `len` and
indexing), `LinkLineModel` and `PropertyLineModel`. Models compare by
identity. `ERDModel` holds a whole diagram: `add(item)` and `remove(item)`
file each item under its kind (removing an absent item does nothing, an
unsupported type raises `TypeError`), and `entities()`, `properties()`,
`links()`, `property_lines()` and `link_lines()` return tuples in insertion
order.

### `erdview.mappers`

A `*_from_json` / `*_to_json` pair for every kind of element (`position`,
`entity`, `link`, `property`, `line`, `link_line`, `property_line`) and for
the whole diagram (`erd_from_json`, `erd_to_json`). Malformed input raises
`erdview.mappers.MappingError`, a subclass of `ValueError`.

`load_erd_file(path)` in `erdview.app` reads a file and returns an
`ERDModel`; it raises `OSError` if the file cannot be read and `ValueError`
if it does not hold a valid diagram.

### `erdview.items` and `erdview.scene`

`erdview.items` has the drawable items (`EntityItem`, `LinkItem`,
`PropertyItem`, `LinkLineItem`, `PropertyLineItem`). `LineItem.nodes()` gives
the points a line passes through, and `EntityItem.set_pos(point)` moves an
item together with its model. Items draw onto any object with `draw_rect`,
`draw_ellipse`, `draw_polygon`, `draw_text` and `draw_polyline` methods.

`ERDScene.load_model(model)` turns a model into items and `ERDScene.draw(canvas)`
draws them all. `ERDSceneView` keeps view state for a scene: `mouse_press`
with the left button and Shift starts panning, `mouse_move` shifts `scroll`
by the drag distance, `mouse_release` ends panning, and `wheel` with Ctrl
multiplies or divides `scale` by 1.15 per step. Each handler returns `True`
when it consumed the event.

`MainWindow` pairs a scene with its view; `open_file(path)` loads a diagram
into the scene and returns `False`, loading nothing, if the file is
unreadable or invalid.

## What it does not do

There is no interactive window. The command only writes SVG; the pan and zoom
state kept by `ERDSceneView` is not applied to the rendered output, and
diagrams cannot be edited or saved back from the command line.