"""Loading diagram files and rendering them from the command line."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Sequence
from xml.sax.saxutils import escape, quoteattr

from erdview.items import Rect
from erdview.mappers import erd_from_json
from erdview.models import ERDModel, Point
from erdview.scene import ERDScene, ERDSceneView

_MARGIN = 10.0


def load_erd_file(path: str | Path) -> ERDModel:
    """Read a diagram from a JSON file.

    Raises OSError if the file cannot be read and ValueError (including
    MappingError) if it does not hold a valid diagram.
    """
    text = Path(path).read_text(encoding="utf-8")
    return erd_from_json(json.loads(text))


class MainWindow:
    """The application window: a scene and the view showing it."""

    def __init__(self) -> None:
        self.scene = ERDScene()
        self.view = ERDSceneView(self.scene)

    def open_file(self, path: str | Path) -> bool:
        """Load a diagram into the scene; an unreadable file is ignored."""
        try:
            model = load_erd_file(path)
        except (OSError, ValueError):
            return False
        self.scene.load_model(model)
        return True


def _fmt(value: float) -> str:
    return f"{value:g}"


def _points(points: Sequence[Point]) -> str:
    return " ".join(f"{_fmt(p.x)},{_fmt(p.y)}" for p in points)


class _SvgCanvas:
    def __init__(self) -> None:
        self._elements: list[str] = []
        self._xs: list[float] = []
        self._ys: list[float] = []

    def _extend(self, points: Sequence[Point]) -> None:
        self._xs.extend(p.x for p in points)
        self._ys.extend(p.y for p in points)

    def _extend_rect(self, rect: Rect) -> None:
        self._extend([Point(rect.left, rect.top), Point(rect.right, rect.bottom)])

    def draw_rect(self, rect: Rect, fill: str) -> None:
        self._extend_rect(rect)
        self._elements.append(
            f'<rect x="{_fmt(rect.x)}" y="{_fmt(rect.y)}" width="{_fmt(rect.width)}" '
            f'height="{_fmt(rect.height)}" fill={quoteattr(fill)} stroke="black"/>'
        )

    def draw_ellipse(self, rect: Rect, fill: str) -> None:
        self._extend_rect(rect)
        center = rect.center
        self._elements.append(
            f'<ellipse cx="{_fmt(center.x)}" cy="{_fmt(center.y)}" '
            f'rx="{_fmt(rect.width / 2)}" ry="{_fmt(rect.height / 2)}" '
            f'fill={quoteattr(fill)} stroke="black"/>'
        )

    def draw_polygon(self, points: Sequence[Point], fill: str) -> None:
        self._extend(points)
        self._elements.append(
            f'<polygon points="{_points(points)}" fill={quoteattr(fill)} stroke="black"/>'
        )

    def draw_text(self, position: Point, text: str, centered: bool) -> None:
        self._extend([position])
        anchor = ' text-anchor="middle" dominant-baseline="middle"' if centered else ""
        self._elements.append(
            f'<text x="{_fmt(position.x)}" y="{_fmt(position.y)}"{anchor} fill="black">'
            f"{escape(text)}</text>"
        )

    def draw_polyline(self, points: Sequence[Point], width: float) -> None:
        self._extend(points)
        self._elements.append(
            f'<polyline points="{_points(points)}" fill="none" stroke="black" '
            f'stroke-width="{_fmt(width)}"/>'
        )

    def render(self) -> str:
        if self._xs:
            left = min(self._xs) - _MARGIN
            top = min(self._ys) - _MARGIN
            width = max(self._xs) - min(self._xs) + 2 * _MARGIN
            height = max(self._ys) - min(self._ys) + 2 * _MARGIN
        else:
            left = top = width = height = 0.0
        header = (
            '<svg xmlns="http://www.w3.org/2000/svg" '
            f'viewBox="{_fmt(left)} {_fmt(top)} {_fmt(width)} {_fmt(height)}">'
        )
        return "\n".join([header, *self._elements, "</svg>"]) + "\n"


def main(argv: Sequence[str] | None = None) -> int:
    """Render a diagram file as SVG to a file or standard output."""
    parser = argparse.ArgumentParser(
        prog="erdview",
        description="Render an entity-relationship diagram stored as JSON to SVG.",
    )
    parser.add_argument("file", help="diagram JSON file")
    parser.add_argument("-o", "--output", help="SVG file to write (default: stdout)")
    args = parser.parse_args(argv)

    window = MainWindow()
    try:
        window.scene.load_model(load_erd_file(args.file))
    except (OSError, ValueError) as exc:
        print(f"erdview: cannot open {args.file}: {exc}", file=sys.stderr)
        return 1

    canvas = _SvgCanvas()
    window.scene.draw(canvas)
    svg = canvas.render()
    if args.output:
        Path(args.output).write_text(svg, encoding="utf-8")
    else:
        sys.stdout.write(svg)
    return 0