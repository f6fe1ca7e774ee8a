"""
Copyright 2026 mirror-optics authors and contributors

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

    http://www.apache.org/licenses/LICENSE-2.0

Unless required by applicable law or agreed to in writing, software
distributed under the License is distributed on an "AS IS" BASIS,
WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
See the License for the specific language governing permissions and
limitations under the License.
"""

import math
from typing import Any, Optional, Tuple
from shapely.geometry import Point as ShapelyPoint, LineString, Polygon, box


class Point:
    """
    A point in canvas space (pixels, y grows downward).
    Can be converted to/from Shapely Point objects.

    A point whose coordinates are both NaN is the "unspecified" point,
    see UNSPECIFIED and is_unspecified().
    """
    def __init__(self, x: float, y: float):
        self.x = x
        self.y = y

    def to_shapely(self) -> ShapelyPoint:
        """Convert to Shapely Point."""
        return ShapelyPoint(self.x, self.y)

    def to_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __hash__(self) -> int:
        return hash((self.x, self.y))

    def __repr__(self) -> str:
        return f"Point(x={self.x}, y={self.y})"


# Sentinel for "no point"; checked before any arithmetic.
UNSPECIFIED = Point(float('nan'), float('nan'))


def is_unspecified(p: Optional[Point]) -> bool:
    """True for None or for the NaN/NaN sentinel point."""
    return p is None or (math.isnan(p.x) and math.isnan(p.y))


def is_finite(p: Optional[Point]) -> bool:
    """True only when both coordinates are finite numbers."""
    return p is not None and math.isfinite(p.x) and math.isfinite(p.y)


class Viewport:
    """
    The visible canvas area.

    The optical axis crosses the canvas centre, so the origin ("zero point")
    is recomputed from the size every time it is read.

    Attributes:
        width (float): Canvas width in pixels
        height (float): Canvas height in pixels
    """
    def __init__(self, width: float, height: float):
        self.width = width
        self.height = height

    @property
    def origin_x(self) -> float:
        return self.width / 2

    @property
    def origin_y(self) -> float:
        return self.height / 2

    @property
    def origin(self) -> Point:
        return Point(self.origin_x, self.origin_y)

    def contains(self, p: Point) -> bool:
        """
        Test whether a point lies inside the half-open rectangle
        [0, width) x [0, height). NaN coordinates are never inside.
        """
        return 0 <= p.x < self.width and 0 <= p.y < self.height

    def contains_x(self, x: float) -> bool:
        """Closed horizontal extent test used for the focus/radius labels."""
        return 0 <= x <= self.width

    def frame(self) -> 'Viewport':
        """
        The outline box, one pixel smaller than the canvas so its right and
        bottom edges are still inside the half-open rectangle.
        """
        return Viewport(self.width - 1, self.height - 1)

    def to_shapely(self) -> Polygon:
        """Convert to a Shapely box."""
        return box(0, 0, self.width, self.height)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Viewport):
            return NotImplemented
        return self.width == other.width and self.height == other.height

    def __repr__(self) -> str:
        return f"Viewport(width={self.width}, height={self.height})"


class Segment:
    """
    A colored line request produced by the scene composer.

    Attributes:
        start (Point): First endpoint
        end (Point): Second endpoint; for an infinite segment this is only
            a point the ray passes through
        color: CSS color string or (r, g, b) tuple
        infinite (bool): Keep drawing past `end` until the line leaves the
            viewport
        role (str): What the segment depicts ('incoming', 'outgoing',
            'guide', 'glyph' or 'axis'); the renderer picks a layer from it
    """
    def __init__(self, start: Point, end: Point, color: Any = 'black', infinite: bool = False,
                 role: str = 'glyph'):
        self.start = start
        self.end = end
        self.color = color
        self.infinite = infinite
        self.role = role

    def is_drawable(self) -> bool:
        """Both endpoints are specified and finite."""
        return is_finite(self.start) and is_finite(self.end)

    def to_shapely(self) -> LineString:
        """Convert to Shapely LineString."""
        return LineString([self.start.to_tuple(), self.end.to_tuple()])

    def __repr__(self) -> str:
        kind = 'infinite' if self.infinite else 'finite'
        return f"Segment(start={self.start}, end={self.end}, color={self.color!r}, {kind}, role={self.role!r})"


class Label:
    """A text label anchored at a canvas point."""
    def __init__(self, text: str, position: Point, color: Any = 'black'):
        self.text = text
        self.position = position
        self.color = color

    def __repr__(self) -> str:
        return f"Label(text={self.text!r}, position={self.position})"


class Geometry:
    """
    Geometric helpers for canvas points.
    """

    @staticmethod
    def reflect_through(p: Point, center: Point) -> Point:
        """
        Point reflection of p through center.

        Args:
            p: Point to reflect
            center: Center of the reflection

        Returns:
            Reflected point
        """
        return Point(2 * center.x - p.x, 2 * center.y - p.y)


# Create a singleton instance for convenience
geometry = Geometry()
