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

from typing import Any, List

from .constants import (
    OBJECT_COLOR,
    PENCIL_BASE_FRACTION,
    PENCIL_CENTER_FRACTION,
    PENCIL_EDGE_FRACTION,
    PENCIL_INSIDE_FRACTION,
    PENCIL_SHOULDER_FRACTION,
)
from .geometry import Point, Segment


def build_pencil_glyph(distance: float, height: float, origin: Point,
                       color: Any = OBJECT_COLOR) -> List[Segment]:
    """
    Build the pencil used to mark an object or its image.

    The pencil stands on the optical axis at `origin.x - distance` with its
    cap `height` above the axis (canvas y grows downward, so "above" means
    a smaller y). Negating both distance and height gives the point
    reflection of the glyph through `origin`.

    Args:
        distance: Horizontal offset from the origin, positive to the left
        height: Vertical extent, positive upward
        origin: Canvas position of the optical axis origin
        color: Stroke color of every segment

    Returns:
        Twelve finite segments: cap, shoulders, inner lines, body edges and
        the two base lines meeting at the tip on the axis
    """
    zero_x, zero_y = origin.x, origin.y

    base_y = zero_y - height * PENCIL_BASE_FRACTION
    shoulder_y = zero_y + height * PENCIL_SHOULDER_FRACTION - height
    inside_y = zero_y - height * PENCIL_INSIDE_FRACTION

    right_edge = zero_x - (distance - height * PENCIL_EDGE_FRACTION)
    left_edge = zero_x - (distance + height * PENCIL_EDGE_FRACTION)

    right_center = zero_x - (distance - height * PENCIL_CENTER_FRACTION)
    left_center = zero_x - (distance + height * PENCIL_CENTER_FRACTION)

    tip_x = zero_x - distance
    cap_y = zero_y - height

    def seg(x1, y1, x2, y2):
        return Segment(Point(x1, y1), Point(x2, y2), color)

    return [
        # cap
        seg(right_center, cap_y, left_center, cap_y),
        # cap to shoulders
        seg(right_center, cap_y, right_edge, shoulder_y),
        seg(left_center, cap_y, left_edge, shoulder_y),
        # inner verticals
        seg(right_center, cap_y, right_center, inside_y),
        seg(left_center, cap_y, left_center, inside_y),
        # inner crossbar
        seg(left_center, inside_y, right_center, inside_y),
        # inner lines down to the base
        seg(right_center, inside_y, right_edge, base_y),
        seg(left_center, inside_y, left_edge, base_y),
        # body edges
        seg(right_edge, shoulder_y, right_edge, base_y),
        seg(left_edge, shoulder_y, left_edge, base_y),
        # base to tip
        seg(tip_x, zero_y, left_edge, base_y),
        seg(tip_x, zero_y, right_edge, base_y),
    ]
