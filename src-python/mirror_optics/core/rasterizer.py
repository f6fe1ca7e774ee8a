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

"""
DDA line rasterizer.

A line from `start` toward `end` is sampled once per unit step along its
dominant axis. Samples outside the viewport are dropped. In infinite mode
the walk carries on past `end` for as long as the samples stay inside the
viewport, which is how a ray "to infinity" is drawn on a finite canvas.

All functions here are pure: the same arguments always give the same list.
"""

import logging
import math
from typing import List, Optional, Sequence, Tuple

import numpy as np

from .geometry import Point, Segment, Viewport, is_finite, is_unspecified

logger = logging.getLogger(__name__)

def _inside_index_range(start: Point, inc_x: float, inc_y: float,
                        viewport: Viewport) -> Optional[Tuple[float, float]]:
    """
    Range of step indices [lo, hi] for which start + i * inc can lie inside
    the viewport (Liang-Barsky on the unbounded parameter).

    Returns:
        (lo, hi) or None if the line misses the viewport entirely
    """
    lo, hi = -math.inf, math.inf
    for origin, inc, size in ((start.x, inc_x, viewport.width),
                              (start.y, inc_y, viewport.height)):
        if inc == 0:
            if not 0 <= origin < size:
                return None
            continue
        t_a = (0 - origin) / inc
        t_b = (size - origin) / inc
        lo = max(lo, min(t_a, t_b))
        hi = min(hi, max(t_a, t_b))
    if lo > hi:
        return None
    return lo, hi


def calc_dda(start: Optional[Point], end: Optional[Point], viewport: Viewport,
             infinite: bool = False) -> List[Point]:
    """
    Calculate the points to draw from `start` to `end` inside `viewport`.

    Args:
        start: First endpoint (None or UNSPECIFIED gives no points)
        end: Second endpoint
        viewport: Clipping rectangle [0, width) x [0, height)
        infinite: Keep extrapolating past `end` until the samples leave the
            viewport

    Returns:
        Ordered list of sample points, possibly empty
    """
    if is_unspecified(start) or is_unspecified(end):
        return []

    if not is_finite(start) or not is_finite(end):
        return []

    if not (math.isfinite(viewport.width) and math.isfinite(viewport.height)):
        logger.debug("Viewport %r is not finite, nothing rasterized", viewport)
        return []

    dx = end.x - start.x
    dy = end.y - start.y

    steps = max(abs(dx), abs(dy))
    if steps == 0:
        # Zero-length line: the increment would be 0/0
        return []
    if not math.isfinite(steps):
        # Endpoints so far apart that their difference overflows
        return []

    inc_x = dx / steps
    inc_y = dy / steps
    step_count = int(steps)

    def sample(i: int) -> Point:
        return Point(start.x + i * inc_x, start.y + i * inc_y)

    points = []
    inside = _inside_index_range(start, inc_x, inc_y, viewport)
    if inside is None:
        return points

    # Only the indices that can land inside the viewport are visited; the
    # margin of one step absorbs rounding in the range computation.
    lo, hi = inside
    first = max(0, math.floor(lo) - 1)
    last = min(step_count, math.ceil(hi) + 2)
    for i in range(first, last):
        offset = sample(i)
        if viewport.contains(offset):
            points.append(offset)

    if infinite:
        i = step_count
        offset = sample(i)
        while viewport.contains(offset):
            points.append(offset)
            i += 1
            offset = sample(i)

    return points


def rasterize(start: Optional[Point], end: Optional[Point], viewport: Viewport,
              infinite: bool = False) -> List[Point]:
    """
    Rasterize the line from `start` toward `end`, clipped to `viewport`.

    Finite mode stops after `steps` samples. Infinite mode keeps going while
    `i < steps` or the sample is still inside the viewport.
    """
    return calc_dda(start, end, viewport, infinite=infinite)


def rasterize_segment(segment: Segment, viewport: Viewport) -> List[Point]:
    """Rasterize a Segment using its own `infinite` flag."""
    points = calc_dda(segment.start, segment.end, viewport, infinite=segment.infinite)
    if not points:
        logger.debug("Segment %r produced no points", segment)
    return points


def to_array(points: Sequence[Point]) -> np.ndarray:
    """
    Convert rasterized points to an (N, 2) float array.

    Args:
        points: Sequence of Point

    Returns:
        numpy array of shape (N, 2); shape (0, 2) when empty
    """
    if not points:
        return np.empty((0, 2), dtype=float)
    return np.array([(p.x, p.y) for p in points], dtype=float)
