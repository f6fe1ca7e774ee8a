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
Scene composition for the mirror ray diagram.

SceneComposer turns the optics model into an ordered list of primitives
(Segment and Label). render_commands() then rasterizes every segment into a
StrokePolyline. Together they form the immediate-mode frame function: the
whole diagram is rebuilt from the current state on every change.

Canvas coordinates: x grows to the right, y grows downward, the optical axis
origin is the viewport centre. The object stands to the left of the mirror
at origin_x - object_distance with its top at origin_y - object_height.
"""

import logging
import math
from typing import Any, List, Optional, Union

from shapely.geometry import LineString

from .constants import (
    AXIS_COLOR,
    FOCUS_LABEL,
    IMAGE_COLOR,
    IMAGE_GUIDE_COLOR,
    INCOMING_RAY_COLOR,
    LABEL_COLOR,
    LABEL_OFFSET,
    OBJECT_COLOR,
    OBJECT_GUIDE_COLOR,
    OUTGOING_RAY_COLOR,
    RADIUS_LABEL,
)
from .geometry import Label, Point, Segment, Viewport, is_finite
from .glyphs import build_pencil_glyph
from .optics import MirrorKind, MirrorState, OpticalInput, OpticalOutput, compute_image
from .rasterizer import rasterize_segment

logger = logging.getLogger(__name__)

Primitive = Union[Segment, Label]


class StrokePolyline:
    """Draw command: join consecutive points with straight strokes."""
    def __init__(self, points: List[Point], color: Any, role: str = 'glyph'):
        self.points = points
        self.color = color
        self.role = role

    def __len__(self) -> int:
        return len(self.points)

    def to_shapely(self):
        """
        Convert to a Shapely LineString, or a Shapely Point when only one
        sample was drawn.
        """
        if len(self.points) == 1:
            return self.points[0].to_shapely()
        return LineString([p.to_tuple() for p in self.points])

    def __repr__(self) -> str:
        return f"StrokePolyline({len(self.points)} points, color={self.color!r}, role={self.role!r})"


# Labels are drawn as they are composed.
DrawCommand = Union[StrokePolyline, Label]


class SceneComposer:
    """
    Builds the primitives of one frame for a given mirror kind.

    The two mirror kinds share the rays between object, mirror and image.
    The only geometric difference is the side of the image: a convex mirror
    puts it at origin_x + image_distance, a concave one at
    origin_x - image_distance.

    Segments with a non-finite endpoint are dropped here, so an object
    sitting on the focal point simply yields no image-dependent geometry.

    Attributes:
        kind (MirrorKind): Mirror kind
        inputs (OpticalInput): Object height, object distance, focal length
        output (OpticalOutput): Image distance and height
        viewport (Viewport): Canvas size; its centre is the optical origin
    """

    def __init__(self, kind: MirrorKind, inputs: OpticalInput, output: OpticalOutput,
                 viewport: Viewport):
        self.kind = kind
        self.inputs = inputs
        self.output = output
        self.viewport = viewport
        self.primitives: List[Primitive] = []

    @property
    def zero_x(self) -> float:
        return self.viewport.origin_x

    @property
    def zero_y(self) -> float:
        return self.viewport.origin_y

    @property
    def object_point(self) -> Point:
        return Point(self.zero_x - self.inputs.object_distance,
                     self.zero_y - self.inputs.object_height)

    @property
    def image_point(self) -> Point:
        if self.kind is MirrorKind.CONVEX:
            image_x = self.zero_x + self.output.image_distance
        else:
            image_x = self.zero_x - self.output.image_distance
        return Point(image_x, self.zero_y + self.output.image_height)

    def compose(self) -> List[Primitive]:
        """
        Build the ordered primitive list for this frame.

        Returns:
            Segments and labels in draw order; the axes come last so they
            are drawn on top
        """
        self.primitives = []
        self._add_shared_rays()
        if self.kind is MirrorKind.CONVEX:
            self._add_convex()
        else:
            self._add_concave()
        self._add_cartesian()
        return self.primitives

    # -- building blocks -----------------------------------------------------

    def _add_segment(self, start: Point, end: Point, color: Any, infinite: bool = False,
                     role: str = 'glyph') -> None:
        segment = Segment(start, end, color, infinite, role)
        if not segment.is_drawable():
            logger.debug("Skipping %s segment with non-finite endpoint: %r", role, segment)
            return
        self.primitives.append(segment)

    def _add_glyph(self, distance: float, height: float, color: Any) -> None:
        for segment in build_pencil_glyph(distance, height, self.viewport.origin, color):
            self._add_segment(segment.start, segment.end, segment.color, role='glyph')

    def _add_focus_labels(self, focus: float) -> None:
        """Mark the focal point "f" and the centre of curvature "r"."""
        label_y = self.zero_y - LABEL_OFFSET
        for text, x in ((FOCUS_LABEL, self.zero_x + focus),
                        (RADIUS_LABEL, self.zero_x + 2 * focus)):
            if math.isfinite(x) and self.viewport.contains_x(x):
                self.primitives.append(Label(text, Point(x, label_y), LABEL_COLOR))

    def _add_shared_rays(self) -> None:
        obj = self.object_point
        image = self.image_point

        # reflected light, from the mirror toward the image
        self._add_segment(Point(self.zero_x, image.y), image, OUTGOING_RAY_COLOR,
                          infinite=True, role='outgoing')
        self._add_segment(Point(self.zero_x, obj.y), image, OUTGOING_RAY_COLOR,
                          infinite=True, role='outgoing')

        # incoming light, from the mirror back toward the object
        self._add_segment(Point(self.zero_x, obj.y), obj, INCOMING_RAY_COLOR,
                          infinite=True, role='incoming')
        self._add_segment(Point(self.zero_x, image.y), obj, INCOMING_RAY_COLOR,
                          infinite=True, role='incoming')

    def _add_convex(self) -> None:
        obj = self.object_point
        image = self.image_point
        origin = self.viewport.origin
        focus = self.inputs.focal_length

        if is_finite(image):
            self._add_segment(Point(self.zero_x, obj.y), Point(self.zero_x + focus, self.zero_y),
                              OUTGOING_RAY_COLOR, infinite=True, role='outgoing')
        self._add_segment(origin, image, OUTGOING_RAY_COLOR, infinite=True, role='outgoing')
        self._add_segment(origin, obj, INCOMING_RAY_COLOR, infinite=True, role='incoming')

        self._add_focus_labels(focus)
        self._add_focus_labels(-focus)

        self._add_glyph(self.inputs.object_distance, self.inputs.object_height, OBJECT_COLOR)
        # virtual image behind the mirror
        self._add_glyph(-self.output.image_distance, -self.output.image_height, IMAGE_COLOR)

    def _add_concave(self) -> None:
        obj = self.object_point
        image = self.image_point

        self._add_segment(Point(image.x, self.zero_y), image, IMAGE_GUIDE_COLOR, role='guide')
        self._add_glyph(self.output.image_distance, -self.output.image_height, IMAGE_COLOR)

        self._add_segment(Point(obj.x, self.zero_y), obj, OBJECT_GUIDE_COLOR, role='guide')
        self._add_glyph(self.inputs.object_distance, self.inputs.object_height, OBJECT_COLOR)

        self._add_focus_labels(-self.inputs.focal_length)

    def _add_cartesian(self) -> None:
        width, height = self.viewport.width, self.viewport.height

        self._add_segment(Point(0, self.zero_y), Point(width, self.zero_y), AXIS_COLOR, role='axis')
        self._add_segment(Point(self.zero_x, 0), Point(self.zero_x, height), AXIS_COLOR, role='axis')

        frame = self.viewport.frame()
        top_left = Point(0, 0)
        bottom_left = Point(0, frame.height)
        bottom_right = Point(frame.width, frame.height)
        self._add_segment(top_left, bottom_left, AXIS_COLOR, role='axis')
        self._add_segment(bottom_left, bottom_right, AXIS_COLOR, role='axis')


def compose_scene(kind: MirrorKind, inputs: OpticalInput, viewport: Viewport,
                  output: Optional[OpticalOutput] = None) -> List[Primitive]:
    """
    Build the primitives for one frame.

    Args:
        kind: Mirror kind
        inputs: Object height, object distance, focal length
        viewport: Canvas size
        output: Precomputed image; computed from `inputs` when omitted

    Returns:
        Ordered list of Segment and Label
    """
    if output is None:
        output = compute_image(kind, inputs.object_height, inputs.object_distance,
                               inputs.focal_length)
    return SceneComposer(kind, inputs, output, viewport).compose()


def render_commands(primitives: List[Primitive], viewport: Viewport) -> List[DrawCommand]:
    """
    Rasterize composed primitives into draw commands.

    Segments whose rasterization is empty are left out; that absence is the
    visual feedback for a degenerate configuration.
    """
    commands: List[DrawCommand] = []
    for primitive in primitives:
        if isinstance(primitive, Label):
            commands.append(primitive)
            continue
        points = rasterize_segment(primitive, viewport)
        if points:
            commands.append(StrokePolyline(points, primitive.color, primitive.role))
    return commands


def render_frame(state: MirrorState) -> List[DrawCommand]:
    """
    Full recompute-and-redraw pass for one mirror state.

    Uses the state's last computed image so the readout and the drawing
    always agree.
    """
    primitives = compose_scene(state.kind, state.inputs, state.viewport, state.output)
    return render_commands(primitives, state.viewport)
