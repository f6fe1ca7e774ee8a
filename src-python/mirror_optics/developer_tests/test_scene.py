"""
===============================================================================
SCENE COMPOSER TESTS
===============================================================================

Verifies the primitives produced for both mirror kinds on an 800x600 canvas
with the default inputs (object height 151, distance 304, focal length 154).

1. COMPOSITION
   - segment and label counts per mirror kind
   - image side: concave at origin_x - d_i, convex at origin_x + d_i
   - focus/radius labels, horizontal extent check
   - Cartesian axes drawn last

2. SINGULARITY
   - object on the focal point: no segment depends on the image position,
     every emitted segment is finite

3. RENDERING
   - render_commands() rasterizes every segment inside the viewport and
     passes labels through
   - render_frame() draws what the state read out

Run with:
    python src-python/mirror_optics/developer_tests/test_scene.py

Or with pytest:
    pytest src-python/mirror_optics/developer_tests/test_scene.py -v
===============================================================================
"""

import sys
from pathlib import Path

src_path = Path(__file__).parent.parent.parent
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

import pytest

from mirror_optics.core.constants import IMAGE_COLOR, IMAGE_GUIDE_COLOR, OBJECT_GUIDE_COLOR
from mirror_optics.core.geometry import Label, Point, Segment, Viewport
from mirror_optics.core.optics import MirrorKind, MirrorState, OpticalInput, compute_image
from mirror_optics.core.scene import (
    SceneComposer,
    StrokePolyline,
    compose_scene,
    render_commands,
    render_frame,
)


VIEWPORT = Viewport(800, 600)
DEFAULT_INPUTS = OpticalInput(151, 304, 154)
FOCAL_INPUTS = OpticalInput(151, 154, 154)
TOLERANCE = 1e-9


def segments_of(primitives):
    return [p for p in primitives if isinstance(p, Segment)]


def labels_of(primitives):
    return [p for p in primitives if isinstance(p, Label)]


# =============================================================================
# COMPOSITION
# =============================================================================

def test_concave_composition():
    primitives = compose_scene(MirrorKind.CONCAVE, DEFAULT_INPUTS, VIEWPORT)
    segments = segments_of(primitives)

    assert len(segments) == 34
    roles = [s.role for s in segments]
    assert roles.count('incoming') == 2
    assert roles.count('outgoing') == 2
    assert roles.count('guide') == 2
    assert roles.count('glyph') == 24
    assert roles.count('axis') == 4

    guides = [s for s in segments if s.role == 'guide']
    assert [g.color for g in guides] == [IMAGE_GUIDE_COLOR, OBJECT_GUIDE_COLOR]
    assert not any(g.infinite for g in guides)
    assert all(s.infinite for s in segments if s.role in ('incoming', 'outgoing'))


def test_convex_composition():
    primitives = compose_scene(MirrorKind.CONVEX, DEFAULT_INPUTS, VIEWPORT)
    segments = segments_of(primitives)

    assert len(segments) == 35
    roles = [s.role for s in segments]
    assert roles.count('incoming') == 3
    assert roles.count('outgoing') == 4
    assert roles.count('guide') == 0
    assert roles.count('glyph') == 24


def test_image_side_depends_on_kind():
    output = compute_image(MirrorKind.CONCAVE, 151, 304, 154)
    concave = SceneComposer(MirrorKind.CONCAVE, DEFAULT_INPUTS, output, VIEWPORT)
    convex = SceneComposer(MirrorKind.CONVEX, DEFAULT_INPUTS, output, VIEWPORT)

    assert abs(concave.image_point.x - (400 - output.image_distance)) < TOLERANCE
    assert abs(convex.image_point.x - (400 + output.image_distance)) < TOLERANCE
    assert concave.image_point.y == convex.image_point.y == 300 + output.image_height
    assert concave.object_point == Point(400 - 304, 300 - 151)


def test_image_glyph_tip_sits_at_image_position():
    for kind in MirrorKind:
        output = compute_image(kind, 151, 304, 154)
        composer = SceneComposer(kind, DEFAULT_INPUTS, output, VIEWPORT)
        primitives = composer.compose()
        image_glyph = [s for s in segments_of(primitives) if s.color == IMAGE_COLOR]
        assert len(image_glyph) == 12
        tip = image_glyph[10].start
        assert abs(tip.x - composer.image_point.x) < TOLERANCE
        assert tip.y == 300


def test_focus_labels():
    concave = labels_of(compose_scene(MirrorKind.CONCAVE, DEFAULT_INPUTS, VIEWPORT))
    assert [(l.text, l.position) for l in concave] == [
        ('f', Point(246, 295)),
        ('r', Point(92, 295)),
    ]

    convex = labels_of(compose_scene(MirrorKind.CONVEX, DEFAULT_INPUTS, VIEWPORT))
    assert [(l.text, l.position.x) for l in convex] == [
        ('f', 554), ('r', 708), ('f', 246), ('r', 92),
    ]


def test_radius_label_outside_canvas_is_skipped():
    inputs = OpticalInput(151, 304, 300)
    labels = labels_of(compose_scene(MirrorKind.CONCAVE, inputs, VIEWPORT))
    # f at 100 is visible, r at -200 is not
    assert [l.text for l in labels] == ['f']


def test_axes_are_drawn_last():
    primitives = compose_scene(MirrorKind.CONVEX, DEFAULT_INPUTS, VIEWPORT)
    tail = primitives[-4:]
    assert all(isinstance(p, Segment) and p.role == 'axis' for p in tail)

    horizontal, vertical, left, bottom = tail
    assert (horizontal.start, horizontal.end) == (Point(0, 300), Point(800, 300))
    assert (vertical.start, vertical.end) == (Point(400, 0), Point(400, 600))
    assert (left.start, left.end) == (Point(0, 0), Point(0, 599))
    assert (bottom.start, bottom.end) == (Point(0, 599), Point(799, 599))


# =============================================================================
# SINGULARITY
# =============================================================================

@pytest.mark.parametrize("kind", list(MirrorKind))
def test_object_on_focal_point_drops_image_geometry(kind):
    primitives = compose_scene(kind, FOCAL_INPUTS, VIEWPORT)
    segments = segments_of(primitives)

    assert all(s.is_drawable() for s in segments)
    assert not any(s.color == IMAGE_COLOR for s in segments)
    assert not any(s.color == IMAGE_GUIDE_COLOR for s in segments)
    # only the object glyph is left
    assert sum(1 for s in segments if s.role == 'glyph') == 12
    # one ray from the mirror to the object, plus the convex origin ray
    rays = [s for s in segments if s.role in ('incoming', 'outgoing')]
    assert len(rays) == (2 if kind is MirrorKind.CONVEX else 1)
    assert all(s.role == 'incoming' for s in rays)


def test_nan_inputs_compose_without_error():
    inputs = OpticalInput(float('nan'), 304, 154)
    primitives = compose_scene(MirrorKind.CONCAVE, inputs, VIEWPORT)
    assert all(s.is_drawable() for s in segments_of(primitives))
    # the axes never depend on the inputs
    assert sum(1 for s in segments_of(primitives) if s.role == 'axis') == 4


# =============================================================================
# RENDERING
# =============================================================================

def test_render_commands_stay_inside_viewport():
    primitives = compose_scene(MirrorKind.CONCAVE, DEFAULT_INPUTS, VIEWPORT)
    commands = render_commands(primitives, VIEWPORT)

    polylines = [c for c in commands if isinstance(c, StrokePolyline)]
    labels = [c for c in commands if isinstance(c, Label)]
    assert len(labels) == 2
    assert 0 < len(polylines) <= len(segments_of(primitives))
    for polyline in polylines:
        assert len(polyline) > 0
        assert all(VIEWPORT.contains(p) for p in polyline.points)


def test_horizontal_axis_covers_canvas_width():
    commands = render_commands(compose_scene(MirrorKind.CONCAVE, DEFAULT_INPUTS, VIEWPORT), VIEWPORT)
    axes = [c for c in commands if isinstance(c, StrokePolyline) and c.role == 'axis']
    horizontal = axes[0]
    assert len(horizontal) == 800
    assert horizontal.points[0] == Point(0, 300)
    assert horizontal.points[-1] == Point(799, 300)


def test_render_frame_uses_state():
    state = MirrorState(MirrorKind.CONVEX)
    state.set_viewport(640, 480)
    commands = render_frame(state)

    assert commands
    viewport = Viewport(640, 480)
    for command in commands:
        if isinstance(command, StrokePolyline):
            assert all(viewport.contains(p) for p in command.points)


def test_render_frame_is_deterministic():
    state = MirrorState(MirrorKind.CONCAVE)
    first = [(type(c).__name__, len(getattr(c, 'points', ()))) for c in render_frame(state)]
    second = [(type(c).__name__, len(getattr(c, 'points', ()))) for c in render_frame(state)]
    assert first == second


def test_polylines_follow_their_segments():
    primitives = compose_scene(MirrorKind.CONCAVE, DEFAULT_INPUTS, VIEWPORT)
    canvas = VIEWPORT.to_shapely()

    for segment in segments_of(primitives):
        if segment.infinite:
            continue
        command = render_commands([segment], VIEWPORT)[0]
        assert canvas.covers(command.to_shapely())
        line = segment.to_shapely()
        for point in command.points:
            assert line.distance(point.to_shapely()) < 1e-6


def run_all_tests():
    """Run all tests and report results."""
    print("\n" + "=" * 78)
    print("SCENE COMPOSER TESTS")
    print("=" * 78)

    tests = [
        # Composition
        ("Concave Composition", test_concave_composition),
        ("Convex Composition", test_convex_composition),
        ("Image Side", test_image_side_depends_on_kind),
        ("Image Glyph Tip", test_image_glyph_tip_sits_at_image_position),
        ("Focus Labels", test_focus_labels),
        ("Radius Label Off Canvas", test_radius_label_outside_canvas_is_skipped),
        ("Axes Last", test_axes_are_drawn_last),

        # Singularity
        ("NaN Inputs", test_nan_inputs_compose_without_error),

        # Rendering
        ("render_commands() Inside Viewport", test_render_commands_stay_inside_viewport),
        ("Horizontal Axis Width", test_horizontal_axis_covers_canvas_width),
        ("render_frame()", test_render_frame_uses_state),
        ("render_frame() Deterministic", test_render_frame_is_deterministic),
        ("Polylines Follow Segments", test_polylines_follow_their_segments),
    ]
    for kind in MirrorKind:
        tests.append((f"Object On Focal Point ({kind.value})",
                      lambda kind=kind: test_object_on_focal_point_drops_image_geometry(kind)))

    passed = 0
    failed = 0
    errors = []

    for name, test_func in tests:
        try:
            test_func()
            passed += 1
        except Exception as e:
            failed += 1
            errors.append((name, str(e)))
            print(f"\n  FAILED: {name}")
            print(f"    Error: {e}")

    print("\n" + "=" * 78)
    print(f"SUMMARY: {passed}/{len(tests)} tests passed")
    print("=" * 78)

    if errors:
        print("\nFailed tests:")
        for name, error in errors:
            print(f"  - {name}: {error}")
        return False

    print("\nAll tests passed!")
    return True


if __name__ == "__main__":
    success = run_all_tests()
    sys.exit(0 if success else 1)
