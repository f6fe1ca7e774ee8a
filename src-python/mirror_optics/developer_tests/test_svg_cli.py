"""
===============================================================================
SVG RENDERER AND CLI TESTS
===============================================================================

1. SVGRenderer
   - css_color() for strings and RGB triples, ValueError otherwise
   - polylines land in the layer of their role, short polylines are skipped
   - labels are written as text
   - save() writes a file

2. CLI
   - writes the SVG and prints the readout
   - object on the focal point prints an infinite image distance

Run with:
    python src-python/mirror_optics/developer_tests/test_svg_cli.py

Or with pytest:
    pytest src-python/mirror_optics/developer_tests/test_svg_cli.py -v
===============================================================================
"""

import io
import sys
import tempfile
from contextlib import redirect_stdout
from pathlib import Path

src_path = Path(__file__).parent.parent.parent
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

import pytest

from mirror_optics.cli import build_parser, main
from mirror_optics.core.geometry import Label, Point
from mirror_optics.core.optics import MirrorKind, MirrorState
from mirror_optics.core.scene import StrokePolyline, render_frame
from mirror_optics.core.svg_renderer import RenderSettings, SVGRenderer, css_color


def test_css_color():
    assert css_color('magenta') == 'magenta'
    assert css_color((149, 53, 83)) == 'rgb(149, 53, 83)'
    with pytest.raises(ValueError):
        css_color(42)
    with pytest.raises(ValueError):
        css_color((1, 2))


def test_polyline_goes_to_role_layer():
    renderer = SVGRenderer(200, 100)
    element = renderer.draw_polyline([Point(0, 0), Point(5, 5)], 'red', role='incoming')

    assert element is not None
    assert element in renderer.layers['rays'].elements
    assert element['data-role'] == 'incoming'


def test_short_polyline_is_skipped():
    renderer = SVGRenderer(200, 100)
    assert renderer.draw_polyline([Point(1, 1)], 'red') is None
    assert renderer.draw_polyline([], 'red') is None
    assert renderer.layers['objects'].elements == []


def test_metadata_can_be_disabled():
    renderer = SVGRenderer(200, 100, RenderSettings(metadata_level='none'))
    renderer.draw_polyline([Point(0, 0), Point(5, 5)], 'red', role='axis')
    assert 'data-role' not in renderer.to_string()


def test_draw_commands():
    renderer = SVGRenderer(200, 100)
    renderer.draw_commands([
        StrokePolyline([Point(0, 50), Point(1, 50), Point(2, 50)], 'black', role='axis'),
        Label('f', Point(60, 45)),
    ])
    svg = renderer.to_string()

    assert '<polyline' in svg
    assert 'layer-axes' in svg
    assert '>f</text>' in svg


def test_full_frame_to_svg():
    state = MirrorState(MirrorKind.CONVEX)
    state.set_viewport(800, 600)
    renderer = SVGRenderer(800, 600)
    renderer.draw_commands(render_frame(state))

    svg = renderer.to_string()
    assert 'rgb(149, 53, 83)' in svg
    assert svg.count('<polyline') > 30

    with tempfile.TemporaryDirectory() as tmp_dir:
        output = Path(tmp_dir) / 'convex.svg'
        renderer.save(str(output))
        assert output.read_text().startswith('<?xml')


def test_package_and_app_import():
    import mirror_optics
    from mirror_optics import app

    assert mirror_optics.__version__ == "0.1.0"
    assert app.AppState().state.mirror.kind is MirrorKind.CONCAVE


def test_cli_parser_defaults():
    args = build_parser().parse_args([])
    assert args.kind == 'concave'
    assert args.object_distance == 304.0
    assert args.output == 'mirror.svg'


def run_cli(argv, filename):
    """Run the command line in a temporary directory; return (exit code, stdout, file written)."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        output = Path(tmp_dir) / filename
        stdout = io.StringIO()
        with redirect_stdout(stdout):
            code = main(argv + ['-o', str(output)])
        return code, stdout.getvalue(), output.exists()


def test_cli_writes_svg():
    code, printed, written = run_cli(['--kind', 'convex'], 'diagram.svg')

    assert code == 0
    assert written
    assert f"image distance: {304 * 154 / 150}" in printed


def test_cli_focal_point():
    code, printed, written = run_cli(['--object-distance', '154', '--focal-length', '154'],
                                     'focal.svg')

    assert code == 0
    assert 'image distance: inf' in printed
    assert written


def run_all_tests():
    """Run all tests and report results."""
    print("\n" + "=" * 78)
    print("SVG RENDERER AND CLI TESTS")
    print("=" * 78)

    tests = [
        # SVGRenderer
        ("css_color()", test_css_color),
        ("Role Layers", test_polyline_goes_to_role_layer),
        ("Short Polyline", test_short_polyline_is_skipped),
        ("Metadata Level", test_metadata_can_be_disabled),
        ("draw_commands()", test_draw_commands),
        ("Full Frame", test_full_frame_to_svg),

        # CLI
        ("Package Import", test_package_and_app_import),
        ("Parser Defaults", test_cli_parser_defaults),
        ("CLI Writes SVG", test_cli_writes_svg),
        ("CLI Focal Point", test_cli_focal_point),
    ]

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
