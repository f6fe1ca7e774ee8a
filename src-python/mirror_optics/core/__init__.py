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

from .geometry import geometry, Geometry, Point, Viewport, Segment, Label, UNSPECIFIED, is_finite, is_unspecified
from . import constants
from .optics import MirrorKind, OpticalInput, OpticalOutput, MirrorState, compute_image
from .rasterizer import rasterize, rasterize_segment, to_array
from .glyphs import build_pencil_glyph
from .scene import SceneComposer, StrokePolyline, compose_scene, render_commands, render_frame
from .svg_renderer import SVGRenderer, RenderSettings

__all__ = [
    'geometry', 'Geometry', 'Point', 'Viewport', 'Segment', 'Label',
    'UNSPECIFIED', 'is_finite', 'is_unspecified',
    'constants',
    'MirrorKind', 'OpticalInput', 'OpticalOutput', 'MirrorState', 'compute_image',
    'rasterize', 'rasterize_segment', 'to_array',
    'build_pencil_glyph',
    'SceneComposer', 'StrokePolyline', 'compose_scene', 'render_commands', 'render_frame',
    'SVGRenderer', 'RenderSettings',
]
