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

Mirror Optics
=============

Ray diagrams for concave and convex spherical mirrors.

Main modules:
- core: Optics model, DDA rasterizer, scene composer, SVG renderer
- app: Two-tab application state (concave and convex mirror)
- cli: Command line renderer

Quick start:
    from mirror_optics.core import MirrorKind, MirrorState, render_frame

    state = MirrorState(MirrorKind.CONCAVE)
    state.set_viewport(800, 600)
    commands = render_frame(state)
"""

__version__ = "0.1.0"

# Convenience imports for common usage
from .core.optics import MirrorKind, MirrorState, compute_image
from .core.scene import render_frame

__all__ = [
    'MirrorKind',
    'MirrorState',
    'compute_image',
    'render_frame',
    '__version__',
]
