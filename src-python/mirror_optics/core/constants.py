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
Constants used throughout the mirror visualizer.

Kept in one module so the optics model, the scene composer and the renderer
can share them without circular imports.
"""

# Initial user inputs (pixels)
DEFAULT_OBJECT_HEIGHT = 151.0
DEFAULT_OBJECT_DISTANCE = 304.0
DEFAULT_FOCAL_LENGTH = 154.0

# Initial canvas size (pixels)
DEFAULT_WIDTH = 800.0
DEFAULT_HEIGHT = 600.0

# Palette
INCOMING_RAY_COLOR = 'red'
OUTGOING_RAY_COLOR = 'blue'
OBJECT_COLOR = 'blue'
IMAGE_COLOR = (149, 53, 83)
IMAGE_GUIDE_COLOR = 'magenta'
OBJECT_GUIDE_COLOR = 'cyan'
AXIS_COLOR = 'black'
LABEL_COLOR = 'black'
BACKGROUND_COLOR = 'white'

# Pencil glyph proportions, as fractions of the glyph height.
# Empirically tuned; keep them exactly as they are.
PENCIL_EDGE_FRACTION = 1 / 3
PENCIL_CENTER_FRACTION = 1 / 9
PENCIL_SHOULDER_FRACTION = 1 / 24
PENCIL_INSIDE_FRACTION = 1 / 4
PENCIL_BASE_FRACTION = 1 / 5

# Focus ("f") and radius ("r") labels sit this many pixels above the axis
LABEL_OFFSET = 5.0
FOCUS_LABEL = 'f'
RADIUS_LABEL = 'r'

# Rendering
STROKE_WIDTH = 1.0
LABEL_FONT_SIZE = '12px'

# Slider values are truncated to this many decimals
SLIDER_DECIMALS = 2
