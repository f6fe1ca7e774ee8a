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

from dataclasses import dataclass

import svgwrite

from .constants import BACKGROUND_COLOR, LABEL_FONT_SIZE, STROKE_WIDTH


def css_color(color):
    """
    Convert a color to a CSS color string.

    Args:
        color (str or tuple): CSS color string, or (r, g, b) with 0-255 values

    Returns:
        str: CSS color string (e.g., 'rgb(149, 53, 83)')

    Raises:
        ValueError: If the color is neither a string nor an RGB triple
    """
    if isinstance(color, str):
        return color
    if isinstance(color, (tuple, list)) and len(color) == 3:
        r, g, b = (int(c) for c in color)
        return f'rgb({r}, {g}, {b})'
    raise ValueError(f"Unsupported color {color!r}: expected a CSS string or (r, g, b)")


@dataclass
class RenderSettings:
    """
    Appearance of the SVG output.

    Attributes:
        stroke_width (float): Polyline stroke width in pixels
        background (str): Background fill, or None for a transparent canvas
        label_font_size (str): CSS font size of the focus/radius labels
        metadata_level (str): 'none' for plain SVG, 'full' to tag every
            element with its role (class and data-role attributes)
    """
    stroke_width: float = STROKE_WIDTH
    background: str = BACKGROUND_COLOR
    label_font_size: str = LABEL_FONT_SIZE
    metadata_level: str = 'full'


class SVGRenderer:
    """
    SVG render surface for the mirror ray diagram.

    Draw commands are sorted into four Inkscape layers (bottom to top):
    - rays: incoming and reflected rays
    - objects: pencil glyphs and their guide lines
    - axes: Cartesian axes and the frame
    - labels: focus and radius markers

    Coordinates are canvas pixels with y growing downward, which is also
    SVG's own convention, so no flip transform is applied.

    Attributes:
        width (float): Canvas width in pixels
        height (float): Canvas height in pixels
        settings (RenderSettings): Appearance settings
        dwg (svgwrite.Drawing): The SVG drawing object
    """

    ROLE_LAYERS = {
        'incoming': 'rays',
        'outgoing': 'rays',
        'glyph': 'objects',
        'guide': 'objects',
        'axis': 'axes',
    }

    def __init__(self, width=800, height=600, settings=None):
        self.width = width
        self.height = height
        self.settings = settings if settings is not None else RenderSettings()

        # debug=False disables svgwrite's attribute validation, which
        # rejects the inkscape namespace
        self.dwg = svgwrite.Drawing(size=(f'{width}px', f'{height}px'),
                                    profile='full', debug=False)
        self.dwg.viewbox(0, 0, width, height)
        self.dwg['xmlns:inkscape'] = 'http://www.inkscape.org/namespaces/inkscape'

        if self.settings.background:
            self.dwg.add(self.dwg.rect(insert=(0, 0), size=(width, height),
                                       fill=self.settings.background))

        self.layers = {}
        for name, label in (('rays', 'Rays'), ('objects', 'Objects'),
                            ('axes', 'Axes'), ('labels', 'Labels')):
            self.layers[name] = self.dwg.add(self.dwg.g(
                id=f'layer-{name}',
                **{'inkscape:groupmode': 'layer', 'inkscape:label': label}
            ))

    def _normalize_coord(self, value):
        """
        Normalize a coordinate value: -0.0 and values within 1e-10 of zero
        become 0.0.
        """
        if value == 0.0 or abs(value) < 1e-10:
            return 0.0
        return value

    def draw_polyline(self, points, color='black', role='glyph'):
        """
        Stroke a polyline through the given points.

        Args:
            points (list): Sequence of Point
            color (str or tuple): Stroke color
            role (str): Segment role, selects the layer

        Returns:
            The svgwrite element, or None if fewer than two points were given
        """
        if len(points) < 2:
            return None

        polyline = self.dwg.polyline(
            points=[(self._normalize_coord(p.x), self._normalize_coord(p.y)) for p in points],
            stroke=css_color(color),
            stroke_width=self.settings.stroke_width,
            fill='none'
        )
        if self.settings.metadata_level != 'none':
            polyline['class'] = role
            polyline['data-role'] = role

        self.layers[self.ROLE_LAYERS.get(role, 'objects')].add(polyline)
        return polyline

    def draw_label(self, text, position, color='black'):
        """
        Draw a text label with its baseline at `position`.

        Args:
            text (str): Label text
            position (Point): Anchor point
            color (str or tuple): Fill color
        """
        label = self.dwg.text(
            text,
            insert=(self._normalize_coord(position.x), self._normalize_coord(position.y)),
            fill=css_color(color),
            font_size=self.settings.label_font_size,
            font_family='sans-serif'
        )
        if self.settings.metadata_level != 'none':
            label['class'] = 'label'
        self.layers['labels'].add(label)
        return label

    def draw_commands(self, commands):
        """
        Draw a frame's command list in order.

        Args:
            commands (list): StrokePolyline and Label commands
        """
        for command in commands:
            if hasattr(command, 'points'):
                self.draw_polyline(command.points, command.color, command.role)
            else:
                self.draw_label(command.text, command.position, command.color)

    def save(self, filename: str = None):
        """
        Save the SVG to a file.

        Args:
            filename (str): Output filename (default: 'mirror.svg')
        """
        if filename is None:
            filename = "mirror.svg"
        self.dwg.saveas(filename)

    def to_string(self):
        """
        Get the SVG as a string.

        Returns:
            str: SVG content as XML string
        """
        return self.dwg.tostring()
