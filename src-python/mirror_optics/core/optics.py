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
Mirror optics model.

The image of an object in a spherical mirror follows the mirror equation

    1/d_o + 1/d_i = 1/f   ->   d_i = d_o * f / (d_o - f)
    h_i = d_i * h_o / d_o

The formula is the same for concave and convex mirrors; only the side on
which the scene composer draws the image differs.
"""

import logging
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional

import numpy as np

from .constants import (
    DEFAULT_FOCAL_LENGTH,
    DEFAULT_HEIGHT,
    DEFAULT_OBJECT_DISTANCE,
    DEFAULT_OBJECT_HEIGHT,
    DEFAULT_WIDTH,
)
from .geometry import Viewport

logger = logging.getLogger(__name__)


class MirrorKind(Enum):
    """Type of spherical mirror."""
    CONCAVE = 'concave'
    CONVEX = 'convex'

    @classmethod
    def from_name(cls, name: str) -> 'MirrorKind':
        """
        Look up a mirror kind by name, case-insensitively.

        Raises:
            ValueError: If the name is not a known mirror kind
        """
        try:
            return cls(name.strip().lower())
        except ValueError:
            valid = ', '.join(k.value for k in cls)
            raise ValueError(f"Unknown mirror kind '{name}' (expected one of: {valid})") from None


@dataclass
class OpticalInput:
    """User-controlled quantities, in pixels. Any float is accepted."""
    object_height: float = DEFAULT_OBJECT_HEIGHT
    object_distance: float = DEFAULT_OBJECT_DISTANCE
    focal_length: float = DEFAULT_FOCAL_LENGTH


@dataclass(frozen=True)
class OpticalOutput:
    """Image position and size derived from an OpticalInput."""
    image_distance: float
    image_height: float

    @property
    def is_finite(self) -> bool:
        return math.isfinite(self.image_distance) and math.isfinite(self.image_height)


def _divide(numerator: float, denominator: float) -> float:
    # IEEE division: x/0 gives +-inf and 0/0 gives nan instead of raising
    with np.errstate(divide='ignore', invalid='ignore'):
        return float(np.float64(numerator) / np.float64(denominator))


def compute_image(kind: MirrorKind, object_height: float, object_distance: float,
                  focal_length: float) -> OpticalOutput:
    """
    Compute the image distance and height with the mirror equation.

    Never raises: when the object sits on the focal point the image distance
    is infinite, and degenerate inputs give nan. Callers treat non-finite
    results as "do not draw".

    Args:
        kind: Mirror kind. Accepted for symmetry with the composer; the
            formula is identical for both kinds.
        object_height: Object height
        object_distance: Object distance from the mirror
        focal_length: Focal length

    Returns:
        OpticalOutput
    """
    image_distance = _divide(object_distance * focal_length, object_distance - focal_length)
    image_height = _divide(image_distance * object_height, object_distance)
    return OpticalOutput(image_distance, image_height)


def format_readout(value: float) -> str:
    """Decimal text for a readout field; inf, -inf and nan are kept as words."""
    return str(float(value))


Listener = Callable[['MirrorState'], None]


@dataclass
class MirrorState:
    """
    Current inputs, viewport and last computed image for one mirror.

    Every setter recomputes the image and then calls the subscribed
    listeners, which is where a shell schedules its redraw.

    Attributes:
        kind (MirrorKind): Mirror kind this state belongs to
        inputs (OpticalInput): Object height, object distance, focal length
        viewport (Viewport): Last known canvas size
        output (OpticalOutput): Last computed image
    """
    kind: MirrorKind = MirrorKind.CONCAVE
    inputs: OpticalInput = field(default_factory=OpticalInput)
    viewport: Viewport = field(default_factory=lambda: Viewport(DEFAULT_WIDTH, DEFAULT_HEIGHT))
    output: Optional[OpticalOutput] = None
    _listeners: List[Listener] = field(default_factory=list, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.output is None:
            self.output = self._compute()

    # -- input feed ---------------------------------------------------------

    def set_object_height(self, value: float) -> None:
        self.inputs.object_height = value
        self.recompute()

    def set_object_distance(self, value: float) -> None:
        self.inputs.object_distance = value
        self.recompute()

    def set_focal_length(self, value: float) -> None:
        self.inputs.focal_length = value
        self.recompute()

    def set_inputs(self, object_height: float, object_distance: float, focal_length: float) -> None:
        """Set all three inputs with a single recompute."""
        self.inputs = OpticalInput(object_height, object_distance, focal_length)
        self.recompute()

    def set_viewport(self, width: float, height: float) -> None:
        self.viewport = Viewport(width, height)
        self.recompute()

    def update(self, width: float, height: float, object_height: float,
               object_distance: float, focal_length: float) -> OpticalOutput:
        """Apply a new canvas size and all three inputs with a single recompute."""
        self.viewport = Viewport(width, height)
        self.inputs = OpticalInput(object_height, object_distance, focal_length)
        return self.recompute()

    # -- output feed --------------------------------------------------------

    def get_image_distance(self) -> float:
        return self.output.image_distance

    def get_image_height(self) -> float:
        return self.output.image_height

    def readout(self) -> dict:
        """Image distance and height as decimal text."""
        return {
            'image_distance': format_readout(self.output.image_distance),
            'image_height': format_readout(self.output.image_height),
        }

    # -- valid ranges for the UI -------------------------------------------

    @property
    def origin_x(self) -> float:
        return self.viewport.origin_x

    @property
    def origin_y(self) -> float:
        return self.viewport.origin_y

    @property
    def max_object_height(self) -> float:
        return self.viewport.origin_y

    @property
    def max_object_distance(self) -> float:
        return self.viewport.origin_x

    @property
    def max_focus(self) -> float:
        return self.viewport.origin_x

    # -- change notification -------------------------------------------------

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Register a callback run after every recompute.

        Returns:
            A function that removes the listener again
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def recompute(self) -> OpticalOutput:
        self.output = self._compute()
        if not self.output.is_finite:
            logger.debug("Image is not finite for %r: %r", self.inputs, self.output)
        for listener in list(self._listeners):
            listener(self)
        return self.output

    def _compute(self) -> OpticalOutput:
        return compute_image(self.kind, self.inputs.object_height,
                             self.inputs.object_distance, self.inputs.focal_length)
