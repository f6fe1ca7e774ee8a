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
Helpers that sit between a UI shell and the mirror state: numeric text
fields, slider ranges and pointer dragging.
"""

import logging
import math
from typing import Optional, Tuple

from .constants import SLIDER_DECIMALS
from .optics import MirrorState

logger = logging.getLogger(__name__)


def truncate(value: float, decimals: int = SLIDER_DECIMALS) -> float:
    """
    Round a slider value to a fixed number of decimals, halves rounding up.
    Non-finite values are returned unchanged.
    """
    factor = 10.0 ** decimals
    scaled = value * factor
    if not math.isfinite(scaled):
        return value
    return math.floor(scaled + 0.5) / factor


def range_to_negative(limit: float) -> Tuple[float, float]:
    """Symmetric closed range [-|limit|, |limit|]."""
    bound = abs(limit)
    return (-bound, bound)


def in_range(value: float, limit: float) -> bool:
    low, high = range_to_negative(limit)
    return low <= value <= high


class FloatFieldState:
    """
    A numeric text field: the raw text the user typed plus the last value
    that parsed.

    Attributes:
        value (float): Last accepted value
        text (str): Text currently shown in the field
    """

    def __init__(self, value: float):
        self.value = value
        self.text = str(value)

    def change_value(self, value: float) -> None:
        """Set the value from a slider or pointer and refresh the text."""
        self.value = value
        self.text = str(value)

    def submit_text(self, text: str, limit: Optional[float] = None) -> bool:
        """
        Handle text typed by the user.

        Blank text means 0. Text that does not parse is kept in the field
        but leaves the value untouched. With a `limit`, values outside
        [-|limit|, |limit|] are rejected too.

        Args:
            text: New field contents
            limit: Optional acceptance bound

        Returns:
            True if `value` changed
        """
        self.text = text
        if not text.strip():
            candidate = 0.0
        else:
            try:
                candidate = float(text)
            except ValueError:
                logger.debug("Ignoring unparsable input %r", text)
                return False

        if limit is not None and not in_range(candidate, limit):
            logger.debug("Ignoring %r outside %r", candidate, range_to_negative(limit))
            return False

        changed = candidate != self.value
        self.value = candidate
        return changed

    def __repr__(self) -> str:
        return f"FloatFieldState(value={self.value}, text={self.text!r})"


def pointer_to_inputs(state: MirrorState, x: float, y: float,
                      primary: bool = False, secondary: bool = False) -> bool:
    """
    Map a pointer event on the canvas to input changes.

    Dragging with the primary button moves the object: its height becomes
    origin_y - y and its distance origin_x - x, so up and left are positive.
    The secondary button sets the focal length to origin_x - x.

    Returns:
        True if any input was changed
    """
    changed = False
    if primary:
        state.inputs.object_height = state.origin_y - y
        state.inputs.object_distance = state.origin_x - x
        changed = True
    if secondary:
        state.inputs.focal_length = state.origin_x - x
        changed = True
    if changed:
        state.recompute()
    return changed
