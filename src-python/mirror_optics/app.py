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
Application state
=================
The state a windowing shell keeps between frames: which mirror tab is
selected, and for each tab the three input fields plus its mirror state.

A shell forwards slider moves, typed text and pointer events here, then
calls frame() with the canvas size to get the draw commands of the
selected tab.
"""

import logging
from enum import Enum
from typing import Dict, List

from .core.constants import (
    DEFAULT_FOCAL_LENGTH,
    DEFAULT_OBJECT_DISTANCE,
    DEFAULT_OBJECT_HEIGHT,
)
from .core.inputs import FloatFieldState, pointer_to_inputs, truncate
from .core.optics import MirrorKind, MirrorState
from .core.scene import DrawCommand, render_frame

logger = logging.getLogger(__name__)


class MirrorTab(Enum):
    """Selectable tabs, with their display titles."""
    CONCAVE = (MirrorKind.CONCAVE, "Cermin Cekung")
    CONVEX = (MirrorKind.CONVEX, "Cermin Cembung")

    def __init__(self, kind: MirrorKind, text: str):
        self.kind = kind
        self.text = text

    @classmethod
    def from_name(cls, name: str) -> 'MirrorTab':
        """
        Raises:
            ValueError: If no tab matches the name
        """
        for tab in cls:
            if name.strip().lower() in (tab.name.lower(), tab.kind.value, tab.text.lower()):
                return tab
        raise ValueError(f"Unknown tab '{name}'")


class AppMirrorState:
    """Inputs and mirror state belonging to one tab."""

    def __init__(self, kind: MirrorKind):
        self.object_height = FloatFieldState(DEFAULT_OBJECT_HEIGHT)
        self.object_distance = FloatFieldState(DEFAULT_OBJECT_DISTANCE)
        self.focus = FloatFieldState(DEFAULT_FOCAL_LENGTH)
        self.mirror = MirrorState(kind)

    def fields(self) -> Dict[str, FloatFieldState]:
        return {
            'object_height': self.object_height,
            'object_distance': self.object_distance,
            'focus': self.focus,
        }

    def limits(self) -> Dict[str, float]:
        """Acceptance bound of each field, taken from the current viewport."""
        return {
            'object_height': self.mirror.max_object_height,
            'object_distance': self.mirror.max_object_distance,
            'focus': self.mirror.max_focus,
        }

    def values(self) -> tuple:
        return self.object_height.value, self.object_distance.value, self.focus.value

    def push_inputs(self) -> None:
        """Copy the field values into the mirror state (one recompute)."""
        self.mirror.set_inputs(*self.values())

    def pull_inputs(self) -> None:
        """Refresh the fields from the mirror state after a pointer drag."""
        inputs = self.mirror.inputs
        self.object_height.change_value(inputs.object_height)
        self.object_distance.change_value(inputs.object_distance)
        self.focus.change_value(inputs.focal_length)


class AppState:
    """
    Both tabs plus the current selection.

    Attributes:
        selected_tab (MirrorTab): Tab whose mirror is shown
        tabs (dict): AppMirrorState per tab
    """

    def __init__(self, selected_tab: MirrorTab = MirrorTab.CONCAVE):
        self.selected_tab = selected_tab
        self.tabs = {tab: AppMirrorState(tab.kind) for tab in MirrorTab}

    @property
    def state(self) -> AppMirrorState:
        return self.tabs[self.selected_tab]

    def select(self, tab: MirrorTab) -> None:
        logger.debug("Selecting tab %s", tab.name)
        self.selected_tab = tab

    def slide(self, field: str, value: float) -> None:
        """Slider moved: truncate to two decimals and apply."""
        self.state.fields()[field].change_value(truncate(value))
        self.state.push_inputs()

    def type_text(self, field: str, text: str) -> bool:
        """
        Text typed into a field; applied only when it parses and lies in
        the field's range.

        Returns:
            True if the value changed
        """
        state = self.state
        changed = state.fields()[field].submit_text(text, limit=state.limits()[field])
        if changed:
            state.push_inputs()
        return changed

    def pointer(self, x: float, y: float, primary: bool = False, secondary: bool = False) -> bool:
        """Pointer event on the canvas."""
        changed = pointer_to_inputs(self.state.mirror, x, y, primary, secondary)
        if changed:
            self.state.pull_inputs()
        return changed

    def frame(self, width: float, height: float) -> List[DrawCommand]:
        """
        Recompute and redraw the selected tab for a canvas of the given size.

        Returns:
            Ordered draw commands
        """
        state = self.state
        mirror = state.mirror
        mirror.update(width, height, *state.values())
        return render_frame(mirror)

    def readout(self) -> Dict[str, str]:
        return self.state.mirror.readout()
