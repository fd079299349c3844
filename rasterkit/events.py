"""Interactive command handling for mouse and keyboard input."""

from __future__ import annotations

import enum
from typing import Callable, List, Optional, Tuple

from .geometry import Point

KEY_ESCAPE = 256
MOUSE_BUTTON_LEFT = 0
MOUSE_BUTTON_RIGHT = 1


class EventType(enum.IntEnum):
    """Kind of interactive command."""

    EVENT_NONE = 0
    DRAW_2D_POINT = 1
    DRAW_2D_STROKE = 2
    DRAW_2D_SEED_FILL = 3
    DRAW_2D_LINE_SEG = 10
    DRAW_2D_LINE_LEN = 11
    DRAW_2D_LINE_X = 12
    DRAW_2D_LINE_RAY = 13
    DRAW_2D_LINE_STRIP = 14
    DRAW_2D_LINE_LOOP = 15
    DRAW_2D_POLYGON = 20
    DRAW_2D_POLYGON_NC = 21
    DRAW_2D_POLYGON_NR = 22
    DRAW_2D_RECTANGLE = 23
    DRAW_2D_SQUARE = 24
    DRAW_2D_DIAMOND = 25
    DRAW_2D_TRIANGLE = 26
    SCANLINE = 27
    EVENT_UNKNOWN = 2000


class Action(enum.IntEnum):
    """State change of a key or mouse button."""

    RELEASE = 0
    PRESS = 1
    REPEAT = 2


class EventHandler:
    """Base interactive command that records the input it receives."""

    event_type: EventType = EventType.EVENT_NONE

    def __init__(self) -> None:
        self.step = 0
        self.cancelled = False
        self.last_key: Optional[Tuple[int, int, int]] = None
        self.cursor: Optional[Tuple[float, float]] = None
        self.scroll_offset: Tuple[float, float] = (0.0, 0.0)

    def cancel(self) -> None:
        """Abort the command and reset its step counter."""
        self.cancelled = True
        self.step = 0

    def on_key(self, key: int, action: int, mods: int) -> None:
        """Remember the most recent key event."""
        self.last_key = (key, action, mods)

    def on_mouse_button(
        self,
        button: int,
        action: int,
        mods: int,
        position: Tuple[float, float],
        height: int,
    ) -> None:
        """Handle a mouse button event at window ``position`` in a window ``height`` tall."""

    def on_cursor_pos(self, x: float, y: float) -> None:
        """Remember the latest cursor position."""
        self.cursor = (x, y)

    def on_scroll(self, xoffset: float, yoffset: float) -> None:
        """Accumulate mouse wheel movement."""
        sx, sy = self.scroll_offset
        self.scroll_offset = (sx + xoffset, sy + yoffset)


class ScanlineCommand(EventHandler):
    """Collects polygon vertices from left clicks for scan-line filling."""

    event_type = EventType.SCANLINE

    def __init__(self, marker: Optional[Callable[[Point], None]] = None) -> None:
        super().__init__()
        self.vertices: List[Point] = []
        self._marker = marker

    def on_mouse_button(
        self,
        button: int,
        action: int,
        mods: int,
        position: Tuple[float, float],
        height: int,
    ) -> Optional[Point]:
        """Record a vertex on left press, flipping y to a bottom-left origin."""
        if button != MOUSE_BUTTON_LEFT or action != Action.PRESS:
            return None
        x, y = position
        point = Point(int(x), int(height - y))
        self.vertices.append(point)
        if self._marker is not None:
            self._marker(point)
        return point


class CommandDispatcher:
    """Routes input events to the single active command."""

    def __init__(self) -> None:
        self.current: Optional[EventHandler] = None

    def set_command(self, command: Optional[EventHandler]) -> None:
        """Make ``command`` the active command."""
        self.current = command

    def clear(self) -> None:
        """Drop the active command."""
        self.current = None

    def key_event(self, key: int, action: int, mods: int) -> None:
        """Escape cancels the active command; other keys are forwarded."""
        if action == Action.PRESS and key == KEY_ESCAPE and self.current is not None:
            self.current.cancel()
            self.clear()
        if self.current is not None:
            self.current.on_key(key, action, mods)

    def mouse_button(
        self,
        button: int,
        action: int,
        mods: int,
        position: Tuple[float, float],
        height: int,
    ) -> None:
        """Forward a mouse button event to the active command."""
        if self.current is not None:
            self.current.on_mouse_button(button, action, mods, position, height)

    def cursor_pos(self, x: float, y: float) -> None:
        """Forward cursor movement to the active command."""
        if self.current is not None:
            self.current.on_cursor_pos(x, y)

    def scroll(self, xoffset: float, yoffset: float) -> None:
        """Forward mouse wheel movement to the active command."""
        if self.current is not None:
            self.current.on_scroll(xoffset, yoffset)