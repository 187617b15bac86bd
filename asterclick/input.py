"""Per-frame input buffer.

Events arrive whenever the window delivers them; the game only looks at them
once per frame. Between two frames the latest click wins and the boolean
intents accumulate, then ``reset_frame`` clears everything.
"""

from __future__ import annotations


class FrameInput:
    """Coalesced input for one frame: at most one click plus pause/quit intents."""

    def __init__(self) -> None:
        self.reset_frame()

    def reset_frame(self) -> None:
        self.click: tuple[float, float] | None = None
        self.toggle_pause = False
        self.quit = False

    def push_click(self, x: float, y: float) -> None:
        self.click = (x, y)

    def request_pause_toggle(self) -> None:
        self.toggle_pause = True

    def request_quit(self) -> None:
        self.quit = True
