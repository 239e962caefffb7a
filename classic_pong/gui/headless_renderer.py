"""
Renderer that records frames instead of drawing them
"""

from typing import Any

from classic_pong.core.entities import GameSnapshot


class HeadlessRenderer:
    """Keeps the snapshots it receives, never opens a window"""

    def __init__(self, max_frames: int | None = None):
        self.max_frames = max_frames
        self.frames: list[GameSnapshot] = []
        self.pending_events: list[Any] = []
        self.quit_requested = False
        self.active = True

    def render_frame(self, snapshot: GameSnapshot) -> None:
        self.frames.append(snapshot)
        if self.max_frames is not None and len(self.frames) > self.max_frames:
            del self.frames[0]

    def push_event(self, event: Any) -> None:
        """Queue a key event, delivered by the next handle_events call"""
        self.pending_events.append(event)

    def request_quit(self) -> None:
        self.quit_requested = True

    def handle_events(self) -> dict[str, Any]:
        events, self.pending_events = self.pending_events, []
        if self.quit_requested:
            self.active = False
        return {"quit": self.quit_requested, "key_events": events}

    def is_active(self) -> bool:
        return self.active

    def cleanup(self) -> None:
        self.active = False

    @property
    def last_frame(self) -> GameSnapshot | None:
        return self.frames[-1] if self.frames else None
