"""Where frames go and where keys come from."""
from abc import ABC, abstractmethod
from collections import deque
from typing import Iterable

from gazool.console.keys import NO_KEY
from gazool.console.model import Console


class BaseView(ABC):
    """Abstract base class for a terminal: a key source plus a frame sink."""

    @abstractmethod
    def poll_key(self) -> int:
        """
        Read the next pending key without blocking.

        Returns:
            ASCII code, one of the arrow codes in `gazool.console.keys`,
            or NO_KEY when nothing is pending
        """
        pass

    @abstractmethod
    def present(self, console: Console) -> None:
        """Copy a finished frame to the screen."""
        pass


class ScriptedView(BaseView):
    """Headless view that replays queued keys and keeps presented frames."""

    def __init__(self, keys: Iterable[int | str] = (), keep_frames: bool = True):
        self.keys: deque[int] = deque()
        self.keep_frames = keep_frames
        self.frames: list[str] = []
        self.frame_count = 0
        self.push(*keys)

    def push(self, *keys: int | str) -> None:
        """Queue keys; strings are queued one character at a time."""
        for key in keys:
            if isinstance(key, str):
                self.keys.extend(ord(ch) for ch in key)
            else:
                self.keys.append(key)

    def poll_key(self) -> int:
        if self.keys:
            return self.keys.popleft()
        return NO_KEY

    def present(self, console: Console) -> None:
        self.frame_count += 1
        if self.keep_frames:
            self.frames.append(console.to_text())

    @property
    def last_frame(self) -> str | None:
        return self.frames[-1] if self.frames else None
