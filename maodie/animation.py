"""Frame-sequence animation driven by elapsed time."""

from __future__ import annotations

from typing import Iterable


class Animation:
    """Steps through frame names at a fixed rate."""

    def __init__(self, frame_names: Iterable[str], frame_rate: float = 10.0, loops: bool = True) -> None:
        self._frames = list(frame_names)
        self._loops = loops
        self._frame_duration = 1.0 / frame_rate if frame_rate > 0.0 else 0.0
        self._elapsed = 0.0
        self._index = 0

    @property
    def frame_names(self) -> list:
        return list(self._frames)

    @property
    def loops(self) -> bool:
        return self._loops

    def update(self, delta_time: float) -> None:
        """Advance at most one frame."""
        if self._frame_duration == 0.0 or not self._frames:
            return
        self._elapsed += delta_time
        if self._elapsed >= self._frame_duration:
            self._elapsed -= self._frame_duration
            self._index += 1
            if self._index >= len(self._frames):
                self._index = 0 if self._loops else len(self._frames) - 1

    def current_frame_name(self) -> str:
        """Name of the frame on show; raises IndexError for an empty animation."""
        return self._frames[self._index]

    def reset(self) -> None:
        self._index = 0
        self._elapsed = 0.0