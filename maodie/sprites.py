"""Sprite-sheet atlas: named rectangles, composite sprites and animations."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from typing import Any, Dict, List, Tuple, Union

from maodie.core import Vec2


@dataclass(frozen=True)
class Rect:
    x: int = 0
    y: int = 0
    w: int = 0
    h: int = 0

    @property
    def size(self) -> Tuple[int, int]:
        return (self.w, self.h)

    def is_null(self) -> bool:
        """True when both width and height are zero."""
        return self.w == 0 and self.h == 0


@dataclass(frozen=True)
class SpritePart:
    frame_name: str
    offset: Vec2


def _to_int(value: Any) -> int:
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return 0


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_list(value: Any) -> List[Any]:
    return value if isinstance(value, list) else []


class SpriteManager:
    """Lookup of sprite rectangles, composites and animation sequences."""

    def __init__(self) -> None:
        self._rects: Dict[str, Rect] = {}
        self._composites: Dict[str, List[SpritePart]] = {}
        self._root: Dict[str, Any] = {}

    def load_from_file(self, path: Union[str, os.PathLike]) -> None:
        """Load an atlas description from a JSON file; OSError and JSON errors propagate."""
        with open(path, encoding="utf-8") as handle:
            data = json.load(handle)
        self.load_from_dict(data)

    def load_from_dict(self, data: Any) -> None:
        root = _as_dict(data)
        self._root = root

        self._rects = {
            name: Rect(
                _to_int(frame.get("x")),
                _to_int(frame.get("y")),
                _to_int(frame.get("w")),
                _to_int(frame.get("h")),
            )
            for name, frame in ((k, _as_dict(v)) for k, v in _as_dict(root.get("frames")).items())
        }

        self._composites = {}
        for name, parts in _as_dict(root.get("composites")).items():
            built = []
            for part in _as_list(parts):
                part = _as_dict(part)
                frame = part.get("frame")
                offset = _as_dict(part.get("offset"))
                built.append(
                    SpritePart(
                        frame_name=frame if isinstance(frame, str) else "",
                        offset=Vec2(_to_int(offset.get("x")), _to_int(offset.get("y"))),
                    )
                )
            self._composites[name] = built

    def sprite_rect(self, name: str) -> Rect:
        """Rectangle of a frame, or a null Rect when unknown."""
        return self._rects.get(name, Rect())

    def composite_parts(self, composite_name: str) -> List[SpritePart]:
        return list(self._composites.get(composite_name, []))

    def animation_sequence(self, animation_name: str) -> List[str]:
        animations = _as_dict(self._root.get("animations"))
        return [name if isinstance(name, str) else "" for name in _as_list(animations.get(animation_name))]