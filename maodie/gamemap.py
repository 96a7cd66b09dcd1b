"""Tile map loaded from a JSON description."""

from __future__ import annotations

import json
import logging
import os
from typing import Any, Dict, List, Union

logger = logging.getLogger(__name__)


class MapLoadError(Exception):
    """Raised when a map file cannot be read or lacks the requested map or layout."""


def _to_int(value: Any) -> int:
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return 0


def _key_to_int(key: str) -> int:
    try:
        return int(key.strip())
    except ValueError:
        return 0


class GameMap:
    """A grid of tile ids with a legend mapping ids to sprite names."""

    def __init__(self) -> None:
        self._tiles: List[List[int]] = []
        self._legend: Dict[int, str] = {}
        self.width = 16
        self.height = 16

    def load_from_file(self, path: Union[str, os.PathLike], map_name: str, layout_name: str) -> None:
        try:
            with open(path, "rb") as handle:
                raw = handle.read()
        except OSError as exc:
            raise MapLoadError(f"cannot open map file {path}") from exc
        try:
            root = json.loads(raw)
        except (ValueError, UnicodeDecodeError) as exc:
            raise MapLoadError(f"cannot parse map file {path}: {exc}") from exc

        map_object = root.get(map_name) if isinstance(root, dict) else None
        if not isinstance(map_object, dict) or not map_object:
            raise MapLoadError(f"no map named {map_name!r}")

        legend = map_object.get("tile_definitions")
        self._legend = {
            _key_to_int(key): value if isinstance(value, str) else ""
            for key, value in (legend.items() if isinstance(legend, dict) else ())
        }

        self._tiles = []
        self.width = 0
        self.height = 0
        layout = map_object.get(layout_name)
        if not isinstance(layout, list) or not layout:
            raise MapLoadError(f"map {map_name!r} has no layout {layout_name!r}, or it is empty")

        self.height = len(layout)
        for row_value in layout:
            row = row_value if isinstance(row_value, list) else []
            if self.width == 0:
                self.width = len(row)
            self._tiles.append([_to_int(tile) for tile in row])

        logger.debug("map %s layout %s loaded: %dx%d", map_name, layout_name, self.width, self.height)

    def tile_id_at(self, row: int, col: int) -> int:
        """Tile id at the cell, 0 outside the map."""
        if not (0 <= row < self.height and 0 <= col < self.width):
            return 0
        tiles = self._tiles[row] if row < len(self._tiles) else []
        return tiles[col] if col < len(tiles) else 0

    def tile_sprite_name(self, tile_id: int) -> str:
        return self._legend.get(tile_id, "empty")