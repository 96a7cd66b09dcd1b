# maodie

A small top-down arcade shooter built on pygame. You start in the middle of
the arena. Orcs appear at the edges and walk towards you along the dominant
axis. Survive until the 60-second timer bar runs out.

- You start with four lives.
- When an orc touches you, you lose a life. You are put back in the centre,
  every orc is removed and the clock is wound back by five seconds.
- The round ends when the timer runs out or your lives reach zero.
- A single bullet destroys an orc.

## Installing

```
pip install .
```

This also installs `pygame`.

## Playing

```
maodie --assets path/to/assets
```

`--assets` names the directory that holds the game's data files. It defaults
to `assets` in the current directory. The window opens on a title screen with
two buttons. The upper one starts a game and the lower one quits. Closing the
window also quits.

Controls in the game:

| Keys          | Action                  |
|---------------|-------------------------|
| W / A / S / D | Move                    |
| Arrow keys    | Shoot in that direction |

You can move and shoot at the same time. Each shot is followed by a 0.2-second
cooldown. Bullets fly at 300 units per second and vanish when they leave the
256×256 playfield.

## Assets

The asset directory must contain three files:

- `sprite.png` is the sprite sheet. The title art is read from the rectangle
  at (0, 96), size 94×55.
- `sprite.json` is the atlas. It holds:
  - `frames`: named rectangles on the sheet, each with `x`, `y`, `w` and `h`.
  - `composites`: named lists of parts, each with a `frame` and an `offset`
    that has `x` and `y`.
  - `animations`: named lists of frame names. The game uses `player_idle`,
    `player_walk_*`, `player_shoot_*` and `orc_walk`. The UI uses the frames
    `ui_circle`, `ui_item_ground`, `ui_helth`, `ui_money` and `player_bullet`.
- `gamemap.json` holds named maps. The game loads layout `"1"` of map
  `"map_1"`. Each map has `tile_definitions`, which maps tile ids to sprite
  names, and one or more named layouts. A layout is a list of rows of tile ids.

If a file is missing or cannot be read, the game logs a warning and still
starts. Without the sheet, no sprites are drawn. Without the map, the
background is filled with a plain colour.

## Using the pieces in code

The game rules do not depend on any drawing code and can be driven directly:

```python
import random

from maodie.core import Vec2
from maodie.game import GameState, GameViewModel

game = GameViewModel(rng=random.Random(1))
game.start_game()
game.set_player_move_direction(Vec2(1, 0), True)
game.player_attack(Vec2(0, -1))
game.update_game(1 / 60)
assert game.game_state is GameState.PLAYING
```

`GameViewModel` exposes these signals:

- `game_state_changed`
- `player_died`
- `player_lives_changed`
- `player_position_changed`

Each is a `maodie.core.Signal`, and you register a callback on it with
`connect`.

Other building blocks:

- `maodie.enemies.EnemyManager` spawns enemies and steers them. Pass it a
  `random.Random` for reproducible spawns.
- `maodie.collision.CollisionSystem` does circle-based hit checks.
- `maodie.sprites.SpriteManager` loads the atlas.
- `maodie.gamemap.GameMap` loads a tile map. It raises `MapLoadError` when a
  file, map or layout is missing.
- `maodie.animation.Animation` steps through frame names over time.

## What it does not do

- The game has no pause key. `GameViewModel.pause_game` exists, but no input
  calls it.
- There is no game-over or results screen. When a round ends, the game screen
  stays up with play stopped.
- The money counter always shows 5.
- No assets ship with the package. You supply them as described above.

## Running the tests

```
pip install ".[test]"
pytest
```