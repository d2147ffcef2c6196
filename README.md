# yukifight

The parts of a small top-down snowman action game, built on pygame. The
package has a player snowman that moves, dashes, shoots and swings a blade.
It has enemy snowmen that creep toward a target and a boss that searches,
chases, sprays bullets and fires lasers. It also has a scrolling stage, a
tile map, explosions, a screen fade, scenes, and a command that opens the
game window.

## Installation

```
pip install .
```

To run the tests, install the `test` extra:

```
pip install ".[test]"
pytest
```

## The command

```
yukifight [--assets DIR] [--frames N]
```

- `--assets DIR`: the directory that holds the asset files. The default is the current directory.
- `--frames N`: stop after N frames. Without it the window runs until it is closed.

The command opens a 1024×576 window and starts on the title scene. `Space`,
or button `C` on a game pad, fades out and switches scenes. `Esc` or
closing the window quits. The command returns -1 if the window cannot be
opened.

Textures are loaded from under the assets directory:

- `asset/texture/yukidaruma.tga` for the snowman sheet
- `data/TEXTURE/kokosozai.png` for the tile map
- `asset/texture/<name>.png` for every other `TextureIndex` member, where `<name>` is the member name in lower case, for example `asset/texture/title.png`

A texture that cannot be loaded is not drawn. `TextureStore.load` returns
the number of textures that failed.

## What the window does not do

The window covers only the scene flow: title, fade, then the game scene.
The game scene draws nothing. It does not create the player, enemies,
boss, projectiles, stage or tile map, and nothing in it reaches the
stage-clear phase, so play never moves on to the result screen. The
window plays no sound. Those pieces are in the package, but you have to
put them together in your own loop.

## Using the pieces

No module except `app` opens a window. Everything that draws takes a
`renderer` argument, which is a `yukifight.sprite.SpriteRenderer` or any
object with the same `draw` method (and `fill` for the fade).

- `yukifight.geometry`: `Vec2` (with `length`, `normalized`, `dot` and arithmetic), `Circle`, `Capsule`, `hit_circle`, `hit_capsule`
- `yukifight.fade`: `Fade`, with `start(fade_out, frames, color)`, `update`, `is_fading` and `draw`
- `yukifight.texture`: `TextureIndex`, `TextureInfo`, `texture_info` and `TextureStore`
- `yukifight.sprite`: `quad_corners` and `SpriteRenderer` (`set_color`, `draw`, `fill`)
- `yukifight.explosion`: `ExplosionPool`, a 128-slot pool that plays a 4×4 sprite sheet
- `yukifight.tables`: `anim_frame(muki, anim)` for snowman animation frames, and `TileMap`, a walled 32×18 room (`tile_at`, `set_tile_type`)
- `yukifight.score`: `score_digits` and `digit_positions` for fixed-width numbers, and `draw_score`
- `yukifight.projectiles`: `ProjectilePool`, `BladePool`, and the factories `make_bullets`, `make_blade`, `make_enemy_bullets` and `make_boss_bullets`
- `yukifight.lasers`: `LaserPool` with capsule hit areas, and `make_enemy_lasers` and `make_boss_lasers`
- `yukifight.controls`: `Keyboard` and `GamePad`, which report press, trigger and release; also `Button` and `PadReading`
- `yukifight.player`: `Player`, which is driven by a `Keyboard` and a `GamePad`
- `yukifight.enemy`: `EnemyGroup`, three enemies that chase a target horizontally
- `yukifight.boss`: `Boss`, its `BossState` states, and `facing_from_direction`
- `yukifight.stage`: `Stage`, two background fields that scroll until the goal field stops them
- `yukifight.scenes`: `SceneManager` and the title, game, result, game-over and game-clear scenes
- `yukifight.sound`: `read_wave`, `find_chunk`, `WaveData`, and `SoundPlayer`, which loads every `SoundLabel` from `asset/BGM/` and `asset/SE/` and raises if a file is missing or is not a wave file
- `yukifight.app`: `Game`, one frame of input, scenes and fade on a surface, and `main`

`Player` reads these controls:

| Action | Keyboard              | Game pad              |
|--------|-----------------------|-----------------------|
| Move   | Arrow keys            | Stick                 |
| Dash   | Hold `A` while moving | Hold `Y` while moving |
| Shoot  | `Z`                   | `Y` + `A`             |
| Blade  | `X`                   | `Y` + `B`             |

Example:

```python
from yukifight.geometry import Circle, hit_circle
from yukifight.score import score_digits

hit_circle(Circle(0, 0, 10), Circle(15, 0, 10))  # True
score_digits(12345, 3)                           # [9, 9, 9]
```