# greencube

A small third-person walk across a field of blocks. A deterministic noise
height map sets the height of each block. The sun circles overhead. When
culling is on, blocks that lie outside the view frustum are skipped.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Playing

```
greencube
```

This opens a resizable window titled "Green Cube", 800×600 by default.

Options:

| Option | Meaning |
|--------|---------|
| `--texture PATH` | image that sets the block colour (the colour at the centre of the image is used) |
| `--width N`, `--height N` | initial window size (default 800 × 600) |
| `--grid-size N` | blocks on each side of the origin (default 100) |
| `--no-cull` | also draw blocks outside the view frustum |

If the texture cannot be loaded, the error is printed to standard error and
the game runs with its default green block colour.

| Input | Action |
|-------|--------|
| `W` / Up arrow | move forward |
| `S` / Down arrow | move backward |
| `A` / Left arrow | strafe left |
| `D` / Right arrow | strafe right |
| `Q` / `E` | turn |
| Space | jump (only while standing on the ground) |
| Mouse | look around while the cursor is inside the window; pitch is clamped to ±0.506 rad |

The game aims for 60 frames per second. Gravity (−9.8) pulls the player back
down to the ground height after a jump.

## Using the pieces

The geometry and simulation modules work without a window:

- `greencube.transform`: `Position` (with `moved` and `rotated`), `Transform` (with `scaled`), and `Sphere` and `Rectangle3D`, both with `contains`. `Rectangle3D` also has `vertices`.
- `greencube.camera`: `perspective`, `look_at`, `multiply`, `transform_point` and `camera_eye`, which work on column-major 4×4 matrices stored as 16-tuples.
- `greencube.frustum`: `Plane` and `Frustum`. `Frustum.from_matrices` extracts six normalised planes, and `contains_sphere` and `contains_rectangle` test shapes against them. A `Frustum()` with no planes contains everything.
- `greencube.terrain`: `perlin_noise`, `HeightMap.generate` / `HeightMap.height`, `World.blocks` / `World.visible_blocks`, and the `Face` lists from `box_faces`, `sky_faces` and `player_cube_faces`.
- `greencube.sun`: `sun_sphere` places the sun for an angle, and `advance_angle` steps the angle, wrapping to zero at 360.
- `greencube.lighting`: `Light`, `Material`, `LightingSetup`, and `default_lighting`. `shade` lights a colour with ambient and diffuse terms only.
- `greencube.texture`: `load_texture` reads an image into a `Texture` (RGB, or RGBA if the image has transparency). `Texture.sample` gives a bilinearly filtered, repeating sample. It raises `TextureError` if the file cannot be read.
- `greencube.player`: `Key` names the player actions. `Player` provides `update_physics` and `handle_input`. `MouseLook.update` turns cursor movement into yaw and pitch.
- `greencube.app`: `Game` ties these together. It provides `step`, `view_matrix`, `resize`, `draw_list` and `render`, which draws onto a pygame surface. `main` is the command.

```python
from greencube.app import Game
from greencube.terrain import HeightMap, World

game = Game(world=World(HeightMap.generate(2)))
game.step(1 / 60, set())
print(len(game.draw_list()))  # 5 sky walls, the sun, 25 blocks × 6 faces
```

## What it does not do

`Game.render` is a simple software renderer. It draws flat-shaded polygons in
back-to-front order with pygame, so there is no depth buffer and no
per-pixel texture mapping. A texture only sets the single colour used for the
blocks. Faces with a corner behind the camera are dropped whole rather than
clipped. Shading has no specular highlights. The player cube from
`player_cube_faces` is not part of the frame's draw list.