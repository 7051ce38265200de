# tankduel

tankduel is a two-player artillery game played on one keyboard. Two tanks
sit on rolling terrain built from layered sine waves. Each player aims a
cannon and fires shells that follow a ballistic arc.

- A shell that lands carves a round crater into the ground.
- A hit takes a random amount of health from the tank it strikes.
- A careless shot can damage the tank that fired it.
- Between shots the terrain gradually smooths itself out.

When a tank's health drops to zero, the game prints a victory line for the
other player and stops drawing the beaten tank. The window stays open until
you close it.

## Installing

```
pip install .
```

This also installs `numpy` and `pygame`.

## Playing

```
tankduel
```

The game opens a 1280×720 window and runs at up to 60 frames per second.

| Action             | Player 1  | Player 2    |
|--------------------|-----------|-------------|
| Drive left / right | `A` / `D` | `←` / `→`   |
| Raise / lower gun  | `W` / `S` | `↑` / `↓`   |
| Fire               | `Space`   | `Enter`     |

Each tank shows a dotted line along the path its next shell would take.
After firing, a tank must wait for its cooldown to finish before it can fire
again.

Other keys:

- `F3` shows or hides the tanks' hit boxes.
- `Esc` closes the game.
- Typing `O` `B` `A` `M` `A` in sequence starts a drone strike. For a few
  frames, shells fall straight down from the top of the screen at random
  positions.

## Using it as a library

The game logic does not depend on a window, so your own code can drive it
directly.

- `tankduel.transform2d` provides 3×3 homogeneous 2D matrices as numpy
  arrays: `identity`, `translate`, `scale`, `rotate`, `shear`, and `apply`,
  which transforms a point.
- `tankduel.ammo.Ammo` is a single shell. Call `update_position(dt)` to
  advance its parabolic flight; `model_matrix()` gives its sprite placement.
- `tankduel.tank` provides `Terrain` (a list of height samples) and `Tank`:
  - `tank_y` and `tank_angle` place a tank on the ground.
  - The `*_matrix` methods give the model matrices of its parts.
  - `shoot_ammo` fires a shell.
  - `update_ammo_pos` moves shells and resolves hits on tanks and terrain.
  - `pred_x`, `pred_y` and `pred_matrix` compute the trajectory preview.
- `tankduel.meshgen` provides `MeshGenerator`, which builds `Mesh` objects
  (vertices and indices) for every shape the game draws. `create_all()`
  builds all of them into a dictionary keyed by name.
- `tankduel.window` provides:
  - `InputState`, which buffers key, mouse, scroll and resize events and
    hands them to subscribed controllers when you call
    `update_observers(dt)`.
  - `InputController`, the base class with the `on_*` callbacks.
  - `WindowProperties`, which holds the window settings.
  - Key codes such as `KEY_SPACE` and `KEY_ESCAPE`.
- `tankduel.world.World` is the frame loop:
  - `loop_update()` runs one frame: events, input dispatch, `frame_start`,
    `update`, `frame_end`.
  - `run()` repeats frames until the window is asked to close.
  - Pressing Escape calls `exit()`.
- `tankduel.game.Game` is the whole match:
  - `init()` generates the terrain and places the tanks.
  - `update(dt)` advances one frame.
  - `on_key_press` handles firing and toggles.
  - `draw_list()` returns the frame's sprites as `DrawCommand(mesh, matrix)`
    pairs.
- `tankduel.colors`, `tankduel.vertex`, `tankduel.mathutils` and
  `tankduel.textutils` hold the palette, vertex layouts, and small numeric
  and string helpers.
- `tankduel.app.main` is the `tankduel` command. It draws each sprite as a
  flat filled pygame polygon.

## What it does not do

- There is no 3D rendering, no shaders, no lighting and no textures. Each
  shape is drawn as a single-colour polygon.
- There is no free-flying camera.
- The game does not load model, image or font files.
- No text is drawn in the window. Hit and victory messages go to the
  console.

## Running the tests

```
pip install .[test]
pytest
```