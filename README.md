# cosmicdodger

The building blocks of a small 2D arcade game written with pygame. A ship
turns towards the mouse cursor and thrusts while **W** is held; meteors are
sent at it from just outside a 1280×720 window; floating stars can be picked
up for points; and every 20 points raise the difficulty, so meteors spawn
more often and fly faster.

## Installing

```
pip install .
```

pygame is the only dependency.

## What is in the package

The package is organised as a small entity/component engine plus the game's
entities built on top of it.

Engine:

- `cosmicdodger.vector`: the immutable `Vector2` (`length`, `dot`,
  `angle_to`, `normalized`, `rotated_by`, arithmetic) and the helpers
  `random_range`, `is_nearly_equal`, `radians_to_degrees`,
  `degrees_to_radians`, `direction_from_angle`, `angle_from_direction` and
  `lerp`.
- `cosmicdodger.transform`: `Transform` (position, rotation in degrees,
  scale). Transforms add together and can be copied.
- `cosmicdodger.color`: `Color` with the presets `black`, `red`, `green`,
  `blue` and `aqua`.
- `cosmicdodger.entity`: `BaseEntity`, `Component` and `GameObject`, which
  owns its components and updates and draws them.
- `cosmicdodger.movement`: `MovementComponent`, moving its parent along a
  velocity at a speed clamped to `max_speed`.
- `cosmicdodger.collision`: `CollisionComponent`, `Collider2D` and `HitInfo`.
  Colliders follow their parent, listen for other colliders (or all colliders
  of a game object) and call a delegate when they overlap.
- `cosmicdodger.animation`: `Animation` and `AnimationComponent`, swapping a
  game object's texture frame by frame.
- `cosmicdodger.world`: `World`, which holds the live entities, names them on
  `spawn_entity`, queues them with `destroy_entity`, removes them with
  `flush_destroyed`, and holds the frame's input given to `begin_frame`.
- `cosmicdodger.resources`: `ResourceManager`, `TextureResource` and
  `AnimationFrames`. By default the manager loads every image, sound, the
  font and the cursor from an `assets/` directory; `load_assets=False` skips
  that. A missing asset raises `ResourceError`.
- `cosmicdodger.sound`: `Sound` and `AudioChannel`.
- `cosmicdodger.window`: `Window`, which opens the display and clears it to
  the background each frame.

User interface:

- `cosmicdodger.ui`: `UIElement`, `UITextureRect`, `UIStaticText`, `UIButton`
  and `UIProgressTextures` (with `GrowDirection`).
- `cosmicdodger.hud`: `HUD` (lives, ammo, score, high score, level) and the
  `DeathMenu` with its **TRY AGAIN** button; `HudState` switches between them.

Game:

- `cosmicdodger.game_state`: `GameState` — three lives, score, high score and
  difficulty level; a game over pauses play, resets the spawners and the
  player, and shows the death menu.
- `cosmicdodger.player`: `Player`, `PlayerInputComponent` (left mouse button
  to fire, **W** to thrust) and `ShootingComponent` (20 rounds, one refilled
  every two seconds, 0.15 s between shots).
- `cosmicdodger.meteor`, `cosmicdodger.projectile`, `cosmicdodger.pickup`:
  meteors that break apart when hit, shots that bounce off the window edge
  once, and stars worth one point.
- `cosmicdodger.window_bounds`: `WindowBounds`, four colliders named `LEFT`,
  `RIGHT`, `UP` and `DOWN` along the window edges.
- `cosmicdodger.spawners`: `MeteorSpawner` and `PickupSpawner`.

## What the package does not do

There is no command and no main loop: nothing here opens the window, polls
pygame events, feeds them to a `World`, and updates and draws the entities
each frame. To play, that loop has to be written on top of these pieces.

## Running the tests

```
pip install .[test]
pytest
```