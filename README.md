# hexmaze

A small maze-chasing arcade game built on pygame. You steer a hexagon
through a 40 × 20 tile maze, eating every pellet while three ghosts wander
the corridors at random. Eat them all and you win; land on a ghost and the
round is over.

## Installing

```
pip install .
```

The game loads its textures and font from an `assets/` directory relative
to the working directory:

```
assets/fonts/Pacifico-Regular.ttf
assets/textures/black_square.png
assets/textures/food.png
assets/textures/wall.png
assets/textures/hexagon-16.png
assets/textures/blue_hexagon.png
assets/textures/purple_hexagon.png
assets/textures/red_hexagon.png
```

These files are not part of the package. A file that cannot be loaded is
skipped when it is added, and the screen that then asks for it fails with
`KeyError`.

## Playing

Run this from the directory that holds `assets/`:

```
hexmaze
```

`python -m hexmaze.game` does the same. The window is 640 × 320, titled
"Pac Man", and runs at 60 frames per second.

- **Main menu**: Up and Down choose between *Play* and *Exit*; Enter
  confirms. *Play* starts a round, *Exit* closes the window.
- **In the maze**: the arrow keys set your direction. Every quarter second
  you move one tile that way; running into a wall stops you until you
  turn. Each ghost picks a random direction every step, never reversing
  straight back, and bounces off walls. Escape pauses.
- **Paused**: the title is drawn over the frozen maze; Escape resumes.
- **Round over**: "You Won!" when every pellet is eaten, "Game Over!" when
  you land on a ghost. Up and Down choose between *Retry* and *Exit*;
  Enter confirms.

## Using it as a library

```python
from hexmaze.game import Game

Game().run()
```

The pieces:

- `hexmaze.state.State` – the base class of a screen, with `init`,
  `process_input`, `update(delta)`, `draw`, `pause` and `start`.
- `hexmaze.state.StateManager` – a stack of screens. `add(state,
  replace=False)` and `pop_current()` only schedule a change;
  `process_state_change()` applies it between frames, and
  `current_state()` returns the top screen (`IndexError` when empty).
- `hexmaze.assets.AssetManager` – textures and fonts by numeric id, via
  `add_texture`, `add_font`, `texture` and `font`.
- `hexmaze.context.Context` – the `assets`, `states` and `window` that every
  screen shares; `hexmaze.context.AssetID` numbers the assets and
  `hexmaze.context.Window` wraps the pygame display.
- `hexmaze.actor.Actor` – the player or a ghost: an image at a position,
  with `move`, `draw` and `is_on`.
- The screens `hexmaze.main_menu.MainMenu`, `hexmaze.gameplay.GamePlay`,
  `hexmaze.pause.PauseGame` and `hexmaze.game_over.GameOver`. Each has a
  `handle_key(key)` method taking a pygame key code, so a screen can be
  driven without reading window events. `GamePlay` also accepts an `rng`
  (a `random.Random`) to make the ghosts' moves repeatable.

## What it does not do

There is no score, no lives counter and no high-score storage, no sound,
and the ghosts do not chase the player: they only wander at random.

## Running the tests

```
pip install .[test]
pytest
```