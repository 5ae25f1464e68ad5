# mazechase

A small arcade maze-chase game built on pygame. You steer the runner around a
21 × 21 maze, eating green food pellets while three ghosts hunt you down.

## Installing

```
pip install .
```

## Playing

```
mazechase
mazechase --assets path/to/assets
```

`--assets` names the directory that holds the images and the font; it
defaults to the current directory.

The game opens on a start screen; click its centre to begin.

- **Arrow keys** steer. A turn takes effect only when the way is open; until
  then you keep moving in your current direction.
- **Food** (green dots) is worth 50 points. Eat every piece of food to win.
- **Poison** costs 20 points. If your score drops below zero, you lose.
- **Ghosts**: touching one costs a life and sends you back to the start. You
  begin with three hearts; touching a ghost with none left in reserve ends the
  game.
- The row through the middle of the maze wraps around from one side to the
  other.

Each ghost chases in its own way: the first heads straight for you, the second
aims at a point four cells away from you and the third at a point two cells
away, both chosen by the direction you are heading.

When you win or lose, the end screen shows your score. Click the restart
button to reset the score and lives and return to the start screen.

## Assets

The game looks for these files in the asset directory:

- `new_start.jpg`, `win_screen.jpg`, `lose_screen.jpg` – the start, win and
  lose screens
- `scroll_sprite.png` – the runner
- `mikaal_sprite.png`, `adeenah_sprite.png`, `afeera_sprite.png` – the ghosts
- `poison_sprite.png` – poison
- `heart_1.png` – a life
- `ka1.ttf` – the score font

A missing screen image is reported on standard error and the game closes.
Missing sprites are replaced by coloured squares, missing poison art by red
dots, and a missing font by pygame's default font.

## Using the pieces

The game logic can be driven without a window:

```python
from mazechase.character import Direction, Outcome
from mazechase.game import Game

game = Game(asset_dir="assets")
outcome = game.step(pressed={Direction.RIGHT})
if outcome is Outcome.WON:
    ...
```

`Game.new_round()` lays out fresh food, poison and ghosts;
`Game.step(pressed)` moves the ghosts and then the runner by one frame and
returns an `Outcome` (`CONTINUE`, `LOST` or `WON`).

The parts can also be used on their own:

- `mazechase.maze.Maze` – the grid, with `cell`, `is_wall`, `populate` and
  `draw`.
- `mazechase.food.Health` and `mazechase.food.Poison` – item locations, with
  `add`, `remove` (raises `KeyError` for an empty cell), `in`, `len`,
  iteration and `is_empty`.
- `mazechase.character.Pacman` and `mazechase.character.Ghost` – movement,
  wall collisions, scoring and lives.

`Pacman.increase_lives()` adds a life up to a maximum of three; nothing in the
game itself calls it.

## Running the tests

```
pip install .[test]
pytest
```