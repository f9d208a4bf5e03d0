# minigames

A window with a menu of small arcade games:

- **Snake**: steer with `W`, `A`, `S`, `D` and eat the food. The snake grows when it eats and dies when it runs into itself or off the board.
- **Pong**: two players. The left paddle moves with `W`/`S`, the right paddle with the `Up`/`Down` arrow keys. The score is shown at the top.
- **Asteroid**: a ship that turns with `A`/`D` or the left and right arrows, moves with `W`/`S`, wraps around the window edges and fires bullets with `Space` (one per frame while held).
- **Tic-tac-toe**: choose X or O to start, after which the board is shown.

In the menu, click a game's icon to start it. Press `Escape` in any game to go back to the menu.

## Installing

```
pip install .
```

The games use `pygame` to open the window and to draw.

## Running

```
minigames
```

The command takes no options apart from `--help`. It opens a 1280x720 window titled "Minigames".

Run it from a directory that has a `res/` folder. Images and the font are loaded from there:

- `res/icons/` (menu icons, `turnO.png`, `turnX.png`, `window-icon.png`)
- `res/img/arrow.png` (the asteroid ship)
- `res/fonts/default.ttf`

Missing files do not stop the program: an image that cannot be loaded is drawn as nothing, the window icon is left unchanged, and text falls back to pygame's built-in font. Without the icons, however, the menu buttons have no size and cannot be clicked.

## Using it from Python

The command runs `minigames.app.main`. To build and run the program yourself:

```python
from minigames.app import Program

Program("Minigames").start()
```

The building blocks can also be used on their own:

- `minigames.window.Window(name, width, height)` opens the display and yields events from `events()`.
- `minigames.renderer.Renderer(surface)` draws rectangles, circles and cached text onto any pygame surface.
- `minigames.input.InputHandler` tracks keys, mouse buttons and the mouse position; feed it events with `handle_event`.
- `minigames.timer.Timer` measures the time between calls to `restart()`.
- The scenes `SnakeGame`, `PongGame`, `AsteroidGame` and `TictactoeGame` take a `Renderer`, a window and an `InputHandler`; `GameMenu` also takes a `Timer`. Call `update` and then `draw` on each frame.

## What it does not do

- Tic-tac-toe has no play: once a side is chosen the board is drawn, but clicks place no marks and no winner is decided.
- Asteroid has a ship and bullets only; there are no asteroids to hit and no score.
- Snake keeps no score, and a dead snake stays dead until the program is restarted.
- No game state, scores or settings are saved.

## Tests

```
pip install .[test]
pytest
```