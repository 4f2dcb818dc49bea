# songe

`songe` is a small game whose menus talk. Every menu reads its title aloud,
then announces each option as you move through it. On the main menu,
background music drops to silence while an option is read and rises back,
one step per frame, once no option voice is playing. It is built on pygame.

The game starts on a question screen ("Avez-vous déjà joué au jeu ?"), moves
on to the main menu (Jouer, Scores, Minijeux, Quitter), then to a character
choice shown as a row of pictures (Aurore, Timéo, Tux, Lamasticot), and from
there to the gameplay screen.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Playing

Start the game from a directory that holds the `ressources/` folder:

```
songe
```

Options:

- `--resources DIR` – look for the media in `DIR` instead of `./ressources/`
- `--fullscreen` – use the first fullscreen mode the display offers
- `--frames N` – stop after drawing `N` frames

Media are looked up under the resource directory:

| Kind   | Location                          |
|--------|-----------------------------------|
| Voices | `sons/voix/julie/<name>.ogg`      |
| Music  | `sons/musiques/<name>.ogg`        |
| Images | `images/<name>`                   |
| Fonts  | `fonts/<name>.ttf` (`sansation`)  |

If a file cannot be loaded, the game prints which one on standard error and
stops.

Keys in the menus:

- **Up / Left** – previous option (wraps round to the last one)
- **Down / Right** – next option (wraps round to the first one)
- **Return** – choose the highlighted option
- **Escape** – go back one screen; on the question screen, leave the game

On the main menu, *Jouer* opens the character choice and *Quitter* ends the
game. The window is 800×600, centred on the desktop, with vertical sync and a
limit of 60 frames per second.

## What the game does not do yet

- *Scores* and *Minijeux* on the main menu do nothing when chosen.
- The character picked on the choice screen is not remembered; Return on any
  character leads to the same screen.
- The gameplay screen only shows the word "Gameplay"; Escape returns to the
  main menu. There is no game to play there.
- The answer to the opening question is stored as
  `Resources.has_already_played` but nothing reads it.

## Pong

A two-player Pong is included as well:

```
songe-pong
```

- **Z / S** – move the left bar up and down
- **Up / Down** – move the right bar up and down
- **Space** – serve the ball
- **Escape** – quit

`--frames N` stops it after `N` frames. When the ball leaves the field on the
left or right, the bars and ball go back to their starting places and the game
waits for the next serve.

## Using it from Python

- `songe.resources.Config` holds the window settings and resource directory;
  `songe.resources.Resources` turns short names into media paths
  (`voice`, `music`, `image`, `font`).
- `songe.state_manager.StateManager` switches between screens registered with
  `register`; `enter_state` creates a screen on first use and `quit` raises
  `QuitGame`.
- `songe.menu.Menu`, `songe.text_menu.TextMenu` and
  `songe.image_menu.ImageMenu` are the bases for new menu screens; subclasses
  supply `init_options`, `init_options_voices` and, for picture menus,
  `init_images`.
- `songe.app.create_context` builds a context with every screen registered,
  and `songe.app.run` drives it in a window.
- `songe.pong.Pong` holds the Pong rules without any drawing, so it can be
  stepped frame by frame:

```python
from songe.pong import Pong

game = Pong()
game.serve()
for _ in range(10):
    game.step()
print(game.ball)
```