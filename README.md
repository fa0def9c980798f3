# rustysword

A tiny arcade game for the terminal. You are the ☥ in the middle of a walled
room, holding a sword. Monsters appear at random and creep towards you. Skewer
them with your sword before they reach you. Each kill scores a point, and a
single touch from a monster ends the game.

## Installing

```
pip install .
```

The game draws with `blessed` and plays sound effects through `pygame`.

## Playing

```
rustysword
```

The command takes no options apart from `--help`. The playing field is 30 rows
by 60 columns. The score and the title are drawn on the line below it.

Controls:

| Action     | Keys                         |
|------------|------------------------------|
| Up         | `w`, `,`, arrow up           |
| Down       | `s`, `o`, arrow down         |
| Left       | `a`, arrow left              |
| Right      | `d`, `e`, arrow right        |
| Quit       | `q`, Esc                     |

Pressing a direction you are not facing turns you and your sword around.
Pressing the direction you already face steps you forward, unless a wall is in
the way. On a frame in which you step, the monsters hold still. The first
monster spawns after one second. After that, a new one spawns every one to five
seconds. A monster never spawns on top of you. Each monster moves once every
0.2 to 1.2 seconds, along whichever axis it is furthest from you. When the game
ends, "Thanks for playing!" is printed.

### Sound clips

Sound clips are loaded from these three files, relative to the working
directory:

- `clips/monster_dies.wav`
- `clips/monster_spawns.wav`
- `clips/player_dies.wav`

All three files must exist. If one is missing, the command stops with
`FileNotFoundError`. If no audio device can be opened, the clips are still
checked, but the game plays silently.

## Using the pieces

The game logic can be driven without a terminal. `Game` needs an audio object
with `play(name)` and `wait()` methods:

```python
import random

from rustysword.game import Game
from rustysword.world import World


class Silent:
    def play(self, name):
        pass

    def wait(self):
        pass


game = Game(World(30, 60), random.Random(1), Silent())
game.handle_key("d")        # already facing right, so this steps right
alive = game.step(1 / 60)   # False once a monster has reached the player
print(alive, game.world.player.score)
```

These modules make up the package:

- `rustysword.coord` provides `Coord`, `Direction` and `key_to_direction`. `key_to_direction` maps a character, a key name such as `"KEY_UP"`, or a `blessed` keystroke to a `Direction`.
- `rustysword.floor.Floor` is the walled grid of tiles. It offers `get_symbol` and `is_wall`.
- `rustysword.timer.Timer` is the countdown used for monster movement and spawning. It takes durations as a `timedelta` or as seconds.
- `rustysword.monster.Monster` and `rustysword.player.Player` are the actors. `rustysword.world.World` holds the floor, the player, the monsters and the tiles that need redrawing.
- `rustysword.render.Renderer` draws a `World` onto a `blessed` terminal. `rustysword.render.render_loop` runs it on its own thread, exchanging worlds through two queues until `None` arrives.
- `rustysword.audio.Audio` keeps named sound clips and plays them through the `pygame` mixer.

## Running the tests

```
pip install .[test]
pytest
```