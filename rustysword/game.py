"""The game loop: input, monsters, spawning, scoring and the terminal session."""

from __future__ import annotations

import argparse
import queue
import random
import sys
import threading
import time
from pathlib import Path

from .coord import Coord, key_to_direction
from .monster import Monster
from .render import render_loop
from .timer import Timer
from .world import World

ROWS = 30
COLS = 60
FIRST_SPAWN_MILLIS = 1000
MIN_SPAWN_MILLIS = 1000
MAX_SPAWN_MILLIS = 5000
FRAME_SECONDS = 1 / 60
CLIPS_DIR = Path("clips")
SOUNDS = ("monster_dies", "monster_spawns", "player_dies")


class Game:
    """One game in progress, advanced a frame at a time."""

    def __init__(self, world: World, rng: random.Random, audio) -> None:
        self.world = world
        self.rng = rng
        self.audio = audio
        self.spawn_timer = Timer.from_millis(FIRST_SPAWN_MILLIS)
        self.running = True
        self._player_moved = False

    def handle_key(self, key) -> bool:
        """Apply one key press. Returns False if the player asked to quit."""
        text = str(key)
        name = getattr(key, "name", None) or text
        if text == "q" or name == "KEY_ESCAPE" or text == "\x1b":
            self.running = False
            return False
        direction = key_to_direction(key)
        if direction is not None:
            world = self.world
            self._player_moved = world.player.travel(direction, world.floor, world.dirty_coords)
        return True

    def step(self, delta) -> bool:
        """Advance the game by ``delta`` (seconds or timedelta).

        Returns False once the player has been caught.
        """
        world = self.world
        player = world.player
        moved, self._player_moved = self._player_moved, False

        for monster in world.monsters:
            monster.move_timer.update(delta)
        if not moved:
            for monster in world.monsters:
                monster.try_travel(player.coord, world.dirty_coords)

        survivors = [m for m in world.monsters if m.coord != player.sword_coord]
        killed = len(world.monsters) - len(survivors)
        world.monsters[:] = survivors
        if killed:
            player.score += killed
            self.audio.play("monster_dies")

        self.spawn_timer.update(delta)
        if self.spawn_timer.ready:
            self.spawn_timer = Timer.from_millis(
                self.rng.randrange(MIN_SPAWN_MILLIS, MAX_SPAWN_MILLIS)
            )
            spawn_coord = Coord(
                self.rng.randrange(1, world.floor.rows),
                self.rng.randrange(1, world.floor.cols),
            )
            if spawn_coord != player.coord:
                world.monsters.append(Monster(spawn_coord, self.rng))
                self.audio.play("monster_spawns")

        if any(monster.coord == player.coord for monster in world.monsters):
            self.audio.play("player_dies")
            self.audio.wait()
            self.running = False
            return False
        return True


def _read_keys(term, game: Game) -> bool:
    while key := term.inkey(timeout=0):
        if not game.handle_key(key):
            return False
    return True


def main(argv=None) -> int:
    """Run the game in the current terminal."""
    import blessed

    from .audio import Audio

    parser = argparse.ArgumentParser(
        prog="rustysword", description="Slay the monsters before they reach you."
    )
    parser.parse_args(argv)

    audio = Audio()
    for name in SOUNDS:
        audio.add(name, CLIPS_DIR / f"{name}.wav")

    term = blessed.Terminal()
    game = Game(World(ROWS, COLS), random.Random(), audio)
    render_tx: queue.Queue = queue.Queue(maxsize=1)
    main_rx: queue.Queue = queue.Queue(maxsize=1)
    render_thread = threading.Thread(
        target=render_loop, args=(render_tx, main_rx, term, sys.stdout)
    )
    render_thread.start()
    try:
        with term.fullscreen(), term.cbreak():
            last = time.monotonic()
            while True:
                now = time.monotonic()
                delta, last = now - last, now
                if not _read_keys(term, game):
                    break
                if not game.step(delta):
                    break
                render_tx.put(game.world)
                game.world = main_rx.get()
                remaining = FRAME_SECONDS - (time.monotonic() - last)
                if remaining > 0:
                    time.sleep(remaining)
    finally:
        render_tx.put(None)
        render_thread.join()
    print("Thanks for playing!")
    return 0


if __name__ == "__main__":
    sys.exit(main())