"""
Human play: keyboard/mouse become simulation input events.

    python -m game.frogblast.play [--seed N] [--tentacle-hits] [--log-level DEBUG]

Space / left click  jump
X (hold, release)   fire / charge
R                   restart after game over
"""

from __future__ import annotations

import argparse
import logging
from dataclasses import replace

import arcade

from .config import GameConfig
from .simulation import Simulation
from .window import FrogBlastWindow

logger = logging.getLogger(__name__)


class PlayWindow(FrogBlastWindow):
    """Interactive window: drives the simulation from arcade's frame clock"""

    def on_update(self, delta_time: float):
        self.sim.tick(delta_time * 1000.0)
        for sound in self.sim.drain_sounds():
            logger.debug("sound: %s", sound.value)

    def on_key_press(self, key, modifiers):
        if key == arcade.key.SPACE:
            self.sim.on_jump()
        elif key == arcade.key.X:
            self.sim.on_fire_start()
        elif key == arcade.key.R and self.sim.game_over:
            self.sim.on_restart()
        elif key == arcade.key.ESCAPE:
            self.close()

    def on_key_release(self, key, modifiers):
        if key == arcade.key.X:
            self.sim.on_fire_end()

    def on_mouse_press(self, x, y, button, modifiers):
        if button == arcade.MOUSE_BUTTON_LEFT:
            self.sim.on_jump()


def main():
    parser = argparse.ArgumentParser(description="Play FrogBlast")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument(
        "--tentacle-hits",
        action="store_true",
        help="Blob tentacles hurt, not just its body",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: INFO)",
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = replace(GameConfig(), tentacle_hits=args.tentacle_hits)
    sim = Simulation(config, seed=args.seed)
    PlayWindow(sim, config.width, config.height, "FrogBlast")
    arcade.run()


if __name__ == "__main__":
    main()
