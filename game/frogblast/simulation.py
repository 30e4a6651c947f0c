"""
Simulation driver
-----------------
Owns the World and advances it one frame per ``tick``. Hosts feed input
events in, read a snapshot out for drawing and drain sound cues for playback.

Frame order: invulnerability expiry -> stars -> weapon -> player physics ->
spawners -> obstacles -> enemies -> power-ups -> bullets -> terrain -> explosions.
During game over only explosions and scroll decay run.
"""

from __future__ import annotations

import copy
import logging
import math
import random
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from . import player as player_ctl
from . import spawner
from .collisions import check_terrain, expire_invulnerability
from .config import GameConfig
from .effects import update_explosions
from .enemies import update_enemies
from .entities import (
    Bullet,
    Enemy,
    ExplosionParticle,
    Obstacle,
    Player,
    PowerUp,
    Star,
    WeaponType,
)
from .projectiles import update_enemy_bullets, update_player_bullets, update_power_ups
from .scenery import update_obstacles, update_stars
from .sounds import Sound
from .world import World, new_world

logger = logging.getLogger(__name__)


class ManualClock:
    """Monotonic millisecond clock advanced explicitly by the driver."""

    def __init__(self, start: float = 0.0):
        self._now = start

    def __call__(self) -> float:
        return self._now

    def advance(self, ms: float):
        if ms > 0:
            self._now += ms


@dataclass(frozen=True)
class FrameSnapshot:
    """Read-only view of one frame for renderers and UIs."""
    score: int
    shields: int
    max_shields: int
    weapon: WeaponType
    ammo: int
    charge_level: float
    max_charge: float
    invulnerable: bool
    blink_phase: float
    game_over: bool
    scroll_speed: float
    player: Player
    enemies: Tuple[Enemy, ...]
    player_bullets: Tuple[Bullet, ...]
    enemy_bullets: Tuple[Bullet, ...]
    power_ups: Tuple[PowerUp, ...]
    obstacles: Tuple[Obstacle, ...]
    particles: Tuple[ExplosionParticle, ...]
    stars: Tuple[Star, ...]


def _frozen(items) -> tuple:
    return tuple(copy.deepcopy(items))


class Simulation:
    """Single-threaded, frame-driven game core."""

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        seed: Optional[int] = None,
        clock: Optional[Callable[[], float]] = None,
    ):
        self.config = config or GameConfig()
        self._owns_clock = clock is None
        self._clock = clock if clock is not None else ManualClock()
        self.world: World = new_world(self.config, random.Random(seed))

    # ----------------------------
    # Input events
    # ----------------------------

    def now(self) -> float:
        return self._clock()

    def on_jump(self):
        if self.world.game_over:
            return
        player_ctl.jump(self.world)

    def on_fire_start(self):
        if self.world.game_over:
            return
        player_ctl.trigger_down(self.world)

    def on_fire_end(self):
        p = self.world.player
        if self.world.game_over:
            p.is_shooting = False
            p.is_charging = False
            return
        player_ctl.trigger_up(self.world, self.now())

    def on_restart(self, seed: Optional[int] = None):
        """Reset every piece of state to its initial value."""
        rng = random.Random(seed) if seed is not None else self.world.rng
        self.world = new_world(self.config, rng)
        logger.info("Game restarted")

    # ----------------------------
    # Frame
    # ----------------------------

    def tick(self, delta_time: float):
        """Advance one frame; ``delta_time`` is in milliseconds."""
        dt = max(0.0, float(delta_time))
        if self._owns_clock:
            self._clock.advance(dt)
        world = self.world

        if world.game_over:
            update_explosions(world, dt)
            world.scroll_speed = max(0.0, world.scroll_speed - self.config.scroll_decay)
            return

        now = self.now()
        expire_invulnerability(world, now)
        world.blink_timer = world.blink_timer + dt if world.invulnerable else 0.0

        update_stars(world)
        player_ctl.update_weapon(world, now)
        player_ctl.integrate(world)
        spawner.tick(world, dt)

        update_obstacles(world)
        update_enemies(world, dt, now)
        update_power_ups(world, dt, now)
        update_player_bullets(world)
        update_enemy_bullets(world, now)
        check_terrain(world, now)

        update_explosions(world, dt)

    # ----------------------------
    # Outputs
    # ----------------------------

    @property
    def game_over(self) -> bool:
        return self.world.game_over

    @property
    def final_score(self) -> int:
        return self.world.score

    @property
    def blink_phase(self) -> float:
        if not self.world.invulnerable:
            return 0.0
        return math.sin(self.world.blink_timer / 25) * 0.5 + 0.5

    def drain_sounds(self) -> List[Sound]:
        sounds = self.world.sounds
        self.world.sounds = []
        return sounds

    def snapshot(self) -> FrameSnapshot:
        """Detached copy of the current frame; later ticks do not show through."""
        w = self.world
        p = copy.deepcopy(w.player)
        return FrameSnapshot(
            score=w.score,
            shields=w.shields,
            max_shields=self.config.max_shields,
            weapon=p.weapon.type,
            ammo=p.weapon.ammo,
            charge_level=p.charge_level,
            max_charge=self.config.max_charge,
            invulnerable=w.invulnerable,
            blink_phase=self.blink_phase,
            game_over=w.game_over,
            scroll_speed=w.scroll_speed,
            player=p,
            enemies=_frozen(w.enemies),
            player_bullets=_frozen(w.player_bullets),
            enemy_bullets=_frozen(w.enemy_bullets),
            power_ups=_frozen(w.power_ups),
            obstacles=_frozen(w.obstacles),
            particles=_frozen(w.particles),
            stars=_frozen(w.stars),
        )
