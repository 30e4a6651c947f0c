"""
Hit resolution and the player status state machine.

    Vulnerable --hit, shields > 0--> Invulnerable(since=now)
    Vulnerable --hit, shields == 0--> GameOver
    Invulnerable --duration elapsed--> Vulnerable
    Invulnerable --hit--> Invulnerable (no-op)
    GameOver --hit--> GameOver (no-op)

Every hit plays the hit cue, whatever the state.
"""

from __future__ import annotations

import logging

from .effects import spawn_explosion
from .entities import ExplosionKind, GameOver, Invulnerable, Vulnerable
from .sounds import Sound
from .world import World

logger = logging.getLogger(__name__)


def handle_hit(world: World, now: float) -> bool:
    """Apply one hit to the player. Returns True if the status changed."""
    world.emit(Sound.HIT)

    status = world.status
    if isinstance(status, (Invulnerable, GameOver)):
        return False

    if world.shields > 0:
        world.shields -= 1
        world.stats.shields_lost += 1
        world.status = Invulnerable(since=now)
        logger.debug("Player hit, %d shields left", world.shields)
        return True

    _enter_game_over(world)
    return True


def _enter_game_over(world: World):
    world.status = GameOver()
    cx, cy = world.player.center
    spawn_explosion(world, cx, cy, ExplosionKind.PLAYER)
    world.emit(Sound.EXPLOSION)
    world.emit(Sound.GAME_OVER)
    logger.info("Game over, final score %d", world.score)


def expire_invulnerability(world: World, now: float):
    status = world.status
    if isinstance(status, Invulnerable) and now - status.since >= world.config.invulnerability_ms:
        world.status = Vulnerable()


def grant_shield(world: World, now: float):
    """Shield pickup: always re-arms invulnerability, tops up shields below max."""
    if world.game_over:
        return
    world.status = Invulnerable(since=now)
    if world.shields < world.config.max_shields:
        world.shields += 1
    world.emit(Sound.SHIELD_RECHARGE)


def hits_obstacle(world: World) -> bool:
    p = world.player
    for obstacle in world.obstacles:
        in_column = p.x + p.width > obstacle.x and p.x < obstacle.x + obstacle.width
        if not in_column:
            continue
        if p.y < obstacle.top_height or p.y + p.height > obstacle.bottom_y:
            return True
    return False


def check_terrain(world: World, now: float):
    """Pillars and the ceiling only hurt a vulnerable player."""
    if not isinstance(world.status, Vulnerable):
        return
    if hits_obstacle(world) or world.player.y < 0:
        handle_hit(world, now)
