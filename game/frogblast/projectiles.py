"""
Bullet movement and hits, power-up drift and pickup
"""

from __future__ import annotations

import logging

from .collisions import grant_shield, handle_hit
from .enemies import damage_enemy
from .entities import Bullet, PowerUp, PowerUpType, Weapon, WeaponType
from .sounds import Sound
from .utils import rects_overlap
from .world import World

logger = logging.getLogger(__name__)


def off_screen(obj, width: float, height: float) -> bool:
    """True once the box has fully left the arena on any side."""
    return (obj.x > width or obj.x + obj.width < 0 or
            obj.y > height or obj.y + obj.height < 0)


def _move(bullet: Bullet):
    bullet.x += bullet.vx
    bullet.y += bullet.vy


def update_player_bullets(world: World):
    """Each bullet hits at most one enemy and is consumed by it."""
    cfg = world.config
    remaining = []
    for bullet in world.player_bullets:
        _move(bullet)

        hit = None
        for enemy in world.enemies:
            if rects_overlap(bullet, enemy):
                hit = enemy
                break
        if hit is not None:
            if damage_enemy(world, hit):
                world.enemies = [e for e in world.enemies if e is not hit]
            continue

        if not off_screen(bullet, cfg.width, cfg.height):
            remaining.append(bullet)
    world.player_bullets = remaining


def update_enemy_bullets(world: World, now: float):
    cfg = world.config
    remaining = []
    for bullet in world.enemy_bullets:
        _move(bullet)
        if rects_overlap(world.player, bullet):
            handle_hit(world, now)
            continue
        if not off_screen(bullet, cfg.width, cfg.height):
            remaining.append(bullet)
    world.enemy_bullets = remaining


def update_power_ups(world: World, dt: float, now: float):
    remaining = []
    for power_up in world.power_ups:
        power_up.x -= world.scroll_speed
        power_up.pulse_timer += dt
        if rects_overlap(world.player, power_up):
            apply_power_up(world, power_up, now)
            continue
        if power_up.x + power_up.width >= 0:
            remaining.append(power_up)
    world.power_ups = remaining


def apply_power_up(world: World, power_up: PowerUp, now: float):
    cfg = world.config
    player = world.player
    world.stats.power_ups += 1

    if power_up.kind == PowerUpType.SHIELD:
        grant_shield(world, now)
    elif power_up.kind == PowerUpType.FAST_LASER:
        if player.weapon.type == WeaponType.FAST_LASER:
            player.weapon.ammo += cfg.power_up_ammo
        else:
            player.weapon = Weapon(
                type=WeaponType.FAST_LASER,
                ammo=cfg.power_up_ammo,
                cooldown=cfg.laser_cooldown_ms,
            )
        world.emit(Sound.POWER_UP)
    elif power_up.kind == PowerUpType.CHARGE_GUN:
        player.weapon = Weapon(
            type=WeaponType.CHARGE_GUN,
            ammo=cfg.power_up_ammo,
            cooldown=cfg.charge_cooldown_ms,
        )
        world.emit(Sound.POWER_UP)
    logger.debug("Picked up %s", power_up.kind.value)
