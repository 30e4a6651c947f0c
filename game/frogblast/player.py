"""
Player physics and weapon control
"""

from __future__ import annotations

import logging
import math

from .entities import Bullet, BulletType, WeaponType
from .sounds import Sound
from .world import World, default_weapon

logger = logging.getLogger(__name__)


def jump(world: World):
    """Set (not add) the jump impulse."""
    world.player.velocity = world.config.jump_force


def integrate(world: World):
    """Fixed per-frame gravity step; snaps to the floor without bouncing."""
    p = world.player
    p.velocity += world.config.gravity
    p.y += p.velocity
    if p.y + p.height > world.config.height:
        p.y = world.config.height - p.height
        p.velocity = 0.0


# ----------------------------
# Trigger
# ----------------------------

def trigger_down(world: World):
    p = world.player
    if p.weapon.type == WeaponType.CHARGE_GUN:
        p.is_charging = True
    else:
        p.is_shooting = True


def trigger_up(world: World, now: float):
    p = world.player
    if p.is_charging and p.weapon.type == WeaponType.CHARGE_GUN:
        release_charge(world, now)
    p.is_shooting = False
    p.is_charging = False


def _sync_trigger(world: World):
    # a held trigger follows weapon swaps
    p = world.player
    held = p.is_shooting or p.is_charging
    if not held:
        return
    charge = p.weapon.type == WeaponType.CHARGE_GUN
    p.is_charging = charge
    p.is_shooting = not charge
    if not charge:
        p.charge_level = 0.0


def update_weapon(world: World, now: float):
    """Per-frame handling of a held trigger: auto-fire or accumulate charge."""
    _sync_trigger(world)
    p = world.player
    if p.is_shooting:
        try_shoot(world, now)
    elif p.is_charging:
        cfg = world.config
        p.charge_level = min(cfg.max_charge, p.charge_level + cfg.charge_rate)
        if now - p.last_charge_sound >= cfg.charge_sound_interval_ms:
            world.emit(Sound.CHARGE)
            p.last_charge_sound = now


# ----------------------------
# Firing
# ----------------------------

def try_shoot(world: World, now: float) -> bool:
    """Fire the equipped weapon if its cooldown has elapsed.

    The charge gun never fires here; it fires on release. A fast laser with
    no ammo left reverts to the default weapon instead of firing.
    """
    p = world.player
    cfg = world.config
    weapon = p.weapon
    if weapon.type == WeaponType.CHARGE_GUN:
        return False
    if now - p.last_shot < weapon.cooldown:
        return False

    if weapon.type == WeaponType.FAST_LASER:
        if weapon.ammo <= 0:
            p.weapon = default_weapon(cfg)
            logger.debug("Laser out of ammo, reverting to default weapon")
            return False
        w, h = cfg.laser_bullet_size
        world.player_bullets.append(Bullet(
            x=p.x + p.width, y=p.y + p.height / 2, width=w, height=h,
            vx=cfg.laser_bullet_speed, vy=0.0, kind=BulletType.LASER,
        ))
        weapon.ammo -= 1
        world.emit(Sound.LASER)
    else:
        w, h = cfg.default_bullet_size
        world.player_bullets.append(Bullet(
            x=p.x + p.width, y=p.y + p.height / 2, width=w, height=h,
            vx=cfg.default_bullet_speed, vy=0.0, kind=BulletType.DEFAULT,
        ))
        world.emit(Sound.SHOOT)

    p.last_shot = now
    world.stats.shots += 1
    return True


def charge_burst_size(charge_level: float) -> int:
    """5 bullets at no charge up to 15 at full charge."""
    return int(math.floor(charge_level / 10)) + 5


def release_charge(world: World, now: float) -> int:
    """Fire a radial burst sized by the charge level. Returns bullets fired."""
    p = world.player
    cfg = world.config
    if p.weapon.type != WeaponType.CHARGE_GUN or p.weapon.ammo <= 0:
        return 0

    count = charge_burst_size(p.charge_level)
    step = (math.pi * 2) / count
    w, h = cfg.charge_bullet_size
    cx, cy = p.center
    for i in range(count):
        angle = step * i
        world.player_bullets.append(Bullet(
            x=cx - w / 2, y=cy - h / 2, width=w, height=h,
            vx=math.cos(angle) * cfg.charge_bullet_speed,
            vy=math.sin(angle) * cfg.charge_bullet_speed,
            kind=BulletType.CHARGE,
        ))

    p.weapon.ammo -= 1
    p.charge_level = 0.0
    p.last_shot = now
    world.stats.shots += 1
    world.emit(Sound.LASER)

    if p.weapon.ammo <= 0:
        p.weapon = default_weapon(cfg)
        logger.debug("Charge gun out of ammo, reverting to default weapon")
    return count
