import math

import pytest

from game.frogblast import player as player_ctl
from game.frogblast.entities import BulletType, Weapon, WeaponType
from game.frogblast.sounds import Sound


def laser(ammo):
    return Weapon(type=WeaponType.FAST_LASER, ammo=ammo, cooldown=50.0)


def charge_gun(ammo=50):
    return Weapon(type=WeaponType.CHARGE_GUN, ammo=ammo, cooldown=400.0)


# ----------------------------
# Physics
# ----------------------------

def test_jump_sets_velocity_instead_of_adding(world):
    player_ctl.jump(world)
    player_ctl.jump(world)
    assert world.player.velocity == world.config.jump_force


def test_integrate_applies_gravity_then_moves(world):
    y0 = world.player.y
    player_ctl.integrate(world)
    assert world.player.velocity == pytest.approx(0.1)
    assert world.player.y == pytest.approx(y0 + 0.1)


def test_integrate_snaps_to_floor_without_bounce(world):
    p = world.player
    p.y = world.config.height - p.height - 1
    p.velocity = 10.0
    player_ctl.integrate(world)
    assert p.y == world.config.height - p.height
    assert p.velocity == 0.0


# ----------------------------
# Default weapon and laser
# ----------------------------

def test_default_weapon_respects_cooldown(world):
    assert player_ctl.try_shoot(world, 0.0)
    assert not player_ctl.try_shoot(world, 399.0)
    assert player_ctl.try_shoot(world, 400.0)

    assert len(world.player_bullets) == 2
    bullet = world.player_bullets[0]
    assert bullet.kind == BulletType.DEFAULT
    assert bullet.vx == world.config.default_bullet_speed
    assert bullet.x == world.player.x + world.player.width
    assert world.sounds == [Sound.SHOOT, Sound.SHOOT]
    assert world.stats.shots == 2


def test_laser_consumes_ammo_then_reverts(world):
    world.player.weapon = laser(1)

    assert player_ctl.try_shoot(world, 0.0)
    assert world.player.weapon.ammo == 0
    assert world.player_bullets[-1].kind == BulletType.LASER
    assert world.sounds == [Sound.LASER]

    assert not player_ctl.try_shoot(world, 100.0)
    assert world.player.weapon.type == WeaponType.DEFAULT
    assert world.player.weapon.cooldown == world.config.default_cooldown_ms
    assert len(world.player_bullets) == 1


def test_held_trigger_auto_fires(world):
    player_ctl.trigger_down(world)
    for frame in range(10):
        player_ctl.update_weapon(world, frame * 100.0)
    # 0, 400, 800
    assert len(world.player_bullets) == 3


# ----------------------------
# Charge gun
# ----------------------------

def test_charge_gun_never_fires_while_held(world):
    world.player.weapon = charge_gun()
    player_ctl.trigger_down(world)
    assert world.player.is_charging
    assert not world.player.is_shooting
    for frame in range(30):
        player_ctl.update_weapon(world, frame * 16.0)
    assert world.player_bullets == []
    assert world.player.charge_level == 30


def test_charge_level_caps_at_max(world):
    world.player.weapon = charge_gun()
    player_ctl.trigger_down(world)
    for frame in range(150):
        player_ctl.update_weapon(world, frame * 16.0)
    assert world.player.charge_level == world.config.max_charge


def test_charge_sound_is_throttled(world):
    world.player.weapon = charge_gun()
    player_ctl.trigger_down(world)
    for frame in range(13):
        player_ctl.update_weapon(world, frame * 16.0)
    # cues at 0 and 112; the next is due at 212
    assert world.sounds.count(Sound.CHARGE) == 2


@pytest.mark.parametrize("level, expected", [(0, 5), (9.9, 5), (10, 6), (55, 10), (100, 15)])
def test_charge_burst_size(level, expected):
    assert player_ctl.charge_burst_size(level) == expected


def test_full_charge_burst_is_evenly_spaced(world):
    world.player.weapon = charge_gun()
    world.player.charge_level = 100.0

    fired = player_ctl.release_charge(world, 0.0)

    assert fired == 15
    angles = sorted(math.atan2(b.vy, b.vx) % (2 * math.pi) for b in world.player_bullets)
    gaps = [b - a for a, b in zip(angles, angles[1:])]
    for gap in gaps:
        assert gap == pytest.approx(2 * math.pi / 15)
    for b in world.player_bullets:
        assert math.hypot(b.vx, b.vy) == pytest.approx(world.config.charge_bullet_speed)
        assert b.kind == BulletType.CHARGE


def test_empty_charge_still_fires_five(world):
    world.player.weapon = charge_gun()
    assert player_ctl.release_charge(world, 0.0) == 5


def test_release_consumes_ammo_and_resets_charge(world):
    world.player.weapon = charge_gun(ammo=2)
    world.player.charge_level = 40.0

    player_ctl.trigger_down(world)
    player_ctl.trigger_up(world, 0.0)

    assert world.player.weapon.ammo == 1
    assert world.player.charge_level == 0.0
    assert not world.player.is_charging
    assert world.sounds[-1] == Sound.LASER


def test_last_charge_reverts_to_default(world):
    world.player.weapon = charge_gun(ammo=1)
    player_ctl.release_charge(world, 0.0)
    assert world.player.weapon.type == WeaponType.DEFAULT
    assert world.player.weapon.ammo == 0


def test_trigger_up_without_down_is_noop(world):
    player_ctl.trigger_up(world, 0.0)
    assert world.player_bullets == []
    assert world.sounds == []


def test_held_trigger_follows_weapon_swap(world):
    player_ctl.trigger_down(world)
    assert world.player.is_shooting

    world.player.weapon = charge_gun()
    player_ctl.update_weapon(world, 0.0)
    assert world.player.is_charging
    assert not world.player.is_shooting
    assert world.player_bullets == []
