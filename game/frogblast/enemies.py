"""
Enemy behaviour: basic scrollers, the random-walking UFO and the tentacle Blob
"""

from __future__ import annotations

import logging
import math
from typing import List, Tuple

from .collisions import handle_hit
from .config import GameConfig
from .effects import spawn_explosion
from .entities import (
    Bullet,
    BulletType,
    Enemy,
    EnemyKind,
    ExplosionKind,
    MovingLeft,
    OnRight,
    Returning,
)
from .sounds import Sound
from .utils import clamp, circle_collide, cubic_bezier, normalize, point_in_rect, rects_overlap
from .world import World

logger = logging.getLogger(__name__)

Point = Tuple[float, float]
Curve = Tuple[Point, Point, Point, Point]

TENTACLE_SAMPLES = 12


def update_enemies(world: World, dt: float, now: float):
    """Move every enemy, fire archetype weapons, resolve body contact."""
    cfg = world.config
    player = world.player
    survivors = []

    for enemy in world.enemies:
        if enemy.kind == EnemyKind.UFO:
            _move_ufo(world, enemy, dt)
            fire_ufo(world, enemy, now)
        elif enemy.kind == EnemyKind.BLOB:
            _move_blob(world, enemy, dt)
            animate_tentacles(enemy, cfg)
            fire_blob(world, enemy, now)
            if blob_touches_player(world, enemy):
                handle_hit(world, now)
            survivors.append(enemy)
            continue
        elif enemy.kind == EnemyKind.MOVING:
            enemy.x -= cfg.moving_enemy_speed
        else:
            enemy.x -= world.scroll_speed

        if rects_overlap(player, enemy):
            handle_hit(world, now)
            release_presence(world, enemy)
            continue

        if enemy.is_basic and enemy.x + enemy.width < 0:
            continue

        survivors.append(enemy)

    world.enemies = survivors
    fire_basic_volley(world, now)


def release_presence(world: World, enemy: Enemy):
    if enemy.kind == EnemyKind.UFO:
        world.has_ufo = False
    elif enemy.kind == EnemyKind.BLOB:
        world.has_blob = False


def damage_enemy(world: World, enemy: Enemy) -> bool:
    """Apply one bullet of damage. Returns True if the enemy died.

    The caller removes dead enemies from the world.
    """
    cfg = world.config
    enemy.health -= 1
    if enemy.health > 0:
        if enemy.kind == EnemyKind.UFO:
            world.emit(Sound.UFO_HIT)
        elif enemy.kind == EnemyKind.BLOB:
            world.emit(Sound.HIT)
        return False

    cx, cy = enemy.center
    release_presence(world, enemy)
    if enemy.kind == EnemyKind.UFO:
        world.score += cfg.ufo_score
        world.emit(Sound.UFO_DEATH)
        spawn_explosion(world, cx, cy, ExplosionKind.UFO)
        logger.info("UFO destroyed")
    elif enemy.kind == EnemyKind.BLOB:
        world.score += cfg.blob_score
        world.emit(Sound.ENEMY_DEATH)
        world.emit(Sound.EXPLOSION)
        spawn_explosion(world, cx, cy, ExplosionKind.BLOB)
        logger.info("Blob destroyed")
    else:
        world.score += cfg.basic_score
        world.emit(Sound.ENEMY_DEATH)
        spawn_explosion(world, cx, cy, ExplosionKind.BASIC)
    world.stats.kills += 1
    return True


# ----------------------------
# UFO
# ----------------------------

def _keep_on_screen(enemy: Enemy, cfg: GameConfig, left: float = 0.0):
    enemy.x = clamp(enemy.x, left, cfg.width - enemy.width)
    enemy.y = clamp(enemy.y, 0.0, cfg.height - enemy.height)


def _move_ufo(world: World, enemy: Enemy, dt: float):
    enemy.move_timer += dt
    if enemy.move_timer > enemy.move_interval:
        enemy.dir_x = world.rng.random() * 2 - 1
        enemy.dir_y = world.rng.random() * 2 - 1
        enemy.move_timer = 0.0
    enemy.x += enemy.dir_x * enemy.speed
    enemy.y += enemy.dir_y * enemy.speed
    _keep_on_screen(enemy, world.config)


def fire_ufo(world: World, enemy: Enemy, now: float):
    cfg = world.config
    if now - world.last_ufo_shot < cfg.ufo_shoot_cooldown_ms:
        return
    player = world.player
    dx, dy = normalize(player.x - enemy.x, player.y - enemy.y)
    if dx == 0.0 and dy == 0.0:
        return
    w, h = cfg.ufo_bullet_size
    world.enemy_bullets.append(Bullet(
        x=enemy.x - w / 2, y=enemy.y + enemy.height / 2 - h / 2, width=w, height=h,
        vx=dx * cfg.ufo_bullet_speed, vy=dy * cfg.ufo_bullet_speed, kind=BulletType.UFO,
    ))
    world.emit(Sound.UFO_SHOOT)
    world.last_ufo_shot = now


# ----------------------------
# Blob
# ----------------------------

def _move_blob(world: World, enemy: Enemy, dt: float):
    cfg = world.config
    enemy.move_timer += dt
    phase = enemy.phase

    if isinstance(phase, Returning):
        enemy.x += cfg.blob_return_speed
        if enemy.x > cfg.width - enemy.width:
            enemy.x = cfg.width - enemy.width
            enemy.phase = OnRight()
            logger.debug("Blob back on the right")

    elif isinstance(phase, MovingLeft):
        if enemy.move_timer > enemy.move_interval:
            _aim_blob_at_player(world, enemy)
            enemy.move_timer = 0.0
        speed = enemy.speed * cfg.blob_chase_multiplier
        enemy.x += enemy.dir_x * speed
        enemy.y += enemy.dir_y * speed
        _keep_on_screen(enemy, cfg)
        phase.timer += dt
        if phase.timer >= cfg.blob_left_dwell_ms:
            enemy.phase = Returning()
            logger.debug("Blob returning")

    else:
        if phase is None:
            phase = enemy.phase = OnRight()
        phase.timer += dt
        if phase.timer >= cfg.blob_right_dwell_ms:
            enemy.phase = MovingLeft()
            logger.debug("Blob moving left")
        if enemy.move_timer > enemy.move_interval:
            _wander_right(world, enemy)
            enemy.move_timer = 0.0
        enemy.x += enemy.dir_x * enemy.speed
        enemy.y += enemy.dir_y * enemy.speed
        _keep_on_screen(enemy, cfg, left=cfg.blob_right_zone)


def _aim_blob_at_player(world: World, enemy: Enemy):
    cfg = world.config
    rng = world.rng
    player = world.player
    px, py = normalize(player.x - enemy.x, player.y - enemy.y)
    w = cfg.blob_pursuit_weight
    mx = px * w + (rng.random() * 2 - 1) * (1 - w)
    my = py * w + (rng.random() * 2 - 1) * (1 - w)
    nx, ny = normalize(mx, my)
    if nx != 0.0 or ny != 0.0:
        enemy.dir_x, enemy.dir_y = nx, ny


def _wander_right(world: World, enemy: Enemy):
    cfg = world.config
    rng = world.rng
    band = cfg.width * cfg.blob_right_fraction
    target_x = cfg.width - band + rng.random() * band
    target_y = rng.random() * (cfg.height - enemy.height)
    nx, ny = normalize(target_x - enemy.x, target_y - enemy.y)
    if nx != 0.0 or ny != 0.0:
        enemy.dir_x, enemy.dir_y = nx, ny


def animate_tentacles(enemy: Enemy, cfg: GameConfig):
    """Fixed per-frame increments, independent of frame time."""
    enemy.tentacle_angle += cfg.tentacle_angle_step
    enemy.tentacle_phase += cfg.tentacle_phase_step
    if enemy.tentacle_phase > math.pi * 2:
        enemy.tentacle_phase = 0.0
    enemy.wiggle_phase += cfg.tentacle_wiggle_step


def tentacle_curves(enemy: Enemy, cfg: GameConfig) -> List[Curve]:
    """Cubic Bezier control polygons for each tentacle, rooted on the body edge."""
    curves = []
    cx, cy = enemy.center
    radius = enemy.width / 2
    n = cfg.tentacle_count
    for i in range(n):
        base_angle = (math.pi * 2 * i) / n + enemy.tentacle_angle
        extension = math.sin(enemy.tentacle_phase + i * 0.5) * 0.5 + 0.5
        length = cfg.tentacle_length * (0.7 + extension * 0.3)
        wiggle = math.sin(enemy.wiggle_phase + i * 0.8) * 15
        angle = base_angle + wiggle * 0.1

        start = (cx + math.cos(angle) * radius, cy + math.sin(angle) * radius)
        mid = length * 0.5
        a1 = angle + math.sin(enemy.wiggle_phase + i * 0.8) * 0.3
        a2 = angle + math.sin(enemy.wiggle_phase + i * 0.8 + 0.5) * 0.3
        c1 = (start[0] + math.cos(a1) * mid, start[1] + math.sin(a1) * mid)
        c2 = (start[0] + math.cos(a2) * mid * 1.5, start[1] + math.sin(a2) * mid * 1.5)
        end = (start[0] + math.cos(angle) * length, start[1] + math.sin(angle) * length)
        curves.append((start, c1, c2, end))
    return curves


def blob_touches_player(world: World, enemy: Enemy) -> bool:
    """Round body test, optionally extended with sampled tentacle curves."""
    cfg = world.config
    player = world.player
    px, py = player.center
    ex, ey = enemy.center
    if circle_collide(px, py, player.width / 2, ex, ey, enemy.width / 2):
        return True
    if not cfg.tentacle_hits:
        return False

    pad = cfg.tentacle_width / 2
    x, y = player.x - pad, player.y - pad
    w, h = player.width + 2 * pad, player.height + 2 * pad
    for curve in tentacle_curves(enemy, cfg):
        for k in range(TENTACLE_SAMPLES + 1):
            bx, by = cubic_bezier(*curve, k / TENTACLE_SAMPLES)
            if point_in_rect(bx, by, x, y, w, h):
                return True
    return False


def fire_blob(world: World, enemy: Enemy, now: float):
    cfg = world.config
    if now - world.last_blob_shot < cfg.blob_shoot_cooldown_ms:
        return
    cx, cy = enemy.center
    w, h = cfg.blob_bullet_size
    n = cfg.blob_burst_directions
    for k in range(n):
        angle = (math.pi * 2 * k) / n
        world.enemy_bullets.append(Bullet(
            x=cx - w / 2, y=cy - h / 2, width=w, height=h,
            vx=math.cos(angle) * cfg.blob_bullet_speed,
            vy=math.sin(angle) * cfg.blob_bullet_speed,
            kind=BulletType.BLOB,
        ))
    world.emit(Sound.BLOB_SHOOT)
    world.last_blob_shot = now


# ----------------------------
# Basic enemies
# ----------------------------

def fire_basic_volley(world: World, now: float):
    """One leftward bullet per live basic enemy on a shared cooldown."""
    cfg = world.config
    if now - world.last_enemy_shot < cfg.enemy_shoot_cooldown_ms:
        return
    w, h = cfg.enemy_bullet_size
    for enemy in world.enemies:
        if not enemy.is_basic:
            continue
        world.enemy_bullets.append(Bullet(
            x=enemy.x, y=enemy.y + enemy.height / 2, width=w, height=h,
            vx=-cfg.enemy_bullet_speed, vy=0.0, kind=BulletType.NORMAL,
        ))
        world.emit(Sound.ENEMY_SHOOT)
    world.last_enemy_shot = now
