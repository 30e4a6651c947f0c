"""
Interval spawners for enemies, power-ups and obstacles
"""

from __future__ import annotations

import logging
from typing import Optional

from .entities import (
    Enemy,
    EnemyKind,
    Obstacle,
    OnRight,
    PowerUp,
    PowerUpType,
    WindowLight,
)
from .sounds import Sound
from .world import World

logger = logging.getLogger(__name__)


def tick(world: World, dt: float):
    """Advance the three spawn timers by ``dt`` ms."""
    cfg = world.config

    world.obstacle_timer += dt
    if world.obstacle_timer > cfg.obstacle_interval_ms:
        world.obstacle_timer = 0.0
        spawn_obstacle(world)

    world.enemy_timer += dt
    if world.enemy_timer > cfg.enemy_interval_ms:
        world.enemy_timer = 0.0
        spawn_enemy(world)

    world.power_up_timer += dt
    if world.power_up_timer > cfg.power_up_interval_ms:
        world.power_up_timer = 0.0
        if world.rng.random() < cfg.power_up_drop_chance:
            spawn_power_up(world, cfg.width, world.rng.random() * (cfg.height - cfg.power_up_size))


def choose_enemy_kind(world: World) -> EnemyKind:
    """Independent draws; a UFO wins over a Blob when both succeed."""
    cfg = world.config
    rng = world.rng
    moving = rng.random() < 0.5
    ufo = not world.has_ufo and rng.random() < cfg.ufo_spawn_chance
    blob = not world.has_blob and rng.random() < cfg.blob_spawn_chance
    if ufo:
        return EnemyKind.UFO
    if blob:
        return EnemyKind.BLOB
    return EnemyKind.MOVING if moving else EnemyKind.DRIFTING


def spawn_enemy(world: World, kind: Optional[EnemyKind] = None) -> Enemy:
    """Spawn one enemy at the right edge, drawing its kind when not given.

    At most one UFO and one Blob may be alive; asking for a second raises.
    """
    cfg = world.config
    rng = world.rng
    if kind is None:
        kind = choose_enemy_kind(world)
    elif (kind == EnemyKind.UFO and world.has_ufo) or (kind == EnemyKind.BLOB and world.has_blob):
        raise ValueError(f"A {kind.value} is already in the world")

    health = {
        EnemyKind.UFO: cfg.ufo_health,
        EnemyKind.BLOB: cfg.blob_health,
    }.get(kind, cfg.basic_health)

    enemy = Enemy(
        x=cfg.width,
        y=rng.random() * (cfg.height - cfg.enemy_size),
        kind=kind,
        health=health,
        width=cfg.enemy_size,
        height=cfg.enemy_size,
        speed=cfg.enemy_speed,
        move_interval=cfg.enemy_move_interval_ms,
        dir_x=rng.random() * 2 - 1,
        dir_y=rng.random() * 2 - 1,
    )

    if kind == EnemyKind.UFO:
        world.has_ufo = True
        world.emit(Sound.UFO_PRESENCE)
        logger.info("UFO spawned")
    elif kind == EnemyKind.BLOB:
        enemy.phase = OnRight()
        world.has_blob = True
        world.emit(Sound.BLOB_PRESENCE)
        logger.info("Blob spawned")

    world.enemies.append(enemy)
    return enemy


def choose_power_up_type(world: World) -> PowerUpType:
    """Cumulative-weight selection over one uniform draw."""
    weights = world.config.power_up_weights
    draw = world.rng.random()
    cumulative = 0.0
    for kind, weight in weights:
        cumulative += weight
        if draw < cumulative:
            return kind
    return weights[0][0]


def spawn_power_up(world: World, x: float, y: float, kind: Optional[PowerUpType] = None) -> PowerUp:
    size = world.config.power_up_size
    if kind is None:
        kind = choose_power_up_type(world)
    power_up = PowerUp(x=x, y=y, kind=kind, width=size, height=size)
    world.power_ups.append(power_up)
    return power_up


def spawn_obstacle(world: World) -> Obstacle:
    cfg = world.config
    rng = world.rng
    max_height = cfg.height - cfg.obstacle_gap - cfg.obstacle_min_height
    top = rng.random() * (max_height - cfg.obstacle_min_height) + cfg.obstacle_min_height

    windows = []
    for row in range(cfg.obstacle_window_rows):
        for col in range(cfg.obstacle_window_cols):
            if rng.random() < 0.7:
                windows.append(WindowLight(row=row, col=col, lit=rng.random() < 0.3))

    obstacle = Obstacle(
        x=cfg.width,
        top_height=top,
        bottom_y=top + cfg.obstacle_gap,
        width=cfg.obstacle_width,
        shade=rng.randrange(20, 60),
        windows=windows,
    )
    world.obstacles.append(obstacle)
    return obstacle
