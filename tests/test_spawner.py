import random

import pytest

from game.frogblast import spawner
from game.frogblast.entities import EnemyKind, OnRight, PowerUpType
from game.frogblast.sounds import Sound


def test_enemy_interval_is_strict(world):
    spawner.tick(world, world.config.enemy_interval_ms)
    assert world.enemies == []

    spawner.tick(world, 1.0)
    assert len(world.enemies) == 1
    assert world.enemy_timer == 0.0


def test_obstacle_spawns_each_interval(world):
    spawner.tick(world, world.config.obstacle_interval_ms + 1)
    assert len(world.obstacles) == 1
    assert world.obstacle_timer == 0.0


def test_power_up_drop_chance(world, scripted):
    cfg = world.config
    world.power_up_timer = cfg.power_up_interval_ms
    # obstacle and enemy timers stay below their intervals
    world.rng = scripted([0.7])
    spawner.tick(world, 1.0)
    assert world.power_ups == []

    world.power_up_timer = cfg.power_up_interval_ms
    world.rng = scripted([0.1, 0.5, 0.95])
    spawner.tick(world, 1.0)
    assert len(world.power_ups) == 1
    pu = world.power_ups[0]
    assert pu.x == cfg.width
    assert pu.y == pytest.approx(0.5 * (cfg.height - cfg.power_up_size))
    assert pu.kind == PowerUpType.CHARGE_GUN


@pytest.mark.parametrize("draw, expected", [
    (0.0, PowerUpType.SHIELD),
    (0.29, PowerUpType.SHIELD),
    (0.3, PowerUpType.FAST_LASER),
    (0.59, PowerUpType.FAST_LASER),
    (0.6, PowerUpType.CHARGE_GUN),
    (0.99, PowerUpType.CHARGE_GUN),
])
def test_power_up_weights(world, scripted, draw, expected):
    world.rng = scripted([draw])
    assert spawner.choose_power_up_type(world) == expected


def test_ufo_wins_when_both_rare_draws_succeed(world, scripted):
    world.rng = scripted([0.9, 0.05, 0.01])
    assert spawner.choose_enemy_kind(world) == EnemyKind.UFO


def test_blob_when_ufo_already_present(world, scripted):
    world.has_ufo = True
    world.rng = scripted([0.9, 0.01])
    assert spawner.choose_enemy_kind(world) == EnemyKind.BLOB


@pytest.mark.parametrize("first, expected", [(0.2, EnemyKind.MOVING), (0.7, EnemyKind.DRIFTING)])
def test_basic_kind_split(world, scripted, first, expected):
    world.rng = scripted([first, 0.5, 0.5])
    assert spawner.choose_enemy_kind(world) == expected


def test_presence_flags_block_rare_kinds(world):
    world.has_ufo = True
    world.has_blob = True
    world.rng = random.Random(3)
    kinds = {spawner.choose_enemy_kind(world) for _ in range(2000)}
    assert kinds == {EnemyKind.MOVING, EnemyKind.DRIFTING}


def test_spawn_ufo_sets_presence(world):
    ufo = spawner.spawn_enemy(world, EnemyKind.UFO)
    assert world.has_ufo
    assert ufo.health == world.config.ufo_health
    assert ufo.x == world.config.width
    assert 0 <= ufo.y <= world.config.height - ufo.height
    assert world.sounds == [Sound.UFO_PRESENCE]


def test_spawn_blob_starts_on_the_right(world):
    blob = spawner.spawn_enemy(world, EnemyKind.BLOB)
    assert world.has_blob
    assert blob.health == world.config.blob_health
    assert blob.phase == OnRight(timer=0.0)
    assert world.sounds == [Sound.BLOB_PRESENCE]


def test_spawn_basic_has_one_health(world):
    enemy = spawner.spawn_enemy(world, EnemyKind.DRIFTING)
    assert enemy.health == 1
    assert enemy.phase is None
    assert -1 <= enemy.dir_x <= 1
    assert not world.has_ufo and not world.has_blob


def test_obstacle_gap_geometry(world):
    cfg = world.config
    for _ in range(200):
        obstacle = spawner.spawn_obstacle(world)
        assert cfg.obstacle_min_height <= obstacle.top_height
        assert obstacle.top_height <= cfg.height - cfg.obstacle_gap - cfg.obstacle_min_height
        assert obstacle.bottom_y - obstacle.top_height == pytest.approx(cfg.obstacle_gap)
        assert 20 <= obstacle.shade < 60
        for light in obstacle.windows:
            assert 0 <= light.row < cfg.obstacle_window_rows
            assert 0 <= light.col < cfg.obstacle_window_cols


@pytest.mark.parametrize("kind", [EnemyKind.UFO, EnemyKind.BLOB])
def test_second_rare_enemy_is_refused(world, kind):
    spawner.spawn_enemy(world, kind)
    with pytest.raises(ValueError):
        spawner.spawn_enemy(world, kind)
    assert sum(1 for e in world.enemies if e.kind == kind) == 1


def test_ufo_and_blob_can_coexist(world):
    spawner.spawn_enemy(world, EnemyKind.UFO)
    spawner.spawn_enemy(world, EnemyKind.BLOB)
    assert world.has_ufo and world.has_blob
    assert len(world.enemies) == 2
