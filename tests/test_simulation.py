import random
from dataclasses import FrozenInstanceError

import pytest

from game.frogblast import GameConfig, ManualClock, Simulation, Sound
from game.frogblast.entities import (
    Bullet,
    BulletType,
    Enemy,
    EnemyKind,
    GameOver,
    Obstacle,
    Weapon,
    WeaponType,
)

FRAME = 1000 / 60


@pytest.fixture
def sim(quiet_config):
    return Simulation(quiet_config, seed=7)


def test_initial_state(sim):
    w = sim.world
    assert w.score == 0
    assert w.shields == 3
    assert w.player.y == sim.config.height / 2
    assert w.player.weapon.type == WeaponType.DEFAULT
    assert not sim.game_over


def test_owned_clock_advances_with_ticks(sim):
    sim.tick(100.0)
    sim.tick(50.0)
    assert sim.now() == 150.0


def test_injected_clock_is_only_read(quiet_config):
    clock = ManualClock(5000.0)
    sim = Simulation(quiet_config, seed=1, clock=clock)
    sim.tick(FRAME)
    assert sim.now() == 5000.0


def test_negative_delta_is_clamped(sim):
    sim.tick(-10.0)
    assert sim.now() == 0.0


def test_jump_then_fall(sim):
    sim.on_jump()
    sim.tick(FRAME)
    y_after_jump = sim.world.player.y
    assert y_after_jump < sim.config.height / 2
    for _ in range(200):
        sim.tick(FRAME)
    assert sim.world.player.y == sim.config.height - sim.world.player.height


def test_fire_start_and_end(sim):
    sim.on_fire_start()
    sim.tick(FRAME)
    assert len(sim.world.player_bullets) == 1
    sim.on_fire_end()
    for _ in range(60):
        sim.tick(FRAME)
    assert sim.world.stats.shots == 1


def test_fire_end_without_start_is_noop(sim):
    sim.on_fire_end()
    sim.tick(FRAME)
    assert sim.world.player_bullets == []


def test_charge_release_through_events(sim):
    sim.world.player.weapon = Weapon(type=WeaponType.CHARGE_GUN, ammo=50, cooldown=400)
    sim.on_fire_start()
    for _ in range(25):
        sim.tick(FRAME)
    assert sim.world.player.charge_level == 25
    sim.on_fire_end()
    assert len(sim.world.player_bullets) == 7
    assert sim.world.player.weapon.ammo == 49


def test_drain_sounds_empties_queue(sim):
    sim.on_fire_start()
    sim.tick(FRAME)
    assert sim.drain_sounds() == [Sound.SHOOT]
    assert sim.drain_sounds() == []


def _kill_player(sim):
    sim.world.shields = 0
    sim.world.player.y = -5.0
    sim.tick(FRAME)
    assert sim.game_over


def test_game_over_freezes_world(sim):
    enemy = Enemy(x=600, y=100, kind=EnemyKind.DRIFTING, health=1)
    sim.world.enemies.append(enemy)
    _kill_player(sim)
    x = enemy.x
    y = sim.world.player.y

    sim.on_jump()
    sim.on_fire_start()
    for _ in range(10):
        sim.tick(FRAME)

    assert enemy.x == x
    assert sim.world.player.y == y
    assert sim.world.player_bullets == []
    assert not sim.world.player.is_shooting
    assert sim.world.status == GameOver()


def test_game_over_decays_scroll_and_keeps_explosions(sim):
    _kill_player(sim)
    particles = list(sim.world.particles)
    assert particles
    x0 = particles[0].x
    speed = sim.world.scroll_speed

    sim.tick(FRAME)
    assert sim.world.scroll_speed == pytest.approx(speed - sim.config.scroll_decay)
    assert particles[0].x != x0

    for _ in range(400):
        sim.tick(FRAME)
    assert sim.world.scroll_speed == 0.0
    assert sim.world.particles == []


def test_game_over_final_score(sim):
    sim.world.score = 42
    _kill_player(sim)
    assert sim.final_score == 42
    sounds = sim.drain_sounds()
    assert sounds.count(Sound.GAME_OVER) == 1


def test_restart_restores_initial_state(sim):
    w = sim.world
    w.score = 99
    w.shields = 1
    w.has_ufo = True
    w.player.weapon = Weapon(type=WeaponType.FAST_LASER, ammo=3, cooldown=50)
    w.enemies.append(Enemy(x=300, y=300, kind=EnemyKind.UFO, health=5))
    w.obstacles.append(Obstacle(x=300, top_height=100, bottom_y=350))
    w.enemy_bullets.append(Bullet(x=1, y=1, width=1, height=1, vx=0, vy=0, kind=BulletType.UFO))
    _kill_player(sim)

    sim.on_restart()
    w = sim.world
    assert not sim.game_over
    assert w.score == 0
    assert w.shields == 3
    assert w.scroll_speed == sim.config.scroll_speed
    assert w.enemies == [] and w.obstacles == [] and w.enemy_bullets == []
    assert w.particles == [] and w.power_ups == [] and w.player_bullets == []
    assert not w.has_ufo and not w.has_blob
    assert w.player.weapon.type == WeaponType.DEFAULT
    assert w.player.y == sim.config.height / 2
    assert w.player.velocity == 0.0
    assert w.stats.kills == 0


def test_same_seed_same_game():
    a = Simulation(seed=11)
    b = Simulation(seed=11)
    rng = random.Random(5)
    for _ in range(600):
        if rng.random() < 0.05:
            a.on_jump()
            b.on_jump()
        a.tick(FRAME)
        b.tick(FRAME)
    assert a.world.score == b.world.score
    assert [e.x for e in a.world.enemies] == [e.x for e in b.world.enemies]
    assert a.world.player.y == b.world.player.y


def test_blink_phase_only_while_invulnerable(sim):
    assert sim.blink_phase == 0.0
    sim.world.player.y = -5.0
    sim.tick(FRAME)
    assert sim.world.invulnerable
    sim.tick(FRAME)
    assert 0.0 <= sim.blink_phase <= 1.0
    assert sim.snapshot().blink_phase == sim.blink_phase


def test_snapshot_reflects_world(sim):
    sim.world.enemies.append(Enemy(x=600, y=100, kind=EnemyKind.UFO, health=5))
    snap = sim.snapshot()
    assert snap.score == 0
    assert snap.shields == 3
    assert snap.max_shields == 3
    assert snap.weapon == WeaponType.DEFAULT
    assert isinstance(snap.enemies, tuple)
    assert snap.enemies[0].kind == EnemyKind.UFO
    with pytest.raises(FrozenInstanceError):
        snap.score = 10


def test_long_random_run_keeps_invariants():
    cfg = GameConfig()
    sim = Simulation(cfg, seed=3)
    rng = random.Random(9)
    held = False
    for _ in range(10000):
        if rng.random() < 0.06:
            sim.on_jump()
        if rng.random() < 0.02:
            if held:
                sim.on_fire_end()
            else:
                sim.on_fire_start()
            held = not held
        sim.tick(FRAME)
        w = sim.world

        assert 0 <= w.shields <= cfg.max_shields
        assert w.player.weapon.ammo >= 0
        ufos = sum(1 for e in w.enemies if e.kind == EnemyKind.UFO)
        blobs = sum(1 for e in w.enemies if e.kind == EnemyKind.BLOB)
        assert ufos <= 1 and blobs <= 1
        assert w.has_ufo == (ufos == 1)
        assert w.has_blob == (blobs == 1)
        assert 0 <= w.player.charge_level <= cfg.max_charge
        assert w.player.y + w.player.height <= cfg.height

        if sim.game_over:
            sim.on_restart()
            held = False


def test_snapshot_is_detached_from_later_frames(sim):
    sim.world.enemies.append(Enemy(x=600, y=100, kind=EnemyKind.DRIFTING, health=1))
    sim.on_fire_start()
    sim.tick(FRAME)
    snap = sim.snapshot()
    player_y = snap.player.y
    enemy_x = snap.enemies[0].x
    bullet_x = snap.player_bullets[0].x

    for _ in range(5):
        sim.tick(FRAME)

    assert snap.player.y == player_y
    assert snap.enemies[0].x == enemy_x
    assert snap.player_bullets[0].x == bullet_x
    assert sim.world.player.y != player_y


def test_editing_a_snapshot_leaves_the_world_alone(sim):
    snap = sim.snapshot()
    snap.player.y = -100.0
    snap.player.weapon.ammo = 99
    for star in snap.stars:
        star.x = 0.0
    assert sim.world.player.y == sim.config.height / 2
    assert sim.world.player.weapon.ammo == 0
    assert any(star.x != 0.0 for star in sim.world.stars)
