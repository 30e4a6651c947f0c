"""
Game configuration
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from .entities import PowerUpType


@dataclass(frozen=True)
class GameConfig:
    """All simulation tunables. Times are milliseconds, distances pixels,
    speeds pixels per frame unless noted."""

    # Arena
    width: int = 800
    height: int = 600

    # Player physics
    gravity: float = 0.1
    jump_force: float = -4.0
    player_x: float = 100.0
    player_size: float = 40.0

    # Shields / invulnerability
    max_shields: int = 3
    invulnerability_ms: float = 1000.0

    # World scroll
    scroll_speed: float = 2.0
    scroll_decay: float = 0.01  # per frame during game over

    # Weapons
    default_cooldown_ms: float = 400.0
    laser_cooldown_ms: float = 50.0
    charge_cooldown_ms: float = 400.0
    power_up_ammo: int = 50
    max_charge: float = 100.0
    charge_rate: float = 1.0  # per frame
    charge_sound_interval_ms: float = 100.0
    default_bullet_speed: float = 10.0
    laser_bullet_speed: float = 30.0
    charge_bullet_speed: float = 8.0
    default_bullet_size: Tuple[float, float] = (10.0, 5.0)
    laser_bullet_size: Tuple[float, float] = (10.0, 6.0)
    charge_bullet_size: Tuple[float, float] = (30.0, 30.0)

    # Spawner
    enemy_interval_ms: float = 2000.0
    power_up_interval_ms: float = 2000.0
    obstacle_interval_ms: float = 1500.0
    power_up_drop_chance: float = 0.6
    power_up_weights: Tuple[Tuple[PowerUpType, float], ...] = (
        (PowerUpType.SHIELD, 0.3),
        (PowerUpType.FAST_LASER, 0.3),
        (PowerUpType.CHARGE_GUN, 0.4),
    )
    ufo_spawn_chance: float = 0.1
    blob_spawn_chance: float = 0.05

    # Enemies
    enemy_size: float = 40.0
    enemy_speed: float = 2.0
    moving_enemy_speed: float = 3.0
    enemy_move_interval_ms: float = 500.0
    basic_health: int = 1
    ufo_health: int = 5
    blob_health: int = 8
    basic_score: int = 10
    ufo_score: int = 50
    blob_score: int = 75

    # Enemy fire
    enemy_shoot_cooldown_ms: float = 2000.0
    ufo_shoot_cooldown_ms: float = 1000.0
    blob_shoot_cooldown_ms: float = 1500.0
    enemy_bullet_speed: float = 5.0
    ufo_bullet_speed: float = 10.0
    blob_bullet_speed: float = 8.0
    enemy_bullet_size: Tuple[float, float] = (10.0, 5.0)
    ufo_bullet_size: Tuple[float, float] = (8.0, 8.0)
    blob_bullet_size: Tuple[float, float] = (15.0, 15.0)
    blob_burst_directions: int = 8

    # Blob phases
    blob_right_fraction: float = 0.3
    blob_right_dwell_ms: float = 5000.0
    blob_left_dwell_ms: float = 3000.0
    blob_return_speed: float = 8.0
    blob_pursuit_weight: float = 0.7
    blob_chase_multiplier: float = 1.5

    # Tentacles
    tentacle_count: int = 8
    tentacle_length: float = 120.0
    tentacle_width: float = 5.0
    tentacle_angle_step: float = 0.001
    tentacle_phase_step: float = 0.005
    tentacle_wiggle_step: float = 0.01
    tentacle_hits: bool = False

    # Power-ups
    power_up_size: float = 30.0

    # Obstacles
    obstacle_gap: float = 250.0
    obstacle_min_height: float = 50.0
    obstacle_width: float = 50.0
    obstacle_window_rows: int = 20
    obstacle_window_cols: int = 3

    # Explosions
    explosion_particles: int = 30
    explosion_duration_ms: float = 1000.0
    particle_gravity: float = 0.1

    # Background (count, brightness, size) per parallax layer
    star_layers: Tuple[Tuple[int, float, float], ...] = (
        (150, 0.2, 1.0),
        (80, 0.4, 2.0),
        (20, 0.8, 3.0),
    )

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Arena must have a positive size, got {self.width}x{self.height}")
        if self.max_shields < 0:
            raise ValueError("max_shields must be >= 0")
        total = sum(w for _, w in self.power_up_weights)
        if abs(total - 1.0) > 1e-6:
            raise ValueError(f"power_up_weights must sum to 1.0, got {total}")
        if self.obstacle_gap + 2 * self.obstacle_min_height > self.height:
            raise ValueError("obstacle gap does not fit in the arena")

    @property
    def blob_right_zone(self) -> float:
        """Left edge of the band the Blob patrols while on the right."""
        return self.width - self.width * self.blob_right_fraction
