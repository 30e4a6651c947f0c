"""
World state shared by every subsystem.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import List, Optional

from .config import GameConfig
from .entities import (
    Bullet,
    Enemy,
    ExplosionParticle,
    GameOver,
    Invulnerable,
    Obstacle,
    Player,
    PlayerStatus,
    PowerUp,
    Star,
    Vulnerable,
    Weapon,
    WeaponType,
)
from .sounds import Sound


@dataclass
class Stats:
    """Running counters, reset on restart"""
    kills: int = 0
    obstacles_passed: int = 0
    shields_lost: int = 0
    power_ups: int = 0
    shots: int = 0


@dataclass
class World:
    config: GameConfig
    rng: random.Random
    player: Player
    status: PlayerStatus = field(default_factory=Vulnerable)
    score: int = 0
    shields: int = 3
    scroll_speed: float = 2.0

    enemies: List[Enemy] = field(default_factory=list)
    player_bullets: List[Bullet] = field(default_factory=list)
    enemy_bullets: List[Bullet] = field(default_factory=list)
    power_ups: List[PowerUp] = field(default_factory=list)
    obstacles: List[Obstacle] = field(default_factory=list)
    particles: List[ExplosionParticle] = field(default_factory=list)
    stars: List[Star] = field(default_factory=list)

    # Spawner accumulators (ms)
    enemy_timer: float = 0.0
    power_up_timer: float = 0.0
    obstacle_timer: float = 0.0

    # Shared fire cooldowns (timestamps, ms)
    last_enemy_shot: float = float("-inf")
    last_ufo_shot: float = float("-inf")
    last_blob_shot: float = float("-inf")

    # Presence flags
    has_ufo: bool = False
    has_blob: bool = False

    # Cosmetic shield blink accumulator (ms)
    blink_timer: float = 0.0

    sounds: List[Sound] = field(default_factory=list)
    stats: Stats = field(default_factory=Stats)

    @property
    def game_over(self) -> bool:
        return isinstance(self.status, GameOver)

    @property
    def invulnerable(self) -> bool:
        return isinstance(self.status, Invulnerable)

    def emit(self, sound: Sound):
        self.sounds.append(sound)


def default_weapon(config: GameConfig) -> Weapon:
    return Weapon(type=WeaponType.DEFAULT, ammo=0, cooldown=config.default_cooldown_ms)


def create_stars(config: GameConfig, rng: random.Random) -> List[Star]:
    stars = []
    for count, brightness, size in config.star_layers:
        for _ in range(count):
            stars.append(Star(
                x=rng.random() * config.width,
                y=rng.random() * config.height,
                size=size,
                brightness=brightness,
            ))
    return stars


def new_world(config: Optional[GameConfig] = None, rng: Optional[random.Random] = None) -> World:
    """Build the initial world state."""
    config = config or GameConfig()
    rng = rng or random.Random()
    player = Player(
        x=config.player_x,
        y=config.height / 2,
        width=config.player_size,
        height=config.player_size,
        weapon=default_weapon(config),
    )
    return World(
        config=config,
        rng=rng,
        player=player,
        shields=config.max_shields,
        scroll_speed=config.scroll_speed,
        stars=create_stars(config, rng),
    )
