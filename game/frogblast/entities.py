"""
Game entity dataclasses
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple, Union

Color = Tuple[int, int, int]


class WeaponType(str, Enum):
    DEFAULT = "default"
    FAST_LASER = "fast_laser"
    CHARGE_GUN = "charge_gun"


class BulletType(str, Enum):
    # player
    DEFAULT = "default"
    LASER = "laser"
    CHARGE = "charge"
    # enemy
    NORMAL = "normal"
    UFO = "ufo"
    BLOB = "blob"


class EnemyKind(str, Enum):
    MOVING = "moving"
    DRIFTING = "drifting"
    UFO = "ufo"
    BLOB = "blob"


class PowerUpType(str, Enum):
    SHIELD = "shield"
    FAST_LASER = "fast_laser"
    CHARGE_GUN = "charge_gun"


class ExplosionKind(str, Enum):
    BASIC = "basic"
    UFO = "ufo"
    BLOB = "blob"
    PLAYER = "player"


# ----------------------------
# Tagged-union states
# ----------------------------

@dataclass(frozen=True)
class Vulnerable:
    """Player can take hits."""


@dataclass(frozen=True)
class Invulnerable:
    """Player ignores hits until ``since + invulnerability_ms``."""
    since: float


@dataclass(frozen=True)
class GameOver:
    """Terminal state; only explosions and scroll decay keep running."""


PlayerStatus = Union[Vulnerable, Invulnerable, GameOver]


@dataclass
class OnRight:
    """Blob patrols the right band of the screen."""
    timer: float = 0.0


@dataclass
class MovingLeft:
    """Blob chases the player."""
    timer: float = 0.0


@dataclass
class Returning:
    """Blob dashes back to the right band."""


BlobPhase = Union[OnRight, MovingLeft, Returning]


# ----------------------------
# Entities
# ----------------------------

@dataclass
class Weapon:
    """Equipped weapon"""
    type: WeaponType = WeaponType.DEFAULT
    ammo: int = 0
    cooldown: float = 400.0  # ms


@dataclass
class Player:
    """Player avatar (the frog)"""
    x: float
    y: float
    width: float = 40.0
    height: float = 40.0
    velocity: float = 0.0
    is_shooting: bool = False
    is_charging: bool = False
    charge_level: float = 0.0
    last_shot: float = float("-inf")
    last_charge_sound: float = float("-inf")
    weapon: Weapon = field(default_factory=Weapon)

    @property
    def center(self) -> Tuple[float, float]:
        return self.x + self.width / 2, self.y + self.height / 2


@dataclass
class Bullet:
    """Bullet projectile entity. ``x, y`` is the top-left corner."""
    x: float
    y: float
    width: float
    height: float
    vx: float
    vy: float
    kind: BulletType


@dataclass
class Enemy:
    """Enemy entity"""
    x: float
    y: float
    kind: EnemyKind
    health: int
    width: float = 40.0
    height: float = 40.0
    speed: float = 2.0
    move_timer: float = 0.0
    move_interval: float = 500.0
    dir_x: float = 0.0
    dir_y: float = 0.0
    phase: Optional[BlobPhase] = None  # Blob only
    tentacle_angle: float = 0.0
    tentacle_phase: float = 0.0
    wiggle_phase: float = 0.0

    @property
    def is_basic(self) -> bool:
        return self.kind in (EnemyKind.MOVING, EnemyKind.DRIFTING)

    @property
    def center(self) -> Tuple[float, float]:
        return self.x + self.width / 2, self.y + self.height / 2


@dataclass
class PowerUp:
    """Collectible power-up"""
    x: float
    y: float
    kind: PowerUpType
    width: float = 30.0
    height: float = 30.0
    pulse_timer: float = 0.0  # ms


@dataclass
class WindowLight:
    row: int
    col: int
    lit: bool


@dataclass
class Obstacle:
    """Paired top/bottom skyscraper pillar"""
    x: float
    top_height: float
    bottom_y: float
    width: float = 50.0
    passed: bool = False
    shade: int = 40
    windows: List[WindowLight] = field(default_factory=list)


@dataclass
class ExplosionParticle:
    x: float
    y: float
    vx: float
    vy: float
    size: float
    color: Color
    alpha: float = 1.0
    age: float = 0.0  # ms


@dataclass
class Star:
    """Background parallax star"""
    x: float
    y: float
    size: float
    brightness: float
