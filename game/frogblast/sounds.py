"""
Sound cues emitted by the simulation. Playback belongs to the host.
"""

from enum import Enum


class Sound(str, Enum):
    SHOOT = "shoot"
    LASER = "laser"
    EXPLOSION = "explosion"
    HIT = "hit"
    POWER_UP = "power_up"
    GAME_OVER = "game_over"
    SHIELD_RECHARGE = "shield_recharge"
    ENEMY_DEATH = "enemy_death"
    ENEMY_SHOOT = "enemy_shoot"
    UFO_SHOOT = "ufo_shoot"
    UFO_HIT = "ufo_hit"
    UFO_DEATH = "ufo_death"
    UFO_PRESENCE = "ufo_presence"
    CHARGE = "charge"
    BLOB_PRESENCE = "blob_presence"
    BLOB_SHOOT = "blob_shoot"
