"""
Explosion particles
"""

from __future__ import annotations

import math

from .entities import ExplosionKind, ExplosionParticle
from .utils import hsl
from .world import World


def _particle_color(world: World, kind: ExplosionKind):
    rng = world.rng
    if kind == ExplosionKind.UFO:
        return hsl(0, 0, rng.random() * 30 + 50)
    if kind == ExplosionKind.BASIC:
        return hsl(rng.random() * 40, 100, 50)
    return hsl(rng.random() * 40 + 270, 100, 50)


def spawn_explosion(world: World, x: float, y: float, kind: ExplosionKind):
    """Radial burst of evenly spaced particles centred on (x, y)."""
    count = world.config.explosion_particles
    rng = world.rng
    for i in range(count):
        angle = (math.pi * 2 * i) / count
        speed = 3 + rng.random() * 3
        world.particles.append(ExplosionParticle(
            x=x,
            y=y,
            vx=math.cos(angle) * speed,
            vy=math.sin(angle) * speed,
            size=4 + rng.random() * 4,
            color=_particle_color(world, kind),
        ))


def update_explosions(world: World, dt: float):
    cfg = world.config
    for p in world.particles:
        p.x += p.vx
        p.y += p.vy
        p.vy += cfg.particle_gravity
        p.age += dt
        p.alpha = 1 - p.age / cfg.explosion_duration_ms
    world.particles = [p for p in world.particles if p.alpha > 0]
