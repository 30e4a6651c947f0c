"""
Scrolling scenery: skyscraper obstacles and the parallax star field
"""

from __future__ import annotations

from .world import World


def update_obstacles(world: World):
    """Scroll pillars, score each one once as it clears the player."""
    player_x = world.player.x
    for obstacle in world.obstacles:
        obstacle.x -= world.scroll_speed
        if not obstacle.passed and obstacle.x + obstacle.width < player_x:
            obstacle.passed = True
            world.score += 1
            world.stats.obstacles_passed += 1
    world.obstacles = [o for o in world.obstacles if o.x + o.width >= 0]


def update_stars(world: World):
    cfg = world.config
    for star in world.stars:
        star.x -= world.scroll_speed * star.brightness
        if star.x < -star.size:
            star.x = cfg.width + star.size
            star.y = world.rng.random() * cfg.height
