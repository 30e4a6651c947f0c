"""
FrogBlastEnv - gymnasium wrapper around the FrogBlast simulation
-----------------------------------------------------------------
- Side-scrolling frog that falls under gravity, jumps, and shoots
- Gymnasium API
- Discrete MultiDiscrete action space: [jump(2), trigger held(2)]
- Vector observation: player state + nearest obstacles, enemies,
  enemy bullets and power-up
- Arcade rendering (window opened lazily, only for render_mode="human")

Install:
    pip install gymnasium arcade numpy

Quick test:
    python -m game.frogblast.frogblast_env
"""

from __future__ import annotations

import math
import random
from dataclasses import replace
from typing import Any, Dict, List, Optional

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from .config import GameConfig
from .entities import EnemyKind, PowerUpType, WeaponType
from .simulation import Simulation
from .utils import clamp
from .world import Stats

DEFAULT_REWARD = {
    "R_OBSTACLE": 1.0,     # pillar cleared
    "R_KILL": 0.5,         # enemy destroyed
    "R_SCORE": 0.01,       # per score point (kill bonuses scale with enemy type)
    "R_POWERUP": 0.3,      # power-up collected
    "R_SHIELD_LOST": 1.0,  # penalty per shield lost
    "R_SHOT": 0.002,       # penalty per shot fired
    "R_ALIVE": 0.001,      # per-step survival bonus
    "R_DEATH": 5.0,        # game over penalty
}


def seed_everything(py_seed: Optional[int]):
    """Seed all random number generators"""
    if py_seed is None:
        return
    random.seed(py_seed)
    np.random.seed(py_seed)


_WEAPONS = [WeaponType.DEFAULT, WeaponType.FAST_LASER, WeaponType.CHARGE_GUN]
_ENEMY_CODE = {
    EnemyKind.MOVING: -1.0,
    EnemyKind.DRIFTING: -0.5,
    EnemyKind.UFO: 0.5,
    EnemyKind.BLOB: 1.0,
}
_POWER_UP_CODE = {
    PowerUpType.SHIELD: -1.0,
    PowerUpType.FAST_LASER: 0.0,
    PowerUpType.CHARGE_GUN: 1.0,
}


class FrogBlastEnv(gym.Env):
    """Side-scrolling shoot-em-up environment backed by ``Simulation``"""

    metadata = {"render_modes": ["human", "rgb_array"], "render_fps": 60}

    def __init__(
        self,
        render_mode: Optional[str] = None,
        obs_mode: str = "vector",
        width: Optional[int] = None,
        height: Optional[int] = None,
        dt: float = 1 / 60,
        max_steps: int = 3600,  # 60s at 60 FPS
        k_enemies: int = 4,
        m_bullets: int = 4,
        tentacle_hits: Optional[bool] = None,
        reward_weights: Optional[Dict[str, float]] = None,
        config: Optional[GameConfig] = None,
    ):
        super().__init__()

        if obs_mode != "vector":
            raise ValueError(f"Unsupported obs_mode {obs_mode!r}; only 'vector' is implemented.")
        if render_mode is not None and render_mode not in self.metadata["render_modes"]:
            raise ValueError(f"Unsupported render_mode {render_mode!r}")
        self.render_mode = render_mode
        self.obs_mode = obs_mode

        # explicit keywords override the matching config fields
        overrides = {
            name: value
            for name, value in (("width", width), ("height", height), ("tentacle_hits", tentacle_hits))
            if value is not None
        }
        self.config = replace(config or GameConfig(), **overrides)
        self.width = self.config.width
        self.height = self.config.height
        self.dt = dt
        self.max_steps = max_steps

        # Observation config
        self.k_enemies = k_enemies
        self.m_bullets = m_bullets

        self.reward_weights = dict(DEFAULT_REWARD)
        if reward_weights:
            self.reward_weights.update({k: v for k, v in reward_weights.items() if k.startswith("R_")})

        # Action space:
        # jump: 0/1
        # trigger: 0 released / 1 held
        self.action_space = spaces.MultiDiscrete([2, 2])

        # Player: y(1) velocity(1) shields(1) invulnerable(1) weapon one-hot(3) ammo(1) charge(1)
        # Obstacles: 2 x (dx, top, bottom)
        # Each enemy: rel pos(2) health(1) kind(1)
        # Each enemy bullet: rel pos(2) vel(2)
        # Power-up: rel pos(2) kind(1)
        obs_dim = 9 + 6 + (self.k_enemies * 4) + (self.m_bullets * 4) + 3
        self.observation_space = spaces.Box(
            low=-1.0, high=1.0, shape=(obs_dim,), dtype=np.float32
        )

        # Arcade rendering state
        self._window = None

        self.sim = Simulation(self.config)
        self._trigger_held = False
        self._step_count = 0
        self._last_score = 0
        self._last_stats = Stats()

        # Event deltas for reward computation
        self._events: Dict[str, float] = {}

    # ----------------------------
    # Gym API
    # ----------------------------

    def reset(self, seed: Optional[int] = None, options: Optional[dict] = None):
        super().reset(seed=seed)
        seed_everything(seed)

        if seed is None:
            seed = int(self.np_random.integers(0, 2**31 - 1))
        self.sim.on_restart(seed=seed)

        self._trigger_held = False
        self._step_count = 0
        self._last_score = 0
        self._last_stats = Stats()
        self._events = {}

        obs = self._get_obs()
        info = self._get_info()
        return obs, info

    def step(self, action):
        jump, trigger = int(action[0]), int(action[1])

        if jump:
            self.sim.on_jump()
        if trigger and not self._trigger_held:
            self.sim.on_fire_start()
            self._trigger_held = True
        elif not trigger and self._trigger_held:
            self.sim.on_fire_end()
            self._trigger_held = False

        self.sim.tick(self.dt * 1000.0)
        self.sim.drain_sounds()

        self._collect_events()
        reward = self._compute_reward()

        terminated = self.sim.game_over
        self._step_count += 1
        truncated = self._step_count >= self.max_steps

        obs = self._get_obs()
        info = self._get_info()

        if self.render_mode == "human":
            self.render()

        return obs, reward, terminated, truncated, info

    # ----------------------------
    # Observation / reward / info
    # ----------------------------

    def _collect_events(self):
        stats = self.sim.world.stats
        last = self._last_stats
        score = self.sim.world.score
        self._events = {
            "obstacle": float(stats.obstacles_passed - last.obstacles_passed),
            "kill": float(stats.kills - last.kills),
            "score": float(score - self._last_score),
            "power_up": float(stats.power_ups - last.power_ups),
            "shield_lost": float(stats.shields_lost - last.shields_lost),
            "shot": float(stats.shots - last.shots),
        }
        self._last_stats = replace(stats)
        self._last_score = score

    def _compute_reward(self) -> float:
        w = self.reward_weights
        ev = self._events

        reward = 0.0
        reward += w["R_OBSTACLE"] * ev.get("obstacle", 0.0)
        reward += w["R_KILL"] * ev.get("kill", 0.0)
        reward += w["R_SCORE"] * ev.get("score", 0.0)
        reward += w["R_POWERUP"] * ev.get("power_up", 0.0)

        reward -= w["R_SHIELD_LOST"] * ev.get("shield_lost", 0.0)
        reward -= w["R_SHOT"] * ev.get("shot", 0.0)

        if self.sim.game_over:
            reward -= w["R_DEATH"]
        else:
            reward += w["R_ALIVE"]

        return float(reward)

    def _get_obs(self) -> np.ndarray:
        world = self.sim.world
        cfg = self.config
        p = world.player
        px, py = p.center

        weapon = [1.0 if p.weapon.type == t else 0.0 for t in _WEAPONS]
        obs_parts: List[float] = [
            (p.y / cfg.height) * 2 - 1,
            clamp(p.velocity / 10.0, -1, 1),
            (world.shields / max(1, cfg.max_shields)) * 2 - 1,
            1.0 if world.invulnerable else -1.0,
            *weapon,
            clamp(p.weapon.ammo / 100.0, 0, 1),
            (p.charge_level / cfg.max_charge) * 2 - 1,
        ]

        # Obstacles still ahead of (or under) the player, nearest first
        ahead = sorted(
            (o for o in world.obstacles if o.x + o.width >= p.x),
            key=lambda o: o.x,
        )
        for i in range(2):
            if i < len(ahead):
                o = ahead[i]
                obs_parts += [
                    clamp((o.x - p.x) / cfg.width, -1, 1),
                    (o.top_height / cfg.height) * 2 - 1,
                    (o.bottom_y / cfg.height) * 2 - 1,
                ]
            else:
                obs_parts += [0.0, 0.0, 0.0]

        # Enemies: top-K nearest
        enemies_sorted = sorted(
            world.enemies,
            key=lambda e: (e.center[0] - px) ** 2 + (e.center[1] - py) ** 2
        )
        for i in range(self.k_enemies):
            if i < len(enemies_sorted):
                e = enemies_sorted[i]
                ex, ey = e.center
                obs_parts += [
                    clamp((ex - px) / cfg.width, -1, 1),
                    clamp((ey - py) / cfg.height, -1, 1),
                    clamp(e.health / max(1, cfg.blob_health), 0, 1),
                    _ENEMY_CODE[e.kind],
                ]
            else:
                obs_parts += [0.0, 0.0, 0.0, 0.0]

        # Enemy bullets: top-M nearest
        bullets_sorted = sorted(
            world.enemy_bullets,
            key=lambda b: (b.x - px) ** 2 + (b.y - py) ** 2
        )
        for i in range(self.m_bullets):
            if i < len(bullets_sorted):
                b = bullets_sorted[i]
                obs_parts += [
                    clamp((b.x - px) / cfg.width, -1, 1),
                    clamp((b.y - py) / cfg.height, -1, 1),
                    clamp(b.vx / 10.0, -1, 1),
                    clamp(b.vy / 10.0, -1, 1),
                ]
            else:
                obs_parts += [0.0, 0.0, 0.0, 0.0]

        # Power-up: nearest
        if world.power_ups:
            u = min(world.power_ups, key=lambda u: math.hypot(u.x - px, u.y - py))
            obs_parts += [
                clamp((u.x - px) / cfg.width, -1, 1),
                clamp((u.y - py) / cfg.height, -1, 1),
                _POWER_UP_CODE[u.kind],
            ]
        else:
            obs_parts += [0.0, 0.0, 0.0]

        obs = np.array(obs_parts, dtype=np.float32)
        return np.clip(obs, -1.0, 1.0)

    def _get_info(self) -> Dict[str, Any]:
        world = self.sim.world
        stats = world.stats
        return {
            "score": world.score,
            "shields": world.shields,
            "game_over": world.game_over,
            "weapon": world.player.weapon.type.value,
            "kills": stats.kills,
            "obstacles_passed": stats.obstacles_passed,
            "shields_lost": stats.shields_lost,
            "power_ups": stats.power_ups,
            "num_enemies": len(world.enemies),
            "num_enemy_bullets": len(world.enemy_bullets),
            "step": self._step_count,
        }

    # ----------------------------
    # Rendering with Arcade
    # ----------------------------

    def render(self):
        if self.render_mode is None:
            return None

        if self.render_mode == "human":
            if self._window is None:
                from .window import FrogBlastWindow
                self._window = FrogBlastWindow(self.sim, self.width, self.height)
            self._window.on_draw()
            return None
        return self._render_rgb_array()

    def _render_rgb_array(self):
        # TODO: read back the arcade framebuffer once an offscreen context is wired up
        return np.zeros((self.height, self.width, 3), dtype=np.uint8)

    def close(self):
        if self._window is not None:
            self._window.close()
            self._window = None


# ----------------------------
# Quick sanity test
# ----------------------------

def run_random_episode(render: bool = True, seed: int = 42):
    """Run a random episode for testing"""
    env = FrogBlastEnv(render_mode="human" if render else None)
    obs, info = env.reset(seed=seed)

    terminated = False
    truncated = False
    total = 0.0

    print("Running episode... close the window to exit early.")

    import time
    while not (terminated or truncated):
        action = env.action_space.sample()
        obs, reward, terminated, truncated, info = env.step(action)
        total += reward

        if render and env._window:
            env._window.dispatch_events()
            env._window.on_draw()
            env._window.flip()
            time.sleep(1 / 60)

    print(f"Random episode return: {total:.2f}  score: {info['score']}  steps: {info['step']}")

    env.close()
    return total, info


if __name__ == "__main__":
    # Use: python -m game.frogblast.frogblast_env
    run_random_episode(render=True)
