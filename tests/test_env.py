import numpy as np
import pytest

from game.frogblast import FrogBlastEnv, GameConfig
from game.frogblast.entities import Weapon, WeaponType
from game.frogblast.frogblast_env import DEFAULT_REWARD

INFO_KEYS = {
    "score", "shields", "game_over", "weapon", "kills", "obstacles_passed",
    "shields_lost", "power_ups", "num_enemies", "num_enemy_bullets", "step",
}


@pytest.fixture
def env():
    env = FrogBlastEnv(render_mode=None)
    yield env
    env.close()


def test_reset_returns_valid_observation(env):
    obs, info = env.reset(seed=0)
    assert obs.shape == env.observation_space.shape
    assert obs.dtype == np.float32
    assert env.observation_space.contains(obs)
    assert set(info) == INFO_KEYS
    assert info["score"] == 0
    assert info["shields"] == 3


def test_observation_size_follows_slots():
    env = FrogBlastEnv(k_enemies=2, m_bullets=6)
    assert env.observation_space.shape == (9 + 6 + 2 * 4 + 6 * 4 + 3,)


def test_random_rollout_stays_in_bounds(env):
    env.reset(seed=1)
    env.action_space.seed(1)
    for _ in range(600):
        obs, reward, terminated, truncated, info = env.step(env.action_space.sample())
        assert env.observation_space.contains(obs)
        assert isinstance(reward, float)
        assert set(info) == INFO_KEYS
        if terminated or truncated:
            break


def test_idle_step_reward_is_alive_bonus(env):
    env.reset(seed=2)
    _, reward, terminated, truncated, _ = env.step(np.array([0, 0]))
    assert not terminated and not truncated
    assert reward == pytest.approx(DEFAULT_REWARD["R_ALIVE"])


def test_shot_is_penalised(env):
    env.reset(seed=2)
    _, reward, _, _, _ = env.step(np.array([0, 1]))
    assert reward == pytest.approx(DEFAULT_REWARD["R_ALIVE"] - DEFAULT_REWARD["R_SHOT"])


def test_trigger_level_drives_charge_gun(env):
    env.reset(seed=3)
    env.sim.world.player.weapon = Weapon(type=WeaponType.CHARGE_GUN, ammo=50, cooldown=400)
    for _ in range(10):
        env.step(np.array([0, 1]))
    assert env.sim.world.player.charge_level == 10
    assert env.sim.world.player_bullets == []

    env.step(np.array([0, 0]))
    assert len(env.sim.world.player_bullets) == 6
    assert env.sim.world.player.weapon.ammo == 49


def test_truncates_at_max_steps():
    env = FrogBlastEnv(max_steps=5)
    env.reset(seed=4)
    for _ in range(4):
        _, _, _, truncated, _ = env.step(np.array([0, 0]))
        assert not truncated
    _, _, _, truncated, info = env.step(np.array([0, 0]))
    assert truncated
    assert info["step"] == 5


def test_death_terminates_with_penalty(env):
    env.reset(seed=5)
    env.sim.world.shields = 0
    env.sim.world.player.y = -5.0
    _, reward, terminated, _, info = env.step(np.array([0, 0]))
    assert terminated
    assert info["game_over"]
    assert reward == pytest.approx(-DEFAULT_REWARD["R_DEATH"])


def test_same_seed_same_trajectory():
    a = FrogBlastEnv()
    b = FrogBlastEnv()
    obs_a, _ = a.reset(seed=7)
    obs_b, _ = b.reset(seed=7)
    np.testing.assert_array_equal(obs_a, obs_b)
    actions = np.random.default_rng(0).integers(0, 2, size=(300, 2))
    for action in actions:
        obs_a, r_a, *_ = a.step(action)
        obs_b, r_b, *_ = b.step(action)
        np.testing.assert_array_equal(obs_a, obs_b)
        assert r_a == r_b


def test_reward_overrides_only_take_reward_keys():
    env = FrogBlastEnv(reward_weights={"name": "custom", "R_DEATH": 1.0})
    assert env.reward_weights["R_DEATH"] == 1.0
    assert "name" not in env.reward_weights


def test_tentacle_flag_reaches_config():
    assert FrogBlastEnv(tentacle_hits=True).config.tentacle_hits


@pytest.mark.parametrize("kwargs", [{"obs_mode": "pixels"}, {"render_mode": "ansi"}])
def test_rejects_unknown_modes(kwargs):
    with pytest.raises(ValueError):
        FrogBlastEnv(**kwargs)


def test_rgb_array_render_is_headless():
    env = FrogBlastEnv(render_mode="rgb_array")
    env.reset(seed=0)
    frame = env.render()
    assert frame.shape == (env.height, env.width, 3)


def test_supplied_config_is_kept():
    env = FrogBlastEnv(config=GameConfig(width=1024, height=768, tentacle_hits=True))
    assert env.config.width == 1024
    assert env.config.height == 768
    assert env.config.tentacle_hits
    assert (env.width, env.height) == (1024, 768)
    obs, _ = env.reset(seed=0)
    assert env.observation_space.contains(obs)


def test_keywords_override_supplied_config():
    env = FrogBlastEnv(width=640, config=GameConfig(width=1024, height=768, tentacle_hits=True))
    assert env.config.width == 640
    assert env.config.height == 768
    assert env.config.tentacle_hits
