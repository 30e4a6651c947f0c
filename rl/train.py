"""
Training script for the FrogBlast environment using Stable-Baselines3
Supports PPO, DQN, and SAC algorithms with per-episode metrics tracking.
"""

import os
import argparse
from typing import Dict, Optional

from stable_baselines3 import PPO, DQN, SAC
from stable_baselines3.common.vec_env import DummyVecEnv, VecNormalize
from stable_baselines3.common.callbacks import CheckpointCallback, EvalCallback
from stable_baselines3.common.monitor import Monitor

from game.frogblast import FrogBlastEnv
from rl.configs.frogblast_config import (
    ENV_CONFIG, PPO_CONFIG, DQN_CONFIG, SAC_CONFIG,
    REWARD_CONFIGS, TIMESTEP_CONFIGS, TRAINING_CONFIG,
)
from rl.metrics_callback import MetricsCallback, TensorboardMetricsCallback
from rl.wrappers import MultiDiscreteToBoxWrapper, MultiDiscreteToDiscreteWrapper

ALGORITHMS = {
    "ppo": (PPO, PPO_CONFIG),
    "dqn": (DQN, DQN_CONFIG),
    "sac": (SAC, SAC_CONFIG),
}


def make_env(render_mode: Optional[str] = None, seed: Optional[int] = None,
             wrap_for_sac: bool = False, wrap_for_dqn: bool = False,
             reward_weights: Optional[Dict[str, float]] = None):
    """Factory function to create the environment"""
    def _init():
        env = FrogBlastEnv(render_mode=render_mode, reward_weights=reward_weights, **ENV_CONFIG)
        if wrap_for_sac:
            env = MultiDiscreteToBoxWrapper(env)
        elif wrap_for_dqn:
            env = MultiDiscreteToDiscreteWrapper(env)
        env = Monitor(env)
        if seed is not None:
            env.reset(seed=seed)
        return env
    return _init


def train(
    algo: str = "ppo",
    total_timesteps: Optional[int] = None,
    save_dir: Optional[str] = None,
    log_dir: Optional[str] = None,
    tensorboard_log: Optional[str] = None,
    n_envs: int = 4,
    reward: str = "baseline",
):
    """Train one algorithm on FrogBlast.

    PPO runs ``n_envs`` parallel environments behind VecNormalize; DQN and
    SAC run a single environment with the matching action wrapper.
    """
    if algo not in ALGORITHMS:
        raise ValueError(f"Unknown algorithm: {algo}")
    if reward not in REWARD_CONFIGS:
        raise ValueError(f"Unknown reward config: {reward}")

    model_cls, hyperparams = ALGORITHMS[algo]
    reward_weights = REWARD_CONFIGS[reward]

    if total_timesteps is None:
        total_timesteps = TRAINING_CONFIG["total_timesteps"]
    save_dir = save_dir or os.path.join(TRAINING_CONFIG["model_dir"], algo)
    log_dir = log_dir or os.path.join(TRAINING_CONFIG["log_dir"], algo)
    tensorboard_log = tensorboard_log or os.path.join(TRAINING_CONFIG["tensorboard_log"], algo)

    os.makedirs(save_dir, exist_ok=True)
    os.makedirs(log_dir, exist_ok=True)

    if algo != "ppo":
        n_envs = 1
    wrap = {"wrap_for_dqn": algo == "dqn", "wrap_for_sac": algo == "sac"}

    print(f"\n{'='*60}")
    print(f"Training {algo.upper()} for {total_timesteps:,} timesteps...")
    print(f"Reward config: {reward} ({reward_weights['description']})")
    print(f"Using {n_envs} environment(s)")
    print(f"{'='*60}\n")

    env = DummyVecEnv([make_env(seed=i, reward_weights=reward_weights, **wrap) for i in range(n_envs)])
    eval_env = DummyVecEnv([make_env(seed=100, reward_weights=reward_weights, **wrap)])

    if algo == "ppo":
        # Normalize observations and rewards
        env = VecNormalize(env, norm_obs=True, norm_reward=True)
        eval_env = VecNormalize(eval_env, norm_obs=True, norm_reward=False, training=False)

    checkpoint_callback = CheckpointCallback(
        save_freq=max(1, TRAINING_CONFIG["save_freq"] // n_envs),
        save_path=save_dir,
        name_prefix=f"{algo}_frogblast",
    )

    eval_callback = EvalCallback(
        eval_env,
        best_model_save_path=save_dir,
        log_path=log_dir,
        eval_freq=max(1, TRAINING_CONFIG.get("eval_freq", 5000) // n_envs),
        deterministic=True,
        render=False,
    )

    metrics_callback = MetricsCallback(
        log_dir=log_dir,
        algo_name=algo,
        verbose=1,
    )

    tb_callback = TensorboardMetricsCallback(verbose=0)

    model = model_cls(
        env=env,
        tensorboard_log=tensorboard_log,
        **hyperparams
    )

    model.learn(
        total_timesteps=total_timesteps,
        callback=[checkpoint_callback, eval_callback, metrics_callback, tb_callback],
    )

    final_path = os.path.join(save_dir, f"{algo}_frogblast_final")
    model.save(final_path)
    if isinstance(env, VecNormalize):
        env.save(os.path.join(save_dir, "vec_normalize.pkl"))

    print(f"\n{'='*60}")
    print(f"{algo.upper()} Training complete! Model saved to {final_path}")
    summary = metrics_callback.get_summary()
    if summary:
        print(f"Mean Reward: {summary['mean_reward']:.2f} ± {summary['std_reward']:.2f}")
        print(f"Mean Score: {summary['mean_score']:.1f}")
        print(f"Total Episodes: {summary['total_episodes']}")
    print(f"{'='*60}\n")

    return model, metrics_callback


def main():
    parser = argparse.ArgumentParser(description="Train RL agent on FrogBlast")
    parser.add_argument(
        "--algo",
        type=str,
        default="ppo",
        choices=["ppo", "dqn", "sac", "all"],
        help="RL algorithm to use (default: ppo)",
    )
    parser.add_argument(
        "--timesteps",
        type=int,
        default=None,
        help=f"Total timesteps to train (default: {TRAINING_CONFIG['total_timesteps']})",
    )
    parser.add_argument(
        "--preset",
        type=str,
        default=None,
        choices=sorted(TIMESTEP_CONFIGS),
        help="Named timestep budget (overridden by --timesteps)",
    )
    parser.add_argument(
        "--reward",
        type=str,
        default="baseline",
        choices=sorted(REWARD_CONFIGS),
        help="Reward shaping config (default: baseline)",
    )
    parser.add_argument(
        "--n-envs",
        type=int,
        default=4,
        help="Number of parallel environments for PPO (default: 4)",
    )

    args = parser.parse_args()

    timesteps = args.timesteps
    if timesteps is None and args.preset:
        timesteps = TIMESTEP_CONFIGS[args.preset]

    algos = ["dqn", "ppo", "sac"] if args.algo == "all" else [args.algo]
    if len(algos) > 1:
        print("Training all algorithms sequentially...")
    for algo in algos:
        train(algo, total_timesteps=timesteps, n_envs=args.n_envs, reward=args.reward)


if __name__ == "__main__":
    main()
