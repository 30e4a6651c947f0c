"""
Custom callback for tracking task-specific metrics during training.
Records: score, enemies killed, pillars cleared, shields lost, survival.
"""

import os
import csv
from typing import Dict, List, Any, Optional
from stable_baselines3.common.callbacks import BaseCallback


class MetricsCallback(BaseCallback):
    """
    Callback to track and log task-specific metrics per episode.
    Saves to CSV for easy plotting.
    """

    def __init__(
        self,
        log_dir: str,
        algo_name: str,
        verbose: int = 1,
    ):
        super().__init__(verbose)
        self.log_dir = log_dir
        self.algo_name = algo_name

        # Episode tracking
        self.episode_rewards: List[float] = []
        self.episode_lengths: List[int] = []
        self.episode_scores: List[float] = []
        self.episode_kills: List[float] = []
        self.episode_obstacles: List[float] = []
        self.episode_shields_lost: List[float] = []

        # CSV file
        self.csv_path: Optional[str] = None
        self.csv_file = None
        self.csv_writer = None

    def _on_training_start(self) -> None:
        """Initialize CSV file for logging."""
        os.makedirs(self.log_dir, exist_ok=True)
        self.csv_path = os.path.join(self.log_dir, f"{self.algo_name}_metrics.csv")

        self.csv_file = open(self.csv_path, "w", newline="")
        self.csv_writer = csv.writer(self.csv_file)
        self.csv_writer.writerow([
            "timestep", "episode", "reward", "length",
            "score", "kills", "obstacles", "shields_lost", "survival_rate"
        ])
        self.csv_file.flush()

        if self.verbose > 0:
            print(f"[MetricsCallback] Logging to {self.csv_path}")

    def _on_step(self) -> bool:
        """Called after each step."""
        infos = self.locals.get("infos", [])
        dones = self.locals.get("dones", [])

        for info, done in zip(infos, dones):
            # Monitor wrapper adds episode info on the terminal step
            if done and "episode" in info:
                ep_info = info["episode"]
                ep_reward = ep_info["r"]
                ep_length = ep_info["l"]

                score = info.get("score", 0)
                kills = info.get("kills", 0)
                obstacles = info.get("obstacles_passed", 0)
                shields_lost = info.get("shields_lost", 0)

                # 1.0 if the episode was truncated rather than ended by game over
                survival = 0.0 if info.get("game_over", False) else 1.0

                self.episode_rewards.append(ep_reward)
                self.episode_lengths.append(ep_length)
                self.episode_scores.append(score)
                self.episode_kills.append(kills)
                self.episode_obstacles.append(obstacles)
                self.episode_shields_lost.append(shields_lost)

                if self.csv_writer:
                    self.csv_writer.writerow([
                        self.num_timesteps,
                        len(self.episode_rewards),
                        ep_reward,
                        ep_length,
                        score,
                        kills,
                        obstacles,
                        shields_lost,
                        survival
                    ])
                    self.csv_file.flush()

                if self.verbose > 0 and len(self.episode_rewards) % 10 == 0:
                    avg_reward = sum(self.episode_rewards[-10:]) / 10
                    avg_score = sum(self.episode_scores[-10:]) / 10
                    print(f"[{self.algo_name}] Episode {len(self.episode_rewards)}, "
                          f"Timestep {self.num_timesteps}, "
                          f"Avg Reward (10 ep): {avg_reward:.2f}, "
                          f"Avg Score (10 ep): {avg_score:.1f}")

        return True

    def _on_training_end(self) -> None:
        """Cleanup CSV file."""
        if self.csv_file:
            self.csv_file.close()
            if self.verbose > 0:
                print(f"[MetricsCallback] Saved {len(self.episode_rewards)} episodes to {self.csv_path}")

    def get_summary(self) -> Dict[str, Any]:
        """Get summary statistics."""
        if not self.episode_rewards:
            return {}

        import numpy as np
        return {
            "mean_reward": np.mean(self.episode_rewards),
            "std_reward": np.std(self.episode_rewards),
            "mean_length": np.mean(self.episode_lengths),
            "total_episodes": len(self.episode_rewards),
            "mean_score": np.mean(self.episode_scores) if self.episode_scores else 0,
            "mean_kills": np.mean(self.episode_kills) if self.episode_kills else 0,
            "mean_obstacles": np.mean(self.episode_obstacles) if self.episode_obstacles else 0,
        }


class TensorboardMetricsCallback(BaseCallback):
    """
    Extended callback that logs task-specific metrics to TensorBoard.
    """

    def __init__(self, verbose: int = 0):
        super().__init__(verbose)
        self._episode_rewards = []
        self._episode_lengths = []

    def _on_step(self) -> bool:
        infos = self.locals.get("infos", [])
        dones = self.locals.get("dones", [])

        for info, done in zip(infos, dones):
            if done and "episode" in info:
                ep = info["episode"]
                self._episode_rewards.append(ep["r"])
                self._episode_lengths.append(ep["l"])

                if self.logger:
                    self.logger.record("custom/episode_reward", ep["r"])
                    self.logger.record("custom/episode_length", ep["l"])
                    if "score" in info:
                        self.logger.record("custom/final_score", info["score"])
                    if "obstacles_passed" in info:
                        self.logger.record("custom/obstacles_passed", info["obstacles_passed"])
                    if "shields" in info:
                        self.logger.record("custom/final_shields", info["shields"])

        return True
