"""
Plotting script for FrogBlast RL results.
Generates learning curves, algorithm comparison and a text summary.
"""

import os
import argparse
import pandas as pd
import numpy as np
import matplotlib.pyplot as plt
from typing import Dict, Optional

COLORS = {"dqn": "#2ecc71", "ppo": "#3498db", "sac": "#e74c3c"}


def load_metrics(log_dir: str, algo: str) -> Optional[pd.DataFrame]:
    """Load the MetricsCallback CSV for an algorithm."""
    for csv_path in (
        os.path.join(log_dir, algo, f"{algo}_metrics.csv"),
        os.path.join(log_dir, f"{algo}_metrics.csv"),
    ):
        if os.path.exists(csv_path):
            return pd.read_csv(csv_path)
    return None


def smooth(data: np.ndarray, window: int = 10) -> np.ndarray:
    """Apply rolling average smoothing."""
    if len(data) < window:
        return data
    kernel = np.ones(window) / window
    return np.convolve(data, kernel, mode="valid")


def _plot_smoothed(ax, df: pd.DataFrame, column: str, window: int, **kwargs):
    values = df[column].values
    smoothed = smooth(values, window)
    ax.plot(df["timestep"].values[:len(smoothed)], smoothed, linewidth=2, **kwargs)
    return values


def plot_learning_curve(
    df: pd.DataFrame,
    algo: str,
    output_dir: str,
    window: int = 50,
):
    """Plot learning curves for a single algorithm."""
    fig, axes = plt.subplots(2, 2, figsize=(14, 10))
    fig.suptitle(f"{algo.upper()} Learning Curves", fontsize=16, fontweight="bold")

    ax = axes[0, 0]
    rewards = _plot_smoothed(ax, df, "reward", window, label=f"{algo} (smoothed)")
    ax.set_xlabel("Timesteps")
    ax.set_ylabel("Episode Reward")
    ax.set_title("Episode Reward vs Timesteps")
    ax.legend()
    ax.grid(True, alpha=0.3)

    ax = axes[0, 1]
    _plot_smoothed(ax, df, "score", window, color="purple")
    ax.set_xlabel("Timesteps")
    ax.set_ylabel("Game Score")
    ax.set_title("Game Score vs Timesteps")
    ax.grid(True, alpha=0.3)

    ax = axes[1, 0]
    _plot_smoothed(ax, df, "obstacles", window, color="orange", label="pillars cleared")
    _plot_smoothed(ax, df, "kills", window, color="red", label="kills")
    ax.set_xlabel("Timesteps")
    ax.set_ylabel("Per Episode")
    ax.set_title("Pillars Cleared / Enemies Killed")
    ax.legend()
    ax.grid(True, alpha=0.3)

    ax = axes[1, 1]
    ax.hist(rewards, bins=50, alpha=0.7, edgecolor="black")
    ax.axvline(np.mean(rewards), color="red", linestyle="--", label=f"Mean: {np.mean(rewards):.2f}")
    ax.set_xlabel("Episode Reward")
    ax.set_ylabel("Frequency")
    ax.set_title("Reward Distribution")
    ax.legend()
    ax.grid(True, alpha=0.3)

    plt.tight_layout()

    os.makedirs(output_dir, exist_ok=True)
    save_path = os.path.join(output_dir, f"{algo}_learning_curve.png")
    plt.savefig(save_path, dpi=150, bbox_inches="tight")
    plt.close()

    print(f"Saved {algo} learning curve to {save_path}")
    return save_path


def plot_comparison(
    data: Dict[str, pd.DataFrame],
    output_dir: str,
    window: int = 50,
):
    """Plot reward / score comparison across algorithms."""
    fig, axes = plt.subplots(1, 3, figsize=(18, 5))
    fig.suptitle("Algorithm Comparison", fontsize=16, fontweight="bold")

    present = {algo: df for algo, df in data.items() if df is not None and len(df) > 0}

    for ax, column, label in ((axes[0], "reward", "Episode Reward"), (axes[1], "score", "Game Score")):
        for algo, df in present.items():
            _plot_smoothed(ax, df, column, window, label=algo.upper(), color=COLORS.get(algo))
        ax.set_xlabel("Timesteps")
        ax.set_ylabel(label)
        ax.set_title(f"{label} Comparison")
        ax.legend()
        ax.grid(True, alpha=0.3)

    # Final score box plot over the last 100 episodes
    ax = axes[2]
    if present:
        bp = ax.boxplot([df["score"].tail(100).values for df in present.values()],
                        labels=[a.upper() for a in present], patch_artist=True)
        for patch, algo in zip(bp["boxes"], present):
            patch.set_facecolor(COLORS.get(algo, "#888888"))
            patch.set_alpha(0.6)
    ax.set_ylabel("Game Score")
    ax.set_title("Final Performance (Last 100 Episodes)")
    ax.grid(True, alpha=0.3)

    plt.tight_layout()

    os.makedirs(output_dir, exist_ok=True)
    save_path = os.path.join(output_dir, "algorithm_comparison.png")
    plt.savefig(save_path, dpi=150, bbox_inches="tight")
    plt.close()

    print(f"Saved comparison plot to {save_path}")
    return save_path


def generate_summary_report(data: Dict[str, pd.DataFrame], output_dir: str):
    """Generate a text summary report."""
    report_lines = [
        "=" * 60,
        "FROGBLAST RL SUMMARY REPORT",
        "=" * 60,
        "",
    ]

    for algo, df in data.items():
        if df is None or len(df) == 0:
            continue
        final = df.tail(100)
        report_lines += [
            f"\n{algo.upper()} Results:",
            "-" * 40,
            f"  Total Episodes: {len(df)}",
            f"  Total Timesteps: {df['timestep'].max():,}",
            f"  Mean Reward: {df['reward'].mean():.2f} ± {df['reward'].std():.2f}",
            f"  Best Score: {df['score'].max()}",
            f"  Mean Episode Length: {df['length'].mean():.1f}",
            "\n  Final Performance (last 100 episodes):",
            f"    Mean Reward: {final['reward'].mean():.2f} ± {final['reward'].std():.2f}",
            f"    Mean Score: {final['score'].mean():.1f}",
            f"    Mean Pillars Cleared: {final['obstacles'].mean():.1f}",
            f"    Survival Rate: {final['survival_rate'].mean():.2%}",
        ]

    report_lines.append("\n" + "=" * 60)

    report = "\n".join(report_lines)
    print(report)

    os.makedirs(output_dir, exist_ok=True)
    report_path = os.path.join(output_dir, "experiment_summary.txt")
    with open(report_path, "w") as f:
        f.write(report)

    print(f"\nSaved summary report to {report_path}")
    return report_path


def main():
    parser = argparse.ArgumentParser(description="Plot FrogBlast RL results")
    parser.add_argument("--log-dir", type=str, default="./logs", help="Directory containing log files")
    parser.add_argument("--output-dir", type=str, default="./plots", help="Directory to save plots")
    parser.add_argument("--window", type=int, default=50, help="Smoothing window size (default: 50)")
    parser.add_argument("--algos", nargs="+", default=["dqn", "ppo", "sac"], help="Algorithms to plot")

    args = parser.parse_args()

    print(f"Loading metrics from {args.log_dir}...")

    data = {}
    for algo in args.algos:
        df = load_metrics(args.log_dir, algo)
        if df is not None:
            print(f"  Loaded {algo}: {len(df)} episodes")
        else:
            print(f"  No data found for {algo}")
        data[algo] = df

    if not any(d is not None for d in data.values()):
        print("\nNo data found! Make sure training has generated metrics files.")
        return

    for algo, df in data.items():
        if df is not None:
            plot_learning_curve(df, algo, args.output_dir, args.window)

    if sum(1 for d in data.values() if d is not None) > 1:
        plot_comparison(data, args.output_dir, args.window)

    generate_summary_report(data, args.output_dir)

    print(f"\nAll plots saved to {args.output_dir}/")


if __name__ == "__main__":
    main()
