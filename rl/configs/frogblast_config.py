"""
Training configuration for the FrogBlast environment
Reward shaping presets and algorithm hyperparameters
"""

# Environment parameters
ENV_CONFIG = {
    # "render_mode": None,  # Don't render during training - it's too slow with parallel envs
    "width": 800,
    "height": 600,
    "dt": 1/60,
    "max_steps": 3600,  # 60 seconds at 60 FPS
    "k_enemies": 4,
    "m_bullets": 4,
    "tentacle_hits": False,
}

# ==============================================================================
# REWARD SHAPING CONFIGURATIONS
# Passed to FrogBlastEnv(reward_weights=...)
# ==============================================================================

# Reward Config 1: BASELINE (balanced)
REWARD_CONFIG_BASELINE = {
    "name": "baseline",
    "description": "Balanced dodging and shooting",
    "R_OBSTACLE": 1.0,     # Reward for clearing a pillar
    "R_KILL": 0.5,         # Reward for destroying an enemy
    "R_SCORE": 0.01,       # Reward per score point
    "R_POWERUP": 0.3,      # Reward for collecting a power-up
    "R_SHIELD_LOST": 1.0,  # Penalty per shield lost
    "R_SHOT": 0.002,       # Penalty for shooting
    "R_ALIVE": 0.001,      # Per-step survival bonus
    "R_DEATH": 5.0,        # Game over penalty
}

# Reward Config 2: SURVIVAL_FOCUS (stay alive, fly through the gaps)
REWARD_CONFIG_SURVIVAL = {
    "name": "survival",
    "description": "Prioritize survival - higher shield/death penalties, lower combat rewards",
    "R_OBSTACLE": 1.5,
    "R_KILL": 0.2,
    "R_SCORE": 0.0,
    "R_POWERUP": 0.5,      # shields matter more
    "R_SHIELD_LOST": 3.0,  # MUCH higher penalty - encourages dodging
    "R_SHOT": 0.005,
    "R_ALIVE": 0.005,
    "R_DEATH": 10.0,
}

# Reward Config 3: AGGRESSIVE (hunt UFOs and Blobs)
REWARD_CONFIG_AGGRESSIVE = {
    "name": "aggressive",
    "description": "Prioritize combat - higher kill rewards, lower penalties",
    "R_OBSTACLE": 0.5,
    "R_KILL": 1.0,
    "R_SCORE": 0.05,       # UFO/Blob bonuses dominate
    "R_POWERUP": 0.5,
    "R_SHIELD_LOST": 0.5,
    "R_SHOT": 0.0,
    "R_ALIVE": 0.0,
    "R_DEATH": 3.0,
}

# All reward configs for easy iteration
REWARD_CONFIGS = {
    "baseline": REWARD_CONFIG_BASELINE,
    "survival": REWARD_CONFIG_SURVIVAL,
    "aggressive": REWARD_CONFIG_AGGRESSIVE,
}

# ==============================================================================
# TIMESTEP CONFIGURATIONS
# ==============================================================================

TIMESTEP_CONFIGS = {
    "short": 50_000,       # Quick evaluation (50k)
    "medium": 500_000,     # Standard training (500k)
    "long": 1_600_000,     # Extended training (1.6M)
}

# ==============================================================================
# ALGORITHM HYPERPARAMETERS
# ==============================================================================

# PPO hyperparameters
PPO_CONFIG = {
    "policy": "MlpPolicy",
    "learning_rate": 3e-4,
    "n_steps": 2048,
    "batch_size": 256,
    "n_epochs": 10,
    "gamma": 0.995,  # long horizon: pillars arrive every ~90 frames
    "gae_lambda": 0.95,
    "clip_range": 0.2,
    "ent_coef": 0.01,
    "vf_coef": 0.5,
    "max_grad_norm": 0.5,
    "verbose": 1,
}

# DQN hyperparameters
DQN_CONFIG = {
    "policy": "MlpPolicy",
    "learning_rate": 1e-4,
    "buffer_size": 100_000,
    "learning_starts": 1000,
    "batch_size": 128,
    "tau": 1.0,
    "gamma": 0.995,
    "train_freq": 4,
    "gradient_steps": 1,
    "target_update_interval": 1000,
    "exploration_fraction": 0.1,
    "exploration_initial_eps": 1.0,
    "exploration_final_eps": 0.05,
    "verbose": 1,
}

# SAC hyperparameters (for continuous action approximation)
SAC_CONFIG = {
    "policy": "MlpPolicy",
    "learning_rate": 3e-4,
    "buffer_size": 100_000,
    "learning_starts": 1000,
    "batch_size": 256,
    "tau": 0.005,
    "gamma": 0.995,
    "train_freq": 1,
    "gradient_steps": 1,
    "ent_coef": "auto",
    "target_entropy": "auto",
    "verbose": 1,
}

# ==============================================================================
# TRAINING SETTINGS
# ==============================================================================

TRAINING_CONFIG = {
    "total_timesteps": 500_000,
    "save_freq": 10_000,
    "eval_freq": 5_000,
    "log_dir": "./logs",
    "model_dir": "./models",
    "tensorboard_log": "./tensorboard_logs",
}
