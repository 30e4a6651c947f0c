"""FrogBlast - side-scrolling dodge-and-shoot game core and RL environment

The core imports only the standard library; the gymnasium environment is
loaded on first access to ``FrogBlastEnv`` or ``run_random_episode``.
"""

from .config import GameConfig
from .simulation import FrameSnapshot, ManualClock, Simulation
from .sounds import Sound

_ENV_EXPORTS = ('FrogBlastEnv', 'run_random_episode')


def __getattr__(name):
    if name in _ENV_EXPORTS:
        from . import frogblast_env
        return getattr(frogblast_env, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    'GameConfig',
    'FrameSnapshot',
    'ManualClock',
    'Simulation',
    'Sound',
    'FrogBlastEnv',
    'run_random_episode',
]
