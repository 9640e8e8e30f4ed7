"""
Flappy UFO: a frame-driven arcade simulation with a pygame front end.
"""

from .data_models import GameConfig, GameState, FrameSnapshot
from .simulation import SimulationLoop

__all__ = ["GameConfig", "GameState", "FrameSnapshot", "SimulationLoop"]
