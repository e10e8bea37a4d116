"""
Crabout: a single-screen brick breaker with a pygame-free simulation core.
"""

from .data_models import FrameInput, GameConfig, GameSnapshot, Phase
from .game_engine import GameEngine

__all__ = ["FrameInput", "GameConfig", "GameEngine", "GameSnapshot", "Phase"]
