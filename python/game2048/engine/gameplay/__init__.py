from game2048.engine.gameplay.game import DEFAULT_SIZE, GamePlay
from game2048.engine.gameplay.merges import MergeTable

__all__ = ["DEFAULT_SIZE", "GamePlay", "MergeTable"]
