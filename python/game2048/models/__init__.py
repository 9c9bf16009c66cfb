from game2048.models.board import Board
from game2048.models.side import Side
from game2048.models.tile import Tile

__all__ = ["Board", "Side", "Tile"]
