"""Tilt-and-merge engine for the 2048 sliding-tile game."""

from game2048.engine.gameplay import DEFAULT_SIZE, GamePlay
from game2048.engine.gamestate import MAX_PIECE
from game2048.models import Board, Side, Tile

__all__ = ["DEFAULT_SIZE", "MAX_PIECE", "Board", "GamePlay", "Side", "Tile"]
