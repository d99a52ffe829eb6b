"""
Snake simulation models: Board, Snake, Food and the Game orchestrator.
"""

from .types import CollisionType, Direction, FoodType, GameStatus, Position
from .config import FoodConfig, GameConfig
from .board import Board, CELL_EMPTY, CELL_FOOD, CELL_HEAD, CELL_SNAKE
from .snake import MoveResult, Snake
from .food import Food
from .high_score import HighScoreStore, InMemoryHighScoreStore, NullHighScoreStore
from .game import Game, GameState

__all__ = [
    'Board',
    'CELL_EMPTY',
    'CELL_FOOD',
    'CELL_HEAD',
    'CELL_SNAKE',
    'CollisionType',
    'Direction',
    'Food',
    'FoodConfig',
    'FoodType',
    'Game',
    'GameConfig',
    'GameState',
    'GameStatus',
    'HighScoreStore',
    'InMemoryHighScoreStore',
    'MoveResult',
    'NullHighScoreStore',
    'Position',
    'Snake',
]
