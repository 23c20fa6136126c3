from .board import Cell, MinesweeperBoard, OutOfBoundsError, populate
from .config import GameConfig, load_config
from .game import GameSession, Outcome, SelectResult

__all__ = [
    'Cell',
    'MinesweeperBoard',
    'OutOfBoundsError',
    'populate',
    'GameConfig',
    'load_config',
    'GameSession',
    'Outcome',
    'SelectResult',
]
