# backend/game.py

import random
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .board import MinesweeperBoard
from .config import GameConfig
from .utils import encode_board


class Outcome(Enum):
    INVALID = "invalid"
    HIT_MINE = "hit_mine"
    ALREADY_REVEALED = "already_revealed"
    OK = "ok"


@dataclass(frozen=True)
class SelectResult:
    outcome: Outcome
    proximity: Optional[int] = None  # only set when outcome is OK

    @property
    def ok(self) -> bool:
        return self.outcome is Outcome.OK


class GameSession:
    """
    One play-through: a populated MinesweeperBoard plus the count of
    non-mine cells still hidden. All mutation goes through select().
    """

    def __init__(self, rows: int = 26, cols: int = 26, mine_divisor: int = 8, seed: int = None, rng: random.Random = None):
        if mine_divisor < 1:
            raise ValueError(f"mine_divisor must be at least 1, got {mine_divisor}")

        self.rows = rows
        self.cols = cols
        self.mine_divisor = mine_divisor
        self.num_mines = (rows * cols) // mine_divisor
        self.seed = seed
        self.rng = rng if rng is not None else random.Random(seed)

        self.reset()

    @classmethod
    def from_config(cls, config: GameConfig) -> "GameSession":
        return cls(
            rows=config.rows,
            cols=config.cols,
            mine_divisor=config.mine_divisor,
            seed=config.seed,
        )

    @classmethod
    def from_board(cls, board: MinesweeperBoard) -> "GameSession":
        """
        Wrap an already populated board (fixed mine layout, e.g. in tests).
        Cells revealed on the board before wrapping count as already cleared.
        """
        session = cls.__new__(cls)
        session.rows = board.height
        session.cols = board.width
        session.mine_divisor = None
        session.num_mines = board.num_mines
        session.seed = None
        session.rng = None
        session._start(board)
        session.hidden_non_mine_count = board.hidden_non_mine_cells()
        return session

    def reset(self):
        """
        Start a fresh session with a newly populated board.
        """
        board = MinesweeperBoard(self.rows, self.cols)
        board.populate(self.num_mines, rng=self.rng)
        self._start(board)

    def _start(self, board: MinesweeperBoard):
        self.board = board
        self.hidden_non_mine_count = board.total_cells - board.num_mines
        self.game_over = False
        self.won = False
        self.quit = False
        self.moves_made = 0

    def select(self, row, col) -> SelectResult:
        """
        Classify a selection at (row, col) and, if it is a hidden safe cell,
        auto-reveal from there.

        INVALID, HIT_MINE and ALREADY_REVEALED leave the board untouched.
        OK carries the selected cell's proximity.
        """
        if not self.board.is_valid_coord(row, col):
            return SelectResult(Outcome.INVALID)

        cell = self.board.cell(row, col)

        if cell.is_mine:
            self._finish(won=False)
            return SelectResult(Outcome.HIT_MINE)
        if cell.revealed:
            return SelectResult(Outcome.ALREADY_REVEALED)

        self.auto_reveal(row, col)
        self.moves_made += 1
        if self.has_won():
            self._finish(won=True)

        return SelectResult(Outcome.OK, cell.proximity)

    def auto_reveal(self, row: int, col: int) -> int:
        """
        Flood-fill reveal starting at (row, col).

        Each coordinate is revealed at most once. A cell with nonzero
        proximity is revealed but not expanded; a zero-proximity cell pushes
        all of its neighbors. A zero-proximity cell has no mine neighbors, so
        the fill never reaches a mine.

        Returns the number of non-mine cells newly revealed.
        """
        revealed = 0
        stack = [(row, col)]
        while stack:
            r, c = stack.pop()
            if not self.board.is_valid_coord(r, c):
                continue

            cell = self.board.cells[r][c]
            if cell.revealed:
                continue

            cell.revealed = True
            if not cell.is_mine:
                self.hidden_non_mine_count -= 1
                revealed += 1

            if cell.proximity != 0:
                continue

            # Reversed so neighbors pop in DEFAULT_NEIGHBORS order
            for dr, dc in reversed(self.board.DEFAULT_NEIGHBORS):
                stack.append((r + dr, c + dc))
        return revealed

    def has_won(self) -> bool:
        return self.hidden_non_mine_count <= 0

    def _finish(self, won: bool):
        if self.game_over:
            return
        self.game_over = True
        self.won = won

    def abort(self):
        """End the session without a win or a loss (e.g. input closed)."""
        self.quit = True
        self.game_over = True

    def is_game_over(self) -> bool:
        return self.game_over

    def is_win(self) -> bool:
        return self.won

    def get_state(self) -> dict:
        """
        Return the visible board and session status as plain data.
        Mines are only exposed once the session is over.
        """
        return {
            "board": encode_board(self.board, xray=self.game_over).tolist(),
            "game_over": self.game_over,
            "won": self.won,
            "quit": self.quit,
            "moves_made": self.moves_made,
            "hidden_non_mine_count": self.hidden_non_mine_count,
            "dimensions": (self.rows, self.cols),
            "num_mines": self.num_mines,
        }
