import operator
import random


class OutOfBoundsError(IndexError):
    """Raised when a cell accessor is given a coordinate outside the grid."""

    def __init__(self, row, col, height, width):
        super().__init__(
            f"({row}, {col}) is outside a {height}x{width} board"
        )
        self.row = row
        self.col = col


class Cell:
    def __init__(self):
        self.is_mine = False
        self.revealed = False
        self.proximity = 0  # mines among the 8 neighbors

    def __repr__(self):
        return (
            f"Cell(is_mine={self.is_mine}, revealed={self.revealed}, "
            f"proximity={self.proximity})"
        )


class MinesweeperBoard:
    # Fixed enumeration order: top-left, then clockwise around the cell
    DEFAULT_NEIGHBORS = [
        (-1, -1), (-1, 0), (-1, 1),
        (0, 1),
        (1, 1), (1, 0), (1, -1),
        (0, -1),
    ]

    def __init__(self, height, width):
        """
        An empty height x width grid: no mines, nothing revealed.
        Call populate() (or use from_mines()) to lay mines.
        """
        if height < 1 or width < 1:
            raise ValueError(f"Board needs at least one cell, got {height}x{width}")

        self.height = height
        self.width = width
        self.num_mines = 0
        self.cells = []
        self._init_board()

    def _init_board(self):
        self.cells = [[Cell() for _ in range(self.width)] for _ in range(self.height)]
        self.num_mines = 0

    @classmethod
    def from_mines(cls, height, width, mine_coords):
        """
        Build a board with mines at exactly the given (row, col) coordinates.
        Proximity counts are derived the same way populate() derives them.
        """
        board = cls(height, width)
        coords = set(mine_coords)
        if len(coords) >= board.total_cells:
            raise ValueError(
                f"Cannot place {len(coords)} mines on {board.total_cells} cells"
            )
        for row, col in coords:
            board._lay_mine(row, col)
        return board

    @property
    def total_cells(self):
        return self.height * self.width

    def coordinate_to_index(self, row, col):
        """
        Flat index of (row, col), or None when the coordinate is off the board.
        Only true integers count; floats, strings and bools are never valid.
        """
        if isinstance(row, bool) or isinstance(col, bool):
            return None
        try:
            row = operator.index(row)
            col = operator.index(col)
        except TypeError:
            return None
        if not (0 <= row < self.height and 0 <= col < self.width):
            return None
        return row * self.width + col

    def index_to_coordinate(self, index):
        if not 0 <= index < self.total_cells:
            raise OutOfBoundsError(index // self.width, index % self.width, self.height, self.width)
        return divmod(index, self.width)

    def is_valid_coord(self, row, col):
        return self.coordinate_to_index(row, col) is not None

    def neighbors(self, row, col):
        """In-bounds neighbors of (row, col), in DEFAULT_NEIGHBORS order."""
        result = []
        for dr, dc in self.DEFAULT_NEIGHBORS:
            nr, nc = row + dr, col + dc
            if self.is_valid_coord(nr, nc):
                result.append((nr, nc))
        return result

    def cell(self, row, col) -> Cell:
        index = self.coordinate_to_index(row, col)
        if index is None:
            raise OutOfBoundsError(row, col, self.height, self.width)
        r, c = divmod(index, self.width)
        return self.cells[r][c]

    def is_mine(self, row, col):
        return self.cell(row, col).is_mine

    def is_revealed(self, row, col):
        return self.cell(row, col).revealed

    def proximity(self, row, col):
        return self.cell(row, col).proximity

    def set_mine(self, row, col):
        """Mark (row, col) as a mine and bump its neighbors' proximity counts."""
        if self.is_mine(row, col):
            return
        self._lay_mine(row, col)

    def set_revealed(self, row, col):
        """Reveal (row, col). Returns False if it was already revealed."""
        cell = self.cell(row, col)
        if cell.revealed:
            return False
        cell.revealed = True
        return True

    def set_proximity(self, row, col, value):
        if not 0 <= value <= len(self.DEFAULT_NEIGHBORS):
            raise ValueError(f"Proximity must be between 0 and 8, got {value}")
        self.cell(row, col).proximity = value

    def _lay_mine(self, row, col):
        self.cell(row, col).is_mine = True
        self.num_mines += 1
        for nr, nc in self.neighbors(row, col):
            self.cells[nr][nc].proximity += 1

    def populate(self, num_mines, rng=None):
        """
        Place num_mines mines uniformly at random and derive proximity counts.

        Works on a list of every flat index: each draw picks a position in the
        still-unused prefix with randrange (no modulo bias), lays the mine, then
        swaps the last unused index into the drawn slot. This is a partial
        Fisher-Yates shuffle, so every mine subset is equally likely.

        Returns the list of mine coordinates in the order they were laid.
        """
        if num_mines < 0 or num_mines >= self.total_cells:
            raise ValueError(
                f"Cannot place {num_mines} mines: need 0 <= mines < {self.total_cells}"
            )
        if rng is None:
            rng = random.Random()

        # Start from a clean grid so proximities reflect only this mine set
        self._init_board()

        randomizer = list(range(self.total_cells))
        remaining = len(randomizer)
        placed = []
        for _ in range(num_mines):
            ridx = rng.randrange(remaining)
            row, col = self.index_to_coordinate(randomizer[ridx])
            self._lay_mine(row, col)
            placed.append((row, col))

            remaining -= 1
            randomizer[ridx] = randomizer[remaining]
        return placed

    def mine_coordinates(self):
        return [
            (r, c)
            for r in range(self.height)
            for c in range(self.width)
            if self.cells[r][c].is_mine
        ]

    def hidden_non_mine_cells(self):
        return sum(
            1
            for row in self.cells
            for cell in row
            if not cell.is_mine and not cell.revealed
        )


def populate(board, num_mines, rng=None):
    """Module-level alias for MinesweeperBoard.populate()."""
    return board.populate(num_mines, rng=rng)
