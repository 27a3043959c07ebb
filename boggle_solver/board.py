"""A 4x4 Boggle board: tile values by (x, y) position."""

import random
from typing import Iterator, Sequence

from boggle_solver.dice import POSSIBLE_LETTERS, roll_dice
from boggle_solver.neighbors import NEIGHBORS44, Position

BOARD_SIZE = 4
TILE_WIDTH = 3


class BoardError(ValueError):
    """The text of a board could not be parsed."""


class InvalidLetterError(BoardError):
    def __init__(self, letter: str):
        super().__init__(f"Bad letter: '{letter}'")
        self.letter = letter


class InvalidDimensionsError(BoardError):
    def __init__(self):
        super().__init__("Invalid board dimensions.")


class Board:
    _rows: tuple[tuple[str, ...], ...]

    def __init__(self, rows: Sequence[Sequence[str]]):
        """rows[y][x] is the tile at (x, y)."""
        assert len(rows) == BOARD_SIZE
        assert all(len(row) == BOARD_SIZE for row in rows)
        self._rows = tuple(tuple(row) for row in rows)

    @staticmethod
    def random(rng: random.Random | None = None) -> "Board":
        faces = roll_dice(rng)
        return Board(
            [faces[y * BOARD_SIZE : (y + 1) * BOARD_SIZE] for y in range(BOARD_SIZE)]
        )

    @staticmethod
    def from_text(text: str) -> "Board":
        rows = []
        for line in text.split("\n"):
            line = line.strip()
            if not line:
                continue
            letters = [let.upper() for let in line.split()]
            for letter in letters:
                if letter not in POSSIBLE_LETTERS:
                    raise InvalidLetterError(letter)
            rows.append(letters)
        if len(rows) != BOARD_SIZE or not all(len(row) == BOARD_SIZE for row in rows):
            raise InvalidDimensionsError()
        return Board(rows)

    def positions(self) -> Iterator[Position]:
        """Across each row left to right, starting with the topmost row."""
        for y in range(BOARD_SIZE):
            for x in range(BOARD_SIZE):
                yield x, y

    def value_at(self, x: int, y: int) -> str:
        assert 0 <= x < BOARD_SIZE and 0 <= y < BOARD_SIZE, (x, y)
        return self._rows[y][x]

    def neighbors(self, x: int, y: int) -> frozenset[Position]:
        assert 0 <= x < BOARD_SIZE and 0 <= y < BOARD_SIZE, (x, y)
        return NEIGHBORS44[(x, y)]

    def render(self) -> str:
        return "".join(
            "".join(tile.ljust(TILE_WIDTH) for tile in row) + "\n" for row in self._rows
        )

    def __str__(self):
        return self.render()

    def __eq__(self, other):
        return isinstance(other, Board) and self._rows == other._rows

    def __hash__(self):
        return hash(self._rows)
