"""The 4x4 letter board and the adjacency between its tiles."""

from __future__ import annotations

from dataclasses import dataclass

SIZE = 4
TILE_COUNT = SIZE * SIZE
EXIT_COMMAND = "exit"


class BoardError(ValueError):
    """Raised when the input does not describe a full board."""


class ExitRequested(Exception):
    """Raised when the user types the exit command instead of letters."""


@dataclass(frozen=True)
class Tile:
    letter: str
    index: int

    @property
    def row(self) -> int:
        return self.index // SIZE

    @property
    def col(self) -> int:
        return self.index % SIZE


def _adjacent_indices(row: int, col: int) -> tuple[int, ...]:
    last = SIZE - 1
    if row == 0:
        right = [(0, 1), (1, 1)]
        left = [(0, -1), (1, -1)]
        straight = [(1, 0)]
    elif row == last:
        right = [(0, 1), (-1, 1)]
        left = [(0, -1), (-1, -1)]
        straight = [(-1, 0)]
    else:
        right = [(-1, 1), (0, 1), (1, 1)]
        left = [(-1, -1), (0, -1), (1, -1)]
        straight = [(-1, 0), (1, 0)]
    offsets = (right if col != last else []) + (left if col != 0 else []) + straight
    return tuple((row + dr) * SIZE + col + dc for dr, dc in offsets)


class Board:
    """Sixteen lower-cased letters laid out row by row."""

    def __init__(self, letters: str) -> None:
        if len(letters) != TILE_COUNT:
            if letters == EXIT_COMMAND:
                raise ExitRequested()
            raise BoardError(f"not {TILE_COUNT} letters")
        self._tiles = tuple(
            Tile(letter.lower(), index) for index, letter in enumerate(letters)
        )
        self._adjacency = tuple(
            tuple(self._tiles[i] for i in _adjacent_indices(tile.row, tile.col))
            for tile in self._tiles
        )

    @classmethod
    def from_letters(cls, letters: str) -> Board:
        return cls(letters)

    def tiles(self) -> tuple[Tile, ...]:
        return self._tiles

    def neighbors(self, index: int) -> tuple[Tile, ...]:
        """Tiles touching the given one, in the order the search visits them."""
        return self._adjacency[index]

    def __getitem__(self, position: int | tuple[int, int]) -> Tile:
        if isinstance(position, tuple):
            row, col = position
            if not (0 <= row < SIZE and 0 <= col < SIZE):
                raise IndexError(f"position {position} is off the board")
            return self._tiles[row * SIZE + col]
        return self._tiles[position]

    def __str__(self) -> str:
        return "\n".join(
            "".join(t.letter for t in self._tiles[r * SIZE:(r + 1) * SIZE])
            for r in range(SIZE)
        )