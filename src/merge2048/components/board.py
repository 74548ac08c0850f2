from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

Position = Tuple[int, int]


@dataclass(slots=True)
class Board:
    """Flat row-major tile buffer for a square grid.

    A value of 0 marks an empty cell; every other value is a power of two >= 2.
    ``score`` and ``last_spawned`` live here so they change together with the
    move that produced them.
    """
    grid_size: int
    cells: List[int] = field(default_factory=list)
    score: int = 0
    last_spawned: Optional[int] = None

    def __post_init__(self) -> None:
        if self.grid_size <= 0:
            raise ValueError(f"grid_size must be positive, got {self.grid_size}")
        expected = self.grid_size * self.grid_size
        if not self.cells:
            self.cells = [0] * expected
        elif len(self.cells) != expected:
            raise ValueError(f"Expected {expected} cells for a {self.grid_size}x{self.grid_size} grid, got {len(self.cells)}")
        else:
            self.cells = list(self.cells)

    def index_to_coords(self, index: int) -> Position:
        return index // self.grid_size, index % self.grid_size

    def coords_to_index(self, row: int, col: int) -> int:
        return row * self.grid_size + col

    def value_at(self, row: int, col: int) -> int:
        return self.cells[self.coords_to_index(row, col)]

    def empty_cells(self) -> List[int]:
        return [index for index, value in enumerate(self.cells) if value == 0]

    def is_full(self) -> bool:
        return 0 not in self.cells

    def max_tile(self) -> int:
        return max(self.cells)


@dataclass(frozen=True, slots=True)
class BoardSnapshot:
    """Read-only view handed to renderers."""
    grid_size: int
    cells: Tuple[int, ...]
    score: int
    last_spawned: Optional[Position]
    finished: bool

    def value_at(self, row: int, col: int) -> int:
        return self.cells[row * self.grid_size + col]

    def rows(self) -> List[Tuple[int, ...]]:
        n = self.grid_size
        return [self.cells[r * n:(r + 1) * n] for r in range(n)]
