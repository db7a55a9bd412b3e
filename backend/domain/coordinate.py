"""
Coordinate value type - a (row, column) position on the board.
"""

from dataclasses import dataclass
from typing import List, Sequence


@dataclass(frozen=True)
class Coordinate:
    row: int
    column: int

    def clone(self) -> "Coordinate":
        return Coordinate(self.row, self.column)

    def equals(self, other: "Coordinate") -> bool:
        return other is not None and self.row == other.row and self.column == other.column

    def offset(self, row_delta: int, column_delta: int) -> "Coordinate":
        return Coordinate(self.row + row_delta, self.column + column_delta)

    def to_list(self) -> List[int]:
        return [self.row, self.column]

    @classmethod
    def from_list(cls, values: Sequence[int]) -> "Coordinate":
        if len(values) != 2:
            raise ValueError(f"Coordinate needs exactly two values, got {list(values)}")
        row, column = values
        return cls(int(row), int(column))

    def __repr__(self):
        return f"({self.row}, {self.column})"
