"""Board coordinates: (row, column), linear index and algebraic name.

Board layout (rank-major, row 0 is White's back rank):
    a1=0, b1=1, ..., h1=7
    a2=8, b2=9, ..., h2=15
    ...
    a8=56, b8=57, ..., h8=63
"""

from __future__ import annotations

from dataclasses import dataclass

from chessrules.core.errors import InvalidPosition

_FILES = "abcdefgh"
_RANKS = "12345678"


def _check_coordinate(name: str, value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidPosition(f"{name} must be an int, got {value!r}")
    if not 0 <= value < 8:
        raise InvalidPosition(f"Invalid {name}: {value}. Expected 0-7.")
    return value


@dataclass(frozen=True, slots=True, order=True)
class Position:
    """Immutable, always-valid square on the board.

    Orders like its linear index: by row first, then by column.
    """

    row: int
    column: int

    def __post_init__(self) -> None:
        _check_coordinate("row", self.row)
        _check_coordinate("column", self.column)

    # ── Alternate constructors ───────────────────────────────────────────

    @classmethod
    def from_index(cls, idx: int) -> Position:
        """Square from linear index 0–63, e.g. 12 → e2."""
        if isinstance(idx, bool) or not isinstance(idx, int):
            raise InvalidPosition(f"index must be an int, got {idx!r}")
        if not 0 <= idx < 64:
            raise InvalidPosition(f"Invalid index: {idx}. Expected 0-63.")
        return cls(idx // 8, idx % 8)

    @classmethod
    def parse(cls, name: str) -> Position:
        """Parse an algebraic square name, e.g. 'e4' or 'E4'."""
        if not isinstance(name, str) or len(name) != 2:
            raise InvalidPosition(f"Invalid square name: {name!r}")
        file_char = name[0].lower()
        rank_char = name[1]
        if file_char not in _FILES or rank_char not in _RANKS:
            raise InvalidPosition(f"Invalid square name: {name!r}")
        return cls(_RANKS.index(rank_char), _FILES.index(file_char))

    @classmethod
    def coerce(cls, value: Position | str) -> Position:
        """Accept either a :class:`Position` or its algebraic name."""
        if isinstance(value, Position):
            return value
        return cls.parse(value)

    # ── Conversions ──────────────────────────────────────────────────────

    @property
    def index(self) -> int:
        return self.row * 8 + self.column

    @property
    def algebraic(self) -> str:
        return _FILES[self.column] + _RANKS[self.row]

    def offset(self, d_row: int, d_column: int) -> Position:
        """Square shifted by (*d_row*, *d_column*); raises if it leaves the board."""
        return Position(self.row + d_row, self.column + d_column)

    def __str__(self) -> str:
        return self.algebraic


ALL_POSITIONS: tuple[Position, ...] = tuple(Position.from_index(i) for i in range(64))
