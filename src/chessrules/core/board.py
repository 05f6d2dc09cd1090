"""Board - piece placement on an 8x8 board."""

from __future__ import annotations

from collections.abc import Iterator, Mapping

from chessrules.core.enums import Color, PieceType
from chessrules.core.errors import NoKing
from chessrules.core.piece import Piece
from chessrules.core.position import ALL_POSITIONS, Position

DEFAULT_PROMOTION = PieceType.QUEEN

# Row a pawn of each color promotes on, indexed by Color.
_PROMOTION_ROWS: tuple[int, int] = (7, 0)

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Mutable 64-slot board with a king-square cache.

    A board is owned by exactly one holder (a game or a simulation); anyone
    who needs a different state works on :meth:`copy` or :meth:`moved`.
    """

    __slots__ = ("_squares", "_king_squares")

    def __init__(self) -> None:
        self._squares: list[Piece | None] = [None] * 64
        # [color] -> king square cache (None if king missing).
        self._king_squares: list[Position | None] = [None, None]

    # -- Element access -----------------------------------------------------

    def __getitem__(self, pos: Position) -> Piece | None:
        return self._squares[pos.index]

    def __setitem__(self, pos: Position, piece: Piece | None) -> None:
        old_piece = self._squares[pos.index]
        if old_piece is not None and old_piece.piece_type == PieceType.KING:
            if self._king_squares[old_piece.color] == pos:
                self._king_squares[old_piece.color] = None

        self._squares[pos.index] = piece

        if piece is not None and piece.piece_type == PieceType.KING:
            self._king_squares[piece.color] = pos

    def piece_at(self, pos: Position) -> Piece | None:
        return self[pos]

    def place(self, pos: Position, piece: Piece | None) -> None:
        self[pos] = piece

    def is_empty(self, pos: Position) -> bool:
        return self._squares[pos.index] is None

    # -- Query helpers ------------------------------------------------------

    def pieces_of(self, color: Color) -> Iterator[tuple[Position, Piece]]:
        """Occupied squares of *color*, in index order (a1 first)."""
        for pos in ALL_POSITIONS:
            piece = self._squares[pos.index]
            if piece is not None and piece.color == color:
                yield pos, piece

    def king_position(self, color: Color) -> Position:
        """Return the king square for *color*."""
        pos = self._king_squares[color]
        if pos is None:
            # Cache can lag when one of two kings of a color was removed.
            for pos, piece in self.pieces_of(color):
                if piece.piece_type == PieceType.KING:
                    self._king_squares[color] = pos
                    return pos
            raise NoKing(f"No {color.name} king on board")
        return pos

    def snapshot(self) -> tuple[Piece | None, ...]:
        """Immutable view of all 64 slots, indexed like :attr:`Position.index`."""
        return tuple(self._squares)

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._squares = self._squares.copy()
        b._king_squares = self._king_squares.copy()
        return b

    def moved(self, from_pos: Position, to_pos: Position) -> Board:
        """New board with the piece on *from_pos* moved to *to_pos*.

        Whatever stood on *to_pos* is discarded. A pawn reaching its last
        row becomes a :data:`DEFAULT_PROMOTION` piece.
        """
        piece = self[from_pos]
        if piece is None:
            raise ValueError(f"No piece on {from_pos}")
        if (
            piece.piece_type == PieceType.PAWN
            and to_pos.row == _PROMOTION_ROWS[piece.color]
        ):
            piece = Piece(piece.color, DEFAULT_PROMOTION)

        b = self.copy()
        b[from_pos] = None
        b[to_pos] = piece
        return b

    def clear(self) -> None:
        self._squares = [None] * 64
        self._king_squares = [None, None]

    # -- Factory ------------------------------------------------------------

    @classmethod
    def empty(cls) -> Board:
        return cls()

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for column in range(8):
            b[Position(1, column)] = Piece(Color.WHITE, PieceType.PAWN)
            b[Position(6, column)] = Piece(Color.BLACK, PieceType.PAWN)

        for column, pt in enumerate(_BACK_RANK):
            b[Position(0, column)] = Piece(Color.WHITE, pt)
            b[Position(7, column)] = Piece(Color.BLACK, pt)
        return b

    @classmethod
    def from_pieces(cls, pieces: Mapping[Position | str, Piece | str]) -> Board:
        """Custom setup, e.g. ``Board.from_pieces({"e1": "K", "e8": "r"})``."""
        b = cls()
        for square, piece in pieces.items():
            pos = Position.coerce(square)
            b[pos] = piece if isinstance(piece, Piece) else Piece.from_char(piece)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(7, -1, -1):
            cells = []
            for column in range(8):
                p = self[Position(row, column)]
                cells.append(str(p) if p else ".")
            rows.append(f"{row + 1} {' '.join(cells)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
