"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from chessrules.core.enums import Color, PieceType

_TYPE_LETTERS: dict[PieceType, str] = {
    PieceType.PAWN: "p",
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.ROOK: "r",
    PieceType.QUEEN: "q",
    PieceType.KING: "k",
}
_LETTER_TYPES: dict[str, PieceType] = {v: k for k, v in _TYPE_LETTERS.items()}

# U+2654 is the white king; each colour runs king, queen, rook, bishop, knight, pawn.
_GLYPH_ORDER = (
    PieceType.KING,
    PieceType.QUEEN,
    PieceType.ROOK,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.PAWN,
)
_GLYPHS: dict[tuple[Color, PieceType], str] = {
    (color, ptype): chr(0x2654 + 6 * color + i)
    for color in Color
    for i, ptype in enumerate(_GLYPH_ORDER)
}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable piece value. Carries no identity across moves."""

    color: Color
    piece_type: PieceType

    def __str__(self) -> str:
        """Piece letter (uppercase = white, lowercase = black)."""
        letter = _TYPE_LETTERS[self.piece_type]
        return letter.upper() if self.color == Color.WHITE else letter

    @property
    def symbol(self) -> str:
        """Unicode chess glyph, e.g. ♞ for a black knight."""
        return _GLYPHS[(self.color, self.piece_type)]

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from its letter, e.g. 'N' → white knight."""
        ptype = _LETTER_TYPES.get(char.lower()) if len(char) == 1 else None
        if ptype is None:
            raise ValueError(f"Invalid piece character: {char!r}")
        return cls(Color.WHITE if char.isupper() else Color.BLACK, ptype)
