"""Square attack detection: the single source of truth for "in check".

Offsets are ``(d_row, d_column)``. White pawns advance toward increasing
row, Black pawns toward decreasing row.
"""

from __future__ import annotations

from chessrules.core.board import Board
from chessrules.core.enums import Color, PieceType
from chessrules.core.errors import InvalidPosition
from chessrules.core.position import ALL_POSITIONS, Position

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS

# Row step of a pawn of each color, indexed by Color.
PAWN_DIRECTION: tuple[int, int] = (1, -1)


# -- Precomputed lookup tables ---------------------------------------------


def _build_targets(
    offsets: tuple[tuple[int, int], ...],
) -> tuple[tuple[Position, ...], ...]:
    targets: list[tuple[Position, ...]] = []
    for pos in ALL_POSITIONS:
        moves: list[Position] = []
        for d_row, d_column in offsets:
            try:
                moves.append(pos.offset(d_row, d_column))
            except InvalidPosition:
                continue
        targets.append(tuple(moves))
    return tuple(targets)


def _build_rays(
    directions: tuple[tuple[int, int], ...],
) -> tuple[tuple[tuple[Position, ...], ...], ...]:
    rays_per_square: list[tuple[tuple[Position, ...], ...]] = []
    for pos in ALL_POSITIONS:
        square_rays: list[tuple[Position, ...]] = []
        for d_row, d_column in directions:
            row = pos.row + d_row
            column = pos.column + d_column
            ray: list[Position] = []
            while 0 <= row < 8 and 0 <= column < 8:
                ray.append(Position(row, column))
                row += d_row
                column += d_column
            square_rays.append(tuple(ray))
        rays_per_square.append(tuple(square_rays))
    return tuple(rays_per_square)


def _pawn_offsets(color: Color) -> tuple[tuple[int, int], ...]:
    step = PAWN_DIRECTION[color]
    return ((step, -1), (step, 1))


KNIGHT_TARGETS = _build_targets(KNIGHT_OFFSETS)
KING_TARGETS = _build_targets(KING_OFFSETS)
# [color][square] -> squares a pawn of that color on the square attacks.
PAWN_TARGETS = (
    _build_targets(_pawn_offsets(Color.WHITE)),
    _build_targets(_pawn_offsets(Color.BLACK)),
)
# [color][square] -> squares a pawn of that color would attack the square from.
_PAWN_ATTACKER_SQUARES = (
    _build_targets(tuple((-dr, -dc) for dr, dc in _pawn_offsets(Color.WHITE))),
    _build_targets(tuple((-dr, -dc) for dr, dc in _pawn_offsets(Color.BLACK))),
)

BISHOP_RAYS = _build_rays(BISHOP_DIRS)
ROOK_RAYS = _build_rays(ROOK_DIRS)
QUEEN_RAYS = _build_rays(QUEEN_DIRS)

_DIAGONAL_SLIDERS = (PieceType.BISHOP, PieceType.QUEEN)
_ORTHOGONAL_SLIDERS = (PieceType.ROOK, PieceType.QUEEN)


# -- Public API -------------------------------------------------------------


def attackers_of(board: Board, target: Position, by: Color) -> list[Position]:
    """Squares holding a piece of *by* that attacks *target*.

    Looks outward from *target*: a pawn, knight or king of *by* on one of the
    mirrored offsets attacks it, as does the first piece met along a ray if
    it is a slider moving in that direction.
    """
    found: list[Position] = []
    sq = target.index

    for pos in _PAWN_ATTACKER_SQUARES[by][sq]:
        piece = board[pos]
        if piece is not None and piece.color == by and piece.piece_type == PieceType.PAWN:
            found.append(pos)

    for pos in KNIGHT_TARGETS[sq]:
        piece = board[pos]
        if (
            piece is not None
            and piece.color == by
            and piece.piece_type == PieceType.KNIGHT
        ):
            found.append(pos)

    for pos in KING_TARGETS[sq]:
        piece = board[pos]
        if piece is not None and piece.color == by and piece.piece_type == PieceType.KING:
            found.append(pos)

    for rays, sliders in (
        (BISHOP_RAYS[sq], _DIAGONAL_SLIDERS),
        (ROOK_RAYS[sq], _ORTHOGONAL_SLIDERS),
    ):
        for ray in rays:
            for pos in ray:
                piece = board[pos]
                if piece is None:
                    continue
                if piece.color == by and piece.piece_type in sliders:
                    found.append(pos)
                break

    return found


def is_attacked(board: Board, target: Position, by: Color) -> bool:
    """Is *target* reachable by any piece of *by*, ignoring king safety?"""
    sq = target.index

    for pos in _PAWN_ATTACKER_SQUARES[by][sq]:
        piece = board[pos]
        if piece is not None and piece.color == by and piece.piece_type == PieceType.PAWN:
            return True

    for pos in KNIGHT_TARGETS[sq]:
        piece = board[pos]
        if (
            piece is not None
            and piece.color == by
            and piece.piece_type == PieceType.KNIGHT
        ):
            return True

    for pos in KING_TARGETS[sq]:
        piece = board[pos]
        if piece is not None and piece.color == by and piece.piece_type == PieceType.KING:
            return True

    for ray in BISHOP_RAYS[sq]:
        for pos in ray:
            piece = board[pos]
            if piece is None:
                continue
            if piece.color == by and piece.piece_type in _DIAGONAL_SLIDERS:
                return True
            break

    for ray in ROOK_RAYS[sq]:
        for pos in ray:
            piece = board[pos]
            if piece is None:
                continue
            if piece.color == by and piece.piece_type in _ORTHOGONAL_SLIDERS:
                return True
            break

    return False


def is_in_check(board: Board, color: Color) -> bool:
    """Is *color*'s king attacked by the opponent? Raises ``NoKing``."""
    return is_attacked(board, board.king_position(color), color.opposite)
