"""
开局布局表

暗子按所在开局位置对应的棋子类型走子，这里定义标准开局摆法，
以及由它推出的 ACT_PIECE 表（位置 -> 走法类型）。
红方在下（row 0 为红方底线），黑方摆法上下镜像。
"""

from functools import lru_cache
from types import MappingProxyType
from typing import Mapping

from jieqi_rules.config import FULL_BOARD, BoardConfig
from jieqi_rules.types import Color, Piece, PieceKind, PieceType, Position, kind_of

# 底线从左到右的棋子
BACK_ROW: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.HORSE,
    PieceType.ELEPHANT,
    PieceType.ADVISOR,
    PieceType.KING,
    PieceType.ADVISOR,
    PieceType.ELEPHANT,
    PieceType.HORSE,
    PieceType.ROOK,
)
CANNON_COLS: tuple[int, ...] = (1, 7)
PAWN_COLS: tuple[int, ...] = (0, 2, 4, 6, 8)

# 每方的棋子数量
PIECE_INVENTORY: Mapping[PieceType, int] = MappingProxyType(
    {
        PieceType.ROOK: 2,
        PieceType.HORSE: 2,
        PieceType.ELEPHANT: 2,
        PieceType.ADVISOR: 2,
        PieceType.KING: 1,
        PieceType.CANNON: 2,
        PieceType.PAWN: 5,
    }
)

# 暗子的真实身份，按此顺序分配到打乱后的开局位置
HIDDEN_PIECES: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.HORSE,
    PieceType.ELEPHANT,
    PieceType.ADVISOR,
    PieceType.ADVISOR,
    PieceType.ELEPHANT,
    PieceType.HORSE,
    PieceType.ROOK,
    PieceType.CANNON,
    PieceType.CANNON,
    PieceType.PAWN,
    PieceType.PAWN,
    PieceType.PAWN,
    PieceType.PAWN,
    PieceType.PAWN,
)


def _check_columns(config: BoardConfig) -> None:
    if config.cols != len(BACK_ROW):
        raise ValueError(f"Start layout needs {len(BACK_ROW)} columns, board has {config.cols}")


def king_square(color: Color, config: BoardConfig = FULL_BOARD) -> Position:
    """将/帅的开局位置（明摆，不参与打乱）"""
    return Position(config.home_row(color), config.king_col)


def start_squares(color: Color, config: BoardConfig = FULL_BOARD) -> list[Position]:
    """某方所有暗子的开局位置（不含将/帅）

    顺序：底线从左到右、炮位、兵位
    """
    _check_columns(config)
    home = config.home_row(color)
    cannon_row = config.relative_row(color, config.cannon_row)
    pawn_row = config.relative_row(color, config.pawn_row)

    squares = [Position(home, col) for col, pt in enumerate(BACK_ROW) if pt != PieceType.KING]
    squares.extend(Position(cannon_row, col) for col in CANNON_COLS)
    squares.extend(Position(pawn_row, col) for col in PAWN_COLS)
    return squares


@lru_cache(maxsize=None)
def start_layout(config: BoardConfig = FULL_BOARD) -> Mapping[Position, Piece]:
    """标准开局摆法（明子身份），只读"""
    _check_columns(config)
    layout: dict[Position, Piece] = {}
    for color in Color:
        home = config.home_row(color)
        for col, piece_type in enumerate(BACK_ROW):
            layout[Position(home, col)] = Piece(color, piece_type)
        cannon_row = config.relative_row(color, config.cannon_row)
        for col in CANNON_COLS:
            layout[Position(cannon_row, col)] = Piece(color, PieceType.CANNON)
        pawn_row = config.relative_row(color, config.pawn_row)
        for col in PAWN_COLS:
            layout[Position(pawn_row, col)] = Piece(color, PieceType.PAWN)
    return MappingProxyType(layout)


def true_type(pos: Position, config: BoardConfig = FULL_BOARD) -> PieceType | None:
    """根据开局位置获取暗子的走法类型，非开局位置返回 None"""
    piece = start_layout(config).get(pos)
    return None if piece is None else piece.piece_type


def act_piece_table(config: BoardConfig = FULL_BOARD) -> tuple[tuple[PieceKind, ...], ...]:
    """按行列展开的开局表（旧协议编码，红正黑负）"""
    layout = start_layout(config)
    return tuple(
        tuple(kind_of(layout.get(Position(row, col))) for col in range(config.cols))
        for row in range(config.rows)
    )


ACT_PIECE = act_piece_table(FULL_BOARD)
