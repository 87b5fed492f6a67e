"""
揭棋稠密棋盘

每个格子存一个 Piece（暗子 piece_type 为 None）或 None（空格）。
与旧协议之间用一维有符号整数数组互转，索引见 board_index。
"""

from __future__ import annotations

from typing import Iterator, Mapping, Sequence

from jieqi_rules.config import FULL_BOARD, BoardConfig
from jieqi_rules.errors import BoardShapeError, InvalidPositionError
from jieqi_rules.types import (
    PIECE_CHARACTERS,
    Color,
    Piece,
    PieceKind,
    PieceType,
    Position,
    kind_of,
)


def board_index(row: int, col: int, config: BoardConfig = FULL_BOARD) -> int:
    """一维数组索引：row * cols + col"""
    return config.index(row, col)


class Board:
    """揭棋棋盘

    坐标系统：
    - row 0..rows-1: 0 是红方底线
    - col 0..cols-1
    """

    def __init__(self, config: BoardConfig = FULL_BOARD):
        self.config = config
        self._cells: list[list[Piece | None]] = [[None] * config.cols for _ in range(config.rows)]

    @classmethod
    def from_pieces(cls, pieces: Mapping[Position, Piece], config: BoardConfig = FULL_BOARD) -> Board:
        """从稀疏的 位置 -> 棋子 映射构造"""
        board = cls(config)
        for pos, piece in pieces.items():
            board.set_piece(pos, piece)
        return board

    @classmethod
    def from_kinds(cls, kinds: Sequence[int], config: BoardConfig = FULL_BOARD) -> Board:
        """从旧协议的一维数组构造

        数组长度必须等于 rows * cols，否则是调用方的编程错误。
        """
        if len(kinds) != config.size:
            raise BoardShapeError(config.size, len(kinds))
        board = cls(config)
        for i, kind in enumerate(kinds):
            row, col = divmod(i, config.cols)
            board._cells[row][col] = Piece.from_kind(kind)
        return board

    def to_kinds(self) -> list[PieceKind]:
        """转换为旧协议的一维数组"""
        return [kind_of(piece) for row in self._cells for piece in row]

    def get_piece(self, pos: Position) -> Piece | None:
        """获取指定位置的棋子，棋盘外返回 None"""
        if not self.config.contains(pos):
            return None
        return self._cells[pos.row][pos.col]

    def set_piece(self, pos: Position, piece: Piece | None) -> None:
        """设置指定位置的棋子，None 表示清空"""
        if not self.config.contains(pos):
            raise InvalidPositionError(pos.row, pos.col, self.config.rows, self.config.cols)
        self._cells[pos.row][pos.col] = piece

    def remove_piece(self, pos: Position) -> Piece | None:
        """移除并返回指定位置的棋子"""
        piece = self.get_piece(pos)
        if piece is not None:
            self._cells[pos.row][pos.col] = None
        return piece

    def get_all_pieces(self, color: Color | None = None) -> list[tuple[Position, Piece]]:
        """获取所有棋子及其位置，可按颜色过滤"""
        return [(pos, piece) for pos, piece in self if color is None or piece.color == color]

    def find_king(self, color: Color) -> Position | None:
        """找到指定颜色的将/帅位置"""
        king = Piece(color, PieceType.KING)
        for pos, piece in self:
            if piece == king:
                return pos
        return None

    def copy(self) -> Board:
        """创建棋盘副本（Piece 不可变，只复制格子）"""
        new_board = Board.__new__(Board)
        new_board.config = self.config
        new_board._cells = [list(row) for row in self._cells]
        return new_board

    def __iter__(self) -> Iterator[tuple[Position, Piece]]:
        for row, cells in enumerate(self._cells):
            for col, piece in enumerate(cells):
                if piece is not None:
                    yield Position(row, col), piece

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.config == other.config and self._cells == other._cells

    def __repr__(self) -> str:
        pieces = list(self)
        hidden_count = len([p for _, p in pieces if p.is_hidden])
        return f"Board({self.config.rows}x{self.config.cols}, {len(pieces)} pieces, {hidden_count} hidden)"

    def display(self) -> str:
        """返回棋盘的文本表示（黑方在上）

        明子显示中文名，暗子显示 暗/闇，空格显示 十。
        """
        lines = []
        for row in range(self.config.rows - 1, -1, -1):
            line = f"{row} "
            for col in range(self.config.cols):
                piece = self._cells[row][col]
                if piece is None:
                    line += "十 "
                elif piece.is_hidden:
                    line += ("暗" if piece.color == Color.RED else "闇") + " "
                else:
                    line += PIECE_CHARACTERS[piece.kind] + " "
            lines.append(line)
        lines.append("  " + "  ".join(str(col) for col in range(self.config.cols)))
        return "\n".join(lines)
