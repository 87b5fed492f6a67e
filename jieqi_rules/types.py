"""
揭棋规则核心类型定义

棋子在内存中用带标签的值表示（阵营 + 类型，类型为 None 表示暗子），
只在序列化边界才换成旧协议的有符号整数编码。
"""

from enum import Enum, IntEnum
from types import MappingProxyType
from typing import Mapping, NamedTuple


class Color(Enum):
    """棋子颜色/阵营

    红方对应旧编码中的正数，黑方对应负数。
    """

    RED = "red"
    BLACK = "black"

    @property
    def opposite(self) -> "Color":
        """获取对方阵营"""
        return Color.BLACK if self == Color.RED else Color.RED

    @property
    def sign(self) -> int:
        """旧编码中的符号"""
        return 1 if self == Color.RED else -1


class PieceType(Enum):
    """棋子类型

    枚举值即旧编码中的绝对值。
    """

    # 车
    ROOK = 1
    # 马
    HORSE = 2
    # 象/相
    ELEPHANT = 3
    # 士/仕
    ADVISOR = 4
    # 将/帅
    KING = 5
    # 炮
    CANNON = 6
    # 卒/兵
    PAWN = 7


# 暗子在旧编码中的绝对值
UNKNOWN_MAGNITUDE = 8


class PieceKind(IntEnum):
    """旧协议的有符号棋子编码

    符号表示阵营，绝对值表示类型，0 为空格，8 为未知身份的暗子。
    """

    BLACK_UNKNOWN = -8
    BLACK_PAWN = -7
    BLACK_CANNON = -6
    BLACK_KING = -5
    BLACK_ADVISOR = -4
    BLACK_ELEPHANT = -3
    BLACK_HORSE = -2
    BLACK_ROOK = -1
    EMPTY = 0
    RED_ROOK = 1
    RED_HORSE = 2
    RED_ELEPHANT = 3
    RED_ADVISOR = 4
    RED_KING = 5
    RED_CANNON = 6
    RED_PAWN = 7
    RED_UNKNOWN = 8


class Position(NamedTuple):
    """棋盘位置 (row, col)

    row: 从红方底线 (0) 向黑方底线递增
    col: 横向，从 0 开始
    """

    row: int
    col: int

    def __add__(self, other: tuple[int, int]) -> "Position":
        """位置加偏移量"""
        return Position(self.row + other[0], self.col + other[1])


class Piece(NamedTuple):
    """棋盘上的一个棋子

    piece_type 为 None 表示暗子：对当前视角身份未知，
    走法由所在的开局位置决定。
    """

    color: Color
    piece_type: PieceType | None = None

    @property
    def is_hidden(self) -> bool:
        """是否为暗子"""
        return self.piece_type is None

    @property
    def kind(self) -> PieceKind:
        """转换为旧协议编码"""
        magnitude = UNKNOWN_MAGNITUDE if self.piece_type is None else self.piece_type.value
        return PieceKind(self.color.sign * magnitude)

    @classmethod
    def from_kind(cls, kind: int) -> "Piece | None":
        """从旧协议编码解析，0 返回 None（空格）"""
        kind = PieceKind(kind)
        if kind == PieceKind.EMPTY:
            return None
        color = Color.RED if kind > 0 else Color.BLACK
        magnitude = abs(kind)
        if magnitude == UNKNOWN_MAGNITUDE:
            return cls(color)
        return cls(color, PieceType(magnitude))

    def hide(self) -> "Piece":
        """返回同阵营的暗子（对手视角）"""
        return Piece(self.color)

    def __repr__(self) -> str:
        type_str = "?" if self.piece_type is None else self.piece_type.name.lower()
        return f"Piece({self.color.value}, {type_str})"


def kind_of(piece: Piece | None) -> PieceKind:
    """棋子（或空格）的旧协议编码"""
    return PieceKind.EMPTY if piece is None else piece.kind


# 旧协议编码对应的棋子字符，空格和暗子显示为空白
PIECE_CHARACTERS: Mapping[PieceKind, str] = MappingProxyType(
    {
        PieceKind.BLACK_UNKNOWN: " ",
        PieceKind.BLACK_PAWN: "卒",
        PieceKind.BLACK_CANNON: "炮",
        PieceKind.BLACK_KING: "将",
        PieceKind.BLACK_ADVISOR: "士",
        PieceKind.BLACK_ELEPHANT: "象",
        PieceKind.BLACK_HORSE: "马",
        PieceKind.BLACK_ROOK: "车",
        PieceKind.EMPTY: " ",
        PieceKind.RED_ROOK: "车",
        PieceKind.RED_HORSE: "马",
        PieceKind.RED_ELEPHANT: "相",
        PieceKind.RED_ADVISOR: "仕",
        PieceKind.RED_KING: "帅",
        PieceKind.RED_CANNON: "炮",
        PieceKind.RED_PAWN: "兵",
        PieceKind.RED_UNKNOWN: " ",
    }
)
