"""
棋盘尺寸配置

支持两种棋盘：标准 10x9 棋盘和去掉两条空行的 8x9 紧凑棋盘。
走法生成只依赖这里的行列数、九宫和河界，不写死任何坐标。
"""

from dataclasses import dataclass

from jieqi_rules.types import Color, Position


@dataclass(frozen=True)
class BoardConfig:
    """棋盘配置

    cannon_row / pawn_row 是炮位、兵位相对己方底线的行偏移。
    river 是过河线：红兵 row >= river 过河，黑卒 row < river 过河，
    两种预设棋盘都是 4（红兵 row > 3、黑卒 row < 4 可横走）。
    """

    rows: int
    cols: int
    cannon_row: int
    pawn_row: int
    river: int = 4
    name: str = "custom"

    @property
    def size(self) -> int:
        """格子总数"""
        return self.rows * self.cols

    @property
    def palace_cols(self) -> range:
        """九宫列范围 [cols-6, cols-3)"""
        return range(self.cols - 6, self.cols - 3)

    @property
    def king_col(self) -> int:
        """将/帅所在列"""
        return self.cols // 2

    def contains(self, pos: Position) -> bool:
        """检查位置是否在棋盘范围内"""
        return 0 <= pos.row < self.rows and 0 <= pos.col < self.cols

    def index(self, row: int, col: int) -> int:
        """行列转一维索引"""
        return row * self.cols + col

    def mirror_row(self, row: int) -> int:
        """上下翻转行号（红黑两方互换）"""
        return self.rows - 1 - row

    def home_row(self, color: Color) -> int:
        """己方底线"""
        return 0 if color == Color.RED else self.rows - 1

    def relative_row(self, color: Color, offset: int) -> int:
        """距己方底线 offset 行的绝对行号"""
        return offset if color == Color.RED else self.mirror_row(offset)

    def is_in_palace(self, pos: Position, color: Color) -> bool:
        """检查位置是否在某方九宫内"""
        if pos.col not in self.palace_cols:
            return False
        if color == Color.RED:
            return 0 <= pos.row < 3
        return self.rows - 3 <= pos.row < self.rows

    def has_crossed_river(self, row: int, color: Color) -> bool:
        """兵/卒是否已过河"""
        if color == Color.RED:
            return row >= self.river
        return row < self.river

    @classmethod
    def preset(cls, name: str) -> "BoardConfig":
        """按名称获取预设配置（full / compact）"""
        try:
            return PRESETS[name]
        except KeyError:
            raise ValueError(f"Unknown board preset: {name!r} (expected one of {sorted(PRESETS)})") from None


FULL_BOARD = BoardConfig(rows=10, cols=9, cannon_row=2, pawn_row=3, river=4, name="full")
COMPACT_BOARD = BoardConfig(rows=8, cols=9, cannon_row=1, pawn_row=2, river=4, name="compact")

PRESETS: dict[str, BoardConfig] = {
    FULL_BOARD.name: FULL_BOARD,
    COMPACT_BOARD.name: COMPACT_BOARD,
}
