"""
棋盘配置测试
"""

import pytest

from jieqi_rules.config import COMPACT_BOARD, FULL_BOARD, BoardConfig
from jieqi_rules.types import Color, Position


class TestPresets:
    """测试预设棋盘"""

    def test_full_board(self):
        assert (FULL_BOARD.rows, FULL_BOARD.cols) == (10, 9)
        assert FULL_BOARD.size == 90
        assert FULL_BOARD.river == 4

    def test_compact_board(self):
        assert (COMPACT_BOARD.rows, COMPACT_BOARD.cols) == (8, 9)
        assert COMPACT_BOARD.size == 72
        assert COMPACT_BOARD.river == 4

    def test_preset_lookup(self):
        assert BoardConfig.preset("full") is FULL_BOARD
        assert BoardConfig.preset("compact") is COMPACT_BOARD

    def test_unknown_preset(self):
        with pytest.raises(ValueError, match="Unknown board preset"):
            BoardConfig.preset("huge")


class TestGeometry:
    """测试坐标相关计算"""

    def test_contains(self):
        assert FULL_BOARD.contains(Position(0, 0))
        assert FULL_BOARD.contains(Position(9, 8))
        assert not FULL_BOARD.contains(Position(10, 0))
        assert not FULL_BOARD.contains(Position(0, 9))
        assert not FULL_BOARD.contains(Position(-1, 0))
        assert not COMPACT_BOARD.contains(Position(8, 0))

    def test_index(self):
        assert FULL_BOARD.index(0, 0) == 0
        assert FULL_BOARD.index(1, 0) == 9
        assert FULL_BOARD.index(9, 8) == 89

    def test_home_rows(self):
        assert FULL_BOARD.home_row(Color.RED) == 0
        assert FULL_BOARD.home_row(Color.BLACK) == 9
        assert COMPACT_BOARD.home_row(Color.BLACK) == 7

    def test_relative_row(self):
        """黑方行号上下镜像"""
        assert FULL_BOARD.relative_row(Color.RED, 3) == 3
        assert FULL_BOARD.relative_row(Color.BLACK, 3) == 6
        assert COMPACT_BOARD.relative_row(Color.BLACK, 1) == 6

    def test_palace_red(self):
        """红方九宫: row 0-2, col 3-5"""
        assert list(FULL_BOARD.palace_cols) == [3, 4, 5]
        assert FULL_BOARD.is_in_palace(Position(0, 3), Color.RED)
        assert FULL_BOARD.is_in_palace(Position(2, 5), Color.RED)
        assert not FULL_BOARD.is_in_palace(Position(3, 4), Color.RED)
        assert not FULL_BOARD.is_in_palace(Position(1, 2), Color.RED)
        assert not FULL_BOARD.is_in_palace(Position(8, 4), Color.RED)

    def test_palace_black(self):
        """黑方九宫: 最后三行"""
        assert FULL_BOARD.is_in_palace(Position(7, 3), Color.BLACK)
        assert FULL_BOARD.is_in_palace(Position(9, 5), Color.BLACK)
        assert not FULL_BOARD.is_in_palace(Position(6, 4), Color.BLACK)
        assert COMPACT_BOARD.is_in_palace(Position(5, 4), Color.BLACK)
        assert not COMPACT_BOARD.is_in_palace(Position(4, 4), Color.BLACK)

    def test_river_full(self):
        """标准棋盘：红兵 row > 3 过河，黑卒 row < 4 过河"""
        assert not FULL_BOARD.has_crossed_river(3, Color.RED)
        assert FULL_BOARD.has_crossed_river(4, Color.RED)
        assert not FULL_BOARD.has_crossed_river(4, Color.BLACK)
        assert FULL_BOARD.has_crossed_river(3, Color.BLACK)

    def test_river_compact(self):
        """紧凑棋盘：红方 row > 3 过河，黑方 row < 4 过河"""
        assert not COMPACT_BOARD.has_crossed_river(3, Color.RED)
        assert COMPACT_BOARD.has_crossed_river(4, Color.RED)
        assert not COMPACT_BOARD.has_crossed_river(4, Color.BLACK)
        assert COMPACT_BOARD.has_crossed_river(3, Color.BLACK)

    def test_config_is_hashable(self):
        """配置可以作为缓存键"""
        assert hash(FULL_BOARD) != hash(COMPACT_BOARD)
        assert {FULL_BOARD: 1}[BoardConfig(10, 9, 2, 3, name="full")] == 1
