"""
规则引擎异常定义

这些异常只表示调用方违反了前置条件（编程错误），
越界的查询位置等可预期情况不会抛出异常。
"""


class JieqiRulesError(Exception):
    """规则引擎异常基类"""


class BoardShapeError(JieqiRulesError, ValueError):
    """棋盘数组大小与配置的行列数不一致"""

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Board has {actual} cells, expected {expected}")


class InvalidPositionError(JieqiRulesError, ValueError):
    """位置超出棋盘范围"""

    def __init__(self, row: int, col: int, rows: int, cols: int):
        self.row = row
        self.col = col
        super().__init__(f"Position ({row}, {col}) is outside the {rows}x{cols} board")
