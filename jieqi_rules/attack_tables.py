"""
预计算的攻击表

按棋盘配置预先算好每个格子的步进目标、马腿/象眼和直线射线，
走法生成时只需查表和检查占位。每种配置只计算一次。
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache

from jieqi_rules.config import BoardConfig
from jieqi_rules.types import Color, Position

# 直线方向：0=上（向黑方）, 1=下, 2=右, 3=左
UP, DOWN, RIGHT, LEFT = range(4)
LINE_DIRECTIONS: tuple[tuple[int, int], ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))

KING_OFFSETS = ((1, 1), (1, 0), (1, -1), (0, -1), (-1, -1), (-1, 0), (-1, 1), (0, 1))
ADVISOR_OFFSETS = ((1, 1), (-1, 1), (1, -1), (-1, -1))
# (象眼, 目标)
ELEPHANT_OFFSETS = (
    ((1, 1), (2, 2)),
    ((-1, 1), (-2, 2)),
    ((1, -1), (2, -2)),
    ((-1, -1), (-2, -2)),
)
# (马腿, [目标...])
HORSE_OFFSETS = (
    ((1, 0), ((2, 1), (2, -1))),
    ((-1, 0), ((-2, 1), (-2, -1))),
    ((0, 1), ((1, 2), (-1, 2))),
    ((0, -1), ((1, -2), (-1, -2))),
)

Cells = tuple[tuple[Position, ...], ...]
BlockedCells = tuple[tuple[tuple[Position, Position], ...], ...]


def _steps(config: BoardConfig, row: int, col: int, offsets) -> tuple[Position, ...]:
    origin = Position(row, col)
    return tuple(origin + off for off in offsets if config.contains(origin + off))


def _init_king_attacks(config: BoardConfig) -> Cells:
    """将/帅的八个相邻格（九宫限制在走法生成时检查）"""
    return tuple(
        _steps(config, row, col, KING_OFFSETS) for row in range(config.rows) for col in range(config.cols)
    )


def _init_advisor_attacks(config: BoardConfig) -> Cells:
    """士的四个斜向相邻格"""
    return tuple(
        _steps(config, row, col, ADVISOR_OFFSETS) for row in range(config.rows) for col in range(config.cols)
    )


def _init_elephant_attacks(config: BoardConfig) -> BlockedCells:
    """象的攻击位置

    返回: [(目标位置, 象眼位置), ...]
    """
    attacks = []
    for row in range(config.rows):
        for col in range(config.cols):
            origin = Position(row, col)
            positions = []
            for eye_off, move_off in ELEPHANT_OFFSETS:
                new_pos = origin + move_off
                if config.contains(new_pos):
                    positions.append((new_pos, origin + eye_off))
            attacks.append(tuple(positions))
    return tuple(attacks)


def _init_horse_attacks(config: BoardConfig) -> BlockedCells:
    """马的攻击位置

    返回: [(目标位置, 马腿位置), ...]
    """
    attacks = []
    for row in range(config.rows):
        for col in range(config.cols):
            origin = Position(row, col)
            positions = []
            for leg_off, move_offs in HORSE_OFFSETS:
                leg_pos = origin + leg_off
                if not config.contains(leg_pos):
                    continue
                for move_off in move_offs:
                    new_pos = origin + move_off
                    if config.contains(new_pos):
                        positions.append((new_pos, leg_pos))
            attacks.append(tuple(positions))
    return tuple(attacks)


def _init_pawn_attacks(config: BoardConfig, color: Color) -> Cells:
    """兵/卒的攻击位置：向前一格，过河后加左右各一格"""
    forward = 1 if color == Color.RED else -1
    attacks = []
    for row in range(config.rows):
        for col in range(config.cols):
            offsets = [(forward, 0)]
            if config.has_crossed_river(row, color):
                offsets.extend([(0, -1), (0, 1)])
            attacks.append(_steps(config, row, col, offsets))
    return tuple(attacks)


def _init_line_attacks(config: BoardConfig) -> tuple[tuple[Cells, ...], ...]:
    """直线射线（车/炮用）

    返回: [位置索引][方向][步数] = Position，按离起点由近到远
    """
    attacks = []
    for row in range(config.rows):
        for col in range(config.cols):
            origin = Position(row, col)
            dir_attacks = []
            for dr, dc in LINE_DIRECTIONS:
                line = []
                new_pos = origin + (dr, dc)
                while config.contains(new_pos):
                    line.append(new_pos)
                    new_pos = new_pos + (dr, dc)
                dir_attacks.append(tuple(line))
            attacks.append(tuple(dir_attacks))
    return tuple(attacks)


@dataclass(frozen=True)
class AttackTables:
    """某种棋盘配置下的全部攻击表"""

    config: BoardConfig
    king: Cells
    advisor: Cells
    elephant: BlockedCells
    horse: BlockedCells
    pawn_red: Cells
    pawn_black: Cells
    lines: tuple[tuple[Cells, ...], ...]

    def get_king_attacks(self, pos: Position) -> tuple[Position, ...]:
        return self.king[self.config.index(*pos)]

    def get_advisor_attacks(self, pos: Position) -> tuple[Position, ...]:
        return self.advisor[self.config.index(*pos)]

    def get_elephant_attacks(self, pos: Position) -> tuple[tuple[Position, Position], ...]:
        """获取象的攻击位置（包含象眼）"""
        return self.elephant[self.config.index(*pos)]

    def get_horse_attacks(self, pos: Position) -> tuple[tuple[Position, Position], ...]:
        """获取马的攻击位置（包含马腿）"""
        return self.horse[self.config.index(*pos)]

    def get_pawn_attacks(self, pos: Position, color: Color) -> tuple[Position, ...]:
        table = self.pawn_red if color == Color.RED else self.pawn_black
        return table[self.config.index(*pos)]

    def get_line_attacks(self, pos: Position, direction: int) -> tuple[Position, ...]:
        """获取直线攻击位置

        direction: 0=上, 1=下, 2=右, 3=左
        """
        return self.lines[self.config.index(*pos)][direction]


@lru_cache(maxsize=None)
def get_attack_tables(config: BoardConfig) -> AttackTables:
    """获取（并缓存）某种配置的攻击表"""
    return AttackTables(
        config=config,
        king=_init_king_attacks(config),
        advisor=_init_advisor_attacks(config),
        elephant=_init_elephant_attacks(config),
        horse=_init_horse_attacks(config),
        pawn_red=_init_pawn_attacks(config, Color.RED),
        pawn_black=_init_pawn_attacks(config, Color.BLACK),
        lines=_init_line_attacks(config),
    )
