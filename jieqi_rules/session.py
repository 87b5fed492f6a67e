"""
揭棋对局记录与开局随机摆子

Session 是上帝视角的对局记录：init 是开局随机摆法（只写一次），
board 是当前局面（由走子层修改），deads 是被吃掉的棋子。
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field

from jieqi_rules.board import Board
from jieqi_rules.config import FULL_BOARD, BoardConfig
from jieqi_rules.layout import HIDDEN_PIECES, king_square, start_squares
from jieqi_rules.logging import logger
from jieqi_rules.types import UNKNOWN_MAGNITUDE, Color, Piece, PieceKind, PieceType


@dataclass(frozen=True)
class DeadPiece:
    """被吃掉的棋子

    kind 是真实身份，visible 表示双方是否都已知道它的身份。
    """

    kind: PieceKind
    visible: bool


@dataclass
class Session:
    """对局记录（红方在下）"""

    init: Board
    board: Board
    deads: list[DeadPiece] = field(default_factory=list)

    @property
    def config(self) -> BoardConfig:
        return self.init.config

    def record_capture(self, kind: PieceKind, visible: bool) -> None:
        """记录一次吃子"""
        self.deads.append(DeadPiece(PieceKind(kind), visible))

    def dead_kinds(self, viewer: Color) -> list[PieceKind]:
        """某方视角下的被吃棋子

        己方暗子被吃时自己不知道身份，显示为己方的 UNKNOWN；
        对方的暗子是自己吃的，身份已知。
        """
        kinds = []
        for dead in self.deads:
            own_piece = (dead.kind > 0) == (viewer == Color.RED)
            if own_piece and not dead.visible:
                kinds.append(PieceKind(viewer.sign * UNKNOWN_MAGNITUDE))
            else:
                kinds.append(dead.kind)
        return kinds


def init_session(
    config: BoardConfig = FULL_BOARD,
    seed: int | None = None,
    rng: random.Random | None = None,
) -> Session:
    """随机生成开局

    每方 15 个暗子的开局位置各自均匀打乱（Fisher-Yates），
    按固定顺序分配真实身份；将/帅明摆在己方底线中间。

    Args:
        config: 棋盘配置
        seed: 随机种子，用于复现开局（rng 未指定时生效）
        rng: 自定义随机数生成器
    """
    if rng is None:
        rng = random.Random(seed)

    init = Board(config)
    for color in Color:
        squares = start_squares(color, config)
        rng.shuffle(squares)
        for pos, piece_type in zip(squares, HIDDEN_PIECES):
            init.set_piece(pos, Piece(color, piece_type))
        init.set_piece(king_square(color, config), Piece(color, PieceType.KING))

    logger.debug(f"Initialized {config.name} session (seed={seed})")
    return Session(init=init, board=init.copy())
