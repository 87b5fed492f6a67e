"""
玩家视角的稀疏局面

State 只包含当前视角能看到的棋子（暗子编码为 UNKNOWN）和被吃掉的棋子。
棋盘已由上层按视角旋转，己方总在低行一侧。
"""

from __future__ import annotations

from dataclasses import dataclass, field

from jieqi_rules.board import Board
from jieqi_rules.config import FULL_BOARD, BoardConfig
from jieqi_rules.logging import logger
from jieqi_rules.types import Piece, PieceKind, Position


@dataclass(frozen=True)
class StatePiece:
    """可见棋子：旧协议编码 + 位置"""

    kind: PieceKind
    pos: Position


@dataclass
class State:
    """玩家视角的局面"""

    is_red: bool
    pieces: list[StatePiece] = field(default_factory=list)
    deads: list[PieceKind] = field(default_factory=list)

    @classmethod
    def from_board(cls, board: Board, is_red: bool = True, deads: list[PieceKind] | None = None) -> State:
        """从稠密棋盘生成稀疏局面（按行列顺序）"""
        pieces = [StatePiece(piece.kind, pos) for pos, piece in board]
        return cls(is_red=is_red, pieces=pieces, deads=list(deads or []))


def render_board(state: State, config: BoardConfig = FULL_BOARD) -> Board:
    """把稀疏局面展开成稠密棋盘，未列出的格子为空

    同一格子出现两次属于非法局面，后写入的覆盖先写入的。
    """
    board = Board(config)
    seen: set[Position] = set()
    for item in state.pieces:
        pos = Position(*item.pos)
        if pos in seen:
            logger.warning(f"State lists {pos} more than once, keeping the last piece")
        seen.add(pos)
        board.set_piece(pos, Piece.from_kind(item.kind))
    return board
