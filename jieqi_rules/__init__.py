"""
揭棋 (Jieqi) 规则引擎

揭棋开局时除将帅外，其余棋子反面朝上（暗子）随机摆放。
暗子按所在开局位置对应的棋子类型走子，揭开后按真实身份走子。
本包提供局面模型、开局随机摆子和走法生成，不负责回合、胜负和联机。
"""

from jieqi_rules.types import (
    PIECE_CHARACTERS,
    Color,
    Piece,
    PieceKind,
    PieceType,
    Position,
)
from jieqi_rules.config import COMPACT_BOARD, FULL_BOARD, BoardConfig
from jieqi_rules.errors import BoardShapeError, InvalidPositionError, JieqiRulesError
from jieqi_rules.layout import ACT_PIECE, true_type
from jieqi_rules.board import Board, board_index
from jieqi_rules.state import State, StatePiece, render_board
from jieqi_rules.session import DeadPiece, Session, init_session
from jieqi_rules.movegen import all_movements, available_movement

__all__ = [
    "PIECE_CHARACTERS",
    "Color",
    "Piece",
    "PieceKind",
    "PieceType",
    "Position",
    "COMPACT_BOARD",
    "FULL_BOARD",
    "BoardConfig",
    "BoardShapeError",
    "InvalidPositionError",
    "JieqiRulesError",
    "ACT_PIECE",
    "true_type",
    "Board",
    "board_index",
    "State",
    "StatePiece",
    "render_board",
    "DeadPiece",
    "Session",
    "init_session",
    "all_movements",
    "available_movement",
]
