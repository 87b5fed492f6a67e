"""
揭棋走法生成

给定棋盘和位置，计算该位置棋子可以到达的所有目标格。
- 暗子按所在开局位置对应的棋子类型走子（查 ACT_PIECE 表）
- 明子按真实身份走子
- 只能走到空格或吃对方棋子

不考虑送将、将死和回合归属；不修改传入的棋盘。
"""

from __future__ import annotations

from jieqi_rules.attack_tables import LINE_DIRECTIONS, AttackTables, get_attack_tables
from jieqi_rules.board import Board
from jieqi_rules.config import FULL_BOARD, BoardConfig
from jieqi_rules.errors import BoardShapeError
from jieqi_rules.layout import true_type
from jieqi_rules.logging import logger
from jieqi_rules.state import State, render_board
from jieqi_rules.types import Color, Piece, PieceType, Position


def get_movement_type(piece: Piece, pos: Position, config: BoardConfig) -> PieceType | None:
    """获取走法对应的棋子类型

    暗子按位置对应的棋子类型走法；明子按真实身份走法。
    暗子不在开局位置上时返回 None。
    """
    if piece.is_hidden:
        return true_type(pos, config)
    return piece.piece_type


def available_movement(
    board_or_state: Board | State,
    pos: Position | tuple[int, int],
    config: BoardConfig | None = None,
) -> list[Position]:
    """获取指定位置棋子的所有目标位置

    Args:
        board_or_state: 稠密棋盘，或需要先展开的稀疏局面
        pos: 起始位置，越界时返回空列表
        config: 局面展开时使用的棋盘配置（默认标准棋盘）；
            传入 Board 时必须与棋盘自身配置一致

    Returns:
        目标位置列表，同一棋盘和位置下顺序固定
    """
    if isinstance(board_or_state, Board):
        if config is not None and config != board_or_state.config:
            raise BoardShapeError(config.size, board_or_state.config.size)
        config = board_or_state.config
    elif config is None:
        config = FULL_BOARD

    pos = Position(*pos)
    if not config.contains(pos):
        logger.debug(f"Position {pos} is outside the {config.rows}x{config.cols} board")
        return []

    if isinstance(board_or_state, Board):
        board = board_or_state
    else:
        board = render_board(board_or_state, config)

    piece = board.get_piece(pos)
    if piece is None:
        return []

    movement_type = get_movement_type(piece, pos, config)
    if movement_type is None:
        logger.warning(f"Hidden piece at {pos} is not on a start square, it cannot move")
        return []

    return _get_moves_for_type(board, pos, piece.color, movement_type)


def all_movements(board: Board, color: Color) -> dict[Position, list[Position]]:
    """某方所有棋子的目标位置，只包含有路可走的棋子"""
    result: dict[Position, list[Position]] = {}
    for pos, _piece in board.get_all_pieces(color):
        moves = available_movement(board, pos)
        if moves:
            result[pos] = moves
    return result


def _get_moves_for_type(board: Board, pos: Position, color: Color, piece_type: PieceType) -> list[Position]:
    """根据指定的棋子类型获取走法"""
    tables = get_attack_tables(board.config)
    if piece_type == PieceType.ROOK:
        return _get_rook_moves(board, tables, pos, color)
    elif piece_type == PieceType.HORSE:
        return _get_horse_moves(board, tables, pos, color)
    elif piece_type == PieceType.ELEPHANT:
        return _get_elephant_moves(board, tables, pos, color)
    elif piece_type == PieceType.ADVISOR:
        return _get_advisor_moves(board, tables, pos, color)
    elif piece_type == PieceType.KING:
        return _get_king_moves(board, tables, pos, color)
    elif piece_type == PieceType.CANNON:
        return _get_cannon_moves(board, tables, pos, color)
    elif piece_type == PieceType.PAWN:
        return _get_pawn_moves(board, tables, pos, color)
    else:
        return []


def _can_move_to(board: Board, pos: Position, color: Color) -> bool:
    """检查是否可以移动到指定位置（空位或对方棋子）"""
    target = board.get_piece(pos)
    if target is None:
        return True
    return target.color != color


def _get_rook_moves(board: Board, tables: AttackTables, pos: Position, color: Color) -> list[Position]:
    """车走法：横竖直走，遇子停止（对方棋子可吃）"""
    moves = []
    for direction in range(len(LINE_DIRECTIONS)):
        for new_pos in tables.get_line_attacks(pos, direction):
            target = board.get_piece(new_pos)
            if target is None:
                moves.append(new_pos)
                continue
            if target.color != color:
                moves.append(new_pos)
            break
    return moves


def _get_horse_moves(board: Board, tables: AttackTables, pos: Position, color: Color) -> list[Position]:
    """马走法：日字走法，需检查蹩马腿"""
    moves = []
    for new_pos, leg_pos in tables.get_horse_attacks(pos):
        if board.get_piece(leg_pos) is not None:
            continue
        if _can_move_to(board, new_pos, color):
            moves.append(new_pos)
    return moves


def _get_elephant_moves(board: Board, tables: AttackTables, pos: Position, color: Color) -> list[Position]:
    """象走法：走田字，需检查象眼，不受河界限制"""
    moves = []
    for new_pos, eye_pos in tables.get_elephant_attacks(pos):
        if board.get_piece(eye_pos) is not None:
            continue
        if _can_move_to(board, new_pos, color):
            moves.append(new_pos)
    return moves


def _get_advisor_moves(board: Board, tables: AttackTables, pos: Position, color: Color) -> list[Position]:
    """士走法：斜走一格，不受九宫限制"""
    return [new_pos for new_pos in tables.get_advisor_attacks(pos) if _can_move_to(board, new_pos, color)]


def _get_king_moves(board: Board, tables: AttackTables, pos: Position, color: Color) -> list[Position]:
    """将/帅走法：八个方向走一格，不出九宫

    目标列上有对方将/帅时（整列扫描，不论中间是否有子）不能走到该列。
    """
    config = board.config
    enemy_king = Piece(color.opposite, PieceType.KING)
    moves = []
    for new_pos in tables.get_king_attacks(pos):
        if not config.is_in_palace(new_pos, color):
            continue
        if _column_contains(board, new_pos.col, enemy_king):
            continue
        if _can_move_to(board, new_pos, color):
            moves.append(new_pos)
    return moves


def _column_contains(board: Board, col: int, piece: Piece) -> bool:
    return any(board.get_piece(Position(row, col)) == piece for row in range(board.config.rows))


def _get_cannon_moves(board: Board, tables: AttackTables, pos: Position, color: Color) -> list[Position]:
    """炮走法：横竖直走，吃子需隔一个棋子（炮架）

    炮架之后的第一个棋子若是对方棋子则可吃，之间的空格不能停。
    """
    moves = []
    for direction in range(len(LINE_DIRECTIONS)):
        found_platform = False
        for new_pos in tables.get_line_attacks(pos, direction):
            target = board.get_piece(new_pos)
            if not found_platform:
                if target is None:
                    moves.append(new_pos)
                else:
                    found_platform = True
            elif target is not None:
                if target.color != color:
                    moves.append(new_pos)
                break
    return moves


def _get_pawn_moves(board: Board, tables: AttackTables, pos: Position, color: Color) -> list[Position]:
    """卒/兵走法：

    - 未过河：只能向前一格
    - 过河后：可以向前、左、右各一格
    """
    return [new_pos for new_pos in tables.get_pawn_attacks(pos, color) if _can_move_to(board, new_pos, color)]
