"""
玩家视角局面测试
"""

import pytest

from jieqi_rules.board import Board
from jieqi_rules.config import COMPACT_BOARD
from jieqi_rules.errors import InvalidPositionError
from jieqi_rules.state import State, StatePiece, render_board
from jieqi_rules.types import Color, Piece, PieceKind, PieceType, Position


class TestRenderBoard:
    """测试稀疏局面展开"""

    def test_empty_state(self):
        board = render_board(State(is_red=True))
        assert board == Board()

    def test_pieces_are_written(self):
        state = State(
            is_red=True,
            pieces=[
                StatePiece(PieceKind.RED_KING, Position(0, 4)),
                StatePiece(PieceKind.BLACK_UNKNOWN, Position(9, 0)),
            ],
        )
        board = render_board(state)
        assert board.get_piece(Position(0, 4)) == Piece(Color.RED, PieceType.KING)
        assert board.get_piece(Position(9, 0)) == Piece(Color.BLACK)
        assert len(board.get_all_pieces()) == 2

    def test_unlisted_squares_are_empty(self):
        state = State(is_red=False, pieces=[StatePiece(PieceKind.RED_PAWN, Position(5, 5))])
        board = render_board(state)
        assert board.to_kinds().count(PieceKind.EMPTY) == 89

    def test_deads_do_not_appear(self):
        state = State(is_red=True, deads=[PieceKind.BLACK_ROOK, PieceKind.RED_UNKNOWN])
        assert list(render_board(state)) == []

    def test_tuple_positions(self):
        """位置也可以是普通元组"""
        state = State(is_red=True, pieces=[StatePiece(PieceKind.RED_ROOK, (2, 2))])  # type: ignore[arg-type]
        assert render_board(state).get_piece(Position(2, 2)) == Piece(Color.RED, PieceType.ROOK)

    def test_duplicate_square_last_write_wins(self):
        state = State(
            is_red=True,
            pieces=[
                StatePiece(PieceKind.RED_ROOK, Position(1, 1)),
                StatePiece(PieceKind.BLACK_PAWN, Position(1, 1)),
            ],
        )
        board = render_board(state)
        assert board.get_piece(Position(1, 1)) == Piece(Color.BLACK, PieceType.PAWN)

    def test_out_of_range_piece(self):
        state = State(is_red=True, pieces=[StatePiece(PieceKind.RED_ROOK, Position(8, 0))])
        with pytest.raises(InvalidPositionError):
            render_board(state, COMPACT_BOARD)

    def test_compact(self):
        state = State(is_red=True, pieces=[StatePiece(PieceKind.RED_ROOK, Position(7, 8))])
        board = render_board(state, COMPACT_BOARD)
        assert board.config is COMPACT_BOARD
        assert len(board.to_kinds()) == 72


class TestStateFromBoard:
    """测试从稠密棋盘生成局面"""

    def test_from_board_inverts_render(self):
        board = Board.from_pieces(
            {
                Position(0, 0): Piece(Color.RED),
                Position(4, 4): Piece(Color.BLACK, PieceType.CANNON),
            }
        )
        state = State.from_board(board, is_red=False, deads=[PieceKind.RED_PAWN])
        assert state.is_red is False
        assert state.deads == [PieceKind.RED_PAWN]
        assert state.pieces == [
            StatePiece(PieceKind.RED_UNKNOWN, Position(0, 0)),
            StatePiece(PieceKind.BLACK_CANNON, Position(4, 4)),
        ]
        assert render_board(state) == board
