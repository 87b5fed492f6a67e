"""
旧协议数据模型测试
"""

import pytest
from pydantic import ValidationError

from jieqi_rules.config import COMPACT_BOARD, FULL_BOARD
from jieqi_rules.errors import BoardShapeError
from jieqi_rules.models import MovesModel, SessionModel, StateModel, config_for_cells
from jieqi_rules.movegen import available_movement
from jieqi_rules.session import init_session
from jieqi_rules.state import State, StatePiece
from jieqi_rules.types import PieceKind, Position


class TestConfigForCells:
    def test_presets(self):
        assert config_for_cells(90) is FULL_BOARD
        assert config_for_cells(72) is COMPACT_BOARD

    def test_unknown_size(self):
        with pytest.raises(BoardShapeError):
            config_for_cells(50)


class TestSessionModel:
    """测试对局记录序列化"""

    def test_round_trip(self):
        session = init_session(seed=8)
        session.record_capture(PieceKind.BLACK_PAWN, visible=True)
        model = SessionModel.from_session(session)
        assert len(model.init) == 90
        restored = SessionModel.model_validate_json(model.model_dump_json()).to_session()
        assert restored == session

    def test_compact_inferred_from_length(self):
        session = init_session(COMPACT_BOARD, seed=2)
        restored = SessionModel.from_session(session).to_session()
        assert restored.config is COMPACT_BOARD

    def test_wrong_length(self):
        model = SessionModel(init=[0] * 10, board=[0] * 10)
        with pytest.raises(BoardShapeError):
            model.to_session()

    def test_invalid_kind(self):
        with pytest.raises(ValidationError):
            SessionModel(init=[9] + [0] * 89, board=[0] * 90)


class TestStateModel:
    """测试玩家视角局面序列化"""

    def test_dump_uses_wire_names(self):
        state = State(is_red=True, pieces=[StatePiece(PieceKind.RED_UNKNOWN, Position(0, 0))])
        data = StateModel.from_state(state).model_dump(by_alias=True)
        assert data["isRed"] is True
        assert data["pieces"] == [{"kind": 8, "pos": {"row": 0, "column": 0}}]

    def test_validate_from_wire(self):
        model = StateModel.model_validate(
            {
                "isRed": True,
                "pieces": [{"kind": 8, "pos": {"row": 0, "column": 0}}],
                "deads": [-1],
            }
        )
        state = model.to_state()
        assert state.pieces == [StatePiece(PieceKind.RED_UNKNOWN, Position(0, 0))]
        assert state.deads == [PieceKind.BLACK_ROOK]
        assert len(available_movement(state, Position(0, 0))) == 17

    def test_invalid_kind(self):
        with pytest.raises(ValidationError):
            StateModel.model_validate({"isRed": False, "pieces": [{"kind": 9, "pos": {"row": 0, "column": 0}}]})


class TestMovesModel:
    def test_from_moves(self):
        model = MovesModel.from_moves(Position(0, 0), [Position(1, 0), Position(0, 1)])
        assert model.total == 2
        assert model.moves[1].to_position() == Position(0, 1)
        assert model.origin.to_position() == Position(0, 0)
