"""
旧协议数据模型

Pydantic 模型用于和外部（前端、联机层）交换局面：
棋子用有符号整数编码，棋盘是一维数组，字段名沿用旧协议（isRed / column）。
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from jieqi_rules.board import Board
from jieqi_rules.config import PRESETS, BoardConfig
from jieqi_rules.errors import BoardShapeError
from jieqi_rules.session import DeadPiece, Session
from jieqi_rules.state import State, StatePiece
from jieqi_rules.types import PieceKind, Position


def config_for_cells(cells: int) -> BoardConfig:
    """根据一维数组长度找到对应的预设棋盘"""
    for config in PRESETS.values():
        if config.size == cells:
            return config
    raise BoardShapeError(max(c.size for c in PRESETS.values()), cells)


class PositionModel(BaseModel):
    """位置模型"""

    row: int
    column: int

    @classmethod
    def from_position(cls, pos: Position) -> PositionModel:
        return cls(row=pos.row, column=pos.col)

    def to_position(self) -> Position:
        return Position(self.row, self.column)


class StatePieceModel(BaseModel):
    """可见棋子模型"""

    kind: PieceKind
    pos: PositionModel


class StateModel(BaseModel):
    """玩家视角局面模型"""

    model_config = ConfigDict(populate_by_name=True)

    is_red: bool = Field(alias="isRed")
    pieces: list[StatePieceModel] = Field(default_factory=list)
    deads: list[PieceKind] = Field(default_factory=list)

    @classmethod
    def from_state(cls, state: State) -> StateModel:
        return cls(
            is_red=state.is_red,
            pieces=[
                StatePieceModel(kind=p.kind, pos=PositionModel.from_position(Position(*p.pos)))
                for p in state.pieces
            ],
            deads=list(state.deads),
        )

    def to_state(self) -> State:
        return State(
            is_red=self.is_red,
            pieces=[StatePiece(p.kind, p.pos.to_position()) for p in self.pieces],
            deads=list(self.deads),
        )


class DeadPieceModel(BaseModel):
    """被吃棋子模型"""

    kind: PieceKind
    visible: bool


class SessionModel(BaseModel):
    """对局记录模型，init / board 为一维数组"""

    init: list[PieceKind]
    board: list[PieceKind]
    deads: list[DeadPieceModel] = Field(default_factory=list)

    @classmethod
    def from_session(cls, session: Session) -> SessionModel:
        return cls(
            init=session.init.to_kinds(),
            board=session.board.to_kinds(),
            deads=[DeadPieceModel(kind=d.kind, visible=d.visible) for d in session.deads],
        )

    def to_session(self) -> Session:
        """还原对局记录，棋盘尺寸由数组长度推出"""
        config = config_for_cells(len(self.init))
        return Session(
            init=Board.from_kinds(self.init, config),
            board=Board.from_kinds(self.board, config),
            deads=[DeadPiece(d.kind, d.visible) for d in self.deads],
        )


class MovesModel(BaseModel):
    """走法查询结果"""

    origin: PositionModel
    moves: list[PositionModel]
    total: int

    @classmethod
    def from_moves(cls, origin: Position, moves: list[Position]) -> MovesModel:
        return cls(
            origin=PositionModel.from_position(origin),
            moves=[PositionModel.from_position(m) for m in moves],
            total=len(moves),
        )
