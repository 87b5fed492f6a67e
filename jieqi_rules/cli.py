"""
揭棋规则调试 CLI

- init: 随机生成开局
- moves: 查询某个位置的可走目标

## 使用示例

```bash
# 生成开局（固定种子），输出 JSON
jieqi-rules init --seed 42 --json

# 紧凑棋盘
jieqi-rules init --board compact

# 查询走法（棋盘为逗号分隔的旧协议编码）
jieqi-rules moves --kinds "1,0,0,..." --row 0 --col 0
```
"""

from __future__ import annotations

import sys

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from jieqi_rules.board import Board
from jieqi_rules.config import BoardConfig
from jieqi_rules.errors import JieqiRulesError
from jieqi_rules.logging import configure_logging
from jieqi_rules.models import MovesModel, SessionModel, config_for_cells
from jieqi_rules.movegen import available_movement
from jieqi_rules.session import init_session
from jieqi_rules.types import Position

app = typer.Typer(help="Jieqi rules engine - 揭棋走法生成调试工具")
console = Console()


@app.callback()
def main(
    log_level: str = typer.Option("WARNING", "--log-level", "-l", help="日志级别"),
) -> None:
    """揭棋规则引擎"""
    configure_logging(level=log_level.upper())


def _parse_kinds(kinds: str) -> list[int]:
    """解析逗号分隔的编码，空项会让后面的格子错位，直接报错"""
    cells = [k.strip() for k in kinds.split(",")]
    for i, cell in enumerate(cells):
        if not cell:
            raise ValueError(f"Empty cell at index {i} in --kinds")
    return [int(cell) for cell in cells]


@app.command()
def init(
    seed: int | None = typer.Option(None, "--seed", "-s", help="随机种子"),
    board: str = typer.Option("full", "--board", "-b", help="棋盘 (full/compact)"),
    output_json: bool = typer.Option(False, "--json", help="JSON 输出"),
) -> None:
    """随机生成开局"""
    try:
        config = BoardConfig.preset(board)
        session = init_session(config, seed=seed)
    except (JieqiRulesError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        raise typer.Exit(1) from None

    if output_json:
        print(SessionModel.from_session(session).model_dump_json(indent=2))
    else:
        console.print(session.board.display())


@app.command()
def moves(
    kinds: str = typer.Option(..., "--kinds", "-k", help="逗号分隔的旧协议棋盘编码"),
    row: int = typer.Option(..., "--row", "-r", help="起始行"),
    col: int = typer.Option(..., "--col", "-c", help="起始列"),
    board: str | None = typer.Option(None, "--board", "-b", help="棋盘 (full/compact)，默认按长度推断"),
    output_json: bool = typer.Option(False, "--json", help="JSON 输出"),
) -> None:
    """查询某个位置的可走目标"""
    try:
        cells = _parse_kinds(kinds)
        config = BoardConfig.preset(board) if board else config_for_cells(len(cells))
        dense = Board.from_kinds(cells, config)
        origin = Position(row, col)
        targets = available_movement(dense, origin)
    except (JieqiRulesError, ValidationError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        raise typer.Exit(1) from None

    if output_json:
        print(MovesModel.from_moves(origin, targets).model_dump_json(indent=2))
        return

    table = Table(title=f"Moves from ({row}, {col}): {len(targets)}")
    table.add_column("row", justify="right")
    table.add_column("col", justify="right")
    for target in targets:
        table.add_row(str(target.row), str(target.col))
    console.print(table)


if __name__ == "__main__":
    app()
