"""
Board data handler — parses board detail payloads and builds optimizer input.

Payloads are the JSON bodies of the board detail endpoint
(nodeList / openStatEffectList / openSkillEffectList). Summary helpers return
pandas DataFrames for tabular display.
"""
import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Any, Union

import orjson
import pandas as pd
from pydantic import ValidationError

from dvplanner.constants import (
    GRADE_ORDER, NODE_TYPE_NONE, NODE_TYPE_START, get_board_name,
)
from dvplanner.models import BoardDetail, BoardInput, DaevanionNode
from dvplanner.scoring import NodeScorer

logger = logging.getLogger(__name__)

NODE_COLUMNS = [
    "node_id", "name", "row", "col", "grade", "type", "open",
    "point_cost", "combat_power",
]


class BoardDataError(ValueError):
    """Raised when a board detail payload cannot be decoded or validated."""


class BoardDataHandler:
    """Turns raw board detail payloads into models, optimizer input and summaries."""

    def __init__(self, scorer: NodeScorer | None = None):
        self.scorer = scorer or NodeScorer()

    # ------------------------------------------------------------------
    # Parsing
    # ------------------------------------------------------------------

    def parse_detail(self, payload: Union[dict[str, Any], bytes, str]) -> BoardDetail:
        if isinstance(payload, (bytes, str)):
            try:
                payload = orjson.loads(payload)
            except orjson.JSONDecodeError as e:
                raise BoardDataError(f"Invalid board detail JSON: {e}") from e
        if not isinstance(payload, dict):
            raise BoardDataError(
                f"Board detail must be a JSON object, got {type(payload).__name__}")
        try:
            return BoardDetail.model_validate(payload)
        except ValidationError as e:
            raise BoardDataError(f"Invalid board detail: {e}") from e

    def load_detail(self, path: Path) -> BoardDetail:
        return self.parse_detail(Path(path).read_bytes())

    # ------------------------------------------------------------------
    # Optimizer input
    # ------------------------------------------------------------------

    @staticmethod
    def current_activation(detail: BoardDetail) -> set[int]:
        """Open node IDs; Start is always included regardless of its open flag."""
        activated = {n.node_id for n in detail.node_list if n.is_open}
        start = detail.get_start_node()
        if start is not None:
            activated.add(start.node_id)
        return activated

    def build_optimizer_input(self, details: dict[int, BoardDetail],
                              optimizable_only: bool = True) -> dict[str, BoardInput]:
        """board_id -> detail  becomes  board name -> BoardInput."""
        boards: dict[str, BoardInput] = {}
        for board_id, detail in details.items():
            name = get_board_name(board_id)
            if optimizable_only and name not in self.scorer.config.optimizable_boards:
                continue
            if name in boards:
                logger.warning("Board %d maps to %s, already taken by another board; "
                               "replacing it", board_id, name)
            boards[name] = BoardInput(
                nodes=detail.node_list,
                activated=self.current_activation(detail),
            )
        return boards

    # ------------------------------------------------------------------
    # Summaries
    # ------------------------------------------------------------------

    def nodes_frame(self, detail: BoardDetail) -> pd.DataFrame:
        rows = [
            {
                "node_id": n.node_id,
                "name": n.display_name,
                "row": n.row,
                "col": n.col,
                "grade": n.grade,
                "type": n.type,
                "open": n.is_open or n.is_start,
                "point_cost": self.scorer.point_cost(n),
                "combat_power": self.scorer.combat_power(n),
            }
            for n in detail.node_list
        ]
        return pd.DataFrame(rows, columns=NODE_COLUMNS)

    def grade_summary(self, detail: BoardDetail) -> pd.DataFrame:
        """Per-grade node count, open count and points spent (Common..Legend)."""
        df = self.nodes_frame(detail)
        df = df[~df["type"].isin([NODE_TYPE_START, NODE_TYPE_NONE]) & df["grade"].isin(GRADE_ORDER)]
        if df.empty:
            return pd.DataFrame(0, index=pd.Index(GRADE_ORDER, name="grade"),
                                columns=["node_count", "open_count", "points_spent"])
        df = df.assign(spent=df["point_cost"].where(df["open"].astype(bool), 0))
        summary = (
            df.groupby("grade")
            .agg(node_count=("node_id", "count"),
                 open_count=("open", "sum"),
                 points_spent=("spent", "sum"))
            .reindex(GRADE_ORDER, fill_value=0)
        )
        return summary.astype(int)

    def board_summary(self, details: dict[int, BoardDetail]) -> pd.DataFrame:
        """One row per board: name, optimizable flag, node / open counts, points spent."""
        rows = []
        for board_id, detail in details.items():
            name = get_board_name(board_id)
            playable = [n for n in detail.node_list if not n.is_empty]
            opened = [n for n in playable if n.is_open or n.is_start]
            rows.append({
                "board_id": board_id,
                "name": name,
                "optimizable": name in self.scorer.config.optimizable_boards,
                "total_node_count": len(playable),
                "open_node_count": len(opened),
                "points_spent": sum(self.scorer.point_cost(n) for n in opened),
            })
        return pd.DataFrame(rows, columns=[
            "board_id", "name", "optimizable",
            "total_node_count", "open_node_count", "points_spent",
        ])

    @staticmethod
    def filter_nodes(detail: BoardDetail, grades: Iterable[str]) -> list[DaevanionNode]:
        """Nodes of the given grades; empty cells and Start are always kept."""
        wanted = set(grades)
        return [
            n for n in detail.node_list
            if n.is_empty or n.is_start or n.grade in wanted
        ]
