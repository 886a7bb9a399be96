"""Pydantic models for board nodes, board payloads, and optimizer results.

Node and board payload fields use the game data service's camelCase names
as aliases; Python code uses the snake_case attribute names.
"""
from collections.abc import Mapping
from types import MappingProxyType
from typing import Literal

from pydantic import (
    BaseModel, ConfigDict, Field, computed_field, field_serializer, field_validator,
)

from dvplanner.constants import (
    EFFICIENCY_EPSILON, GRADE_NONE, GRADE_POINT_COST, GRID_SIZE,
    MAX_EXPANSION_ROUNDS,
    NODE_TYPE_NONE, NODE_TYPE_START, OPTIMIZABLE_BOARDS,
)

Grade = Literal["Common", "Rare", "Unique", "Legend", "None"]
NodeType = Literal["Stat", "SkillLevel", "Start", "None"]


# ---------------------------------------------------------------------------
# Optimizer configuration
# ---------------------------------------------------------------------------

class OptimizerConfig(BaseModel):
    """Immutable tuning data for NodeScorer / BoardOptimizer.

    grade_point_cost is stored read-only; build a new config to change it.
    """
    model_config = ConfigDict(frozen=True)

    grade_point_cost: Mapping[str, int] = Field(
        default_factory=lambda: MappingProxyType(dict(GRADE_POINT_COST)))
    efficiency_epsilon: float = EFFICIENCY_EPSILON
    max_rounds: int = Field(default=MAX_EXPANSION_ROUNDS, ge=1)
    optimizable_boards: tuple[str, ...] = OPTIMIZABLE_BOARDS

    @field_validator("grade_point_cost", mode="after")
    @classmethod
    def freeze_cost_table(cls, value: Mapping[str, int]) -> Mapping[str, int]:
        return MappingProxyType(dict(value))

    @field_serializer("grade_point_cost")
    def dump_cost_table(self, value: Mapping[str, int]) -> dict[str, int]:
        return dict(value)


DEFAULT_CONFIG = OptimizerConfig()


# ---------------------------------------------------------------------------
# Board payloads
# ---------------------------------------------------------------------------

class NodeEffect(BaseModel):
    desc: str


class DaevanionNode(BaseModel):
    """One cell of a 15x15 board, as returned by the board detail endpoint."""
    model_config = ConfigDict(populate_by_name=True)

    board_id: int = Field(alias="boardId")
    node_id: int = Field(alias="nodeId")
    name: str = ""
    row: int = Field(ge=1, le=GRID_SIZE)
    col: int = Field(ge=1, le=GRID_SIZE)
    grade: Grade
    type: NodeType
    icon: str = ""
    effect_list: list[NodeEffect] = Field(default_factory=list, alias="effectList")
    open: int = 0

    @property
    def is_start(self) -> bool:
        return self.type == NODE_TYPE_START

    @property
    def is_empty(self) -> bool:
        """Non-playable cell (never activatable)."""
        if self.is_start:
            return False
        return self.grade == GRADE_NONE or self.type == NODE_TYPE_NONE

    @property
    def is_open(self) -> bool:
        return self.open == 1

    @property
    def display_name(self) -> str:
        return self.name or f"노드 {self.node_id}"


class BoardDetail(BaseModel):
    """Board detail payload for one character and one board."""
    model_config = ConfigDict(populate_by_name=True)

    node_list: list[DaevanionNode] = Field(default_factory=list, alias="nodeList")
    open_stat_effect_list: list[NodeEffect] = Field(
        default_factory=list, alias="openStatEffectList")
    open_skill_effect_list: list[NodeEffect] = Field(
        default_factory=list, alias="openSkillEffectList")

    def get_start_node(self) -> DaevanionNode | None:
        return next((n for n in self.node_list if n.is_start), None)


class BoardInput(BaseModel):
    """Optimizer input for one board: all nodes + currently activated IDs."""
    nodes: list[DaevanionNode]
    activated: set[int] = Field(default_factory=set)


# ---------------------------------------------------------------------------
# Optimizer results
# ---------------------------------------------------------------------------

class Recommendations(BaseModel):
    add: list[int] = Field(default_factory=list)
    remove: list[int] = Field(default_factory=list)


class OptimizationResult(BaseModel):
    """Optimization result for a single board."""
    total_points: int = 0            # points currently spent = search budget
    current_power: int = 0
    activated_node_ids: set[int] = Field(default_factory=set)
    optimized_power: int = 0
    improvement: int = 0
    recommendations: Recommendations = Field(default_factory=Recommendations)

    @computed_field
    @property
    def total_power(self) -> int:
        return self.optimized_power

    @classmethod
    def empty(cls) -> "OptimizationResult":
        """Zero-valued result for ineligible or malformed boards."""
        return cls()


class AggregateResult(BaseModel):
    """Combined result over all optimizable boards of one character."""
    total_current_power: int = 0
    total_optimized_power: int = 0
    total_improvement: int = 0
    board_results: dict[str, OptimizationResult] = Field(default_factory=dict)


class NodeRecommendation(BaseModel):
    """One row of an add/remove list, ready for display."""
    node_id: int
    name: str
    grade: str
    point_cost: int
    power_delta: int      # +power for nodes to add, -power for nodes to remove
    effects: list[str] = Field(default_factory=list)
