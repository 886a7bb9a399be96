"""dvplanner — Daevanion board optimizer."""

from dvplanner.constants import (
    GRADE_POINT_COST, BOARD_NAMES, OPTIMIZABLE_BOARDS, CLASS_BOARD_RANGES,
    get_board_name, get_board_ids_for_class, is_optimizable_board,
)
from dvplanner.models import (
    OptimizerConfig, DEFAULT_CONFIG,
    NodeEffect, DaevanionNode, BoardDetail, BoardInput,
    Recommendations, OptimizationResult, AggregateResult, NodeRecommendation,
)
from dvplanner.scoring import NodeScorer, is_adjacent
from dvplanner.optimizer import BoardOptimizer
from dvplanner.data import BoardDataHandler, BoardDataError
from dvplanner.snapshot import CharacterSnapshot, SnapshotStore

__all__ = [
    # Constants / lookups
    "GRADE_POINT_COST", "BOARD_NAMES", "OPTIMIZABLE_BOARDS", "CLASS_BOARD_RANGES",
    "get_board_name", "get_board_ids_for_class", "is_optimizable_board",
    # Models
    "OptimizerConfig", "DEFAULT_CONFIG",
    "NodeEffect", "DaevanionNode", "BoardDetail", "BoardInput",
    "Recommendations", "OptimizationResult", "AggregateResult", "NodeRecommendation",
    # Optimizer
    "NodeScorer", "is_adjacent", "BoardOptimizer",
    # Board data
    "BoardDataHandler", "BoardDataError",
    # Persistence
    "CharacterSnapshot", "SnapshotStore",
]
