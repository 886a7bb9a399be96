"""Daevanion board optimizer — greedy frontier expansion + multi-board totals."""
import logging
from collections import deque
from collections.abc import Iterable, Mapping

from dvplanner.models import (
    AggregateResult, BoardInput, DaevanionNode, NodeRecommendation,
    OptimizationResult, OptimizerConfig, Recommendations,
)
from dvplanner.scoring import NodeScorer, is_adjacent

logger = logging.getLogger(__name__)


class BoardOptimizer:
    """Reallocates a board's spent points for maximum combat power.

    The search never spends more than the points already spent on the board,
    and never returns a configuration weaker than the current one.
    """

    def __init__(self, scorer: NodeScorer | None = None):
        self.scorer = scorer or NodeScorer()

    @property
    def config(self) -> OptimizerConfig:
        return self.scorer.config

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def is_optimizable(self, board_name: str) -> bool:
        return board_name in self.config.optimizable_boards

    def optimize(self, nodes: list[DaevanionNode], board_name: str,
                 current_ids: Iterable[int]) -> OptimizationResult:
        """Best activation for one board under the current point budget."""
        if not self.is_optimizable(board_name):
            return OptimizationResult.empty()

        start = next((n for n in nodes if n.is_start), None)
        if start is None:
            logger.debug("Board %s has no Start node; skipping", board_name)
            return OptimizationResult.empty()

        node_map = {n.node_id: n for n in nodes}
        current = self._normalize_current(node_map, start, current_ids)
        current_points = self.scorer.total_cost(node_map, current)
        current_power = self.scorer.total_power(node_map, current)

        activated = set(self._greedy_solve(nodes, start, current_points))
        optimized_power = self.scorer.total_power(node_map, activated)

        if optimized_power < current_power:
            logger.debug("Board %s: greedy power %d < current %d; keeping current",
                         board_name, optimized_power, current_power)
            activated = set(current)
            optimized_power = current_power

        add = [i for i, n in node_map.items()
               if i in activated and i not in current and not n.is_start]
        remove = [i for i, n in node_map.items()
                  if i in current and i not in activated and not n.is_start]

        return OptimizationResult(
            total_points=current_points,
            current_power=current_power,
            activated_node_ids=activated,
            optimized_power=optimized_power,
            improvement=max(optimized_power - current_power, 0),
            recommendations=Recommendations(add=add, remove=remove),
        )

    def optimize_all_boards(self, boards: Mapping[str, BoardInput]) -> AggregateResult:
        """Optimize every eligible board and total the results.

        Ineligible board names are skipped and contribute nothing.
        """
        total_current = 0
        total_optimized = 0
        board_results: dict[str, OptimizationResult] = {}

        for board_name, board in boards.items():
            if not self.is_optimizable(board_name):
                continue
            result = self.optimize(board.nodes, board_name, board.activated)
            board_results[board_name] = result
            total_current += result.current_power
            total_optimized += result.optimized_power

        total_optimized = max(total_optimized, total_current)
        return AggregateResult(
            total_current_power=total_current,
            total_optimized_power=total_optimized,
            total_improvement=total_optimized - total_current,
            board_results=board_results,
        )

    def recommendation_details(self, result: OptimizationResult,
                               nodes: list[DaevanionNode]) -> dict[str, list[NodeRecommendation]]:
        """Display rows for result.recommendations (unknown IDs are skipped)."""
        node_map = {n.node_id: n for n in nodes}
        return {
            "add": [self._to_recommendation(node_map[i], sign=1)
                    for i in result.recommendations.add if i in node_map],
            "remove": [self._to_recommendation(node_map[i], sign=-1)
                       for i in result.recommendations.remove if i in node_map],
        }

    # ------------------------------------------------------------------
    # Solver
    # ------------------------------------------------------------------

    def _greedy_solve(self, nodes: list[DaevanionNode], start: DaevanionNode,
                      budget: int) -> list[int]:
        """Frontier walk from start; returns node IDs in activation order.

        Each round pops one frontier node and buys its best-ranked affordable
        neighbour. An exhausted frontier is re-seeded from every activated
        node; a full pass without a purchase ends the walk.
        """
        ranked = self.scorer.rank_candidates(nodes)
        neighbours = {
            n.node_id: [c for c in ranked if is_adjacent(n, c)]
            for n in nodes
        }

        activated: dict[int, DaevanionNode] = {start.node_id: start}
        remaining = budget
        frontier: deque[DaevanionNode] = deque([start])
        progressed = False
        rounds = 0

        while remaining > 0 and rounds < self.config.max_rounds:
            if not frontier:
                if not progressed:
                    break
                frontier.extend(activated.values())
                progressed = False

            current = frontier.popleft()
            rounds += 1

            best = next(
                (c for c in neighbours.get(current.node_id, [])
                 if c.node_id not in activated
                 and self.scorer.point_cost(c) <= remaining),
                None,
            )
            if best is None:
                continue

            activated[best.node_id] = best
            remaining -= self.scorer.point_cost(best)
            frontier.append(best)
            progressed = True

        if remaining > 0 and rounds >= self.config.max_rounds:
            logger.warning("Frontier walk hit the round limit (%d)", self.config.max_rounds)
        return list(activated)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _normalize_current(node_map: dict[int, DaevanionNode], start: DaevanionNode,
                           current_ids: Iterable[int]) -> set[int]:
        """Current activation restricted to playable nodes of this board, plus Start."""
        current = {
            i for i in current_ids
            if i in node_map and not node_map[i].is_empty
        }
        current.add(start.node_id)
        return current

    def _to_recommendation(self, node: DaevanionNode, sign: int) -> NodeRecommendation:
        return NodeRecommendation(
            node_id=node.node_id,
            name=node.display_name,
            grade=node.grade,
            point_cost=self.scorer.point_cost(node),
            power_delta=sign * self.scorer.combat_power(node),
            effects=[e.desc for e in node.effect_list],
        )
