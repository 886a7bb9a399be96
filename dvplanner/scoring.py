"""Node point cost / combat power derivation and candidate ranking."""
from functools import cmp_to_key

from dvplanner.models import DEFAULT_CONFIG, DaevanionNode, OptimizerConfig


def is_adjacent(a: DaevanionNode, b: DaevanionNode) -> bool:
    """True if b is directly above, below, left or right of a (no diagonals)."""
    row_diff = abs(a.row - b.row)
    col_diff = abs(a.col - b.col)
    return (row_diff == 1 and col_diff == 0) or (row_diff == 0 and col_diff == 1)


class NodeScorer:
    """Derives point cost and combat power of board nodes from their grade."""

    def __init__(self, config: OptimizerConfig = DEFAULT_CONFIG):
        self.config = config

    # ------------------------------------------------------------------
    # Cost / power
    # ------------------------------------------------------------------

    def point_cost(self, node: DaevanionNode) -> int:
        # Start is pre-activated and free
        if node.is_start or node.is_empty:
            return 0
        return self.config.grade_point_cost.get(node.grade, 0)

    def combat_power(self, node: DaevanionNode) -> int:
        """1 combat power per point spent."""
        return self.point_cost(node)

    def efficiency(self, node: DaevanionNode) -> float:
        cost = self.point_cost(node)
        if cost <= 0:
            return 0.0
        return self.combat_power(node) / cost

    def is_activatable(self, node: DaevanionNode) -> bool:
        """Candidate for purchase: playable, not Start, costs points."""
        return not node.is_start and not node.is_empty and self.point_cost(node) > 0

    # ------------------------------------------------------------------
    # Totals
    # ------------------------------------------------------------------

    def total_cost(self, nodes: dict[int, DaevanionNode], node_ids) -> int:
        return sum(self.point_cost(nodes[i]) for i in node_ids if i in nodes)

    def total_power(self, nodes: dict[int, DaevanionNode], node_ids) -> int:
        return sum(self.combat_power(nodes[i]) for i in node_ids if i in nodes)

    # ------------------------------------------------------------------
    # Ranking
    # ------------------------------------------------------------------

    def compare(self, a: DaevanionNode, b: DaevanionNode) -> int:
        """sort() comparator: higher efficiency first, cheaper first on ties."""
        a_eff, b_eff = self.efficiency(a), self.efficiency(b)
        if abs(a_eff - b_eff) < self.config.efficiency_epsilon:
            return self.point_cost(a) - self.point_cost(b)
        return -1 if a_eff > b_eff else 1

    def rank_candidates(self, nodes: list[DaevanionNode]) -> list[DaevanionNode]:
        """Activatable nodes, best first (see compare)."""
        candidates = [n for n in nodes if self.is_activatable(n)]
        return sorted(candidates, key=cmp_to_key(self.compare))
