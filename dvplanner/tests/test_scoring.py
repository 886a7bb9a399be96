"""Tests for NodeScorer and is_adjacent (scoring.py)."""
import pytest

from dvplanner import (
    DEFAULT_CONFIG, DaevanionNode, NodeScorer, OptimizerConfig, is_adjacent,
)


def _make_node(node_id: int = 1, row: int = 8, col: int = 8,
               grade: str = "Common", type_: str = "Stat") -> DaevanionNode:
    return DaevanionNode(
        board_id=71, node_id=node_id, row=row, col=col, grade=grade, type=type_,
    )


class TestPointCost:
    @pytest.mark.parametrize("grade, cost", [
        ("Common", 1), ("Rare", 2), ("Unique", 3), ("Legend", 5), ("None", 0),
    ])
    def test_grade_table(self, scorer: NodeScorer, grade: str, cost: int) -> None:
        assert scorer.point_cost(_make_node(grade=grade)) == cost

    def test_start_is_free_whatever_its_grade(self, scorer: NodeScorer) -> None:
        assert scorer.point_cost(_make_node(grade="Legend", type_="Start")) == 0

    def test_type_none_is_free(self, scorer: NodeScorer) -> None:
        assert scorer.point_cost(_make_node(grade="Rare", type_="None")) == 0

    def test_power_equals_cost(self, scorer: NodeScorer) -> None:
        for grade in ("Common", "Rare", "Unique", "Legend", "None"):
            node = _make_node(grade=grade)
            assert scorer.combat_power(node) == scorer.point_cost(node)

    def test_custom_cost_table(self) -> None:
        config = OptimizerConfig(grade_point_cost={"Common": 2, "Legend": 10})
        custom = NodeScorer(config)
        assert custom.point_cost(_make_node(grade="Common")) == 2
        assert custom.point_cost(_make_node(grade="Legend")) == 10
        assert custom.point_cost(_make_node(grade="Rare")) == 0

    def test_cost_table_is_read_only(self) -> None:
        table = {"Common": 2}
        config = OptimizerConfig(grade_point_cost=table)
        with pytest.raises(TypeError):
            config.grade_point_cost["Common"] = 9
        with pytest.raises(TypeError):
            DEFAULT_CONFIG.grade_point_cost["Legend"] = 0
        table["Common"] = 7  # caller's dict is copied, not shared
        assert config.grade_point_cost["Common"] == 2
        assert NodeScorer().point_cost(_make_node(grade="Legend")) == 5

    def test_cost_table_dumps_as_dict(self) -> None:
        assert DEFAULT_CONFIG.model_dump()["grade_point_cost"]["Legend"] == 5


class TestActivatable:
    def test_stat_and_skill_nodes_are_activatable(self, scorer: NodeScorer) -> None:
        assert scorer.is_activatable(_make_node(grade="Rare"))
        assert scorer.is_activatable(_make_node(grade="Legend", type_="SkillLevel"))

    def test_start_and_empty_cells_are_not(self, scorer: NodeScorer) -> None:
        assert not scorer.is_activatable(_make_node(grade="Common", type_="Start"))
        assert not scorer.is_activatable(_make_node(grade="None"))
        assert not scorer.is_activatable(_make_node(grade="Common", type_="None"))


class TestAdjacency:
    @pytest.mark.parametrize("row, col", [(7, 8), (9, 8), (8, 7), (8, 9)])
    def test_orthogonal_neighbours(self, row: int, col: int) -> None:
        assert is_adjacent(_make_node(row=8, col=8), _make_node(row=row, col=col))

    @pytest.mark.parametrize("row, col", [(7, 7), (9, 9), (8, 8), (8, 10), (6, 8)])
    def test_diagonal_same_and_distant_cells(self, row: int, col: int) -> None:
        assert not is_adjacent(_make_node(row=8, col=8), _make_node(row=row, col=col))


class TestRanking:
    def test_equal_efficiency_prefers_cheaper(self, scorer: NodeScorer) -> None:
        nodes = [
            _make_node(1, grade="Legend"),
            _make_node(2, grade="Unique"),
            _make_node(3, grade="Common"),
            _make_node(4, grade="Rare"),
        ]
        ranked = scorer.rank_candidates(nodes)
        assert [n.grade for n in ranked] == ["Common", "Rare", "Unique", "Legend"]

    def test_excludes_start_and_empty(self, scorer: NodeScorer) -> None:
        nodes = [
            _make_node(1, grade="None", type_="Start"),
            _make_node(2, grade="None", type_="None"),
            _make_node(3, grade="Rare"),
        ]
        assert [n.node_id for n in scorer.rank_candidates(nodes)] == [3]

    def test_stable_for_identical_candidates(self, scorer: NodeScorer) -> None:
        nodes = [_make_node(i) for i in (5, 3, 9)]
        assert [n.node_id for n in scorer.rank_candidates(nodes)] == [5, 3, 9]
