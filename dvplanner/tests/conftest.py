"""Shared fixtures for dvplanner unit tests.

Board payloads are built inline in the board detail endpoint's camelCase
shape, so parsing and optimization are exercised on the same data the
presentation layer receives.
"""
import pytest

from dvplanner import BoardDataHandler, BoardOptimizer, NodeScorer


def _payload_node(node_id: int, row: int, col: int, grade: str = "Common",
                  type_: str = "Stat", open_: int = 0, board_id: int = 71,
                  name: str = "") -> dict:
    return {
        "boardId": board_id,
        "nodeId": node_id,
        "name": name,
        "row": row,
        "col": col,
        "grade": grade,
        "type": type_,
        "icon": "",
        "effectList": [{"desc": f"effect {node_id}"}],
        "open": open_,
    }


@pytest.fixture(scope="session")
def scorer() -> NodeScorer:
    return NodeScorer()


@pytest.fixture(scope="session")
def optimizer(scorer: NodeScorer) -> BoardOptimizer:
    return BoardOptimizer(scorer)


@pytest.fixture(scope="session")
def handler(scorer: NodeScorer) -> BoardDataHandler:
    return BoardDataHandler(scorer)


@pytest.fixture
def sample_payload() -> dict:
    """Small board: Start at (8,8) with Commons east, Rare north, Legend south.

    Open: the two eastern Commons and the western Unique (5 points spent).
    """
    return {
        "nodeList": [
            _payload_node(1, 8, 8, grade="None", type_="Start", name="시작"),
            _payload_node(2, 8, 9, open_=1, name="공격력 +1"),
            _payload_node(3, 8, 10, open_=1),
            _payload_node(4, 7, 8, grade="Rare", name="방어력 +2"),
            _payload_node(5, 9, 8, grade="Legend", type_="SkillLevel"),
            _payload_node(6, 1, 1, grade="None", type_="None"),
            _payload_node(7, 8, 7, grade="Unique", open_=1),
        ],
        "openStatEffectList": [{"desc": "공격력 +1"}],
        "openSkillEffectList": [],
    }
