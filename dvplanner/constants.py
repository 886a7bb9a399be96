"""Game constants — no mutable state."""

# Board grid is 15x15, coordinates are 1-based
GRID_SIZE = 15

# Point cost per node grade (1 point = 1 combat power)
GRADE_POINT_COST: dict[str, int] = {
    "Common": 1,
    "Rare":   2,
    "Unique": 3,
    "Legend": 5,
    "None":   0,
}

# Display / summary order for playable grades
GRADE_ORDER = ["Common", "Rare", "Unique", "Legend"]

NODE_TYPE_START = "Start"
NODE_TYPE_NONE = "None"
GRADE_NONE = "None"

# Efficiency values closer than this are treated as equal
EFFICIENCY_EPSILON = 0.001

# Safety stop for the frontier walk (frontier pops per board)
MAX_EXPANSION_ROUNDS = 10_000

# Board index within a class range -> board name (shared by all classes)
BOARD_NAMES = ["네자칸", "지켈", "바이젤", "트리니엘", "아리엘", "아스펠"]

# Boards the optimizer works on (아리엘, 아스펠 are excluded)
OPTIMIZABLE_BOARDS: tuple[str, ...] = ("네자칸", "지켈", "바이젤", "트리니엘")

# Board ID ranges by class
CLASS_BOARD_RANGES: dict[str, tuple[int, int]] = {
    "검성":   (11, 16),
    "수호성": (21, 26),
    "궁성":   (31, 36),
    "살성":   (41, 46),
    "정령성": (51, 56),
    "마도성": (61, 66),
    "치유성": (71, 76),
    "호법성": (81, 86),
}

# Used when the class name cannot be matched
DEFAULT_CLASS = "치유성"


def get_board_name(board_id: int) -> str:
    """Return the display name of a board, e.g. 71 -> "네자칸"."""
    for start, end in CLASS_BOARD_RANGES.values():
        if start <= board_id <= end:
            index = board_id - start
            if index < len(BOARD_NAMES):
                return BOARD_NAMES[index]
            return f"보드{index + 1}"
    return f"보드{board_id}"


def get_board_ids_for_class(class_name: str) -> list[int]:
    """Board IDs owned by a class. Matches on substring ("치유성 Lv.50" works)."""
    for key, (start, end) in CLASS_BOARD_RANGES.items():
        if key in class_name:
            return list(range(start, end + 1))
    start, end = CLASS_BOARD_RANGES[DEFAULT_CLASS]
    return list(range(start, end + 1))


def is_optimizable_board(board_name: str) -> bool:
    return board_name in OPTIMIZABLE_BOARDS
