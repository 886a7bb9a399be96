"""Character snapshot persistence (JSON CRUD)."""
import logging
import pathlib
from datetime import datetime, timezone
from typing import Optional

import orjson
from pydantic import BaseModel, Field

from dvplanner.models import BoardDetail

logger = logging.getLogger(__name__)


class CharacterSnapshot(BaseModel):
    """Board details fetched for one character at one point in time."""
    character_id: str
    server_id: int
    class_name: str = ""
    boards: dict[int, BoardDetail] = Field(default_factory=dict)
    saved_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class SnapshotStore:
    """Persists CharacterSnapshots to a JSON file, keyed by character ID."""

    CURRENT_VERSION = 1

    def __init__(self, base_dir: pathlib.Path):
        self.file_path = pathlib.Path(base_dir) / "character_snapshots.json"
        self.snapshots: dict[str, CharacterSnapshot] = {}
        self._load()

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def _load(self) -> None:
        if not self.file_path.exists():
            return
        try:
            raw = orjson.loads(self.file_path.read_bytes())
            for character_id, s in raw.get("snapshots", {}).items():
                self.snapshots[character_id] = CharacterSnapshot.model_validate(
                    {**s, "character_id": character_id})
        except (OSError, ValueError, TypeError, AttributeError) as e:
            # A corrupt store behaves like an empty one
            logger.warning("Error loading snapshots from %s: %s", self.file_path, e)
            self.snapshots = {}

    def save(self) -> None:
        data = {
            "version": self.CURRENT_VERSION,
            "snapshots": {
                cid: s.model_dump(mode="json", by_alias=True, exclude={"character_id"})
                for cid, s in self.snapshots.items()
            },
        }
        self.file_path.parent.mkdir(parents=True, exist_ok=True)
        self.file_path.write_bytes(orjson.dumps(data, option=orjson.OPT_INDENT_2))

    # ------------------------------------------------------------------
    # CRUD
    # ------------------------------------------------------------------

    def save_snapshot(self, character_id: str, server_id: int,
                      boards: dict[int, BoardDetail],
                      class_name: str = "") -> CharacterSnapshot:
        snapshot = CharacterSnapshot(
            character_id=character_id,
            server_id=server_id,
            class_name=class_name,
            boards=dict(boards),
        )
        self.snapshots[character_id] = snapshot
        self.save()
        return snapshot

    def get(self, character_id: str) -> Optional[CharacterSnapshot]:
        return self.snapshots.get(character_id)

    def has(self, character_id: str) -> bool:
        return character_id in self.snapshots

    def list_snapshots(self) -> list[CharacterSnapshot]:
        return list(self.snapshots.values())

    def delete(self, character_id: str) -> None:
        if character_id in self.snapshots:
            del self.snapshots[character_id]
            self.save()
