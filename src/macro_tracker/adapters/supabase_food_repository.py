"""Supabase repository for food entries."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from macro_tracker.adapters.supabase_queries import (
    execute,
    parse_float,
    parse_timestamp,
)
from macro_tracker.domain.models import FoodEntry
from macro_tracker.errors import DependencyFailureError
from macro_tracker.services.foods import FoodEntryRepository

_COLUMNS = "id, owner_id, timestamp, name, protein, carbs, fat, calories, image_ref"


@dataclass
class SupabaseFoodEntryRepository(FoodEntryRepository):
    """Supabase implementation for food entry persistence."""

    client: Client

    def create_entry(self, entry: FoodEntry) -> FoodEntry:
        """Insert an entry row and return the stored entry."""
        response = execute(
            self.client.table("food_entries").insert(
                {"id": str(entry.id), **_serialize(entry)}
            ),
            "create food entry",
        )
        if not response.data:
            raise DependencyFailureError("Could not create food entry")
        return _parse_entry(response.data[0])

    def get_entry(self, entry_id: UUID) -> FoodEntry | None:
        """Return an entry by id."""
        response = execute(
            self.client.table("food_entries")
            .select(_COLUMNS)
            .eq("id", str(entry_id))
            .limit(1),
            "load food entry",
        )
        if not response.data:
            return None
        return _parse_entry(response.data[0])

    def list_entries(self, owner_id: UUID) -> list[FoodEntry]:
        """Return an owner's entries, newest first."""
        response = execute(
            self.client.table("food_entries")
            .select(_COLUMNS)
            .eq("owner_id", str(owner_id))
            .order("timestamp", desc=True),
            "list food entries",
        )
        return [_parse_entry(row) for row in response.data or []]

    def list_entries_between(
        self, owner_id: UUID, start: datetime, end: datetime
    ) -> list[FoodEntry]:
        """Return an owner's entries inside a closed time range."""
        response = execute(
            self.client.table("food_entries")
            .select(_COLUMNS)
            .eq("owner_id", str(owner_id))
            .gte("timestamp", start.isoformat())
            .lte("timestamp", end.isoformat())
            .order("timestamp", desc=False),
            "list food entries",
        )
        return [_parse_entry(row) for row in response.data or []]

    def update_entry(self, entry: FoodEntry) -> FoodEntry:
        """Write back all mutable columns of an entry."""
        response = execute(
            self.client.table("food_entries")
            .update(_serialize(entry))
            .eq("id", str(entry.id)),
            "update food entry",
        )
        if not response.data:
            return entry
        return _parse_entry(response.data[0])

    def delete_entry(self, entry_id: UUID) -> None:
        """Delete an entry row."""
        execute(
            self.client.table("food_entries").delete().eq("id", str(entry_id)),
            "delete food entry",
        )


def _serialize(entry: FoodEntry) -> dict[str, object]:
    return {
        "owner_id": str(entry.owner_id),
        "timestamp": entry.timestamp.isoformat(),
        "name": entry.name,
        "protein": entry.protein,
        "carbs": entry.carbs,
        "fat": entry.fat,
        "calories": entry.calories,
        "image_ref": entry.image_ref,
    }


def _parse_entry(row: dict[str, object]) -> FoodEntry:
    return FoodEntry(
        id=UUID(str(row["id"])),
        owner_id=UUID(str(row["owner_id"])),
        timestamp=parse_timestamp(row["timestamp"]),
        name=str(row.get("name") or ""),
        protein=parse_float(row.get("protein")),
        carbs=parse_float(row.get("carbs")),
        fat=parse_float(row.get("fat")),
        calories=parse_float(row.get("calories")),
        image_ref=str(row.get("image_ref") or ""),
    )
