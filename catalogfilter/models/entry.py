"""
Catalog entry model.

Entries arrive from the UI layer as loosely-typed dicts, e.g.:

    {"type": "character", "id": 3, "item": {"name": "Alice", "avatar": "alice.png", "fav": "true"}}

All normalisation happens here, once, at ingestion:
- ``fav`` is always a bool (legacy ``"true"`` strings are accepted)
- ``name`` / ``avatar`` are strings or None
- ``characters`` (deck members) is a tuple of strings

INVARIANT: Ingestion never raises for wrong-shaped optional fields.
Anything a predicate cannot use degrades to an empty/None value, which
predicates treat as "does not match".
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class EntryKind(str, Enum):
    """Known entry kinds. Entries may carry other kinds; they match no kind-specific stage."""

    CHARACTER = "character"
    GROUP = "group"
    TAG = "tag"
    WORLD_INFO = "world_info"
    DECK = "deck"


def normalize_flag(value: Any) -> bool:
    """Normalize a boolean-or-legacy-string flag (True or "true" → True)."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() == "true"
    return False


def _is_identifier(value: Any) -> bool:
    return isinstance(value, (str, int)) and not isinstance(value, bool)


class EntryPayload(BaseModel):
    """Kind-specific data attached to an entry."""

    model_config = ConfigDict(frozen=True, extra="allow")

    name: str | None = None
    avatar: str | None = None
    fav: bool = False
    characters: tuple[str, ...] = ()

    @field_validator("name", "avatar", mode="before")
    @classmethod
    def _string_or_none(cls, value: Any) -> str | None:
        return value if isinstance(value, str) else None

    @field_validator("fav", mode="before")
    @classmethod
    def _normalize_fav(cls, value: Any) -> bool:
        return normalize_flag(value)

    @field_validator("characters", mode="before")
    @classmethod
    def _normalize_members(cls, value: Any) -> tuple[str, ...]:
        if not isinstance(value, (list, tuple)):
            return ()
        return tuple(str(member) for member in value)


class Entry(BaseModel):
    """
    One filterable catalog item.

    Attributes:
        kind: Entry kind, usually an EntryKind value (aliased as ``type``)
        id: Kind-dependent identifier (int for characters, str for groups/tags)
        uid: World-info record identifier
        item: Kind-specific payload
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="allow")

    kind: str = Field(default="", alias="type")
    id: str | int | None = None
    uid: str | int | None = None
    item: EntryPayload = Field(default_factory=EntryPayload)

    @field_validator("kind", mode="before")
    @classmethod
    def _normalize_kind(cls, value: Any) -> str:
        if isinstance(value, Enum):
            value = value.value
        return value if isinstance(value, str) else ""

    @field_validator("id", "uid", mode="before")
    @classmethod
    def _normalize_identifier(cls, value: Any) -> str | int | None:
        return value if _is_identifier(value) else None

    @field_validator("item", mode="before")
    @classmethod
    def _normalize_item(cls, value: Any) -> Any:
        if isinstance(value, (EntryPayload, dict)):
            return value
        return {}
