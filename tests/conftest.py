from collections.abc import Collection, Sequence

import pytest

from catalogfilter.filtering import reset_filter_metrics
from catalogfilter.models.entry import Entry


class FakeFuzzySearcher:
    """Fuzzy searcher returning fixed match sets and recording its calls."""

    def __init__(
        self,
        characters: Collection[int] = (),
        groups: Collection[str] = (),
        world_info: Collection[str | int] = (),
    ) -> None:
        self.characters = set(characters)
        self.groups = set(groups)
        self.world_info = set(world_info)
        self.calls: list[tuple[str, str]] = []

    def match_characters(self, term: str) -> Collection[int]:
        self.calls.append(("characters", term))
        return self.characters

    def match_groups(self, term: str) -> Collection[str]:
        self.calls.append(("groups", term))
        return self.groups

    def match_world_info(self, entries: Sequence[Entry], term: str) -> Collection[str | int]:
        self.calls.append(("world_info", term))
        return self.world_info


@pytest.fixture(autouse=True)
def reset_metrics() -> None:
    """Reset pipeline metrics before each test."""
    reset_filter_metrics()


@pytest.fixture
def alice() -> Entry:
    return Entry.model_validate(
        {"type": "character", "id": 1, "item": {"name": "Alice", "avatar": "alice.png", "fav": True}}
    )


@pytest.fixture
def bob() -> Entry:
    return Entry.model_validate(
        {"type": "character", "id": 2, "item": {"name": "Bob", "avatar": "bob.png", "fav": False}}
    )


@pytest.fixture
def alice_group() -> Entry:
    return Entry.model_validate({"type": "group", "id": "g1", "item": {"name": "Alice's Group"}})


@pytest.fixture
def sample_entries(alice: Entry, bob: Entry, alice_group: Entry) -> list[Entry]:
    """Two characters and a group."""
    return [alice, bob, alice_group]


@pytest.fixture
def sample_tag_index() -> dict[str, object]:
    """Tag index keyed by avatar (characters) or stringified id (others)."""
    return {
        "alice.png": ["fantasy", "nsfw"],
        "bob.png": ["fantasy", "scifi"],
        "g1": ["fantasy"],
        "broken.png": "fantasy",
    }


@pytest.fixture
def fake_searcher() -> FakeFuzzySearcher:
    return FakeFuzzySearcher()


@pytest.fixture
def make_searcher() -> type[FakeFuzzySearcher]:
    """Factory for searchers with custom match sets."""
    return FakeFuzzySearcher
