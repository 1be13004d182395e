import pytest
from pydantic import ValidationError

from catalogfilter.models.criteria import (
    FilterType,
    TagCriteria,
    coerce_tag_criteria,
    criteria_equal,
    default_criteria,
)
from catalogfilter.models.entry import Entry, EntryKind, EntryPayload, normalize_flag
from catalogfilter.models.failure import UnknownFilterKindError


class TestEntryIngestion:
    def test_from_upstream_dict(self) -> None:
        entry = Entry.model_validate(
            {"type": "character", "id": 7, "item": {"name": "Seraphina", "avatar": "sera.png"}}
        )
        assert entry.kind == EntryKind.CHARACTER
        assert entry.id == 7
        assert entry.item.name == "Seraphina"
        assert entry.item.avatar == "sera.png"

    def test_populate_by_field_name(self) -> None:
        entry = Entry(kind=EntryKind.GROUP, id="g1", item={"name": "Party"})
        assert entry.kind == "group"
        assert entry.item.name == "Party"

    def test_legacy_string_fav_normalized(self) -> None:
        entry = Entry.model_validate({"type": "character", "id": 1, "item": {"fav": "true"}})
        assert entry.item.fav is True

    def test_other_fav_values_are_false(self) -> None:
        for raw in ("false", "yes", 1, None, []):
            payload = EntryPayload.model_validate({"fav": raw})
            assert payload.fav is False

    def test_non_string_name_becomes_none(self) -> None:
        payload = EntryPayload.model_validate({"name": 42, "avatar": ["a.png"]})
        assert payload.name is None
        assert payload.avatar is None

    def test_deck_members_stringified(self) -> None:
        payload = EntryPayload.model_validate({"characters": [1, "2"]})
        assert payload.characters == ("1", "2")

    def test_non_list_deck_members_empty(self) -> None:
        payload = EntryPayload.model_validate({"characters": "1,2"})
        assert payload.characters == ()

    def test_extra_payload_fields_kept(self) -> None:
        entry = Entry.model_validate({"type": "world_info", "uid": 3, "item": {"comment": "Lore"}})
        assert entry.uid == 3
        assert entry.item.model_extra == {"comment": "Lore"}

    def test_malformed_fields_degrade(self) -> None:
        entry = Entry.model_validate({"type": None, "id": 1.5, "item": "not a dict"})
        assert entry.kind == ""
        assert entry.id is None
        assert entry.item == EntryPayload()

    def test_unknown_kind_kept(self) -> None:
        entry = Entry.model_validate({"type": "persona", "id": "p1"})
        assert entry.kind == "persona"

    def test_entry_immutable(self) -> None:
        entry = Entry(kind="character", id=1)
        with pytest.raises(ValidationError):
            entry.id = 2  # type: ignore[misc]


class TestNormalizeFlag:
    def test_booleans_pass_through(self) -> None:
        assert normalize_flag(True) is True
        assert normalize_flag(False) is False

    def test_string_true(self) -> None:
        assert normalize_flag("true") is True
        assert normalize_flag(" True ") is True

    def test_everything_else_false(self) -> None:
        assert normalize_flag("1") is False
        assert normalize_flag(1) is False
        assert normalize_flag(None) is False


class TestTagCriteria:
    def test_default_is_empty(self) -> None:
        assert TagCriteria().is_empty()

    def test_lists_converted_to_tuples(self) -> None:
        tags = TagCriteria(selected=["a", "b"], excluded=["c"])  # type: ignore[arg-type]
        assert tags.selected == ("a", "b")
        assert tags.excluded == ("c",)
        assert not tags.is_empty()

    def test_bare_string_is_one_tag(self) -> None:
        tags = TagCriteria(selected="nsfw")  # type: ignore[arg-type]
        assert tags.selected == ("nsfw",)

    def test_sets_sorted(self) -> None:
        tags = TagCriteria(excluded={"scifi", "nsfw"})  # type: ignore[arg-type]
        assert tags.excluded == ("nsfw", "scifi")

    def test_non_collection_rejected(self) -> None:
        with pytest.raises(TypeError):
            TagCriteria(selected=5)  # type: ignore[arg-type]

    def test_as_dict(self) -> None:
        tags = TagCriteria(selected=("a",), excluded=())
        assert tags.as_dict() == {"selected": ["a"], "excluded": []}


class TestCoerceTagCriteria:
    def test_tag_criteria_returned_as_is(self) -> None:
        tags = TagCriteria(selected=("a",))
        assert coerce_tag_criteria(tags) is tags

    def test_mapping_accepted(self) -> None:
        tags = coerce_tag_criteria({"selected": ["a"], "excluded": ["b"]})
        assert tags == TagCriteria(selected=("a",), excluded=("b",))

    def test_missing_keys_are_empty(self) -> None:
        tags = coerce_tag_criteria({"selected": ["a"]})
        assert tags == TagCriteria(selected=("a",))

    def test_set_values_accepted(self) -> None:
        tags = coerce_tag_criteria({"selected": frozenset({"b", "a"}), "excluded": {"nsfw"}})
        assert tags == TagCriteria(selected=("a", "b"), excluded=("nsfw",))

    def test_single_tag_string_accepted(self) -> None:
        tags = coerce_tag_criteria({"selected": "a", "excluded": ""})
        assert tags == TagCriteria(selected=("a",))

    def test_malformed_values_rejected(self) -> None:
        assert coerce_tag_criteria("nsfw") is None
        assert coerce_tag_criteria(None) is None
        assert coerce_tag_criteria({"selected": 5}) is None
        assert coerce_tag_criteria({"excluded": {"nsfw": True}}) is None


class TestCriteriaEqual:
    def test_strings(self) -> None:
        assert criteria_equal("alice", "alice")
        assert not criteria_equal("alice", "Alice")

    def test_bool_not_equal_to_int(self) -> None:
        assert criteria_equal(True, True)
        assert not criteria_equal(True, 1)
        assert not criteria_equal(False, 0)

    def test_string_not_equal_to_other_types(self) -> None:
        assert not criteria_equal("", False)
        assert not criteria_equal("1", 1)

    def test_tag_criteria_by_value(self) -> None:
        assert criteria_equal(
            TagCriteria(selected=("a",), excluded=("b",)),
            TagCriteria(selected=("a",), excluded=("b",)),
        )
        assert not criteria_equal(TagCriteria(selected=("a",)), TagCriteria(excluded=("a",)))

    def test_tag_order_matters(self) -> None:
        assert not criteria_equal(TagCriteria(selected=("a", "b")), TagCriteria(selected=("b", "a")))

    def test_tag_criteria_equals_equivalent_mapping(self) -> None:
        assert criteria_equal(TagCriteria(selected=("a",)), {"excluded": [], "selected": ["a"]})

    def test_mapping_key_order_ignored(self) -> None:
        assert criteria_equal({"a": 1, "b": [1, 2]}, {"b": [1, 2], "a": 1})
        assert not criteria_equal({"a": 1}, {"a": 1, "b": 2})

    def test_none(self) -> None:
        assert criteria_equal(None, None)
        assert not criteria_equal(None, "")


class TestDefaults:
    def test_one_value_per_kind(self) -> None:
        defaults = default_criteria()
        assert set(defaults) == set(FilterType)

    def test_defaults_are_fresh(self) -> None:
        first = default_criteria()
        first[FilterType.SEARCH] = "changed"
        assert default_criteria()[FilterType.SEARCH] == ""


class TestUnknownFilterKindError:
    def test_is_key_error(self) -> None:
        error = UnknownFilterKindError("rating", ("search", "tag"))
        assert isinstance(error, KeyError)
        assert error.kind == "rating"
        assert "rating" in str(error)
        assert "search, tag" in str(error)
