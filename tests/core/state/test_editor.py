# tests/core/state/test_editor.py
"""
core/state/editor.py unit tests

Key protection, type cycling, value commit per kind, rename rules and
bounded navigation.
"""

import pytest

from ddbconsole.core.exceptions import ValidationError
from ddbconsole.core.models import AttributeValue, Record, ValueKind
from ddbconsole.core.state.editor import (
    NEW_ATTRIBUTE_NAME,
    AttributeEditorState,
    EditingField,
    EditorMode,
    cycle_value,
    parse_value,
)


@pytest.fixture
def editor(orders_detail, sample_records):
    """Edit mode on item id=1 (rows: id, active, blob, name)"""
    return AttributeEditorState.for_edit(orders_detail, sample_records[0])


def _select(editor: AttributeEditorState, name: str) -> None:
    editor.selected = [n for n, _ in editor.attributes].index(name)


def _commit_value(editor: AttributeEditorState, name: str, text: str) -> AttributeValue:
    _select(editor, name)
    assert editor.start_value_edit()
    editor.buffer = text
    editor.commit_edit()
    return dict(editor.attributes)[name]


# =============================================================================
# Construction
# =============================================================================


class TestConstruction:
    def test_edit_orders_keys_first(self, editor):
        assert [name for name, _ in editor.attributes] == ["id", "active", "blob", "name"]
        assert editor.mode is EditorMode.EDIT
        assert editor.selected == 0
        assert editor.editing is None

    def test_edit_composite_keys_first(self, events_detail):
        attributes = {
            "zeta": AttributeValue.string("z"),
            "ts": AttributeValue.number("1"),
            "alpha": AttributeValue.string("a"),
            "pk": AttributeValue.string("p"),
        }
        record = Record(attributes, attributes["pk"], attributes["ts"])
        editor = AttributeEditorState.for_edit(events_detail, record)

        assert [name for name, _ in editor.attributes] == ["pk", "ts", "alpha", "zeta"]

    def test_create_seeds_key_rows(self, events_detail):
        editor = AttributeEditorState.for_create(events_detail)

        assert editor.mode is EditorMode.CREATE
        assert editor.attributes == [
            ("pk", AttributeValue.string("")),
            ("ts", AttributeValue.number("")),
        ]


# =============================================================================
# Key protection
# =============================================================================


class TestKeyProtection:
    def test_hash_key_cannot_be_retyped_or_deleted(self, editor):
        """Cycle-type and delete on the id row change nothing"""
        before = list(editor.attributes)
        _select(editor, "id")

        assert not editor.cycle_type()
        assert not editor.delete_attribute()
        assert editor.attributes == before
        assert dict(editor.attributes)["id"] == AttributeValue.string("1")

    def test_hash_key_cannot_be_renamed(self, editor):
        _select(editor, "id")
        assert not editor.start_key_edit()
        assert editor.editing is None

    def test_range_key_protected(self, events_detail):
        editor = AttributeEditorState.for_create(events_detail)
        editor.selected = 1

        assert not editor.cycle_type()
        assert not editor.delete_attribute()
        assert not editor.start_key_edit()
        assert [name for name, _ in editor.attributes] == ["pk", "ts"]

    def test_key_value_still_editable(self, editor):
        assert _commit_value(editor, "id", "42") == AttributeValue.string("42")

    def test_add_row_is_not_an_attribute(self, editor):
        editor.selected = len(editor.attributes)

        assert editor.on_add_row
        assert not editor.start_value_edit()
        assert not editor.start_key_edit()
        assert not editor.cycle_type()
        assert not editor.delete_attribute()

    @pytest.mark.parametrize("sequence", ["tdkdtkddd", "dddd", "ktkt"])
    def test_key_names_survive_any_command_sequence(self, editor, sequence):
        for index in range(len(editor.attributes) + 1):
            editor.selected = index
            for command in sequence:
                if command == "t":
                    editor.cycle_type()
                elif command == "d":
                    editor.delete_attribute()
                elif editor.start_key_edit():
                    editor.buffer = "renamed"
                    try:
                        editor.commit_edit()
                    except ValidationError:
                        editor.cancel_edit()
                editor.selected = min(editor.selected, len(editor.attributes))

        assert "id" in dict(editor.attributes)


# =============================================================================
# Type cycling
# =============================================================================


class TestCycleType:
    def test_transition_table(self):
        assert cycle_value(AttributeValue.string("12")) == AttributeValue.number("12")
        assert cycle_value(AttributeValue.number("12")) == AttributeValue.binary(b"")
        assert cycle_value(AttributeValue.binary(b"\x01")) == AttributeValue.string("")

    @pytest.mark.parametrize(
        "value",
        [
            AttributeValue.boolean(True),
            AttributeValue.null(),
            AttributeValue(ValueKind.LIST, []),
            AttributeValue(ValueKind.MAP, {}),
            AttributeValue(ValueKind.STRING_SET, ["a"]),
        ],
    )
    def test_other_kinds_reset_to_string(self, value):
        assert cycle_value(value) == AttributeValue.string("")

    def test_full_cycle_on_row(self, editor):
        _select(editor, "name")

        editor.cycle_type()
        assert dict(editor.attributes)["name"] == AttributeValue.number("alice")
        editor.cycle_type()
        assert dict(editor.attributes)["name"] == AttributeValue.binary(b"")
        editor.cycle_type()
        assert dict(editor.attributes)["name"] == AttributeValue.string("")

    def test_position_preserved(self, editor):
        _select(editor, "blob")
        index = editor.selected
        editor.cycle_type()
        assert editor.attributes[index][0] == "blob"


# =============================================================================
# Value commit
# =============================================================================


class TestValueCommit:
    def test_start_value_edit_seeds_buffer(self, editor):
        _select(editor, "blob")
        editor.start_value_edit()
        assert editor.editing is EditingField.VALUE
        assert editor.buffer == "4f6b"

        editor.cancel_edit()
        _select(editor, "active")
        editor.start_value_edit()
        assert editor.buffer == "true"

    @pytest.mark.parametrize("text", ["YES", "true", "1", "True"])
    def test_boolean_truthy(self, editor, text):
        assert _commit_value(editor, "active", text) == AttributeValue.boolean(True)

    @pytest.mark.parametrize("text", ["maybe", "no", "0", ""])
    def test_boolean_falsy(self, editor, text):
        assert _commit_value(editor, "active", text) == AttributeValue.boolean(False)

    def test_binary_odd_length(self, editor):
        """The trailing unpaired digit is dropped"""
        assert _commit_value(editor, "blob", "4f6") == AttributeValue.binary(b"\x4f")

    def test_binary_invalid_pairs(self, editor):
        assert _commit_value(editor, "blob", "zz4fgg") == AttributeValue.binary(b"\x4f")

    def test_binary_round_trip(self, editor):
        """Committing the untouched hex buffer keeps the bytes"""
        _select(editor, "blob")
        editor.start_value_edit()
        editor.commit_edit()
        assert dict(editor.attributes)["blob"] == AttributeValue.binary(b"\x4f\x6b")

    def test_number_verbatim(self, editor):
        editor.attributes.append(("total", AttributeValue.number("1")))
        assert _commit_value(editor, "total", "not-a-number") == AttributeValue.number("not-a-number")

    def test_string_verbatim(self, editor):
        assert _commit_value(editor, "name", "  spaced  ") == AttributeValue.string("  spaced  ")

    def test_other_kinds_commit_as_string(self):
        assert parse_value(ValueKind.NULL, "x") == AttributeValue.string("x")
        assert parse_value(ValueKind.LIST, "[]") == AttributeValue.string("[]")

    def test_cancel_discards(self, editor):
        _select(editor, "name")
        editor.start_value_edit()
        editor.input_char("!")
        editor.cancel_edit()

        assert editor.editing is None
        assert editor.buffer == ""
        assert dict(editor.attributes)["name"] == AttributeValue.string("alice")

    def test_input_and_backspace(self, editor):
        _select(editor, "name")
        editor.start_value_edit()
        editor.input_char("s")
        editor.backspace()
        editor.backspace()
        editor.commit_edit()
        assert dict(editor.attributes)["name"] == AttributeValue.string("alic")


# =============================================================================
# Rename / add / delete
# =============================================================================


class TestRename:
    def test_rename_keeps_value_and_position(self, editor):
        _select(editor, "name")
        index = editor.selected
        assert editor.start_key_edit()
        assert editor.buffer == "name"
        editor.buffer = "full_name"
        editor.commit_edit()

        assert editor.attributes[index] == ("full_name", AttributeValue.string("alice"))

    def test_rename_onto_existing_name_refused(self, editor):
        _select(editor, "name")
        editor.start_key_edit()
        editor.buffer = "blob"

        with pytest.raises(ValidationError):
            editor.commit_edit()

        assert editor.editing is EditingField.KEY
        assert [n for n, _ in editor.attributes].count("blob") == 1

    def test_rename_onto_key_name_refused(self, editor):
        _select(editor, "name")
        editor.start_key_edit()
        editor.buffer = "id"
        with pytest.raises(ValidationError):
            editor.commit_edit()

    def test_rename_to_same_name(self, editor):
        _select(editor, "name")
        editor.start_key_edit()
        editor.commit_edit()
        assert editor.editing is None


class TestAddDelete:
    def test_add_appends_and_selects(self, editor):
        editor.add_attribute()

        assert editor.attributes[-1] == (NEW_ATTRIBUTE_NAME, AttributeValue.string(""))
        assert editor.selected == len(editor.attributes) - 1

    def test_add_then_delete_restores(self, editor):
        before = list(editor.attributes)

        editor.add_attribute()
        assert editor.delete_attribute()

        assert editor.attributes == before
        assert len(editor.attributes) == len(before)

    def test_delete_clamps_selection(self, editor):
        editor.selected = len(editor.attributes) - 1
        editor.delete_attribute()
        assert editor.selected == len(editor.attributes) - 1

    def test_delete_middle_keeps_index(self, editor):
        _select(editor, "active")
        index = editor.selected
        editor.delete_attribute()
        assert editor.selected == index
        assert editor.attributes[index][0] == "blob"

    def test_to_item(self, editor):
        item = editor.to_item()
        assert set(item) == {"id", "active", "blob", "name"}
        assert item["id"] == AttributeValue.string("1")


# =============================================================================
# Navigation
# =============================================================================


class TestNavigation:
    def test_bounded_at_top(self, editor):
        editor.move_up()
        assert editor.selected == 0

    def test_bounded_at_add_row(self, editor):
        for _ in range(10):
            editor.move_down()
        assert editor.selected == len(editor.attributes)
        assert editor.on_add_row
        assert editor.selected_attribute is None

    def test_key_attribute_check(self, editor):
        assert editor.is_key_attribute("id")
        assert not editor.is_key_attribute("name")
