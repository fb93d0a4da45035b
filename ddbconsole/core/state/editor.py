"""
core/state/editor.py - Record attribute editor

Ordered (name, value) rows of one item, a selection that may also sit on the
virtual "add attribute" row (index == len(attributes)), and an optional
sub-edit of the selected row's name or value.

Key protection:
    The hash key and range key rows can be edited in value only. Rename,
    type cycling and deletion of those rows are refused (the method returns
    False and nothing changes).

Type cycling and value commit are table driven:
    TYPE_CYCLE: current kind -> value of the next kind
    VALUE_PARSERS: current kind -> parser of the edit buffer
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable

from ddbconsole.core.exceptions import ValidationError
from ddbconsole.core.models import (
    AttributeValue,
    KeySchema,
    Record,
    TableDetail,
    ValueKind,
    parse_hex_lenient,
)
from ddbconsole.i18n import t

NEW_ATTRIBUTE_NAME = "new_attribute"
TRUE_WORDS = frozenset({"true", "1", "yes"})


class EditorMode(Enum):
    CREATE = "create"
    EDIT = "edit"


class EditingField(Enum):
    KEY = "key"
    VALUE = "value"


# =============================================================================
# Transition tables
# =============================================================================


def _reset_to_string(value: AttributeValue) -> AttributeValue:
    return AttributeValue.string("")


# String -> Number keeps the text, every other step starts empty.
# Kinds without an entry (bool, null, sets, list, map) reset to String.
TYPE_CYCLE: dict[ValueKind, Callable[[AttributeValue], AttributeValue]] = {
    ValueKind.STRING: lambda value: AttributeValue.number(value.data),
    ValueKind.NUMBER: lambda value: AttributeValue.binary(b""),
    ValueKind.BINARY: _reset_to_string,
}

# Kinds without an entry are committed as String
VALUE_PARSERS: dict[ValueKind, Callable[[str], AttributeValue]] = {
    ValueKind.STRING: AttributeValue.string,
    ValueKind.NUMBER: AttributeValue.number,
    ValueKind.BOOLEAN: lambda text: AttributeValue.boolean(text.lower() in TRUE_WORDS),
    ValueKind.BINARY: lambda text: AttributeValue.binary(parse_hex_lenient(text)),
}


def cycle_value(value: AttributeValue) -> AttributeValue:
    """Value of the next kind in the String -> Number -> Binary -> String cycle"""
    return TYPE_CYCLE.get(value.kind, _reset_to_string)(value)


def parse_value(kind: ValueKind, text: str) -> AttributeValue:
    """Reinterpret edit buffer text according to the attribute's kind"""
    return VALUE_PARSERS.get(kind, AttributeValue.string)(text)


# =============================================================================
# Editor state
# =============================================================================


@dataclass
class AttributeEditorState:
    mode: EditorMode
    table_name: str
    hash_key: KeySchema
    range_key: KeySchema | None = None
    attributes: list[tuple[str, AttributeValue]] = field(default_factory=list)
    selected: int = 0
    editing: EditingField | None = None
    buffer: str = ""

    @classmethod
    def for_create(cls, detail: TableDetail) -> AttributeEditorState:
        """New item: key rows with an empty value of the key type"""
        attributes = [(detail.hash_key.name, AttributeValue.empty_of(detail.hash_key.key_type))]
        if detail.range_key is not None:
            attributes.append((detail.range_key.name, AttributeValue.empty_of(detail.range_key.key_type)))
        return cls(
            mode=EditorMode.CREATE,
            table_name=detail.name,
            hash_key=detail.hash_key,
            range_key=detail.range_key,
            attributes=attributes,
        )

    @classmethod
    def for_edit(cls, detail: TableDetail, record: Record) -> AttributeEditorState:
        """Existing item: key rows first, then the rest by name"""
        key_names = {name for name in detail.key_names if name}
        attributes = sorted(
            record.attributes.items(),
            key=lambda pair: (pair[0] not in key_names, pair[0]),
        )
        return cls(
            mode=EditorMode.EDIT,
            table_name=detail.name,
            hash_key=detail.hash_key,
            range_key=detail.range_key,
            attributes=attributes,
        )

    # =========================================================================
    # Queries
    # =========================================================================

    def is_key_attribute(self, name: str) -> bool:
        if name == self.hash_key.name:
            return True
        return self.range_key is not None and name == self.range_key.name

    @property
    def on_add_row(self) -> bool:
        return self.selected == len(self.attributes)

    @property
    def selected_attribute(self) -> tuple[str, AttributeValue] | None:
        if self.selected < len(self.attributes):
            return self.attributes[self.selected]
        return None

    def _selected_is_protected(self) -> bool:
        current = self.selected_attribute
        return current is None or self.is_key_attribute(current[0])

    def to_item(self) -> dict[str, AttributeValue]:
        """Attribute mapping for put_item"""
        return dict(self.attributes)

    # =========================================================================
    # Navigation (no sub-edit active)
    # =========================================================================

    def move_up(self) -> None:
        if self.selected > 0:
            self.selected -= 1

    def move_down(self) -> None:
        if self.selected < len(self.attributes):
            self.selected += 1

    # =========================================================================
    # Row commands
    # =========================================================================

    def start_value_edit(self) -> bool:
        current = self.selected_attribute
        if current is None:
            return False
        self.buffer = current[1].edit_text()
        self.editing = EditingField.VALUE
        return True

    def start_key_edit(self) -> bool:
        if self._selected_is_protected():
            return False
        self.buffer = self.attributes[self.selected][0]
        self.editing = EditingField.KEY
        return True

    def cycle_type(self) -> bool:
        if self._selected_is_protected():
            return False
        name, value = self.attributes[self.selected]
        self.attributes[self.selected] = (name, cycle_value(value))
        return True

    def delete_attribute(self) -> bool:
        if self._selected_is_protected():
            return False
        del self.attributes[self.selected]
        if self.attributes and self.selected >= len(self.attributes):
            self.selected = len(self.attributes) - 1
        return True

    def add_attribute(self) -> None:
        self.attributes.append((NEW_ATTRIBUTE_NAME, AttributeValue.string("")))
        self.selected = len(self.attributes) - 1

    # =========================================================================
    # Sub-edit
    # =========================================================================

    def input_char(self, char: str) -> None:
        self.buffer += char

    def backspace(self) -> None:
        self.buffer = self.buffer[:-1]

    def cancel_edit(self) -> None:
        self.editing = None
        self.buffer = ""

    def commit_edit(self) -> None:
        """Apply the buffer to the selected row and leave the sub-edit

        Raises:
            ValidationError: rename onto a name another row already uses
                (the sub-edit stays open)
        """
        current = self.selected_attribute
        if self.editing is None or current is None:
            self.cancel_edit()
            return

        name, value = current
        if self.editing is EditingField.KEY:
            new_name = self.buffer
            taken = any(other == new_name for i, (other, _) in enumerate(self.attributes) if i != self.selected)
            if taken:
                raise ValidationError(
                    "attribute_name", new_name, "unique name", t("editor.duplicate_name", name=new_name)
                )
            self.attributes[self.selected] = (new_name, value)
        else:
            self.attributes[self.selected] = (name, parse_value(value.kind, self.buffer))

        self.cancel_edit()
