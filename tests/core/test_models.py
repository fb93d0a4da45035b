# tests/core/test_models.py
"""
core/models.py unit tests

Attribute value wire conversion, display text, lenient hex parsing and
record key extraction.
"""

import pytest

from ddbconsole.core.models import (
    AttributeType,
    AttributeValue,
    BillingMode,
    KeySchema,
    Record,
    TableDetail,
    ValueKind,
    bytes_to_hex,
    parse_hex_lenient,
)

# =============================================================================
# Hex helpers
# =============================================================================


class TestHexHelpers:
    """bytes_to_hex / parse_hex_lenient"""

    def test_bytes_to_hex_lowercase_pairs(self):
        assert bytes_to_hex(b"\x4f\x6b\x0a") == "4f6b0a"
        assert bytes_to_hex(b"\xff") == "ff"

    def test_empty(self):
        assert bytes_to_hex(b"") == ""
        assert parse_hex_lenient("") == b""

    def test_trailing_digit_dropped(self):
        assert parse_hex_lenient("4f6") == b"\x4f"

    def test_invalid_pair_dropped(self):
        assert parse_hex_lenient("4fzz6b") == b"\x4f\x6b"

    def test_uppercase_accepted(self):
        assert parse_hex_lenient("4F6B") == b"Ok"

    def test_surrounding_whitespace_ignored(self):
        assert parse_hex_lenient("  4f6b \n") == b"Ok"

    @pytest.mark.parametrize("data", [b"", b"\x00", b"\x4f", b"\xde\xad\xbe\xef", bytes(range(256))])
    def test_hex_round_trip(self, data):
        """Hex display text parses back to the same bytes"""
        assert parse_hex_lenient(bytes_to_hex(data)) == data


# =============================================================================
# AttributeValue
# =============================================================================


class TestAttributeValueWire:
    """from_wire / to_wire"""

    def test_scalars(self):
        assert AttributeValue.from_wire({"S": "abc"}) == AttributeValue.string("abc")
        assert AttributeValue.from_wire({"N": "1.50"}) == AttributeValue.number("1.50")
        assert AttributeValue.from_wire({"B": b"\x01"}) == AttributeValue.binary(b"\x01")
        assert AttributeValue.from_wire({"BOOL": True}) == AttributeValue.boolean(True)
        assert AttributeValue.from_wire({"NULL": True}) == AttributeValue.null()

    def test_number_text_preserved(self):
        """Numbers are never converted to float"""
        value = AttributeValue.from_wire({"N": "0.1000000000000000000001"})
        assert value.to_wire() == {"N": "0.1000000000000000000001"}

    def test_nested_list_and_map(self):
        wire = {"M": {"tags": {"L": [{"S": "a"}, {"N": "2"}]}, "flag": {"BOOL": False}}}
        value = AttributeValue.from_wire(wire)

        assert value.kind is ValueKind.MAP
        assert value.data["tags"].kind is ValueKind.LIST
        assert value.data["tags"].data[1] == AttributeValue.number("2")
        assert value.to_wire() == wire

    def test_sets(self):
        assert AttributeValue.from_wire({"SS": ["a", "b"]}).kind is ValueKind.STRING_SET
        assert AttributeValue.from_wire({"NS": ["1"]}).to_wire() == {"NS": ["1"]}
        assert AttributeValue.from_wire({"BS": [b"\x01"]}).to_wire() == {"BS": [b"\x01"]}

    def test_unknown_shape_is_null(self):
        assert AttributeValue.from_wire({"XYZ": 1}).kind is ValueKind.NULL

    def test_empty_of_key_types(self):
        assert AttributeValue.empty_of(AttributeType.STRING) == AttributeValue.string("")
        assert AttributeValue.empty_of(AttributeType.NUMBER) == AttributeValue.number("")
        assert AttributeValue.empty_of(AttributeType.BINARY) == AttributeValue.binary(b"")


class TestAttributeValueDisplay:
    """edit_text / display_full / display_short"""

    def test_edit_text(self):
        assert AttributeValue.string("x").edit_text() == "x"
        assert AttributeValue.number("42").edit_text() == "42"
        assert AttributeValue.boolean(True).edit_text() == "true"
        assert AttributeValue.boolean(False).edit_text() == "false"
        assert AttributeValue.binary(b"\x4f\x6b").edit_text() == "4f6b"
        assert AttributeValue.null().edit_text() == ""

    def test_display_full(self):
        assert AttributeValue.string("abc").display_full() == '"abc"'
        assert AttributeValue.number("7").display_full() == "7"
        assert AttributeValue.null().display_full() == "null"
        assert AttributeValue.binary(b"").display_full() == "<empty binary>"
        assert AttributeValue.binary(b"\x01\x02").display_full() == "0x0102"
        assert AttributeValue.binary(bytes(17)).display_full() == "<binary 17 bytes>"

    def test_display_collections(self):
        assert AttributeValue(ValueKind.STRING_SET, ["a", "b"]).display_full() == '["a", "b"]'
        assert AttributeValue(ValueKind.LIST, [AttributeValue.null()]).display_full() == "[1 items]"
        assert AttributeValue(ValueKind.MAP, {"a": AttributeValue.null()}).display_full() == "{1 fields}"
        assert AttributeValue(ValueKind.BINARY_SET, [b"a", b"b"]).display_full() == "<binary set 2 items>"

    def test_display_short_truncates(self):
        value = AttributeValue.string("abcdefghij")
        assert value.display_short(5) == '"abcd...'
        assert value.display_short(50) == '"abcdefghij"'


# =============================================================================
# Record / TableDetail
# =============================================================================


class TestRecord:
    """Record.from_wire / key"""

    def test_from_wire_with_range_key(self):
        record = Record.from_wire({"pk": {"S": "a"}, "ts": {"N": "10"}, "v": {"S": "x"}}, "pk", "ts")

        assert record is not None
        assert record.hash_key_value == AttributeValue.string("a")
        assert record.range_key_value == AttributeValue.number("10")
        assert record.key("pk", "ts") == {"pk": AttributeValue.string("a"), "ts": AttributeValue.number("10")}

    def test_missing_hash_key_dropped(self):
        assert Record.from_wire({"other": {"S": "a"}}, "pk") is None

    def test_key_without_range(self):
        record = Record.from_wire({"id": {"S": "1"}, "v": {"N": "2"}}, "id")
        assert record.key("id") == {"id": AttributeValue.string("1")}


class TestTableDetail:
    def test_key_names(self, orders_detail, events_detail):
        assert orders_detail.key_names == ("id", None)
        assert events_detail.key_names == ("pk", "ts")

    def test_labels(self):
        assert BillingMode.ON_DEMAND.label == "On-Demand"
        assert AttributeType.from_aws("N") is AttributeType.NUMBER
        assert AttributeType.from_aws("?") is AttributeType.STRING

    def test_defaults(self):
        detail = TableDetail(name="t", hash_key=KeySchema("id"))
        assert detail.billing_mode is BillingMode.ON_DEMAND
        assert detail.hash_key.key_type is AttributeType.STRING
        assert detail.status == "UNKNOWN"
