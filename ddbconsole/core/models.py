"""
core/models.py - DynamoDB data model

Tables, key schemas, items and attribute values as the console sees them.

Numbers are kept as decimal strings end to end so that nothing is lost
between the scan result and the put-item request.

Wire format:
    The DynamoDB low-level client shape, e.g. {"S": "abc"}, {"N": "1.50"},
    {"B": b"\\x4f"}, {"BOOL": True}, {"NULL": True}, {"L": [...]}, {"M": {...}}.

Usage:
    from ddbconsole.core.models import AttributeValue, Record

    value = AttributeValue.from_wire({"N": "42"})
    value.kind           # ValueKind.NUMBER
    value.to_wire()      # {"N": "42"}
"""

from __future__ import annotations

import string
from dataclasses import dataclass
from enum import Enum
from typing import Any

# =============================================================================
# Key schema
# =============================================================================


class AttributeType(Enum):
    """Scalar types allowed for key attributes"""

    STRING = "S"
    NUMBER = "N"
    BINARY = "B"

    @classmethod
    def from_aws(cls, code: str) -> AttributeType:
        """Unknown codes are read as STRING"""
        try:
            return cls(code)
        except ValueError:
            return cls.STRING

    @property
    def label(self) -> str:
        return {
            AttributeType.STRING: "String",
            AttributeType.NUMBER: "Number",
            AttributeType.BINARY: "Binary",
        }[self]


class BillingMode(Enum):
    ON_DEMAND = "PAY_PER_REQUEST"
    PROVISIONED = "PROVISIONED"

    @property
    def label(self) -> str:
        return "On-Demand" if self is BillingMode.ON_DEMAND else "Provisioned"


@dataclass(frozen=True)
class KeySchema:
    name: str
    key_type: AttributeType = AttributeType.STRING


# =============================================================================
# Attribute values
# =============================================================================


class ValueKind(Enum):
    """Attribute value variants (value is the wire type code)"""

    STRING = "S"
    NUMBER = "N"
    BINARY = "B"
    BOOLEAN = "BOOL"
    NULL = "NULL"
    STRING_SET = "SS"
    NUMBER_SET = "NS"
    BINARY_SET = "BS"
    LIST = "L"
    MAP = "M"


HEX_DIGITS = frozenset(string.hexdigits)


def bytes_to_hex(data: bytes) -> str:
    """Lowercase hex pairs, e.g. b"\\x4f\\x6b" -> "4f6b" """
    return "".join(f"{byte:02x}" for byte in data)


def parse_hex_lenient(text: str) -> bytes:
    """Parse hex digit pairs left to right without ever failing

    A trailing unpaired digit and any pair that is not valid hex are dropped.

    Examples:
        >>> parse_hex_lenient("4f6")
        b'O'
        >>> parse_hex_lenient("4fzz6b")
        b'Ok'
    """
    text = text.strip()
    result = bytearray()
    for i in range(0, len(text) - 1, 2):
        pair = text[i : i + 2]
        if all(ch in HEX_DIGITS for ch in pair):
            result.append(int(pair, 16))
    return bytes(result)


@dataclass
class AttributeValue:
    """Tagged attribute value

    ``data`` depends on ``kind``:
        STRING / NUMBER: str (numbers stay decimal text)
        BINARY: bytes
        BOOLEAN: bool
        NULL: None
        STRING_SET / NUMBER_SET: list[str]
        BINARY_SET: list[bytes]
        LIST: list[AttributeValue]
        MAP: dict[str, AttributeValue]
    """

    kind: ValueKind
    data: Any = None

    # -------------------------------------------------------------------------
    # Constructors
    # -------------------------------------------------------------------------

    @classmethod
    def string(cls, value: str) -> AttributeValue:
        return cls(ValueKind.STRING, value)

    @classmethod
    def number(cls, value: str) -> AttributeValue:
        return cls(ValueKind.NUMBER, value)

    @classmethod
    def binary(cls, value: bytes) -> AttributeValue:
        return cls(ValueKind.BINARY, bytes(value))

    @classmethod
    def boolean(cls, value: bool) -> AttributeValue:
        return cls(ValueKind.BOOLEAN, bool(value))

    @classmethod
    def null(cls) -> AttributeValue:
        return cls(ValueKind.NULL, None)

    @classmethod
    def empty_of(cls, key_type: AttributeType) -> AttributeValue:
        """Empty value of a key schema type"""
        if key_type is AttributeType.NUMBER:
            return cls.number("")
        if key_type is AttributeType.BINARY:
            return cls.binary(b"")
        return cls.string("")

    # -------------------------------------------------------------------------
    # Wire conversion
    # -------------------------------------------------------------------------

    @classmethod
    def from_wire(cls, wire: dict[str, Any]) -> AttributeValue:
        """Convert a low-level client value; unknown shapes become NULL"""
        if "S" in wire:
            return cls.string(wire["S"])
        if "N" in wire:
            return cls.number(wire["N"])
        if "B" in wire:
            return cls.binary(wire["B"])
        if "BOOL" in wire:
            return cls.boolean(wire["BOOL"])
        if "NULL" in wire:
            return cls.null()
        if "SS" in wire:
            return cls(ValueKind.STRING_SET, list(wire["SS"]))
        if "NS" in wire:
            return cls(ValueKind.NUMBER_SET, list(wire["NS"]))
        if "BS" in wire:
            return cls(ValueKind.BINARY_SET, [bytes(b) for b in wire["BS"]])
        if "L" in wire:
            return cls(ValueKind.LIST, [cls.from_wire(v) for v in wire["L"]])
        if "M" in wire:
            return cls(ValueKind.MAP, {k: cls.from_wire(v) for k, v in wire["M"].items()})
        return cls.null()

    def to_wire(self) -> dict[str, Any]:
        kind = self.kind
        if kind is ValueKind.NULL:
            return {"NULL": True}
        if kind is ValueKind.LIST:
            return {"L": [v.to_wire() for v in self.data]}
        if kind is ValueKind.MAP:
            return {"M": {k: v.to_wire() for k, v in self.data.items()}}
        if kind in (ValueKind.STRING_SET, ValueKind.NUMBER_SET, ValueKind.BINARY_SET):
            return {kind.value: list(self.data)}
        return {kind.value: self.data}

    # -------------------------------------------------------------------------
    # Display
    # -------------------------------------------------------------------------

    @property
    def type_label(self) -> str:
        return self.kind.value

    def edit_text(self) -> str:
        """Initial text of the value edit buffer

        Strings and numbers pass through, booleans become "true"/"false",
        binary becomes lowercase hex pairs. Other kinds start empty.
        """
        if self.kind in (ValueKind.STRING, ValueKind.NUMBER):
            return self.data
        if self.kind is ValueKind.BOOLEAN:
            return "true" if self.data else "false"
        if self.kind is ValueKind.BINARY:
            return bytes_to_hex(self.data)
        return ""

    def display_full(self) -> str:
        kind = self.kind
        if kind is ValueKind.STRING:
            return f'"{self.data}"'
        if kind is ValueKind.NUMBER:
            return self.data
        if kind is ValueKind.BINARY:
            if not self.data:
                return "<empty binary>"
            if len(self.data) <= 16:
                return f"0x{bytes_to_hex(self.data)}"
            return f"<binary {len(self.data)} bytes>"
        if kind is ValueKind.BOOLEAN:
            return "true" if self.data else "false"
        if kind is ValueKind.NULL:
            return "null"
        if kind in (ValueKind.STRING_SET, ValueKind.NUMBER_SET):
            return "[" + ", ".join(f'"{v}"' for v in self.data) + "]"
        if kind is ValueKind.BINARY_SET:
            return f"<binary set {len(self.data)} items>"
        if kind is ValueKind.LIST:
            return f"[{len(self.data)} items]"
        return f"{{{len(self.data)} fields}}"

    def display_short(self, max_len: int) -> str:
        full = self.display_full()
        if len(full) > max_len:
            return f"{full[:max_len]}..."
        return full


# =============================================================================
# Items and tables
# =============================================================================


@dataclass
class Record:
    """One table item

    ``hash_key_value`` / ``range_key_value`` mirror entries of ``attributes``.
    """

    attributes: dict[str, AttributeValue]
    hash_key_value: AttributeValue
    range_key_value: AttributeValue | None = None

    @classmethod
    def from_wire(
        cls,
        item: dict[str, Any],
        hash_key: str,
        range_key: str | None = None,
    ) -> Record | None:
        """Build from a low-level item; None when the hash key is missing"""
        if hash_key not in item:
            return None
        attributes = {name: AttributeValue.from_wire(value) for name, value in item.items()}
        range_value = attributes.get(range_key) if range_key else None
        return cls(
            attributes=attributes,
            hash_key_value=attributes[hash_key],
            range_key_value=range_value,
        )

    def key(self, hash_key: str, range_key: str | None = None) -> dict[str, AttributeValue]:
        """Primary key mapping for get/delete requests"""
        key = {hash_key: self.hash_key_value}
        if range_key and self.range_key_value is not None:
            key[range_key] = self.range_key_value
        return key


@dataclass
class TableDetail:
    """describe_table result reduced to what the console shows"""

    name: str
    hash_key: KeySchema
    range_key: KeySchema | None = None
    billing_mode: BillingMode = BillingMode.ON_DEMAND
    read_capacity: int | None = None
    write_capacity: int | None = None
    status: str = "UNKNOWN"
    item_count: int | None = None
    size_bytes: int | None = None
    region: str = ""

    @property
    def key_names(self) -> tuple[str, str | None]:
        return self.hash_key.name, self.range_key.name if self.range_key else None


@dataclass
class TableConfig:
    """Assembled create_table request"""

    name: str
    hash_key: KeySchema
    range_key: KeySchema | None = None
    billing_mode: BillingMode = BillingMode.ON_DEMAND
    read_capacity: int | None = None
    write_capacity: int | None = None
