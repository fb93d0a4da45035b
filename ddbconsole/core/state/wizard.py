"""
core/state/wizard.py - Create-table wizard

Three fixed steps: BASIC_CONFIG -> BILLING_CONFIG -> REVIEW -> commit.
Capacities are kept as text while editing and parsed only when the wizard
assembles the TableConfig.

Field input:
    - free-text fields append characters (capacity fields: digits only)
    - key type fields select with s / n / b (either case)
    - billing mode selects with o / 1 (on-demand) and p / 2 (provisioned)
    - the range key toggle flips on space / x / X
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ddbconsole.core.config import settings
from ddbconsole.core.exceptions import ValidationError
from ddbconsole.core.models import AttributeType, BillingMode, KeySchema, TableConfig
from ddbconsole.i18n import t


class WizardStep(Enum):
    BASIC_CONFIG = "basic_config"
    BILLING_CONFIG = "billing_config"
    REVIEW = "review"


class WizardField(Enum):
    TABLE_NAME = "table_name"
    HASH_KEY_NAME = "hash_key_name"
    HASH_KEY_TYPE = "hash_key_type"
    HAS_RANGE_KEY = "has_range_key"
    RANGE_KEY_NAME = "range_key_name"
    RANGE_KEY_TYPE = "range_key_type"
    BILLING_MODE = "billing_mode"
    READ_CAPACITY = "read_capacity"
    WRITE_CAPACITY = "write_capacity"


TEXT_FIELDS = frozenset(
    {
        WizardField.TABLE_NAME,
        WizardField.HASH_KEY_NAME,
        WizardField.RANGE_KEY_NAME,
        WizardField.READ_CAPACITY,
        WizardField.WRITE_CAPACITY,
    }
)
DIGIT_FIELDS = frozenset({WizardField.READ_CAPACITY, WizardField.WRITE_CAPACITY})

TYPE_KEYS = {
    "s": AttributeType.STRING,
    "n": AttributeType.NUMBER,
    "b": AttributeType.BINARY,
}
BILLING_KEYS = {
    "o": BillingMode.ON_DEMAND,
    "1": BillingMode.ON_DEMAND,
    "p": BillingMode.PROVISIONED,
    "2": BillingMode.PROVISIONED,
}
RANGE_TOGGLE_KEYS = frozenset(" xX")

FIRST_FIELD = {
    WizardStep.BASIC_CONFIG: WizardField.TABLE_NAME,
    WizardStep.BILLING_CONFIG: WizardField.BILLING_MODE,
    WizardStep.REVIEW: None,
}


def _parse_capacity(text: str) -> int | None:
    if not (text.isascii() and text.isdigit()):
        return None
    return int(text)


@dataclass
class WizardState:
    """Create-table wizard state; a fresh instance is used on every entry"""

    step: WizardStep = WizardStep.BASIC_CONFIG
    field: WizardField | None = WizardField.TABLE_NAME
    table_name: str = ""
    hash_key_name: str = ""
    hash_key_type: AttributeType = AttributeType.STRING
    has_range_key: bool = False
    range_key_name: str = ""
    range_key_type: AttributeType = AttributeType.STRING
    billing_mode: BillingMode = BillingMode.ON_DEMAND
    read_capacity: str = str(settings.DEFAULT_CAPACITY_UNITS)
    write_capacity: str = str(settings.DEFAULT_CAPACITY_UNITS)

    # =========================================================================
    # Validation
    # =========================================================================

    def validate_basic_config(self) -> None:
        """
        Raises:
            ValidationError: table name length, empty hash or range key name
        """
        low, high = settings.TABLE_NAME_MIN, settings.TABLE_NAME_MAX
        if not self.table_name:
            raise ValidationError("table_name", self.table_name, "non-empty", t("wizard.name_required"))
        if not low <= len(self.table_name) <= high:
            raise ValidationError(
                "table_name",
                self.table_name,
                f"{low}-{high} characters",
                t("wizard.name_length", min=low, max=high),
            )
        if not self.hash_key_name:
            raise ValidationError("hash_key_name", self.hash_key_name, "non-empty", t("wizard.hash_key_required"))
        if self.has_range_key and not self.range_key_name:
            raise ValidationError(
                "range_key_name", self.range_key_name, "non-empty", t("wizard.range_key_required")
            )

    def validate_billing_config(self) -> None:
        """Capacities must be integers >= 1 (provisioned mode only)"""
        if self.billing_mode is not BillingMode.PROVISIONED:
            return
        for field, text in (("read_capacity", self.read_capacity), ("write_capacity", self.write_capacity)):
            value = _parse_capacity(text)
            if value is None or value < 1:
                raise ValidationError(field, text, "integer >= 1", t(f"wizard.{field}_invalid"))

    # =========================================================================
    # Step navigation
    # =========================================================================

    def _enter(self, step: WizardStep) -> None:
        self.step = step
        self.field = FIRST_FIELD[step]

    def advance(self) -> TableConfig | None:
        """Validate the current step and move forward

        Returns:
            The assembled TableConfig when committing from REVIEW, else None

        Raises:
            ValidationError: the current step does not validate
        """
        if self.step is WizardStep.BASIC_CONFIG:
            self.validate_basic_config()
            self._enter(WizardStep.BILLING_CONFIG)
            return None
        if self.step is WizardStep.BILLING_CONFIG:
            self.validate_billing_config()
            self._enter(WizardStep.REVIEW)
            return None
        return self.to_table_config()

    def step_back(self) -> bool:
        if self.step is WizardStep.BILLING_CONFIG:
            self._enter(WizardStep.BASIC_CONFIG)
            return True
        if self.step is WizardStep.REVIEW:
            self._enter(WizardStep.BILLING_CONFIG)
            return True
        return False

    def next_field(self) -> None:
        """Cycle focus within the current step"""
        F = WizardField
        if self.step is WizardStep.BASIC_CONFIG:
            order = [F.TABLE_NAME, F.HASH_KEY_NAME, F.HASH_KEY_TYPE, F.HAS_RANGE_KEY]
            if self.has_range_key:
                order += [F.RANGE_KEY_NAME, F.RANGE_KEY_TYPE]
        elif self.step is WizardStep.BILLING_CONFIG:
            order = [F.BILLING_MODE]
            if self.billing_mode is BillingMode.PROVISIONED:
                order += [F.READ_CAPACITY, F.WRITE_CAPACITY]
        else:
            return

        if self.field in order:
            self.field = order[(order.index(self.field) + 1) % len(order)]
        else:
            self.field = order[0]

    # =========================================================================
    # Field input
    # =========================================================================

    @property
    def on_text_field(self) -> bool:
        return self.field in TEXT_FIELDS

    def input_char(self, char: str) -> None:
        F = WizardField
        field = self.field
        if field is None:
            return

        if field in DIGIT_FIELDS and not (char.isascii() and char.isdigit()):
            return
        if field in TEXT_FIELDS:
            name = field.value
            setattr(self, name, getattr(self, name) + char)
        elif field is F.HASH_KEY_TYPE:
            self.hash_key_type = TYPE_KEYS.get(char.lower(), self.hash_key_type)
        elif field is F.RANGE_KEY_TYPE:
            self.range_key_type = TYPE_KEYS.get(char.lower(), self.range_key_type)
        elif field is F.HAS_RANGE_KEY:
            if char in RANGE_TOGGLE_KEYS:
                self.has_range_key = not self.has_range_key
        elif field is F.BILLING_MODE:
            self.billing_mode = BILLING_KEYS.get(char.lower(), self.billing_mode)

    def backspace(self, has_modifiers: bool = False) -> None:
        """Pop a character on text fields, otherwise step back one step"""
        if self.field is not None and self.field in TEXT_FIELDS:
            name = self.field.value
            setattr(self, name, getattr(self, name)[:-1])
        elif not has_modifiers:
            self.step_back()

    # =========================================================================
    # Commit
    # =========================================================================

    def to_table_config(self) -> TableConfig:
        range_key = None
        if self.has_range_key:
            range_key = KeySchema(self.range_key_name, self.range_key_type)

        read_capacity = write_capacity = None
        if self.billing_mode is BillingMode.PROVISIONED:
            fallback = settings.DEFAULT_CAPACITY_UNITS
            read_capacity = _parse_capacity(self.read_capacity)
            write_capacity = _parse_capacity(self.write_capacity)
            if read_capacity is None:
                read_capacity = fallback
            if write_capacity is None:
                write_capacity = fallback

        return TableConfig(
            name=self.table_name,
            hash_key=KeySchema(self.hash_key_name, self.hash_key_type),
            range_key=range_key,
            billing_mode=self.billing_mode,
            read_capacity=read_capacity,
            write_capacity=write_capacity,
        )
