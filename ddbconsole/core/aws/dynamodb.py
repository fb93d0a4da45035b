"""
core/aws/dynamodb.py - DynamoDB backend

Every remote operation the console performs, on top of the boto3 low-level
client. botocore failures are wrapped in BackendError; nothing is retried.

Operations:
    - list_table_names: all table names in the current region
    - describe_table: key schema, billing, status, size
    - create_table / delete_table
    - scan_page: one page of items plus the continuation key
    - get_item / put_item / delete_item

Example:
    backend = DynamoDBBackend(session, "ap-northeast-2")
    names = backend.list_table_names()
    records, next_key = backend.scan_page(names[0], page_size=50)
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from botocore.exceptions import BotoCoreError, ClientError

from ddbconsole.core.aws.client import get_client
from ddbconsole.core.config import settings
from ddbconsole.core.exceptions import BackendError
from ddbconsole.core.models import (
    AttributeType,
    AttributeValue,
    BillingMode,
    KeySchema,
    Record,
    TableConfig,
    TableDetail,
)

logger = logging.getLogger(__name__)

SERVICE = "dynamodb"

# Continuation token: the LastEvaluatedKey mapping, passed back verbatim
ContinuationToken = dict[str, Any]

# (hash key name, range key name)
KeyNames = tuple[str, Optional[str]]


def _to_wire_map(values: dict[str, AttributeValue]) -> dict[str, Any]:
    return {name: value.to_wire() for name, value in values.items()}


class DynamoDBBackend:
    """DynamoDB operations for one region

    Args:
        session: boto3 Session
        region: Region the client talks to
        client: Pre-built client (tests); created from the session when None
    """

    def __init__(self, session: Any, region: str, client: Any = None):
        self._session = session
        self._region = region
        self._client = client if client is not None else self._create_client(region)
        # table name -> (hash key name, range key name)
        self._key_names: dict[str, KeyNames] = {}

    @property
    def region(self) -> str:
        return self._region

    def switch_region(self, region: str) -> None:
        """Rebuild the client for another region

        Raises:
            BackendError: The client cannot be built (e.g. malformed region name);
                the previous client and region are kept
        """
        logger.debug("switching dynamodb client to %s", region)
        self._client = self._create_client(region)
        self._region = region
        self._key_names.clear()

    # =========================================================================
    # Internal helpers
    # =========================================================================

    def _create_client(self, region: str) -> Any:
        try:
            return get_client(self._session, SERVICE, region_name=region)
        except BotoCoreError as e:
            raise BackendError.from_client_error(SERVICE, "create_client", e) from e

    def _call(self, operation: str, **params: Any) -> dict[str, Any]:
        logger.debug("%s.%s %s", SERVICE, operation, params.get("TableName", ""))
        try:
            return getattr(self._client, operation)(**params)
        except (ClientError, BotoCoreError) as e:
            raise BackendError.from_client_error(SERVICE, operation, e) from e

    def _get_key_names(self, table_name: str, key_names: KeyNames | None) -> KeyNames:
        if key_names is not None:
            return key_names
        # not known yet: one describe_table call, cached until the next region switch
        if table_name not in self._key_names:
            self.describe_table(table_name)
        return self._key_names[table_name]

    # =========================================================================
    # Tables
    # =========================================================================

    def list_table_names(self) -> list[str]:
        """All table names in the region (every page)"""
        names: list[str] = []
        try:
            paginator = self._client.get_paginator("list_tables")
            for page in paginator.paginate():
                names.extend(page.get("TableNames", []))
        except (ClientError, BotoCoreError) as e:
            raise BackendError.from_client_error(SERVICE, "list_tables", e) from e
        return names

    def describe_table(self, table_name: str) -> TableDetail:
        """Describe one table

        Raises:
            BackendError: API failure, or the table has no hash key
        """
        table = self._call("describe_table", TableName=table_name).get("Table", {})

        attribute_types = {
            definition["AttributeName"]: AttributeType.from_aws(definition["AttributeType"])
            for definition in table.get("AttributeDefinitions", [])
        }

        hash_key: KeySchema | None = None
        range_key: KeySchema | None = None
        for element in table.get("KeySchema", []):
            name = element["AttributeName"]
            schema = KeySchema(name=name, key_type=attribute_types.get(name, AttributeType.STRING))
            if element["KeyType"] == "HASH":
                hash_key = schema
            elif element["KeyType"] == "RANGE":
                range_key = schema

        if hash_key is None:
            raise BackendError(
                SERVICE,
                "describe_table",
                error_message=f"table {table_name} has no hash key",
            )

        # Tables created before on-demand existed report no summary
        summary = table.get("BillingModeSummary")
        if summary is None:
            billing_mode = BillingMode.PROVISIONED
        elif summary.get("BillingMode") == BillingMode.PROVISIONED.value:
            billing_mode = BillingMode.PROVISIONED
        else:
            billing_mode = BillingMode.ON_DEMAND

        throughput = table.get("ProvisionedThroughput")
        read_capacity = write_capacity = None
        if throughput is not None:
            read_capacity = throughput.get("ReadCapacityUnits", 0)
            write_capacity = throughput.get("WriteCapacityUnits", 0)

        self._key_names[table_name] = (hash_key.name, range_key.name if range_key else None)

        return TableDetail(
            name=table_name,
            hash_key=hash_key,
            range_key=range_key,
            billing_mode=billing_mode,
            read_capacity=read_capacity,
            write_capacity=write_capacity,
            status=table.get("TableStatus", "UNKNOWN"),
            item_count=table.get("ItemCount"),
            size_bytes=table.get("TableSizeBytes"),
            region=self._region,
        )

    def create_table(self, config: TableConfig) -> None:
        """Create a table from the wizard's configuration"""
        attribute_definitions = [
            {"AttributeName": config.hash_key.name, "AttributeType": config.hash_key.key_type.value},
        ]
        key_schema = [{"AttributeName": config.hash_key.name, "KeyType": "HASH"}]

        if config.range_key is not None:
            attribute_definitions.append(
                {"AttributeName": config.range_key.name, "AttributeType": config.range_key.key_type.value}
            )
            key_schema.append({"AttributeName": config.range_key.name, "KeyType": "RANGE"})

        params: dict[str, Any] = {
            "TableName": config.name,
            "AttributeDefinitions": attribute_definitions,
            "KeySchema": key_schema,
            "BillingMode": config.billing_mode.value,
        }
        if config.billing_mode is BillingMode.PROVISIONED:
            fallback = settings.DEFAULT_CAPACITY_UNITS
            params["ProvisionedThroughput"] = {
                "ReadCapacityUnits": config.read_capacity or fallback,
                "WriteCapacityUnits": config.write_capacity or fallback,
            }

        self._call("create_table", **params)

    def delete_table(self, table_name: str) -> None:
        self._call("delete_table", TableName=table_name)
        self._key_names.pop(table_name, None)

    # =========================================================================
    # Items
    # =========================================================================

    def scan_page(
        self,
        table_name: str,
        page_size: int,
        start_key: ContinuationToken | None = None,
        key_names: KeyNames | None = None,
    ) -> tuple[list[Record], ContinuationToken | None]:
        """Scan one page

        Args:
            table_name: Table to scan
            page_size: Scan Limit
            start_key: Continuation token from the previous page
            key_names: (hash, range) key names; when None they come from a
                describe_table call the first time the table is used

        Returns:
            (records, next continuation token or None on the last page)
        """
        hash_key, range_key = self._get_key_names(table_name, key_names)

        params: dict[str, Any] = {"TableName": table_name, "Limit": page_size}
        if start_key:
            params["ExclusiveStartKey"] = start_key

        response = self._call("scan", **params)

        records = []
        for item in response.get("Items", []):
            record = Record.from_wire(item, hash_key, range_key)
            if record is not None:
                records.append(record)

        return records, response.get("LastEvaluatedKey")

    def get_item(
        self,
        table_name: str,
        key: dict[str, AttributeValue],
        key_names: KeyNames | None = None,
    ) -> Record | None:
        """Fetch one item by primary key (None when it does not exist)

        key_names works as in scan_page.
        """
        hash_key, range_key = self._get_key_names(table_name, key_names)
        response = self._call("get_item", TableName=table_name, Key=_to_wire_map(key))
        item = response.get("Item")
        if item is None:
            return None
        return Record.from_wire(item, hash_key, range_key)

    def put_item(self, table_name: str, item: dict[str, AttributeValue]) -> None:
        """Create or replace an item"""
        self._call("put_item", TableName=table_name, Item=_to_wire_map(item))

    def delete_item(self, table_name: str, key: dict[str, AttributeValue]) -> None:
        self._call("delete_item", TableName=table_name, Key=_to_wire_map(key))
