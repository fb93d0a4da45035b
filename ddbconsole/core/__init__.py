# core/__init__.py
"""
core - console infrastructure

Everything below the terminal: data model, DynamoDB backend, state machine,
settings, exceptions and the activity log.

Architecture:
    core/
    ├── state/          # screens, wizard, editor, selectors, dispatch, runner
    ├── aws/            # boto3 helpers and DynamoDBBackend
    ├── region/         # region catalog
    ├── models.py       # tables, items, attribute values
    ├── config.py       # settings
    ├── exceptions.py   # exception hierarchy
    └── log.py          # in-memory activity log
"""
