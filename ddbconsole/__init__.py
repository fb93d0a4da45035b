# ddbconsole/__init__.py
"""
ddbconsole - DynamoDB table management console

Terminal console for browsing, creating and deleting DynamoDB tables and
editing their items.

Architecture:
    ddbconsole/
    ├── core/           # state machine, data model, AWS backend, config
    │   ├── state/      # screens, wizard, attribute editor, selectors, runner
    │   ├── aws/        # boto3 client helpers and the DynamoDB backend
    │   └── region/     # region catalog
    ├── cli/            # click entry point, rich rendering, raw terminal
    └── i18n/           # ko / en message registry

Usage:
    $ ddbconsole
    $ ddbconsole --region ap-northeast-2 --profile dev
"""

__version__ = "0.4.0"
