# core/aws - AWS access
"""
AWS access layer

    client.py    - boto3 session / client factory
    dynamodb.py  - DynamoDBBackend (every remote operation of the console)
"""

from .client import create_session, get_client
from .dynamodb import DynamoDBBackend

__all__ = ["create_session", "get_client", "DynamoDBBackend"]
