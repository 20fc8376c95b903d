"""Root conftest: moto-backed DynamoDB table and FastAPI test clients.

Invariants:
    - Fake AWS credentials are set before any boto3 client is built
    - Every test that uses ``users_table`` gets a fresh in-memory table
    - ``client`` runs the real service stack on moto; ``api_client`` swaps
      the service for an AsyncMock so routes are tested in isolation
"""

import os

os.environ.setdefault("AWS_ACCESS_KEY_ID", "testing")
os.environ.setdefault("AWS_SECRET_ACCESS_KEY", "testing")
os.environ.setdefault("AWS_DEFAULT_REGION", "us-east-1")
os.environ.setdefault("LOG_FORMAT", "text")

from unittest.mock import AsyncMock  # noqa: E402

import boto3  # noqa: E402
import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from moto import mock_aws  # noqa: E402

from userhub.core.config import Settings  # noqa: E402
from userhub.dao.user_dao import UserDAO  # noqa: E402
from userhub.main import create_app  # noqa: E402
from userhub.services.user_mapper import UserMapper  # noqa: E402
from userhub.services.user_service import UserService  # noqa: E402

TABLE_NAME = "test-users"


@pytest.fixture
def settings():
    return Settings(dynamodb_table_name=TABLE_NAME, aws_region="us-east-1")


@pytest.fixture
def users_table():
    with mock_aws():
        dynamodb = boto3.resource("dynamodb", region_name="us-east-1")
        table = dynamodb.create_table(
            TableName=TABLE_NAME,
            KeySchema=[
                {"AttributeName": "PK", "KeyType": "HASH"},
                {"AttributeName": "SK", "KeyType": "RANGE"},
            ],
            AttributeDefinitions=[
                {"AttributeName": "PK", "AttributeType": "S"},
                {"AttributeName": "SK", "AttributeType": "S"},
            ],
            BillingMode="PAY_PER_REQUEST",
        )
        yield table


@pytest.fixture
def dao(users_table):
    return UserDAO(users_table)


@pytest.fixture
def service(dao):
    return UserService(dao, UserMapper())


@pytest.fixture
async def client(service, settings):
    """Test client over the full stack (routes → service → DAO → moto)."""
    app = create_app(service=service, settings=settings)
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
def mock_service():
    return AsyncMock(spec=UserService)


@pytest.fixture
async def api_client(mock_service, settings):
    """Test client with the service replaced by an AsyncMock."""
    app = create_app(service=mock_service, settings=settings)
    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        yield c
