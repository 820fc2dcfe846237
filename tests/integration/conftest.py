import boto3
import pytest
from moto import mock_aws

from travel.agency import TravelAgency
from travel.shared.config import Settings
from travel.shared.infrastructure import DynamoDBUnitOfWork, TravelTable

TABLE_NAME = "travel-test"


@pytest.fixture
def aws_credentials(monkeypatch):
    """moto 用のダミー認証情報"""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SECURITY_TOKEN", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", "us-east-1")


@pytest.fixture
def dynamodb_table(aws_credentials):
    """PK/SK のシングルテーブルを作成する"""
    with mock_aws():
        boto3.client("dynamodb").create_table(
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
        yield TABLE_NAME


@pytest.fixture
def scan_items(dynamodb_table):
    """テーブルの全アイテムを取得する（変更有無の確認用）"""

    def _scan() -> list[dict]:
        table = boto3.resource("dynamodb").Table(dynamodb_table)
        items = []
        kwargs: dict = {}
        while True:
            response = table.scan(**kwargs)
            items.extend(response["Items"])
            if "LastEvaluatedKey" not in response:
                return sorted(items, key=lambda item: (item["PK"], item["SK"]))
            kwargs["ExclusiveStartKey"] = response["LastEvaluatedKey"]

    return _scan


@pytest.fixture
def travel_table(dynamodb_table):
    return TravelTable(table_name=dynamodb_table)


@pytest.fixture
def unit_of_work(travel_table):
    return DynamoDBUnitOfWork(travel_table)


@pytest.fixture
def create_agency(dynamodb_table):
    """TravelAgency を生成する Factory fixture"""

    def _factory(reopen_cancelled: bool = True) -> TravelAgency:
        return TravelAgency(
            Settings(
                table_name=dynamodb_table,
                reopen_cancelled_on_settlement=reopen_cancelled,
            )
        )

    return _factory


@pytest.fixture
def agency(create_agency):
    return create_agency()


@pytest.fixture
def seed(agency):
    """顧客 alice（ID 1）、パッケージ 2 件、ホテル 2 件を登録する"""
    customer_id = agency.create_customer(
        username="alice",
        password_hash="hashed-password",
        email="alice@example.com",
        name="Alice",
        phone="090-0000-0001",
        address="Tokyo",
    )
    package_ids = [
        agency.register_package("Kyoto Classic", "Kyoto", "120000", 3),
        agency.register_package("Okinawa Beach", "Naha", "80000.50", 4, "Snorkeling"),
    ]
    hotel_ids = [
        agency.register_hotel("Hotel Sakura", "Osaka", "15000"),
        agency.register_hotel("Ryokan Momiji", "Hakone", "32000", "Onsen"),
    ]
    return {
        "customer_id": customer_id,
        "package_ids": package_ids,
        "hotel_ids": hotel_ids,
    }
