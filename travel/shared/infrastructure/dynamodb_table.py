import os

import boto3
from boto3.dynamodb.conditions import Key


def item_key(pk: str, sk: str) -> dict:
    """プライマリキー（PK + SK）を生成する"""
    return {"PK": pk, "SK": sk}


class TravelTable:
    """旅行予約データを格納する DynamoDB シングルテーブル

    読み取りは Table リソース（強い整合性）、
    トランザクション書き込みは低レベルクライアントを使用する。
    """

    def __init__(
        self,
        table_name: str | None = None,
        endpoint_url: str | None = None,
        region_name: str | None = None,
    ) -> None:
        self.table_name = table_name or os.getenv("TABLE_NAME")
        self.dynamodb = boto3.resource(
            "dynamodb", endpoint_url=endpoint_url, region_name=region_name
        )
        self.table = self.dynamodb.Table(self.table_name)
        self.client = boto3.client(
            "dynamodb", endpoint_url=endpoint_url, region_name=region_name
        )

    def get(self, key: dict) -> dict | None:
        """キーを指定して 1 件取得する"""
        response = self.table.get_item(Key=key, ConsistentRead=True)
        return response.get("Item")

    def query_prefix(self, pk: str, sk_prefix: str) -> list[dict]:
        """パーティション内で SK が前方一致するアイテムを全件取得する"""
        kwargs: dict = {
            "KeyConditionExpression": Key("PK").eq(pk) & Key("SK").begins_with(sk_prefix),
            "ConsistentRead": True,
        }
        items: list[dict] = []
        while True:
            response = self.table.query(**kwargs)
            items.extend(response.get("Items", []))
            last_key = response.get("LastEvaluatedKey")
            if not last_key:
                return items
            kwargs["ExclusiveStartKey"] = last_key


def unique_key(kind: str, value: str) -> dict:
    """一意制約用の予約アイテムのキーを生成する"""
    return item_key(f"UNIQUE#{kind}#{value}", "UNIQUE")
