from travel.shared.domain.repository import IdGenerator
from travel.shared.infrastructure.dynamodb_table import TravelTable, item_key


class DynamoDBIdGenerator(IdGenerator):
    """アトミックカウンタを使った IdGenerator の具象実装

    トランザクション外で採番するため、ロールバックされた ID は欠番になる。
    """

    def __init__(self, table: TravelTable) -> None:
        self._table = table

    def next_id(self, sequence: str) -> int:
        response = self._table.table.update_item(
            Key=item_key("SEQUENCE", sequence),
            UpdateExpression="ADD current_value :one",
            ExpressionAttributeValues={":one": 1},
            ReturnValues="UPDATED_NEW",
        )
        return int(response["Attributes"]["current_value"])
