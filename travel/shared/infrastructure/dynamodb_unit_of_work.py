import re
import threading
from dataclasses import dataclass
from typing import Callable

from boto3.dynamodb.types import TypeSerializer
from botocore.exceptions import ClientError

from travel.shared.domain.exception import (
    BusinessRuleViolationException,
    DomainException,
    OptimisticLockException,
)
from travel.shared.domain.repository import UnitOfWork
from travel.shared.infrastructure.dynamodb_table import TravelTable
from travel.shared.utils.logger import get_logger

logger = get_logger("unit_of_work")

# TransactWriteItems の上限
MAX_TRANSACTION_ITEMS = 100

ConditionFailureFactory = Callable[[], DomainException]


@dataclass
class PendingWrite:
    """コミット待ちの書き込み 1 件"""

    operation: dict
    on_condition_failed: ConditionFailureFactory | None = None


class DynamoDBUnitOfWork(UnitOfWork):
    """TransactWriteItems を使った UnitOfWork の具象実装

    リポジトリが登録した Put / Update / Delete / ConditionCheck を保持し、
    コミット時に 1 回のトランザクションで書き込む。
    条件付き書き込みが失敗した場合は、その書き込みに紐づくドメイン例外を送出する。
    保留中の書き込みはスレッドごとに分離される。
    """

    def __init__(self, table: TravelTable) -> None:
        self._table = table
        self._serializer = TypeSerializer()
        self._local = threading.local()

    @property
    def is_active(self) -> bool:
        return getattr(self._local, "pending", None) is not None

    def begin(self) -> None:
        if self.is_active:
            raise RuntimeError("Unit of work is already active")
        self._local.pending = []

    def put(
        self,
        item: dict,
        condition: str | None = None,
        names: dict | None = None,
        values: dict | None = None,
        on_condition_failed: ConditionFailureFactory | None = None,
    ) -> None:
        """アイテムの作成（置き換え）を登録する"""
        body = {"Item": self._serialize_map(item)}
        self._register("Put", body, condition, names, values, on_condition_failed)

    def update(
        self,
        key: dict,
        update_expression: str,
        condition: str | None = None,
        names: dict | None = None,
        values: dict | None = None,
        on_condition_failed: ConditionFailureFactory | None = None,
    ) -> None:
        """アイテムの部分更新を登録する"""
        body = {"Key": self._serialize_map(key), "UpdateExpression": update_expression}
        self._register("Update", body, condition, names, values, on_condition_failed)

    def delete(
        self,
        key: dict,
        condition: str | None = None,
        names: dict | None = None,
        values: dict | None = None,
        on_condition_failed: ConditionFailureFactory | None = None,
    ) -> None:
        """アイテムの削除を登録する"""
        body = {"Key": self._serialize_map(key)}
        self._register("Delete", body, condition, names, values, on_condition_failed)

    def condition_check(
        self,
        key: dict,
        condition: str,
        names: dict | None = None,
        values: dict | None = None,
        on_condition_failed: ConditionFailureFactory | None = None,
    ) -> None:
        """書き込みを伴わない条件チェックを登録する"""
        body = {"Key": self._serialize_map(key)}
        self._register(
            "ConditionCheck", body, condition, names, values, on_condition_failed
        )

    def commit(self) -> None:
        pending = self._require_active()
        self._local.pending = None
        if not pending:
            return
        if len(pending) > MAX_TRANSACTION_ITEMS:
            raise BusinessRuleViolationException(
                f"Operation touches {len(pending)} records "
                f"(max {MAX_TRANSACTION_ITEMS} per transaction)"
            )

        logger.debug("Committing transaction", extra={"items": len(pending)})
        try:
            self._table.client.transact_write_items(
                TransactItems=[write.operation for write in pending]
            )
        except ClientError as e:
            if e.response["Error"]["Code"] != "TransactionCanceledException":
                raise
            codes = _cancellation_codes(e)
            logger.warning("Transaction cancelled", extra={"reasons": codes})
            exception = _to_domain_exception(codes, pending)
            if exception is None:
                raise
            raise exception from e

    def rollback(self) -> None:
        pending = getattr(self._local, "pending", None) or []
        self._local.pending = None
        if pending:
            logger.warning(
                "Rolling back unit of work", extra={"discarded": len(pending)}
            )

    def _require_active(self) -> list[PendingWrite]:
        pending = getattr(self._local, "pending", None)
        if pending is None:
            raise RuntimeError("Unit of work is not active")
        return pending

    def _register(
        self,
        action: str,
        body: dict,
        condition: str | None,
        names: dict | None,
        values: dict | None,
        on_condition_failed: ConditionFailureFactory | None,
    ) -> None:
        pending = self._require_active()
        body["TableName"] = self._table.table_name
        if condition:
            body["ConditionExpression"] = condition
        if names:
            body["ExpressionAttributeNames"] = names
        if values:
            body["ExpressionAttributeValues"] = self._serialize_map(values)
        pending.append(PendingWrite({action: body}, on_condition_failed))

    def _serialize_map(self, data: dict) -> dict:
        return {
            name: self._serializer.serialize(value)
            for name, value in data.items()
            if value is not None
        }


def _cancellation_codes(error: ClientError) -> list[str]:
    """キャンセル理由コードを TransactItems と同じ順序で取り出す"""
    reasons = error.response.get("CancellationReasons")
    if reasons:
        return [reason.get("Code", "None") for reason in reasons]
    # 理由がレスポンスに含まれない場合はメッセージの [..] から読み取る
    message = error.response["Error"].get("Message", "")
    match = re.search(r"\[([^\]]*)\]", message)
    if not match:
        return []
    return [code.strip() for code in match.group(1).split(",")]


def _to_domain_exception(
    codes: list[str], pending: list[PendingWrite]
) -> DomainException | None:
    for write, code in zip(pending, codes):
        if code == "ConditionalCheckFailed":
            if write.on_condition_failed is not None:
                return write.on_condition_failed()
            return OptimisticLockException(
                f"Conditional check failed: {next(iter(write.operation))}"
            )
    if "TransactionConflict" in codes:
        return OptimisticLockException(
            "Transaction conflicted with a concurrent update"
        )
    return None
