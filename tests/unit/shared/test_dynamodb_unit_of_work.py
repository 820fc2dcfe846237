from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError

from travel.shared.domain import (
    BusinessRuleViolationException,
    DuplicateResourceException,
    OptimisticLockException,
)
from travel.shared.infrastructure import DynamoDBUnitOfWork, item_key
from travel.shared.infrastructure.dynamodb_unit_of_work import MAX_TRANSACTION_ITEMS


def _cancelled(codes: list[str], with_reasons: bool = True) -> ClientError:
    response = {
        "Error": {
            "Code": "TransactionCanceledException",
            "Message": (
                "Transaction cancelled, please refer cancellation reasons for "
                f"specific reasons [{', '.join(codes)}]"
            ),
        }
    }
    if with_reasons:
        response["CancellationReasons"] = [{"Code": code} for code in codes]
    return ClientError(response, "TransactWriteItems")


class TestDynamoDBUnitOfWork:
    @pytest.fixture
    def table(self):
        table = MagicMock()
        table.table_name = "travel-test"
        return table

    @pytest.fixture
    def unit_of_work(self, table):
        return DynamoDBUnitOfWork(table)

    def test_commit_sends_one_transaction(self, table, unit_of_work):
        with unit_of_work:
            unit_of_work.put(
                item={**item_key("CUSTOMER#1", "PROFILE"), "name": "Alice", "address": None},
                condition="attribute_not_exists(PK)",
            )
            unit_of_work.update(
                key=item_key("CUSTOMER#1", "PROFILE"),
                update_expression="ADD booking_count :one",
                values={":one": 1},
            )

        table.client.transact_write_items.assert_called_once()
        items = table.client.transact_write_items.call_args.kwargs["TransactItems"]
        assert len(items) == 2
        put = items[0]["Put"]
        assert put["TableName"] == "travel-test"
        assert put["ConditionExpression"] == "attribute_not_exists(PK)"
        assert put["Item"]["name"] == {"S": "Alice"}
        # None の属性は書き込まない
        assert "address" not in put["Item"]
        update = items[1]["Update"]
        assert update["ExpressionAttributeValues"] == {":one": {"N": "1"}}

    def test_nothing_is_written_when_block_raises(self, table, unit_of_work):
        with pytest.raises(RuntimeError):
            with unit_of_work:
                unit_of_work.delete(key=item_key("BOOKING#1", "BOOKING"))
                raise RuntimeError("boom")

        table.client.transact_write_items.assert_not_called()
        assert not unit_of_work.is_active

    def test_empty_unit_of_work_does_not_call_dynamodb(self, table, unit_of_work):
        with unit_of_work:
            pass
        table.client.transact_write_items.assert_not_called()

    def test_write_outside_unit_of_work_is_rejected(self, unit_of_work):
        with pytest.raises(RuntimeError):
            unit_of_work.delete(key=item_key("BOOKING#1", "BOOKING"))

    def test_nested_begin_is_rejected(self, unit_of_work):
        with unit_of_work:
            with pytest.raises(RuntimeError):
                unit_of_work.begin()

    def test_condition_failure_is_mapped_by_its_factory(self, table, unit_of_work):
        table.client.transact_write_items.side_effect = _cancelled(
            ["None", "ConditionalCheckFailed"]
        )
        with pytest.raises(DuplicateResourceException, match="Email already exists"):
            with unit_of_work:
                unit_of_work.put(item=item_key("ACCOUNT#1", "PROFILE"))
                unit_of_work.put(
                    item=item_key("UNIQUE#EMAIL#a@example.com", "UNIQUE"),
                    condition="attribute_not_exists(PK)",
                    on_condition_failed=lambda: DuplicateResourceException(
                        "Email already exists: a@example.com"
                    ),
                )

    def test_reasons_are_read_from_message_when_missing(self, table, unit_of_work):
        table.client.transact_write_items.side_effect = _cancelled(
            ["ConditionalCheckFailed"], with_reasons=False
        )
        with pytest.raises(DuplicateResourceException):
            with unit_of_work:
                unit_of_work.put(
                    item=item_key("UNIQUE#PHONE#090", "UNIQUE"),
                    condition="attribute_not_exists(PK)",
                    on_condition_failed=lambda: DuplicateResourceException("dup"),
                )

    def test_condition_failure_without_factory_is_optimistic_lock(
        self, table, unit_of_work
    ):
        table.client.transact_write_items.side_effect = _cancelled(
            ["ConditionalCheckFailed"]
        )
        with pytest.raises(OptimisticLockException):
            with unit_of_work:
                unit_of_work.condition_check(
                    key=item_key("CUSTOMER#1", "PROFILE"),
                    condition="attribute_exists(PK)",
                )

    def test_transaction_conflict_is_optimistic_lock(self, table, unit_of_work):
        table.client.transact_write_items.side_effect = _cancelled(
            ["TransactionConflict", "None"]
        )
        with pytest.raises(OptimisticLockException):
            with unit_of_work:
                unit_of_work.delete(key=item_key("BOOKING#1", "BOOKING"))
                unit_of_work.delete(key=item_key("BOOKING#2", "BOOKING"))

    def test_unmapped_error_propagates(self, table, unit_of_work):
        table.client.transact_write_items.side_effect = ClientError(
            {"Error": {"Code": "ProvisionedThroughputExceededException"}},
            "TransactWriteItems",
        )
        with pytest.raises(ClientError):
            with unit_of_work:
                unit_of_work.delete(key=item_key("BOOKING#1", "BOOKING"))

    def test_too_many_items_are_rejected_before_writing(self, table, unit_of_work):
        with pytest.raises(BusinessRuleViolationException):
            with unit_of_work:
                for i in range(MAX_TRANSACTION_ITEMS + 1):
                    unit_of_work.delete(key=item_key(f"BOOKING#{i + 1}", "BOOKING"))
        table.client.transact_write_items.assert_not_called()
