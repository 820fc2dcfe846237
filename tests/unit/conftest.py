from collections import defaultdict
from unittest.mock import MagicMock

import pytest

from travel.customer.domain.value_object import CustomerId


@pytest.fixture
def customer_id():
    """全テスト共通の CustomerId フィクスチャ"""
    return CustomerId(1)


@pytest.fixture
def mock_repository():
    """リポジトリのモックフィクスチャ"""
    return MagicMock()


@pytest.fixture
def mock_unit_of_work():
    """UnitOfWork のモック（with ブロックとして使える）"""
    return MagicMock()


@pytest.fixture
def id_generator():
    """シーケンスごとに 1 から採番する IdGenerator のモック"""
    counters: dict[str, int] = defaultdict(int)

    def _next_id(sequence: str) -> int:
        counters[sequence] += 1
        return counters[sequence]

    generator = MagicMock()
    generator.next_id.side_effect = _next_id
    return generator
