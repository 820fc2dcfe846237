from __future__ import annotations

import os
from dataclasses import dataclass

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"Invalid boolean for {name}: {raw}")


@dataclass(frozen=True)
class Settings:
    """環境変数から組み立てるアプリケーション設定"""

    table_name: str
    endpoint_url: str | None = None
    region_name: str | None = None
    reopen_cancelled_on_settlement: bool = True

    @classmethod
    def from_env(cls) -> Settings:
        table_name = os.getenv("TABLE_NAME")
        if not table_name:
            raise ValueError("TABLE_NAME is not set")
        return cls(
            table_name=table_name,
            endpoint_url=os.getenv("DYNAMODB_ENDPOINT_URL") or None,
            region_name=os.getenv("AWS_REGION") or os.getenv("AWS_DEFAULT_REGION"),
            reopen_cancelled_on_settlement=_env_flag(
                "REOPEN_CANCELLED_ON_SETTLEMENT", default=True
            ),
        )
