import os

from aws_lambda_powertools import Logger

DEFAULT_SERVICE_NAME = "travel"


def get_logger(component: str) -> Logger:
    """コンポーネントごとの構造化ロガーを返す

    サービス名は "<POWERTOOLS_SERVICE_NAME>-<component>"
    （未設定なら "travel-<component>"）。
    ログレベルは POWERTOOLS_LOG_LEVEL に従う。
    """
    prefix = os.getenv("POWERTOOLS_SERVICE_NAME") or DEFAULT_SERVICE_NAME
    return Logger(service=f"{prefix}-{component}")
