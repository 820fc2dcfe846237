class DomainException(Exception):
    """ドメイン層で発生する基底例外"""

    pass


class ResourceNotFoundException(DomainException):
    """参照先のリソースが見つからない場合"""

    pass


class BusinessRuleViolationException(DomainException):
    """ビジネスルールに違反した場合"""

    pass


class DuplicateResourceException(DomainException):
    """リソースの重複エラー（一意制約の条件付き書き込みの失敗時）"""

    pass


class ValidationException(DomainException, ValueError):
    """入力値が許容範囲外の場合"""

    pass


class OptimisticLockException(DomainException):
    """楽観ロックの競合エラー（読み取り後に他のトランザクションが更新した場合）"""

    pass
