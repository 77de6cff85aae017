from enum import Enum


class ErrorKind(Enum):
    """ドメインエラーの種別（ハンドラ境界でステータスに変換される）"""

    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"
    VALIDATION = "VALIDATION"
    STORE = "STORE"
    INTERNAL = "INTERNAL"


class DomainException(Exception):
    """ドメイン層で発生する基底例外"""

    kind: ErrorKind = ErrorKind.INTERNAL


class ResourceNotFoundException(DomainException):
    """リソースが見つからない場合"""

    kind = ErrorKind.NOT_FOUND


class ValidationException(DomainException, ValueError):
    """入力値が不正な場合"""

    kind = ErrorKind.VALIDATION


class BusinessRuleViolationException(DomainException):
    """ビジネスルールに違反した場合"""

    kind = ErrorKind.VALIDATION


class ConflictException(DomainException):
    """一意性または同時実行の競合"""

    kind = ErrorKind.CONFLICT


class DuplicateResourceException(ConflictException):
    """リソースの重複エラー（条件付き書き込みの失敗時）"""

    pass


class OptimisticLockException(ConflictException):
    """楽観ロックの競合エラー（バージョンが期待値と異なる場合）"""

    pass


class StoreException(DomainException):
    """ストレージ操作の失敗"""

    kind = ErrorKind.STORE
