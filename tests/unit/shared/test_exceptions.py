from http import HTTPStatus

import pytest

from bookings_api.booking.handlers.routes import status_for
from bookings_api.shared.domain import (
    BusinessRuleViolationException,
    ConflictException,
    DomainException,
    DuplicateResourceException,
    ErrorKind,
    OptimisticLockException,
    ResourceNotFoundException,
    StoreException,
    ValidationException,
)


class TestErrorKind:
    """ドメイン例外の種別のテスト"""

    @pytest.mark.parametrize(
        "exception_class, expected",
        [
            (DomainException, ErrorKind.INTERNAL),
            (ResourceNotFoundException, ErrorKind.NOT_FOUND),
            (ConflictException, ErrorKind.CONFLICT),
            (DuplicateResourceException, ErrorKind.CONFLICT),
            (OptimisticLockException, ErrorKind.CONFLICT),
            (ValidationException, ErrorKind.VALIDATION),
            (BusinessRuleViolationException, ErrorKind.VALIDATION),
            (StoreException, ErrorKind.STORE),
        ],
    )
    def test_kind(self, exception_class, expected):
        assert exception_class("x").kind == expected

    def test_subclass_without_kind_is_not_validation(self):
        """種別を持たないサブクラスは検証エラー扱いにならず 500 となる"""

        class UnclassifiedException(DomainException):
            pass

        error = UnclassifiedException("x")

        assert error.kind == ErrorKind.INTERNAL
        assert status_for(error) == HTTPStatus.INTERNAL_SERVER_ERROR
