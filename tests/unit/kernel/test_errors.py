"""Unit tests for kernel error hierarchy."""

from __future__ import annotations

import json

import pytest

from flagkit.config.validation import CatalogError, ConfigError
from flagkit.kernel.errors import (
    ApplicationError,
    BaseError,
    DomainError,
    NotFoundError,
    UnknownFlagError,
    UnsupportedStorageError,
)


class TestBaseError:
    def test_message_is_stored(self) -> None:
        err = BaseError("something went wrong")
        assert err.message == "something went wrong"

    def test_default_code(self) -> None:
        assert BaseError("m").code == "base_error"

    def test_custom_code(self) -> None:
        assert BaseError("m", code="custom").code == "custom"

    def test_to_dict_basic(self) -> None:
        err = BaseError("m", code="my_code", detail={"key": "val"})
        assert err.to_dict() == {"code": "my_code", "message": "m", "detail": {"key": "val"}}

    def test_to_dict_includes_cause_repr(self) -> None:
        err = BaseError("wrapper", cause=ValueError("original"))
        assert "original" in err.to_dict()["cause"]

    def test_cause_sets_dunder_cause(self) -> None:
        cause = RuntimeError("root")
        assert BaseError("wrap", cause=cause).__cause__ is cause

    def test_str_is_valid_json(self) -> None:
        parsed = json.loads(str(BaseError("oops", code="oops", detail={"x": 1})))
        assert parsed["code"] == "oops"
        assert parsed["detail"] == {"x": 1}

    def test_repr_contains_code_and_message(self) -> None:
        r = repr(BaseError("hello", code="hi"))
        assert "hi" in r and "hello" in r


class TestFlagErrors:
    def test_unknown_flag(self) -> None:
        err = UnknownFlagError("checkout-v2")
        assert isinstance(err, NotFoundError)
        assert isinstance(err, DomainError)
        assert err.code == "unknown_flag"
        assert err.name == "checkout-v2"
        assert err.message == "Feature flag 'checkout-v2' not found"
        assert err.detail == {"flag": "checkout-v2"}

    def test_unsupported_storage(self) -> None:
        err = UnsupportedStorageError("pinned")
        assert isinstance(err, DomainError)
        assert err.code == "unsupported_storage"
        assert err.storage == "none"
        assert err.to_dict()["detail"] == {"flag": "pinned", "storage": "none"}

    def test_catalog_error_is_config_error(self) -> None:
        err = CatalogError("bad record", flag="x")
        assert isinstance(err, ConfigError)
        assert isinstance(err, ApplicationError)
        assert err.code == "catalog_error"
        assert err.detail == {"flag": "x"}

    def test_catalog_error_without_flag(self) -> None:
        assert CatalogError("bad document").detail == {}

    def test_domain_errors_are_not_config_errors(self) -> None:
        with pytest.raises(DomainError):
            raise UnknownFlagError("x")
        assert not isinstance(UnknownFlagError("x"), ConfigError)
