"""Unit tests for the kernel error hierarchy."""

from __future__ import annotations

import json

import pytest

from devflags.kernel.errors import (
    BaseError,
    ConflictError,
    DomainError,
    DuplicateFlagError,
    InfrastructureError,
    InvalidFlagKeyError,
    InvalidOverrideValueError,
    OverridePayloadError,
    SerializationError,
    ValidationError,
)


class TestBaseError:
    def test_default_code(self) -> None:
        assert BaseError("boom").code == "base_error"

    def test_custom_code(self) -> None:
        assert BaseError("boom", code="custom").code == "custom"

    def test_str_is_json(self) -> None:
        payload = json.loads(str(BaseError("boom", detail={"k": 1})))
        assert payload == {"code": "base_error", "message": "boom", "detail": {"k": 1}}

    def test_cause_chained(self) -> None:
        cause = ValueError("inner")
        err = BaseError("outer", cause=cause)
        assert err.__cause__ is cause
        assert err.to_dict()["cause"] == repr(cause)

    def test_repr(self) -> None:
        assert repr(DomainError("x")) == "DomainError(code='domain_error', message='x')"


class TestFlagErrors:
    def test_invalid_key(self) -> None:
        err = InvalidFlagKeyError("")
        assert isinstance(err, ValidationError)
        assert err.code == "invalid_flag_key"
        assert err.key == ""
        assert err.to_dict()["errors"] == [{"field": "key", "value": "''"}]

    def test_invalid_value(self) -> None:
        err = InvalidOverrideValueError("a", "yes")
        assert isinstance(err, DomainError)
        assert err.value == "yes"
        assert "'a'" in err.message

    def test_duplicate(self) -> None:
        err = DuplicateFlagError("a")
        assert isinstance(err, ConflictError)
        assert err.code == "duplicate_flag"

    def test_payload_error(self) -> None:
        err = OverridePayloadError("bad", payload_type="json")
        assert isinstance(err, SerializationError)
        assert isinstance(err, InfrastructureError)
        assert err.payload_type == "json"

    def test_caught_as_base_error(self) -> None:
        with pytest.raises(BaseError):
            raise DuplicateFlagError("a")
