"""Tests for coded error constructors.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

import pytest

from coded_errors import (
    CodedError,
    code,
    new,
    new_with_code,
    wrap,
    wrap_with_code,
)


class TestNew:
    """Test errors created from scratch."""

    def test_new_has_no_code_and_no_cause(self) -> None:
        """Test that new sets message only."""
        err = new("user %s not found", "john")

        assert isinstance(err, CodedError)
        assert err.message == "user john not found"
        assert err.code == 0
        assert err.cause is None
        assert err.__cause__ is None
        assert code(err) == 0

    def test_new_with_code_sets_code(self) -> None:
        """Test that new_with_code keeps the given code."""
        err = new_with_code(404, "entry %d missing", 7)

        assert err.code == 404
        assert err.get_error_code() == 404
        assert str(err) == "entry 7 missing"

    def test_template_without_args_is_verbatim(self) -> None:
        """Test that percent signs survive when no args are given."""
        err = new("disk 100% full")

        assert err.message == "disk 100% full"

    def test_message_is_not_truncated(self) -> None:
        """Test that long messages are kept as is."""
        message = "x" * 10_000 + "  trailing  "

        assert new(message).message == message

    def test_mismatched_args_raise(self) -> None:
        """Test that template errors propagate to the caller."""
        with pytest.raises(TypeError):
            new("%d items", "many")

    def test_can_be_raised(self) -> None:
        """Test that coded errors behave as exceptions."""
        with pytest.raises(CodedError, match="boom"):
            raise new_with_code(500, "boom")


class TestWrap:
    """Test wrapping of existing errors."""

    def test_wrap_none_returns_none(self) -> None:
        """Test that wrapping no error produces no error."""
        assert wrap(None, "ctx") is None

    def test_wrap_with_code_none_returns_none(self) -> None:
        """Test that wrapping no error with code produces no error."""
        assert wrap_with_code(None, 5, "ctx") is None

    def test_wrap_inherits_code(self) -> None:
        """Test that wrap keeps the code of the wrapped error."""
        inner = new_with_code(409, "conflict")

        outer = wrap(inner, "save %s", "user")

        assert outer is not None
        assert outer.code == 409
        assert code(outer) == code(inner) == 409
        assert outer.message == "save user"

    def test_wrap_foreign_error_gets_fallback_code(self) -> None:
        """Test that plain exceptions are classified as 500."""
        outer = wrap(ValueError("bad"), "parse")

        assert outer is not None
        assert outer.code == 500

    @pytest.mark.parametrize("new_code", [0, 400, 404, 503])
    def test_wrap_with_code_overrides(self, new_code: int) -> None:
        """Test that wrap_with_code replaces the wrapped code."""
        inner = new_with_code(409, "conflict")

        outer = wrap_with_code(inner, new_code, "ctx")

        assert code(outer) == new_code
        assert inner.code == 409

    def test_wrap_keeps_cause(self) -> None:
        """Test that the wrapped error is stored untouched."""
        inner = KeyError("name")

        outer = wrap_with_code(inner, 400, "lookup")

        assert outer is not None
        assert outer.cause is inner
        assert outer.unwrap() is inner
        assert outer.__cause__ is inner

    def test_wrap_does_not_modify_wrapped_error(self) -> None:
        """Test that wrapping creates a new error."""
        inner = new_with_code(404, "missing")

        outer = wrap_with_code(inner, 400, "ctx")

        assert outer is not inner
        assert inner.cause is None
        assert inner.code == 404
        assert str(inner) == "missing"
