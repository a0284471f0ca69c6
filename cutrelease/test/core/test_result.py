"""Tests for cutrelease.core.result module."""

import pytest

from cutrelease.core.result import Err, Ok, Result


class TestOk:
    def test_unwrap(self) -> None:
        assert Ok("v1.0.0").unwrap() == "v1.0.0"

    def test_map(self) -> None:
        assert Ok("v1.0.0\n").map(str.strip) == Ok("v1.0.0")

    def test_map_err_is_noop(self) -> None:
        assert Ok(1).map_err(lambda e: f"wrapped: {e}") == Ok(1)

    def test_frozen(self) -> None:
        result = Ok(42)
        with pytest.raises(AttributeError):
            result.value = 0  # type: ignore[misc]


class TestErr:
    def test_unwrap_raises(self) -> None:
        with pytest.raises(ValueError, match="called unwrap on Err"):
            Err("tag exists").unwrap()

    def test_map_err(self) -> None:
        assert Err("push failed").map_err(lambda e: f"publish: {e}") == Err("publish: push failed")

    def test_map_is_noop(self) -> None:
        assert Err("x").map(lambda v: v * 2) == Err("x")

    def test_chain_converts_only_the_error(self) -> None:
        result: Result[str, int] = Err(128)
        converted = result.map(str.upper).map_err(lambda code: f"exit {code}")
        assert converted == Err("exit 128")


class TestMatching:
    def test_pattern_matching(self) -> None:
        result: Result[str, str] = Err("dirty tree")
        match result:
            case Ok(value):
                pytest.fail(f"unexpected Ok({value})")
            case Err(error):
                assert error == "dirty tree"
