"""Tests for prepis.utils."""

import logging

from prepis.utils import get_logger


class TestGetLogger:
    def test_prefix_added(self) -> None:
        assert get_logger("mymodule").name == "prepis.mymodule"

    def test_prefix_not_doubled(self) -> None:
        assert get_logger("prepis.config").name == "prepis.config"
        assert get_logger("prepis").name == "prepis"

    def test_returns_stdlib_logger(self) -> None:
        assert isinstance(get_logger("x"), logging.Logger)

    def test_compile_logs_at_debug(self, caplog) -> None:  # type: ignore[no-untyped-def]
        from prepis import compile_config

        with caplog.at_level(logging.DEBUG, logger="prepis"):
            compile_config(atoms=["a", "b"])
        assert any("2 atoms" in record.getMessage() for record in caplog.records)
