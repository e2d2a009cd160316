"""Shared fixtures for prepis tests."""

from __future__ import annotations

import pytest

from prepis import ParserConfig, compile_config

CZECH_ATOMS = [*"aábcčdďeéěfghiíjklmnňoópqrřsštťuúůvwxyýzž", "ch"]


@pytest.fixture
def czech_config() -> ParserConfig:
    """Czech graphemes, a couple of listed tokens and two attribute codes."""
    return compile_config(
        whitelist=["OK", "@"],
        blacklist=["xxx"],
        atoms=CZECH_ATOMS,
        after_angle=["SM", "SJ"],
    )


@pytest.fixture
def empty_config() -> ParserConfig:
    return compile_config()
