"""Thread safety tests for shared configurations.

A compiled ParserConfig is read-only and may be shared by any number of
threads validating different segments. These tests use real threading.
"""

from concurrent.futures import ThreadPoolExecutor

from prepis import Checker, check, compile_config

CONFIG = compile_config(
    whitelist=["OK"],
    blacklist=["xxx"],
    atoms=list("abcdefghijklmnopqrstuvwxyz"),
    after_angle=["SM", "SJ"],
)

SEGMENTS = [
    "ano ne",
    "(12) <SM_SJ ano>",
    ")((",
    "><<",
    "b%nga xxx OK",
    "[ano [ne]]",
] * 50


class TestSharedConfig:
    def test_parallel_matches_sequential(self) -> None:
        expected = [check(segment, CONFIG) for segment in SEGMENTS]

        with ThreadPoolExecutor(max_workers=8) as ex:
            results = list(ex.map(lambda s: check(s, CONFIG), SEGMENTS))

        assert results == expected

    def test_shared_checker(self) -> None:
        checker = Checker(CONFIG)
        with ThreadPoolExecutor(max_workers=8) as ex:
            results = list(ex.map(checker, SEGMENTS))
        assert [r.ok for r in results] == [checker(s).ok for s in SEGMENTS]
