"""Tests for prepis.serialization: result JSON round-trip."""

import json

import pytest

from prepis import (
    AttrList,
    BadAttr,
    DelimKind,
    OpenNode,
    Token,
    TokenKind,
    UnclosedDelim,
    check,
    compile_config,
)
from prepis.serialization import from_dict, from_json, to_dict, to_json

CONFIG = compile_config(atoms=list("abnoe"), after_angle=["SM", "SJ"])


class TestToDict:
    def test_token(self) -> None:
        token = Token(TokenKind.OPEN, DelimKind.ROUND, 4, 5)
        assert to_dict(token) == {
            "_type": "Token",
            "kind": "OPEN",
            "delim": "ROUND",
            "start": 4,
            "end": 5,
        }

    def test_word_token_has_null_delim(self) -> None:
        data = to_dict(Token(TokenKind.NON_DELIM, None, 0, 3))
        assert data["delim"] is None

    def test_nodes_and_mistakes(self) -> None:
        assert to_dict(AttrList(("SJ", "SM"))) == {"_type": "AttrList", "codes": ["SJ", "SM"]}
        assert to_dict(OpenNode(DelimKind.ANGLE)) == {"_type": "OpenNode", "delim": "ANGLE"}
        assert to_dict(BadAttr(at=1, attr="XY")) == {"_type": "BadAttr", "at": 1, "attr": "XY"}

    def test_unsupported_type(self) -> None:
        with pytest.raises(TypeError):
            to_dict({"at": 1})


class TestRoundTrip:
    @pytest.mark.parametrize(
        "source",
        ["", "ano ne", "<SM_SJ ano> (12", "><<", "b%n <XY ano>", "[ano [ne]] 3"],
    )
    def test_parsed(self, source: str) -> None:
        parsed = check(source, CONFIG)
        assert from_json(to_json(parsed)) == parsed
        assert from_dict(to_dict(parsed)) == parsed

    def test_restored_enums_are_members(self) -> None:
        restored = from_json(to_json(check("(ano", CONFIG)))
        assert restored.mistakes == (UnclosedDelim(at=0, delim=DelimKind.ROUND),)
        assert restored.mistakes[0].delim is DelimKind.ROUND


class TestJson:
    def test_deterministic(self) -> None:
        parsed = check("<SM ano>", CONFIG)
        assert to_json(parsed) == to_json(parsed)
        assert list(json.loads(to_json(parsed))) == sorted(json.loads(to_json(parsed)))

    def test_non_ascii_kept(self) -> None:
        parsed = check("čau", CONFIG)
        assert "čau" in to_json(parsed)

    def test_from_json_requires_parsed(self) -> None:
        with pytest.raises(ValueError, match="Expected Parsed"):
            from_json(json.dumps({"_type": "BadToken", "at": 0}))


class TestFromDictErrors:
    def test_missing_type(self) -> None:
        with pytest.raises(ValueError, match="Missing"):
            from_dict({"at": 0})

    def test_unknown_type(self) -> None:
        with pytest.raises(ValueError, match="Unknown type"):
            from_dict({"_type": "Nope"})

    def test_unknown_enum_member(self) -> None:
        with pytest.raises(ValueError, match="DelimKind"):
            from_dict({"_type": "OpenNode", "delim": "CURLY"})
