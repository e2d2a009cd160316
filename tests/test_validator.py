"""Tests for the validating parser state machine."""

from __future__ import annotations

from prepis import (
    AttrList,
    BadAttr,
    BadSubstr,
    BadToken,
    CloseNode,
    ClosingUnopenedDelim,
    DelimKind,
    MissingAttrs,
    NestedDelim,
    OpenNode,
    Parsed,
    Parser,
    ParserConfig,
    TokenNode,
    UnclosedDelim,
    check,
    compile_config,
    tokenize,
    validate,
)


def _word_texts(parsed: Parsed) -> list[str]:
    return [
        parsed.source[node.token.start : node.token.end]
        for node in parsed.nodes
        if isinstance(node, TokenNode)
    ]


class TestWordCoverage:
    """Atom coverage of ordinary words."""

    def test_single_bad_character(self, czech_config: ParserConfig) -> None:
        parsed = check("čarala b%nga máro", czech_config)
        assert parsed.mistakes == (BadSubstr(at=1, start=1, end=2),)
        assert _word_texts(parsed) == ["čarala", "b%nga", "máro"]

    def test_one_mistake_per_maximal_run(self, czech_config: ParserConfig) -> None:
        parsed = check("%%ab$c#", czech_config)
        assert parsed.mistakes == (
            BadSubstr(at=0, start=0, end=2),
            BadSubstr(at=0, start=4, end=5),
            BadSubstr(at=0, start=6, end=7),
        )

    def test_word_with_gaps_is_kept(self, czech_config: ParserConfig) -> None:
        parsed = check("100%", compile_config(atoms=["1", "0"]))
        assert parsed.mistakes == (BadSubstr(at=0, start=3, end=4),)
        assert len(parsed.nodes) == 1

    def test_no_atoms_whole_token_is_one_gap(self, empty_config: ParserConfig) -> None:
        parsed = check("foo barbaz", empty_config)
        assert parsed.mistakes == (
            BadSubstr(at=0, start=0, end=3),
            BadSubstr(at=1, start=0, end=6),
        )
        assert _word_texts(parsed) == ["foo", "barbaz"]

    def test_longest_atom_preferred(self) -> None:
        """'dž' must be matched whole, not as 'd' followed by a bad 'ž'."""
        config = compile_config(atoms=["d", "dž", "a"])
        assert check("džad", config).ok
        assert check("ža", config).mistakes == (BadSubstr(at=0, start=0, end=1),)

    def test_decomposed_character_not_covered(self, czech_config: ParserConfig) -> None:
        """Atoms are compared code point by code point; no Unicode normalization."""
        parsed = check("ma\u0301ro", czech_config)
        assert parsed.mistakes == (BadSubstr(at=0, start=2, end=3),)

    def test_stray_control_character_is_bad_substring(self) -> None:
        parsed = check("a\x1fb", compile_config(atoms=["a", "b"]))
        assert parsed.mistakes == (BadSubstr(at=0, start=1, end=2),)


class TestListedTokens:
    """Whitelist and blacklist."""

    def test_whitelisted_bypasses_atoms(self, czech_config: ParserConfig) -> None:
        parsed = check("OK @ ano", czech_config)
        assert parsed.ok
        assert _word_texts(parsed) == ["OK", "@", "ano"]

    def test_blacklisted_rejected_and_dropped(self, czech_config: ParserConfig) -> None:
        parsed = check("ano xxx ne", czech_config)
        assert parsed.mistakes == (BadToken(at=1),)
        assert _word_texts(parsed) == ["ano", "ne"]

    def test_whitelist_is_exact(self, czech_config: ParserConfig) -> None:
        parsed = check("OKK", czech_config)
        assert parsed.mistakes == (BadSubstr(at=0, start=0, end=3),)

    def test_blacklist_wins_by_default(self) -> None:
        config = compile_config(whitelist=["hm"], blacklist=["hm"], atoms=["h", "m"])
        assert check("hm", config).mistakes == (BadToken(at=0),)

    def test_whitelist_can_override_blacklist(self) -> None:
        config = compile_config(
            whitelist=["hm"],
            blacklist=["hm"],
            whitelist_overrides_blacklist=True,
        )
        parsed = check("hm", config)
        assert parsed.ok
        assert len(parsed.nodes) == 1


class TestCountMarkers:
    """Numerals are legal only inside round brackets."""

    def test_inside_round(self, czech_config: ParserConfig) -> None:
        parsed = check("(12)", czech_config)
        assert parsed.ok
        assert parsed.nodes == (
            OpenNode(DelimKind.ROUND),
            TokenNode(parsed.tokens[1]),
            CloseNode(DelimKind.ROUND),
        )

    def test_outside_round(self, czech_config: ParserConfig) -> None:
        parsed = check("12", czech_config)
        assert parsed.mistakes == (BadToken(at=0),)
        assert parsed.nodes == ()

    def test_inside_other_brackets(self, czech_config: ParserConfig) -> None:
        parsed = check("[3]", czech_config)
        assert parsed.mistakes == (BadToken(at=1),)

    def test_numeral_shapes(self, empty_config: ParserConfig) -> None:
        for numeral in ("0", "-4", "2,5", "10.25"):
            assert check(f"({numeral})", empty_config).ok, numeral

    def test_not_numerals(self, czech_config: ParserConfig) -> None:
        """Malformed numerals fall through to atom coverage."""
        parsed = check("(1,2,3)", czech_config)
        assert parsed.mistakes == (BadSubstr(at=1, start=0, end=5),)

    def test_numeral_beats_blacklist(self) -> None:
        config = compile_config(blacklist=["7"])
        assert check("(7)", config).ok
        assert check("7", config).mistakes == (BadToken(at=0),)

    def test_after_round_closes(self, czech_config: ParserConfig) -> None:
        parsed = check("(ano 2) 3", czech_config)
        assert parsed.mistakes == (BadToken(at=4),)


class TestDelimiters:
    """Bracket balance with same-kind nesting capped at one."""

    def test_balanced(self, czech_config: ParserConfig) -> None:
        parsed = check("[ano] (ne)", czech_config)
        assert parsed.ok
        assert [type(node) for node in parsed.nodes] == [
            OpenNode, TokenNode, CloseNode, OpenNode, TokenNode, CloseNode,
        ]

    def test_close_open_open(self, empty_config: ParserConfig) -> None:
        parsed = check(")((", empty_config)
        assert parsed.mistakes == (
            ClosingUnopenedDelim(at=0, delim=DelimKind.ROUND),
            NestedDelim(at=2, delim=DelimKind.ROUND, outermost_start=1),
            UnclosedDelim(at=1, delim=DelimKind.ROUND),
        )
        assert parsed.nodes == (OpenNode(DelimKind.ROUND),)

    def test_nested_keeps_outermost(self, czech_config: ParserConfig) -> None:
        """Closing after a nested open closes the outer one; the extra close is unopened."""
        parsed = check("[a [b] c]", czech_config)
        assert parsed.mistakes == (
            NestedDelim(at=2, delim=DelimKind.SQUARE, outermost_start=0),
            ClosingUnopenedDelim(at=6, delim=DelimKind.SQUARE),
        )

    def test_different_kinds_nest_and_interleave(self, czech_config: ParserConfig) -> None:
        assert check("[a (b] c)", czech_config).ok
        assert check("(a [b] c)", czech_config).ok

    def test_unclosed_in_fixed_kind_order(self, empty_config: ParserConfig) -> None:
        parsed = check("< [ (", compile_config(after_angle=["SM"]))
        assert parsed.mistakes == (
            MissingAttrs(at=1),
            UnclosedDelim(at=2, delim=DelimKind.ROUND),
            UnclosedDelim(at=1, delim=DelimKind.SQUARE),
            UnclosedDelim(at=0, delim=DelimKind.ANGLE),
        )


class TestAttrLists:
    """Attribute codes after '<'."""

    def test_sorted_and_deduplicated(self, czech_config: ParserConfig) -> None:
        parsed = check("<SM_SJ_SM ano>", czech_config)
        assert parsed.ok
        assert parsed.nodes == (
            OpenNode(DelimKind.ANGLE),
            AttrList(("SJ", "SM")),
            TokenNode(parsed.tokens[2]),
            CloseNode(DelimKind.ANGLE),
        )

    def test_codes_token_not_checked_as_word(self) -> None:
        config = compile_config(atoms=["f", "o"], after_angle=["SM", "SJ"])
        parsed = check("<SM_SJ foo>", config)
        assert parsed.ok
        assert parsed.nodes[1] == AttrList(("SJ", "SM"))

    def test_bad_code_rejects_whole_list(self, czech_config: ParserConfig) -> None:
        parsed = check("<SM_XY_ZZ ano>", czech_config)
        assert parsed.mistakes == (
            BadAttr(at=1, attr="XY"),
            BadAttr(at=1, attr="ZZ"),
        )
        assert not any(isinstance(node, AttrList) for node in parsed.nodes)
        # The codes token is consumed either way
        assert _word_texts(parsed) == ["ano"]

    def test_empty_piece_is_bad(self, czech_config: ParserConfig) -> None:
        parsed = check("<SM__SJ ano>", czech_config)
        assert parsed.mistakes == (BadAttr(at=1, attr=""),)

    def test_codes_matched_individually(self) -> None:
        config = compile_config(after_angle=["SM", "SJ"])
        assert check("<SM_SJ>", config).ok
        assert check("<SMSJ>", config).mistakes == (BadAttr(at=1, attr="SMSJ"),)

    def test_missing_codes_before_bracket(self, czech_config: ParserConfig) -> None:
        parsed = check("<(ano)>", czech_config)
        assert parsed.mistakes == (MissingAttrs(at=1),)
        assert [type(node) for node in parsed.nodes] == [
            OpenNode, OpenNode, TokenNode, CloseNode, CloseNode,
        ]

    def test_close_open_open_angles(self) -> None:
        parsed = check("><<", compile_config())
        assert parsed.mistakes == (
            ClosingUnopenedDelim(at=0, delim=DelimKind.ANGLE),
            MissingAttrs(at=2),
            NestedDelim(at=2, delim=DelimKind.ANGLE, outermost_start=1),
            MissingAttrs(at=3),
            UnclosedDelim(at=1, delim=DelimKind.ANGLE),
        )

    def test_nested_angle_still_reads_codes(self, czech_config: ParserConfig) -> None:
        parsed = check("<SM <SJ ano> >", czech_config)
        assert parsed.mistakes == (
            NestedDelim(at=2, delim=DelimKind.ANGLE, outermost_start=0),
            ClosingUnopenedDelim(at=6, delim=DelimKind.ANGLE),
        )
        assert [node for node in parsed.nodes if isinstance(node, AttrList)] == [
            AttrList(("SM",)),
            AttrList(("SJ",)),
        ]

    def test_empty_after_angle_rejects_all(self, empty_config: ParserConfig) -> None:
        parsed = check("<SM>", empty_config)
        assert parsed.mistakes == (BadAttr(at=1, attr="SM"),)


class TestEntryPoints:
    """Parser class, validate() and check() agree."""

    def test_validate_matches_check(self, czech_config: ParserConfig) -> None:
        source = "čarala (b%nga 2> xxx"
        assert validate(czech_config, tokenize(source)) == check(source, czech_config)

    def test_parser_class(self, czech_config: ParserConfig) -> None:
        parsed = Parser(czech_config, tokenize("ano")).parse()
        assert parsed.ok

    def test_result_fields(self, czech_config: ParserConfig) -> None:
        parsed = check("  ano   ne ", czech_config)
        assert parsed.source == "ano ne"
        assert parsed.tokens == tokenize("ano ne").tokens
        assert parsed.text(1) == "ne"

    def test_empty_segment(self, czech_config: ParserConfig) -> None:
        parsed = check("", czech_config)
        assert parsed.ok
        assert parsed.nodes == ()
