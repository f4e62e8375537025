"""
Directive parser tests - brace groups, chains, placeholders

Tests that the parser splits templates into text and DirectiveGroup pieces,
resolves codes per directive, and rejects malformed groups.
"""

import pytest

from sgrtemplate.lib.parser import Parser
from sgrtemplate.lib.errors import InvalidColor, InvalidKeyword, MissingCloseBracket
from sgrtemplate.models.directives import Directive, DirectiveGroup, DirectiveKind
from sgrtemplate.models.parser import DelimiterKind


class TestPieces:
    """Test how a template is split into pieces"""

    def test_empty_template(self):
        """Empty template has no pieces"""
        assert Parser("").parse() == []

    def test_text_only(self):
        assert Parser("hello").parse() == ["hello"]

    def test_text_around_group(self):
        """Text, group, text"""
        pieces = Parser("a{+Bold}b").parse()

        assert len(pieces) == 3
        assert pieces[0] == "a"
        assert isinstance(pieces[1], DirectiveGroup)
        assert pieces[2] == "b"

    def test_placeholders_merge_into_text(self):
        """Plain placeholders are literal text, merged with neighbours"""
        assert Parser("x{name}y{}z").parse() == ["x{name}y{}z"]

    def test_doubled_braces_stay_text(self):
        """Doubled braces are text, never directives"""
        pieces = Parser("a{{+Bold}}b", format_safe=True).parse()

        assert pieces == ["a{{+Bold}}b"]
        assert set(DirectiveKind) == {DirectiveKind.STYLE_ADD, DirectiveKind.STYLE_REMOVE,
                                      DirectiveKind.COLOR, DirectiveKind.PASSTHROUGH}

    def test_adjacent_groups(self):
        pieces = Parser("{+Bold}{-Bold}").parse()

        assert len(pieces) == 2
        assert pieces[0].directives[0].codes == [1]
        assert pieces[1].directives[0].codes == [22]


class TestSingleDirectives:
    """Test groups holding one directive"""

    def test_style_add(self):
        group = Parser("{+Italic}").parse()[0]

        assert group.name is None
        assert group.directives == [
            Directive(kind=DirectiveKind.STYLE_ADD, text="Italic", codes=[3], position=1)
        ]

    def test_style_remove(self):
        group = Parser("{-Underline}").parse()[0]

        assert group.directives[0].kind is DirectiveKind.STYLE_REMOVE
        assert group.directives[0].codes == [24]

    def test_named_color(self):
        group = Parser("{#CyanBg}").parse()[0]

        assert group.directives[0].kind is DirectiveKind.COLOR
        assert group.directives[0].codes == [46]

    def test_numeric_color(self):
        group = Parser("{#f(1,2,3)}").parse()[0]

        assert group.directives[0].text == "f(1,2,3)"
        assert group.directives[0].codes == [38, 2, 1, 2, 3]

    def test_leading_passthrough(self):
        """A group may start with & (no name, no codes)"""
        group = Parser("{&name}").parse()[0]

        assert group.name is None
        assert group.directives[0].kind is DirectiveKind.PASSTHROUGH
        assert group.directives[0].text == "name"
        assert group.directives[0].codes == []


class TestChains:
    """Test several directives sharing one pair of braces"""

    def test_chain_order_and_positions(self):
        """Directives keep source order and symbol positions"""
        group = Parser("{+Bold-Dim#RedFg}").parse()[0]

        assert [d.kind for d in group.directives] == [
            DirectiveKind.STYLE_ADD,
            DirectiveKind.STYLE_REMOVE,
            DirectiveKind.COLOR,
        ]
        assert [d.position for d in group.directives] == [1, 6, 10]
        assert group.codes_all() == [1, 22, 31]

    def test_passthrough_in_chain(self):
        group = Parser("{+Bold&name-Dim}").parse()[0]

        assert [d.kind for d in group.directives] == [
            DirectiveKind.STYLE_ADD,
            DirectiveKind.PASSTHROUGH,
            DirectiveKind.STYLE_REMOVE,
        ]
        assert group.directives[1].text == "name"

    def test_leading_name(self):
        """Text before the first symbol is kept as the group's name"""
        group = Parser("{count+Bold#GreenFg}").parse()[0]

        assert group.name == "count"
        assert group.codes_all() == [1, 32]


class TestFailures:
    """Test malformed groups"""

    def test_unterminated_group(self):
        """{+Bold without a closing brace"""
        with pytest.raises(MissingCloseBracket):
            Parser("{+Bold").parse()

    def test_unterminated_chain(self):
        with pytest.raises(MissingCloseBracket):
            Parser("{+Bold&name").parse()

    def test_unterminated_placeholder(self):
        with pytest.raises(MissingCloseBracket):
            Parser("text {name").parse()

    def test_open_brace_at_end(self):
        with pytest.raises(MissingCloseBracket) as excinfo:
            Parser("abc{").parse()

        assert excinfo.value.position == 3

    def test_unknown_keyword(self):
        """{+Sparkle} is an invalid keyword"""
        with pytest.raises(InvalidKeyword) as excinfo:
            Parser("{+Sparkle}").parse()

        assert "Sparkle" in excinfo.value.message
        assert excinfo.value.position == 1

    def test_remove_only_keyword(self):
        """Reset has no remove code"""
        with pytest.raises(InvalidKeyword):
            Parser("{-Reset}").parse()

    def test_empty_keyword(self):
        with pytest.raises(InvalidKeyword):
            Parser("{+}").parse()

    def test_keywords_are_case_sensitive(self):
        with pytest.raises(InvalidKeyword):
            Parser("{+bold}").parse()

    def test_unknown_color(self):
        """Bad colors raise InvalidColor, which is also an InvalidKeyword"""
        with pytest.raises(InvalidColor):
            Parser("{#PurpleFg}").parse()
        with pytest.raises(InvalidKeyword):
            Parser("{#PurpleFg}").parse()

    def test_error_in_later_group_rejects_template(self):
        with pytest.raises(InvalidKeyword):
            Parser("{+Bold}fine{+Nope}").parse()

    def test_format_spec_with_sign_is_a_directive(self):
        """Placeholders containing directive symbols are parsed as chains"""
        with pytest.raises(InvalidKeyword):
            Parser("{value:+d}").parse()


class TestDelimiterFind:
    """Test the single delimiter scan"""

    @pytest.mark.parametrize("symbol, kind", [
        ("+", DelimiterKind.STANDARD),
        ("-", DelimiterKind.STANDARD),
        ("#", DelimiterKind.STANDARD),
        ("&", DelimiterKind.AND),
        ("}", DelimiterKind.END),
    ])
    def test_kinds(self, symbol, kind):
        parser = Parser(f"abc{symbol}")
        match = parser.delimiter_find()

        assert match.kind is kind
        assert match.symbol == symbol
        assert match.position == 3

    def test_scan_starts_at_cursor(self):
        parser = Parser("+Bold#RedFg}")
        parser.cursor.position = 1
        match = parser.delimiter_find()

        assert match.symbol == "#"
        assert match.position == 5
        assert parser.cursor.position == 1

    def test_no_delimiter(self):
        assert Parser("plain").delimiter_find() is None
