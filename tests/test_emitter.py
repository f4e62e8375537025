"""
Emitter tests - CodeBuffer and directive group emission

Tests the code buffer framing rules (join, clear on flush, empty buffer)
and the splitting of escape sequences around passthrough fragments.
"""

import io

import pytest

from sgrtemplate.lib.emitter import CodeBuffer, group_emit
from sgrtemplate.models.directives import Directive, DirectiveGroup, DirectiveKind


def style(code: int, text: str = "X") -> Directive:
    return Directive(kind=DirectiveKind.STYLE_ADD, text=text, codes=[code])


def passthrough(text: str) -> Directive:
    return Directive(kind=DirectiveKind.PASSTHROUGH, text=text)


class TestCodeBuffer:
    """Test buffering and flushing"""

    def test_empty_flush(self):
        """An empty buffer emits nothing"""
        assert CodeBuffer().flush() == ""
        assert CodeBuffer().flush_partial() == ""

    def test_single_code(self):
        assert CodeBuffer([1]).flush() == "\x1b[1m"

    def test_codes_joined_in_order(self):
        """Codes are ';'-joined in encounter order, no trailing delimiter"""
        assert CodeBuffer([38, 2, 170, 187, 204]).flush() == "\x1b[38;2;170;187;204m"

    def test_flush_clears(self):
        buffer = CodeBuffer([1, 2])
        buffer.flush()

        assert buffer.is_empty()
        assert len(buffer) == 0
        assert buffer.flush() == ""

    def test_partial_flush(self):
        """Partial flush renders the codes without framing"""
        buffer = CodeBuffer([0, 31])

        assert buffer.flush_partial() == "0;31"
        assert buffer.is_empty()

    def test_chaining(self):
        buffer = CodeBuffer()
        buffer.chain_code(1).chain_codes([48, 5, 31]).chain_code(4)

        assert buffer.codes == [1, 48, 5, 31, 4]

    def test_decimal_without_leading_zeros(self):
        assert CodeBuffer([0, 7, 100]).flush() == "\x1b[0;7;100m"

    def test_out_of_range_rejected(self):
        buffer = CodeBuffer()
        with pytest.raises(ValueError):
            buffer.push(256)
        with pytest.raises(ValueError):
            buffer.push(-1)
        assert buffer.is_empty()

    def test_write_to_sink(self):
        """write_to writes a complete sequence and clears"""
        sink = io.StringIO()
        buffer = CodeBuffer([1, 31])
        buffer.write_to(sink)

        assert sink.getvalue() == "\x1b[1;31m"
        assert buffer.is_empty()

    def test_write_to_sink_empty(self):
        """Nothing is written for an empty buffer"""
        sink = io.StringIO()
        CodeBuffer().write_to(sink)

        assert sink.getvalue() == ""


class TestGroupEmit:
    """Test emission of a whole directive group"""

    def test_codes_accumulate(self):
        group = DirectiveGroup(directives=[style(1), style(22), style(31)])
        assert group_emit(group) == "\x1b[1;22;31m"

    def test_split_around_passthrough(self):
        """{+Bold&name-Dim}: close before the fragment, reopen after it"""
        group = DirectiveGroup(directives=[style(1), passthrough("name"), style(22)])
        assert group_emit(group) == "\x1b[1m{name}\x1b[22m"

    def test_trailing_passthrough(self):
        """No empty sequence after a final fragment"""
        group = DirectiveGroup(directives=[style(1), passthrough("name")])
        assert group_emit(group) == "\x1b[1m{name}"

    def test_leading_passthrough(self):
        """No empty sequence before a first fragment"""
        group = DirectiveGroup(directives=[passthrough("a"), style(4)])
        assert group_emit(group) == "{a}\x1b[4m"

    def test_consecutive_passthroughs(self):
        group = DirectiveGroup(directives=[passthrough("a"), passthrough("b")])
        assert group_emit(group) == "{a}{b}"

    def test_name_after_final_sequence(self):
        """A leading name is re-emitted after the sequence"""
        group = DirectiveGroup(name="who", directives=[style(1), style(31)])
        assert group_emit(group) == "\x1b[1;31m{who}"

    def test_empty_name(self):
        group = DirectiveGroup(name="", directives=[style(1)])
        assert group_emit(group) == "\x1b[1m{}"
