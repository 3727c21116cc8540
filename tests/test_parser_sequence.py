"""
Parser tests - class string to StyleSequence

Tests emission order, Identity handling, totality on garbage input, and
purity of resolution.
"""

import dataclasses
import time

import pytest

from classname.lib.parser import Parser, parse
from classname.lib.rules import resolve
from classname.models.directives import (
    StyleDirective,
    Identity,
    PaddingAll,
    Background,
    CornerRadius,
)
from classname.models.parser import StyleSequence


class TestEmptyAndSimple:
    """Test empty sources and single tokens"""

    def test_empty_source(self):
        """Empty string parses to an empty sequence"""
        sequence = Parser("").parse()
        assert len(sequence) == 0
        assert sequence.tokens == []
        assert sequence.resolved() == []

    def test_whitespace_only(self):
        """Whitespace parses to an empty sequence"""
        assert len(Parser("  \n\t ").parse()) == 0

    def test_single_token(self):
        """One token, one directive"""
        sequence = Parser("p-4").parse()
        assert sequence.directives == [PaddingAll(value=16.0)]
        assert sequence.tokens == ["p-4"]

    def test_resolve_empty_token(self):
        """resolve() on an empty string is Identity"""
        assert resolve("") == Identity()


class TestOrdering:
    """Directives come out in token order"""

    def test_order_preserved(self):
        """p-4 bg-red r-2 emits padding, background, radius in that order"""
        sequence = Parser("p-4 bg-red r-2").parse()
        assert [type(d) for d in sequence] == [PaddingAll, Background, CornerRadius]

    def test_reversed_input_reverses_output(self):
        """Order follows the input, not the rule table"""
        sequence = Parser("r-2 bg-red p-4").parse()
        assert [type(d) for d in sequence] == [CornerRadius, Background, PaddingAll]

    def test_repeated_kind_kept(self):
        """Two bg- tokens both emit, in order"""
        sequence = Parser("bg-red bg-blue").parse()
        assert [d.color.hex_format() for d in sequence] == ["#FF0000", "#3B82F6"]

    def test_kinds(self):
        """Export tags match the variants"""
        sequence = Parser("p-4 bg-red r-2").parse()
        assert [d.kind for d in sequence] == ["padding_all", "background", "corner_radius"]


class TestUnresolved:
    """Unresolved tokens become Identity and are reported"""

    def test_identity_in_place(self):
        """Unresolved tokens keep their position as Identity"""
        sequence = Parser("p-4 nope r-2").parse()
        assert sequence.directives == [PaddingAll(value=16.0), Identity(), CornerRadius(value=8.0)]

    def test_resolved_drops_identity(self):
        """resolved() excludes Identity"""
        sequence = Parser("p-4 nope p-abc r-2").parse()
        assert sequence.resolved() == [PaddingAll(value=16.0), CornerRadius(value=8.0)]

    def test_unresolved_tokens_listed(self):
        """unresolved() lists the failing tokens in order"""
        sequence = Parser("unknowntoken p-4 bg-[notacolor] p-abc").parse()
        assert sequence.unresolved() == ["unknowntoken", "bg-[notacolor]", "p-abc"]

    def test_resolved_never_exceeds_tokens(self):
        """At most one directive per token"""
        sequence = Parser("p-4 p-4 x y bg-red").parse()
        assert len(sequence.resolved()) <= len(sequence.tokens)
        assert len(sequence.directives) == len(sequence.tokens)


class TestTotality:
    """Parsing never raises, whatever the input"""

    @pytest.mark.parametrize("source", [
        "[[[",
        "]]]",
        "p-[[10dp]]",
        "bg-[#",
        "bg-/50",
        "bg-[rgb(((]",
        "////",
        "-",
        "p--",
        "m-[-]",
        "r-[]]",
        "\x00 \x01",
        "🎨 p-🎨 bg-🎨/🎨",
        "p-" + "9" * 500,
        "bg-[" + "#" * 1000 + "]",
    ])
    def test_garbage(self, source):
        """Adversarial input yields a sequence without raising"""
        sequence = Parser(source).parse()
        assert isinstance(sequence, StyleSequence)
        assert len(sequence.directives) == len(sequence.tokens)

    @pytest.mark.parametrize("source", [
        "p-" + "1" * 10000,
        "p-[" + "1" * 20000 + "x]",
        "r-[" + "2" * 20000 + "dp]",
        "bg-red/" + "5" * 10000,
        "bg-rgb(" + "1" * 10000 + ",0,0)",
        " ".join(["p-" + "7" * 5000] * 20),
    ])
    def test_long_literals_bounded(self, source):
        """Long numeric literals neither raise nor take long"""
        started = time.perf_counter()
        sequence = Parser(source).parse()
        elapsed = time.perf_counter() - started

        assert len(sequence.directives) == len(sequence.tokens)
        assert elapsed < 1.0


class TestPurity:
    """Resolution is a pure function of the token"""

    @pytest.mark.parametrize("token", ["p-4", "bg-red/50", "bg-gradient-to-r", "mb-2", "nope"])
    def test_idempotent(self, token):
        """Resolving twice gives structurally equal directives"""
        assert resolve(token) == resolve(token)

    def test_parse_twice(self):
        """Parsing the same string twice gives equal sequences"""
        assert parse("p-4 bg-red/50 r-2") == parse("p-4 bg-red/50 r-2")

    def test_directives_are_immutable(self):
        """Directives cannot be mutated after resolution"""
        directive = resolve("p-4")
        with pytest.raises(dataclasses.FrozenInstanceError):
            directive.value = 1.0


class TestLogging:
    """Resolution logs through LOG only when a state is connected"""

    def test_unresolved_logged_at_verbosity_2(self):
        """Unresolved tokens are logged; resolved ones need verbosity 3"""
        from loguru import logger
        from classname.lib.log import state_connectToLogger
        from classname.models import ProgramState

        messages = []
        sink_id = logger.add(messages.append, format="{message}")
        try:
            state_connectToLogger(ProgramState(verbosity=2))
            Parser("nope p-4").parse()
        finally:
            state_connectToLogger(None)
            logger.remove(sink_id)

        text = "".join(str(m) for m in messages)
        assert "Unresolved token: nope" in text
        assert "p-4" not in text

    def test_silent_without_state(self):
        """No state connected, no output"""
        from loguru import logger

        messages = []
        sink_id = logger.add(messages.append, format="{message}")
        try:
            Parser("nope").parse()
        finally:
            logger.remove(sink_id)
        assert messages == []

    def test_trace_logged_at_verbosity_3(self):
        """Resolved tokens are traced at verbosity 3"""
        from loguru import logger
        from classname.lib.log import state_connectToLogger
        from classname.models import ProgramState

        messages = []
        sink_id = logger.add(messages.append, format="{message}")
        try:
            state_connectToLogger(ProgramState(verbosity=3))
            Parser("p-4").parse()
        finally:
            state_connectToLogger(None)
            logger.remove(sink_id)

        assert "Token p-4 -> PaddingAll(value=16.0)" in "".join(str(m) for m in messages)

    def test_trace_not_formatted_without_state(self):
        """Directives are not formatted for the trace when nothing listens"""

        class CountingDirective(StyleDirective):
            formatted = 0

            def __repr__(self):
                CountingDirective.formatted += 1
                return "CountingDirective()"

        class CountingRegistry:
            def resolve(self, token):
                return CountingDirective()

        Parser("a b c", registry=CountingRegistry()).parse()
        assert CountingDirective.formatted == 0
