"""
Lexer tests

Tests the Pygments lexer used to highlight class strings in reports.
"""

from pygments.token import Token

from classname.lib.lexer import ClassStringLexer, classes_highlight


def tokens_get(source):
    return [(ttype, value) for ttype, value in ClassStringLexer().get_tokens(source)]


class TestClassStringLexer:
    """Test token classification"""

    def test_spacing(self):
        """Prefix and count are separate tokens"""
        tokens = tokens_get("px-4")
        assert (Token.Keyword, "px-") in tokens
        assert (Token.Literal.Number.Integer, "4") in tokens

    def test_bracketed_value(self):
        """Bracketed raw values are strings"""
        assert (Token.Literal.String, "[12.5dp]") in tokens_get("p-[12.5dp]")

    def test_background_with_opacity(self):
        """Color, slash and opacity are split"""
        tokens = tokens_get("bg-red/50")
        assert (Token.Name.Constant, "red") in tokens
        assert (Token.Punctuation, "/") in tokens
        assert (Token.Literal.Number.Integer, "50") in tokens

    def test_gradient(self):
        """Gradient tokens are constants"""
        assert (Token.Keyword.Constant, "bg-gradient-to-r") in tokens_get("bg-gradient-to-r p-2")

    def test_unknown(self):
        """Unrecognized tokens are errors"""
        assert (Token.Error, "nope") in tokens_get("p-4 nope")

    def test_roundtrip_text(self):
        """Lexing keeps every character"""
        source = "p-4 bg-[#112233]/50 r-2 nope"
        assert "".join(value for _, value in tokens_get(source)).rstrip("\n") == source

    def test_highlight(self):
        """Terminal highlighting keeps the token text"""
        highlighted = classes_highlight("p-4 bg-red")
        assert "p-" in highlighted
        assert "red" in highlighted
