"""
Custom Pygments lexer for class-string highlighting

Used by the CLI report to show class strings with their parts colored.

Token types:
- Keyword: Rule prefixes (p-, px-, m-, r-, bg-, ...)
- Keyword.Constant: Exact gradient tokens
- Number: Integer unit counts and opacity percentages
- String: Bracketed raw values ([12dp], [#112233])
- Name.Constant: Named colors and bare hex/rgb() colors
- Punctuation: The opacity slash
- Error: Tokens no rule recognizes
"""

from pygments.lexer import RegexLexer, bygroups, default
from pygments.token import (
    Text,
    Punctuation,
    Name,
    String,
    Keyword,
    Number,
    Error,
)


class ClassStringLexer(RegexLexer):
    """
    Lexer for utility-class strings

    Example:
        p-4 bg-red/50 r-[6dp]

    Tokens:
        p-    → Keyword
        4     → Number
        bg-   → Keyword
        red   → Name.Constant
        /     → Punctuation
        50    → Number
        [6dp] → String
    """

    name = 'ClassString'
    aliases = ['classname', 'classstring']
    filenames = []

    tokens = {
        'root': [
            (r'\s+', Text),

            # Exact gradient tokens must come before bg-
            (r'bg-gradient-to-[rb](?=\s|$)', Keyword.Constant),

            # Background: prefix, color, optional /opacity
            (r'(bg-)(\[[^\]\s]*\])', bygroups(Keyword, String), 'opacity'),
            (r'(bg-)(#[0-9a-fA-F]+|rgb\([^)\s]*\)|[a-z]+)', bygroups(Keyword, Name.Constant), 'opacity'),

            # Length families; longer prefixes first
            (r'(p[xytblr]-|m[xytblr]-|[pmr]-)(\[[^\]\s]*\])', bygroups(Keyword, String)),
            (r'(p[xytblr]-|m[xytblr]-|[pmr]-)([+-]?[0-9]+)(?=\s|$)', bygroups(Keyword, Number.Integer)),

            # Anything else is not a recognized token
            (r'\S+', Error),
        ],

        'opacity': [
            (r'(/)([0-9]+)', bygroups(Punctuation, Number.Integer), '#pop'),
            (r'/\S*', Error, '#pop'),
            default("#pop"),
        ],
    }


def classes_highlight(source: str) -> str:
    """
    Highlight a class string for terminal output

    Args:
        source: Class string

    Returns:
        String with ANSI color codes
    """
    from pygments import highlight
    from pygments.formatters import TerminalFormatter

    return highlight(source, ClassStringLexer(), TerminalFormatter()).rstrip('\n')
