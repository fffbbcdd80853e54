"""
Custom Pygments lexer for bracketeer markup

Provides syntax highlighting for [[[directive]]] markup when reviewing
translatable text.

Token types:
- Punctuation: Directive and parameter open/close tokens
- Operator: Parameter delimiter (|||)
- Keyword: Context separator (///)
- Name.Label: Context text following the separator
- Name.Variable: Placeholders (%0, %1, ...)
- Name.Attribute: Translatable parameter text
- String: Directive text
- Text: Everything outside directives
"""

from pygments.lexer import RegexLexer, default
from pygments.token import (
    Text,
    Punctuation,
    Name,
    String,
    Keyword,
    Operator,
)


class BracketLexer(RegexLexer):
    """
    Lexer for bracketeer directive markup

    Highlights [[[term///context|||(((param)))]]] with nesting support.

    Example:
        Say [[[%0 fox|||(((quick)))]]] now

    Tokens:
        Say → Text
        [[[ → Punctuation
        %0 → Name.Variable
        " fox" → String
        ||| → Operator
        ((( → Punctuation
        quick → Name.Attribute
        ))) → Punctuation
        ]]] → Punctuation
    """

    name = 'Bracketeer'
    aliases = ['bracketeer', 'i18n-brackets']
    filenames = []

    tokens = {
        'root': [
            # Opening token enters a directive
            (r'\[\[\[', Punctuation, 'directive'),

            # Everything else is plain text
            (r'[^\[]+', Text),
            (r'.', Text),
        ],

        'directive': [
            # Nested directive
            (r'\[\[\[', Punctuation, '#push'),

            # Closing token (pop back to previous state)
            (r'\]\]\]', Punctuation, '#pop'),

            # Translatable parameter
            (r'\(\(\(', Punctuation, 'parameter'),

            (r'\|\|\|', Operator),

            # Context separator and the context text after it
            (r'///', Keyword, 'context'),

            # Placeholders
            (r'%\d+', Name.Variable),

            (r'[^\[\]\(|/%]+', String),
            (r'.', String),
        ],

        'context': [
            # Context runs until the next delimiter, open or close
            (r'[^\[\]|]+', Name.Label),
            default('#pop'),
        ],

        'parameter': [
            (r'\)\)\)', Punctuation, '#pop'),
            (r'\[\[\[', Punctuation, 'directive'),
            (r'///', Keyword),
            (r'[^\)\[/]+', Name.Attribute),
            (r'.', Name.Attribute),
        ],
    }


def get_lexer() -> BracketLexer:
    """
    Get the BracketLexer instance

    Returns:
        BracketLexer instance ready for use with Pygments
    """
    return BracketLexer()
