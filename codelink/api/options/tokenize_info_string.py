"""Info-string tokenizer (UNO: single function)."""

from collections.abc import Iterable, Iterator

from .OptionToken import OptionToken
from .TokenKind import TokenKind


def _split_words(text: str) -> Iterator[str]:
    """Split on whitespace, keeping double-quoted runs together."""
    word: list[str] = []
    in_word = False
    quoted = False
    for ch in text:
        if ch == '"':
            quoted = not quoted
            in_word = True
            continue
        if ch.isspace() and not quoted:
            if in_word:
                yield "".join(word)
                word = []
                in_word = False
            continue
        word.append(ch)
        in_word = True
    # An unterminated quote runs to the end of the line
    if in_word:
        yield "".join(word)


def _is_flag(word: str) -> bool:
    return len(word) > 1 and word.startswith("-")


def tokenize_info_string(text: str, valued_flags: Iterable[str]) -> list[OptionToken]:
    """Split an info string into tagged tokens.

    Args:
        text: Info string (text after the opening fence characters)
        valued_flags: Flags that take a value; the word following one of them is tagged VALUE

    Returns:
        Tokens in source order. ``--flag=value`` yields a FLAG token followed by a VALUE token.
    """
    valued = set(valued_flags)
    tokens: list[OptionToken] = []
    expect_value = False

    for word in _split_words(text):
        if expect_value and not _is_flag(word):
            tokens.append(OptionToken(TokenKind.VALUE, word))
            expect_value = False
            continue

        expect_value = False
        if _is_flag(word):
            name, sep, value = word.partition("=")
            tokens.append(OptionToken(TokenKind.FLAG, name))
            if sep:
                tokens.append(OptionToken(TokenKind.VALUE, value))
            else:
                expect_value = name in valued
            continue

        tokens.append(OptionToken(TokenKind.POSITIONAL, word))

    return tokens
