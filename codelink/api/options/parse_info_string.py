"""Info-string grammar parser.

Grammar (leading keyword fixed)::

    <keyword> [<source-file>] [--region <name>] [--session <id>] [--project <path> | --package <name>]

Errors are collected, never raised. The caller decides what to do with them.
"""

from .InfoStringResult import InfoStringResult
from .LinkOptions import LinkOptions
from .parse_relative_file_path import parse_relative_file_path
from .tokenize_info_string import tokenize_info_string
from .TokenKind import TokenKind

REGION_FLAG = "--region"
SESSION_FLAG = "--session"
PROJECT_FLAG = "--project"
PACKAGE_FLAG = "--package"

VALUED_FLAGS = (REGION_FLAG, SESSION_FLAG, PROJECT_FLAG, PACKAGE_FLAG)


def _unrecognized(text: str) -> str:
    return f"Unrecognized command or argument '{text}'"


def parse_info_string(text: str, keyword: str = "csharp") -> InfoStringResult:
    """Parse an info string into link options plus grammar errors.

    Args:
        text: Info string (text after the opening fence characters)
        keyword: Leading keyword naming code-link blocks

    Returns:
        InfoStringResult; ``is_match`` is False when the leading token is not ``keyword``
    """
    tokens = tokenize_info_string(text, VALUED_FLAGS)
    if not tokens or tokens[0].kind is not TokenKind.POSITIONAL or tokens[0].text != keyword:
        return InfoStringResult(is_match=False)

    options = LinkOptions()
    errors: list[str] = []
    supplied_flags: set[str] = set()
    seen_positional = False

    i = 1
    while i < len(tokens):
        token = tokens[i]

        if token.kind is not TokenKind.FLAG:
            i += 1
            if seen_positional:
                errors.append(_unrecognized(token.text))
                continue
            seen_positional = True
            # An unparsable file argument leaves a literal block
            options.source_file = parse_relative_file_path(token.text)
            continue

        value = None
        if i + 1 < len(tokens) and tokens[i + 1].kind is TokenKind.VALUE:
            value = tokens[i + 1].text
            i += 2
        else:
            i += 1

        flag = token.text
        if flag not in VALUED_FLAGS:
            errors.append(_unrecognized(flag))
            continue
        if flag in supplied_flags:
            errors.append(f"Option '{flag}' cannot be specified more than once")
            continue
        supplied_flags.add(flag)
        if not value:
            errors.append(f"Required argument missing for option: {flag}")
            continue

        if flag == REGION_FLAG:
            options.region = value
        elif flag == SESSION_FLAG:
            options.session = value
        elif flag == PROJECT_FLAG:
            options.project = value
        else:
            options.package = value

    return InfoStringResult(is_match=True, options=options, errors=errors, supplied_flags=supplied_flags)
