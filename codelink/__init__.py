"""codelink - fenced code-link blocks for markdown documents."""

__version__ = "0.1.0"
