"""codelink API layer: option grammar, block recognizer, file accessors and commands."""
