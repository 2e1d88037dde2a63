"""Comment- and string-aware source scanner.

A single left-to-right pass that tags every character of a JavaScript or
TypeScript source with the lexical state it sits in.  Exactly one state
is active at a time:

    CODE              structural code
    LINE_COMMENT      ``// ...`` up to (not including) the newline
    BLOCK_COMMENT     ``/* ... */`` including both delimiters
    SINGLE_QUOTE      ``'...'`` including both quotes
    DOUBLE_QUOTE      ``"..."`` including both quotes
    TEMPLATE_LITERAL  ```...``` including both backticks

A backslash inside a string escapes the following character, so an
escaped quote never closes the string.  ``${...}`` interpolation inside
template literals is not tracked: its contents are tagged as template
literal text.  Regular-expression literals are not recognised either.

Both the export extractor and the mutation engine rely on these tags so
that braces, parens, and semicolons inside strings or comments are never
treated as structure.
"""

from enum import Enum


class ScanState(Enum):
    CODE = "code"
    LINE_COMMENT = "line-comment"
    BLOCK_COMMENT = "block-comment"
    SINGLE_QUOTE = "single-quote"
    DOUBLE_QUOTE = "double-quote"
    TEMPLATE_LITERAL = "template-literal"


_QUOTE_STATES = {
    "'": ScanState.SINGLE_QUOTE,
    '"': ScanState.DOUBLE_QUOTE,
    "`": ScanState.TEMPLATE_LITERAL,
}

_STRING_STATES = frozenset(_QUOTE_STATES.values())
_COMMENT_STATES = frozenset({ScanState.LINE_COMMENT, ScanState.BLOCK_COMMENT})


def scan(source: str) -> list[ScanState]:
    """Return the active :class:`ScanState` for every index of ``source``."""
    states: list[ScanState] = [ScanState.CODE] * len(source)
    state = ScanState.CODE
    closing_quote = ""
    i = 0
    length = len(source)

    while i < length:
        char = source[i]

        if state is ScanState.CODE:
            pair = source[i : i + 2]
            if pair == "//":
                state = ScanState.LINE_COMMENT
                states[i] = states[i + 1] = state
                i += 2
                continue
            if pair == "/*":
                state = ScanState.BLOCK_COMMENT
                states[i] = states[i + 1] = state
                i += 2
                continue
            if char in _QUOTE_STATES:
                state = _QUOTE_STATES[char]
                closing_quote = char
                states[i] = state
                i += 1
                continue
            i += 1
            continue

        if state is ScanState.LINE_COMMENT:
            if char == "\n":
                state = ScanState.CODE
            else:
                states[i] = state
            i += 1
            continue

        if state is ScanState.BLOCK_COMMENT:
            states[i] = state
            if source[i : i + 2] == "*/":
                states[i + 1] = state
                state = ScanState.CODE
                i += 2
                continue
            i += 1
            continue

        # Inside a string literal
        states[i] = state
        if char == "\\" and i + 1 < length:
            states[i + 1] = state
            i += 2
            continue
        if char == closing_quote:
            state = ScanState.CODE
        i += 1

    return states


def is_code(state: ScanState) -> bool:
    return state is ScanState.CODE


def is_comment(state: ScanState) -> bool:
    return state in _COMMENT_STATES


def is_string(state: ScanState) -> bool:
    return state in _STRING_STATES


def strip_comments(source: str, states: list[ScanState] | None = None) -> str:
    """Blank out comment characters, leaving code and strings untouched.

    Comment characters become spaces and newlines are kept, so the result
    has the same length and line structure as ``source``.  Indices found
    in the stripped text are valid in the original.
    """
    if states is None:
        states = scan(source)
    return "".join(
        " " if is_comment(state) and char != "\n" else char
        for char, state in zip(source, states, strict=True)
    )
