"""Add or remove a single HTTP verb export in a route handler file.

Built on the source scanner rather than a parser: every structural
decision (brace matching, statement ends, export-list boundaries) only
looks at characters the scanner tagged as code, so braces and semicolons
inside strings and comments never confuse it.

Removal tries these shapes in order and excises the first bound to the
verb::

    export async function GET(request) { ... }
    export const GET = ...;
    export { GET, POST }                  # prunes GET from the list
    export const { GET, POST } = handlers # prunes GET from the pattern

File I/O is one full read and one full overwrite.  There is no locking;
concurrent callers editing the same file must serialise themselves.
"""

import re
from collections.abc import Iterator
from pathlib import Path

from routelens.errors import (
    FilesystemError,
    InvalidMethodError,
    MethodExistsError,
    MethodNotFoundError,
    UnlocatableBlockError,
)
from routelens.source.exports import (
    DESTRUCTURED_EXPORT_RE,
    FUNCTION_EXPORT_RE,
    NAMED_EXPORT_RE,
    VARIABLE_EXPORT_RE,
    binding_name,
    extract_methods,
    normalize_method,
    parse_specifier,
)
from routelens.source.scanner import ScanState, scan, strip_comments
from routelens.source.templates import render_method_stub

_OPENERS = {"{": "}", "(": ")", "[": "]"}
_CLOSERS = frozenset(_OPENERS.values())

# A statement does not end at a newline that follows one of these...
_CONTINUES_AFTER = frozenset("=+-*/%&|^!~?:,.<>")
# ...or that precedes one of these.
_CONTINUES_BEFORE = frozenset(".?+-*/%&|^=,:")
# A return type is still open after one of these.
_TYPE_CONTINUES = frozenset({":", "|", "&", ",", "?", ".", "=", "=>"})

_FROM_CLAUSE_RE = re.compile(r"""\s*from\s*(['"])[^'"\n]*\1""")
_EXCESS_NEWLINES_RE = re.compile(r"(?:[ \t]*\r?\n){3,}")


def validate_method(method: str) -> str:
    """Return the canonical uppercase verb or raise :class:`InvalidMethodError`."""
    normalized = normalize_method(method)
    if normalized is None:
        raise InvalidMethodError(method)
    return normalized


# ---------------------------------------------------------------------------
# Text transforms
# ---------------------------------------------------------------------------


def add_method_to_source(source: str, method: str) -> str:
    """Append an async handler stub exporting ``method``.

    Raises:
        InvalidMethodError: ``method`` is not a recognised verb.
        MethodExistsError: an export already binds ``method``.
    """
    verb = validate_method(method)
    if verb in extract_methods(source):
        raise MethodExistsError(verb)

    stub = render_method_stub(verb).strip("\n")
    body = source.rstrip()
    if not body:
        return stub + "\n"
    return f"{body}\n\n{stub}\n"


def remove_method_from_source(source: str, method: str) -> str:
    """Remove the export bound to ``method`` from ``source``.

    Raises:
        InvalidMethodError: ``method`` is not a recognised verb.
        MethodNotFoundError: no supported export shape binds ``method``.
        UnlocatableBlockError: a function export matched but its body
            could not be delimited.
    """
    verb = validate_method(method)
    states = scan(source)
    sanitized = strip_comments(source, states)

    for remover in (
        _remove_function_export,
        _remove_variable_export,
        _remove_from_named_export,
        _remove_from_destructured_export,
    ):
        updated = remover(source, sanitized, states, verb)
        if updated is not None:
            return _tidy(updated)

    raise MethodNotFoundError(verb)


# ---------------------------------------------------------------------------
# File operations
# ---------------------------------------------------------------------------


def add_method(path: str | Path, method: str) -> None:
    """Add a ``method`` handler stub to the handler file at ``path``."""
    validate_method(method)
    file = Path(path)
    source = _read(file)
    try:
        updated = add_method_to_source(source, method)
    except MethodExistsError as exc:
        raise MethodExistsError(exc.method, path=str(file)) from None
    _write(file, updated)


def remove_method(path: str | Path, method: str) -> None:
    """Remove the ``method`` handler from the handler file at ``path``."""
    validate_method(method)
    file = Path(path)
    source = _read(file)
    try:
        updated = remove_method_from_source(source, method)
    except MethodNotFoundError as exc:
        raise MethodNotFoundError(exc.method, path=str(file)) from None
    except UnlocatableBlockError as exc:
        raise UnlocatableBlockError(exc.method, path=str(file)) from None
    _write(file, updated)


def _read(file: Path) -> str:
    try:
        return file.read_text(encoding="utf-8")
    except OSError as exc:
        msg = f"Cannot read {file}: {exc.strerror or exc}"
        raise FilesystemError(msg, path=str(file)) from exc


def _write(file: Path, content: str) -> None:
    try:
        file.write_text(content, encoding="utf-8")
    except OSError as exc:
        msg = f"Cannot write {file}: {exc.strerror or exc}"
        raise FilesystemError(msg, path=str(file)) from exc


# ---------------------------------------------------------------------------
# Shape removers.  Each returns the updated source or None if no match.
# ---------------------------------------------------------------------------


def _code_matches(
    pattern: re.Pattern[str], sanitized: str, states: list[ScanState]
) -> Iterator[re.Match[str]]:
    for match in pattern.finditer(sanitized):
        if states[match.start()] is ScanState.CODE:
            yield match


def _remove_function_export(
    source: str, sanitized: str, states: list[ScanState], verb: str
) -> str | None:
    for match in _code_matches(FUNCTION_EXPORT_RE, sanitized, states):
        if match.group(1).upper() != verb:
            continue
        open_brace = _find_body_start(source, states, match.end())
        if open_brace is None:
            raise UnlocatableBlockError(verb)
        close_brace = _find_matching(source, states, open_brace)
        if close_brace is None:
            raise UnlocatableBlockError(verb)
        end = _consume_trailing_blank(source, close_brace + 1)
        return source[: match.start()] + source[end:]
    return None


def _remove_variable_export(
    source: str, sanitized: str, states: list[ScanState], verb: str
) -> str | None:
    for match in _code_matches(VARIABLE_EXPORT_RE, sanitized, states):
        if match.group(1).upper() != verb:
            continue
        end = _find_statement_end(source, states, match.end())
        end = _consume_trailing_blank(source, end)
        return source[: match.start()] + source[end:]
    return None


def _remove_from_named_export(
    source: str, sanitized: str, states: list[ScanState], verb: str
) -> str | None:
    for match in _code_matches(NAMED_EXPORT_RE, sanitized, states):
        body = match.group(1)
        entries = [part.strip() for part in body.split(",") if part.strip()]
        kept = [entry for entry in entries if not _specifier_binds(entry, verb)]
        if len(kept) == len(entries):
            continue

        if not kept:
            end = match.end()
            if from_clause := _FROM_CLAUSE_RE.match(source, end):
                end = from_clause.end()
            end = _consume_semicolon(source, end)
            end = _consume_trailing_blank(source, end)
            return source[: match.start()] + source[end:]

        open_brace = match.start(1) - 1
        close_brace = match.end(1)
        rewritten = _format_list(body, kept)
        return source[:open_brace] + rewritten + source[close_brace + 1 :]
    return None


def _specifier_binds(entry: str, verb: str) -> bool:
    specifier = parse_specifier(entry)
    if specifier is None:
        return False
    return specifier.name.upper() == verb or (specifier.alias or "").upper() == verb


def _remove_from_destructured_export(
    source: str, sanitized: str, states: list[ScanState], verb: str
) -> str | None:
    for match in _code_matches(DESTRUCTURED_EXPORT_RE, sanitized, states):
        body = match.group(1)
        entries = [part.strip() for part in body.split(",") if part.strip()]
        kept = [entry for entry in entries if (binding_name(entry) or "").upper() != verb]
        if len(kept) == len(entries):
            continue

        if not kept:
            end = _find_statement_end(source, states, match.end())
            end = _consume_trailing_blank(source, end)
            return source[: match.start()] + source[end:]

        open_brace = match.start(1) - 1
        close_brace = match.end(1)
        rewritten = _format_list(body, kept)
        return source[:open_brace] + rewritten + source[close_brace + 1 :]
    return None


# ---------------------------------------------------------------------------
# Scanning helpers
# ---------------------------------------------------------------------------


def _find_body_start(source: str, states: list[ScanState], start: int) -> int | None:
    """Find the ``{`` opening a function body, skipping the parameter list."""
    index = start
    length = len(source)
    while index < length and not (source[index] == "(" and states[index] is ScanState.CODE):
        if states[index] is ScanState.CODE and source[index] in "{;":
            return None
        index += 1
    if index >= length:
        return None
    close_paren = _find_matching(source, states, index)
    if close_paren is None:
        return None
    index = _next_code(source, states, close_paren + 1)
    if index is None:
        return None
    if source[index] == ":":
        return _skip_return_type(source, states, index + 1)
    return index if source[index] == "{" else None


def _next_code(source: str, states: list[ScanState], start: int) -> int | None:
    for index in range(start, len(source)):
        if states[index] is ScanState.CODE and not source[index].isspace():
            return index
    return None


def _skip_return_type(source: str, states: list[ScanState], start: int) -> int | None:
    """Return the index of the body ``{`` after a ``: Type`` annotation.

    A ``{`` at depth zero opens the body only once a type token has been
    seen and the type cannot continue, so ``{ ok: boolean }`` and
    ``A | { b: C }`` stay part of the annotation.
    """
    depth = 0
    previous = ":"
    for index in range(start, len(source)):
        state = states[index]
        char = source[index]
        if state is not ScanState.CODE:
            if state is not ScanState.LINE_COMMENT and state is not ScanState.BLOCK_COMMENT:
                previous = "'"
            continue
        if char.isspace():
            continue
        if char == "{" and depth == 0 and previous not in _TYPE_CONTINUES:
            return index
        if char in "{([<":
            depth += 1
        elif char in "})]":
            depth -= 1
        elif char == ">":
            if previous == "=":
                char = "=>"
            else:
                depth -= 1
        elif char == ";" and depth == 0:
            return None
        previous = char
    return None


def _find_matching(source: str, states: list[ScanState], open_index: int) -> int | None:
    """Return the index of the bracket closing ``source[open_index]``.

    Only code characters move the depth counter.
    """
    opener = source[open_index]
    closer = _OPENERS[opener]
    depth = 0
    for index in range(open_index, len(source)):
        if states[index] is not ScanState.CODE:
            continue
        char = source[index]
        if char == opener:
            depth += 1
        elif char == closer:
            depth -= 1
            if depth == 0:
                return index
    return None


def _find_statement_end(source: str, states: list[ScanState], start: int) -> int:
    """Return the index just past the statement that begins before ``start``.

    The statement ends at a semicolon with every bracket closed, at a
    newline with every bracket closed where the expression cannot
    continue onto the next line, or at end of file.
    """
    depth = 0
    last_code = source[start - 1] if start else ""
    length = len(source)
    for index in range(start, length):
        state = states[index]
        char = source[index]
        if state is ScanState.CODE:
            if char in _OPENERS:
                depth += 1
            elif char in _CLOSERS:
                depth -= 1
                if depth < 0:
                    return index
            elif char == ";" and depth == 0:
                return index + 1
            elif char == "\n" and depth == 0 and last_code:
                if last_code not in _CONTINUES_AFTER and not _continues_on(
                    source, states, index + 1
                ):
                    return index
            if not char.isspace():
                last_code = char
        elif state is not ScanState.LINE_COMMENT and state is not ScanState.BLOCK_COMMENT:
            last_code = char
    return length


def _continues_on(source: str, states: list[ScanState], start: int) -> bool:
    """True if the next code character continues the previous expression."""
    for index in range(start, len(source)):
        if states[index] is not ScanState.CODE or source[index].isspace():
            continue
        return source[index] in _CONTINUES_BEFORE
    return False


def _consume_semicolon(source: str, index: int) -> int:
    probe = index
    while probe < len(source) and source[probe] in " \t":
        probe += 1
    if probe < len(source) and source[probe] == ";":
        return probe + 1
    return index


def _consume_trailing_blank(source: str, index: int) -> int:
    """Consume the rest of the line and at most one following blank line."""
    index = _consume_line_end(source, index)
    if index is None:
        return len(source)
    probe = index
    while probe < len(source) and source[probe] in " \t":
        probe += 1
    blank_end = _consume_line_end(source, probe)
    if blank_end is not None and blank_end > probe:
        return blank_end
    return index


def _consume_line_end(source: str, index: int) -> int | None:
    """Skip spaces and tabs, then one newline.

    Returns ``index`` unchanged if other code follows on the same line,
    or ``None`` at end of file.
    """
    probe = index
    while probe < len(source) and source[probe] in " \t":
        probe += 1
    if probe >= len(source):
        return None
    if source.startswith("\r\n", probe):
        return probe + 2
    if source[probe] == "\n":
        return probe + 1
    return index


def _format_list(original_body: str, entries: list[str]) -> str:
    """Rebuild ``{ ... }`` keeping the original single- or multi-line layout."""
    if "\n" not in original_body:
        return "{ " + ", ".join(entries) + " }"
    first_line = next(
        (line for line in original_body.splitlines() if line.strip()),
        "",
    )
    indent = first_line[: len(first_line) - len(first_line.lstrip())] or "  "
    closing_indent = original_body.rsplit("\n", 1)[-1]
    lines = "".join(f"{indent}{entry},\n" for entry in entries)
    return "{\n" + lines + closing_indent + "}"


def _tidy(source: str) -> str:
    """Collapse runs of blank lines and end with exactly one newline."""
    newline = "\r\n" if "\r\n" in source else "\n"
    collapsed = _EXCESS_NEWLINES_RE.sub(newline * 2, source)
    stripped = collapsed.rstrip()
    if not stripped:
        return ""
    return stripped.lstrip("\r\n") + newline
