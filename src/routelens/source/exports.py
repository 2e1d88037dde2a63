"""HTTP verb export extraction for route handler files.

Comments are blanked with the source scanner, then four export shapes
are searched for names that are HTTP verbs::

    export async function GET(...)       # function declaration
    export const POST = ...              # variable declaration
    export const { PUT, PATCH } = ...    # destructured declaration
    export { handler as DELETE }         # named-export list

Names are compared case-insensitively and reported in canonical order.
"""

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from routelens.source.scanner import ScanState, scan, strip_comments

# Canonical display order; also the recognised verb set
METHOD_ORDER: tuple[str, ...] = ("GET", "HEAD", "OPTIONS", "POST", "PUT", "PATCH", "DELETE")
HTTP_METHODS = frozenset(METHOD_ORDER)

_IDENT = r"[A-Za-z_$][\w$]*"

FUNCTION_EXPORT_RE = re.compile(rf"\bexport\s+(?:async\s+)?function\s*\*?\s*({_IDENT})")
VARIABLE_EXPORT_RE = re.compile(rf"\bexport\s+(?:const|let|var)\s+({_IDENT})")
DESTRUCTURED_EXPORT_RE = re.compile(r"\bexport\s+(?:const|let|var)\s*\{([^}]*)\}\s*=")
NAMED_EXPORT_RE = re.compile(r"\bexport\s*\{([^}]*)\}")

_SPECIFIER_RE = re.compile(rf"^({_IDENT})(?:\s+as\s+({_IDENT}))?$", re.IGNORECASE)
_BINDING_RE = re.compile(rf"^(?:\.\.\.)?({_IDENT})(?:\s*:\s*({_IDENT}))?(?:\s*=.*)?$", re.DOTALL)


@dataclass(frozen=True, slots=True)
class Specifier:
    """One entry of a named-export list.

    ``export { handler as GET }`` has ``name="handler"`` and ``alias="GET"``.
    """

    text: str
    name: str
    alias: str | None = None

    @property
    def exported(self) -> str:
        return self.alias or self.name


def normalize_method(name: str) -> str | None:
    """Uppercase ``name`` and return it if it is a recognised verb."""
    upper = name.strip().upper()
    return upper if upper in HTTP_METHODS else None


def sort_methods(methods: Iterable[str]) -> list[str]:
    """Sort verbs by canonical order; unknown names sort last, alphabetically."""
    order = {method: index for index, method in enumerate(METHOD_ORDER)}
    return sorted(methods, key=lambda m: (order.get(m, len(order)), m))


def parse_specifier(entry: str) -> Specifier | None:
    """Parse one ``name`` or ``name as alias`` entry; anything else is None."""
    text = entry.strip()
    match = _SPECIFIER_RE.match(text)
    if match is None:
        return None
    return Specifier(text=text, name=match.group(1), alias=match.group(2))


def parse_specifiers(body: str) -> list[Specifier]:
    """Parse the inside of ``export { ... }`` into specifiers.

    Entries that are not ``name`` or ``name as alias`` are skipped.
    """
    specifiers: list[Specifier] = []
    for part in body.split(","):
        specifier = parse_specifier(part)
        if specifier is not None:
            specifiers.append(specifier)
    return specifiers


def binding_name(entry: str) -> str | None:
    """Return the local name bound by one destructuring entry.

    ``GET`` and ``GET = fallback`` bind GET; ``handler: POST`` binds POST.
    """
    match = _BINDING_RE.match(entry.strip())
    if match is None:
        return None
    return match.group(2) or match.group(1)


def destructured_names(body: str) -> list[str]:
    """Return the local names bound by an object destructuring pattern."""
    names: list[str] = []
    for part in body.split(","):
        name = binding_name(part)
        if name is not None:
            names.append(name)
    return names


def iter_exported_names(source: str, states: list[ScanState] | None = None) -> Iterator[str]:
    """Yield every name bound by one of the four export shapes.

    Matches that start inside a string literal are ignored.
    """
    if states is None:
        states = scan(source)
    sanitized = strip_comments(source, states)

    def in_code(match: re.Match[str]) -> bool:
        return states[match.start()] is ScanState.CODE

    for match in FUNCTION_EXPORT_RE.finditer(sanitized):
        if in_code(match):
            yield match.group(1)
    for match in VARIABLE_EXPORT_RE.finditer(sanitized):
        if in_code(match):
            yield match.group(1)
    for match in DESTRUCTURED_EXPORT_RE.finditer(sanitized):
        if in_code(match):
            yield from destructured_names(match.group(1))
    for match in NAMED_EXPORT_RE.finditer(sanitized):
        if in_code(match):
            for specifier in parse_specifiers(match.group(1)):
                yield specifier.exported


def extract_methods(source: str) -> list[str]:
    """Return the HTTP verbs exported by a handler source, canonically ordered."""
    found: set[str] = set()
    for name in iter_exported_names(source):
        method = normalize_method(name)
        if method is not None:
            found.add(method)
    return sort_methods(found)
