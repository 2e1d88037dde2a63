"""Tests for routelens.source.exports — HTTP verb extraction."""

import pytest

from routelens.source.exports import (
    METHOD_ORDER,
    destructured_names,
    extract_methods,
    normalize_method,
    parse_specifiers,
    sort_methods,
)


class TestExportShapes:
    def test_function_declaration(self) -> None:
        assert extract_methods("export function GET() {}") == ["GET"]

    def test_async_function_declaration(self) -> None:
        assert extract_methods("export async function POST(req) {}") == ["POST"]

    @pytest.mark.parametrize("keyword", ["const", "let", "var"])
    def test_variable_declaration(self, keyword: str) -> None:
        assert extract_methods(f"export {keyword} PUT = handler") == ["PUT"]

    def test_destructured_declaration(self) -> None:
        source = "export const { GET, handler: POST, DELETE = fallback } = handlers"
        assert extract_methods(source) == ["GET", "POST", "DELETE"]

    def test_named_export_list_uses_alias(self) -> None:
        source = "const a = 1\nconst GET = 2\nexport { a as PATCH, GET as renamed }"
        assert extract_methods(source) == ["PATCH"]

    def test_named_export_with_from_clause(self) -> None:
        assert extract_methods("export { GET, HEAD } from './shared'") == ["GET", "HEAD"]

    def test_case_insensitive_names(self) -> None:
        source = "export function get() {}\nexport const Options = 1"
        assert extract_methods(source) == ["GET", "OPTIONS"]

    def test_duplicates_collapse(self) -> None:
        source = "export function GET() {}\nexport { GET }"
        assert extract_methods(source) == ["GET"]

    def test_non_verbs_ignored(self) -> None:
        source = "export const dynamic = 'force-dynamic'\nexport function CONNECT() {}"
        assert extract_methods(source) == []

    def test_canonical_order(self) -> None:
        source = "\n".join(f"export function {m}() {{}}" for m in reversed(METHOD_ORDER))
        assert extract_methods(source) == list(METHOD_ORDER)


class TestCommentsAndStrings:
    def test_line_comment_ignored(self) -> None:
        assert extract_methods("// export function GET() {}\n") == []

    def test_block_comment_ignored(self) -> None:
        assert extract_methods("/*\nexport function GET() {}\n*/") == []

    def test_comment_inside_string_does_not_hide_code(self) -> None:
        source = "const url = 'http://x'; export function GET() {}"
        assert extract_methods(source) == ["GET"]

    def test_export_text_inside_string_ignored(self) -> None:
        source = "const doc = 'export function POST() {}'\nexport function GET() {}"
        assert extract_methods(source) == ["GET"]


class TestHelpers:
    def test_normalize_method(self) -> None:
        assert normalize_method(" patch ") == "PATCH"
        assert normalize_method("TRACE") is None

    def test_sort_methods_unknown_last(self) -> None:
        assert sort_methods(["ZZZ", "DELETE", "GET", "AAA"]) == ["GET", "DELETE", "AAA", "ZZZ"]

    def test_parse_specifiers(self) -> None:
        specifiers = parse_specifiers(" a, b as GET ,, 1bad ")
        assert [(s.name, s.alias, s.exported) for s in specifiers] == [
            ("a", None, "a"),
            ("b", "GET", "GET"),
        ]

    def test_destructured_names(self) -> None:
        assert destructured_names("a, b: c, d = 1, ...rest") == ["a", "c", "d", "rest"]
