"""Shared fixtures: a small App Router project on disk."""

from pathlib import Path

import pytest

USERS_ROUTE = """\
const handlers = {
  GET: () => new Response('user GET'),
  PATCH: () => new Response('user PATCH'),
}

export const { GET, PATCH } = handlers

const removeUser = () => new Response('user DELETE')
export { removeUser as DELETE }

const putHandler = () => new Response('user PUT')
export { putHandler as PUT }

// export const POST = () => new Response('user POST')
"""

FILES_ROUTE = """\
export async function GET(request: Request) {
  return Response.json({ files: [] })
}

export const POST = async (request: Request) => {
  return new Response(null, { status: 201 })
}
"""

HELLO_ROUTE = """\
export function GET() {
  return Response.json({ hello: 'world' })
}
"""

OPTIONAL_ROUTE = """\
export const HEAD = () => new Response(null)
"""

PING_ROUTE = """\
/* export function GET() {} */
export async function post() {
  return new Response('pong')
}
"""

EMPTY_ROUTE = """\
export const config = { runtime: 'edge' }
export function helper() {}
"""

PAGE = """\
export default function Page() {
  return <main />
}
"""

MOCK_FILES: dict[str, str] = {
    "app/page.tsx": PAGE,
    "app/(group)/loading.tsx": PAGE,
    "app/(group)/error.tsx": PAGE,
    "app/(group)/account/settings/page.tsx": PAGE,
    "app/blog/loading.tsx": PAGE,
    "app/blog/error.tsx": PAGE,
    "app/blog/[slug]/page.tsx": PAGE,
    "app/docs/[...segments]/page.tsx": PAGE,
    "app/docs/[...segments]/loading.tsx": PAGE,
    "app/docs/[...segments]/error.tsx": PAGE,
    "app/guide/[[...section]]/page.tsx": PAGE,
    "app/api/users/[id]/route.ts": USERS_ROUTE,
    "app/api/files/[...parts]/route.ts": FILES_ROUTE,
    "app/api/hello/route.ts": HELLO_ROUTE,
    "app/api/optional/[[...segments]]/route.ts": OPTIONAL_ROUTE,
    "app/(marketing)/api/ping/route.ts": PING_ROUTE,
    "app/api/empty/route.ts": EMPTY_ROUTE,
    "app/settings/route.ts": HELLO_ROUTE,
    "app/api/hello/helpers.ts": HELLO_ROUTE,
    "lib/api/route.ts": HELLO_ROUTE,
    "node_modules/pkg/app/api/vendored/route.ts": HELLO_ROUTE,
    "node_modules/pkg/app/page.tsx": PAGE,
}


def write_tree(root: Path, files: dict[str, str]) -> Path:
    """Create ``files`` (relative path -> content) under ``root``."""
    for relative, content in files.items():
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    return root


@pytest.fixture
def mock_app(tmp_path: Path) -> Path:
    """A project root containing the mock App Router tree."""
    return write_tree(tmp_path / "mock-next-app", MOCK_FILES)


@pytest.fixture
def make_tree():
    """Return :func:`write_tree` for tests that build their own layout."""
    return write_tree
