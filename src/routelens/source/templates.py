"""Source templates for generated handler stubs and fallback components.

Rendered with a bare kida Environment.  Output is TypeScript/JSX source,
not HTML, so autoescaping is off.
"""

from functools import cache

from kida import Environment

METHOD_STUB_TEMPLATE = """\
export async function {{ method }}(request: Request) {
  // TODO: Implement {{ method }} handler
  return Response.json({ message: '{{ method }} handler' })
}
"""

LOADING_TEMPLATE = """\
export default function Loading() {
  return <div>Loading...</div>
}
"""

ERROR_TEMPLATE = """\
'use client'

export default function Error({
  error,
  reset,
}: {
  error: Error & { digest?: string }
  reset: () => void
}) {
  return (
    <div>
      <h2>Something went wrong!</h2>
      <button onClick={() => reset()}>Try again</button>
    </div>
  )
}
"""

FALLBACK_TEMPLATES = {
    "loading": LOADING_TEMPLATE,
    "error": ERROR_TEMPLATE,
}


@cache
def _source_env() -> Environment:
    return Environment(autoescape=False)


def render_method_stub(method: str) -> str:
    """Render an async handler exporting ``method``."""
    template = _source_env().from_string(METHOD_STUB_TEMPLATE)
    return template.render({"method": method})


def render_fallback(kind: str) -> str:
    """Render the component source for a ``loading`` or ``error`` fallback.

    Raises:
        KeyError: If no template exists for ``kind``.
    """
    template = _source_env().from_string(FALLBACK_TEMPLATES[kind])
    return template.render({})
