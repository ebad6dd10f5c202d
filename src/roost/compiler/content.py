"""The content route — serves a branch's deployed files.

Handler chain, in order::

    [rewrite]  headers  encode  file_server

``rewrite`` and the file matcher are present only for single-page apps:
the matcher tries the requested path, then ``/index.html``, and the
rewrite points the request at whichever file was found.
"""

from typing import Any

from roost.caddy.route import Handler, Route
from roost.compiler.collaborators import Collaborators
from roost.sites.site import Branch, Header, Site

CACHE_CONTROL = "Cache-Control"
CACHE_CONTROL_VALUE = ("public", "max-age=0", "must-revalidate")
SPA_ENTRY = "/index.html"


def headers_handler(site: Site, branch: Branch) -> Handler:
    """``headers`` handler setting site then branch headers.

    A branch header replaces a site header with the same name, compared
    case-insensitively; the last declaration's spelling is kept.
    ``Cache-Control`` is always the fixed revalidation directive; user
    headers cannot override it. Each value is set as-is, one value per
    header.
    """
    # TODO: make splitting comma-separated values into several entries configurable
    merged: dict[str, Header] = {}
    for header in (*site.headers, *branch.headers):
        key = header.name.lower()
        if key == CACHE_CONTROL.lower():
            continue
        # Re-insert so the entry moves to the position of its last declaration
        merged.pop(key, None)
        merged[key] = header

    values: dict[str, list[str]] = {CACHE_CONTROL: list(CACHE_CONTROL_VALUE)}
    values.update((header.name, [header.value]) for header in merged.values())
    return {"handler": "headers", "response": {"set": values}}


def encode_handler() -> Handler:
    """gzip compression with Caddy's defaults."""
    return {"handler": "encode", "encodings": {"gzip": {}}}


def content_route(site: Site, branch: Branch, collaborators: Collaborators) -> Route:
    """Route serving the files of *branch*."""
    root = collaborators.content_root(site.id, branch.id)
    chain: tuple[Handler, ...] = (
        headers_handler(site, branch),
        encode_handler(),
        {"handler": "file_server", "root": root},
    )
    if not site.spa:
        return Route(handle=chain)

    file_match: dict[str, Any] = {
        "file": {"root": root, "try_files": ["{http.request.uri.path}", SPA_ENTRY]},
    }
    return Route(
        match=(file_match,),
        handle=({"handler": "rewrite", "uri": "{http.matchers.file.relative}"}, *chain),
    )
