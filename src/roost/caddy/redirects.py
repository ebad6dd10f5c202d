"""Redirect routes — one exact-path route per branch redirect rule.

Each route is terminal: once its path matches, no later route in the
branch subroute (including the content route) runs.
"""

from roost.caddy.route import Route, static_response
from roost.sites.paths import get_branch_redirects_dir
from roost.sites.redirect import FileRedirect, Redirect, UrlRedirect
from roost.sites.site import Branch, Site


def get_redirect_route(site: Site, branch: Branch, redirect: Redirect, *, sites_dir: str) -> Route:
    """Route answering ``redirect.path`` for *branch*."""
    match redirect:
        case FileRedirect():
            return _file_redirect_route(site, branch, redirect, sites_dir)
        case UrlRedirect():
            return _url_redirect_route(redirect)


def _file_redirect_route(site: Site, branch: Branch, redirect: FileRedirect, sites_dir: str) -> Route:
    # Stored as <redirects dir>/<redirect id>
    return Route(
        match=({"path": [redirect.path]},),
        handle=(
            {"handler": "headers", "response": {"set": {"Content-Type": [redirect.content_type]}}},
            {"handler": "rewrite", "uri": f"/{redirect.id}"},
            {
                "handler": "file_server",
                "root": get_branch_redirects_dir(site.id, branch.id, sites_dir=sites_dir),
            },
        ),
        terminal=True,
    )


def _url_redirect_route(redirect: UrlRedirect) -> Route:
    return Route(
        match=({"path": [redirect.path]},),
        handle=(static_response("", redirect.status, headers={"Location": [redirect.to]}),),
        terminal=True,
    )
