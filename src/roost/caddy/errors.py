"""Per-branch error routes.

A branch may ship its own ``/404.html``; when it doesn't, a plaintext
fallback answers instead.
"""

from roost.caddy.route import Route, error_status, static_response, subroute
from roost.sites.site import Branch, Site

NOT_FOUND_PAGE = "/404.html"


def get_branch_404_error_route(site: Site, branch: Branch, root: str) -> Route:
    """Error route for 404s raised while serving *branch*.

    *root* is the branch content directory, the same one its content
    route serves from.
    """
    custom_page = Route(
        match=({"file": {"root": root, "try_files": [NOT_FOUND_PAGE]}},),
        handle=(
            {"handler": "rewrite", "uri": "{http.matchers.file.relative}"},
            {"handler": "file_server", "root": root, "status_code": 404},
        ),
        terminal=True,
    )
    fallback = Route(handle=(static_response("not found", 404),))
    return Route(
        match=(error_status(404),),
        handle=(subroute((custom_page, fallback)),),
    )
