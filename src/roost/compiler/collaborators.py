"""Lookups and builders the compiler delegates to.

``Collaborators`` is a frozen bundle of plain callables. Build the
defaults from a ``CompilerConfig`` and swap individual entries with
``dataclasses.replace`` (tests do this to pin ids or directories)::

    collaborators = Collaborators.from_config(config)
    collaborators = dataclasses.replace(collaborators, route_id=lambda s, b: b.id)
"""

from collections.abc import Callable
from dataclasses import dataclass
from functools import partial

from roost.caddy.auth import get_auth_handler
from roost.caddy.errors import get_branch_404_error_route
from roost.caddy.ids import get_branch_config_id
from roost.caddy.redirects import get_redirect_route
from roost.caddy.route import Handler, Route
from roost.config import CompilerConfig
from roost.errors import ConfigurationError
from roost.sites.paths import get_branch_dir, get_site_main_domain
from roost.sites.redirect import Redirect
from roost.sites.site import Branch, Site


@dataclass(frozen=True, slots=True)
class Collaborators:
    """Everything the compiler looks up rather than computes."""

    # Site -> platform hostname
    main_domain: Callable[[Site], str]
    # (site id, branch id) -> content directory
    content_root: Callable[[str, str], str]
    # (site, branch) -> route @id, unique per pair
    route_id: Callable[[Site, Branch], str]
    # password -> authentication handler answering 401 on failure
    auth_handler: Callable[[str], Handler]
    # (site, branch, rule) -> terminal route for one redirect
    redirect_route: Callable[[Site, Branch, Redirect], Route]
    # (site, branch, content root) -> error route for 404
    not_found_route: Callable[[Site, Branch, str], Route]

    @classmethod
    def from_config(cls, config: CompilerConfig) -> "Collaborators":
        """Default collaborators bound to *config*.

        Raises ``ConfigurationError`` if ``config.sites_domain`` is empty,
        since every site needs a platform hostname.
        """
        if not config.sites_domain:
            msg = "sites_domain is required (set ROOST_SITES_DOMAIN or --sites-domain)."
            raise ConfigurationError(msg)

        return cls(
            main_domain=partial(get_site_main_domain, sites_domain=config.sites_domain),
            content_root=partial(get_branch_dir, sites_dir=config.sites_dir),
            route_id=get_branch_config_id,
            auth_handler=partial(
                get_auth_handler, username=config.auth_username, realm=config.auth_realm
            ),
            redirect_route=partial(get_redirect_route, sites_dir=config.sites_dir),
            not_found_route=get_branch_404_error_route,
        )
