"""Roost — compile per-site routing policy into Caddy route trees.

Each site owns branches; every branch compiles to one self-contained
Caddy route with host matching, optional password gating, redirects,
static or single-page-app content, response headers, compression, and
custom plus fallback error responses.

Basic usage::

    from roost import CompilerConfig, Collaborators, caddy_config, read_sites

    config = CompilerConfig(sites_domain="sites.example.com")
    sites = read_sites("sites.json")
    document = caddy_config(sites, Collaborators.from_config(config), config)
"""

__version__ = "0.1.0"
__all__ = [
    "AcmeSslConfiguration",
    "Branch",
    "Collaborators",
    "CompilerConfig",
    "ConfigurationError",
    "Domain",
    "FileRedirect",
    "Header",
    "ManualSslConfiguration",
    "RoostError",
    "Route",
    "Site",
    "SiteDataError",
    "UrlRedirect",
    "branch_route",
    "caddy_config",
    "load_sites",
    "read_sites",
    "site_routes",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import roost`` fast (no argon2 load) while providing a clean
    top-level API.
    """
    if name == "CompilerConfig":
        from roost.config import CompilerConfig

        return CompilerConfig

    if name == "Collaborators":
        from roost.compiler.collaborators import Collaborators

        return Collaborators

    if name in ("Site", "Branch", "Header"):
        from roost.sites import site as _site

        return getattr(_site, name)

    if name in ("Domain", "AcmeSslConfiguration", "ManualSslConfiguration"):
        from roost.sites import domain as _domain

        return getattr(_domain, name)

    if name in ("FileRedirect", "UrlRedirect"):
        from roost.sites import redirect as _redirect

        return getattr(_redirect, name)

    if name in ("load_sites", "read_sites"):
        from roost.sites import loader as _loader

        return getattr(_loader, name)

    if name == "Route":
        from roost.caddy.route import Route

        return Route

    if name == "branch_route":
        from roost.compiler.branch import branch_route

        return branch_route

    if name == "site_routes":
        from roost.compiler.site import site_routes

        return site_routes

    if name == "caddy_config":
        from roost.caddy.server import caddy_config

        return caddy_config

    if name in ("RoostError", "ConfigurationError", "SiteDataError"):
        from roost import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
