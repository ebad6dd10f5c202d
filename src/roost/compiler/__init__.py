"""Route compiler — sites in, Caddy route trees out.

One-shot and side-effect free. Every lookup that depends on deployment
settings (platform hostname, content directories, route ids, auth and
redirect handlers, 404 pages) goes through an injected ``Collaborators``
bundle, so compiling is a pure function of (site, branch, collaborators).

Usage::

    from roost.compiler.collaborators import Collaborators
    from roost.compiler.site import site_routes

    collaborators = Collaborators.from_config(config)
    routes = site_routes(site, collaborators)
"""
