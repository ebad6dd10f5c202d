"""Stable ``@id`` values for addressing routes through Caddy's admin API."""

from roost.sites.site import Branch, Site


def get_branch_config_id(site: Site, branch: Branch) -> str:
    """Identifier of the route serving *branch*; unique per (site, branch)."""
    return f"site-{site.id}-branch-{branch.id}"
