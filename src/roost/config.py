"""Compiler configuration.

CompilerConfig is a frozen dataclass: immutable after creation and IDE-autocompletable.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass

_ENV_PREFIX = "ROOST_"


@dataclass(frozen=True, slots=True)
class CompilerConfig:
    """Compiler configuration. Immutable after creation.

    All fields except ``sites_domain`` have sensible defaults::

        config = CompilerConfig(sites_domain="sites.example.com")
    """

    # Platform hostname; every site is reachable at <site name>.<sites_domain>
    sites_domain: str = ""

    # Directory holding branch content, as seen by the proxy
    sites_dir: str = "/sites"

    # Basic auth for password-protected sites and branches
    auth_username: str = "user"
    auth_realm: str = "restricted"

    # Caddy server block
    listen: tuple[str, ...] = (":80", ":443")
    server_name: str = "sites"

    log_level: str = "warning"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "CompilerConfig":
        """Build a config from ``ROOST_*`` environment variables.

        Unset variables keep their defaults. ``ROOST_LISTEN`` is a comma
        separated list of addresses.
        """
        env = os.environ if environ is None else environ
        overrides: dict[str, object] = {}
        for name in ("sites_domain", "sites_dir", "auth_username", "auth_realm",
                     "server_name", "log_level"):
            value = env.get(_ENV_PREFIX + name.upper())
            if value:
                overrides[name] = value
        listen = env.get(_ENV_PREFIX + "LISTEN")
        if listen:
            overrides["listen"] = tuple(a.strip() for a in listen.split(",") if a.strip())
        return cls(**overrides)  # type: ignore[arg-type]
