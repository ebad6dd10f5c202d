"""Roost exception hierarchy.

Shared across the site loader, collaborators, and CLI so every module
raises and catches the same types. The route compiler itself raises
nothing: it is a total function of validated site data.
"""

from dataclasses import dataclass


class RoostError(Exception):
    """Base for all roost-specific errors."""


class ConfigurationError(RoostError):
    """Raised when compiler configuration is invalid.

    Typically raised by ``Collaborators.from_config()`` before any
    site is compiled.
    """


@dataclass(frozen=True, slots=True)
class SiteDataError(RoostError):
    """Malformed site or branch data.

    ``location`` is the JSON path of the offending value, e.g.
    ``sites[0].branches[1].slug``.
    """

    location: str
    detail: str

    def __str__(self) -> str:
        return f"{self.location}: {self.detail}"
