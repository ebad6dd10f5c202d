"""Domain and SSL configuration frozen dataclasses."""

from dataclasses import dataclass, field
from typing import ClassVar, TypeAlias


@dataclass(frozen=True, slots=True)
class AcmeSslConfiguration:
    """Certificate issued and renewed automatically via ACME."""

    type: ClassVar[str] = "acme"


@dataclass(frozen=True, slots=True)
class ManualSslConfiguration:
    """Certificate supplied by the site owner as PEM text."""

    type: ClassVar[str] = "manual"

    fullchain: str
    private_key: str = field(repr=False)


SslConfiguration: TypeAlias = AcmeSslConfiguration | ManualSslConfiguration


@dataclass(frozen=True, slots=True)
class Domain:
    """A hostname routed to a site.

    With ``expose_branches`` set, every branch of the site is also
    reachable at ``<branch slug>.<name>``.
    """

    name: str
    expose_branches: bool = False
    ssl_configuration: SslConfiguration = field(default_factory=AcmeSslConfiguration)
