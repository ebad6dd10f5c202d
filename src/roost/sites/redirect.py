"""Branch redirect rules.

Two kinds, told apart by ``type``:

- ``FileRedirect``: an exact path answered with a file stored alongside
  the branch (e.g. ``/.well-known/security.txt``).
- ``UrlRedirect``: an exact path answered with a ``Location`` header.
"""

from dataclasses import dataclass
from typing import ClassVar, TypeAlias


@dataclass(frozen=True, slots=True)
class FileRedirect:
    type: ClassVar[str] = "file"

    id: str
    path: str
    content_type: str = "text/plain"


@dataclass(frozen=True, slots=True)
class UrlRedirect:
    type: ClassVar[str] = "url"

    path: str
    to: str
    permanent: bool = False

    @property
    def status(self) -> int:
        return 301 if self.permanent else 302


Redirect: TypeAlias = FileRedirect | UrlRedirect
