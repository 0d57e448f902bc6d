"""Port: repository cloner — defined by the domain, implemented by infrastructure."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol


class RepoCloner(Protocol):
    """Abstract contract for fetching a repository into a local directory."""

    def clone(self, url: str, directory: Path) -> None:
        """Populate ``directory`` with a working tree of ``url``.

        Failure is signalled by raising; the message is surfaced to the caller.
        """
        ...
