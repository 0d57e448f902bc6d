"""Value objects — self-validating domain primitives."""

from __future__ import annotations

from dataclasses import dataclass

from reposcope.domain.exceptions import InvalidRepositoryUrlError


@dataclass(frozen=True, slots=True)
class RepoUrl:
    """Repository URL as handed to the clone collaborator.

    The URL is otherwise opaque: the only thing read from it is the display
    name, the text after the last ``/`` (``https://host/x`` → ``x``).
    """

    raw: str

    @classmethod
    def from_string(cls, url: str) -> RepoUrl:
        """Strip surrounding whitespace and reject blank input."""
        url = url.strip()
        if not url:
            raise InvalidRepositoryUrlError("Repository URL must not be empty.")
        return cls(raw=url)

    @property
    def name(self) -> str:
        return self.raw[self.raw.rfind("/") + 1 :]
