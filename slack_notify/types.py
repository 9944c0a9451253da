"""
Notification Types

Data structures for commits, commit statuses and lookup outcomes.
"""

from dataclasses import dataclass, replace
from typing import Generic, Optional, TypeVar

T = TypeVar('T')


@dataclass(frozen=True)
class Commit:
    """A GitHub commit as reported by the calling workflow."""

    url: str
    author_username: str
    author_email: str
    commit_message: str

    @property
    def title(self) -> str:
        """First line of the commit message."""
        return self.commit_message.split('\n', 1)[0]

    def with_author_email(self, email: str) -> 'Commit':
        """Return a copy with the author email replaced."""
        return replace(self, author_email=email)


@dataclass(frozen=True)
class CommitStatus:
    """Result of a single pipeline step (GitHub commit status)."""

    name: str
    description: str
    conclusion: str
    url: str

    @property
    def succeeded(self) -> bool:
        return self.conclusion == 'success'

    @property
    def failed(self) -> bool:
        return self.conclusion == 'failure'


@dataclass(frozen=True)
class SlackUser:
    """Slack account matched by email."""

    id: str
    name: str = ''
    real_name: str = ''


@dataclass(frozen=True)
class PostAck:
    """Channel and timestamp Slack returns for a posted message."""

    channel: str
    ts: str


@dataclass(frozen=True)
class LookupResult(Generic[T]):
    """
    Outcome of a best-effort lookup.

    Either ``found`` with a value, or not found with an optional error
    description. Callers decide on the fallback with ``value_or``.
    """

    value: Optional[T] = None
    error: Optional[str] = None

    @classmethod
    def hit(cls, value: T) -> 'LookupResult[T]':
        return cls(value=value)

    @classmethod
    def miss(cls, error: Optional[str] = None) -> 'LookupResult[T]':
        return cls(error=error)

    @property
    def found(self) -> bool:
        return self.value is not None

    def value_or(self, default: T) -> T:
        """Return the looked-up value, or ``default`` when nothing was found."""
        return self.value if self.value is not None else default
