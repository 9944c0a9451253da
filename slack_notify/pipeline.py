"""
Commit Status Notification Flow

Resolves the author email, builds the message and posts it, in sequence.
Every stage is best-effort: failures degrade the message, never abort it.
"""

import logging
from dataclasses import dataclass
from typing import Optional

import requests

from .config import NotifyConfig
from .github import resolve_author_email
from .monitoring import add_breadcrumb
from .slack import SlackNotifier, build_message
from .types import Commit, CommitStatus, PostAck

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NotifyOutcome:
    """What a notification run produced."""

    commit: Commit
    status: CommitStatus
    message: str
    ack: Optional[PostAck] = None

    @property
    def sent(self) -> bool:
        return self.ack is not None


def commit_from_config(config: NotifyConfig) -> Commit:
    return Commit(
        url=config.commit_url,
        author_username=config.commit_author_username,
        author_email=config.commit_author_email,
        commit_message=config.commit_message,
    )


def status_from_config(config: NotifyConfig) -> CommitStatus:
    return CommitStatus(
        name=config.status_name,
        description=config.status_description,
        conclusion=config.status_conclusion,
        url=config.status_url,
    )


def notify_commit_status(
    config: Optional[NotifyConfig] = None,
    session: Optional[requests.Session] = None,
    notifier: Optional[SlackNotifier] = None,
) -> NotifyOutcome:
    """
    Run the full notification flow.

    Args:
        config: Loaded NotifyConfig (read from the environment if omitted)
        session: Optional requests session for the GitHub API
        notifier: Optional SlackNotifier (built from the Slack token otherwise)

    Returns:
        NotifyOutcome with the resolved commit, the text and the post ack
    """
    config = config or NotifyConfig.from_env()
    notifier = notifier or SlackNotifier(config.slack_access_token, timeout=config.api_timeout)
    status = status_from_config(config)
    commit = commit_from_config(config)

    add_breadcrumb("Resolving author SSO email", category="github",
                   data={"username": commit.author_username})
    email = resolve_author_email(
        commit.author_username,
        commit.author_email,
        config.github_access_token,
        session=session,
        timeout=config.api_timeout,
    )
    commit = commit.with_author_email(email)

    add_breadcrumb("Building message", category="slack")
    message = build_message(commit, status, notifier.lookup_user_by_email)
    logger.debug("Message: %s", message)

    add_breadcrumb("Posting message", category="slack",
                   data={"channel": config.slack_channel_name})
    ack = notifier.send(config.slack_channel_name, message)

    return NotifyOutcome(commit=commit, status=status, message=message, ack=ack)
