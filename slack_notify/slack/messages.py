"""
Slack Message Builders

Creates the commit status notification text and the author mention.
"""

import logging
from typing import Callable, Optional

from ..config import GITHUB_PROFILE_URL
from ..types import Commit, CommitStatus, LookupResult, SlackUser

logger = logging.getLogger(__name__)

UserLookup = Callable[[str], LookupResult[SlackUser]]

# Wording is fixed; it does not depend on the status conclusion
MESSAGE_TEMPLATE = (
    ':warning: The commit <{commit_url}|"_{title}_"> by {mention} '
    'has failed the pipeline step <{status_url}|{status_name}>'
)


def github_profile_url(username: str) -> str:
    return GITHUB_PROFILE_URL + username


def build_user_mention(slack_user: Optional[SlackUser], github_username: str) -> str:
    """
    Build the author mention.

    Args:
        slack_user: Matched Slack account, if any
        github_username: Commit author's GitHub login

    Returns:
        ``<@ID> ([user](profile))`` when a Slack user matched,
        ``[user](profile)`` otherwise
    """
    link = f"[{github_username}]({github_profile_url(github_username)})"
    if slack_user is not None:
        return f"<@{slack_user.id}> ({link})"
    return link


def build_message(commit: Commit, status: CommitStatus, user_lookup: UserLookup) -> str:
    """
    Build the notification text for a commit status.

    Args:
        commit: Commit with its resolved author email
        status: Pipeline step result
        user_lookup: Callable resolving an email to a Slack user

    Returns:
        Message text ready to post
    """
    try:
        lookup = user_lookup(commit.author_email)
    except Exception as e:
        logger.warning("Error looking up Slack user %s: %s", commit.author_email, e)
        lookup = LookupResult.miss(str(e))

    if not lookup.found:
        logger.info("No Slack user for %s (%s), mentioning by GitHub profile",
                    commit.author_email, lookup.error or "no match")

    mention = build_user_mention(lookup.value, commit.author_username)

    return MESSAGE_TEMPLATE.format(
        commit_url=commit.url,
        title=commit.title,
        mention=mention,
        status_url=status.url,
        status_name=status.name,
    )
