"""
Slack Notification Module

Provides the Slack client and the commit status message builders.
"""

from .client import SlackNotifier
from .messages import (
    build_message,
    build_user_mention,
    github_profile_url,
)

__all__ = [
    'SlackNotifier',
    'build_message',
    'build_user_mention',
    'github_profile_url',
]
