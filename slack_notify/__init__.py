"""Slack Notify - Main package.

Posts a Slack message when a GitHub commit status (pipeline step) completes,
mentioning the commit author resolved through the organization's SSO.

Modules:
    types - Data models (dataclasses)
    config - Configuration
    github - GitHub SSO identity lookup
    slack - Slack client and message builders
    monitoring - Sentry error tracking
    pipeline - End-to-end notification flow
    cli - Command-line entry point
"""

from .config import NotifyConfig, GITHUB_ORGANIZATION
from .types import Commit, CommitStatus, LookupResult, PostAck, SlackUser

__all__ = [
    'NotifyConfig',
    'GITHUB_ORGANIZATION',
    'Commit',
    'CommitStatus',
    'LookupResult',
    'PostAck',
    'SlackUser',
]

__version__ = '1.0.0'
