"""
Notification Configuration

Loads tokens, commit metadata and status details from environment variables.
"""

import os
from dataclasses import dataclass
from typing import List, Optional

# GitHub organization whose SAML identity provider maps usernames to emails
GITHUB_ORGANIZATION = 'masmovil'

GITHUB_GRAPHQL_URL = 'https://api.github.com/graphql'
GITHUB_PROFILE_URL = 'https://github.com/'

DEFAULT_API_TIMEOUT = 30

# Values the notification flow needs; everything else has a default
REQUIRED_FIELDS = (
    'github_access_token',
    'slack_access_token',
    'slack_channel_name',
    'commit_url',
    'commit_author_username',
    'commit_author_email',
    'commit_message',
    'status_conclusion',
    'status_url',
    'status_name',
    'status_description',
)


@dataclass
class NotifyConfig:
    """Configuration for a single notification run."""

    # Credentials
    github_access_token: str = ''
    slack_access_token: str = ''
    slack_channel_name: str = ''

    # Commit metadata
    commit_url: str = ''
    commit_author_username: str = ''
    commit_author_email: str = ''
    commit_message: str = ''

    # Commit status (pipeline step)
    status_conclusion: str = ''
    status_url: str = ''
    status_name: str = ''
    status_description: str = ''

    # HTTP
    api_timeout: int = DEFAULT_API_TIMEOUT

    # Sentry settings
    sentry_dsn: Optional[str] = None
    sentry_environment: str = 'production'

    @classmethod
    def from_env(cls) -> 'NotifyConfig':
        """Create config from environment variables."""
        values = {name: os.getenv(name.upper(), '') for name in REQUIRED_FIELDS}
        return cls(
            api_timeout=int(os.getenv('API_TIMEOUT', DEFAULT_API_TIMEOUT)),
            sentry_dsn=os.getenv('SENTRY_DSN') or None,
            sentry_environment=os.getenv('SENTRY_ENVIRONMENT', 'production'),
            **values,
        )

    def missing_fields(self) -> List[str]:
        """Names of required settings that are empty, as environment variable names."""
        return [
            name.upper()
            for name in REQUIRED_FIELDS
            if not getattr(self, name)
        ]

    @property
    def sentry_enabled(self) -> bool:
        """Check if Sentry tracking is configured."""
        return bool(self.sentry_dsn)
