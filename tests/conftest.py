"""Shared pytest fixtures for Slack Notify tests."""

import pytest
from unittest.mock import MagicMock

from slack_notify.config import NotifyConfig
from slack_notify.types import Commit, CommitStatus


@pytest.fixture
def sample_commit():
    """Commit with a multi-line message."""
    return Commit(
        url='https://github.com/masmovil/app/commit/abc123',
        author_username='alice',
        author_email='alice@users.noreply.github.com',
        commit_message='Fix flaky login test\n\nRetry the request once.',
    )


@pytest.fixture
def failed_status():
    return CommitStatus(
        name='ci/build',
        description='Build failed',
        conclusion='failure',
        url='https://ci.example.com/builds/42',
    )


@pytest.fixture
def sso_response():
    """Build a GraphQL response body with the given nameIds as edges."""
    def _build(*name_ids):
        return {
            'data': {
                'organization': {
                    'samlIdentityProvider': {
                        'externalIdentities': {
                            'edges': [
                                {'node': {'samlIdentity': {'nameId': n}}} for n in name_ids
                            ],
                        },
                    },
                },
            },
        }
    return _build


@pytest.fixture
def mock_session():
    """requests.Session stand-in whose post() returns a configurable response."""
    session = MagicMock()
    response = MagicMock()
    response.status_code = 200
    session.post.return_value = response
    return session


@pytest.fixture
def mock_web_client():
    """slack_sdk WebClient stand-in."""
    client = MagicMock()
    client.users_lookupByEmail.return_value = {
        'ok': True,
        'user': {'id': 'U123ABC', 'name': 'alice', 'real_name': 'Alice Doe'},
    }
    client.chat_postMessage.return_value = {
        'ok': True,
        'channel': 'C024BE91L',
        'ts': '1503435956.000247',
    }
    return client


@pytest.fixture
def config():
    return NotifyConfig(
        github_access_token='ghp_test',
        slack_access_token='xoxb-test',
        slack_channel_name='#ci-alerts',
        commit_url='u',
        commit_author_username='bob',
        commit_author_email='bob@x.com',
        commit_message='Fix bug\nmore detail',
        status_conclusion='failure',
        status_url='s',
        status_name='build',
        status_description='Build failed',
    )
